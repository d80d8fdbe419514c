from datetime import datetime

import pytest
from dateutil.relativedelta import relativedelta

from review_harvester.core.errors import UnparseableDateError
from review_harvester.core.models import Review, Reviewer
from review_harvester.utils.date_utils import (
    DateNormalizer,
    format_date,
    is_in_range,
    parse_date,
)

from fakes import REFERENCE_NOW


@pytest.mark.parametrize("raw", [
    "2025-01-01",
    "2024-02-29",
    "2025-06-30T18:45:00",
    "2025-06-30T23:30:00+05:00",
    "2025-12-31T00:00:00Z",
])
def test_iso_dates_round_trip_through_format(raw):
    assert format_date(parse_date(raw)) == raw[:10]


def test_rfc_2822_date():
    parsed = parse_date("Sun, 15 Jun 2025 10:30:00 +0000")
    assert format_date(parsed) == "2025-06-15"


@pytest.mark.parametrize("raw, expected", [
    ("June 15, 2025", datetime(2025, 6, 15)),
    ("Jan 5, 2023", datetime(2023, 1, 5)),
    ("SEPTEMBER 9 2024", datetime(2024, 9, 9)),
    ("sept 30, 2024", datetime(2024, 9, 30)),
    ("Reviewed on Dec 1, 2024", datetime(2024, 12, 1)),
])
def test_month_name_dates(raw, expected):
    assert parse_date(raw) == expected


@pytest.mark.parametrize("raw, expected", [
    ("2023-1-15", datetime(2023, 1, 15)),
    ("2023/01/15", datetime(2023, 1, 15)),
    ("15/01/2023", datetime(2023, 1, 15)),
    ("15-1-2023", datetime(2023, 1, 15)),
])
def test_numeric_dates(raw, expected):
    assert parse_date(raw) == expected


def test_numeric_year_last_is_read_day_first():
    assert parse_date("03/04/2025") == datetime(2025, 4, 3)


def test_relative_days(normalizer):
    assert normalizer.parse("3 days ago") == REFERENCE_NOW - relativedelta(days=3)


@pytest.mark.parametrize("raw, delta", [
    ("1 day ago", relativedelta(days=1)),
    ("2 Weeks ago", relativedelta(weeks=2)),
    ("1 month ago", relativedelta(months=1)),
    ("4 MONTHS AGO", relativedelta(months=4)),
    ("2 years ago", relativedelta(years=2)),
])
def test_relative_units(normalizer, raw, delta):
    assert normalizer.parse(raw) == REFERENCE_NOW - delta


def test_relative_parsing_is_monotonic(normalizer):
    parsed = [normalizer.parse(f"{n} days ago") for n in range(0, 60, 7)]
    assert parsed == sorted(parsed, reverse=True)
    assert len(set(parsed)) == len(parsed)


def test_relative_uses_clock_at_call_time():
    ticks = iter([datetime(2025, 1, 10), datetime(2025, 1, 20)])
    normalizer = DateNormalizer(now=lambda: next(ticks))
    assert normalizer.parse("1 day ago") == datetime(2025, 1, 9)
    assert normalizer.parse("1 day ago") == datetime(2025, 1, 19)


@pytest.mark.parametrize("raw", [None, "", "   ", "Recently", "Smarch 3, 2025", "2025-13-45", "31/02/2024"])
def test_unparseable_returns_none(raw):
    assert parse_date(raw) is None


def test_parse_strict_raises():
    with pytest.raises(UnparseableDateError):
        DateNormalizer().parse_strict("sometime last spring")


def test_is_in_range_inclusive_both_ends():
    start, end = datetime(2025, 1, 1), datetime(2025, 6, 30)
    assert is_in_range(start, start, end)
    assert is_in_range(end, start, end)
    assert is_in_range(datetime(2025, 3, 1), start, end)
    assert not is_in_range(datetime(2024, 12, 31), start, end)
    assert not is_in_range(datetime(2025, 6, 30, 0, 0, 1), start, end)
    assert not is_in_range(None, start, end)


def test_inverted_range_is_empty():
    assert not is_in_range(datetime(2025, 3, 1), datetime(2025, 6, 30), datetime(2025, 1, 1))


def test_format_date_pads():
    assert format_date(datetime(2025, 2, 3)) == "2025-02-03"
    assert format_date(None) == ""


def _review(date):
    return Review(title="t", description="d", date=date, rating=0.0, reviewer=Reviewer(), source="G2")


def test_filter_reviews_drops_unparseable_and_keeps_order(normalizer):
    reviews = [
        _review("May 22, 2025"),
        _review("Recently"),
        _review("2024-12-31"),
        _review("February 8, 2025"),
        _review(""),
    ]
    kept = normalizer.filter_reviews(reviews, datetime(2025, 1, 1), datetime(2025, 6, 30))
    assert [r.date for r in kept] == ["May 22, 2025", "February 8, 2025"]


def test_filter_reviews_reports_skipped_count(normalizer, capsys):
    reviews = [_review("Recently"), _review("May 22, 2025"), _review("")]
    normalizer.filter_reviews(reviews, datetime(2025, 1, 1), datetime(2025, 6, 30))
    assert "ℹ Skipped 2 review(s) with unrecognized dates" in capsys.readouterr().out
