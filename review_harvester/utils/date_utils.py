"""Date parsing and range checks for review dates.

Review sites print dates in whatever format they like ("June 15, 2025",
"3 weeks ago", "2025-06-15", "15/06/2025"). DateNormalizer turns them into
naive datetimes that can be compared against a requested range.

Parsing is an ordered chain of strategies. Each strategy takes the trimmed
string and returns a datetime or None; the first hit wins:

    1. ISO 8601 / RFC 2822
    2. "<N> <unit> ago"
    3. "<MonthName> <Day>, <Year>"
    4. "YYYY-M-D" / "YYYY/M/D"
    5. "D-M-YYYY" / "D/M/YYYY"  (day first, see note below)

Note:
    Numeric dates with the year last are read day-first. "03/04/2025" is
    4 March under a month-first locale and 3 April here. The page locale is
    not detected.
"""

import re
from datetime import datetime
from email.utils import parsedate_to_datetime
from typing import Callable, Iterable, List, Optional

from dateutil.parser import isoparse
from dateutil.relativedelta import relativedelta

from ..core.errors import UnparseableDateError


DateStrategy = Callable[[str], Optional[datetime]]

MONTHS = {
    'jan': 1, 'january': 1,
    'feb': 2, 'february': 2,
    'mar': 3, 'march': 3,
    'apr': 4, 'april': 4,
    'may': 5,
    'jun': 6, 'june': 6,
    'jul': 7, 'july': 7,
    'aug': 8, 'august': 8,
    'sep': 9, 'sept': 9, 'september': 9,
    'oct': 10, 'october': 10,
    'nov': 11, 'november': 11,
    'dec': 12, 'december': 12,
}

RELATIVE_PATTERN = re.compile(
    r'(\d+)\s+(day|days|week|weeks|month|months|year|years)\s+ago',
    re.IGNORECASE
)
MONTH_NAME_PATTERN = re.compile(r'([A-Za-z]{3,9})\s+(\d{1,2})(?:,|\s)+(\d{4})')
YEAR_FIRST_PATTERN = re.compile(r'(\d{4})[-/](\d{1,2})[-/](\d{1,2})')
YEAR_LAST_PATTERN = re.compile(r'(\d{1,2})[-/](\d{1,2})[-/](\d{4})')


def _naive(value: datetime) -> datetime:
    # Keep the wall clock of the source string so the calendar date survives.
    return value.replace(tzinfo=None)


def _build(year: int, month: int, day: int) -> Optional[datetime]:
    try:
        return datetime(year, month, day)
    except ValueError:
        return None


def parse_native(text: str) -> Optional[datetime]:
    """Strict ISO 8601, then RFC 2822."""
    try:
        return _naive(isoparse(text))
    except (ValueError, OverflowError):
        pass

    try:
        return _naive(parsedate_to_datetime(text))
    except (TypeError, ValueError, IndexError):
        return None


def parse_month_name(text: str) -> Optional[datetime]:
    """'Jan 15, 2023', 'January 15 2023'."""
    match = MONTH_NAME_PATTERN.search(text)
    if not match:
        return None

    month = MONTHS.get(match.group(1).lower())
    if month is None:
        return None
    return _build(int(match.group(3)), month, int(match.group(2)))


def parse_year_first(text: str) -> Optional[datetime]:
    """'2023-1-15', '2023/01/15'."""
    match = YEAR_FIRST_PATTERN.search(text)
    if not match:
        return None
    return _build(int(match.group(1)), int(match.group(2)), int(match.group(3)))


def parse_year_last(text: str) -> Optional[datetime]:
    """'15/01/2023', '15-1-2023'. Day first."""
    match = YEAR_LAST_PATTERN.search(text)
    if not match:
        return None
    return _build(int(match.group(3)), int(match.group(2)), int(match.group(1)))


class DateNormalizer:
    """
    Parse heterogeneous date strings into comparable datetimes.

    Args:
        now: Callable returning the reference instant for relative dates
            ("3 days ago"). Defaults to datetime.now, evaluated per call.
    """

    def __init__(self, now: Callable[[], datetime] = datetime.now):
        self.now = now
        self.strategies: List[DateStrategy] = [
            parse_native,
            self.parse_relative,
            parse_month_name,
            parse_year_first,
            parse_year_last,
        ]

    def parse_relative(self, text: str) -> Optional[datetime]:
        """'2 days ago', '1 Month ago', '3 years ago'."""
        match = RELATIVE_PATTERN.search(text)
        if not match:
            return None

        amount = int(match.group(1))
        unit = match.group(2).lower().rstrip('s')

        deltas = {
            'day': relativedelta(days=amount),
            'week': relativedelta(weeks=amount),
            'month': relativedelta(months=amount),
            'year': relativedelta(years=amount),
        }
        return self.now() - deltas[unit]

    def parse(self, raw: Optional[str]) -> Optional[datetime]:
        """
        Parse a date string.

        Args:
            raw: Date as printed on the page

        Returns:
            Naive datetime, or None if no strategy recognizes it
        """
        if not raw or not raw.strip():
            return None

        text = raw.strip()
        for strategy in self.strategies:
            result = strategy(text)
            if result is not None:
                return result
        return None

    def parse_strict(self, raw: Optional[str]) -> datetime:
        """Like parse(), but raises UnparseableDateError instead of returning None."""
        result = self.parse(raw)
        if result is None:
            raise UnparseableDateError(raw or "")
        return result

    def filter_reviews(self, reviews: Iterable, start: datetime, end: datetime) -> List:
        """
        Keep reviews whose date falls in [start, end], preserving order.

        Reviews with an unparseable date are dropped, never included.
        """
        kept = []
        dropped = 0
        for review in reviews:
            try:
                instant = self.parse_strict(review.date)
            except UnparseableDateError:
                dropped += 1
                continue
            if is_in_range(instant, start, end):
                kept.append(review)

        if dropped:
            print(f"  ℹ Skipped {dropped} review(s) with unrecognized dates")
        return kept


def is_in_range(instant: Optional[datetime], start: Optional[datetime], end: Optional[datetime]) -> bool:
    """Inclusive on both ends."""
    if instant is None or start is None or end is None:
        return False
    return start <= instant <= end


def format_date(instant: Optional[datetime]) -> str:
    """Format as YYYY-MM-DD, or '' for None."""
    if instant is None:
        return ""
    return f"{instant.year:04d}-{instant.month:02d}-{instant.day:02d}"


_default_normalizer = DateNormalizer()


def parse_date(raw: Optional[str]) -> Optional[datetime]:
    """Parse with a module-level normalizer using the wall clock."""
    return _default_normalizer.parse(raw)
