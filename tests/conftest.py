import pytest

from review_harvester.core.config import ScraperConfig
from review_harvester.utils.date_utils import DateNormalizer

from fakes import REFERENCE_NOW, FakeEngine, FakePage, load_fixture


@pytest.fixture
def config(tmp_path):
    return ScraperConfig(
        max_pages=10,
        navigation_timeout=1000,
        selector_timeout=100,
        page_settle_ms=0,
        scroll_passes=1,
        scroll_delay_ms=0,
        output_dir=str(tmp_path / "output"),
        use_fixture_data=False,
        debug_screenshots=False,
    )


@pytest.fixture
def normalizer():
    return DateNormalizer(now=lambda: REFERENCE_NOW)


@pytest.fixture
def g2_slack_pages():
    return {
        "https://www.g2.com/products/slack/reviews": load_fixture("g2", "slack_reviews_page1.html"),
        "https://www.g2.com/products/slack/reviews?page=2": load_fixture("g2", "slack_reviews_page2.html"),
    }


@pytest.fixture
def g2_engine(g2_slack_pages):
    return FakeEngine(FakePage(g2_slack_pages))
