"""Review scraping pipeline: locate, paginate, filter by date.

One request targets one source with one browser session. The session is
always released, and every failure is returned as a ScrapeResult instead of
being raised.
"""

import traceback
from datetime import datetime
from typing import Any, List

from ..crawlers.paginator import PaginatedExtractionDriver
from ..dynamic.browser_engine import BrowserConfig, PlaywrightEngine
from ..sources import get_source
from ..sources.base import SourceDefinition
from ..utils.date_utils import DateNormalizer, format_date
from .config import ScraperConfig
from .errors import ScraperError, ValidationError
from .models import Review, ScrapeResult


class ReviewPipeline:
    """
    Compose the pagination driver and the date filter for one source.

    Args:
        config: Scraper configuration (page cap, timeouts, fixture mode)
        engine: Anything with an async `session()` context manager yielding a
            page. Defaults to a PlaywrightEngine built from config.
        normalizer: Date parser used for range filtering
    """

    def __init__(
        self,
        config: ScraperConfig = None,
        engine: Any = None,
        normalizer: DateNormalizer = None
    ):
        self.config = config or ScraperConfig()
        self.engine = engine or PlaywrightEngine(BrowserConfig(
            headless=self.config.headless,
            timeout=self.config.navigation_timeout
        ))
        self.normalizer = normalizer or DateNormalizer()

    async def run(
        self,
        company_name: str,
        start_date: datetime,
        end_date: datetime,
        source: str
    ) -> ScrapeResult:
        """
        Scrape and filter reviews for a company.

        Args:
            company_name: Company / product to look up
            start_date: Inclusive lower bound
            end_date: Inclusive upper bound (start > end gives no results)
            source: 'g2', 'capterra' or 'trustradius'

        Returns:
            ScrapeResult with the in-range reviews, or the failure reason
        """
        try:
            definition = get_source(source)
        except ValidationError as e:
            return ScrapeResult.failure(str(e))

        print(f"\n{'='*80}")
        print(
            f"Scraping {definition.label} for company: {company_name} "
            f"from {format_date(start_date)} to {format_date(end_date)}"
        )
        print(f"{'='*80}")

        if self.config.use_fixture_data and definition.has_fixtures:
            return self.run_fixtures(definition, start_date, end_date)

        try:
            reviews = await self.collect(definition, company_name)
        except ScraperError as e:
            print(f"✗ {e}")
            return ScrapeResult.failure(str(e))
        except Exception as e:
            print(f"✗ Error scraping {definition.label} reviews for {company_name}: {e}")
            traceback.print_exc()
            return ScrapeResult.failure(str(e))

        filtered = self.normalizer.filter_reviews(reviews, start_date, end_date)
        print(
            f"✓ Found {len(filtered)} reviews for {company_name} on {definition.label} "
            f"within the specified date range ({len(reviews)} scraped)"
        )
        return ScrapeResult(success=True, data=filtered)

    async def collect(self, definition: SourceDefinition, company_name: str) -> List[Review]:
        """Run the pagination driver inside one browser session."""
        driver = PaginatedExtractionDriver(definition, self.config)
        async with self.engine.session() as page:
            return await driver.run(page, company_name)

    def run_fixtures(self, definition: SourceDefinition, start_date: datetime, end_date: datetime) -> ScrapeResult:
        """Serve the source's demo reviews through the same date filter."""
        print(f"ℹ Fixture mode: using demo data for {definition.label}")
        reviews = [Review.from_dict(data) for data in definition.fixture_reviews]
        filtered = self.normalizer.filter_reviews(reviews, start_date, end_date)
        return ScrapeResult(success=True, data=filtered, note=definition.fixture_note)
