"""Paginated review extraction for one source.

Flow for a single company:

    Locate -> PageLoad -> Extract -> Paginate --(next found, below cap)--> PageLoad
                                        |
                                        +--(no next / cap reached / error)--> Done

Locate and the first PageLoad are the only steps allowed to fail the whole
run. Everything after that degrades: a missing container is an empty page, a
broken review is skipped, a failed "next" click ends pagination with what
has been collected so far.
"""

from typing import Any, List, Optional
from urllib.parse import urljoin

from playwright.async_api import Error as PlaywrightError
from playwright.async_api import TimeoutError as PlaywrightTimeoutError

from ..core.config import ScraperConfig
from ..core.errors import NavigationError, NotFoundError
from ..core.models import Review
from ..extractors.candidates import element_text, first_element, first_enabled
from ..extractors.review_extractor import ReviewExtractor
from ..sources.base import SourceDefinition


class PaginatedExtractionDriver:
    """
    Drive one browser page through a source's paginated review listing.

    Args:
        source: Site-specific selectors and locate strategy
        config: Page cap, timeouts, lazy-load settings
    """

    def __init__(self, source: SourceDefinition, config: ScraperConfig):
        self.source = source
        self.config = config
        self.extractor = ReviewExtractor(source)
        self.pages_scraped = 0

    async def run(self, page: Any, company_name: str) -> List[Review]:
        """
        Locate the company's reviews and collect them page by page.

        Raises:
            NotFoundError: The company could not be resolved on this source
            NavigationError: The first review page failed to load
        """
        url = await self.locate(page, company_name)
        await self.open(page, url)

        reviews: List[Review] = []
        self.pages_scraped = 0

        while True:
            self.pages_scraped += 1
            print(f"  [PAGE {self.pages_scraped}] Scraping {self.source.label} for {company_name}")

            try:
                await self.wait_for_reviews(page)
            except PlaywrightError as e:
                if self.pages_scraped == 1:
                    raise NavigationError(page.url, str(e)) from e
                print(f"  ⚠ Page {self.pages_scraped} failed to render, keeping {len(reviews)} reviews: {e}")
                break

            page_reviews = await self.extract_current_page(page)
            reviews.extend(page_reviews)
            print(f"    ✓ {len(page_reviews)} reviews on page ({len(reviews)} total)")

            if self.pages_scraped >= self.config.max_pages:
                print(f"  ℹ Page cap reached ({self.config.max_pages})")
                break

            if not await self.advance(page):
                break

        return reviews

    async def locate(self, page: Any, company_name: str) -> str:
        url = await self.source.locate(page, company_name, self.config)
        if not url:
            print(f"  ✗ Could not find reviews for \"{company_name}\" on {self.source.label}")
            raise NotFoundError(f'Company "{company_name}" not found on {self.source.label}')
        return url

    async def open(self, page: Any, url: str):
        """First page load. Skipped when the locate step already landed there."""
        if page.url == url:
            return

        print(f"  [LOAD] Navigating to reviews page: {url}")
        try:
            await page.goto(url, wait_until="networkidle", timeout=self.config.navigation_timeout)
        except PlaywrightError as e:
            raise NavigationError(url, str(e)) from e

    async def wait_for_reviews(self, page: Any):
        """Wait for any review container; a timeout just means an empty page."""
        selector = ', '.join(self.source.review_container_selectors)
        try:
            await page.wait_for_selector(selector, timeout=self.config.selector_timeout)
        except PlaywrightTimeoutError:
            print("    ⚠ Review elements not found on page")
            return

        await self.trigger_lazy_load(page)

    async def trigger_lazy_load(self, page: Any):
        for _ in range(self.config.scroll_passes):
            await page.evaluate("() => window.scrollBy(0, window.innerHeight)")
            await page.wait_for_timeout(self.config.scroll_delay_ms)

    async def extract_current_page(self, page: Any) -> List[Review]:
        try:
            return await self.extractor.extract_page(page)
        except PlaywrightError as e:
            print(f"    ✗ Extraction failed on page {self.pages_scraped}: {e}")
            return []

    async def find_next_control(self, page: Any) -> Optional[Any]:
        selector, control = await first_enabled(page, self.source.next_page_selectors)
        if control is not None:
            print(f"    ℹ Next page control: {selector}")
        return control

    async def page_fingerprint(self, page: Any):
        """URL plus the first review's text; equal before and after means no new page."""
        _, container = await first_element(page, self.source.review_container_selectors)
        return page.url, await element_text(container)

    async def advance(self, page: Any) -> bool:
        """
        Move to the next page if there is one.

        Returns:
            True when the next page was loaded, False to stop paginating
        """
        try:
            control = await self.find_next_control(page)
            if control is None:
                print("  ℹ No next page")
                return False

            href = await control.get_attribute('href')
            if href and not href.startswith('javascript:') and not href.startswith('#'):
                await page.goto(
                    urljoin(page.url, href),
                    wait_until="networkidle",
                    timeout=self.config.navigation_timeout
                )
            else:
                before = await self.page_fingerprint(page)
                await control.scroll_into_view_if_needed()
                await control.click()
                await page.wait_for_load_state("networkidle", timeout=self.config.navigation_timeout)
                if await self.page_fingerprint(page) == before:
                    print("  ℹ Next page control did not change the page")
                    return False
            return True

        except PlaywrightError as e:
            print(f"  ⚠ Failed to navigate to next page: {e}")
            return False
