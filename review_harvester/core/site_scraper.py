"""Generic single-page scraping: caller selectors, or auto-extraction."""

from typing import Any, Dict, List, Optional, Union

from playwright.async_api import Error as PlaywrightError

from ..dynamic.browser_engine import BrowserConfig, PlaywrightEngine
from ..extractors.auto_extractor import AutoExtractor
from ..extractors.selector_extractor import SelectorExtractor
from .config import ScraperConfig
from .errors import NavigationError
from .models import ExtractedItem, FieldSelectorMap


class SiteScraper:
    """
    Scrape one URL into ExtractedItems.

    Uses the SelectorExtractor when any selector is given, otherwise falls
    back to the AutoExtractor.
    """

    def __init__(self, config: ScraperConfig = None, engine: Any = None):
        self.config = config or ScraperConfig()
        self.engine = engine or PlaywrightEngine(BrowserConfig(
            headless=self.config.headless,
            timeout=self.config.navigation_timeout,
            block_resources=self.config.block_resources
        ))
        self.selector_extractor = SelectorExtractor()
        self.auto_extractor = AutoExtractor(min_length=self.config.min_block_length)

    async def scrape(
        self,
        url: str,
        selectors: Optional[Union[FieldSelectorMap, Dict[str, Any]]] = None
    ) -> List[ExtractedItem]:
        """
        Load a page and extract items from it.

        Args:
            url: Page to scrape
            selectors: FieldSelectorMap or a plain dict with the same keys

        Returns:
            Extracted items (possibly empty)

        Raises:
            NavigationError: The page could not be loaded
        """
        if not isinstance(selectors, FieldSelectorMap):
            selectors = FieldSelectorMap.from_dict(selectors)

        async with self.engine.session() as page:
            await self.load(page, url)

            if selectors.is_empty():
                print("  [EXTRACT] No selectors provided, performing auto-extraction.")
                items = await self.auto_extractor.extract(page)
            else:
                print(f"  [EXTRACT] Using selectors: {selectors}")
                items = await self.selector_extractor.extract(page, selectors)

            if not items and self.config.debug_screenshots:
                await self.save_debug_screenshot(page)

        print(f"✓ Found {len(items)} items.")
        return items

    async def load(self, page: Any, url: str):
        """Navigate, let scripts render, then scroll to trigger lazy loading."""
        print(f"  [LOAD] Navigating to {url}...")
        try:
            await page.goto(url, wait_until="networkidle", timeout=self.config.navigation_timeout)
        except PlaywrightError as e:
            raise NavigationError(url, str(e)) from e

        await page.wait_for_timeout(self.config.page_settle_ms)

        print("  [LOAD] Scrolling to load more content...")
        for _ in range(self.config.scroll_passes):
            await page.evaluate("() => window.scrollBy(0, window.innerHeight)")
            await page.wait_for_timeout(self.config.scroll_delay_ms)

    async def save_debug_screenshot(self, page: Any, path: str = "./debug-screenshot.png"):
        try:
            await page.screenshot(path=path)
            print(f"  📸 No results found. Debug screenshot saved to {path}")
        except PlaywrightError as e:
            print(f"  ⚠ Screenshot failed: {e}")
