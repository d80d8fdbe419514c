"""Browser automation engine (Playwright)."""

from contextlib import asynccontextmanager
from dataclasses import dataclass, field
from typing import Any, AsyncIterator, Dict

from playwright.async_api import async_playwright


DEFAULT_USER_AGENT = (
    'Mozilla/5.0 (Windows NT 10.0; Win64; x64) AppleWebKit/537.36 '
    '(KHTML, like Gecko) Chrome/115.0.0.0 Safari/537.36'
)

LAUNCH_ARGS = [
    '--no-sandbox',
    '--disable-setuid-sandbox',
    '--disable-features=site-per-process',
]

# Hide the most obvious automation flag
HIDE_WEBDRIVER = """
    Object.defineProperty(navigator, 'webdriver', { get: () => false });
"""

BLOCKED_RESOURCE_TYPES = {'image', 'media', 'font'}


@dataclass
class BrowserConfig:
    """Configuration for browser execution."""
    headless: bool = True
    timeout: int = 60000  # ms
    block_resources: bool = False
    viewport: Dict = field(default_factory=lambda: {'width': 1280, 'height': 800})
    user_agent: str = DEFAULT_USER_AGENT


class PlaywrightEngine:
    """
    Browser automation using Playwright.

    One engine hands out one page per session. A session owns its browser,
    context and page and closes all of them when it ends, whatever happens
    inside it.
    """

    def __init__(self, config: BrowserConfig = None):
        self.config = config or BrowserConfig()

    @asynccontextmanager
    async def session(self) -> AsyncIterator[Any]:
        """
        Launch a browser and yield a ready page.

        Usage:
            async with engine.session() as page:
                await page.goto(url)
        """
        async with async_playwright() as playwright:
            browser = await playwright.chromium.launch(
                headless=self.config.headless,
                args=LAUNCH_ARGS
            )
            try:
                context = await browser.new_context(
                    viewport=self.config.viewport,
                    user_agent=self.config.user_agent,
                    ignore_https_errors=True
                )
                await context.add_init_script(HIDE_WEBDRIVER)

                page = await context.new_page()
                page.set_default_navigation_timeout(self.config.timeout)
                page.set_default_timeout(self.config.timeout)

                if self.config.block_resources:
                    await page.route("**/*", self._block_heavy_resources)

                print("✓ Browser initialized")
                yield page
            finally:
                await browser.close()
                print("✓ Browser cleanup complete")

    @staticmethod
    async def _block_heavy_resources(route):
        if route.request.resource_type in BLOCKED_RESOURCE_TYPES:
            await route.abort()
        else:
            await route.continue_()
