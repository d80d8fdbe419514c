"""Configuration management for the scraper."""

import os
from dataclasses import dataclass, field

from dotenv import load_dotenv

load_dotenv()


def _env_flag(name: str, default: bool) -> bool:
    value = os.getenv(name)
    if value is None:
        return default
    return value.strip().lower() in ('1', 'true', 'yes', 'on')


def _env_int(name: str, default: int) -> int:
    value = os.getenv(name)
    if value and value.strip().isdigit():
        return int(value)
    return default


@dataclass
class ScraperConfig:
    """
    Configuration for the review and page scrapers.

    Environment variables (HEADLESS, MAX_PAGES, OUTPUT_DIR, USE_FIXTURE_DATA,
    DEBUG_SCREENSHOTS) supply defaults when the config is created. Values
    passed to the constructor always win.
    """

    # Pagination
    max_pages: int = field(default_factory=lambda: _env_int("MAX_PAGES", 10))

    # Browser settings
    headless: bool = field(default_factory=lambda: _env_flag("HEADLESS", True))
    navigation_timeout: int = 60000  # ms
    selector_timeout: int = 10000    # ms, wait for review containers
    block_resources: bool = True     # skip images/media/fonts in generic mode

    # Lazy-load handling
    page_settle_ms: int = 2000
    scroll_passes: int = 3
    scroll_delay_ms: int = 1000

    # Auto-extraction
    min_block_length: int = 80

    # Storage settings
    output_dir: str = field(default_factory=lambda: os.getenv("OUTPUT_DIR", "output"))

    # Demo data instead of live scraping (for sources that block scrapers)
    use_fixture_data: bool = field(default_factory=lambda: _env_flag("USE_FIXTURE_DATA", False))

    # Save a screenshot when a scrape comes back empty
    debug_screenshots: bool = field(default_factory=lambda: _env_flag("DEBUG_SCREENSHOTS", False))

    def ensure_output_dir(self) -> str:
        """Create the output directory if it doesn't exist."""
        os.makedirs(self.output_dir, exist_ok=True)
        return self.output_dir

    def validate(self) -> bool:
        """Validate configuration."""
        ok = True
        if self.max_pages < 1:
            print("⚠ Warning: max_pages must be at least 1")
            ok = False
        if self.navigation_timeout <= 0 or self.selector_timeout <= 0:
            print("⚠ Warning: timeouts must be positive")
            ok = False
        if self.min_block_length < 0:
            print("⚠ Warning: min_block_length cannot be negative")
            ok = False
        return ok
