"""Building blocks for the "find the company's review page" step."""

import re
from typing import Any, Optional, Sequence
from urllib.parse import quote, urljoin

from playwright.async_api import Error as PlaywrightError

from ..core.config import ScraperConfig
from ..extractors.candidates import element_text, safe_query, safe_query_all


def slugify(company_name: str) -> str:
    """'Google Workspace' -> 'google-workspace'."""
    return re.sub(r'\s+', '-', company_name.strip().lower())


def query_param(company_name: str) -> str:
    return quote(company_name.strip(), safe='')


def name_matches(company_name: str, candidate: str) -> bool:
    """Case-insensitive substring match of the company name in a listing title."""
    needle = company_name.strip().lower()
    return bool(needle) and needle in (candidate or "").lower()


async def goto_quietly(page: Any, url: str, config: ScraperConfig) -> bool:
    """Navigate, logging instead of raising. Returns False on failure."""
    try:
        await page.goto(url, wait_until="networkidle", timeout=config.navigation_timeout)
        return True
    except PlaywrightError as e:
        print(f"    ⚠ Navigation error for {url}: {e}")
        return False


async def has_any(page: Any, selectors: Sequence[str]) -> bool:
    for selector in selectors:
        if await safe_query(page, selector) is not None:
            return True
    return False


async def probe_urls(
    page: Any,
    urls: Sequence[str],
    marker_selectors: Sequence[str],
    config: ScraperConfig
) -> Optional[str]:
    """
    Visit candidate URLs in order and return the first that shows reviews.

    Args:
        page: Playwright page
        urls: Candidate review page URLs
        marker_selectors: Any of these present means the page has reviews
        config: Scraper configuration (timeouts)

    Returns:
        The matching URL, or None
    """
    for url in urls:
        print(f"  [LOCATE] Trying URL: {url}")
        if not await goto_quietly(page, url, config):
            continue
        if await has_any(page, marker_selectors):
            print(f"  ✓ Found valid page with reviews: {url}")
            return url
    return None


async def search_listing(
    page: Any,
    search_url: str,
    company_name: str,
    card_selector: str,
    config: ScraperConfig,
    name_selector: Optional[str] = None,
    link_selector: Optional[str] = None
) -> Optional[str]:
    """
    Open a search results page and pick the first listing whose title contains
    the company name.

    Args:
        page: Playwright page
        search_url: Search results URL
        company_name: Name to look for
        card_selector: One match per listing
        config: Scraper configuration (timeouts)
        name_selector: Title element inside a card (card text when None)
        link_selector: Link inside a card (the card itself when None)

    Returns:
        Absolute URL of the matched listing's link, or None
    """
    print(f"  [LOCATE] Searching: {search_url}")
    if not await goto_quietly(page, search_url, config):
        return None

    cards = await safe_query_all(page, card_selector)
    for card in cards:
        name_element = await safe_query(card, name_selector) if name_selector else card
        if not name_matches(company_name, await element_text(name_element)):
            continue

        link = await safe_query(card, link_selector) if link_selector else card
        if link is None:
            continue

        href = await link.get_attribute('href')
        if href:
            url = urljoin(page.url, href)
            print(f"  ✓ Matched listing: {url}")
            return url

    return None
