"""TrustRadius (trustradius.com) source definition."""

from typing import Any, Optional

from ..core.config import ScraperConfig
from ..extractors.candidates import safe_query
from .base import ReviewFieldSelectors, SourceDefinition
from .search import goto_quietly, query_param, search_listing, slugify


BASE_URL = "https://www.trustradius.com"

NOT_FOUND_MARKER = '.not-found-message'

FIELDS = ReviewFieldSelectors(
    title=['.review-title, .review-heading'],
    text=['.review-body, .review-content'],
    pros=['.pros-text, .review-pros'],
    cons=['.cons-text, .review-cons'],
    date=['.review-date'],
    rating=['[data-rating], .star-rating'],
    filled_star=['.filled-star'],
    reviewer_name=['.reviewer-name, .user-info'],
    reviewer_info=['.reviewer-details, .reviewer-meta'],
)


def reviews_url(product_url: str) -> str:
    return product_url.split('?')[0].split('#')[0].rstrip('/') + '/reviews'


async def is_not_found(page: Any) -> bool:
    title = await page.title()
    if 'Page Not Found' in (title or ''):
        return True
    return await safe_query(page, NOT_FOUND_MARKER) is not None


async def locate(page: Any, company_name: str, config: ScraperConfig) -> Optional[str]:
    """
    Go to the product page by slug; if TrustRadius shows its not-found page,
    search for the product instead. Reviews live under '<product>/reviews'.
    """
    product_url = f"{BASE_URL}/products/{slugify(company_name)}"
    print(f"  [LOCATE] Trying URL: {product_url}")

    if await goto_quietly(page, product_url, config) and not await is_not_found(page):
        return reviews_url(page.url)

    print(f"  ℹ Direct URL not found for {company_name}, trying search...")
    found = await search_listing(
        page,
        f"{BASE_URL}/search?q={query_param(company_name)}",
        company_name,
        card_selector='.product-card a, .search-result-item a',
        config=config,
    )
    if not found:
        return None
    return reviews_url(found)


TRUSTRADIUS = SourceDefinition(
    name='trustradius',
    label='TrustRadius',
    locate=locate,
    review_container_selectors=['.review-card, .review-container'],
    fields=FIELDS,
    next_page_selectors=['.pagination-next:not(.disabled)', 'a[rel="next"]:not(.disabled)'],
)
