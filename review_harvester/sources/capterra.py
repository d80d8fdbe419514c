"""Capterra (capterra.com) source definition."""

from typing import Any, Optional

from ..core.config import ScraperConfig
from .base import ReviewFieldSelectors, SourceDefinition
from .search import query_param, search_listing


BASE_URL = "https://www.capterra.com"

FIELDS = ReviewFieldSelectors(
    title=['.review__title'],
    text=['.review-content', '.review__text'],
    pros=['.review-pros'],
    cons=['.review-cons'],
    date=['.review-date', '.review__date'],
    rating=['[data-rating]', '.stars-container'],
    filled_star=['.star-filled'],
    reviewer_name=['.reviewer-name', '.review__author'],
    reviewer_info=['.reviewer-info', '.review__author-company'],
)


async def locate(page: Any, company_name: str, config: ScraperConfig) -> Optional[str]:
    """Search, then follow the reviews link of the first product card that matches."""
    return await search_listing(
        page,
        f"{BASE_URL}/search/?search={query_param(company_name)}",
        company_name,
        card_selector='.product-card',
        config=config,
        name_selector='.product-card__product-name',
        link_selector='a[href*="reviews"]',
    )


CAPTERRA = SourceDefinition(
    name='capterra',
    label='Capterra',
    locate=locate,
    review_container_selectors=['.review'],
    fields=FIELDS,
    next_page_selectors=['.next-page:not(.disabled)', 'a[rel="next"]:not(.disabled)'],
)
