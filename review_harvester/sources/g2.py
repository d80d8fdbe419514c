"""G2 (g2.com) source definition."""

from typing import Any, Optional

from ..core.config import ScraperConfig
from .base import ReviewFieldSelectors, SourceDefinition
from .search import probe_urls, query_param, search_listing, slugify


BASE_URL = "https://www.g2.com"

# G2 changes its layout frequently, hence the long candidate lists
REVIEW_CONTAINERS = [
    '.review',
    '.snippet__review',
    '.paper--box.margin-bottom-md',
    '.paper.container-border-bottom.margin-bottom-md',
]

REVIEW_MARKERS = ['.review', '.snippet__reviews-container']

FIELDS = ReviewFieldSelectors(
    title=['.review__title', '.snippet__title', 'h3', '.c-midnight-80.weight-semibold'],
    text=['.review__text', '.review-content', '.snippet__text', '.pre-wrap'],
    date=['.review__date', '.snippet__date', 'time', '.font-small.c-slate-60'],
    rating=['.stars-snapshot', '.snippet__stars', '.stars', '.stars--medium'],
    reviewer_name=[
        '.review__author-name',
        '.reviewer-info__detail-name',
        '.snippet__author',
        '.c-midnight-100.weight-semibold',
    ],
    reviewer_info=[
        '.review__author-company',
        '.reviewer-info__detail-info',
        '.snippet__reviewer-info',
        '.c-slate-60.font-small',
    ],
)

NEXT_PAGE = [
    'a[rel="next"]',
    '.pagination__next:not(.pagination__next--disabled)',
    'button.pagination__next:not([disabled])',
    '.next-page:not(.disabled)',
    'a.c-button--next:not(.disabled)',
]

FIXTURE_REVIEWS = [
    {
        'title': 'Great Team Collaboration Tool',
        'description': (
            'Slack has transformed how our team communicates. The channels keep topics '
            'organized and the integrations with other tools make it a central hub for '
            'notifications.'
        ),
        'date': 'June 15, 2025',
        'rating': 4.5,
        'reviewer': {'name': 'John D.', 'info': 'Mid-Market (51-1000 emp.)'},
        'source': 'G2 (Demo Data)',
    },
    {
        'title': 'Efficient Communication Platform',
        'description': (
            'We switched from email to Slack for internal communications and have seen '
            'dramatic improvements in response time and team coordination.'
        ),
        'date': 'May 22, 2025',
        'rating': 5,
        'reviewer': {'name': 'Sarah M.', 'info': 'Enterprise (>1000 emp.)'},
        'source': 'G2 (Demo Data)',
    },
    {
        'title': 'Good but Has Limitations',
        'description': (
            'Slack works well for quick communications but can get messy with too many '
            'channels. Search functionality could be improved to find older messages '
            'more easily.'
        ),
        'date': 'April 3, 2025',
        'rating': 3.5,
        'reviewer': {'name': 'Robert L.', 'info': 'Small Business (<50 emp.)'},
        'source': 'G2 (Demo Data)',
    },
    {
        'title': 'Essential Remote Working Tool',
        'description': (
            'Since our team went remote, Slack has been crucial for maintaining culture '
            'and communication. The video calls and screen sharing features work well '
            'for quick meetings.'
        ),
        'date': 'March 17, 2025',
        'rating': 4,
        'reviewer': {'name': 'Emily K.', 'info': 'Mid-Market (51-1000 emp.)'},
        'source': 'G2 (Demo Data)',
    },
    {
        'title': 'Great Integrations',
        'description': (
            'The ability to integrate with so many other tools makes Slack incredibly '
            'powerful. We use it with GitHub, Jira, and Google Drive which streamlines '
            'our workflow.'
        ),
        'date': 'February 8, 2025',
        'rating': 5,
        'reviewer': {'name': 'Michael W.', 'info': 'Enterprise (>1000 emp.)'},
        'source': 'G2 (Demo Data)',
    },
]


async def locate(page: Any, company_name: str, config: ScraperConfig) -> Optional[str]:
    """Try the direct product URLs first, then fall back to site search."""
    slug = slugify(company_name)
    found = await probe_urls(
        page,
        [f"{BASE_URL}/products/{slug}/reviews", f"{BASE_URL}/products/{slug}"],
        REVIEW_MARKERS,
        config,
    )
    if found:
        return found

    return await search_listing(
        page,
        f"{BASE_URL}/search?query={query_param(company_name)}",
        company_name,
        card_selector='.product-listing',
        config=config,
        name_selector='.product-listing__product-name',
        link_selector='a[href*="/products/"]',
    )


G2 = SourceDefinition(
    name='g2',
    label='G2',
    locate=locate,
    review_container_selectors=REVIEW_CONTAINERS,
    fields=FIELDS,
    next_page_selectors=NEXT_PAGE,
    fixture_reviews=FIXTURE_REVIEWS,
    fixture_note=(
        "Using demo data as G2 is currently blocking web scrapers. In a production "
        "environment, you would need more advanced scraping techniques or an official API."
    ),
)
