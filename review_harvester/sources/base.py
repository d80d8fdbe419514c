"""Source definitions: everything site-specific about a review platform is data."""

from dataclasses import dataclass, field
from typing import Any, Awaitable, Callable, Dict, List, Optional

from ..core.config import ScraperConfig


# (page, company_name, config) -> review listing URL, or None when not found
LocateStrategy = Callable[[Any, str, ScraperConfig], Awaitable[Optional[str]]]


@dataclass
class ReviewFieldSelectors:
    """Ordered selector candidates for each review field. First match wins."""
    title: List[str]
    text: List[str]
    date: List[str]
    rating: List[str]
    reviewer_name: List[str]
    reviewer_info: List[str]
    pros: List[str] = field(default_factory=list)
    cons: List[str] = field(default_factory=list)
    filled_star: List[str] = field(default_factory=list)


@dataclass
class SourceDefinition:
    """
    One review platform.

    Attributes:
        name: Request key ('g2', 'capterra', 'trustradius')
        label: Value written to Review.source
        locate: Resolves a company name to the review listing URL
        review_container_selectors: Candidates for one review block per match
        fields: Per-review field selector candidates
        next_page_selectors: Candidates for the "next page" control
        fixture_reviews: Demo reviews served when fixture mode is on
        fixture_note: Explanation attached to fixture results
    """
    name: str
    label: str
    locate: LocateStrategy
    review_container_selectors: List[str]
    fields: ReviewFieldSelectors
    next_page_selectors: List[str]
    fixture_reviews: List[Dict[str, Any]] = field(default_factory=list)
    fixture_note: Optional[str] = None

    @property
    def has_fixtures(self) -> bool:
        return bool(self.fixture_reviews)
