"""Per-review field extraction driven by a source's selector candidates."""

from typing import Any, List

from playwright.async_api import Error as PlaywrightError

from ..core.models import Review, Reviewer
from ..sources.base import SourceDefinition
from .candidates import (
    element_attribute,
    element_text,
    first_elements,
    first_text,
    parse_rating_text,
    safe_query,
    safe_query_all,
)


NO_TITLE = "No Title"
NO_CONTENT = "No review content available"
ANONYMOUS = "Anonymous"


class ReviewExtractor:
    """Turn the review containers on the current page into Review objects."""

    def __init__(self, source: SourceDefinition):
        self.source = source
        self.fields = source.fields

    async def extract_page(self, page: Any) -> List[Review]:
        """
        Extract every review on the page, in DOM order.

        A review that fails to extract is skipped; the rest of the page is kept.
        """
        selector, containers = await first_elements(page, self.source.review_container_selectors)
        if not containers:
            print("    ⚠ No review containers found on page")
            return []

        print(f"    ✓ Found {len(containers)} reviews with selector: {selector}")

        reviews = []
        for index, container in enumerate(containers, 1):
            try:
                reviews.append(await self.extract_review(container))
            except PlaywrightError as e:
                print(f"    ✗ Skipping review {index}: {e}")
        return reviews

    async def extract_review(self, container: Any) -> Review:
        """Read all fields scoped to one review container."""
        title = await first_text(container, self.fields.title) or NO_TITLE

        return Review(
            title=title,
            description=await self.extract_description(container),
            date=await first_text(container, self.fields.date),
            rating=await self.extract_rating(container),
            reviewer=Reviewer(
                name=await first_text(container, self.fields.reviewer_name) or ANONYMOUS,
                info=await first_text(container, self.fields.reviewer_info),
            ),
            source=self.source.label,
        )

    async def extract_description(self, container: Any) -> str:
        """Main review text followed by pros and cons, separated by blank lines."""
        main = await first_text(container, self.fields.text)
        pros = await first_text(container, self.fields.pros) if self.fields.pros else ""
        cons = await first_text(container, self.fields.cons) if self.fields.cons else ""

        parts = [
            main,
            f"Pros: {pros}" if pros else "",
            f"Cons: {cons}" if cons else "",
        ]
        return "\n\n".join(part for part in parts if part) or NO_CONTENT

    async def extract_rating(self, container: Any) -> float:
        """
        Rating from the first rating element that yields one.

        Tried per element: data-rating attribute, number of filled stars,
        then a number in the element's text. 0 when nothing parses.
        """
        for selector in self.fields.rating:
            element = await safe_query(container, selector)
            if element is None:
                continue

            data_rating = await element_attribute(element, 'data-rating')
            if data_rating:
                try:
                    return float(data_rating)
                except ValueError:
                    pass

            for star_selector in self.fields.filled_star:
                stars = await safe_query_all(element, star_selector)
                if stars:
                    return float(len(stars))

            rating = parse_rating_text(await element_text(element))
            if rating is not None:
                return rating

        return 0.0
