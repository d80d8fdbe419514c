"""Fallback extraction when no selectors are given.

Picks up large text blocks: headings become titles, everything else becomes
a description. Short text (nav links, buttons, labels) is dropped by length.
Nested blocks are not deduplicated; a div wrapping a long paragraph yields
both.
"""

from typing import Any, List

from playwright.async_api import Error as PlaywrightError

from ..core.models import ExtractedItem
from .candidates import safe_query_all, element_text


CANDIDATE_TAGS = "p, div, article, h1, h2, h3"
HEADING_TAGS = {'h1', 'h2', 'h3'}
MIN_BLOCK_LENGTH = 80


class AutoExtractor:
    """Infer content blocks from tag type and text length."""

    def __init__(self, min_length: int = MIN_BLOCK_LENGTH):
        self.min_length = min_length

    async def extract(self, page: Any) -> List[ExtractedItem]:
        """
        Scan candidate tags in document order.

        Returns:
            One item per element whose text is longer than min_length
        """
        elements = await safe_query_all(page, CANDIDATE_TAGS)

        items = []
        for element in elements:
            text = await element_text(element)
            if len(text) <= self.min_length:
                continue

            tag = await self._tag_name(element)
            if tag in HEADING_TAGS:
                items.append(ExtractedItem(title=text, description=""))
            else:
                items.append(ExtractedItem(title="", description=text))

        print(f"  ✓ Auto-extracted {len(items)} text blocks from {len(elements)} candidates")
        return items

    async def _tag_name(self, element: Any) -> str:
        try:
            return (await element.evaluate("el => el.tagName.toLowerCase()")) or ""
        except PlaywrightError:
            return ""
