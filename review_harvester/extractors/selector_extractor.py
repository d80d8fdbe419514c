"""Extract structured items from a rendered page with caller-supplied selectors."""

from typing import Any, List

from ..core.models import ExtractedItem, FieldSelectorMap
from .candidates import safe_query, safe_query_all, element_text


DEFAULT_ROOT = "body"
ITEM_FIELDS = ('title', 'description', 'date', 'rating')


class SelectorExtractor:
    """
    Map a FieldSelectorMap onto every element matched by the root selector.

    Each field is looked up inside its own root element only, so fields of
    one item never leak into a sibling. Unset fields and fields with no match
    come back as empty strings.
    """

    async def extract(self, page: Any, selectors: FieldSelectorMap) -> List[ExtractedItem]:
        """
        Extract items from the current page.

        Args:
            page: Playwright page (or any scope with the same query API)
            selectors: Root and field selectors

        Returns:
            Items with a non-empty title or description, in DOM order
        """
        root_selector = selectors.get('root') or DEFAULT_ROOT
        roots = await safe_query_all(page, root_selector)

        if not roots:
            print(f"  ⚠ Warning: Root selector \"{root_selector}\" not found on page.")
            return []

        print(f"  ✓ Found {len(roots)} items matching root selector")

        items = []
        for root in roots:
            item = await self.extract_item(root, selectors)
            if item.has_content():
                items.append(item)

        return items

    async def extract_item(self, root: Any, selectors: FieldSelectorMap) -> ExtractedItem:
        """Read every configured field relative to one root element."""
        values = {}
        for name in ITEM_FIELDS:
            selector = selectors.get(name)
            if not selector:
                values[name] = ""
                continue
            element = await safe_query(root, selector)
            values[name] = await element_text(element)

        return ExtractedItem(**values)
