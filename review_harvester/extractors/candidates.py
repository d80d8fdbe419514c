"""First-match lookups over ordered selector candidates.

Review sites change their markup often, so each field is described by a list
of selectors tried in order. These helpers are shared by the review field
extraction and the next-page detection.

`scope` is anything with Playwright's query API: a Page or an ElementHandle.
Queries are always relative to the scope, so one review container can never
read fields from a sibling.
"""

import re
from typing import Any, List, Optional, Sequence, Tuple

from playwright.async_api import Error as PlaywrightError


async def safe_query(scope: Any, selector: str) -> Optional[Any]:
    """query_selector that treats an invalid selector as no match."""
    try:
        return await scope.query_selector(selector)
    except PlaywrightError as e:
        print(f"    ⚠ Selector {selector!r} failed: {e}")
        return None


async def safe_query_all(scope: Any, selector: str) -> List[Any]:
    """query_selector_all that treats an invalid selector as no match."""
    try:
        return await scope.query_selector_all(selector)
    except PlaywrightError as e:
        print(f"    ⚠ Selector {selector!r} failed: {e}")
        return []


async def element_text(element: Any) -> str:
    """Rendered text of an element, stripped. '' when it can't be read."""
    if element is None:
        return ""
    try:
        text = await element.inner_text()
    except PlaywrightError:
        return ""
    return (text or "").strip()


async def element_attribute(element: Any, name: str) -> Optional[str]:
    """get_attribute that reads a detached element as having no attribute."""
    try:
        return await element.get_attribute(name)
    except PlaywrightError:
        return None


async def first_element(scope: Any, candidates: Sequence[str]) -> Tuple[Optional[str], Optional[Any]]:
    """
    Return the first candidate selector that matches an element.

    Returns:
        (selector, element) or (None, None)
    """
    for selector in candidates:
        element = await safe_query(scope, selector)
        if element is not None:
            return selector, element
    return None, None


async def first_elements(scope: Any, candidates: Sequence[str]) -> Tuple[Optional[str], List[Any]]:
    """
    Return all elements of the first candidate selector that matches anything.

    Returns:
        (selector, elements) or (None, [])
    """
    for selector in candidates:
        elements = await safe_query_all(scope, selector)
        if elements:
            return selector, elements
    return None, []


async def first_text(scope: Any, candidates: Sequence[str]) -> str:
    """Text of the first candidate whose element has non-empty text."""
    for selector in candidates:
        element = await safe_query(scope, selector)
        text = await element_text(element)
        if text:
            return text
    return ""


async def is_enabled_control(element: Any) -> bool:
    """False for hidden controls and ones marked disabled by attribute, class or aria state."""
    try:
        if not await element.is_visible():
            return False
    except PlaywrightError:
        return False

    if await element.get_attribute('disabled') is not None:
        return False
    if (await element.get_attribute('aria-disabled') or '').lower() == 'true':
        return False

    classes = (await element.get_attribute('class') or '').split()
    return 'disabled' not in classes and not any(c.endswith('--disabled') for c in classes)


async def first_enabled(scope: Any, candidates: Sequence[str]) -> Tuple[Optional[str], Optional[Any]]:
    """First candidate that matches an enabled control."""
    for selector in candidates:
        element = await safe_query(scope, selector)
        if element is not None and await is_enabled_control(element):
            return selector, element
    return None, None


RATING_PATTERN = re.compile(r'([0-9]\.[0-9]|[0-5])')


def parse_rating_text(text: Optional[str]) -> Optional[float]:
    """Pull a rating like '4.5' or '4' out of text such as '4.5 out of 5 stars'."""
    if not text:
        return None
    match = RATING_PATTERN.search(text)
    if match:
        return float(match.group(0))
    return None
