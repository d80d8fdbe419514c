"""Core scraper components.

The scrapers themselves live in `core.pipeline` and `core.site_scraper`;
import them from there.
"""

from .config import ScraperConfig
from .errors import (
    NavigationError,
    NotFoundError,
    ScraperError,
    UnparseableDateError,
    ValidationError,
)
from .models import DateRange, ExtractedItem, FieldSelectorMap, Review, Reviewer, ScrapeResult

__all__ = [
    'ScraperConfig',
    'ExtractedItem',
    'FieldSelectorMap',
    'DateRange',
    'Review',
    'Reviewer',
    'ScrapeResult',
    'ScraperError',
    'ValidationError',
    'NotFoundError',
    'NavigationError',
    'UnparseableDateError',
]
