"""Data extractors."""

from .auto_extractor import AutoExtractor
from .review_extractor import ReviewExtractor
from .selector_extractor import SelectorExtractor

__all__ = ['AutoExtractor', 'ReviewExtractor', 'SelectorExtractor']
