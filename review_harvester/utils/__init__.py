"""Utility modules."""

from .date_utils import DateNormalizer, format_date, is_in_range, parse_date

__all__ = ['DateNormalizer', 'format_date', 'is_in_range', 'parse_date']
