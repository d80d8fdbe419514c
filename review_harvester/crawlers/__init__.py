"""Paginated crawling for review listings."""

from .paginator import PaginatedExtractionDriver

__all__ = ['PaginatedExtractionDriver']
