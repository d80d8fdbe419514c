"""
Review Harvester
Structured items and company reviews from rendered web pages.
"""

__version__ = "1.0.0"
