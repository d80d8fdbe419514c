"""Browser-based page access.

Components:
    - browser_engine: Playwright browser sessions
"""

from .browser_engine import BrowserConfig, PlaywrightEngine

__all__ = ['BrowserConfig', 'PlaywrightEngine']
