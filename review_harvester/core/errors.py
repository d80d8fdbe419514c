"""Error taxonomy for the scraper."""


class ScraperError(Exception):
    """Base class for all scraper errors."""


class ValidationError(ScraperError):
    """Request fields are missing or malformed. Raised before any navigation."""


class NotFoundError(ScraperError):
    """Target company/product could not be resolved on the source."""


class NavigationError(ScraperError):
    """A page load or pagination step failed."""

    def __init__(self, url: str, reason: str):
        self.url = url
        self.reason = reason
        super().__init__(f"Failed to load {url}: {reason}")


class UnparseableDateError(ScraperError):
    """A date string matched none of the known formats."""

    def __init__(self, raw: str):
        self.raw = raw
        super().__init__(f"Unrecognized date format: {raw!r}")
