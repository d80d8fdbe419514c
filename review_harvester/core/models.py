"""Data models shared by extractors, the pagination driver and the API."""

from dataclasses import dataclass, field, asdict
from datetime import datetime
from typing import Dict, List, Optional, Any


FIELD_NAMES = ('root', 'title', 'description', 'date', 'rating', 'image')


@dataclass
class ExtractedItem:
    """One item produced by generic (selector or auto) extraction."""
    title: str = ""
    description: str = ""
    date: Optional[str] = None
    rating: Optional[str] = None

    def has_content(self) -> bool:
        return bool(self.title or self.description)

    def to_dict(self) -> Dict[str, str]:
        data = {'title': self.title, 'description': self.description}
        if self.date is not None:
            data['date'] = self.date
        if self.rating is not None:
            data['rating'] = self.rating
        return data


@dataclass(frozen=True)
class Reviewer:
    name: str = "Anonymous"
    info: str = ""


@dataclass(frozen=True)
class Review:
    """A single review as found on the page. Dates stay in the site's own format."""
    title: str
    description: str
    date: str
    rating: float
    reviewer: Reviewer
    source: str

    def to_dict(self) -> Dict[str, Any]:
        return asdict(self)

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> 'Review':
        reviewer = data.get('reviewer') or {}
        return cls(
            title=data.get('title', ''),
            description=data.get('description', ''),
            date=data.get('date', ''),
            rating=float(data.get('rating') or 0),
            reviewer=Reviewer(
                name=reviewer.get('name', 'Anonymous'),
                info=reviewer.get('info', '')
            ),
            source=data.get('source', '')
        )


@dataclass
class FieldSelectorMap:
    """
    Caller-supplied CSS selectors for generic extraction.

    Every field is optional. A missing root means the whole document is
    treated as a single item.
    """
    root: Optional[str] = None
    title: Optional[str] = None
    description: Optional[str] = None
    date: Optional[str] = None
    rating: Optional[str] = None
    image: Optional[str] = None

    @classmethod
    def from_dict(cls, data: Optional[Dict[str, Any]]) -> 'FieldSelectorMap':
        if not data:
            return cls()
        values = {}
        for name in FIELD_NAMES:
            value = data.get(name)
            values[name] = value if isinstance(value, str) else None
        return cls(**values)

    def get(self, name: str) -> Optional[str]:
        """Return the selector for a field, or None when unset or blank."""
        value = getattr(self, name, None)
        if value and value.strip():
            return value.strip()
        return None

    def is_empty(self) -> bool:
        return not any(self.get(name) for name in FIELD_NAMES)


@dataclass
class DateRange:
    """Inclusive on both ends. start <= end is not enforced."""
    start: datetime
    end: datetime


@dataclass
class ScrapeResult:
    """Structured outcome of a review scrape; failures are values, not exceptions."""
    success: bool
    data: List[Review] = field(default_factory=list)
    error: Optional[str] = None
    note: Optional[str] = None

    @classmethod
    def failure(cls, error: str) -> 'ScrapeResult':
        return cls(success=False, error=error)

    def to_dict(self) -> Dict[str, Any]:
        if not self.success:
            return {'success': False, 'error': self.error}

        result = {
            'success': True,
            'data': [review.to_dict() for review in self.data],
        }
        if self.note:
            result['note'] = self.note
        return result
