"""Supported review platforms."""

from typing import Dict, List

from ..core.errors import ValidationError
from .base import ReviewFieldSelectors, SourceDefinition
from .capterra import CAPTERRA
from .g2 import G2
from .trustradius import TRUSTRADIUS

SOURCES: Dict[str, SourceDefinition] = {
    source.name: source for source in (G2, CAPTERRA, TRUSTRADIUS)
}


def supported_sources() -> List[str]:
    return list(SOURCES)


def get_source(name: str) -> SourceDefinition:
    """Look up a source by request key (case-insensitive)."""
    source = SOURCES.get((name or "").strip().lower())
    if source is None:
        raise ValidationError(
            f"Invalid source. Choose {', '.join(SOURCES)}"
        )
    return source


__all__ = [
    'SOURCES',
    'SourceDefinition',
    'ReviewFieldSelectors',
    'get_source',
    'supported_sources',
]
