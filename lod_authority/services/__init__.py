"""Stateless services shared by authority configuration types."""

from .language_service import (
    TaggedText,
    preferred_language,
    literal_has_language_marker,
)

__all__ = [
    "TaggedText",
    "preferred_language",
    "literal_has_language_marker",
]
