"""Language preference resolution for selecting literal values.

The effective language list is chosen by precedence:
1. the language requested by the user,
2. the default language declared by the authority,
3. the system default (lod_authority.settings.default_language).

Tags are opaque: no case folding, no deduplication, order preserved.
"""

from __future__ import annotations

from collections.abc import Sequence
from typing import Any, Optional, Protocol, Union, runtime_checkable

from lod_authority import settings
from lod_authority.raw import warn_malformed

LanguageSpec = Union[str, Sequence[str]]


@runtime_checkable
class TaggedText(Protocol):
    """Text value that can carry a language tag (e.g. ``rdflib.Literal``)."""

    language: Optional[str]


def _as_language_list(language: Optional[LanguageSpec]) -> Optional[list]:
    if language is None:
        return None
    if isinstance(language, str):
        return [language] if language else None
    if isinstance(language, Sequence) and not isinstance(language, (bytes, bytearray)):
        return list(language) or None
    warn_malformed("language", "a language tag or list of tags", language)
    return None


def preferred_language(
    user_language: Optional[LanguageSpec] = None,
    authority_language: Optional[LanguageSpec] = None,
) -> list:
    """Resolve the ordered list of languages to use when picking literals.

    Args:
        user_language: Tag or ordered tags requested by the user
        authority_language: Tag or ordered tags declared by the authority

    Returns:
        List of language tags; never empty

    Example:
        preferred_language(None, "fr")          # ['fr']
        preferred_language("de", "fr")          # ['de']
        preferred_language(["de", "fr"], None)  # ['de', 'fr']
        preferred_language()                    # ['en'] (system default)
    """
    return (
        _as_language_list(user_language)
        or _as_language_list(authority_language)
        or settings.default_language()
    )


def literal_has_language_marker(literal: Any) -> bool:
    """True if ``literal`` can carry a language tag and actually has one."""
    if not isinstance(literal, TaggedText):
        return False
    return bool(literal.language)
