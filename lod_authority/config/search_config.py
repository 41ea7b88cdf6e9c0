"""Search configuration for a linked-data authority.

Wraps the ``search`` block of an authority document::

    {
        "url": {"@type": "IriTemplate", "template": "...", "mapping": [...]},
        "qa_replacement_patterns": {"query": "query", "subauth": "subauth"},
        "language": ["en", "fr", "de"],
        "results": {"id_predicate": "...", "label_predicate": "...",
                    "altlabel_predicate": "...", "sort_predicate": "..."},
        "context": {"groups": {...}, "properties": [...]},
        "subauthorities": {"search_sub1_key": "search_sub1_name"}
    }

Every accessor is a read over the snapshot taken at construction. Missing or
malformed fields give None, False, 0 or an empty mapping; accessors never
raise.
"""

from __future__ import annotations

import copy
from collections.abc import Mapping
from functools import cached_property
from types import MappingProxyType
from typing import Any, Optional

from rdflib import URIRef

from lod_authority.iri_template import UrlConfig
from lod_authority.raw import as_mapping, as_string_mapping, normalize_keys, warn_malformed
from lod_authority.services import language_service
from .context_map import ContextMap
from .results import PredicateMapping


class SearchConfig:
    """Typed, nil-safe view over an authority's ``search`` configuration.

    Args:
        search_config: Raw ``search`` block (None or {} when the authority
            only configures term lookup)

    Example:
        search = SearchConfig(document["search"])
        if search.supports_search and search.supports_sort:
            sort_by = search.results_sort_predicate
    """

    def __init__(self, search_config: Optional[Mapping] = None):
        raw = as_mapping(normalize_keys(search_config), "search")
        self._raw: dict = raw or {}

    def __repr__(self) -> str:
        return f"SearchConfig(keys={sorted(self._raw)})"

    @property
    def raw(self) -> Mapping:
        """Read-only copy of the normalized ``search`` block."""
        return MappingProxyType(copy.deepcopy(self._raw))

    @property
    def supports_search(self) -> bool:
        return bool(self._raw)

    @cached_property
    def url_config(self) -> Optional[UrlConfig]:
        """URL template wrapper, or None if no ``url`` block is configured."""
        url = as_mapping(self._raw.get("url"), "search.url")
        if url is None:
            return None
        return UrlConfig.from_config(url)

    @cached_property
    def replacement_patterns(self) -> Mapping[str, str]:
        """Logical parameter name -> template variable name (empty if absent)."""
        return MappingProxyType(
            as_string_mapping(self._raw.get("qa_replacement_patterns"), "search.qa_replacement_patterns")
        )

    @cached_property
    def _language(self) -> Optional[tuple]:
        lang = self._raw.get("language")
        if lang is None:
            return None
        if isinstance(lang, str):
            return (lang,)
        if isinstance(lang, list) and all(isinstance(tag, str) for tag in lang):
            return tuple(lang)
        warn_malformed("search.language", "a language tag or list of tags", lang)
        return None

    @property
    def language(self) -> Optional[list]:
        """Declared languages for selecting literals, or None if undeclared."""
        if self._language is None:
            return None
        return list(self._language)

    def preferred_language(self, user_language: Any = None) -> list:
        """Languages to use for this search, honoring the user's request first."""
        return language_service.preferred_language(
            user_language=user_language,
            authority_language=self.language,
        )

    # ------------------------------------------------------------------
    # Result predicates
    # ------------------------------------------------------------------

    @cached_property
    def _results(self) -> Optional[dict]:
        return as_mapping(self._raw.get("results"), "search.results")

    @property
    def results(self) -> Optional[Mapping]:
        """The declared ``results`` block, or None if undeclared."""
        if self._results is None:
            return None
        return MappingProxyType(copy.deepcopy(self._results))

    @cached_property
    def predicates(self) -> PredicateMapping:
        """Parsed result predicates (all None when ``results`` is undeclared)."""
        return PredicateMapping.from_config(self._results)

    @property
    def results_id_predicate(self) -> Optional[URIRef]:
        return self.predicates.id_predicate

    @property
    def results_label_predicate(self) -> Optional[URIRef]:
        return self.predicates.label_predicate

    @property
    def results_altlabel_predicate(self) -> Optional[URIRef]:
        return self.predicates.altlabel_predicate

    @property
    def results_sort_predicate(self) -> Optional[URIRef]:
        return self.predicates.sort_predicate

    @property
    def supports_sort(self) -> bool:
        return self.predicates.supports_sort

    # ------------------------------------------------------------------
    # Context
    # ------------------------------------------------------------------

    @cached_property
    def context_map(self) -> Optional[ContextMap]:
        """Parsed ``context`` block, or None if undeclared."""
        context = as_mapping(self._raw.get("context"), "search.context")
        if context is None:
            return None
        return ContextMap.from_config(context)

    @property
    def supports_context(self) -> bool:
        return self.context_map is not None

    # ------------------------------------------------------------------
    # Subauthorities
    # ------------------------------------------------------------------

    @cached_property
    def subauthorities(self) -> Mapping[str, str]:
        """Subauthority key -> name (empty if none are configured)."""
        return MappingProxyType(
            as_string_mapping(self._raw.get("subauthorities"), "search.subauthorities")
        )

    @property
    def has_subauthorities(self) -> bool:
        return self.subauthority_count > 0

    def subauthority(self, subauth_name: str) -> bool:
        """True if ``subauth_name`` is a configured subauthority key (case-sensitive)."""
        return isinstance(subauth_name, str) and subauth_name in self.subauthorities

    @property
    def subauthority_count(self) -> int:
        return len(self.subauthorities)
