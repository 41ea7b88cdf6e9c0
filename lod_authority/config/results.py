"""Predicate mapping for interpreting search result triples."""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass
from typing import Optional

from rdflib import URIRef

from lod_authority.raw import predicate_uri


@dataclass(frozen=True)
class PredicateMapping:
    """Predicates naming the id, label, altlabel and sort values of a result.

    Each predicate is optional. A missing predicate is None, never a
    placeholder URI.
    """

    id_predicate: Optional[URIRef] = None
    label_predicate: Optional[URIRef] = None
    altlabel_predicate: Optional[URIRef] = None
    sort_predicate: Optional[URIRef] = None

    @classmethod
    def from_config(cls, results: Optional[Mapping]) -> 'PredicateMapping':
        """Build from a normalized ``results`` block (None gives an empty mapping)."""
        return cls(
            id_predicate=predicate_uri(results, "id_predicate"),
            label_predicate=predicate_uri(results, "label_predicate"),
            altlabel_predicate=predicate_uri(results, "altlabel_predicate"),
            sort_predicate=predicate_uri(results, "sort_predicate"),
        )

    @property
    def supports_id(self) -> bool:
        return self.id_predicate is not None

    @property
    def supports_label(self) -> bool:
        return self.label_predicate is not None

    @property
    def supports_altlabel(self) -> bool:
        return self.altlabel_predicate is not None

    @property
    def supports_sort(self) -> bool:
        return self.sort_predicate is not None
