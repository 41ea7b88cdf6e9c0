"""Helpers for reading loosely-typed configuration trees.

Configuration arrives from parsed JSON or YAML documents (or from Python
dicts built in code), so keys may be strings or any other hashable scalar.
Everything is normalized to string keys once, at construction time, and the
readers below never branch on key representation again.
"""

from __future__ import annotations

import warnings
from collections.abc import Mapping
from typing import Any, Optional

from rdflib import URIRef

from lod_authority.errors import ConfigurationWarning


def normalize_keys(value: Any) -> Any:
    """Return a deep copy of ``value`` with every mapping key as ``str``.

    Mappings become plain dicts, lists and tuples become lists, scalars are
    returned unchanged.

    Example:
        normalize_keys({1: {"a": (1, 2)}})  # {'1': {'a': [1, 2]}}
    """
    if isinstance(value, Mapping):
        return {str(k): normalize_keys(v) for k, v in value.items()}
    if isinstance(value, (list, tuple)):
        return [normalize_keys(v) for v in value]
    return value


def warn_malformed(field: str, expected: str, value: Any) -> None:
    """Emit a ConfigurationWarning for a field that is degraded to absent."""
    warnings.warn(
        f"Ignoring malformed '{field}' configuration: expected {expected}, "
        f"got {type(value).__name__}",
        ConfigurationWarning,
        stacklevel=3,
    )


def as_mapping(value: Any, field: str) -> Optional[dict]:
    """Return ``value`` if it is a mapping, else None (warning if present)."""
    if value is None:
        return None
    if isinstance(value, Mapping):
        return value
    warn_malformed(field, "a mapping", value)
    return None


def as_string_mapping(value: Any, field: str) -> dict[str, str]:
    """Return a flat str -> str mapping, dropping entries that are not strings."""
    mapping = as_mapping(value, field)
    if mapping is None:
        return {}
    result = {}
    for key, item in mapping.items():
        if isinstance(item, str):
            result[key] = item
        else:
            warn_malformed(f"{field}.{key}", "a string", item)
    return result


def predicate_uri(mapping: Optional[Mapping], key: str) -> Optional[URIRef]:
    """Return the predicate stored under ``key`` as a URIRef, or None.

    Args:
        mapping: Mapping holding predicate identifiers (may be None)
        key: Key to read, e.g. 'id_predicate'

    Returns:
        URIRef for a string value, None if the key is absent or not a string
    """
    if not mapping:
        return None
    value = mapping.get(key)
    if value is None:
        return None
    if not isinstance(value, str):
        warn_malformed(key, "a predicate URI string", value)
        return None
    return URIRef(value)
