"""Linked-data authority configuration: loader, search config and its parts."""

from .results import PredicateMapping
from .context_map import ContextMap, ContextGroup, ContextProperty
from .search_config import SearchConfig
from .authority_config import AuthorityConfig, find_config_file, load_config_file

__all__ = [
    "PredicateMapping",
    "ContextMap",
    "ContextGroup",
    "ContextProperty",
    "SearchConfig",
    "AuthorityConfig",
    "find_config_file",
    "load_config_file",
]
