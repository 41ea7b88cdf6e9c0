"""IRI template configuration (parse only)."""

from .url_config import UrlConfig, VariableMapping

__all__ = [
    "UrlConfig",
    "VariableMapping",
]
