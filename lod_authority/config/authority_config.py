"""Load a linked-data authority configuration document.

Documents live in ``settings.config_dir()`` (or an explicit directory) and
are named after the authority, lower-cased: authority ``LOD_FULL_CONFIG``
reads ``lod_full_config.json``, ``.yml`` or ``.yaml``.
"""

from __future__ import annotations

import json
from collections.abc import Mapping
from functools import cached_property
from pathlib import Path
from typing import Optional

import yaml

from lod_authority import settings
from lod_authority.errors import AuthorityConfigError, AuthorityConfigNotFoundError
from lod_authority.raw import as_mapping, as_string_mapping, normalize_keys
from .search_config import SearchConfig

CONFIG_SUFFIXES = (".json", ".yml", ".yaml")


def find_config_file(authority_name: str, config_dir: Optional[Path | str] = None) -> Path:
    """Locate the document for ``authority_name``.

    Raises:
        AuthorityConfigNotFoundError: If no document with a known suffix exists
    """
    directory = Path(config_dir) if config_dir is not None else settings.config_dir()
    stem = str(authority_name).lower()
    for suffix in CONFIG_SUFFIXES:
        path = directory / f"{stem}{suffix}"
        if path.exists():
            return path
    raise AuthorityConfigNotFoundError(
        f"No configuration for authority {authority_name} in {directory} "
        f"(looked for {stem}{{{','.join(CONFIG_SUFFIXES)}}})"
    )


def load_config_file(path: Path | str) -> dict:
    """Parse a JSON or YAML authority document into a dict.

    Raises:
        AuthorityConfigError: If the document cannot be parsed or is not a mapping
    """
    path = Path(path)
    try:
        text = path.read_text(encoding="utf-8")
        if path.suffix == ".json":
            data = json.loads(text)
        else:
            data = yaml.safe_load(text)
    except (UnicodeDecodeError, json.JSONDecodeError, yaml.YAMLError) as e:
        raise AuthorityConfigError(f"Unable to parse authority configuration {path}: {e}") from e

    if data is None:
        return {}
    if not isinstance(data, Mapping):
        raise AuthorityConfigError(
            f"Authority configuration {path} must be a mapping, got {type(data).__name__}"
        )
    return data


class AuthorityConfig:
    """Top-level configuration of one linked-data authority.

    Args:
        authority_name: Authority name, e.g. 'LOD_FULL_CONFIG'
        config_dir: Directory holding the document (defaults to settings.config_dir())

    Example:
        config = AuthorityConfig("LOC_NAMES")
        if config.supports_search:
            template = config.search.url_config.template
    """

    def __init__(self, authority_name: str, config_dir: Optional[Path | str] = None):
        self.authority_name = authority_name
        self.path = find_config_file(authority_name, config_dir)
        self._raw = normalize_keys(load_config_file(self.path))

    @classmethod
    def from_mapping(cls, authority_name: str, data: Mapping) -> 'AuthorityConfig':
        """Build from an already-parsed document instead of a file."""
        config = cls.__new__(cls)
        config.authority_name = authority_name
        config.path = None
        config._raw = normalize_keys(as_mapping(data, authority_name) or {})
        return config

    def __repr__(self) -> str:
        return f"AuthorityConfig({self.authority_name!r})"

    @property
    def raw(self) -> dict:
        return self._raw

    @cached_property
    def search(self) -> SearchConfig:
        """Search configuration (empty when the document defines no search block)."""
        return SearchConfig(self._raw.get("search"))

    @property
    def term(self) -> dict:
        """Raw ``term`` block; term lookup is configured elsewhere."""
        return as_mapping(self._raw.get("term"), f"{self.authority_name}.term") or {}

    @cached_property
    def prefixes(self) -> dict[str, str]:
        return as_string_mapping(self._raw.get("prefixes"), f"{self.authority_name}.prefixes")

    @property
    def supports_search(self) -> bool:
        return self.search.supports_search

    @property
    def supports_term(self) -> bool:
        return bool(self.term)
