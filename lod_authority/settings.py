"""Process-wide settings.

Values come from an explicit override, then the environment, then built-in
defaults:

- LOD_AUTHORITY_DEFAULT_LANGUAGE: comma-separated language tags (default "en")
- LOD_AUTHORITY_CONFIG_DIR: directory holding authority documents
"""

from __future__ import annotations

import os
from pathlib import Path
from typing import Optional, Sequence, Union

DEFAULT_LANGUAGE_ENV = "LOD_AUTHORITY_DEFAULT_LANGUAGE"
CONFIG_DIR_ENV = "LOD_AUTHORITY_CONFIG_DIR"

DEFAULT_LANGUAGE = "en"
DEFAULT_CONFIG_DIR = Path("config") / "authorities" / "linked_data"

_default_language_override: Optional[list[str]] = None


def set_default_language(language: Union[str, Sequence[str]]) -> None:
    """Install a process-wide default language (tag or ordered tags)."""
    global _default_language_override
    if isinstance(language, str):
        _default_language_override = [language]
    else:
        _default_language_override = list(language)


def reset_default_language() -> None:
    """Drop any override installed with set_default_language()."""
    global _default_language_override
    _default_language_override = None


def default_language() -> list[str]:
    """Return the system default language sequence, e.g. ['en']."""
    if _default_language_override:
        return list(_default_language_override)
    env_value = os.environ.get(DEFAULT_LANGUAGE_ENV, "")
    tags = [tag.strip() for tag in env_value.split(",") if tag.strip()]
    return tags or [DEFAULT_LANGUAGE]


def config_dir() -> Path:
    """Return the directory searched for authority configuration documents."""
    env_value = os.environ.get(CONFIG_DIR_ENV)
    if env_value:
        return Path(env_value)
    return DEFAULT_CONFIG_DIR
