"""Hydra IriTemplate wrapper for an authority's search URL.

Only the shape of the template is read here. Expanding the template into a
request URL is the query builder's job.
"""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass
from typing import Any, Optional

from lod_authority.raw import as_mapping, warn_malformed

DEFAULT_VARIABLE_REPRESENTATION = "BasicRepresentation"


@dataclass(frozen=True)
class VariableMapping:
    """A single IriTemplateMapping entry.

    Attributes:
        variable: Template variable name, e.g. 'query'
        property: Hydra property describing the value, e.g. 'hydra:freetextQuery'
        required: Whether the caller must supply a value
        default: Value used when an optional variable is not supplied
    """

    variable: str
    property: Optional[str] = None
    required: bool = False
    default: Any = None


@dataclass(frozen=True)
class UrlConfig:
    """Parsed ``url`` block: template string plus its variable mappings."""

    template: Optional[str] = None
    variable_representation: str = DEFAULT_VARIABLE_REPRESENTATION
    mapping: tuple[VariableMapping, ...] = ()

    def __post_init__(self):
        object.__setattr__(self, "mapping", tuple(self.mapping))

    @classmethod
    def from_config(cls, url: Mapping) -> 'UrlConfig':
        template = url.get("template")
        if template is not None and not isinstance(template, str):
            warn_malformed("url.template", "a string", template)
            template = None

        raw_mapping = url.get("mapping")
        if raw_mapping is not None and not isinstance(raw_mapping, list):
            warn_malformed("url.mapping", "a list", raw_mapping)
            raw_mapping = None

        mapping = []
        for index, entry in enumerate(raw_mapping or []):
            entry = as_mapping(entry, f"url.mapping[{index}]")
            if entry is None or not isinstance(entry.get("variable"), str):
                continue
            mapping.append(VariableMapping(
                variable=entry["variable"],
                property=entry.get("property"),
                required=entry.get("required") is True,
                default=entry.get("default"),
            ))

        return cls(
            template=template,
            variable_representation=url.get("variableRepresentation") or DEFAULT_VARIABLE_REPRESENTATION,
            mapping=mapping,
        )

    @property
    def variables(self) -> list[str]:
        return [m.variable for m in self.mapping]

    @property
    def required_variables(self) -> list[str]:
        return [m.variable for m in self.mapping if m.required]

    @property
    def defaults(self) -> dict[str, Any]:
        """Default values of optional variables that declare one."""
        return {m.variable: m.default for m in self.mapping if m.default is not None}

    def variable_mapping(self, variable: str) -> Optional[VariableMapping]:
        for m in self.mapping:
            if m.variable == variable:
                return m
        return None
