"""Context map: grouping and display metadata for extended result properties.

A ``context`` block looks like::

    {
        "prefixes": {"madsrdf": "http://www.loc.gov/mads/rdf/v1#"},
        "groups": {
            "dates": {"group_label_i18n": "...dates", "group_label_default": "Dates"}
        },
        "properties": [
            {"group_id": "dates", "property_label_i18n": "...birth_date",
             "property_label_default": "Birth",
             "lpath": "madsrdf:identifiesRWO/madsrdf:birthDate/schema:label",
             "selectable": false, "drillable": false}
        ]
    }

Property order is display order and is kept exactly as declared. A
property's ``group_id`` is not checked against ``groups``; an unknown group
simply has no label (see ContextMap.group_label).
"""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass, field
from types import MappingProxyType
from typing import Callable, Optional

from lod_authority.raw import as_mapping, as_string_mapping, warn_malformed

# translate(i18n_key, default) -> label
Translator = Callable[[str, Optional[str]], str]


def _resolve_label(
    i18n_key: Optional[str],
    default: Optional[str],
    translate: Optional[Translator],
) -> Optional[str]:
    if translate is not None and i18n_key:
        return translate(i18n_key, default)
    return default if default is not None else i18n_key


def _optional_str(entry: Mapping, key: str) -> Optional[str]:
    value = entry.get(key)
    if value is None or isinstance(value, str):
        return value
    warn_malformed(key, "a string", value)
    return None


@dataclass(frozen=True)
class ContextGroup:
    """A named group that context properties can be displayed under."""

    group_id: str
    label_i18n: Optional[str] = None
    label_default: Optional[str] = None

    def label(self, translate: Optional[Translator] = None) -> Optional[str]:
        return _resolve_label(self.label_i18n, self.label_default, translate)


@dataclass(frozen=True)
class ContextProperty:
    """One displayable property, extracted from a result graph by ``lpath``."""

    label_i18n: Optional[str] = None
    label_default: Optional[str] = None
    lpath: Optional[str] = None
    selectable: bool = False
    drillable: bool = False
    group_id: Optional[str] = None

    @classmethod
    def from_config(cls, entry: Mapping) -> 'ContextProperty':
        return cls(
            label_i18n=_optional_str(entry, "property_label_i18n"),
            label_default=_optional_str(entry, "property_label_default"),
            lpath=_optional_str(entry, "lpath"),
            selectable=entry.get("selectable") is True,
            drillable=entry.get("drillable") is True,
            group_id=_optional_str(entry, "group_id"),
        )

    @property
    def group(self) -> bool:
        """True if this property is tied to a group id."""
        return self.group_id is not None

    def label(self, translate: Optional[Translator] = None) -> Optional[str]:
        return _resolve_label(self.label_i18n, self.label_default, translate)


@dataclass(frozen=True)
class ContextMap:
    """Parsed ``context`` block: groups, ordered properties and ldpath prefixes."""

    groups: Mapping[str, ContextGroup] = field(default_factory=dict)
    properties: tuple[ContextProperty, ...] = ()
    prefixes: Mapping[str, str] = field(default_factory=dict)

    def __post_init__(self):
        # Shared by every reader of the cached map, so hold read-only copies.
        object.__setattr__(self, "groups", MappingProxyType(dict(self.groups)))
        object.__setattr__(self, "properties", tuple(self.properties))
        object.__setattr__(self, "prefixes", MappingProxyType(dict(self.prefixes)))

    @classmethod
    def from_config(cls, context: Mapping) -> 'ContextMap':
        """Build from a normalized ``context`` block. Malformed entries are skipped."""
        groups = {}
        for group_id, entry in (as_mapping(context.get("groups"), "context.groups") or {}).items():
            entry = as_mapping(entry, f"context.groups.{group_id}")
            if entry is None:
                continue
            groups[group_id] = ContextGroup(
                group_id=group_id,
                label_i18n=_optional_str(entry, "group_label_i18n"),
                label_default=_optional_str(entry, "group_label_default"),
            )

        properties = []
        raw_properties = context.get("properties")
        if raw_properties is not None and not isinstance(raw_properties, list):
            warn_malformed("context.properties", "a list", raw_properties)
            raw_properties = None
        for index, entry in enumerate(raw_properties or []):
            entry = as_mapping(entry, f"context.properties[{index}]")
            if entry is not None:
                properties.append(ContextProperty.from_config(entry))

        prefixes = as_string_mapping(context.get("prefixes"), "context.prefixes")
        return cls(groups=groups, properties=properties, prefixes=prefixes)

    def group_label(self, group_id: str, translate: Optional[Translator] = None) -> Optional[str]:
        """Label of a declared group, or None if ``group_id`` is not declared."""
        group = self.groups.get(group_id)
        if group is None:
            return None
        return group.label(translate)

    def properties_in_group(self, group_id: Optional[str]) -> list[ContextProperty]:
        """Properties tied to ``group_id`` (None selects ungrouped ones), in declared order."""
        return [prop for prop in self.properties if prop.group_id == group_id]
