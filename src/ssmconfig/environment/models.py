"""
Data models shared by environment repositories.

The shapes mirror what a configuration server returns to its clients:
an ``Environment`` holding one ``PropertySource`` per requested profile.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from types import MappingProxyType
from typing import Any, Mapping


@dataclass(frozen=True)
class Parameter:
    """A single parameter as returned by the store."""

    name: str
    value: str


@dataclass(frozen=True)
class PropertySource:
    """A named, flat key/value mapping contributed to an environment."""

    name: str
    source: Mapping[str, str] = field(default_factory=lambda: MappingProxyType({}))

    def to_dict(self) -> dict[str, Any]:
        return {"name": self.name, "source": dict(self.source)}


@dataclass(frozen=True)
class Environment:
    """Resolved configuration for an application and its active profiles."""

    name: str
    profiles: tuple[str, ...]
    label: str | None = None
    version: str | None = None
    state: str | None = None
    property_sources: tuple[PropertySource, ...] = ()

    def to_dict(self) -> dict[str, Any]:
        """Render in the JSON shape served by configuration servers."""
        return {
            "name": self.name,
            "profiles": list(self.profiles),
            "label": self.label,
            "version": self.version,
            "state": self.state,
            "propertySources": [ps.to_dict() for ps in self.property_sources],
        }
