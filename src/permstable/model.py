"""Data model for the permissions resource catalog.

All entities are frozen once built. Ordered collections are tuples and
endpoint parameters are exposed through a read-only mapping, so rendering
is a pure traversal of the catalog.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from types import MappingProxyType
from typing import Iterator, Mapping


@dataclass(frozen=True)
class Action:
    """A named operation permitted on a resource."""

    name: str
    description: str
    examples: tuple[str, ...] = ()

    def __post_init__(self) -> None:
        object.__setattr__(self, "examples", tuple(self.examples))

    def to_dict(self) -> dict:
        return {
            "name": self.name,
            "description": self.description,
            "examples": list(self.examples),
        }


@dataclass(frozen=True)
class Endpoint:
    """An API path plus the parameters the permissions engine consults for it."""

    path: str
    params: Mapping[str, str] = field(default_factory=dict)
    actions: tuple[Action, ...] = ()

    def __post_init__(self) -> None:
        object.__setattr__(self, "params", MappingProxyType(dict(self.params)))
        object.__setattr__(self, "actions", tuple(self.actions))

    def sorted_params(self) -> Iterator[tuple[str, str]]:
        """Yield ``(key, value)`` pairs in ascending key order."""
        for key in sorted(self.params):
            yield key, self.params[key]

    def action_names(self) -> list[str]:
        return [a.name for a in self.actions]

    def to_dict(self) -> dict:
        return {
            "path": self.path,
            "params": dict(self.sorted_params()),
            "actions": [a.to_dict() for a in self.actions],
        }


@dataclass(frozen=True)
class Resource:
    """A resource type, the scopes it lives in, and its endpoints."""

    type: str
    scopes: tuple[str, ...]
    endpoints: tuple[Endpoint, ...]

    def __post_init__(self) -> None:
        object.__setattr__(self, "scopes", tuple(self.scopes))
        object.__setattr__(self, "endpoints", tuple(self.endpoints))

    def to_dict(self) -> dict:
        return {
            "type": self.type,
            "scopes": list(self.scopes),
            "endpoints": [e.to_dict() for e in self.endpoints],
        }


@dataclass(frozen=True)
class Catalog:
    """Ordered collection of resources. Order is display order."""

    resources: tuple[Resource, ...]

    def __post_init__(self) -> None:
        object.__setattr__(self, "resources", tuple(self.resources))

    def __iter__(self) -> Iterator[Resource]:
        return iter(self.resources)

    def __len__(self) -> int:
        return len(self.resources)

    def find(self, type_label: str) -> Resource | None:
        """Return the resource whose type matches *type_label*, case-insensitively."""
        wanted = type_label.lower()
        for resource in self.resources:
            if resource.type.lower() == wanted:
                return resource
        return None

    def to_dict(self) -> dict:
        return {"resources": [r.to_dict() for r in self.resources]}
