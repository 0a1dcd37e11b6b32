"""
Data model node definitions.

These nodes represent a loaded data model before any type resolution.
They are immutable values: the loader builds them once and the analyzer
only reads them.
"""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass, field
from types import MappingProxyType

from ..errors import SchemaLoadError


@dataclass(frozen=True)
class AttributeDef:
    """One field of an object."""

    name: str = ""

    # Candidate type names; only the first one is used
    dtypes: tuple[str, ...] = ()

    is_array: bool = False
    required: bool = False

    def __post_init__(self):
        object.__setattr__(self, "dtypes", tuple(self.dtypes))
        if not self.dtypes:
            raise SchemaLoadError(f"Attribute '{self.name}' has no data type")

    @property
    def dtype(self) -> str:
        """The authoritative (first) data type name."""
        return self.dtypes[0]


@dataclass(frozen=True)
class ObjectDef:
    """A record-like entity with an ordered list of attributes."""

    name: str = ""
    attributes: tuple[AttributeDef, ...] = ()

    def __post_init__(self):
        object.__setattr__(self, "attributes", tuple(self.attributes))


@dataclass(frozen=True, eq=False)
class EnumDef:
    """A closed set of variant keys, each mapped to a serialized value.

    Mappings are stored read-only and iterate in lexicographic key order.
    """

    name: str = ""
    mappings: Mapping[str, str] = field(default_factory=dict)

    def __post_init__(self):
        if not self.mappings:
            raise SchemaLoadError(f"Enumeration '{self.name}' has no mappings")
        ordered = {key: self.mappings[key] for key in sorted(self.mappings)}
        object.__setattr__(self, "mappings", MappingProxyType(ordered))

    def __eq__(self, other):
        if not isinstance(other, EnumDef):
            return NotImplemented
        return self.name == other.name and dict(self.mappings) == dict(other.mappings)

    def __hash__(self):
        return hash((self.name, tuple(self.mappings.items())))


@dataclass(frozen=True)
class Model:
    """A complete data model: objects and enumerations under one name."""

    name: str | None = None
    objects: tuple[ObjectDef, ...] = ()
    enums: tuple[EnumDef, ...] = ()

    def __post_init__(self):
        object.__setattr__(self, "objects", tuple(self.objects))
        object.__setattr__(self, "enums", tuple(self.enums))
