"""
IR (Intermediate Representation) node definitions.

These nodes describe the compiled module: every field has a resolved
shape, accessors, a builder setter and a serialization hint, and every
enumeration has its variants and default. Backends render these nodes
to source text.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum

from ..config import BuilderPolicy


class PrimitiveType(Enum):
    """Primitive symbols a schema type name can resolve to."""

    INT32 = "int32"  # 32-bit signed integer
    FLOAT32 = "float32"  # 32-bit IEEE-754 float
    STRING = "string"  # owned UTF-8 text
    BOOLEAN = "boolean"


class TypeKind(Enum):
    """Kind of type in the IR."""

    PRIMITIVE = "primitive"
    REFERENCE = "reference"  # Another generated type, by name


@dataclass(frozen=True)
class TypeRef:
    """A resolved type: a primitive symbol or a forward reference."""

    kind: TypeKind = TypeKind.PRIMITIVE
    name: str = ""

    # Set for primitives only
    primitive: PrimitiveType | None = None

    @property
    def is_primitive(self) -> bool:
        return self.kind == TypeKind.PRIMITIVE

    @property
    def is_reference(self) -> bool:
        return self.kind == TypeKind.REFERENCE


class FieldShape(Enum):
    """Cardinality/optionality of a field."""

    BARE = "bare"  # T
    OPTIONAL = "optional"  # T | None
    SEQUENCE = "sequence"  # list[T]
    OPTIONAL_SEQUENCE = "optional_sequence"  # list[T] | None


@dataclass(frozen=True)
class WrappedType:
    """A type together with its field shape."""

    shape: FieldShape = FieldShape.BARE
    inner: TypeRef = field(default_factory=TypeRef)

    @property
    def is_optional(self) -> bool:
        return self.shape in (FieldShape.OPTIONAL, FieldShape.OPTIONAL_SEQUENCE)

    @property
    def is_sequence(self) -> bool:
        return self.shape in (FieldShape.SEQUENCE, FieldShape.OPTIONAL_SEQUENCE)


class AccessorKind(Enum):
    GETTER = "get"
    SETTER = "set"


@dataclass(frozen=True)
class Accessor:
    """Read or write accessor contract for one field.

    Getters return the stored value without copying. Setters replace the
    value and return the enclosing object so calls can be chained.
    """

    name: str = ""
    kind: AccessorKind = AccessorKind.GETTER
    field_name: str = ""
    value_type: WrappedType = field(default_factory=WrappedType)

    @property
    def returns_self(self) -> bool:
        return self.kind == AccessorKind.SETTER


@dataclass(frozen=True)
class BuilderSetter:
    """Construction-time setter configuration for one field."""

    name: str = ""
    field_name: str = ""

    # Type the setter accepts (the optional wrapper is stripped if strip_option)
    accepts: WrappedType = field(default_factory=WrappedType)

    # Setter converts its argument into the inner type
    into: bool = True

    # Caller passes the inner value; the builder wraps it
    strip_option: bool = False

    # Name of the single-element accumulator, for array fields
    accumulator: str | None = None

    # Every field falls back to its empty/zero value if never set
    default: bool = True

    # Field must be set before build() under the strict policy
    required: bool = False


class SerdeHint(Enum):
    """Encode/decode hint for one field."""

    NONE = "none"  # Always present
    SKIP_IF_ABSENT = "skip_if_absent"  # Omitted on encode when None
    DEFAULT_EMPTY = "default_empty"  # Empty sequence on decode when absent


@dataclass
class FieldDef:
    """A field definition in a generated record."""

    name: str = ""
    type_ref: WrappedType = field(default_factory=WrappedType)
    getter: Accessor | None = None
    setter: Accessor | None = None
    builder: BuilderSetter | None = None
    serde_hint: SerdeHint = SerdeHint.NONE


@dataclass
class ClassDef:
    """A generated record type."""

    name: str = ""
    fields: list[FieldDef] = field(default_factory=list)
    builder_name: str = ""
    builder_policy: BuilderPolicy = BuilderPolicy.LENIENT


@dataclass(frozen=True)
class EnumVariant:
    """One unit variant of a generated enumeration."""

    name: str = ""  # UpperCamelCase identifier
    key: str = ""  # Raw mapping key
    value: str = ""  # Serialized value


@dataclass
class EnumTypeDef:
    """A generated tagged enumeration."""

    name: str = ""
    variants: list[EnumVariant] = field(default_factory=list)
    default: EnumVariant | None = None

    def to_string(self, variant: EnumVariant | str) -> str:
        """Stringify a variant (or variant name) to its serialized value."""
        name = variant.name if isinstance(variant, EnumVariant) else variant
        return self.stringification[name]

    @property
    def stringification(self) -> dict[str, str]:
        """Variant name -> serialized value, one entry per variant."""
        return {v.name: v.value for v in self.variants}


@dataclass
class ModuleDescription:
    """The complete compiled module handed to a backend."""

    name: str = ""
    classes: list[ClassDef] = field(default_factory=list)
    enums: list[EnumTypeDef] = field(default_factory=list)

    # Generation comment
    generation_comment: str = ""

    @property
    def enum_names(self) -> set[str]:
        return {e.name for e in self.enums}

    @property
    def is_empty(self) -> bool:
        return not self.classes and not self.enums
