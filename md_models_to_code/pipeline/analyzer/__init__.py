"""
Analyzer module.

Contains type mapping, field wrapping, contract synthesis, name checks
and IR building.
"""

from __future__ import annotations

from .analyzer import ModelAnalyzer
from .ir_nodes import (
    Accessor,
    AccessorKind,
    BuilderSetter,
    ClassDef,
    EnumTypeDef,
    EnumVariant,
    FieldDef,
    FieldShape,
    ModuleDescription,
    PrimitiveType,
    SerdeHint,
    TypeKind,
    TypeRef,
    WrappedType,
)

__all__ = [
    "ModelAnalyzer",
    "Accessor",
    "AccessorKind",
    "BuilderSetter",
    "ClassDef",
    "EnumTypeDef",
    "EnumVariant",
    "FieldDef",
    "FieldShape",
    "ModuleDescription",
    "PrimitiveType",
    "SerdeHint",
    "TypeKind",
    "TypeRef",
    "WrappedType",
]
