"""
Type mapper: resolves a schema type name to a primitive or a reference.
"""

from __future__ import annotations

from .ir_nodes import PrimitiveType, TypeKind, TypeRef

# Type mapping from schema type names to primitive symbols
TYPE_MAP: dict[str, PrimitiveType] = {
    "integer": PrimitiveType.INT32,
    "float": PrimitiveType.FLOAT32,
    "string": PrimitiveType.STRING,
    "boolean": PrimitiveType.BOOLEAN,
}


def map_type(dtype: str) -> TypeRef:
    """
    Resolve a raw type name.

    Names outside TYPE_MAP become forward references to another generated
    type. They are not checked against the generated types; a dangling
    reference only fails when the emitted code is itself compiled.

    Args:
        dtype: The raw type name (first dtype of an attribute)

    Returns:
        A primitive or reference TypeRef
    """
    primitive = TYPE_MAP.get(dtype)
    if primitive is not None:
        return TypeRef(kind=TypeKind.PRIMITIVE, name=dtype, primitive=primitive)
    return TypeRef(kind=TypeKind.REFERENCE, name=dtype)
