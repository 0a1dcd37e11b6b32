"""
Field wrapper: combines a resolved type with array/required flags.
"""

from __future__ import annotations

from .ir_nodes import FieldShape, TypeRef, WrappedType


def wrap_type(type_ref: TypeRef, is_array: bool, required: bool) -> WrappedType:
    """
    Pick the field shape for a type.

        required  is_array  primitive           reference
        True      False     BARE                BARE
        False     False     OPTIONAL            OPTIONAL
        True      True      SEQUENCE            SEQUENCE
        False     True      OPTIONAL_SEQUENCE   SEQUENCE

    An optional array of a reference type is a plain sequence, unlike
    the primitive case.
    """
    if required and not is_array:
        shape = FieldShape.BARE
    elif not required and not is_array:
        shape = FieldShape.OPTIONAL
    elif required or type_ref.is_reference:
        shape = FieldShape.SEQUENCE
    else:
        shape = FieldShape.OPTIONAL_SEQUENCE
    return WrappedType(shape=shape, inner=type_ref)
