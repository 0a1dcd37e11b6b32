"""
Per-field contract synthesis: accessors, builder setters and
serialization hints.
"""

from __future__ import annotations

from .ir_nodes import (
    Accessor,
    AccessorKind,
    BuilderPolicy,
    BuilderSetter,
    FieldShape,
    SerdeHint,
    WrappedType,
)

# Shape a setter accepts once the optional wrapper is stripped
_STRIPPED_SHAPES = {
    FieldShape.OPTIONAL: FieldShape.BARE,
    FieldShape.OPTIONAL_SEQUENCE: FieldShape.SEQUENCE,
}


def synthesize_accessors(field_name: str, wrapped: WrappedType) -> tuple[Accessor, Accessor]:
    """Return the (getter, setter) pair for a field."""
    getter = Accessor(
        name=f"get_{field_name}",
        kind=AccessorKind.GETTER,
        field_name=field_name,
        value_type=wrapped,
    )
    setter = Accessor(
        name=f"set_{field_name}",
        kind=AccessorKind.SETTER,
        field_name=field_name,
        value_type=wrapped,
    )
    return getter, setter


def synthesize_builder_setter(
    field_name: str,
    wrapped: WrappedType,
    is_array: bool,
    required: bool,
    policy: BuilderPolicy = BuilderPolicy.LENIENT,
) -> BuilderSetter:
    """
    Build the construction-time setter configuration for a field.

    Optional fields take the inner value and the builder wraps it. Array
    fields also get a `to_<field>` accumulator appending one element per
    call. Under the lenient policy nothing has to be set before build().
    """
    strip_option = wrapped.is_optional
    accepts = wrapped
    if strip_option:
        accepts = WrappedType(shape=_STRIPPED_SHAPES[wrapped.shape], inner=wrapped.inner)

    return BuilderSetter(
        name=field_name,
        field_name=field_name,
        accepts=accepts,
        into=True,
        strip_option=strip_option,
        accumulator=f"to_{field_name}" if is_array else None,
        default=True,
        required=required and policy == BuilderPolicy.STRICT,
    )


def synthesize_serde_hint(is_array: bool, required: bool) -> SerdeHint:
    """Pick the encode/decode hint for a field."""
    if not required and not is_array:
        return SerdeHint.SKIP_IF_ABSENT
    if is_array:
        return SerdeHint.DEFAULT_EMPTY
    return SerdeHint.NONE
