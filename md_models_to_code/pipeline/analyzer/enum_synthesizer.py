"""
Enum synthesizer: turns a sorted variant mapping into a tagged enumeration.
"""

from __future__ import annotations

from collections.abc import Mapping

from ...utils import to_upper_camel_case
from .ir_nodes import EnumTypeDef, EnumVariant


def synthesize_enum(mappings: Mapping[str, str], name: str) -> EnumTypeDef:
    """
    Generate an enumeration from its mappings.

    Each key becomes one variant named by its UpperCamelCase form; the
    mapped value is the serialized form, unchanged. Keys are walked in
    lexicographic order and the first variant is the default.

    Args:
        mappings: Variant key -> serialized value
        name: Name of the enumeration

    Returns:
        The enumeration definition
    """
    variants = [EnumVariant(name=to_upper_camel_case(key), key=key, value=mappings[key]) for key in sorted(mappings)]
    return EnumTypeDef(
        name=name,
        variants=variants,
        default=variants[0] if variants else None,
    )
