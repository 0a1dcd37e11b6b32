"""
Name checks for generated types.

Object and enum names must not be reserved identifiers, and names that
go through case conversion must come out as usable identifiers. Field
and variant names can optionally be checked for collisions after case
conversion.
"""

from __future__ import annotations

import keyword
from collections import defaultdict
from collections.abc import Iterable

from ...utils import to_snake_case, to_upper_camel_case
from ..errors import IdentifierCollisionError, InvalidIdentifierError, ReservedNameError

# Identifiers that can never name a generated object or enum (case-sensitive)
RESERVED_NAMES = frozenset(
    {
        "type",
        "struct",
        "enum",
        "use",
        "crate",
        "mod",
        "fn",
        "impl",
        "trait",
    }
)


def is_reserved(name: str) -> bool:
    """Check if an object or enum name is a reserved keyword."""
    return name in RESERVED_NAMES


def validate_name(name: str, kind: str = "object") -> str:
    """
    Reject reserved object/enum names.

    Raises:
        ReservedNameError: If the name is reserved
    """
    if is_reserved(name):
        raise ReservedNameError(kind, name)
    return name


def _check_collisions(owner: str, names: Iterable[str], convert) -> None:
    by_generated: dict[str, list[str]] = defaultdict(list)
    for name in names:
        by_generated[convert(name)].append(name)
    for generated, sources in by_generated.items():
        if len(sources) > 1:
            raise IdentifierCollisionError(owner, generated, sources)


def check_field_collisions(owner: str, field_names: Iterable[str]) -> None:
    """Raise if two field names share the same snake_case form."""
    _check_collisions(owner, field_names, to_snake_case)


def check_variant_collisions(owner: str, keys: Iterable[str]) -> None:
    """Raise if two enum keys share the same UpperCamelCase form."""
    _check_collisions(owner, keys, to_upper_camel_case)


def is_valid_identifier(name: str) -> bool:
    """Check that a generated name can be used as an identifier."""
    return name.isidentifier() and not keyword.iskeyword(name)


def validate_variant_names(owner: str, keys: Iterable[str]) -> None:
    """
    Reject enum keys whose UpperCamelCase form is not a usable identifier.

    Raises:
        InvalidIdentifierError: If a key converts to an empty name, a name
            starting with a digit, or a keyword such as `None`
    """
    for key in keys:
        generated = to_upper_camel_case(key)
        if not is_valid_identifier(generated):
            raise InvalidIdentifierError(owner, key, generated)
