"""
Errors raised while loading a data model and compiling it to types.

Every error is a deterministic function of the input model: running the
generator again on the same input raises the same error.
"""

from __future__ import annotations


class CodeGenerationError(Exception):
    """Base class for all generation failures."""


class SchemaLoadError(CodeGenerationError):
    """Raised when a data model cannot be read or is structurally malformed.

    This can happen when:
    - The model file does not exist or cannot be decoded
    - An attribute has no candidate data type
    - An enumeration has no mappings
    """


class ReservedNameError(CodeGenerationError):
    """Raised when an object or enum is named after a reserved identifier."""

    def __init__(self, kind: str, name: str):
        self.kind = kind
        self.name = name
        super().__init__(f"Reserved keyword used as {kind} name: {name}")


class IdentifierCollisionError(CodeGenerationError):
    """Raised when two identifiers collapse to the same generated name."""

    def __init__(self, owner: str, generated: str, sources: list[str]):
        self.owner = owner
        self.generated = generated
        self.sources = sources
        joined = ", ".join(repr(s) for s in sources)
        super().__init__(f"Identifiers {joined} in '{owner}' all map to '{generated}'")


class InvalidIdentifierError(CodeGenerationError):
    """Raised when a name does not convert to a usable identifier.

    This can happen when:
    - A key or model name has no letters or digits, so its case-converted
      form is empty
    - The converted form starts with a digit or is a language keyword
    """

    def __init__(self, owner: str, source: str, generated: str):
        self.owner = owner
        self.source = source
        self.generated = generated
        super().__init__(f"'{source}' in '{owner}' does not convert to a valid identifier (got '{generated}')")
