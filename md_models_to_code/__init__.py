"""Markdown Data Model to Code Generator

A Python package compiling data models (objects with typed attributes
and enumerations) into typed records with accessors, builders and
serialization hints.
"""

__version__ = "0.1.0"

from .pipeline import (
    BuilderPolicy,
    CodeGenerationError,
    CodeGeneratorConfig,
    IdentifierCollisionError,
    InvalidIdentifierError,
    PipelineGenerator,
    ReservedNameError,
    SchemaLoadError,
    generate,
    load_model,
    model_from_dict,
)

__all__ = [
    "PipelineGenerator",
    "generate",
    "load_model",
    "model_from_dict",
    "BuilderPolicy",
    "CodeGeneratorConfig",
    "CodeGenerationError",
    "IdentifierCollisionError",
    "InvalidIdentifierError",
    "ReservedNameError",
    "SchemaLoadError",
]
