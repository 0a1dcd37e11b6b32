"""
Pipeline - data model to code generator.

1. Phase 1 (Loader): Read the JSON model into immutable Model nodes
2. Phase 2 (Analyzer): Validate names, resolve field shapes and build IR
3. Phase 3 (Backend): Render IR to source code with Jinja2 templates
"""

from __future__ import annotations

from .config import BuilderPolicy, CodeGeneratorConfig
from .errors import (
    CodeGenerationError,
    IdentifierCollisionError,
    InvalidIdentifierError,
    ReservedNameError,
    SchemaLoadError,
)
from .generator import PipelineGenerator, generate
from .model import AttributeDef, EnumDef, Model, ObjectDef, load_model, model_from_dict

__all__ = [
    "PipelineGenerator",
    "generate",
    "BuilderPolicy",
    "CodeGeneratorConfig",
    "CodeGenerationError",
    "IdentifierCollisionError",
    "InvalidIdentifierError",
    "ReservedNameError",
    "SchemaLoadError",
    "Model",
    "ObjectDef",
    "AttributeDef",
    "EnumDef",
    "load_model",
    "model_from_dict",
]
