"""
Data model module.

Contains the immutable model node definitions and the JSON model loader.
"""

from __future__ import annotations

from .loader import load_model, model_from_dict
from .nodes import AttributeDef, EnumDef, Model, ObjectDef

__all__ = [
    "Model",
    "ObjectDef",
    "AttributeDef",
    "EnumDef",
    "load_model",
    "model_from_dict",
]
