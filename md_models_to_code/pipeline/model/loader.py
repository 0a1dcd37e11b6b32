"""
Loader for the JSON export of a data model.

Expected layout:

    {
        "name": "Test",
        "objects": [
            {
                "name": "Object",
                "attributes": [
                    {"name": "value", "dtypes": ["string"], "is_array": false, "required": true}
                ]
            }
        ],
        "enums": [
            {"name": "SomeEnum", "mappings": {"VALUE": "value"}}
        ]
    }

Unknown keys (docstrings, terms, defaults...) are ignored.
"""

from __future__ import annotations

import json
import logging
from pathlib import Path
from typing import Any

from ..errors import SchemaLoadError
from .nodes import AttributeDef, EnumDef, Model, ObjectDef

logger = logging.getLogger(__name__)


def load_model(path: str | Path) -> Model:
    """
    Load a data model from a JSON file.

    Args:
        path: Path to the JSON model file

    Returns:
        The immutable Model

    Raises:
        SchemaLoadError: If the file cannot be read or is malformed
    """
    path = Path(path)
    try:
        with open(path, encoding="utf-8") as f:
            data = json.load(f)
    except (OSError, json.JSONDecodeError) as e:
        raise SchemaLoadError(f"Failed to parse the model at path: {path}") from e

    logger.debug("Loaded model file %s", path)
    return model_from_dict(data)


def model_from_dict(data: dict[str, Any]) -> Model:
    """
    Build a Model from its dictionary form.

    Raises:
        SchemaLoadError: If the dictionary does not describe a model
    """
    if not isinstance(data, dict):
        raise SchemaLoadError(f"Model must be a JSON object, got {type(data).__name__}")

    try:
        objects = tuple(_parse_object(o) for o in data.get("objects") or [])
        enums = tuple(_parse_enum(e) for e in data.get("enums") or [])
    except (KeyError, TypeError, AttributeError) as e:
        raise SchemaLoadError(f"Malformed model: {e}") from e

    return Model(name=data.get("name"), objects=objects, enums=enums)


def _parse_object(data: dict[str, Any]) -> ObjectDef:
    return ObjectDef(
        name=data["name"],
        attributes=tuple(_parse_attribute(a) for a in data.get("attributes") or []),
    )


def _parse_attribute(data: dict[str, Any]) -> AttributeDef:
    dtypes = data.get("dtypes") or []
    if isinstance(dtypes, str):
        dtypes = [dtypes]
    return AttributeDef(
        name=data["name"],
        dtypes=tuple(dtypes),
        is_array=bool(data.get("is_array", False)),
        required=bool(data.get("required", False)),
    )


def _parse_enum(data: dict[str, Any]) -> EnumDef:
    mappings = data.get("mappings") or {}
    return EnumDef(
        name=data["name"],
        mappings={str(k): str(v) for k, v in mappings.items()},
    )
