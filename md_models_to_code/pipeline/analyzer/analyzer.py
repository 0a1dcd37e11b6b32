"""
Model analyzer that compiles a data model to IR.

Validates names, resolves every attribute to a field shape, synthesizes
the per-field contracts and assembles the module description.
"""

from __future__ import annotations

import logging

from ...utils import to_snake_case
from ..config import CodeGeneratorConfig
from ..model.nodes import AttributeDef, EnumDef, Model, ObjectDef
from .enum_synthesizer import synthesize_enum
from .field_wrapper import wrap_type
from .ir_nodes import ClassDef, EnumTypeDef, FieldDef, ModuleDescription
from ..errors import InvalidIdentifierError
from .name_resolver import (
    check_field_collisions,
    check_variant_collisions,
    validate_name,
    validate_variant_names,
)
from .synthesizers import synthesize_accessors, synthesize_builder_setter, synthesize_serde_hint
from .type_mapper import map_type

logger = logging.getLogger(__name__)


class ModelAnalyzer:
    """Analyzes a data model and builds IR."""

    def __init__(self, config: CodeGeneratorConfig | None = None):
        """
        Initialize the analyzer.

        Args:
            config: Code generation configuration
        """
        self.config = config or CodeGeneratorConfig()

    def analyze(self, model: Model) -> ModuleDescription:
        """
        Compile the model to a module description.

        All object and enum names are validated before any type is
        synthesized, so a failing model never yields a partial module.

        Args:
            model: The loaded data model

        Returns:
            ModuleDescription ready for a backend

        Raises:
            ReservedNameError: If an object or enum uses a reserved name
            InvalidIdentifierError: If an enum key or the model name has no
                usable identifier form
            IdentifierCollisionError: If collision checking is enabled and
                two identifiers map to the same generated name
        """
        objects = [o for o in model.objects if o.name not in self.config.ignore_classes]
        enums = [e for e in model.enums if e.name not in self.config.ignore_classes]

        # First pass: validate every name
        module_name = self.module_name(model)
        for object_def in objects:
            validate_name(object_def.name, "object")
        for enum_def in enums:
            validate_name(enum_def.name, "enum")
            validate_variant_names(enum_def.name, enum_def.mappings)

        if self.config.check_identifier_collisions:
            for object_def in objects:
                check_field_collisions(object_def.name, (a.name for a in self._attributes(object_def)))
            for enum_def in enums:
                check_variant_collisions(enum_def.name, enum_def.mappings)

        # Second pass: build definitions
        module = ModuleDescription(name=module_name)
        for object_def in objects:
            module.classes.append(self._analyze_object(object_def))
        for enum_def in enums:
            module.enums.append(self._analyze_enum(enum_def))

        logger.debug(
            "Compiled module %s: %d classes, %d enums",
            module.name,
            len(module.classes),
            len(module.enums),
        )
        return module

    def module_name(self, model: Model) -> str:
        """Namespace name: snake_case model name, or the configured default."""
        if not model.name:
            return self.config.default_module_name
        name = to_snake_case(model.name)
        if not name:
            raise InvalidIdentifierError("model", model.name, name)
        return name

    def _attributes(self, object_def: ObjectDef) -> list[AttributeDef]:
        ignored = self.config.global_ignore_fields
        return [a for a in object_def.attributes if a.name not in ignored]

    def _analyze_object(self, object_def: ObjectDef) -> ClassDef:
        logger.debug("Analyzing object %s", object_def.name)
        class_def = ClassDef(
            name=object_def.name,
            builder_name=f"{object_def.name}Builder",
            builder_policy=self.config.builder_policy,
        )
        for attribute in self._attributes(object_def):
            class_def.fields.append(self._analyze_attribute(attribute))
        return class_def

    def _analyze_attribute(self, attribute: AttributeDef) -> FieldDef:
        wrapped = wrap_type(map_type(attribute.dtype), attribute.is_array, attribute.required)
        getter, setter = synthesize_accessors(attribute.name, wrapped)
        return FieldDef(
            name=attribute.name,
            type_ref=wrapped,
            getter=getter,
            setter=setter,
            builder=synthesize_builder_setter(
                attribute.name,
                wrapped,
                attribute.is_array,
                attribute.required,
                self.config.builder_policy,
            ),
            serde_hint=synthesize_serde_hint(attribute.is_array, attribute.required),
        )

    def _analyze_enum(self, enum_def: EnumDef) -> EnumTypeDef:
        logger.debug("Analyzing enum %s", enum_def.name)
        return synthesize_enum(enum_def.mappings, enum_def.name)
