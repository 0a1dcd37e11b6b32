"""
Python code generation backend.

Generates `dataclasses_json` dataclasses, builders and enums from IR.
Enum-typed fields carry an encoder/decoder pair mapping members to their
serialized values, and builder setters only accept lossless conversions.
"""

from __future__ import annotations

import json
from typing import Any

from ..analyzer.ir_nodes import (
    ClassDef,
    EnumTypeDef,
    FieldDef,
    FieldShape,
    ModuleDescription,
    PrimitiveType,
    SerdeHint,
    WrappedType,
)
from ..config import BuilderPolicy, CodeGeneratorConfig
from .base import CodeBackend


class PythonBackend(CodeBackend):
    """Python code generation backend."""

    TEMPLATE_LANG = "python"
    FILE_EXTENSION = "py"

    TYPE_MAP = {
        PrimitiveType.INT32: "int",
        PrimitiveType.FLOAT32: "float",
        PrimitiveType.STRING: "str",
        PrimitiveType.BOOLEAN: "bool",
    }

    # Value a bare primitive field holds when never set
    ZERO_VALUES = {
        PrimitiveType.INT32: "0",
        PrimitiveType.FLOAT32: "0.0",
        PrimitiveType.STRING: '""',
        PrimitiveType.BOOLEAN: "False",
    }

    def __init__(self, config: CodeGeneratorConfig):
        super().__init__(config)
        self.python_imports: set[tuple[str, str]] = set()
        self.enum_names: set[str] = set()
        self.converters: set[str] = set()
        self.enum_codec = False

    def generate(self, module: ModuleDescription) -> str:
        """Generate Python code from IR."""
        self.python_imports = set()
        self.enum_names = module.enum_names
        self.converters = set()
        self.enum_codec = False

        if self.config.use_future_annotations:
            self.python_imports.add(("__future__", "annotations"))
        if module.classes:
            self.python_imports.add(("dataclasses", "dataclass"))
            self.python_imports.add(("dataclasses_json", "dataclass_json"))
        if module.enums:
            self.python_imports.add(("enum", "Enum"))

        content = ""
        for class_def in module.classes:
            content += self.class_template.render(self._prepare_class_context(class_def))
        for enum_def in module.enums:
            content += self.enum_template.render(self._prepare_enum_context(enum_def))

        strict = self.config.add_builders and any(c.builder_policy == BuilderPolicy.STRICT for c in module.classes)
        exported = [c.name for c in module.classes]
        if self.config.add_builders:
            exported += [c.builder_name for c in module.classes]
        exported += [e.name for e in module.enums]
        if strict:
            exported.append("UninitializedFieldError")

        prefix = self.prefix_template.render(
            generation_comment=module.generation_comment,
            module_name=module.name,
            required_imports=self._assemble_imports(),
            strict_builders=strict,
            converters=self.converters,
            enum_codec=self.enum_codec,
        )
        suffix = self.suffix_template.render(exported=exported)
        return prefix + content + suffix

    def translate_type(self, wrapped: WrappedType) -> str:
        """Translate a shaped IR type to a Python annotation."""
        inner = wrapped.inner
        name = self.TYPE_MAP[inner.primitive] if inner.is_primitive else inner.name

        match wrapped.shape:
            case FieldShape.BARE:
                result = name
            case FieldShape.OPTIONAL:
                result = f"{name} | None"
            case FieldShape.SEQUENCE:
                result = f"list[{name}]"
            case FieldShape.OPTIONAL_SEQUENCE:
                result = f"list[{name}] | None"

        return self._quote(result) if inner.is_reference else result

    def _quote(self, annotation: str) -> str:
        """Quote an annotation that names a generated type (forward reference)."""
        if self.config.use_future_annotations:
            return annotation
        return f'"{annotation}"'

    def _field_default(self, field: FieldDef) -> str:
        """Get the default value expression for a field."""
        inner = field.type_ref.inner
        metadata = []
        if field.serde_hint == SerdeHint.SKIP_IF_ABSENT:
            metadata.append("exclude=lambda value: value is None")
        if inner.is_reference and inner.name in self.enum_names:
            # Members are keyed by mapping key; the wire carries the serialized value
            self.enum_codec = True
            self.python_imports.add(("typing", "Any"))
            metadata.append("encoder=_encode_enum")
            metadata.append(f"decoder=lambda value: _decode_enum({inner.name}, value)")

        if field.serde_hint == SerdeHint.SKIP_IF_ABSENT:
            default = "default=None"
        elif field.serde_hint == SerdeHint.DEFAULT_EMPTY or field.type_ref.is_sequence:
            default = "default_factory=list"
        elif inner.is_primitive:
            return self.ZERO_VALUES[inner.primitive]
        elif inner.name in self.enum_names:
            default = f"default_factory=lambda: {inner.name}.default()"
        else:
            default = f"default_factory=lambda: {inner.name}()"

        self.python_imports.add(("dataclasses", "field"))
        if not metadata:
            return f"field({default})"
        self.python_imports.add(("dataclasses_json", "config"))
        return f"field({default}, metadata=config({', '.join(metadata)}))"

    def _convert(self, wrapped: WrappedType, expr: str) -> str:
        """Expression converting a single builder argument into the inner type.

        Primitives go through the generated `_into_<type>` helpers, which
        raise TypeError for any conversion that would lose information.
        """
        if not wrapped.inner.is_primitive:
            return expr
        type_name = self.TYPE_MAP[wrapped.inner.primitive]
        if self.config.add_builders:
            self.converters.add(type_name)
        return f"_into_{type_name}({expr})"

    def _prepare_field_context(self, field: FieldDef) -> dict[str, Any]:
        builder = field.builder
        accepts = self.translate_type(builder.accepts)
        if builder.accepts.is_sequence:
            element = WrappedType(shape=FieldShape.BARE, inner=builder.accepts.inner)
            converted = f"[{self._convert(builder.accepts, 'item')} for item in value]"
            accumulator_type = self.translate_type(element)
        else:
            converted = self._convert(builder.accepts, "value")
            accumulator_type = None

        return {
            "name": field.name,
            "type": self.translate_type(field.type_ref),
            "default": self._field_default(field),
            "getter": field.getter.name if field.getter else None,
            "setter": field.setter.name if field.setter else None,
            "builder_name": builder.name,
            "builder_accepts": accepts,
            "builder_value": converted,
            "accumulator": builder.accumulator,
            "accumulator_type": accumulator_type,
            "accumulator_value": self._convert(builder.accepts, "item"),
            "required": builder.required,
        }

    def _prepare_class_context(self, class_def: ClassDef) -> dict[str, Any]:
        """
        Prepare the template context for a record.

        Args:
            class_def: The class definition

        Returns:
            Dictionary of template variables
        """
        if self.config.add_builders:
            self.python_imports.add(("typing", "Any"))
        fields = [self._prepare_field_context(f) for f in class_def.fields]
        return {
            "CLASS_NAME": class_def.name,
            "SELF_TYPE": self._quote(class_def.name),
            "BUILDER_NAME": class_def.builder_name,
            "BUILDER_TYPE": self._quote(class_def.builder_name),
            "properties": fields,
            "required_fields": [f["name"] for f in fields if f["required"]],
            "ADD_ACCESSORS": self.config.add_accessors,
            "ADD_BUILDER": self.config.add_builders,
        }

    def _prepare_enum_context(self, enum_def: EnumTypeDef) -> dict[str, Any]:
        return {
            "ENUM_NAME": enum_def.name,
            "SELF_TYPE": self._quote(enum_def.name),
            "variants": [(v.name, self._literal(v.key), self._literal(v.value)) for v in enum_def.variants],
            "DEFAULT": enum_def.default.name,
        }

    @staticmethod
    def _literal(value: str) -> str:
        """Double-quoted Python string literal for a serialized value."""
        return json.dumps(value, ensure_ascii=False)

    def _assemble_imports(self) -> list[str]:
        """Group imports: __future__, standard library, then third-party."""
        groups: dict[str, dict[str, list[str]]] = {"future": {}, "stdlib": {}, "third_party": {}}
        for module, name in self.python_imports:
            if module == "__future__":
                group = "future"
            elif module == "dataclasses_json":
                group = "third_party"
            else:
                group = "stdlib"
            groups[group].setdefault(module, []).append(name)

        assembled: list[str] = []
        for group in ("future", "stdlib", "third_party"):
            if not groups[group]:
                continue
            if assembled:
                assembled.append("")
            for module in sorted(groups[group]):
                names = ", ".join(sorted(groups[group][module]))
                assembled.append(f"from {module} import {names}")
        return assembled
