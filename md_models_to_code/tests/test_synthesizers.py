import pytest

from md_models_to_code.pipeline import AttributeDef, BuilderPolicy, CodeGeneratorConfig, Model, ObjectDef, generate
from md_models_to_code.pipeline.analyzer.field_wrapper import wrap_type
from md_models_to_code.pipeline.analyzer.ir_nodes import AccessorKind, FieldShape, SerdeHint
from md_models_to_code.pipeline.analyzer.synthesizers import (
    synthesize_accessors,
    synthesize_builder_setter,
    synthesize_serde_hint,
)
from md_models_to_code.pipeline.analyzer.type_mapper import map_type


def _person_model():
    return Model(
        objects=(
            ObjectDef(
                name="Object",
                attributes=(
                    AttributeDef(name="name", dtypes=("string",), required=True),
                    AttributeDef(name="age", dtypes=("integer",), required=False),
                ),
            ),
        )
    )


def test_accessor_names_and_kinds():
    wrapped = wrap_type(map_type("string"), False, True)
    getter, setter = synthesize_accessors("name", wrapped)

    assert getter.name == "get_name"
    assert getter.kind == AccessorKind.GETTER
    assert not getter.returns_self
    assert setter.name == "set_name"
    assert setter.kind == AccessorKind.SETTER
    assert setter.returns_self
    assert getter.value_type == setter.value_type == wrapped


@pytest.mark.parametrize(
    "required, is_array, expected",
    [
        (True, False, SerdeHint.NONE),
        (False, False, SerdeHint.SKIP_IF_ABSENT),
        (True, True, SerdeHint.DEFAULT_EMPTY),
        (False, True, SerdeHint.DEFAULT_EMPTY),
    ],
)
def test_serde_hints(required, is_array, expected):
    assert synthesize_serde_hint(is_array, required) == expected


def test_builder_for_required_scalar():
    setter = synthesize_builder_setter("name", wrap_type(map_type("string"), False, True), False, True)
    assert setter.into
    assert not setter.strip_option
    assert setter.accumulator is None
    assert setter.default
    assert setter.accepts.shape == FieldShape.BARE


def test_builder_strips_option():
    setter = synthesize_builder_setter("age", wrap_type(map_type("integer"), False, False), False, False)
    assert setter.strip_option
    assert setter.accepts.shape == FieldShape.BARE
    assert setter.accumulator is None


@pytest.mark.parametrize("required", [True, False])
def test_builder_array_accumulator(required):
    wrapped = wrap_type(map_type("float"), True, required)
    setter = synthesize_builder_setter("values", wrapped, True, required)

    assert setter.accumulator == "to_values"
    assert setter.accepts.shape == FieldShape.SEQUENCE
    assert setter.strip_option == (not required)


def test_builder_never_requires_fields_by_default():
    setter = synthesize_builder_setter("name", wrap_type(map_type("string"), False, True), False, True)
    assert not setter.required


def test_builder_strict_policy_marks_required():
    wrapped = wrap_type(map_type("string"), False, True)
    assert synthesize_builder_setter("name", wrapped, False, True, BuilderPolicy.STRICT).required
    optional = wrap_type(map_type("string"), False, False)
    assert not synthesize_builder_setter("nick", optional, False, False, BuilderPolicy.STRICT).required


def test_object_scenario():
    module = generate(_person_model())
    name, age = module.classes[0].fields

    assert name.serde_hint == SerdeHint.NONE
    assert age.serde_hint == SerdeHint.SKIP_IF_ABSENT
    assert age.builder.strip_option
    assert age.builder.accepts.shape == FieldShape.BARE
    assert age.builder.accepts.inner == map_type("integer")


def test_accessors_follow_attribute_order():
    module = generate(_person_model())
    fields = module.classes[0].fields
    assert [f.getter.name for f in fields] == ["get_name", "get_age"]
    assert [f.setter.name for f in fields] == ["set_name", "set_age"]


def test_strict_policy_recorded_on_class():
    config = CodeGeneratorConfig(builder_policy=BuilderPolicy.STRICT)
    class_def = generate(_person_model(), config).classes[0]
    assert class_def.builder_policy == BuilderPolicy.STRICT
    assert class_def.builder_name == "ObjectBuilder"
    assert [f.builder.required for f in class_def.fields] == [True, False]
