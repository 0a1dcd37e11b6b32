import pytest

from md_models_to_code.pipeline import EnumDef, Model, SchemaLoadError, generate
from md_models_to_code.pipeline.analyzer.enum_synthesizer import synthesize_enum
from md_models_to_code.utils import to_upper_camel_case


def test_enum_scenario():
    enum_def = synthesize_enum({"a": "alpha", "b": "beta"}, "Greek")

    assert [v.name for v in enum_def.variants] == ["A", "B"]
    assert enum_def.default.name == "A"
    assert enum_def.to_string("A") == "alpha"
    assert enum_def.to_string(enum_def.variants[1]) == "beta"


def test_variants_are_sorted_by_key():
    enum_def = synthesize_enum({"viewer": "read", "admin": "all", "editor": "write"}, "Role")

    assert [v.key for v in enum_def.variants] == ["admin", "editor", "viewer"]
    assert enum_def.default.name == "Admin"


@pytest.mark.parametrize(
    "mappings",
    [
        {"VALUE": "value"},
        {"first_key": "1", "second_key": "2", "a_key": "0"},
        {"zeta": "z", "Alpha": "A", "beta": "b"},
        {"some-key": "x", "otherKey": "y"},
    ],
)
def test_stringification_is_total(mappings):
    enum_def = synthesize_enum(mappings, "E")

    assert len(enum_def.variants) == len(mappings)
    assert set(enum_def.stringification) == {v.name for v in enum_def.variants}
    for variant in enum_def.variants:
        assert enum_def.to_string(variant) == mappings[variant.key]
    assert enum_def.default.name == to_upper_camel_case(min(mappings))


def test_values_pass_through_unchanged():
    enum_def = synthesize_enum({"weird": "  Mixed Case-Value! "}, "E")
    assert enum_def.to_string("Weird") == "  Mixed Case-Value! "


def test_enum_def_keeps_mappings_sorted_and_read_only():
    enum_def = EnumDef(name="E", mappings={"b": "2", "a": "1"})
    assert list(enum_def.mappings) == ["a", "b"]
    with pytest.raises(TypeError):
        enum_def.mappings["c"] = "3"


def test_empty_mappings_rejected():
    with pytest.raises(SchemaLoadError):
        EnumDef(name="Empty", mappings={})


def test_enums_in_module():
    model = Model(name="Letters", enums=(EnumDef(name="Greek", mappings={"b": "beta", "a": "alpha"}),))
    module = generate(model)

    assert module.name == "letters"
    assert module.enum_names == {"Greek"}
    assert module.enums[0].default.value == "alpha"
