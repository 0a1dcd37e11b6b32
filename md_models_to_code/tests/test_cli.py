import json

from click.testing import CliRunner

from md_models_to_code.md_models_to_code import md_models_to_code


def test_cli_writes_output(model_path, tmp_path):
    output = tmp_path / "out.py"
    result = CliRunner().invoke(md_models_to_code, [str(model_path("test_model.json")), str(output)])

    assert result.exit_code == 0, result.output
    code = output.read_text()
    assert code.startswith("# Generated by md_models_to_code v")
    assert ": md_models_to_code test_model.json " in code.splitlines()[0]
    assert "class Object:" in code


def test_cli_output_directory_uses_module_name(model_path, tmp_path):
    result = CliRunner().invoke(md_models_to_code, [str(model_path("required_fields.json")), str(tmp_path)])

    assert result.exit_code == 0, result.output
    assert (tmp_path / "person_registry.py").exists()


def test_cli_name_override(model_path, tmp_path):
    result = CliRunner().invoke(
        md_models_to_code,
        ["--name", "Renamed Model", str(model_path("test_model.json")), str(tmp_path)],
    )

    assert result.exit_code == 0, result.output
    assert '"""Generated types for the renamed_model data model."""' in (tmp_path / "renamed_model.py").read_text()


def test_cli_flags(model_path, tmp_path):
    output = tmp_path / "out.py"
    result = CliRunner().invoke(
        md_models_to_code,
        ["--strict-builder", "--check-collisions", str(model_path("required_fields.json")), str(output)],
    )

    assert result.exit_code == 0, result.output
    code = output.read_text()
    assert "class UninitializedFieldError(ValueError):" in code
    assert "--strict-builder" in code.splitlines()[0]


def test_cli_config_file(model_path, tmp_path):
    config_path = tmp_path / "config.json"
    config_path.write_text(json.dumps({"add_builders": False, "add_generation_comment": False}))
    output = tmp_path / "out.py"

    result = CliRunner().invoke(
        md_models_to_code,
        ["-c", str(config_path), str(model_path("test_model.json")), str(output)],
    )

    assert result.exit_code == 0, result.output
    code = output.read_text()
    assert "Builder" not in code
    assert not code.startswith("#")


def test_cli_reserved_name_fails(model_path, tmp_path):
    output = tmp_path / "out.py"
    result = CliRunner().invoke(md_models_to_code, [str(model_path("reserved_name.json")), str(output)])

    assert result.exit_code != 0
    assert "Reserved keyword used as object name: type" in str(result.exception)
    assert not output.exists()
