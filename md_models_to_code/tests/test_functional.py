"""
Functional tests: generate Python code for small models and look for
expected patterns in the output.
"""

from __future__ import annotations

import json
from pathlib import Path

import pytest

from md_models_to_code.pipeline import CodeGeneratorConfig, PipelineGenerator, model_from_dict


def load_all_test_cases():
    """Load all test cases from all JSON files in test_data/functional directory."""
    functional_dir = Path(__file__).parent / "test_data" / "functional"
    test_cases = []

    for json_file in sorted(functional_dir.glob("*_tests.json")):
        with open(json_file) as f:
            data = json.load(f)

        for test_case in data:
            test_case["_source_file"] = json_file.name
            test_cases.append(test_case)

    return test_cases


def _generate_code(model_dict, config_dict):
    config = CodeGeneratorConfig.from_dict(config_dict or {})
    config.add_generation_comment = False
    return PipelineGenerator(model_from_dict(model_dict), config).generate()


@pytest.mark.parametrize("test_case", load_all_test_cases(), ids=lambda tc: tc["name"])
def test_functional_generation(test_case):
    generated_code = _generate_code(test_case["model"], test_case.get("config"))

    for pattern in test_case.get("expected_contains", []):
        assert pattern in generated_code, f"Expected pattern '{pattern}' not found in output:\n{generated_code}"

    for pattern in test_case.get("expected_not_contains", []):
        assert pattern not in generated_code, f"Unexpected pattern '{pattern}' found in output:\n{generated_code}"

    compile(generated_code, test_case["name"], "exec")


if __name__ == "__main__":
    pytest.main([__file__])
