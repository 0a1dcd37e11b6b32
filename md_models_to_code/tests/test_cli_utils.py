#!/usr/bin/env python3

import click
import pytest

from md_models_to_code.cli_utils import PROGRAM_NAME, reconstruct_command_line
from md_models_to_code.md_models_to_code import md_models_to_code


class TestCliUtils:
    """Test cases for CLI utilities"""

    def test_reconstruct_command_line_without_context(self):
        """Without an active Click context the bare program name is returned"""
        assert reconstruct_command_line(md_models_to_code) == PROGRAM_NAME

    def test_reconstruct_command_line_with_context(self, tmp_path):
        """Arguments come first, then non-default options; flags carry no value"""
        model = tmp_path / "model.json"
        model.write_text("{}")
        params = {
            "name": "Other",
            "config": None,
            "strict_builder": True,
            "check_collisions": False,
            "path": str(model),
            "output": "out.py",
        }
        with click.Context(md_models_to_code) as ctx:
            ctx.params.update(params)
            result = reconstruct_command_line(md_models_to_code)

        assert result == "md_models_to_code model.json out.py --name Other --strict-builder"


if __name__ == "__main__":
    pytest.main([__file__])
