"""
Pipeline generator: model -> IR -> source code.
"""

from __future__ import annotations

import logging

from ..cli_utils import PROGRAM_NAME, reconstruct_command_line
from .analyzer import ModelAnalyzer, ModuleDescription
from .backends import CodeBackend, PythonBackend
from .config import CodeGeneratorConfig
from .model import Model

logger = logging.getLogger(__name__)

BACKENDS: dict[str, type[CodeBackend]] = {
    "python": PythonBackend,
}


def generate(model: Model, config: CodeGeneratorConfig | None = None) -> ModuleDescription:
    """
    Compile a data model into a module description.

    Args:
        model: The loaded data model
        config: Code generation configuration

    Returns:
        The module description

    Raises:
        ReservedNameError: If an object or enum uses a reserved name
    """
    return ModelAnalyzer(config).analyze(model)


class PipelineGenerator:
    """Generates source code for one data model."""

    def __init__(
        self,
        model: Model,
        config: CodeGeneratorConfig | None = None,
        language: str = "python",
    ):
        """
        Initialize the generator.

        Args:
            model: The loaded data model
            config: Code generation configuration
            language: Target language
        """
        if language not in BACKENDS:
            raise ValueError(f"Language '{language}' is not supported")
        self.model = model
        self.config = config or CodeGeneratorConfig()
        self.language = language

    def analyze(self) -> ModuleDescription:
        """Compile the model to IR."""
        module = generate(self.model, self.config)
        if self.config.add_generation_comment:
            module.generation_comment = self._generate_command_comment()
        return module

    def _generate_command_comment(self) -> str:
        """Generate a command line comment for the generated file"""
        from .. import __version__

        try:
            from ..md_models_to_code import md_models_to_code as click_command  # noqa

            command_line = reconstruct_command_line(click_command)
        except (ImportError, AttributeError):
            command_line = PROGRAM_NAME

        return f"# Generated by {PROGRAM_NAME} v{__version__} : {command_line}"

    def generate(self) -> str:
        """Compile the model and render it to source code."""
        module = self.analyze()
        backend = BACKENDS[self.language](self.config)
        logger.debug("Rendering module %s with the %s backend", module.name, self.language)
        return backend.generate(module)
