import sys
import types
from pathlib import Path

import pytest

from md_models_to_code.pipeline import CodeGeneratorConfig, Model, PipelineGenerator, load_model

MODELS_DIR = Path(__file__).parent / "test_data" / "models"


@pytest.fixture
def model_path():
    """Path of a model file under test_data/models."""
    return lambda name: MODELS_DIR / name


@pytest.fixture
def load_generated():
    """Generate code for a model file (or a Model value) and import it as a module."""
    loaded = []

    def _load(source, config=None):
        if isinstance(source, Model):
            model, name = source, source.name or "model"
        else:
            model, name = load_model(MODELS_DIR / source), source
        code = PipelineGenerator(model, config or CodeGeneratorConfig()).generate()
        module_name = f"generated_{Path(name).stem}_{len(loaded)}"
        module = types.ModuleType(module_name)
        sys.modules[module_name] = module
        loaded.append(module_name)
        exec(compile(code, f"<{module_name}>", "exec"), module.__dict__)
        return module

    yield _load

    for module_name in loaded:
        sys.modules.pop(module_name, None)
