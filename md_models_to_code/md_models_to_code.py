import dataclasses
import json
import logging
from pathlib import Path

import click

from .pipeline import BuilderPolicy, CodeGeneratorConfig, PipelineGenerator, load_model

logger = logging.getLogger(__name__)


@click.command()
@click.option("--name", "-n", default=None, type=str, help="Override the model name (module name)")
@click.option("--config", "-c", default=None, type=click.Path(exists=True, resolve_path=True))
@click.option(
    "--strict-builder",
    is_flag=True,
    default=False,
    help="Make builders refuse to build while required fields are unset",
)
@click.option(
    "--check-collisions",
    is_flag=True,
    default=False,
    help="Reject field and variant names that collide after case conversion",
)
@click.argument("path", default=None, type=click.Path(exists=True, resolve_path=True))
@click.argument("output", required=False, default=None, type=click.Path(resolve_path=True))
def md_models_to_code(name, config, strict_builder, check_collisions, path, output):
    model = load_model(path)
    if name is not None:
        model = dataclasses.replace(model, name=name)

    if config is not None:
        with open(config) as f:
            config = CodeGeneratorConfig.from_dict(json.load(f))
    else:
        config = CodeGeneratorConfig()

    # CLI flags override the config file
    if strict_builder:
        config.builder_policy = BuilderPolicy.STRICT
    if check_collisions:
        config.check_identifier_collisions = True

    codegen = PipelineGenerator(model, config, "python")
    module = codegen.analyze()
    out = codegen.generate()

    if output is None:
        output = Path.cwd() / f"{module.name}.py"
    elif Path(output).is_dir():
        output = Path(output) / f"{module.name}.py"

    with open(output, "w") as f:
        f.write(out)
    logger.info("Wrote module %s to %s", module.name, output)
    click.echo(str(output))
