import json
import logging
import sys

import click

from .cli_utils import parse_headers, reconstruct_command_line
from .pipeline import CodeGenerator, GeneratorConfig, SubprocessCommandExecutor

LOG = logging.getLogger("graphql_to_code")

LOG_LEVELS = ["TRACE", "DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"]


@click.command()
@click.option("--schema-url", required=True, type=str, help="URL of the GraphQL schema")
@click.option(
    "--input-path",
    required=True,
    type=click.Path(exists=True, file_okay=False, resolve_path=True),
    help="Path to the directory containing .graphql files",
)
@click.option(
    "--output-path",
    required=True,
    type=click.Path(file_okay=False, resolve_path=True),
    help="Path where generated files will be saved",
)
@click.option("--namespace", default=None, type=str, help="Base namespace for generated code [default: Generated]")
@click.option(
    "--headers",
    multiple=True,
    type=str,
    help="Header to include in the schema request, format 'Key: Value'. Repeatable.",
)
@click.option("--template", default=None, type=str, help="Template to use for code generation [default: typescript]")
@click.option("--model-file", default=None, type=str, help="Name of the generated models file [default: Models.cs]")
@click.option(
    "--log-level",
    default="INFO",
    show_default=True,
    type=click.Choice(LOG_LEVELS, case_sensitive=False),
    help="Logging level",
)
@click.option("--config", "-c", default=None, type=click.Path(exists=True, dir_okay=False, resolve_path=True))
def graphql_to_code(schema_url, input_path, output_path, namespace, headers, template, model_file, log_level, config):
    """GraphQL code generation tool."""
    logging.basicConfig(format="%(levelname)s: %(name)s: %(message)s")
    LOG.setLevel(log_level.upper())
    LOG.debug("Invoked as: %s", reconstruct_command_line(graphql_to_code))

    values = {}
    if config is not None:
        with open(config) as f:
            values = json.load(f)

    # Command line options override the config file
    values.update(schema_url=schema_url, input_path=input_path, output_path=output_path)
    for key, value in (("base_namespace", namespace), ("template", template), ("model_file", model_file)):
        if value is not None:
            values[key] = value
    if headers:
        values["headers"] = parse_headers(headers)

    try:
        codegen = CodeGenerator(GeneratorConfig.from_dict(values), SubprocessCommandExecutor())
        codegen.generate()
    except Exception:
        # CRITICAL passes every --log-level
        LOG.critical("Error during code generation", exc_info=True)
        sys.exit(1)
