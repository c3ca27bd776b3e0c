"""Command line interface entry point."""

from __future__ import annotations

import json
import logging
import sys
from pathlib import Path

import click

from dynaschema.schema_definitions import (
    DEFAULT_DEFINITION_FILENAME,
    SchemaDefinitionError,
    load_schema_definition,
    write_placeholder_definition,
)
from dynaschema.validation_core import ValidationError

_LOGGER = logging.getLogger(__name__)


class CliError(Exception):
    """Custom CLI error."""


@click.group(context_settings={"help_option_names": ["-h", "--help"]})
@click.version_option(package_name="dynaschema")
@click.option("--verbose", is_flag=True, default=False, help="Enable debug logging.")
def cli(verbose: bool) -> None:
    """Runtime schema validation utility."""
    if verbose:
        logging.basicConfig(level=logging.DEBUG, format="%(levelname)s %(name)s: %(message)s")


@cli.command(name="generate-definition")
@click.option(
    "--output",
    "output_path",
    required=False,
    default=DEFAULT_DEFINITION_FILENAME,
    show_default=True,
    type=click.Path(path_type=str),
    help="Path to the YAML schema definition template to write",
)
def generate_definition(output_path: str) -> None:
    """Generate a schema definition template with guidance comments."""
    try:
        resolved_output = write_placeholder_definition(output_path)
    except (FileExistsError, OSError) as exc:
        raise CliError(str(exc)) from exc
    click.echo(str(resolved_output))


@cli.command(name="check-definition")
@click.option(
    "--schema",
    "schema_path",
    required=True,
    type=click.Path(path_type=str),
    help="Path to YAML/JSON schema definition file",
)
def check_definition(schema_path: str) -> None:
    """Build the schema declared by a definition file and report its kind."""
    try:
        schema = load_schema_definition(schema_path)
    except (SchemaDefinitionError, OSError) as exc:
        raise CliError(str(exc)) from exc
    click.echo(f"{schema.kind.value} schema ok")


@cli.command(name="validate")
@click.option(
    "--schema",
    "schema_path",
    required=True,
    type=click.Path(path_type=str),
    help="Path to YAML/JSON schema definition file",
)
@click.option(
    "--input",
    "input_path",
    required=True,
    type=click.Path(path_type=str),
    help="Path to the JSON document to validate",
)
def validate(schema_path: str, input_path: str) -> None:
    """Validate a JSON document against a schema definition."""
    try:
        schema = load_schema_definition(schema_path)
        payload = json.loads(Path(input_path).read_text(encoding="utf-8"))
    except (SchemaDefinitionError, OSError, ValueError) as exc:
        raise CliError(str(exc)) from exc

    _LOGGER.debug("Validating %s against %s", input_path, schema_path)
    try:
        schema.parse(payload)
    except ValidationError as exc:
        raise CliError(exc.formatted_description) from exc
    click.echo("valid")


def main(argv: list[str] | None = None) -> int:
    """CLI entry point for console_scripts wiring."""
    argv = argv if argv is not None else sys.argv[1:]
    try:
        cli.main(args=list(argv), standalone_mode=False)
    except CliError as exc:
        click.echo(str(exc), err=True)
        return 1
    except click.ClickException as exc:
        exc.show()
        return exc.exit_code
    except click.Abort:
        click.echo("Aborted.", err=True)
        return 1
    return 0


if __name__ == "__main__":  # pragma: no cover
    raise SystemExit(main())
