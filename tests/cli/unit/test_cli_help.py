"""CLI smoke tests."""

from click.testing import CliRunner
from dynaschema.cli import cli


def test_cli_displays_help() -> None:
    runner = CliRunner()
    result = runner.invoke(cli, ["--help"])

    assert result.exit_code == 0
    assert "validate" in result.output
    assert "generate-definition" in result.output
    assert "check-definition" in result.output
