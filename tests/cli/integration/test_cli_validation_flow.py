"""CLI validation flow integration tests."""

from __future__ import annotations

import json
from pathlib import Path

from click.testing import CliRunner
from dynaschema.cli import cli, main

_DEFINITION = """
schema:
  type: object
  fields:
    id: {type: string, format: uuid}
    age: {type: number, min: 18, max: 120}
    items:
      type: array
      items:
        type: object
        fields:
          price: {type: number, positive: true}
"""


def _write_definition(tmp_path: Path) -> Path:
    path = tmp_path / "schema.yaml"
    path.write_text(_DEFINITION, encoding="utf-8")
    return path


def _write_payload(tmp_path: Path, payload: object) -> Path:
    path = tmp_path / "payload.json"
    path.write_text(json.dumps(payload), encoding="utf-8")
    return path


def test_validate_command_accepts_conforming_document(tmp_path: Path) -> None:
    runner = CliRunner()
    payload_path = _write_payload(
        tmp_path,
        {"id": "123e4567-e89b-12d3-a456-426614174000", "age": 30, "items": [{"price": 2}]},
    )

    result = runner.invoke(
        cli,
        ["validate", "--schema", str(_write_definition(tmp_path)), "--input", str(payload_path)],
    )

    assert result.exit_code == 0
    assert result.output.strip() == "valid"


def test_validate_command_reports_formatted_path(tmp_path: Path, capsys) -> None:
    payload_path = _write_payload(
        tmp_path,
        {"id": "123e4567-e89b-12d3-a456-426614174000", "age": 30, "items": [{"price": -1}]},
    )

    exit_code = main(
        ["validate", "--schema", str(_write_definition(tmp_path)), "--input", str(payload_path)]
    )
    captured = capsys.readouterr()

    assert exit_code == 1
    assert captured.err.startswith("items.[0].price: [ObjectSchemaError] Field 'items'")
    assert "Expected a positive number but got -1.0" in captured.err


def test_generate_then_check_definition(tmp_path: Path) -> None:
    runner = CliRunner()
    output_path = tmp_path / "generated.yaml"

    generated = runner.invoke(cli, ["generate-definition", "--output", str(output_path)])
    checked = runner.invoke(cli, ["check-definition", "--schema", str(output_path)])

    assert generated.exit_code == 0
    assert output_path.exists()
    assert checked.exit_code == 0
    assert checked.output.strip() == "object schema ok"


def test_generate_definition_refuses_to_overwrite(tmp_path: Path, capsys) -> None:
    output_path = tmp_path / "schema.yaml"
    output_path.write_text("existing", encoding="utf-8")

    exit_code = main(["generate-definition", "--output", str(output_path)])
    captured = capsys.readouterr()

    assert exit_code == 1
    assert "already exists" in captured.err
