"""Schema definition scaffold tests."""

from __future__ import annotations

from pathlib import Path

import pytest
from dynaschema import ObjectSchema
from dynaschema.schema_definitions import (
    build_placeholder_definition,
    load_schema_definition,
    write_placeholder_definition,
)


def test_scaffold_is_a_loadable_definition(tmp_path: Path) -> None:
    output = write_placeholder_definition(tmp_path / "schema.yaml")

    schema = load_schema_definition(output)

    assert isinstance(schema, ObjectSchema)
    assert list(schema.fields) == ["id", "name", "age", "is_active", "role", "tags", "contact"]
    assert schema.parse(
        {
            "id": "123e4567-e89b-12d3-a456-426614174000",
            "name": "Ada",
            "age": "36",
            "role": "admin",
        }
    ) == {
        "id": "123e4567-e89b-12d3-a456-426614174000",
        "name": "Ada",
        "age": 36.0,
        "is_active": True,
        "role": "admin",
        "tags": None,
        "contact": None,
    }


def test_scaffold_contains_guidance_comments() -> None:
    text = build_placeholder_definition()

    assert text.startswith("# Schema definition template")
    assert "format: email | uuid | url | phone | alphanumeric" in text


def test_scaffold_refuses_to_overwrite(tmp_path: Path) -> None:
    output = tmp_path / "schema.yaml"
    output.write_text("existing", encoding="utf-8")

    with pytest.raises(FileExistsError, match="already exists"):
        write_placeholder_definition(output)
    assert output.read_text(encoding="utf-8") == "existing"
