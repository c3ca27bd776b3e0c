"""Boundary tests for validation engine internal dependencies."""

from __future__ import annotations

from pathlib import Path


def _project_root() -> Path:
    return Path(__file__).resolve().parents[3]


def test_schema_engine_does_not_import_cli_or_definition_layers() -> None:
    package_dir = _project_root() / "src" / "dynaschema"
    engine_dirs = (
        package_dir / "validation_core",
        package_dir / "primitive_schemas",
        package_dir / "composite_schemas",
        package_dir / "decorator_schemas",
    )
    forbidden_import_fragments = (
        "import click",
        "import yaml",
        "dynaschema.cli",
        "dynaschema.schema_definitions",
        "dynaschema.typed_bridge",
    )

    for engine_dir in engine_dirs:
        for module_path in engine_dir.glob("*.py"):
            text = module_path.read_text(encoding="utf-8")
            for fragment in forbidden_import_fragments:
                assert (
                    fragment not in text
                ), f"Forbidden engine dependency in {module_path}: {fragment}"
