"""Schema definition scaffold generation helpers."""

from __future__ import annotations

from pathlib import Path

DEFAULT_DEFINITION_FILENAME = "schema.yaml"

_DEFINITION_SCAFFOLD_TEMPLATE = """# Schema definition template for dynaschema.
# Every node needs a "type": string, number, boolean, enum, array, object or union.
# Any node may also set optional, default, and (string/number/boolean only) coerce.

schema:
  type: object
  fields:
    id:
      type: string
      # format: email | uuid | url | phone | alphanumeric
      format: uuid
    name:
      type: string
      min: 2
      max: 64
      # pattern: "^[A-Z]"
    age:
      type: number
      min: 18
      max: 120
      # Accept numeric strings such as "42".
      coerce: true
    is_active:
      type: boolean
      default: true
    role:
      type: enum
      values: [admin, member, guest]
    tags:
      type: array
      items:
        type: string
        min: 1
      max: 10
      optional: true
    contact:
      type: union
      options:
        - type: string
          format: email
        - type: string
          format: phone
      optional: true
"""


def build_placeholder_definition() -> str:
    """Build a YAML schema definition template with inline guidance."""
    return _DEFINITION_SCAFFOLD_TEMPLATE


def write_placeholder_definition(output_path: Path | str) -> Path:
    """Write the placeholder schema definition to the requested output path.

    Args:
      output_path: Destination file path for the scaffold.

    Returns:
      The resolved destination path.

    Raises:
      FileExistsError: If the destination file already exists.
      OSError: If writing the scaffold fails.
    """
    destination = Path(output_path)
    if destination.exists():
        raise FileExistsError(f"Schema definition file already exists: {destination.resolve()}")
    destination.write_text(build_placeholder_definition(), encoding="utf-8")
    return destination.resolve()
