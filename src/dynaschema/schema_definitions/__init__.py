"""Schema definition exports."""

from .definition_loader import SchemaDefinitionError, build_schema, load_schema_definition
from .definition_scaffold_builder import (
    DEFAULT_DEFINITION_FILENAME,
    build_placeholder_definition,
    write_placeholder_definition,
)

__all__ = [
    "SchemaDefinitionError",
    "build_schema",
    "load_schema_definition",
    "DEFAULT_DEFINITION_FILENAME",
    "build_placeholder_definition",
    "write_placeholder_definition",
]
