"""Union schema tests."""

from __future__ import annotations

import pytest
from dynaschema import ValidationError, z


def test_first_matching_alternative_wins() -> None:
    schema = z.union([z.string(), z.number()])

    assert schema.parse("hello") == "hello"
    assert schema.parse(42) == 42.0


def test_declaration_order_decides_between_matching_alternatives() -> None:
    schema = z.union(
        [
            z.string().refine(lambda text: "A" in text, "Must contain A", name="containsA"),
            z.string().refine(lambda text: "B" in text, "Must contain B", name="containsB"),
            z.string().transform(str.upper),
        ]
    )

    assert schema.parse("Banana") == "Banana"
    assert schema.parse("xyz") == "XYZ"


def test_no_match_concatenates_every_message() -> None:
    schema = z.union([z.string(), z.number()])

    with pytest.raises(ValidationError) as exc_info:
        schema.parse(False)

    assert exc_info.value == ValidationError(
        "[UnionSchemaError] Value did not match any union type: "
        "Expected string, got bool, Expected number, got bool"
    )


def test_success_with_wrong_output_type_is_skipped() -> None:
    schema = z.union([z.number(), z.coerce.string()], output_type=str)

    assert schema.parse(5) == "5"


def test_union_inside_array() -> None:
    schema = z.array(z.union([z.string(), z.number()]))

    assert schema.parse(["Swift", 5, "Zod"]) == ["Swift", 5.0, "Zod"]


def test_union_requires_options() -> None:
    with pytest.raises(ValueError, match="at least one schema"):
        z.union([])


def test_factory_union_defaults_output_type_to_builtin_object() -> None:
    schema = z.union([z.string()])

    assert schema.output_type is object
    assert schema.safe_parse("a").is_ok
