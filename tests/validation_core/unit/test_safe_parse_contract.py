"""Tests for the strict/non-throwing validation contract."""

from __future__ import annotations

from typing import Any

import pytest
from dynaschema import ParseFailure, ParseSuccess, Schema, SchemaKind, ValidationError, z


class _ExplodingSchema(Schema[str]):
    kind = SchemaKind.STRING

    def parse(self, value: Any) -> str:
        raise RuntimeError("unexpected")


@pytest.mark.parametrize(
    ("schema", "value"),
    [
        (z.string().min(2), "ok"),
        (z.string().min(2), "x"),
        (z.number().positive(), 3),
        (z.number().positive(), "3"),
        (z.array(z.number()), [1, 2]),
        (z.array(z.number()), [1, "2"]),
        (z.object({"flag": z.boolean()}), {"flag": True}),
        (z.object({"flag": z.boolean()}), {"flag": "yes"}),
        (z.union([z.string(), z.number()]), False),
    ],
)
def test_safe_parse_mirrors_parse(schema: Schema[Any], value: Any) -> None:
    outcome = schema.safe_parse(value)

    try:
        parsed = schema.parse(value)
    except ValidationError as exc:
        assert outcome == ParseFailure(exc)
        assert not outcome.is_ok
    else:
        assert outcome == ParseSuccess(parsed)
        assert outcome.is_ok


def test_safe_parse_normalizes_unexpected_exceptions() -> None:
    outcome = _ExplodingSchema().safe_parse("anything")

    assert outcome == ParseFailure(ValidationError("Unknown error"))


def test_parse_is_idempotent_for_failures_and_successes() -> None:
    schema = z.object({"age": z.number().min(18)})

    first = schema.safe_parse({"age": 15})
    second = schema.safe_parse({"age": 15})

    assert first == second
    assert schema.parse({"age": 20}) == schema.parse({"age": 20}) == {"age": 20.0}


def test_parse_success_equality_depends_on_value() -> None:
    assert ParseSuccess([1.0, 2.0]) == ParseSuccess([1.0, 2.0])
    assert ParseSuccess("a") != ParseSuccess("b")
    assert ParseSuccess("a") != ParseFailure(ValidationError("a"))
