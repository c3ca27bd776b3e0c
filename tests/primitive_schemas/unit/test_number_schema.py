"""Number schema tests."""

from __future__ import annotations

import pytest
from dynaschema import ValidationError, z


@pytest.mark.parametrize(("value", "expected"), [(42, 42.0), (3.5, 3.5), (-7, -7.0), (0, 0.0)])
def test_ints_and_floats_normalize_to_float(value: float, expected: float) -> None:
    parsed = z.number().parse(value)

    assert parsed == expected
    assert isinstance(parsed, float)


@pytest.mark.parametrize(
    ("value", "type_name"), [("42", "str"), (True, "bool"), (None, "NoneType"), ([1], "list")]
)
def test_rejects_non_numeric_input(value: object, type_name: str) -> None:
    with pytest.raises(ValidationError) as exc_info:
        z.number().parse(value)

    assert exc_info.value.message == f"Expected number, got {type_name}"


def test_min_and_max_are_inclusive() -> None:
    schema = z.number().min(18).max(120)

    assert schema.parse(18) == 18.0
    assert schema.parse(120) == 120.0
    with pytest.raises(ValidationError) as too_small:
        schema.parse(15)
    with pytest.raises(ValidationError) as too_large:
        schema.parse(121)

    assert too_small.value.message == "Expected number ≥ 18.0 but got 15.0"
    assert too_large.value.message == "Expected number ≤ 120.0 but got 121.0"


def test_positive_and_negative_constraints() -> None:
    with pytest.raises(ValidationError, match="Expected a positive number but got 0.0"):
        z.number().positive().parse(0)
    with pytest.raises(ValidationError, match="Expected a negative number but got 0.0"):
        z.number().negative().parse(0)
    assert z.number().positive().parse(0.1) == 0.1
    assert z.number().negative().parse(-2) == -2.0


def test_min_is_checked_before_positive() -> None:
    with pytest.raises(ValidationError, match="≥"):
        z.number().positive().min(5).parse(-1)


def test_integer_beyond_float_range_is_a_validation_error() -> None:
    with pytest.raises(ValidationError, match="outside the representable float range"):
        z.number().parse(10**400)
