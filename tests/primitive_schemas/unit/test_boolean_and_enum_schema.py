"""Boolean and enum schema tests."""

from __future__ import annotations

import pytest
from dynaschema import ValidationError, z


@pytest.mark.parametrize("value", [True, False])
def test_boolean_accepts_booleans(value: bool) -> None:
    assert z.boolean().parse(value) is value


@pytest.mark.parametrize(("value", "type_name"), [(1, "int"), ("true", "str"), (None, "NoneType")])
def test_boolean_rejects_other_types(value: object, type_name: str) -> None:
    with pytest.raises(ValidationError) as exc_info:
        z.boolean().parse(value)

    assert exc_info.value == ValidationError(f"Expected boolean, got {type_name}")


def test_boolean_true_only_and_false_only() -> None:
    with pytest.raises(ValidationError) as true_only:
        z.boolean().true_only().parse(False)
    with pytest.raises(ValidationError) as false_only:
        z.boolean().false_only().parse(True)

    assert true_only.value.message == "[BooleanSchemaError] Expected `true` but got `false`."
    assert false_only.value.message == "[BooleanSchemaError] Expected `false` but got `true`."


def test_enum_accepts_allowed_values() -> None:
    direction = z.enum(["north", "south", "east", "west"])

    assert direction.parse("north") == "north"


def test_enum_rejects_unknown_value_listing_allowlist() -> None:
    with pytest.raises(ValidationError) as exc_info:
        z.enum(["north", "south"]).parse("up")

    assert exc_info.value.message == "Expected one of ['north', 'south'], got 'up'."


def test_enum_rejects_non_string() -> None:
    with pytest.raises(ValidationError, match="Expected string enum, got int"):
        z.enum(["a"]).parse(1)


def test_enum_requires_values() -> None:
    with pytest.raises(ValueError, match="at least one value"):
        z.enum([])
