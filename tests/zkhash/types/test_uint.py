"""Unsigned Integer Type Tests."""

from typing import Any, Type

import pytest
from pydantic import ValidationError, create_model

from zkhash.types import BaseUint, Uint64, Uint128

ALL_UINT_TYPES = (Uint64, Uint128)
"""A collection of all Uint types to test against."""


@pytest.mark.parametrize("uint_class", ALL_UINT_TYPES)
def test_pydantic_validation_accepts_valid_int(uint_class: Type[BaseUint]) -> None:
    """Tests that Pydantic validation correctly accepts a valid integer."""
    model = create_model("Model", value=(uint_class, ...))

    instance: Any = model(value=10)
    assert isinstance(instance.value, uint_class)
    assert instance.value == uint_class(10)


@pytest.mark.parametrize("uint_class", ALL_UINT_TYPES)
@pytest.mark.parametrize(
    "invalid_value, expected_type_name",
    [
        (1.0, "float"),
        ("1", "str"),
        (True, "bool"),
        (None, "NoneType"),
    ],
)
def test_instantiation_from_invalid_types_raises_error(
    uint_class: Type[BaseUint], invalid_value: Any, expected_type_name: str
) -> None:
    """Tests that instantiating with non-integer types raises a TypeError."""
    with pytest.raises(TypeError, match=f"Expected int, got {expected_type_name}"):
        uint_class(invalid_value)


@pytest.mark.parametrize("uint_class", ALL_UINT_TYPES)
def test_pydantic_rejects_out_of_range(uint_class: Type[BaseUint]) -> None:
    """Tests that out-of-range values surface as validation errors."""
    model = create_model("Model", value=(uint_class, ...))
    with pytest.raises(ValidationError):
        model(value=2**uint_class.BITS)


@pytest.mark.parametrize("uint_class", ALL_UINT_TYPES)
def test_range_limits(uint_class: Type[BaseUint]) -> None:
    """Tests the boundaries of the representable range."""
    assert uint_class.max_value() == 2**uint_class.BITS - 1
    assert uint_class.mask() == 2**uint_class.BITS - 1
    with pytest.raises(OverflowError):
        uint_class(-1)
    with pytest.raises(OverflowError):
        uint_class(2**uint_class.BITS)


def test_to_bytes_defaults_to_natural_width() -> None:
    """Tests that serialization uses the type's byte width, little-endian."""
    assert Uint64(1).to_bytes() == b"\x01" + b"\x00" * 7
    assert len(Uint128(1).to_bytes()) == 16


def test_repr_and_hash() -> None:
    """Tests the string representations and hashing."""
    assert repr(Uint64(5)) == "Uint64(5)"
    assert str(Uint64(5)) == "5"
    assert hash(Uint64(5)) != hash(Uint128(5))
