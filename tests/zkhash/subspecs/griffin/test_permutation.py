"""
Tests for the width-3 Griffin permutation over BN254.
"""

import pytest
from hypothesis import given, settings
from hypothesis import strategies as st
from pydantic import ValidationError

from zkhash.subspecs.bn254 import P, Fr, State
from zkhash.subspecs.griffin import (
    PARAMS_3,
    GriffinParams,
    linear_layer,
    non_linear_layer,
    permute,
    permute_state,
    permute_state_inplace,
)

field_elements = st.integers(min_value=0, max_value=P - 1).map(lambda v: Fr(value=v))


def fr_list(*values: int) -> list[Fr]:
    """Build a list of field elements from integers."""
    return [Fr(value=v) for v in values]


def test_bundled_parameters() -> None:
    """The BN254 instance is consistent."""
    assert PARAMS_3.width == 3
    assert PARAMS_3.rounds == 14
    assert len(PARAMS_3.round_constants) == 13 * 3
    assert PARAMS_3.d * PARAMS_3.d_inv % (P - 1) == 1


def test_quadratic_has_no_roots() -> None:
    """alpha^2 - 4*beta is a non-residue, so the third lane's factor never vanishes."""
    discriminant = PARAMS_3.alpha * PARAMS_3.alpha - Fr(value=4) * PARAMS_3.beta
    assert not discriminant.is_square()


def test_parameter_validation() -> None:
    """Inconsistent parameter sets are rejected."""
    with pytest.raises(ValidationError, match="round constants"):
        GriffinParams(
            width=3,
            rounds=2,
            d=PARAMS_3.d,
            d_inv=PARAMS_3.d_inv,
            alpha=PARAMS_3.alpha,
            beta=PARAMS_3.beta,
            round_constants=[],
        )
    with pytest.raises(ValidationError, match="width 3"):
        GriffinParams(
            width=4,
            rounds=1,
            d=PARAMS_3.d,
            d_inv=PARAMS_3.d_inv,
            alpha=PARAMS_3.alpha,
            beta=PARAMS_3.beta,
            round_constants=[],
        )


def test_linear_layer() -> None:
    """circ(2, 1, 1) adds the state sum to every element."""
    assert linear_layer(fr_list(1, 2, 3)) == fr_list(7, 8, 9)


def test_non_linear_layer_known_answer() -> None:
    """With x0 = 0 the root map vanishes and the quadratic is evaluated at x1^5."""
    out = non_linear_layer(fr_list(0, 2, 3), PARAMS_3)
    lin = Fr(value=32)
    assert out[0] == Fr.zero()
    assert out[1] == Fr(value=32)
    assert out[2] == Fr(value=3) * (lin * lin + PARAMS_3.alpha * lin + PARAMS_3.beta)


@settings(max_examples=10)
@given(field_elements)
def test_root_map_inverts_power_map(x: Fr) -> None:
    """x -> x^(1/d) undoes x -> x^d."""
    assert (x**PARAMS_3.d_inv) ** PARAMS_3.d == x


def test_input_length_is_checked() -> None:
    """The state must match the width."""
    with pytest.raises(ValueError, match="length 3"):
        permute(fr_list(1, 2))


@settings(max_examples=10)
@given(field_elements, field_elements, field_elements)
def test_permutation_is_deterministic(x: Fr, y: Fr, z: Fr) -> None:
    """The list and state forms agree."""
    state = State(x=x, y=y, z=z)
    in_place = state.model_copy()
    permute_state_inplace(in_place)

    assert permute_state(state) == in_place
    assert [in_place.x, in_place.y, in_place.z] == permute([x, y, z])


@settings(max_examples=10)
@given(field_elements, field_elements, field_elements)
def test_permutation_is_not_identity(x: Fr, y: Fr, z: Fr) -> None:
    """Random inputs are moved."""
    assert permute([x, y, z]) != [x, y, z]
