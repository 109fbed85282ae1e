"""
A minimal Python specification for the Griffin permutation over BN254.

Griffin combines a power map, its inverse and a multiplication by a quadratic
that has no roots in the field. The design is based on the paper "Horst Meets
Fluid-SPN: Griffin for Zero-Knowledge Applications"
(https://eprint.iacr.org/2022/403).
"""

from typing import List

from pydantic import BaseModel, ConfigDict, Field, model_validator

from ..bn254 import Fr, State
from .constants import ALPHA_3, BETA_3, D, D_INV, ROUND_CONSTANTS_3, ROUNDS_3, WIDTH_3


class GriffinParams(BaseModel):
    """Parameters for a specific Griffin instance."""

    model_config = ConfigDict(frozen=True, arbitrary_types_allowed=True)

    width: int = Field(ge=3, description="The size of the state (t).")
    rounds: int = Field(gt=0, description="Total number of rounds.")
    d: int = Field(gt=1, description="Degree of the power map.")
    d_inv: int = Field(gt=1, description="Exponent of the inverse power map.")
    alpha: Fr
    beta: Fr
    round_constants: List[Fr] = Field(
        description="Constants for every round except the last one.",
    )

    @model_validator(mode="after")
    def check_lengths(self) -> "GriffinParams":
        """Ensures the constant count matches the configuration."""
        if self.width != 3:
            raise ValueError("Only width 3 is supported.")
        if len(self.round_constants) != (self.rounds - 1) * self.width:
            raise ValueError("Incorrect number of round constants provided.")
        return self


PARAMS_3 = GriffinParams(
    width=WIDTH_3,
    rounds=ROUNDS_3,
    d=D,
    d_inv=D_INV,
    alpha=ALPHA_3,
    beta=BETA_3,
    round_constants=ROUND_CONSTANTS_3,
)


def linear_layer(state: List[Fr]) -> List[Fr]:
    """Multiply the state by circ(2, 1, 1)."""
    total = sum(state, Fr.zero())
    return [s + total for s in state]


def non_linear_layer(state: List[Fr], params: GriffinParams) -> List[Fr]:
    """
    Applies the Griffin S-box layer.

    The first lane takes the inverse power map, the second the power map,
    and the third is multiplied by `lin^2 + alpha*lin + beta` where `lin` is the
    sum of the two new values. The quadratic never vanishes, so the layer
    stays invertible.
    """
    y0 = state[0] ** params.d_inv
    y1 = state[1] ** params.d
    lin = y0 + y1
    y2 = state[2] * (lin * lin + params.alpha * lin + params.beta)
    return [y0, y1, y2]


def permute(state: List[Fr], params: GriffinParams = PARAMS_3) -> List[Fr]:
    """
    Performs the full Griffin permutation on the given state.

    An initial linear layer is followed by `rounds` rounds of
    S-box layer -> linear layer -> round constants, with no constants on
    the last round.

    Args:
        state: A list of Fr elements representing the current state.
        params: The object defining the permutation's configuration.

    Returns:
        The new state after applying the permutation.
    """
    if len(state) != params.width:
        raise ValueError(f"Input state must have length {params.width}")

    state = linear_layer(list(state))

    for r in range(params.rounds):
        state = non_linear_layer(state, params)
        state = linear_layer(state)
        if r < params.rounds - 1:
            offset = r * params.width
            state = [s + params.round_constants[offset + i] for i, s in enumerate(state)]

    return state


def permute_state_inplace(state: State) -> None:
    """Permute all three lanes of a state in place."""
    state.x, state.y, state.z = permute([state.x, state.y, state.z])


def permute_state(state: State) -> State:
    """Return a permuted copy of the state."""
    result = state.model_copy()
    permute_state_inplace(result)
    return result
