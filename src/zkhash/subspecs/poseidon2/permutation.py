"""
A minimal Python specification for the Poseidon2 permutation over BN254.

The design is based on the paper "Poseidon2: A Faster Version of the Poseidon
Hash Function" (https://eprint.iacr.org/2023/323).
"""

from typing import List

from pydantic import BaseModel, ConfigDict, Field, model_validator

from ..bn254 import Fr, State
from .constants import ROUND_CONSTANTS_3, ROUNDS_F_3, ROUNDS_P_3, WIDTH_3

# =================================================================
# Poseidon2 Parameter Definitions
# =================================================================

S_BOX_DEGREE = 5
"""
The S-box exponent `d`.

For fields where `gcd(d, p-1) = 1`, `x -> x^d` is a permutation.

For BN254, 3 divides `p-1`, so the smallest usable degree is 5.
"""


class Poseidon2Params(BaseModel):
    """Parameters for a specific Poseidon2 instance."""

    model_config = ConfigDict(frozen=True, arbitrary_types_allowed=True)

    width: int = Field(gt=0, description="The size of the state (t).")
    rounds_f: int = Field(gt=0, description="Total number of 'full' rounds.")
    rounds_p: int = Field(ge=0, description="Total number of 'partial' rounds.")
    internal_diag_vectors: List[Fr] = Field(
        min_length=1,
        description=("Diagonal vector for the internal linear layer matrix (M_I)."),
    )
    round_constants: List[Fr] = Field(
        min_length=1,
        description="The list of pre-computed constants for all rounds.",
    )

    @model_validator(mode="after")
    def check_lengths(self) -> "Poseidon2Params":
        """Ensures vector lengths match the configuration."""
        if len(self.internal_diag_vectors) != self.width:
            raise ValueError("Length of internal_diag_vectors must equal width.")

        if self.rounds_f % 2 != 0:
            raise ValueError("Number of full rounds must be even.")

        expected_constants = (self.rounds_f * self.width) + self.rounds_p
        if len(self.round_constants) != expected_constants:
            raise ValueError("Incorrect number of round constants provided.")

        return self


# Parameters for WIDTH = 3
PARAMS_3 = Poseidon2Params(
    width=WIDTH_3,
    rounds_f=ROUNDS_F_3,
    rounds_p=ROUNDS_P_3,
    # M_I = J + diag(1, 1, 2), i.e. [[2, 1, 1], [1, 2, 1], [1, 1, 3]].
    internal_diag_vectors=[Fr(value=1), Fr(value=1), Fr(value=2)],
    round_constants=ROUND_CONSTANTS_3,
)


def external_linear_layer(state: List[Fr]) -> List[Fr]:
    """
    Applies the external linear layer (M_E) for a width-3 state.

    For t = 3 the matrix is circ(2, 1, 1): every output element is the sum
    of the whole state plus the element itself.

    Args:
        state: The current state vector.

    Returns:
        The state vector after applying the external linear layer.
    """
    total = sum(state, Fr.zero())
    return [s + total for s in state]


def internal_linear_layer(state: List[Fr], params: Poseidon2Params) -> List[Fr]:
    """
    Applies the internal linear layer (M_I).

    The matrix is M_I = J + D with J the all-ones matrix and D diagonal, so
    the product takes O(t): every output is the state sum plus `D[i] * s[i]`.

    Args:
        state: The current state vector.
        params: The Poseidon2Params object containing the diagonal vector.

    Returns:
        The state vector after applying the internal linear layer.
    """
    total = sum(state, Fr.zero())
    return [total + d * s for d, s in zip(params.internal_diag_vectors, state, strict=True)]


def permute(state: List[Fr], params: Poseidon2Params = PARAMS_3) -> List[Fr]:
    """
    Performs the full Poseidon2 permutation on the given state.

    The permutation follows the structure:
    Initial Layer -> Full Rounds -> Partial Rounds -> Full Rounds

    Args:
        state: A list of Fr elements representing the current state.
        params: The object defining the permutation's configuration.

    Returns:
        The new state after applying the permutation.
    """
    if len(state) != params.width:
        raise ValueError(f"Input state must have length {params.width}")

    round_constants = params.round_constants
    # The number of full rounds is split between the beginning and end.
    half_rounds_f = params.rounds_f // 2
    const_idx = 0

    # 1. Initial Linear Layer
    state = external_linear_layer(list(state))

    # 2. First Half of Full Rounds (R_F / 2)
    for _r in range(half_rounds_f):
        state = [s + round_constants[const_idx + i] for i, s in enumerate(state)]
        const_idx += params.width
        state = [s**S_BOX_DEGREE for s in state]
        state = external_linear_layer(state)

    # 3. Partial Rounds (R_P)
    for _r in range(params.rounds_p):
        # Only the first element goes through the S-box.
        state[0] += round_constants[const_idx]
        const_idx += 1
        state[0] = state[0] ** S_BOX_DEGREE
        state = internal_linear_layer(state, params)

    # 4. Second Half of Full Rounds (R_F / 2)
    for _r in range(half_rounds_f):
        state = [s + round_constants[const_idx + i] for i, s in enumerate(state)]
        const_idx += params.width
        state = [s**S_BOX_DEGREE for s in state]
        state = external_linear_layer(state)

    return state


def permute_state_inplace(state: State) -> None:
    """Permute all three lanes of a state in place."""
    state.x, state.y, state.z = permute([state.x, state.y, state.z])


def permute_state(state: State) -> State:
    """Return a permuted copy of the state."""
    result = state.model_copy()
    permute_state_inplace(result)
    return result
