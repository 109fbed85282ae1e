"""Specification for the Poseidon2 permutation."""

from .constants import ROUND_CONSTANTS_3
from .permutation import (
    PARAMS_3,
    Poseidon2Params,
    permute,
    permute_state,
    permute_state_inplace,
)

__all__ = [
    "permute",
    "permute_state",
    "permute_state_inplace",
    "PARAMS_3",
    "Poseidon2Params",
    "ROUND_CONSTANTS_3",
]
