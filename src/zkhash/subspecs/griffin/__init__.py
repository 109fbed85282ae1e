"""Specification for the Griffin permutation."""

from .permutation import (
    PARAMS_3,
    GriffinParams,
    linear_layer,
    non_linear_layer,
    permute,
    permute_state,
    permute_state_inplace,
)

__all__ = [
    "permute",
    "permute_state",
    "permute_state_inplace",
    "linear_layer",
    "non_linear_layer",
    "PARAMS_3",
    "GriffinParams",
]
