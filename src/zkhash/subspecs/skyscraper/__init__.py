"""Specification for the Skyscraper permutation."""

from .sbox import bar, reduce_small, sub_full, t_function
from .constants import PARAMS, PARAMS_BN254, SBox, SkyscraperParams, load_params
from .permutation import compress, permute, permute_state, permute_state_inplace

__all__ = [
    "bar",
    "compress",
    "load_params",
    "permute",
    "permute_state",
    "permute_state_inplace",
    "reduce_small",
    "sub_full",
    "t_function",
    "PARAMS",
    "PARAMS_BN254",
    "SBox",
    "SkyscraperParams",
]
