"""Specifications for the BN254 scalar field and the permutation state."""

from .field import (
    LIMB_BITS,
    MONTGOMERY_R,
    MONTGOMERY_R_INV,
    NUM_LIMBS,
    P,
    P_BITS,
    P_BYTES,
    Fr,
)
from .sampling import sample_field_element, sample_field_elements
from .state import State

__all__ = [
    "P",
    "P_BITS",
    "P_BYTES",
    "LIMB_BITS",
    "NUM_LIMBS",
    "MONTGOMERY_R",
    "MONTGOMERY_R_INV",
    "Fr",
    "State",
    "sample_field_element",
    "sample_field_elements",
]
