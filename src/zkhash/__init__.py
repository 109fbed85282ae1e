"""Arithmetization-friendly permutations and compression functions over BN254."""

from .subspecs.bn254 import Fr, State
from .subspecs.hash import HashFamily, compress, keyed_compress, permute, permute_inplace

__all__ = [
    "Fr",
    "State",
    "HashFamily",
    "compress",
    "keyed_compress",
    "permute",
    "permute_inplace",
]
