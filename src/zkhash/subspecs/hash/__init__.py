"""Compression functions dispatched over the permutation families."""

from .dispatch import HashFamily, compress, keyed_compress, permute, permute_inplace

__all__ = [
    "HashFamily",
    "compress",
    "keyed_compress",
    "permute",
    "permute_inplace",
]
