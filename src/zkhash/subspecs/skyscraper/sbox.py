"""
The Bar S-box of the Skyscraper permutation.

Bar does not use field arithmetic. It reinterprets the Montgomery encoding of
an element as a 256-bit string, applies a small nonlinear map to every byte,
and reduces the result back below the modulus.

The byte map is evaluated on sixteen bytes at once by treating a 128-bit
integer as a vector of byte lanes: masks split each byte into the bits that
wrap around and the bits that shift, so a plain shift rotates every byte
independently.

This is the only code in the package that touches raw limbs. Its output
invariant (raw value < P) is established by `reduce_small` right before the
limbs are handed back to `Fr.from_montgomery_unchecked`.
"""

from typing import List, MutableSequence, Sequence, Tuple

from zkhash.types import Uint64, Uint128

from ..bn254 import P, Fr

LANE_BITS = Uint128.BITS
"""Width of the lanes the 256-bit encoding is split into."""


def _repeat_byte(byte: int) -> int:
    """Broadcast a byte to all sixteen byte lanes of a 128-bit integer."""
    return int.from_bytes(bytes([byte]) * (LANE_BITS // 8), byteorder="little")


HIGH_BIT_MASK = _repeat_byte(0x80)
"""Bit 7 of every byte."""
LOW7_MASK = _repeat_byte(0x7F)
"""Bits 0 to 6 of every byte."""
HIGH2_MASK = _repeat_byte(0xC0)
"""Bits 6 and 7 of every byte."""
LOW6_MASK = _repeat_byte(0x3F)
"""Bits 0 to 5 of every byte."""
HIGH3_MASK = _repeat_byte(0xE0)
"""Bits 5 to 7 of every byte."""
LOW5_MASK = _repeat_byte(0x1F)
"""Bits 0 to 4 of every byte."""

LANE_MASK = Uint128.mask()

MODULUS_LANES: Tuple[int, int] = (P & LANE_MASK, P >> LANE_BITS)
"""The field modulus split into two 128-bit lanes, least significant first."""


def rotl1(value: int) -> int:
    """Rotate every byte of a 128-bit value left by one bit."""
    return ((value & HIGH_BIT_MASK) >> 7) | ((value & LOW7_MASK) << 1)


def rotl2(value: int) -> int:
    """Rotate every byte of a 128-bit value left by two bits."""
    return ((value & HIGH2_MASK) >> 6) | ((value & LOW6_MASK) << 2)


def rotl3(value: int) -> int:
    """Rotate every byte of a 128-bit value left by three bits."""
    return ((value & HIGH3_MASK) >> 5) | ((value & LOW5_MASK) << 3)


def t_function(value: int) -> int:
    """
    Apply the Skyscraper byte map to each of the sixteen bytes of `value`.

    For a byte `b` the map is `rotl1((~rotl1(b) & rotl2(b) & rotl3(b)) ^ b)`.

    Args:
        value: A 128-bit unsigned integer.

    Returns:
        The transformed 128-bit integer.
    """
    t1 = rotl1(value)
    t2 = rotl2(value)
    t3 = rotl3(value)
    tmp = ((t1 ^ LANE_MASK) & t2 & t3) ^ value
    return rotl1(tmp)


def sub_full(lhs: MutableSequence[int], rhs: Sequence[int], limb_bits: int = LANE_BITS) -> None:
    """
    Subtract `rhs` from `lhs` in place with borrow propagation.

    Both operands are little-endian limb sequences of the same length. The
    result wraps modulo `2^(limb_bits * len(lhs))`, like fixed-width
    unsigned arithmetic.

    Args:
        lhs: Minuend limbs, overwritten with the difference.
        rhs: Subtrahend limbs.
        limb_bits: Width of each limb.
    """
    if len(lhs) != len(rhs):
        raise ValueError(f"Limb count mismatch: {len(lhs)} != {len(rhs)}")

    base = 1 << limb_bits
    borrow = 0
    for i, subtrahend in enumerate(rhs):
        diff = lhs[i] - subtrahend - borrow
        # A negative difference wraps and carries a borrow into the next limb.
        borrow = 1 if diff < 0 else 0
        lhs[i] = diff + base * borrow


def reduce_small(lhs: MutableSequence[int], modulus: Sequence[int] = MODULUS_LANES) -> None:
    """
    Reduce a two-lane value modulo `modulus` in place.

    Lanes are compared from the most significant one down. A value below the
    modulus is left alone, a value equal to it becomes zero, and a larger one
    has the modulus subtracted before the comparison restarts.

    Args:
        lhs: Value lanes, least significant first.
        modulus: Modulus lanes, least significant first.
    """
    while True:
        for idx in reversed(range(len(lhs))):
            if lhs[idx] < modulus[idx]:
                return
            if lhs[idx] > modulus[idx]:
                sub_full(lhs, modulus)
                break
        else:
            # Every lane matched the modulus.
            for idx in range(len(lhs)):
                lhs[idx] = 0
            return


def to_lanes(limbs: Sequence[int]) -> List[int]:
    """Pack four 64-bit limbs into two 128-bit lanes."""
    return [limbs[0] | (limbs[1] << 64), limbs[2] | (limbs[3] << 64)]


def from_lanes(lanes: Sequence[int]) -> Tuple[int, int, int, int]:
    """Unpack two 128-bit lanes into four 64-bit limbs."""
    limb_mask = Uint64.mask()
    lo, hi = lanes
    return (lo & limb_mask, lo >> 64, hi & limb_mask, hi >> 64)


def bar(x: Fr) -> Fr:
    """
    Apply the Bar S-box to a field element.

    The byte map runs across the lanes: the new low lane is the transformed
    high lane and vice versa.

    Args:
        x: The input element.

    Returns:
        The output element.
    """
    lanes = to_lanes(x.montgomery_limbs())
    lanes = [t_function(lanes[1]), t_function(lanes[0])]
    reduce_small(lanes, MODULUS_LANES)
    return Fr.from_montgomery_unchecked(from_lanes(lanes))
