"""Core definition of the BN254 scalar field Fr."""

from typing import Self, Tuple

from pydantic import Field, field_validator

from zkhash.config import CHECK_INVARIANTS
from zkhash.types import FieldInvariantError, StrictBaseModel, Uint64

# =================================================================
# Field Constants
#
# The prime is the order of the BN254 (alt_bn128) pairing groups, so
# elements of Fr are the native values of circuits over that curve.
# =================================================================

P: int = 21888242871839275222246405745257275088548364400416034343698204186575808495617
"""The BN254 scalar field modulus."""

P_BITS: int = 254
"""The number of bits in the prime P."""

P_BYTES: int = (P_BITS + 7) // 8
"""The size of a canonical field element encoding in bytes."""

LIMB_BITS: int = 64
"""Width of a single limb of the internal encoding."""

NUM_LIMBS: int = 4
"""Number of limbs in the internal encoding."""

MONTGOMERY_R: int = pow(2, LIMB_BITS * NUM_LIMBS, P)
"""
The Montgomery radix R = 2^256 mod P.

The internal encoding of an element `a` is the integer `a * R mod P`.
"""

MONTGOMERY_R_INV: int = pow(MONTGOMERY_R, -1, P)
"""The inverse of the Montgomery radix modulo P."""

_LIMB_MASK: int = (1 << LIMB_BITS) - 1


# =================================================================
# Scalar Field Fr
#
# Values are held in canonical form. The Montgomery encoding is exposed
# for code that works on the raw limbs directly (Skyscraper's Bar layer).
# Arithmetic is independent of the encoding: addition commutes with it,
# and multiplication of canonical values matches Montgomery multiplication
# of the encoded ones.
# =================================================================


class Fr(StrictBaseModel):
    """An element in the BN254 scalar field F_r."""

    value: int = Field(ge=0, lt=P, description="Field element value in the range [0, P)")

    @field_validator("value", mode="before")
    @classmethod
    def reduce_modulo_p(cls, v: int) -> int:
        """Reduces an integer input modulo P before validation."""
        return v % P

    @classmethod
    def zero(cls) -> Self:
        """The additive identity."""
        return cls(value=0)

    @classmethod
    def one(cls) -> Self:
        """The multiplicative identity."""
        return cls(value=1)

    @classmethod
    def from_uint64(cls, value: Uint64 | int) -> Self:
        """
        Embed an unsigned 64-bit integer into the field.

        Raises:
            OverflowError: If `value` does not fit in 64 bits.
        """
        return cls(value=int(Uint64(value)))

    def __add__(self, other: Self) -> Self:
        """Field addition."""
        return self.__class__(value=self.value + other.value)

    def __sub__(self, other: Self) -> Self:
        """Field subtraction."""
        return self.__class__(value=self.value - other.value)

    def __neg__(self) -> Self:
        """Field negation."""
        return self.__class__(value=-self.value)

    def __mul__(self, other: Self) -> Self:
        """Field multiplication."""
        return self.__class__(value=self.value * other.value)

    def __pow__(self, exponent: int) -> Self:
        """Field exponentiation."""
        return self.__class__(value=pow(self.value, exponent, P))

    def inverse(self) -> Self:
        """Computes the multiplicative inverse."""
        if self.value == 0:
            raise ZeroDivisionError("Cannot invert the zero element.")
        return self ** (P - 2)

    def __truediv__(self, other: Self) -> Self:
        """Field division."""
        return self * other.inverse()

    def is_square(self) -> bool:
        """
        Whether the element is a quadratic residue.

        Uses Euler's criterion; zero counts as a square.
        """
        if self.value == 0:
            return True
        return pow(self.value, (P - 1) // 2, P) == 1

    # =================================================================
    # Montgomery Encoding
    # =================================================================

    def to_montgomery(self) -> int:
        """Return the internal (Montgomery) encoding `value * R mod P`."""
        return self.value * MONTGOMERY_R % P

    def montgomery_limbs(self) -> Tuple[int, int, int, int]:
        """
        Return the Montgomery encoding as four little-endian 64-bit limbs.

        Example:
            >>> Fr.from_montgomery(1).montgomery_limbs()
            (1, 0, 0, 0)
        """
        raw = self.to_montgomery()
        return (
            raw & _LIMB_MASK,
            (raw >> 64) & _LIMB_MASK,
            (raw >> 128) & _LIMB_MASK,
            raw >> 192,
        )

    @classmethod
    def from_montgomery(cls, raw: int) -> Self:
        """
        Build an element from its Montgomery encoding.

        The raw value is reduced modulo P first, so any non-negative integer is accepted.
        """
        return cls(value=(raw % P) * MONTGOMERY_R_INV)

    @classmethod
    def from_montgomery_unchecked(cls, limbs: Tuple[int, int, int, int]) -> Self:
        """
        Build an element from Montgomery limbs without renormalizing them.

        The caller guarantees the limbs encode a raw value strictly below P.
        The guarantee is verified only while invariant checking is enabled.

        Args:
            limbs: Four little-endian 64-bit limbs.

        Returns:
            The element whose Montgomery encoding is the given raw value.

        Raises:
            FieldInvariantError: If checks are enabled and the raw value is >= P.
        """
        raw = limbs[0] | (limbs[1] << 64) | (limbs[2] << 128) | (limbs[3] << 192)
        if CHECK_INVARIANTS and raw >= P:
            raise FieldInvariantError(raw, P)
        return cls(value=raw * MONTGOMERY_R_INV)

    # =================================================================
    # Canonical Byte Encoding
    # =================================================================

    def __bytes__(self) -> bytes:
        """
        Serialize the field element using Python's bytes protocol.

        Returns:
            32-byte little-endian representation of the canonical value.
        """
        return self.value.to_bytes(P_BYTES, byteorder="little")

    @classmethod
    def from_bytes(cls, data: bytes) -> Self:
        """
        Deserialize a field element from bytes.

        Args:
            data: 32-byte little-endian representation of a field element.

        Returns:
            Deserialized field element.

        Raises:
            ValueError: If data has incorrect length or represents an invalid field value.

        Example:
            >>> fr = Fr(value=42)
            >>> Fr.from_bytes(bytes(fr)) == fr
            True
        """
        if len(data) != P_BYTES:
            raise ValueError(f"Expected {P_BYTES} bytes, got {len(data)}")

        value = int.from_bytes(data, byteorder="little")

        if value >= P:
            raise ValueError(f"Value {value:#x} exceeds field modulus {P:#x}")

        return cls(value=value)
