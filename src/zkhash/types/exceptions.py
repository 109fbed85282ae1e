"""Exception hierarchy for the zkhash specifications."""

from __future__ import annotations


class ZkHashError(Exception):
    """
    Base exception for all zkhash-specific errors.

    Attributes:
        message: Human-readable error description.
    """

    def __init__(self, message: str) -> None:
        self.message = message
        super().__init__(message)

    def __repr__(self) -> str:
        return f"{self.__class__.__name__}({self.message!r})"


class FieldInvariantError(ZkHashError):
    """
    Raised when raw limbs handed to an unchecked constructor break its contract.

    Only raised while invariant checking is enabled.

    Attributes:
        raw: The raw integer encoded by the offending limbs.
        modulus: The bound the raw value was required to stay below.
    """

    def __init__(self, raw: int, modulus: int) -> None:
        self.raw = raw
        self.modulus = modulus
        super().__init__(f"Raw limbs encode {raw:#x}, which is not below the modulus {modulus:#x}")
