"""Reusable type definitions for the zkhash specifications."""

from .base import StrictBaseModel
from .exceptions import FieldInvariantError, ZkHashError
from .uint import BaseUint, Uint64, Uint128

__all__ = [
    # Core types
    "BaseUint",
    "Uint64",
    "Uint128",
    "StrictBaseModel",
    # Exceptions
    "ZkHashError",
    "FieldInvariantError",
]
