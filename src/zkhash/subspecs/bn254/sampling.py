"""
Deterministic derivation of field constants.

Round constants and similar parameters are treated as opaque configuration
data. The bundled tables are sampled by hashing a domain-separated label,
so anyone can regenerate them from the label alone.
"""

import hashlib
from typing import List

from .field import Fr


def sample_field_element(domain: str, index: int) -> Fr:
    """
    Sample a single field element.

    Computes `SHA3-256(f"{domain}/{index}")`, reads it as a big-endian
    integer and reduces it modulo P.

    Args:
        domain: A label that separates independent families of constants.
        index: Position of the element within its family.

    Returns:
        The sampled field element.
    """
    digest = hashlib.sha3_256(f"{domain}/{index}".encode()).digest()
    return Fr(value=int.from_bytes(digest, byteorder="big"))


def sample_field_elements(domain: str, count: int) -> List[Fr]:
    """Sample `count` consecutive field elements under the same domain."""
    if count < 0:
        raise ValueError(f"count must be non-negative, got {count}")
    return [sample_field_element(domain, i) for i in range(count)]
