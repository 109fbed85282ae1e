"""
Uniform compression interface over the supported permutation families.

Every family exposes an in-place permutation of the three-lane `State`.
This module selects one by its `HashFamily` tag and builds the two-to-one
compression functions on top of it.
"""

import logging
from enum import Enum
from typing import Callable, Dict

from zkhash.types import Uint64

from .. import griffin, poseidon2, skyscraper
from ..bn254 import Fr, State

logger = logging.getLogger(__name__)


class HashFamily(str, Enum):
    """The permutation families available for compression."""

    POSEIDON2 = "poseidon2"
    GRIFFIN = "griffin"
    SKYSCRAPER = "skyscraper"
    """Permutes only the `x` and `y` lanes; the `z` lane is ignored."""


_PERMUTE_INPLACE: Dict[HashFamily, Callable[[State], None]] = {
    HashFamily.POSEIDON2: poseidon2.permute_state_inplace,
    HashFamily.GRIFFIN: griffin.permute_state_inplace,
    HashFamily.SKYSCRAPER: skyscraper.permute_state_inplace,
}


def permute_inplace(family: HashFamily, state: State) -> None:
    """
    Apply the family's permutation to `state` in place.

    Args:
        family: The permutation family to use.
        state: The state to overwrite.
    """
    logger.debug("Applying %s permutation", family.value)
    _PERMUTE_INPLACE[family](state)


def permute(family: HashFamily, state: State) -> State:
    """
    Apply the family's permutation and return the result as a new state.

    The input state is left untouched.
    """
    result = state.model_copy()
    permute_inplace(family, result)
    return result


def compress(family: HashFamily, x: Fr, y: Fr) -> Fr:
    """
    Two-to-one compression.

    Permutes `{x, y, 0}` and returns the first lane.
    """
    state = State(x=x, y=y, z=Fr.zero())
    permute_inplace(family, state)
    return state.x


def keyed_compress(family: HashFamily, key: Uint64 | int, x: Fr, y: Fr) -> Fr:
    """
    Two-to-one compression with a 64-bit key for domain separation.

    Permutes `{x, y, key}` and returns the first lane.

    Args:
        family: The permutation family to use.
        key: The domain separator, embedded into the field.
        x: Left input.
        y: Right input.

    Returns:
        The compressed value.

    Raises:
        OverflowError: If `key` does not fit in 64 bits.
    """
    state = State(x=x, y=y, z=Fr.from_uint64(key))
    permute_inplace(family, state)
    return state.x
