"""
A minimal Python specification for the Skyscraper permutation.

Skyscraper is a Feistel network over two field elements. Each round feeds
the left half through an S-box (a field squaring or the Bar map), adds the
result to the right half and swaps the halves.

The design is based on the paper "Skyscraper: Fast Hashing on Big Primes"
(https://eprint.iacr.org/2025/058).
"""

from typing import List

from ..bn254 import Fr, State
from .sbox import bar
from .constants import PARAMS, SBox, SkyscraperParams


def square(x: Fr) -> Fr:
    """The squaring S-box."""
    return x * x


def permute(state: List[Fr], params: SkyscraperParams = PARAMS) -> List[Fr]:
    """
    Performs the full Skyscraper permutation on a pair of field elements.

    Every round computes `(left, right) -> (S(left) + right + c, left)`,
    where `c` is the round constant of an interior round and zero on the
    first and the last round.

    Args:
        state: The pair `[left, right]`.
        params: The round schedule.

    Returns:
        The permuted pair.
    """
    if len(state) != 2:
        raise ValueError("Input state must have length 2")

    left, right = state
    last_round = params.rounds - 1

    for i, sbox in enumerate(params.round_functions):
        left_in = left

        left = bar(left) if sbox is SBox.BAR else square(left)

        # Boundary rounds carry no constant.
        if 0 < i < last_round:
            right = right + params.round_constants[i - 1]

        left = left + right

        # Feistel swap: the unmodified left half moves to the right.
        right = left_in

    return [left, right]


def permute_state_inplace(state: State) -> None:
    """
    Permute the `x` and `y` lanes of a state in place.

    The `z` lane is neither read nor written: Skyscraper has no capacity
    lane, so keys placed there have no effect.
    """
    state.x, state.y = permute([state.x, state.y])


def permute_state(state: State) -> State:
    """Return a permuted copy of the state. The `z` lane is copied unchanged."""
    result = state.model_copy()
    permute_state_inplace(result)
    return result


def compress(x: Fr, y: Fr) -> Fr:
    """
    Two-to-one compression with a feed-forward of the first input.

    Computes `x + permute([x, y])[0]`.
    """
    return x + permute([x, y])[0]
