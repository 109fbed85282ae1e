"""Tests for the permutation dispatcher and compression functions."""

from typing import Callable

import pytest
from hypothesis import given, settings
from hypothesis import strategies as st

from zkhash import Fr, HashFamily, State, compress, keyed_compress, permute, permute_inplace
from zkhash.subspecs import griffin, poseidon2, skyscraper
from zkhash.subspecs.bn254 import P

field_elements = st.integers(min_value=0, max_value=P - 1).map(lambda v: Fr(value=v))

ALL_FAMILIES = list(HashFamily)
CAPACITY_FAMILIES = [HashFamily.POSEIDON2, HashFamily.GRIFFIN]


def test_families() -> None:
    """The enumeration is closed over the three families."""
    assert {f.value for f in HashFamily} == {"poseidon2", "griffin", "skyscraper"}


@pytest.mark.parametrize(
    "family, permute_state",
    [
        (HashFamily.POSEIDON2, poseidon2.permute_state),
        (HashFamily.GRIFFIN, griffin.permute_state),
        (HashFamily.SKYSCRAPER, skyscraper.permute_state),
    ],
)
def test_dispatch_selects_family(
    family: HashFamily, permute_state: Callable[[State], State]
) -> None:
    """Each tag forwards to its own permutation."""
    state = State(x=Fr(value=1), y=Fr(value=2), z=Fr(value=3))
    assert permute(family, state) == permute_state(state)


@pytest.mark.parametrize("family", ALL_FAMILIES)
def test_permute_does_not_mutate_input(family: HashFamily) -> None:
    """The pure form returns a new state and leaves its argument alone."""
    state = State(x=Fr(value=1), y=Fr(value=2), z=Fr(value=3))
    snapshot = state.model_copy()

    result = permute(family, state)

    assert state == snapshot
    assert result is not state
    assert result != state


@settings(max_examples=5)
@given(field_elements, field_elements, field_elements)
def test_permute_matches_permute_inplace(x: Fr, y: Fr, z: Fr) -> None:
    """Both entry points compute the same transformation."""
    for family in ALL_FAMILIES:
        state = State(x=x, y=y, z=z)
        expected = permute(family, state)
        permute_inplace(family, state)
        assert state == expected


@pytest.mark.parametrize("family", ALL_FAMILIES)
def test_compress_returns_first_lane(family: HashFamily) -> None:
    """compress permutes {x, y, 0} and projects the first lane."""
    x, y = Fr(value=11), Fr(value=22)
    expected = permute(family, State(x=x, y=y, z=Fr.zero())).x
    assert compress(family, x, y) == expected


@pytest.mark.parametrize("family", ALL_FAMILIES)
def test_compress_is_not_trivial(family: HashFamily) -> None:
    """The output echoes neither input and depends on both."""
    x, y = Fr(value=11), Fr(value=22)
    out = compress(family, x, y)
    assert out not in (x, y)
    assert out != compress(family, y, x)
    assert out != compress(family, x, Fr(value=23))


@pytest.mark.parametrize("family", ALL_FAMILIES)
def test_keyed_compress_with_zero_key_is_compress(family: HashFamily) -> None:
    """A zero key leaves the capacity lane as plain compress has it."""
    x, y = Fr(value=3), Fr(value=4)
    assert keyed_compress(family, 0, x, y) == compress(family, x, y)


@pytest.mark.parametrize("family", CAPACITY_FAMILIES)
def test_keyed_compress_separates_domains(family: HashFamily) -> None:
    """Distinct keys give distinct outputs for the same inputs."""
    x, y = Fr(value=3), Fr(value=4)
    outputs = {keyed_compress(family, key, x, y) for key in (1, 2, 2**64 - 1)}
    assert len(outputs) == 3


def test_skyscraper_ignores_key() -> None:
    """Skyscraper has no capacity lane, so the key has no effect."""
    x, y = Fr(value=3), Fr(value=4)
    assert keyed_compress(HashFamily.SKYSCRAPER, 1, x, y) == keyed_compress(
        HashFamily.SKYSCRAPER, 2, x, y
    )


def test_skyscraper_preserves_capacity_lane() -> None:
    """Dispatching to Skyscraper leaves `z` as it was."""
    state = State(x=Fr(value=1), y=Fr(value=2), z=Fr(value=77))
    permute_inplace(HashFamily.SKYSCRAPER, state)
    assert state.z == Fr(value=77)


def test_skyscraper_compressions_differ() -> None:
    """The dispatcher's compress and Skyscraper's own compress are different functions."""
    x, y = Fr(value=1), Fr(value=2)
    dispatched = compress(HashFamily.SKYSCRAPER, x, y)
    feed_forward = skyscraper.compress(x, y)

    assert dispatched != feed_forward
    assert feed_forward == x + dispatched


@pytest.mark.parametrize("key", [-1, 2**64])
def test_keyed_compress_rejects_out_of_range_keys(key: int) -> None:
    """Keys must fit in 64 bits."""
    with pytest.raises(OverflowError):
        keyed_compress(HashFamily.POSEIDON2, key, Fr(value=1), Fr(value=2))
