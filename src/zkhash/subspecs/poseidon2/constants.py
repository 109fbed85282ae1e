"""Round constants for the width-3 Poseidon2 instance over BN254."""

from typing import List

from ..bn254 import Fr, sample_field_elements

WIDTH_3: int = 3
"""State width of the instance."""

ROUNDS_F_3: int = 8
"""Number of full rounds."""

ROUNDS_P_3: int = 56
"""Number of partial rounds."""

ROUND_CONSTANTS_3: List[Fr] = sample_field_elements(
    "poseidon2/bn254/t=3/rc", ROUNDS_F_3 * WIDTH_3 + ROUNDS_P_3
)
"""
The flat list of round constants.

Full rounds consume `WIDTH_3` constants each, partial rounds one.
"""
