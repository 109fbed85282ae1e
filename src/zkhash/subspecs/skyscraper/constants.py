"""
Round parameters of the Skyscraper permutation over BN254.

A Skyscraper instance is fully described by its round schedule: which S-box
each round applies to the left half of the state, and the constants added
to the right half on every round except the first and the last.
"""

import json
import logging
from enum import Enum
from pathlib import Path
from typing import List

from pydantic import BaseModel, ConfigDict, Field, model_validator

from zkhash.config import SKYSCRAPER_PARAMS_PATH

from ..bn254 import Fr, sample_field_elements

logger = logging.getLogger(__name__)


class SBox(str, Enum):
    """The nonlinear layer applied by a single round."""

    SQUARE = "square"
    """Field squaring, `x -> x^2`."""

    BAR = "bar"
    """The byte-oriented Bar map on the raw encoding."""


class SkyscraperParams(BaseModel):
    """Parameters for a specific Skyscraper instance."""

    model_config = ConfigDict(frozen=True, arbitrary_types_allowed=True)

    round_functions: List[SBox] = Field(
        min_length=2,
        description="The S-box selected by each round, in order.",
    )
    round_constants: List[Fr] = Field(
        description="Constants added to the right half on the interior rounds.",
    )

    @model_validator(mode="after")
    def check_lengths(self) -> "SkyscraperParams":
        """Ensures there is exactly one constant per interior round."""
        if len(self.round_constants) != len(self.round_functions) - 2:
            raise ValueError("Number of round constants must equal number of rounds minus two.")
        return self

    @property
    def rounds(self) -> int:
        """Total number of rounds."""
        return len(self.round_functions)


S, B = SBox.SQUARE, SBox.BAR

ROUND_FUNCTIONS_BN254: List[SBox] = [S, S, S, S, B, B, S, S, B, B, B, B, S, S, B, B, S, S]
"""
The round schedule for BN254.

Rounds come in pairs. The first two pairs and the last pair square.
"""

ROUND_CONSTANTS_BN254: List[Fr] = sample_field_elements(
    "skyscraper/bn254/rc", len(ROUND_FUNCTIONS_BN254) - 2
)
"""The constants for the interior rounds of the BN254 instance."""


def load_params(path: str | Path) -> SkyscraperParams:
    """
    Load a Skyscraper round table from a JSON file.

    The file holds the selectors by name and the constants in their Montgomery
    encoding, the form in which reference tables are usually published::

        {"round_functions": ["square", "bar", ...], "round_constants_raw": [123, ...]}

    Args:
        path: Location of the JSON table.

    Returns:
        The validated parameters.

    Raises:
        ValueError: If the table is malformed.
        OSError: If the file cannot be read.
    """
    with open(path, encoding="utf-8") as f:
        table = json.load(f)

    try:
        raw_constants = table["round_constants_raw"]
        round_functions = [SBox(name) for name in table["round_functions"]]
    except KeyError as e:
        raise ValueError(f"Skyscraper table {path} is missing {e}") from e

    params = SkyscraperParams(
        round_functions=round_functions,
        round_constants=[Fr.from_montgomery(int(raw)) for raw in raw_constants],
    )
    logger.debug("Loaded %d-round Skyscraper table from %s", params.rounds, path)
    return params


PARAMS_BN254 = SkyscraperParams(
    round_functions=ROUND_FUNCTIONS_BN254,
    round_constants=ROUND_CONSTANTS_BN254,
)
"""The bundled BN254 instance."""

PARAMS = load_params(SKYSCRAPER_PARAMS_PATH) if SKYSCRAPER_PARAMS_PATH else PARAMS_BN254
"""The instance used by default, overridable through `ZKHASH_SKYSCRAPER_PARAMS`."""
