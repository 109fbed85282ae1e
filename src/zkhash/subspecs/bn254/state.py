"""The three-lane state shared by every permutation family."""

from pydantic import BaseModel, ConfigDict, Field

from .field import Fr


class State(BaseModel):
    """
    Working registers of a width-3 permutation.

    `x` and `y` carry the compression inputs. `z` is the capacity lane, used
    to carry a key for domain separation.

    Unlike field elements, a state is mutable so that permutations can be
    applied in place. Assignments are still validated.
    """

    model_config = ConfigDict(extra="forbid", validate_assignment=True)

    x: Fr
    y: Fr
    z: Fr = Field(default_factory=Fr.zero)
