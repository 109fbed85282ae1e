"""Constants for the width-3 Griffin instance over BN254."""

from typing import List, Tuple

from ..bn254 import P, Fr, sample_field_element, sample_field_elements

WIDTH_3: int = 3
"""State width of the instance."""

ROUNDS_3: int = 14
"""Number of rounds."""

D: int = 5
"""The power map degree; `gcd(D, P - 1) = 1`."""

D_INV: int = pow(D, -1, P - 1)
"""The exponent of the inverse power map, `D^-1 mod (P - 1)`."""

ROUND_CONSTANTS_3: List[Fr] = sample_field_elements(
    "griffin/bn254/t=3/rc", (ROUNDS_3 - 1) * WIDTH_3
)
"""Flat list of round constants, `WIDTH_3` per round except the last one."""


def _sample_alpha_beta(domain: str) -> Tuple[Fr, Fr]:
    """
    Sample the coefficients of the quadratic in Griffin's third lane.

    `x^2 + alpha*x + beta` must have no root in the field, so candidates are
    drawn until `alpha^2 - 4*beta` is a quadratic non-residue.
    """
    counter = 0
    while True:
        alpha = sample_field_element(f"{domain}/alpha", counter)
        beta = sample_field_element(f"{domain}/beta", counter)
        if not (alpha * alpha - Fr(value=4) * beta).is_square():
            return alpha, beta
        counter += 1


ALPHA_3, BETA_3 = _sample_alpha_beta("griffin/bn254/t=3")
"""Coefficients of the nonlinear layer's quadratic."""
