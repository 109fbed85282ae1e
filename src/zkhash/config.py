"""
Global configuration for the zkhash specifications.

This module contains environment-specific settings that apply across all subspecs.
"""

import os

_SUPPORTED_ZKHASH_ENVS: list[str] = ["prod", "test"]

ZKHASH_ENV = os.environ.get("ZKHASH_ENV", "prod").lower()
"""The environment flag ('prod' or 'test'). Defaults to 'prod' for the specs."""

if ZKHASH_ENV not in _SUPPORTED_ZKHASH_ENVS:
    raise ValueError(
        f"Invalid ZKHASH_ENV environment variable: '{ZKHASH_ENV}'. "
        f"Supported values: {_SUPPORTED_ZKHASH_ENVS}"
    )

CHECK_INVARIANTS: bool = ZKHASH_ENV == "test" or os.environ.get("ZKHASH_CHECK_INVARIANTS") == "1"
"""
Whether unchecked constructors verify their preconditions.

Enabled in the test environment, or explicitly with `ZKHASH_CHECK_INVARIANTS=1`.
"""

SKYSCRAPER_PARAMS_PATH: str | None = os.environ.get("ZKHASH_SKYSCRAPER_PARAMS") or None
"""Optional path to a JSON round table replacing the bundled Skyscraper parameters."""
