"""
Global configuration for the seal specifications.

This module contains environment-specific settings that apply across all subspecs.
"""

import os

from seal_spec.types.exceptions import ConfigurationError

_SUPPORTED_SEAL_ENVS: list[str] = ["prod", "test"]

SEAL_ENV = os.environ.get("SEAL_ENV", "prod").lower()
"""The environment flag ('prod' or 'test'). Defaults to 'prod'."""

if SEAL_ENV not in _SUPPORTED_SEAL_ENVS:
    raise ConfigurationError(
        f"Invalid SEAL_ENV environment variable: '{SEAL_ENV}'. "
        f"Supported values: {_SUPPORTED_SEAL_ENVS}"
    )
