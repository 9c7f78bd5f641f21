"""Reusable type definitions for the seal specifications."""

from .base import CamelModel, StrictBaseModel
from .exceptions import (
    ChainSelectionError,
    ConfigurationError,
    DigestVariantError,
    SealSpecError,
)
from .uint import UINT64_MAX, BaseUint, Uint8, Uint64
from .union import TaggedUnion

__all__ = [
    # Core types
    "BaseUint",
    "Uint8",
    "Uint64",
    "UINT64_MAX",
    "CamelModel",
    "StrictBaseModel",
    "TaggedUnion",
    # Exceptions
    "SealSpecError",
    "ConfigurationError",
    "DigestVariantError",
    "ChainSelectionError",
]
