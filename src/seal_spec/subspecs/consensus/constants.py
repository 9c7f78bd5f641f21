"""
Consensus engine constants.

Difficulty presets for the proof-of-work engine.
"""

from typing import Final

from seal_spec.types import UINT64_MAX, Uint64

MODERATE_POW_THRESHOLD: Final[Uint64] = UINT64_MAX // 100
"""A header hash below this is a valid seal: about one nonce in a hundred."""

TEST_POW_THRESHOLD: Final[Uint64] = UINT64_MAX // 10
"""An easier target used when SEAL_ENV is 'test': about one nonce in ten."""

MAX_NONCE: Final[Uint64] = UINT64_MAX
"""The last nonce tried before a proof-of-work seal gives up."""
