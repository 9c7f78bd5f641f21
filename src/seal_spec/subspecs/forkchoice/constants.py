"""
Fork choice constants.

Difficulty target against which the heaviest-chain rule measures work.
"""

from typing import Final

from seal_spec.types import UINT64_MAX, Uint64

THRESHOLD: Final[Uint64] = UINT64_MAX // 100
"""Headers hashing at or above this value carry no work."""
