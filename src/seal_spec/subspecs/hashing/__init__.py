"""
Canonical encoding and the 64-bit content digest.

Fork choice rules and the proof-of-work engine consume `hash_u64` as an
opaque, deterministic `hash(x) -> u64`.
"""

from .encoding import encode
from .hash import hash_u64

__all__ = [
    "encode",
    "hash_u64",
]
