"""The 64-bit content digest (`hash_u64`)."""

from __future__ import annotations

import hashlib

from seal_spec.types import Uint64

from .encoding import encode


def hash_u64(value: object) -> Uint64:
    """
    Digest `value` to a uint64.

    The canonical encoding is hashed with SHA-256 and the first eight bytes
    of the digest are read as a little-endian integer. Unlike the builtin
    `hash`, the result is stable across processes.
    """
    digest = hashlib.sha256(encode(value)).digest()
    return Uint64(int.from_bytes(digest[:8], "little"))
