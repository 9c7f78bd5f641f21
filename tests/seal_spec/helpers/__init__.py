"""Test helpers for seal_spec unit tests."""

from __future__ import annotations

from .builders import (
    Fork,
    build_fork_longer_vs_heavier,
    build_pow_chain,
    find_child,
    make_header,
    make_partial_header,
    nonce_chain_child,
)

__all__ = [
    "Fork",
    "build_fork_longer_vs_heavier",
    "build_pow_chain",
    "find_child",
    "make_header",
    "make_partial_header",
    "nonce_chain_child",
]
