"""
Per-header scoring and mining helpers for fork choice.

Pure functions over headers and chains; none of them verifies that a chain
is validly sealed or linked.
"""

from __future__ import annotations

import logging

from seal_spec.subspecs.containers import Block, Chain, Header
from seal_spec.subspecs.hashing import hash_u64
from seal_spec.types import Uint64

from .constants import THRESHOLD

logger = logging.getLogger(__name__)


def header_work(header: Header, threshold: Uint64 = THRESHOLD) -> Uint64:
    """
    Estimate the work that went into `header`.

    The lower a header's hash, the more nonces one expects to have tried to
    find it. The model used here is deliberately simple,
    `work = threshold - hash`, clamped at zero for hashes above the threshold.
    """
    return threshold.saturating_sub(hash_u64(header))


def chain_work(chain: Chain, threshold: Uint64 = THRESHOLD) -> int:
    """
    Sum the work of every header in `chain`.

    The total is an unbounded `int`, so long chains cannot overflow it.
    """
    return sum((int(header_work(header, threshold)) for header in chain), 0)


def even_hash_count(chain: Chain) -> int:
    """Count the headers of `chain` whose hash is even."""
    return sum(1 for header in chain if hash_u64(header).is_even())


def mine_extra_hard(block: Block, threshold: Uint64) -> Block:
    """
    Re-mine a block so that it carries more work.

    Nonces are tried from 0 upward until the header hash is both lower than
    the block's current hash and below `threshold`. The input block is left
    untouched; a new block is returned.

    Typical use is to build a child with `Block.child` and then pass it here
    for additional mining.
    """
    original_hash = hash_u64(block.header)

    nonce = 0
    while True:
        candidate = block.with_nonce(nonce)
        candidate_hash = hash_u64(candidate.header)
        if candidate_hash < original_hash and candidate_hash < threshold:
            logger.debug("Mined height %d with nonce %d", candidate.header.height, nonce)
            return candidate
        nonce += 1
