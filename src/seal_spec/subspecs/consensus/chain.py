"""
Chain assembly and verification on top of any consensus engine.

Assembly seals one child after another, each against its parent's digest.
Verification is the matching left-to-right fold: every header is validated
against the digest of the header before it.
"""

from __future__ import annotations

import logging
from typing import Any, Iterable, Tuple, TypeVar

from seal_spec.subspecs.containers import Chain, Header
from seal_spec.subspecs.hashing import hash_u64
from seal_spec.types import UINT64_MAX

from .engine import Consensus

logger = logging.getLogger(__name__)

DigestT = TypeVar("DigestT")


def is_linked(headers: Chain) -> bool:
    """
    Check that each header points at the one before it.

    A header is linked to its predecessor when its `parent` is the
    predecessor's hash and its height is one greater. The first header is
    not checked against anything, so any contiguous segment of a chain
    qualifies, not only segments starting at genesis. Nothing links after a
    header at the maximum height.
    """
    for parent, child in zip(headers, headers[1:]):
        next_height = parent.height.checked_add(1)
        if next_height is None:
            return False
        if child.parent != hash_u64(parent) or child.height != next_height:
            return False
    return True


def verify_chain(
    engine: Consensus[DigestT],
    headers: Chain,
    parent_digest: DigestT | None = None,
) -> bool:
    """
    Validate every seal in a chain segment.

    Args:
        engine: The engine whose rules the chain must follow.
        headers: The segment, ancestor first.
        parent_digest: Digest of the header preceding the segment. Defaults to
            the engine's `default_digest()`, which is right for a segment that
            starts at genesis.

    Returns:
        True if the segment is linked and every header passes `validate`.
    """
    if not is_linked(headers):
        logger.debug("Chain segment of %d headers is not linked", len(headers))
        return False

    digest: Any = engine.default_digest() if parent_digest is None else parent_digest
    for header in headers:
        if not engine.validate(digest, header):
            logger.debug("Header at height %d rejected by %s", header.height, type(engine).__name__)
            return False
        digest = header.consensus_digest
    return True


def extend_chain(
    engine: Consensus[DigestT],
    tip: Header[DigestT],
    roots: Iterable[Tuple[int, int]],
) -> list[Header[DigestT]] | None:
    """
    Seal a run of children on top of `tip`.

    Args:
        engine: The engine sealing each child.
        tip: The header to build on.
        roots: `(extrinsics_root, state_root)` for each new header, in order.

    Returns:
        The new headers, excluding `tip`, or `None` if any seal failed or the
        chain would pass the maximum height.
    """
    extension: list[Header[DigestT]] = []
    parent = tip
    for extrinsics_root, state_root in roots:
        if parent.height == UINT64_MAX:
            logger.debug("No height follows %d", parent.height)
            return None
        sealed = engine.seal(parent.consensus_digest, parent.child(extrinsics_root, state_root))
        if sealed is None:
            logger.debug(
                "%s could not seal height %d", type(engine).__name__, parent.height + 1
            )
            return None
        extension.append(sealed)
        parent = sealed
    return extension
