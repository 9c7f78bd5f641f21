"""
Proof of Work consensus.

A header is sealed by searching for a nonce that brings the header's hash
below a difficulty threshold. Anyone may seal, which makes the scheme
permissionless, at the price of the search.
"""

from __future__ import annotations

import logging
from typing import Self

from seal_spec.config import SEAL_ENV
from seal_spec.subspecs.containers import Header
from seal_spec.subspecs.hashing import hash_u64
from seal_spec.types import StrictBaseModel, Uint64

from .constants import MAX_NONCE, MODERATE_POW_THRESHOLD, TEST_POW_THRESHOLD
from .engine import Consensus

logger = logging.getLogger(__name__)


class Pow(StrictBaseModel, Consensus[Uint64]):
    """
    A proof-of-work engine over a `Uint64` nonce digest.

    The parent digest plays no part: the work lives entirely in the header's
    own hash. Genesis needs no work; it is accepted as-is and sealed with
    nonce 0 without searching.
    """

    threshold: Uint64
    """A header whose hash is strictly below this value is validly sealed."""

    @classmethod
    def moderate_difficulty(cls) -> Self:
        """An engine where roughly one nonce in a hundred is a valid seal."""
        return cls(threshold=MODERATE_POW_THRESHOLD)

    @classmethod
    def from_environment(cls) -> Self:
        """The moderate preset in 'prod', an easier target in 'test'."""
        if SEAL_ENV == "test":
            return cls(threshold=TEST_POW_THRESHOLD)
        return cls.moderate_difficulty()

    def validate(self, parent_digest: Uint64, header: Header[Uint64]) -> bool:
        """Check that the header carries a nonce and its hash meets the threshold."""
        if header.is_genesis:
            return True
        if not isinstance(header.consensus_digest, Uint64):
            return False
        return hash_u64(header) < self.threshold

    def seal(self, parent_digest: Uint64, partial_header: Header[None]) -> Header[Uint64] | None:
        """
        Search nonces from 0 upward until the header hash meets the threshold.

        Returns:
            The sealed header, or `None` if every nonce was tried without success.
        """
        if partial_header.is_genesis:
            return partial_header.with_digest(Uint64(0))

        nonce = 0
        while nonce <= MAX_NONCE:
            header = partial_header.with_digest(Uint64(nonce))
            if hash_u64(header) < self.threshold:
                logger.debug(
                    "Sealed height %d with nonce %d after %d attempts",
                    header.height,
                    nonce,
                    nonce + 1,
                )
                return header
            nonce += 1

        logger.debug("Nonce space exhausted at height %d", partial_header.height)
        return None

    def default_digest(self) -> Uint64:
        return Uint64(0)
