"""
Concrete fork choice rules.

GHOST (Greedy Heaviest Observed SubTree) is not among them: it needs blocks
that are not on any candidate chain, which the two-chains-in, verdict-out
contract does not provide.
"""

from __future__ import annotations

from seal_spec.subspecs.containers import Chain
from seal_spec.types import StrictBaseModel, Uint64

from .constants import THRESHOLD
from .helpers import chain_work, even_hash_count
from .rule import ScoredForkChoice


class LongestChainRule(StrictBaseModel, ScoredForkChoice):
    """The best chain is simply the one with the most headers."""

    def chain_score(self, chain: Chain) -> int:
        return len(chain)


class HeaviestChainRule(StrictBaseModel, ScoredForkChoice):
    """
    The best chain is the one with the most accumulated work.

    In proof-of-work chains each header embodies some amount of work: the
    lower its hash, the more nonces were likely tried to find it. Work per
    header is `max(0, threshold - hash)`; see `header_work`.
    """

    threshold: Uint64 = THRESHOLD
    """Difficulty target; headers hashing at or above it add no work."""

    def chain_score(self, chain: Chain) -> int:
        return chain_work(chain, self.threshold)


class MostBlocksWithEvenHash(StrictBaseModel, ScoredForkChoice):
    """
    The best chain is the one with the most headers whose hash is even.

    Contrived on its own, but it stands for a real family of rules that count
    headers satisfying a predicate. Examples are counting primary-authored
    blocks when secondary authors may fill in, or counting PoA blocks on an
    interleaved PoW/PoA chain and breaking ties by work.
    """

    def chain_score(self, chain: Chain) -> int:
        return even_hash_count(chain)
