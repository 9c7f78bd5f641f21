"""
The fork choice contract.

When forks arise, a client must decide which chain it considers best for
now. There are several meaningful notions of "best", so fork choice is an
interface with interchangeable rules rather than a single function.

Chains passed to a rule need not share a genesis, or start at genesis at
all: whole disjoint histories can be compared, and so can just the divergent
suffixes of two sibling chains. Chains are assumed valid; callers unsure of
that should run `verify_chain` first.
"""

from __future__ import annotations

import logging
from abc import ABC, abstractmethod
from typing import Sequence, TypeVar

from seal_spec.subspecs.containers import Chain
from seal_spec.types import ChainSelectionError

logger = logging.getLogger(__name__)

ChainT = TypeVar("ChainT", bound=Chain)


class ForkChoice(ABC):
    """Judges which of several candidate chains is best."""

    @abstractmethod
    def first_chain_is_better(self, chain_1: Chain, chain_2: Chain) -> bool:
        """Whether `chain_1` is strictly better than `chain_2`."""
        ...

    @abstractmethod
    def best_chain(self, candidates: Sequence[ChainT]) -> ChainT:
        """
        Return the best of `candidates`.

        Raises:
            ChainSelectionError: If `candidates` is empty.
        """
        ...


class ScoredForkChoice(ForkChoice):
    """
    A fork choice rule that ranks chains by a numeric score.

    Any monotone aggregate over the headers of a chain fits here: its length,
    its accumulated work, the number of headers satisfying some predicate.
    The highest score wins, and among equal scores the earliest candidate.
    """

    @abstractmethod
    def chain_score(self, chain: Chain) -> int:
        """Score `chain`; higher is better."""
        ...

    def first_chain_is_better(self, chain_1: Chain, chain_2: Chain) -> bool:
        """Compare the two scores strictly."""
        return self.chain_score(chain_1) > self.chain_score(chain_2)

    def best_chain(self, candidates: Sequence[ChainT]) -> ChainT:
        """Return the first candidate with the highest score."""
        if not candidates:
            raise ChainSelectionError(f"{type(self).__name__} needs at least one candidate chain")

        scores = [self.chain_score(chain) for chain in candidates]
        best_index = max(range(len(candidates)), key=scores.__getitem__)
        logger.debug(
            "%s picked candidate %d of %d with score %d",
            type(self).__name__,
            best_index,
            len(candidates),
            scores[best_index],
        )
        return candidates[best_index]
