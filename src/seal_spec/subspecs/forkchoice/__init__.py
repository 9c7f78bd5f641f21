"""
Fork choice rules.

Each rule implements the `ForkChoice` contract: a strict pairwise comparison
and a selection of the best among many candidate chains.
"""

from .constants import THRESHOLD
from .helpers import chain_work, even_hash_count, header_work, mine_extra_hard
from .rule import ForkChoice, ScoredForkChoice
from .rules import HeaviestChainRule, LongestChainRule, MostBlocksWithEvenHash

__all__ = [
    "THRESHOLD",
    "ForkChoice",
    "HeaviestChainRule",
    "LongestChainRule",
    "MostBlocksWithEvenHash",
    "ScoredForkChoice",
    "chain_work",
    "even_hash_count",
    "header_work",
    "mine_extra_hard",
]
