"""
Pluggable consensus engines.

Every engine implements the `Consensus` contract (`validate` and `seal`)
over its own digest type. Simple engines check signers or work; composite
engines decorate another engine (`EvenOnly`) or interleave two engines of
different digest types (`AlternatingPowPoa`).
"""

from .chain import extend_chain, is_linked, verify_chain
from .dictator import DictatorConsensus
from .engine import Consensus
from .even_only import EvenOnly
from .interleave import AlternatingPowPoa
from .poa import (
    PoaRoundRobinByHeight,
    PoaRoundRobinBySlot,
    SimplePoa,
    round_robin_authority,
)
from .pow import Pow

__all__ = [
    "AlternatingPowPoa",
    "Consensus",
    "DictatorConsensus",
    "EvenOnly",
    "PoaRoundRobinByHeight",
    "PoaRoundRobinBySlot",
    "Pow",
    "SimplePoa",
    "extend_chain",
    "is_linked",
    "round_robin_authority",
    "verify_chain",
]
