"""
The container types for the seal specifications.

Headers, blocks and the consensus digests engines attach to them. All
containers are frozen pydantic models; the content digest used by fork choice
is computed over their canonical encoding.
"""

from .authority import ConsensusAuthority
from .digest import PowOrPoaDigest, SlotDigest
from .header import Block, Chain, Header

__all__ = [
    "Block",
    "Chain",
    "ConsensusAuthority",
    "Header",
    "PowOrPoaDigest",
    "SlotDigest",
]
