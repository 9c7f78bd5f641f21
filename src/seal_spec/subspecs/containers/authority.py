"""Consensus authority identities."""

from enum import Enum


class ConsensusAuthority(Enum):
    """
    A stand-in for an authority's public key.

    Attaching a member to a header plays the role of a signature. There is no
    cryptography behind it: identities are only compared for equality, and
    members are deliberately not orderable or usable as integers.
    """

    ALICE = 0
    BOB = 1
    CHARLIE = 2
