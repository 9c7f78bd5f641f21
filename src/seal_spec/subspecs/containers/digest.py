"""
Consensus digest containers.

A digest is the engine-specific payload that proves a header was sealed
correctly: a signer, a nonce, a slot with a signer, or a tagged union that
can hold one of several of those.
"""

from __future__ import annotations

from typing import Self

from seal_spec.types import StrictBaseModel, TaggedUnion, Uint64

from .authority import ConsensusAuthority


class SlotDigest(StrictBaseModel):
    """
    Digest for round-robin-by-slot authority schemes.

    Along a valid chain the slot strictly increases from parent to child.
    Slots may be skipped, so the increase can be larger than one.
    """

    slot: Uint64
    """The slot the header was sealed in. Slot 0 is reserved for genesis."""

    signature: ConsensusAuthority
    """The authority that sealed the header."""

    @classmethod
    def genesis(cls, signature: ConsensusAuthority = ConsensusAuthority.ALICE) -> Self:
        """The slot-0 digest a genesis header carries."""
        return cls(slot=Uint64(0), signature=signature)


class PowOrPoaDigest(TaggedUnion):
    """
    Digest of a chain that interleaves proof-of-work and proof-of-authority.

    Holds either a PoW nonce or a PoA signer. Reading it as the other variant
    never silently converts: `project` yields `None` and the `nonce` /
    `authority` accessors raise `DigestVariantError`.
    """

    OPTIONS = (Uint64, ConsensusAuthority)

    @classmethod
    def from_nonce(cls, nonce: int) -> Self:
        """Wrap a proof-of-work nonce."""
        return cls(data=(cls.selector_of(Uint64), Uint64(nonce)))

    @classmethod
    def from_authority(cls, authority: ConsensusAuthority) -> Self:
        """Wrap a proof-of-authority signer."""
        return cls(data=(cls.selector_of(ConsensusAuthority), authority))

    @property
    def is_pow(self) -> bool:
        """Whether a nonce is stored."""
        return self.holds(Uint64)

    @property
    def is_poa(self) -> bool:
        """Whether a signer is stored."""
        return self.holds(ConsensusAuthority)

    @property
    def nonce(self) -> Uint64:
        """The stored nonce. Raises `DigestVariantError` for a PoA digest."""
        return self.expect(Uint64)

    @property
    def authority(self) -> ConsensusAuthority:
        """The stored signer. Raises `DigestVariantError` for a PoW digest."""
        return self.expect(ConsensusAuthority)
