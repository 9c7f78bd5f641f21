"""
Proof of Authority consensus.

A middle ground between a single dictator and permissionless proof of work:
a fixed set of authorities may seal headers. Three schemes are provided, each
closing a weakness of the previous one:

- `SimplePoa`: any authority may seal any header. A single dishonest
  authority can flood the chain and nothing throttles it.
- `PoaRoundRobinByHeight`: authorities take turns by height. This throttles
  each authority, but one that refuses to seal its height halts the chain.
- `PoaRoundRobinBySlot`: authorities take turns by time slot. A silent
  authority only costs its own slot, because the next slot's authority may
  seal the same height. Slots must strictly increase along the chain, which
  stops an authority from replaying or back-dating a slot.
"""

from __future__ import annotations

from typing import Any, Sequence, Tuple

from pydantic import field_validator

from seal_spec.subspecs.containers import ConsensusAuthority, Header, SlotDigest
from seal_spec.types import UINT64_MAX, StrictBaseModel, Uint64

from .engine import Consensus


def round_robin_authority(
    authorities: Sequence[ConsensusAuthority], turn: int
) -> ConsensusAuthority | None:
    """
    Return the authority whose turn it is.

    Turns are counted from 1: turn 1 belongs to the first authority, and the
    schedule wraps around the list. Turn 0 (genesis, or the genesis slot) has
    no authority.

    Args:
        authorities: The ordered authority list.
        turn: The 1-based height or slot.

    Returns:
        The scheduled authority, or `None` for turn 0 or an empty list.
    """
    if turn <= 0 or not authorities:
        return None
    return authorities[(turn - 1) % len(authorities)]


class AuthoritySet(StrictBaseModel):
    """Configuration shared by the proof-of-authority engines."""

    authorities: Tuple[ConsensusAuthority, ...]
    """The authorities allowed to seal. Order fixes the round-robin schedule."""

    @field_validator("authorities", mode="before")
    @classmethod
    def _authorities_as_tuple(cls, v: Any) -> Any:
        """Accept any sequence of authorities and store it as a tuple."""
        if isinstance(v, list):
            return tuple(v)
        return v

    def first_authority(self) -> ConsensusAuthority:
        """The first configured authority, or ALICE for an empty set."""
        return self.authorities[0] if self.authorities else ConsensusAuthority.ALICE


class SimplePoa(AuthoritySet, Consensus[ConsensusAuthority]):
    """If any of the authorities signed the header, it is valid."""

    def validate(
        self, parent_digest: ConsensusAuthority, header: Header[ConsensusAuthority]
    ) -> bool:
        """Check that the header is signed by a member of the set."""
        return header.consensus_digest in self.authorities

    def seal(
        self, parent_digest: ConsensusAuthority, partial_header: Header[None]
    ) -> Header[ConsensusAuthority] | None:
        """
        Sign the partial header as the first authority.

        This engine has no notion of turns. Callers that need the load spread
        over the set should use one of the round-robin engines.
        """
        if not self.authorities:
            return None
        return partial_header.with_digest(self.authorities[0])

    def default_digest(self) -> ConsensusAuthority:
        return self.first_authority()


class PoaRoundRobinByHeight(AuthoritySet, Consensus[ConsensusAuthority]):
    """
    Only one authority is valid at each height.

    Genesis requires no seal. After that, the authority at position
    `(height - 1) mod len(authorities)` seals.
    """

    def validate(
        self, parent_digest: ConsensusAuthority, header: Header[ConsensusAuthority]
    ) -> bool:
        """Check that the header is signed by the authority scheduled for its height."""
        if header.is_genesis:
            return True

        expected = round_robin_authority(self.authorities, int(header.height))
        return expected is not None and header.consensus_digest == expected

    def seal(
        self, parent_digest: ConsensusAuthority, partial_header: Header[None]
    ) -> Header[ConsensusAuthority] | None:
        """Sign as the authority scheduled for the header's height."""
        author = round_robin_authority(self.authorities, int(partial_header.height))
        if author is None:
            return None
        return partial_header.with_digest(author)

    def default_digest(self) -> ConsensusAuthority:
        return self.first_authority()


class PoaRoundRobinBySlot(AuthoritySet, Consensus[SlotDigest]):
    """
    Only one authority is valid in each slot.

    The digest records the slot along with the signer. A header is valid when
    its signer is the authority at `(slot - 1) mod len(authorities)` and its
    slot is strictly greater than its parent's. Gaps between slots are fine.
    """

    def validate(self, parent_digest: SlotDigest, header: Header[SlotDigest]) -> bool:
        """Check the slot's scheduled signer and that the slot moved forward."""
        if header.is_genesis:
            return True

        digest = header.consensus_digest
        if not isinstance(digest, SlotDigest) or not isinstance(parent_digest, SlotDigest):
            return False

        # Slot 0 belongs to genesis and has no scheduled signer.
        expected = round_robin_authority(self.authorities, int(digest.slot))
        if expected is None or digest.signature != expected:
            return False

        return digest.slot > parent_digest.slot

    def seal(
        self, parent_digest: SlotDigest, partial_header: Header[None]
    ) -> Header[SlotDigest] | None:
        """
        Seal in the slot right after the parent's.

        This never skips a slot on its own; use `seal_in_slot` to leave a gap.
        """
        if partial_header.is_genesis or not self.authorities:
            return None
        if not isinstance(parent_digest, SlotDigest):
            return None

        slot = parent_digest.slot.checked_add(1)
        if slot is None:
            return None

        signature = round_robin_authority(self.authorities, int(slot))
        if signature is None:
            return None
        return partial_header.with_digest(SlotDigest(slot=slot, signature=signature))

    def seal_in_slot(self, slot: int, partial_header: Header[None]) -> Header[SlotDigest] | None:
        """
        Seal in an explicit slot, as the authority scheduled for it.

        This is how an authority whose predecessors stayed silent seals:
        picking a later slot than the parent's leaves a gap.
        """
        if partial_header.is_genesis or slot > UINT64_MAX:
            return None

        signature = round_robin_authority(self.authorities, slot)
        if signature is None:
            return None
        return partial_header.with_digest(SlotDigest(slot=Uint64(slot), signature=signature))

    def default_digest(self) -> SlotDigest:
        return SlotDigest.genesis(self.first_authority())
