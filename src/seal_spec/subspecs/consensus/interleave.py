"""
Interleaved proof-of-work / proof-of-authority consensus.

Odd heights are sealed with work, even heights by an authority. The two inner
engines have different digest types, so this engine exposes a sum type over
them, `PowOrPoaDigest`, and converts between the unified header and the
single-engine headers its inner engines understand.

The parent digest of an alternating chain switches variant at every step, so
it never has the type the engine sealing the child expects. Inner engines are
therefore always handed their own `default_digest()` as the parent digest.
Neither proof of work nor the any-of authority set reads it; an inner engine
that did would not see the real parent here.

The inner engines are checked at construction through their default digests:
the odd-height engine must seal with `Uint64` nonces and the even-height one
with `ConsensusAuthority` signers. A slot-scheduled engine, or the two engines
swapped, is refused.
"""

from __future__ import annotations

from typing import Self

from pydantic import model_validator

from seal_spec.subspecs.containers import ConsensusAuthority, Header, PowOrPoaDigest
from seal_spec.types import StrictBaseModel, Uint64

from .engine import Consensus


class AlternatingPowPoa(StrictBaseModel, Consensus[PowOrPoaDigest]):
    """
    Alternates between proof-of-work and proof-of-authority sealed headers.

    Odd heights are PoW, even heights are PoA. A digest whose variant does not
    match its height's parity is rejected without consulting either engine.
    """

    pow: Consensus
    """The engine sealing odd heights, over `Uint64` nonces."""

    poa: Consensus
    """The engine sealing even heights, over `ConsensusAuthority` signers."""

    @model_validator(mode="after")
    def _check_inner_digest_types(self) -> Self:
        """Require a nonce engine for odd heights and a signer engine for even ones."""
        if not isinstance(self.pow.default_digest(), Uint64):
            raise ValueError(f"pow engine {type(self.pow).__name__} does not seal with nonces")
        if not isinstance(self.poa.default_digest(), ConsensusAuthority):
            raise ValueError(
                f"poa engine {type(self.poa).__name__} does not seal with authority signatures"
            )
        return self

    @staticmethod
    def uses_poa(height: int) -> bool:
        """Even heights are sealed by authority, odd heights by work."""
        return height % 2 == 0

    def validate(self, parent_digest: PowOrPoaDigest, header: Header[PowOrPoaDigest]) -> bool:
        """Project the digest onto the variant the height demands, then delegate."""
        if header.is_genesis:
            return True

        digest = header.consensus_digest
        if not isinstance(digest, PowOrPoaDigest):
            return False

        if self.uses_poa(int(header.height)):
            authority = digest.project(ConsensusAuthority)
            if authority is None:
                return False
            return self.poa.validate(self.poa.default_digest(), header.with_digest(authority))

        nonce = digest.project(Uint64)
        if nonce is None:
            return False
        return self.pow.validate(self.pow.default_digest(), header.with_digest(nonce))

    def seal(
        self, parent_digest: PowOrPoaDigest, partial_header: Header[None]
    ) -> Header[PowOrPoaDigest] | None:
        """Seal with the engine the height selects and wrap its digest."""
        if self.uses_poa(int(partial_header.height)):
            signed = self.poa.seal(self.poa.default_digest(), partial_header)
            if signed is None or not isinstance(signed.consensus_digest, ConsensusAuthority):
                return None
            return signed.with_digest(PowOrPoaDigest.from_authority(signed.consensus_digest))

        mined = self.pow.seal(self.pow.default_digest(), partial_header)
        if mined is None or not isinstance(mined.consensus_digest, Uint64):
            return None
        return mined.with_digest(PowOrPoaDigest.from_nonce(mined.consensus_digest))

    def default_digest(self) -> PowOrPoaDigest:
        """Genesis sits at an even height, so its digest is the PoA variant."""
        return PowOrPoaDigest.from_authority(self.poa.default_digest())
