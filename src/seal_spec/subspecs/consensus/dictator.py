"""
Dictator consensus.

A single fixed identity is the only one allowed to seal. There is no search
for a seal, so sealing costs nothing. The "signature" is the dictator's
`ConsensusAuthority` attached to the header.
"""

from __future__ import annotations

from seal_spec.subspecs.containers import ConsensusAuthority, Header
from seal_spec.types import StrictBaseModel

from .engine import Consensus


class DictatorConsensus(StrictBaseModel, Consensus[ConsensusAuthority]):
    """Any header signed by the dictator is valid; any other signer is not."""

    dictator: ConsensusAuthority
    """The single authority allowed to seal headers."""

    def validate(
        self, parent_digest: ConsensusAuthority, header: Header[ConsensusAuthority]
    ) -> bool:
        """Check that the header is signed by the dictator, at every height."""
        return header.consensus_digest == self.dictator

    def seal(
        self, parent_digest: ConsensusAuthority, partial_header: Header[None]
    ) -> Header[ConsensusAuthority] | None:
        """Sign the partial header as the dictator. Always succeeds, genesis included."""
        return partial_header.with_digest(self.dictator)

    def default_digest(self) -> ConsensusAuthority:
        """Genesis is signed by the dictator too."""
        return self.dictator
