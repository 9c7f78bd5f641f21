"""
Even-state-root consensus decorator.

A higher-order engine: it wraps any inner engine and additionally requires
the header's state root to be even. It works on top of proof of work, proof
of authority, or any other engine, and forwards the inner digest type.
"""

from __future__ import annotations

from typing import Generic

from seal_spec.subspecs.containers import Header
from seal_spec.types import StrictBaseModel

from .engine import Consensus, DigestT


class EvenOnly(StrictBaseModel, Consensus[DigestT], Generic[DigestT]):
    """
    Requires an even state root on top of the inner engine's own rules.

    The decorator only ever adds a constraint: anything the inner engine
    rejects stays rejected, at every height.
    """

    inner: Consensus
    """The wrapped engine, whose rules are enforced as well."""

    def validate(self, parent_digest: DigestT, header: Header[DigestT]) -> bool:
        """Accept only headers both the inner engine and the parity rule accept."""
        if not header.state_root.is_even():
            return False
        return self.inner.validate(parent_digest, header)

    def seal(self, parent_digest: DigestT, partial_header: Header[None]) -> Header[DigestT] | None:
        """Refuse odd state roots before asking the inner engine to seal."""
        if not partial_header.state_root.is_even():
            return None
        return self.inner.seal(parent_digest, partial_header)

    def default_digest(self) -> DigestT:
        return self.inner.default_digest()
