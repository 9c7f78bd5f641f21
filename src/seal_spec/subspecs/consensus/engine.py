"""
The consensus engine contract.

An engine answers one question about a header, "is this seal valid given the
parent's seal?", and performs one action, sealing a partial header. Both are
pure: an engine holds only the configuration it was built with, and everything
else arrives as arguments. Engines are therefore safe to share across threads.
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import Generic, TypeVar

from seal_spec.subspecs.containers import Header

DigestT = TypeVar("DigestT")
"""The digest type an engine produces and checks."""


class Consensus(ABC, Generic[DigestT]):
    """
    Abstract base class for all consensus engines.

    Each engine fixes its digest type through the type parameter. Composite
    engines either forward their inner engine's digest type unchanged
    (decorators) or define a sum type over their inner engines' digests.

    A header at height 0 is genesis. Engines that schedule signers by height
    or slot have no signer for genesis: they accept it unconditionally and
    refuse to seal it. Identity engines (dictator, any-of authority set) sign
    genesis like any other header and check it like any other header.
    """

    @abstractmethod
    def validate(self, parent_digest: DigestT, header: Header[DigestT]) -> bool:
        """
        Check the seal of `header` given its parent's digest.

        Malformed input (a digest of the wrong shape, an empty configuration)
        is a rejection: the method returns `False` and never raises.
        """
        ...

    @abstractmethod
    def seal(self, parent_digest: DigestT, partial_header: Header[None]) -> Header[DigestT] | None:
        """
        Seal `partial_header` as a child of a header sealed with `parent_digest`.

        Returns:
            The sealed header, or `None` when this engine cannot seal it.
        """
        ...

    @abstractmethod
    def default_digest(self) -> DigestT:
        """
        The digest standing in for a parent that carries no meaningful seal.

        Used as the genesis digest when assembling a chain, and as the
        sentinel parent digest handed to inner engines by compositions.
        """
        ...
