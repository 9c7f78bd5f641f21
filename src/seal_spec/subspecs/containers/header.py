"""
Header and Block containers.

A header references its parent by hash, records its height and two content
roots, and carries a consensus digest. The digest type is a parameter: the
same header shape is sealed by a signer, a nonce, a slot, or a union of them.
A header whose digest is `None` is a partial header, waiting to be sealed.

Headers are immutable. Sealing or re-sealing produces a new header.
"""

from __future__ import annotations

from typing import Any, Generic, Sequence, Tuple, TypeVar

from pydantic import field_validator
from typing_extensions import Self

from seal_spec.subspecs.hashing import hash_u64
from seal_spec.types import StrictBaseModel, Uint64

DigestT = TypeVar("DigestT")
"""The consensus digest type carried by a header."""

NewDigestT = TypeVar("NewDigestT")


class Header(StrictBaseModel, Generic[DigestT]):
    """The header of a block, parameterized by its consensus digest type."""

    parent: Uint64
    """Hash of the parent header. Zero for genesis."""

    height: Uint64
    """Distance from genesis. Genesis has height 0."""

    state_root: Uint64
    """Root of the state after applying this block."""

    extrinsics_root: Uint64
    """Root of the extrinsics included in this block."""

    consensus_digest: DigestT
    """The seal. `None` on a partial header."""

    @classmethod
    def genesis(cls, consensus_digest: Any = None) -> Header[Any]:
        """Return the genesis header, carrying `consensus_digest`."""
        return cls(
            parent=Uint64(0),
            height=Uint64(0),
            state_root=Uint64(0),
            extrinsics_root=Uint64(0),
            consensus_digest=consensus_digest,
        )

    @property
    def is_genesis(self) -> bool:
        """Whether this is a height-0 header, which no engine asks to be sealed."""
        return self.height == 0

    @property
    def is_partial(self) -> bool:
        """Whether this header still awaits a seal."""
        return self.consensus_digest is None

    def child(self, extrinsics_root: int, state_root: int) -> Header[None]:
        """
        Build the partial header that extends this one.

        Raises:
            OverflowError: If this header is already at the maximum height.
        """
        height = self.height.checked_add(1)
        if height is None:
            raise OverflowError(f"No height follows {self.height}")
        return Header(
            parent=hash_u64(self),
            height=height,
            state_root=Uint64(state_root),
            extrinsics_root=Uint64(extrinsics_root),
            consensus_digest=None,
        )

    def with_digest(self, consensus_digest: NewDigestT) -> Header[NewDigestT]:
        """Return a copy of this header sealed with `consensus_digest`."""
        return Header(
            parent=self.parent,
            height=self.height,
            state_root=self.state_root,
            extrinsics_root=self.extrinsics_root,
            consensus_digest=consensus_digest,
        )

    def unsealed(self) -> Header[None]:
        """Return the partial header this header was sealed from."""
        return self.with_digest(None)


Chain = Sequence[Header]
"""Headers ordered from ancestor to descendant."""


class Block(StrictBaseModel):
    """
    A header together with its body of extrinsics.

    The state of this toy chain is the running total of every extrinsic ever
    included, so a child's state root is its parent's plus the sum of its body.
    """

    header: Header
    """The block header."""

    body: Tuple[Uint64, ...]
    """The extrinsics included in this block."""

    @field_validator("body", mode="before")
    @classmethod
    def _body_as_tuple(cls, v: Any) -> Any:
        """Accept any sequence of extrinsics and store it as a tuple."""
        if isinstance(v, (list, tuple)):
            return tuple(Uint64(item) for item in v)
        return v

    @classmethod
    def genesis(cls) -> Self:
        """Return the genesis block: an empty body under a nonce-0 genesis header."""
        return cls(header=Header.genesis(Uint64(0)), body=())

    def child(self, body: Sequence[int]) -> Block:
        """Build the child block carrying `body`, with an unmined nonce of 0."""
        extrinsics = tuple(Uint64(item) for item in body)
        state_root = self.header.state_root
        for extrinsic in extrinsics:
            state_root = state_root.saturating_add(extrinsic)

        header = self.header.child(hash_u64(extrinsics), state_root).with_digest(Uint64(0))
        return Block(header=header, body=extrinsics)

    def with_nonce(self, nonce: int) -> Block:
        """Return this block with its header re-sealed under `nonce`."""
        return Block(header=self.header.with_digest(Uint64(nonce)), body=self.body)
