"""Tests for chain assembly and verification."""

from hypothesis import given
from hypothesis import strategies as st

from seal_spec.subspecs.consensus import (
    DictatorConsensus,
    PoaRoundRobinByHeight,
    Pow,
    extend_chain,
    is_linked,
    verify_chain,
)
from seal_spec.subspecs.containers import ConsensusAuthority, Header
from seal_spec.subspecs.hashing import hash_u64
from seal_spec.types import UINT64_MAX, Uint64
from tests.seal_spec.helpers import build_pow_chain

ALICE = ConsensusAuthority.ALICE
BOB = ConsensusAuthority.BOB


class TestIsLinked:
    """Parent hashes and heights."""

    def test_children_are_linked(self) -> None:
        """Headers built with `child` link up."""
        genesis = Header.genesis(ALICE)
        first = genesis.child(1, 1).with_digest(ALICE)
        second = first.child(2, 2).with_digest(ALICE)
        assert is_linked([genesis, first, second])

    def test_trivial_chains(self) -> None:
        """Empty and single-header chains are linked."""
        assert is_linked([])
        assert is_linked([Header.genesis(ALICE)])

    def test_wrong_parent(self) -> None:
        """A child of another header does not link."""
        genesis = Header.genesis(ALICE)
        other = Header.genesis(BOB)
        assert not is_linked([genesis, other.child(1, 1).with_digest(ALICE)])

    def test_wrong_height(self) -> None:
        """A skipped height does not link."""
        genesis = Header.genesis(ALICE)
        child = genesis.child(1, 1).with_digest(ALICE)
        assert not is_linked([genesis, child.replace(height=2)])

    def test_resealing_breaks_link(self) -> None:
        """The parent hash covers the parent's digest."""
        genesis = Header.genesis(ALICE)
        child = genesis.child(1, 1).with_digest(ALICE)
        assert not is_linked([genesis.with_digest(BOB), child])

    def test_no_height_after_maximum(self) -> None:
        """A header cannot follow one at the maximum height, even with a matching hash."""
        top = Header.genesis(ALICE).replace(height=UINT64_MAX)
        child = Header(
            parent=hash_u64(top),
            height=0,
            state_root=0,
            extrinsics_root=0,
            consensus_digest=ALICE,
        )
        assert not is_linked([top, child])
        assert not verify_chain(DictatorConsensus(dictator=ALICE), [top, child])


class TestExtendChain:
    """Sealing runs of children."""

    @given(length=st.integers(min_value=0, max_value=10))
    def test_dictator_chain(self, length: int) -> None:
        """Every new header is signed and the result verifies."""
        engine = DictatorConsensus(dictator=BOB)
        genesis = Header.genesis(engine.default_digest())
        extension = extend_chain(engine, genesis, [(i, i) for i in range(length)])
        assert extension is not None
        assert len(extension) == length
        assert [h.height for h in extension] == list(range(1, length + 1))
        assert verify_chain(engine, [genesis, *extension])

    def test_failure_returns_none(self) -> None:
        """If any seal fails the whole extension is abandoned."""
        engine = PoaRoundRobinByHeight(authorities=[])
        assert extend_chain(engine, Header.genesis(ALICE), [(1, 1)]) is None

    def test_stops_at_maximum_height(self) -> None:
        """Extending past the maximum height is unsealable."""
        engine = DictatorConsensus(dictator=ALICE)
        top = Header.genesis(ALICE).replace(height=UINT64_MAX)
        assert extend_chain(engine, top, [(1, 1)]) is None


class TestVerifyChain:
    """Folding `validate` along a chain."""

    def test_pow_segment(self) -> None:
        """A segment not starting at genesis verifies from its parent's digest."""
        engine = Pow.from_environment()
        chain = build_pow_chain(engine, 5)
        assert verify_chain(engine, chain, parent_digest=Uint64(0))

    def test_unlinked_rejected(self) -> None:
        """Valid seals in the wrong order do not make a valid chain."""
        engine = Pow.from_environment()
        chain = build_pow_chain(engine, 3)
        assert not verify_chain(engine, [chain[0], chain[2], chain[1]])

    def test_bad_seal_rejected(self) -> None:
        """One foreign signer invalidates the chain."""
        engine = DictatorConsensus(dictator=ALICE)
        genesis = Header.genesis(ALICE)
        intruder = genesis.child(1, 1).with_digest(BOB)
        assert verify_chain(engine, [genesis])
        assert not verify_chain(engine, [genesis, intruder])

    def test_empty_chain(self) -> None:
        """There is nothing to reject in an empty chain."""
        assert verify_chain(DictatorConsensus(dictator=ALICE), [])
