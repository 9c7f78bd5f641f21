"""Tests for the proof-of-work engine."""

import pytest
from hypothesis import given, settings
from hypothesis import strategies as st

from seal_spec.subspecs.consensus import EvenOnly, Pow
from seal_spec.subspecs.consensus.constants import MODERATE_POW_THRESHOLD, TEST_POW_THRESHOLD
from seal_spec.subspecs.containers import ConsensusAuthority, SlotDigest
from seal_spec.subspecs.hashing import hash_u64
from seal_spec.types import UINT64_MAX, Uint64
from tests.seal_spec.helpers import make_header, make_partial_header


class TestPresets:
    """Difficulty presets."""

    def test_moderate_difficulty(self) -> None:
        """Roughly one nonce in a hundred."""
        assert Pow.moderate_difficulty().threshold == MODERATE_POW_THRESHOLD

    def test_from_environment_in_tests(self) -> None:
        """The test environment picks the easier target."""
        assert Pow.from_environment().threshold == TEST_POW_THRESHOLD


class TestSeal:
    """Nonce search."""

    @settings(max_examples=20)
    @given(height=st.integers(min_value=1, max_value=1000))
    def test_sealed_header_validates(self, height: int) -> None:
        """The found nonce brings the hash under the threshold."""
        engine = Pow(threshold=TEST_POW_THRESHOLD)
        partial = make_partial_header(height)
        sealed = engine.seal(Uint64(0), partial)
        assert sealed is not None
        assert sealed.unsealed() == partial
        assert hash_u64(sealed) < TEST_POW_THRESHOLD
        assert engine.validate(Uint64(0), sealed)

    def test_first_sufficient_nonce_is_chosen(self) -> None:
        """Every smaller nonce fails the threshold."""
        engine = Pow(threshold=TEST_POW_THRESHOLD)
        partial = make_partial_header(5)
        sealed = engine.seal(Uint64(0), partial)
        assert sealed is not None
        for nonce in range(int(sealed.consensus_digest)):
            assert not engine.validate(Uint64(0), partial.with_digest(Uint64(nonce)))

    def test_deterministic(self) -> None:
        """Sealing the same partial header twice gives the same header."""
        engine = Pow(threshold=TEST_POW_THRESHOLD)
        partial = make_partial_header(9)
        assert engine.seal(Uint64(0), partial) == engine.seal(Uint64(7), partial)

    def test_genesis_passes_through(self) -> None:
        """Genesis is sealed with nonce 0 without any search."""
        engine = Pow(threshold=Uint64(0))
        sealed = engine.seal(Uint64(0), make_partial_header(0))
        assert sealed is not None
        assert sealed.consensus_digest == Uint64(0)


class TestValidate:
    """Threshold checks."""

    def test_zero_threshold_rejects_everything(self) -> None:
        """No hash is below zero."""
        engine = Pow(threshold=Uint64(0))
        assert not engine.validate(Uint64(0), make_header(Uint64(3), 1))

    def test_max_threshold_accepts_almost_everything(self) -> None:
        """Only a hash equal to the maximum fails the widest target."""
        engine = Pow(threshold=UINT64_MAX)
        header = make_header(Uint64(3), 1)
        assert engine.validate(Uint64(0), header) == (hash_u64(header) != UINT64_MAX)

    def test_genesis_accepted(self) -> None:
        """Genesis needs no work."""
        assert Pow(threshold=Uint64(0)).validate(Uint64(0), make_header(Uint64(3), 0))

    def test_default_digest(self) -> None:
        """The default nonce is 0."""
        assert Pow.moderate_difficulty().default_digest() == Uint64(0)

    @pytest.mark.parametrize(
        "digest",
        [1.5, None, 3, ConsensusAuthority.ALICE, SlotDigest.genesis()],
        ids=["float", "none", "plain-int", "authority", "slot"],
    )
    def test_malformed_digest_rejected(self, digest: object) -> None:
        """A digest that is not a Uint64 nonce is a rejection, not an error."""
        engine = Pow(threshold=UINT64_MAX)
        assert not engine.validate(Uint64(0), make_header(digest, 3))

    def test_malformed_digest_rejected_through_even_only(self) -> None:
        """The decorator passes the rejection through for even state roots."""
        engine = EvenOnly(inner=Pow(threshold=UINT64_MAX))
        assert not engine.validate(Uint64(0), make_header(1.5, 3, state_root=2))
