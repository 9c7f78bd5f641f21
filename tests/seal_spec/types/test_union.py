"""Tests for the tagged union type."""

import pytest
from pydantic import ValidationError

from seal_spec.subspecs.containers import ConsensusAuthority, PowOrPoaDigest
from seal_spec.types import DigestVariantError, TaggedUnion, Uint64


class NonceOrSigner(TaggedUnion):
    """Union mirroring the interleaved digest."""

    OPTIONS = (Uint64, ConsensusAuthority)


class TestConstruction:
    """Building union values."""

    def test_selector_and_value(self) -> None:
        """The data tuple is exposed through selector and value."""
        union = NonceOrSigner(data=(0, Uint64(42)))
        assert union.selector == 0
        assert union.value == Uint64(42)
        assert union.selected_type is Uint64

    def test_value_is_coerced_to_selected_type(self) -> None:
        """A plain int under the Uint64 option becomes a Uint64."""
        union = NonceOrSigner(data=(0, 7))
        assert isinstance(union.value, Uint64)

    @pytest.mark.parametrize(
        "data",
        [
            (1, 0),
            (1, Uint64(0)),
            (0, ConsensusAuthority.ALICE),
            (0, True),
            (0, -1),
            (0, 2**64),
            (0, "7"),
        ],
    )
    def test_value_of_another_type_is_rejected(self, data: tuple[int, object]) -> None:
        """Values are never converted across options or from foreign types."""
        with pytest.raises(ValidationError):
            NonceOrSigner(data=data)

    def test_of_picks_matching_option(self) -> None:
        """`of` infers the selector from the value's type."""
        assert NonceOrSigner.of(ConsensusAuthority.BOB).selector == 1
        assert NonceOrSigner.of(Uint64(3)).selector == 0

    def test_of_rejects_foreign_values(self) -> None:
        """Values of no option type are refused."""
        with pytest.raises(TypeError):
            NonceOrSigner.of("alice")

    @pytest.mark.parametrize("selector", [-1, 2])
    def test_invalid_selector(self, selector: int) -> None:
        """Selectors must index OPTIONS."""
        with pytest.raises(ValueError):
            NonceOrSigner(data=(selector, Uint64(0)))

    def test_unknown_option(self) -> None:
        """Asking for the selector of a non-option fails."""
        with pytest.raises(TypeError):
            NonceOrSigner.selector_of(str)


class TestProjection:
    """Reading a union back as one of its variants."""

    def test_project_matching_variant(self) -> None:
        """Projection onto the stored variant returns the value."""
        union = NonceOrSigner.of(ConsensusAuthority.ALICE)
        assert union.project(ConsensusAuthority) == ConsensusAuthority.ALICE

    def test_project_other_variant_is_none(self) -> None:
        """Projection onto another variant returns None, never a converted value."""
        union = NonceOrSigner.of(ConsensusAuthority.ALICE)
        assert union.project(Uint64) is None

    def test_expect_other_variant_raises(self) -> None:
        """Strict reads of the wrong variant raise DigestVariantError."""
        union = NonceOrSigner.of(Uint64(0))
        with pytest.raises(DigestVariantError) as excinfo:
            union.expect(ConsensusAuthority)
        assert excinfo.value.expected == "ConsensusAuthority"
        assert excinfo.value.actual == "Uint64"


class TestPowOrPoaDigest:
    """The interleaved PoW/PoA digest."""

    def test_nonce_variant(self) -> None:
        """A nonce digest reports PoW and exposes the nonce."""
        digest = PowOrPoaDigest.from_nonce(99)
        assert digest.is_pow and not digest.is_poa
        assert digest.nonce == Uint64(99)

    def test_authority_variant(self) -> None:
        """An authority digest reports PoA and exposes the signer."""
        digest = PowOrPoaDigest.from_authority(ConsensusAuthority.CHARLIE)
        assert digest.is_poa and not digest.is_pow
        assert digest.authority == ConsensusAuthority.CHARLIE

    def test_wrong_accessor_fails_explicitly(self) -> None:
        """Reading a nonce from a PoA digest raises instead of coercing."""
        digest = PowOrPoaDigest.from_authority(ConsensusAuthority.ALICE)
        with pytest.raises(DigestVariantError):
            _ = digest.nonce

    def test_nonce_is_not_an_authority(self) -> None:
        """A nonce wrapped as a signer fails instead of becoming ALICE."""
        with pytest.raises(ValidationError):
            PowOrPoaDigest.from_authority(Uint64(0))  # type: ignore[arg-type]

    def test_variants_are_distinct(self) -> None:
        """ALICE (value 0) and nonce 0 are different digests."""
        assert PowOrPoaDigest.from_nonce(0) != PowOrPoaDigest.from_authority(
            ConsensusAuthority.ALICE
        )

    def test_immutable(self) -> None:
        """Digests are frozen."""
        digest = PowOrPoaDigest.from_nonce(1)
        with pytest.raises(ValidationError):
            digest.data = (0, Uint64(2))  # type: ignore[misc]
