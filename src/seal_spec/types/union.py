"""Tagged Union type."""

from __future__ import annotations

from typing import Any, ClassVar, Tuple, Type, TypeVar, cast

from pydantic import field_validator
from typing_extensions import Self

from .base import StrictBaseModel
from .exceptions import DigestVariantError
from .uint import BaseUint

OptionT = TypeVar("OptionT")

MAX_UNION_OPTIONS = 256
"""Maximum number of options allowed in a Union (one selector byte)."""


class TaggedUnion(StrictBaseModel):
    """
    Base class for tagged sum types.

    A tagged union holds exactly one value drawn from a fixed tuple of
    option types. The selector records which option is stored, so two
    options of overlapping Python types never get confused.

    ## Creating Union Types

    Inherit from TaggedUnion and define the OPTIONS class variable:

    ```python
    class NonceOrSigner(TaggedUnion):
        OPTIONS = (Uint64, ConsensusAuthority)
    ```

    ## Instance Creation

    ```python
    digest = NonceOrSigner(data=(0, Uint64(42)))
    digest = NonceOrSigner.of(ConsensusAuthority.ALICE)
    ```

    ## Reading the value back

    `project(option)` returns the stored value when the selector matches the
    requested option and `None` otherwise. `expect(option)` raises
    `DigestVariantError` on a mismatch. Neither ever coerces a value from one
    option into another.
    """

    OPTIONS: ClassVar[Tuple[Type[Any], ...]]
    """Tuple of possible types for this Union, indexed by selector."""

    data: Tuple[int, Any]
    """The union data stored as (selector, value) tuple."""

    @field_validator("data", mode="before")
    @classmethod
    def _validate_union_data(cls, v: Any) -> Tuple[int, Any]:
        """Validate and convert union data to a (selector, value) tuple."""
        if not hasattr(cls, "OPTIONS") or not isinstance(cls.OPTIONS, tuple):
            raise TypeError(f"{cls.__name__} must define OPTIONS as a tuple of types")

        options = cls.OPTIONS
        if not options:
            raise TypeError(f"{cls.__name__} OPTIONS cannot be empty")
        if len(options) > MAX_UNION_OPTIONS:
            raise TypeError(
                f"{cls.__name__} has {len(options)} options, but maximum is {MAX_UNION_OPTIONS}"
            )

        if not isinstance(v, tuple) or len(v) != 2:
            raise ValueError(
                f"{cls.__name__} data must be a (selector, value) tuple, got {type(v)}"
            )

        selector, value = v
        if not isinstance(selector, int) or isinstance(selector, bool):
            raise ValueError(f"Selector must be int, got {type(selector)}")
        if not 0 <= selector < len(options):
            raise ValueError(f"Invalid selector {selector} for {len(options)} options")

        selected_type = options[selector]
        if isinstance(value, selected_type):
            return (selector, value)

        # Plain ints are the only values lifted into an option, and only into a uint.
        if (
            issubclass(selected_type, BaseUint)
            and type(value) is int
            and 0 <= value <= selected_type.max_value()
        ):
            return (selector, selected_type(value))

        raise ValueError(
            f"{cls.__name__} option {selected_type.__name__} cannot hold {type(value).__name__}"
        )

    @classmethod
    def of(cls, value: Any) -> Self:
        """Wrap `value` under the first option it is an instance of."""
        for selector, option in enumerate(cls.OPTIONS):
            if isinstance(value, option):
                return cls(data=(selector, value))
        raise TypeError(f"{type(value).__name__} is not an option of {cls.__name__}")

    @classmethod
    def selector_of(cls, option: Type[Any]) -> int:
        """Return the selector assigned to `option`."""
        try:
            return cls.OPTIONS.index(option)
        except ValueError:
            raise TypeError(f"{option.__name__} is not an option of {cls.__name__}") from None

    @property
    def selector(self) -> int:
        """The 0-based index of the currently selected option."""
        return self.data[0]

    @property
    def value(self) -> Any:
        """The value currently stored in this Union."""
        return self.data[1]

    @property
    def selected_type(self) -> Type[Any]:
        """The type class of the currently selected option."""
        return self.OPTIONS[self.selector]

    def holds(self, option: Type[Any]) -> bool:
        """Whether the stored value belongs to `option`."""
        return self.selector == self.selector_of(option)

    def project(self, option: Type[OptionT]) -> OptionT | None:
        """Return the stored value if it is the `option` variant, else `None`."""
        if not self.holds(option):
            return None
        return cast(OptionT, self.value)

    def expect(self, option: Type[OptionT]) -> OptionT:
        """
        Return the stored value as the `option` variant.

        Raises:
            DigestVariantError: If another variant is stored.
        """
        projected = self.project(option)
        if projected is None:
            raise DigestVariantError(
                type(self).__name__, option.__name__, self.selected_type.__name__
            )
        return projected

    def __repr__(self) -> str:
        """Return a readable string representation of this Union."""
        return f"{type(self).__name__}({self.selected_type.__name__}={self.value!r})"
