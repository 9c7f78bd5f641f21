"""Exception hierarchy for the seal specifications."""

from __future__ import annotations


class SealSpecError(Exception):
    """
    Base exception for all errors raised by this package.

    Rejections and unsealable headers are not errors: they are reported as
    `False` from `validate` and `None` from `seal`.

    Attributes:
        message: Human-readable error description.
    """

    def __init__(self, message: str) -> None:
        self.message = message
        super().__init__(message)

    def __repr__(self) -> str:
        return f"{self.__class__.__name__}({self.message!r})"


class ConfigurationError(SealSpecError, ValueError):
    """Raised when the environment selects an unsupported configuration."""


class DigestVariantError(SealSpecError, TypeError):
    """
    Raised when a tagged union is read as a variant it does not hold.

    Attributes:
        union_name: Name of the union type that was read.
        expected: Name of the option the caller asked for.
        actual: Name of the option actually stored.
    """

    def __init__(self, union_name: str, expected: str, actual: str) -> None:
        self.union_name = union_name
        self.expected = expected
        self.actual = actual
        super().__init__(f"{union_name} holds {actual}, not {expected}")


class ChainSelectionError(SealSpecError, ValueError):
    """Raised when a fork choice rule is asked to pick from no candidates."""
