"""Unsigned Integer Type Specification."""

from __future__ import annotations

from typing import Any, ClassVar, Literal, SupportsIndex, SupportsInt

from pydantic import GetCoreSchemaHandler, GetJsonSchemaHandler
from pydantic.json_schema import JsonSchemaValue
from pydantic_core import core_schema
from typing_extensions import Self


class BaseUint(int):
    """
    A base class for fixed-width unsigned integers that inherits from `int`.

    Plain arithmetic keeps the subclass and raises `OverflowError` when the
    result leaves the representable range. Callers that must never fail use
    the `checked_*` and `saturating_*` variants instead.
    """

    BITS: ClassVar[int]
    """The number of bits in the integer (overridden by subclasses)."""

    def __new__(cls, value: SupportsInt) -> Self:
        """
        Create and validate a new Uint instance.

        Raises:
            OverflowError: If `value` is outside the allowed range [0, 2**BITS - 1].
        """
        if isinstance(value, bool):
            raise TypeError(f"{cls.__name__} cannot be built from a bool")
        int_value = int(value)
        if not (0 <= int_value < (2**cls.BITS)):
            raise OverflowError(f"{int_value} is out of range for {cls.__name__}")
        return super().__new__(cls, int_value)

    @classmethod
    def max_value(cls) -> Self:
        """The largest representable value, `2**BITS - 1`."""
        return cls(2**cls.BITS - 1)

    @classmethod
    def __get_pydantic_core_schema__(
        cls, source_type: Any, handler: GetCoreSchemaHandler
    ) -> core_schema.CoreSchema:
        """Hook into Pydantic's validation system."""

        def validate(value: Any) -> BaseUint:
            """Pydantic validation function that calls the class constructor."""
            try:
                return cls(value)
            except (OverflowError, TypeError) as e:
                raise ValueError(str(e)) from e

        return core_schema.json_or_python_schema(
            json_schema=core_schema.int_schema(ge=0, lt=2**cls.BITS),
            python_schema=core_schema.no_info_plain_validator_function(validate),
            serialization=core_schema.plain_serializer_function_ser_schema(
                lambda instance: int(instance)
            ),
        )

    @classmethod
    def __get_pydantic_json_schema__(
        cls, core_schema: core_schema.CoreSchema, handler: GetJsonSchemaHandler
    ) -> JsonSchemaValue:
        """Hook into Pydantic's JSON Schema generation system."""
        json_schema = handler(core_schema)
        json_schema.update(format=f"uint{cls.BITS}")
        return json_schema

    def to_bytes(
        self,
        length: SupportsIndex | None = None,
        byteorder: Literal["little", "big"] = "little",
        *,
        signed: bool = False,
    ) -> bytes:
        """
        Return an array of bytes representing the integer.

        Defaults to little-endian and a fixed length based on `BITS`.
        """
        actual_length = self.BITS // 8 if length is None else int(length)
        return super().to_bytes(length=actual_length, byteorder=byteorder, signed=signed)

    def __add__(self, other: Any) -> Self:
        """Handle the addition operator (`+`)."""
        return type(self)(int(self) + int(other))

    def __radd__(self, other: Any) -> Self:
        """Handle the reverse addition operator (`+`)."""
        return type(self)(int(other) + int(self))

    def __sub__(self, other: Any) -> Self:
        """Handle the subtraction operator (`-`)."""
        return type(self)(int(self) - int(other))

    def __rsub__(self, other: Any) -> Self:
        """Handle the reverse subtraction operator (`-`)."""
        return type(self)(int(other) - int(self))

    def __mul__(self, other: Any) -> Self:
        """Handle the multiplication operator (`*`)."""
        return type(self)(int(self) * int(other))

    def __floordiv__(self, other: Any) -> Self:
        """Handle the floor division operator (`//`)."""
        return type(self)(int(self) // int(other))

    def __mod__(self, other: Any) -> Self:
        """Handle the modulo operator (`%`)."""
        return type(self)(int(self) % int(other))

    def checked_add(self, other: SupportsInt) -> Self | None:
        """Add `other`, returning `None` instead of overflowing."""
        result = int(self) + int(other)
        if result >= 2**self.BITS:
            return None
        return type(self)(result)

    def checked_sub(self, other: SupportsInt) -> Self | None:
        """Subtract `other`, returning `None` instead of going below zero."""
        result = int(self) - int(other)
        if result < 0:
            return None
        return type(self)(result)

    def saturating_add(self, other: SupportsInt) -> Self:
        """Add `other`, clamping at the maximum value."""
        return type(self)(min(int(self) + int(other), 2**self.BITS - 1))

    def saturating_sub(self, other: SupportsInt) -> Self:
        """Subtract `other`, clamping at zero."""
        return type(self)(max(int(self) - int(other), 0))

    def is_even(self) -> bool:
        """Whether the value is divisible by two."""
        return int(self) % 2 == 0

    def __repr__(self) -> str:
        """Return the official string representation of the object."""
        return f"{type(self).__name__}({int(self)})"

    def __str__(self) -> str:
        """Return the informal, user-friendly string representation."""
        return str(int(self))

    def __hash__(self) -> int:
        return int.__hash__(self)


class Uint8(BaseUint):
    """A type representing an 8-bit unsigned integer (uint8)."""

    BITS = 8


class Uint64(BaseUint):
    """A type representing a 64-bit unsigned integer (uint64)."""

    BITS = 64


UINT64_MAX = Uint64.max_value()
"""The largest uint64, `2**64 - 1` (the `u64::MAX` of the digest space)."""
