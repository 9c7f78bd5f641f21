"""
Canonical byte encoding (`encode`).

The encoding only needs to be deterministic and injective enough for
hashing; it is not a wire format and is never decoded.
"""

from __future__ import annotations

from enum import Enum
from functools import singledispatch

from pydantic import BaseModel

from seal_spec.types import BaseUint, TaggedUnion, Uint8, Uint64


@singledispatch
def encode(value: object) -> bytes:
    """
    Encode `value` to its canonical byte string.

    Concrete specializations are registered below with `@encode.register(Type)`.

    Raises:
        TypeError: If `value` has no registered specialization.
    """
    raise TypeError(f"encode: unsupported value type {type(value).__name__}")


@encode.register
def _encode_uint(value: BaseUint) -> bytes:
    """Fixed-width integers use their natural little-endian width."""
    return value.to_bytes()


@encode.register
def _encode_int(value: int) -> bytes:
    """Plain ints are encoded as uint64."""
    return Uint64(value).to_bytes()


@encode.register(type(None))
def _encode_none(value: None) -> bytes:
    """The unit digest of a partial header contributes nothing."""
    return b""


@encode.register
def _encode_enum(value: Enum) -> bytes:
    """Enum members are encoded by their integer value in one byte."""
    return Uint8(value.value).to_bytes()


@encode.register
def _encode_tuple(value: tuple) -> bytes:
    """Sequences carry a uint64 length prefix followed by their items."""
    return Uint64(len(value)).to_bytes() + b"".join(encode(item) for item in value)


@encode.register
def _encode_union(value: TaggedUnion) -> bytes:
    """A one-byte selector followed by the selected value."""
    return Uint8(value.selector).to_bytes() + encode(value.value)


@encode.register
def _encode_model(value: BaseModel) -> bytes:
    """Models concatenate their fields in declaration order."""
    return b"".join(encode(getattr(value, name)) for name in type(value).model_fields)
