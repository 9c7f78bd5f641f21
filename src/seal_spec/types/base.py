"""Reusable, strict base models for the specification."""

from typing import Any, Self

from pydantic import BaseModel, ConfigDict
from pydantic.alias_generators import to_camel


class CamelModel(BaseModel):
    """
    A base model that converts field names to camel case when serializing.

    The field `extrinsics_root` is emitted as `extrinsicsRoot`, which keeps
    dumped headers and chains readable next to fixtures produced by other clients.
    """

    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
        validate_default=True,
        arbitrary_types_allowed=True,
    )

    def replace(self: Self, **changes: Any) -> Self:
        """Return a validated copy of the model with `changes` applied."""
        fields = {name: getattr(self, name) for name in type(self).model_fields}
        return self.__class__(**(fields | changes))


class StrictBaseModel(CamelModel):
    """A strict, immutable pydantic base model."""

    model_config = CamelModel.model_config | {
        "extra": "forbid",
        "frozen": True,
        "strict": True,
    }
