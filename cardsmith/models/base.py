"""Shared pydantic base for wire-facing models."""

from typing import Any, ClassVar

from pydantic import BaseModel, ConfigDict
from pydantic.alias_generators import to_camel


class CamelModel(BaseModel):
    """
    Model serialized with camelCase keys.

    Accepts both camelCase (wire) and snake_case (Python) keys on input.
    Unknown keys are ignored, which is how client attempts to set
    server-owned fields (ids, counts, timestamps) are dropped.
    """

    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
        extra="ignore",
    )


class PatchModel(CamelModel):
    """
    Partial-update payload.

    Only fields the caller actually sent are applied. An explicit null is
    applied only for fields listed in ``nullable_fields``; for every other
    field it is treated as "not sent".
    """

    nullable_fields: ClassVar[frozenset[str]] = frozenset()

    def changes(self) -> dict[str, Any]:
        """Return the fields to merge onto the stored record."""
        return {
            key: value
            for key, value in self.model_dump(exclude_unset=True).items()
            if value is not None or key in self.nullable_fields
        }
