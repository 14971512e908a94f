"""Shared model plumbing for Ghost Admin API payloads."""

import json
from typing import Any, ClassVar, Dict, FrozenSet, List, Optional

from pydantic import BaseModel, ConfigDict, Field, SerializerFunctionWrapHandler, model_serializer


class GhostModel(BaseModel):
    """Base model for Ghost API records.

    Unset fields are omitted from serialized output, matching the API's
    omit-when-empty convention. Fields listed in ``nullable_fields`` are the
    exception and always serialize, as an explicit ``null`` when unset.
    """

    model_config = ConfigDict(validate_by_name=True, validate_by_alias=True, extra="ignore")

    nullable_fields: ClassVar[FrozenSet[str]] = frozenset()

    @model_serializer(mode="wrap")
    def _omit_unset(self, handler: SerializerFunctionWrapHandler) -> Dict[str, Any]:
        data = handler(self)
        return {
            key: value
            for key, value in data.items()
            if value is not None or key in self.nullable_fields
        }

    def to_dict(self) -> Dict[str, Any]:
        """Return the wire representation of the record."""
        return self.model_dump(mode="json", by_alias=True)

    def to_json(self) -> str:
        """Return the wire representation as a JSON string."""
        return json.dumps(self.to_dict())


class Pagination(GhostModel):
    """Pagination state for list responses.

    ``next`` and ``prev`` are present as ``null`` on the last and first page.
    """

    nullable_fields: ClassVar[FrozenSet[str]] = frozenset({"next", "prev"})

    page: int = 0
    limit: int = 0
    total_pages: int = Field(0, alias="pages")
    total_items: int = Field(0, alias="total")
    next: Optional[int] = None
    prev: Optional[int] = None


class Meta(GhostModel):
    """Metadata block attached to list responses."""

    pagination: Pagination = Field(default_factory=Pagination)


class ErrorDetail(GhostModel):
    """A single entry of an error envelope."""

    message: str = ""
    context: Optional[str] = None
    type: Optional[str] = None


class ErrorResponse(GhostModel):
    """Error envelope returned for every status >= 400."""

    errors: List[ErrorDetail] = []
