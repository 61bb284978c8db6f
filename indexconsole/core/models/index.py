"""
Index Models for IndexConsole.

Server-owned records as the indexing service returns them. Instances are
frozen: a refreshed snapshot is a new set of objects, never an in-place
edit of the previous one.
"""

from __future__ import annotations

from datetime import datetime
from typing import Any, List, Optional

from pydantic import BaseModel, Field, ValidationError, field_validator, model_validator

from indexconsole.core.exceptions import MalformedResponseError


class Index(BaseModel):
    """
    A named document collection managed by the indexing service.

    ``name`` is the addressing key for every user-facing operation;
    ``id`` is carried for display only.
    """

    model_config = {"frozen": True, "extra": "ignore"}

    id: Optional[str] = Field(None, description="Opaque identifier assigned by the service")
    name: str = Field(..., min_length=1, description="Unique, human-chosen name")
    description: Optional[str] = Field(None, description="Optional free text")
    document_count: int = Field(default=0, ge=0)
    created_at: Optional[datetime] = Field(None)
    updated_at: Optional[datetime] = Field(None)

    @field_validator("id", mode="before")
    @classmethod
    def _id_as_text(cls, value: Any) -> Optional[str]:
        return None if value is None else str(value)

    @model_validator(mode="after")
    def _check_timestamps(self) -> "Index":
        if self.created_at and self.updated_at and self.updated_at < self.created_at:
            raise ValueError("updated_at is earlier than created_at")
        return self


class IndexCreate(BaseModel):
    """Body of ``POST /indexes/``."""

    name: str
    description: Optional[str] = None


def parse_index(payload: Any) -> Index:
    """Validate one index record from a service payload.

    Raises:
        MalformedResponseError: If the payload is not a valid index record
    """
    try:
        return Index.model_validate(payload)
    except ValidationError as e:
        raise MalformedResponseError(f"Invalid index record: {e}") from e


def parse_index_list(payload: Any) -> List[Index]:
    """Validate the payload of ``GET /indexes/``.

    Raises:
        MalformedResponseError: If the payload is not a list of index records
    """
    if not isinstance(payload, list):
        raise MalformedResponseError(
            f"Expected a list of indexes, got {type(payload).__name__}"
        )
    return [parse_index(item) for item in payload]
