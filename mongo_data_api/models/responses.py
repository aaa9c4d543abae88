"""Data API response models.

Each action returns a small JSON object. These models validate that object
so a response of the wrong shape fails loudly instead of leaking through as
a partial result. Field names follow the Data API's camelCase via aliases,
and unknown fields are kept so nothing the service sends is lost.
"""

from __future__ import annotations

from typing import Any, Generic, TypeVar

from pydantic import BaseModel, ConfigDict, Field

DocumentT = TypeVar("DocumentT")

_RESPONSE_CONFIG = ConfigDict(populate_by_name=True, extra="allow")


class FindOneResponse(BaseModel, Generic[DocumentT]):
    """Result of ``findOne``; ``document`` is always present, null when nothing matched."""

    document: DocumentT | None = Field(...)

    model_config = _RESPONSE_CONFIG


class FindManyResponse(BaseModel, Generic[DocumentT]):
    """Result of ``find``."""

    documents: list[DocumentT]

    model_config = _RESPONSE_CONFIG


class InsertOneResponse(BaseModel):
    """Result of ``insertOne``."""

    inserted_id: str = Field(..., alias="insertedId")

    model_config = _RESPONSE_CONFIG


class InsertManyResponse(BaseModel):
    """Result of ``insertMany``."""

    inserted_ids: list[str] = Field(..., alias="insertedIds")

    model_config = _RESPONSE_CONFIG


class UpdateResponse(BaseModel):
    """Result of ``updateOne``."""

    matched_count: int = Field(..., alias="matchedCount")
    modified_count: int = Field(..., alias="modifiedCount")
    upserted_id: str | None = Field(None, alias="upsertedId")

    model_config = _RESPONSE_CONFIG


class DeleteResponse(BaseModel):
    """Result of ``deleteOne``."""

    deleted_count: int = Field(..., alias="deletedCount")

    model_config = _RESPONSE_CONFIG


class AggregateResponse(BaseModel, Generic[DocumentT]):
    """Result of ``aggregate``."""

    documents: list[DocumentT]

    model_config = _RESPONSE_CONFIG


def to_wire(response: BaseModel) -> dict[str, Any]:
    """Dump a response model back to the JSON shape it was parsed from."""
    return response.model_dump(by_alias=True, exclude_unset=True, mode="json")
