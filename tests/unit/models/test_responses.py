"""Unit tests for response models."""

from typing import Any

import pytest
from pydantic import BaseModel, ValidationError

from mongo_data_api import (
    DeleteResponse,
    FindManyResponse,
    FindOneResponse,
    InsertManyResponse,
    InsertOneResponse,
    UpdateResponse,
    to_wire,
)


class Task(BaseModel):
    text: str
    status: str


def test_update_response_aliases():
    result = UpdateResponse.model_validate({"matchedCount": 1, "modifiedCount": 0})
    assert result.matched_count == 1
    assert result.modified_count == 0
    assert result.upserted_id is None


def test_update_response_upserted_id():
    result = UpdateResponse.model_validate(
        {"matchedCount": 0, "modifiedCount": 0, "upsertedId": "abc"}
    )
    assert result.upserted_id == "abc"


def test_insert_responses():
    assert InsertOneResponse.model_validate({"insertedId": "a"}).inserted_id == "a"
    assert InsertManyResponse.model_validate({"insertedIds": ["a", "b"]}).inserted_ids == ["a", "b"]


def test_delete_response_requires_count():
    with pytest.raises(ValidationError):
        DeleteResponse.model_validate({})


def test_find_one_null_document():
    result = FindOneResponse[dict[str, Any]].model_validate({"document": None})
    assert result.document is None


def test_find_many_with_document_model():
    result = FindManyResponse[Task].model_validate(
        {"documents": [{"text": "Clean", "status": "open"}]}
    )
    assert result.documents == [Task(text="Clean", status="open")]


def test_to_wire_round_trips_body():
    body = {"documents": [{"_id": "1", "text": "Clean", "tags": ["home"]}]}
    result = FindManyResponse[dict[str, Any]].model_validate(body)
    assert to_wire(result) == body


def test_unknown_fields_kept():
    body = {"deletedCount": 1, "extra": True}
    result = DeleteResponse.model_validate(body)
    assert to_wire(result) == body


def test_find_one_requires_document_key():
    with pytest.raises(ValidationError):
        FindOneResponse[dict[str, Any]].model_validate({"docs": 1})
