"""Shared pieces for action definitions."""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import Any

from pydantic import BaseModel, ValidationError

from ..core.exceptions import ResponseValidationError
from ..runtime.rest import ResponseAdapter

# Document type used when the caller does not supply a model
RawDocument = dict[str, Any]


def dump_document(document: Any) -> Any:
    """Convert a pydantic document to its JSON form; other values pass through."""
    if isinstance(document, BaseModel):
        return document.model_dump(by_alias=True, exclude_unset=True, mode="json")
    return document


class ModelAdapter(ResponseAdapter, ABC):
    """Adapter validating a decoded body into a response model.

    Subclasses implement ``response_model``. Document-bearing responses are
    parametrized with ``params["document_type"]`` (findOne, find) or
    ``params["result_type"]`` (aggregate), defaulting to ``RawDocument``.
    """

    action: str = ""

    @abstractmethod
    def response_model(self, params: dict[str, Any]) -> type[BaseModel]:
        """Return the model the response body is validated into."""

    def parse(self, response: Any, params: dict[str, Any]) -> Any:
        model = self.response_model(params)
        try:
            return model.model_validate(response)
        except ValidationError as e:
            raise ResponseValidationError(
                f"Unexpected {self.action} response shape: {e.error_count()} validation error(s)",
                action=self.action,
                errors=e.errors(include_url=False),
            ) from e
