"""find action definition and adapter.

A missing filter is sent as ``{}`` so the request matches every document
rather than omitting the field.
"""

from __future__ import annotations

from typing import Any

from ..core.enums import Action
from ..models.responses import FindManyResponse
from ..runtime.rest import ActionSpec
from .base import ModelAdapter, RawDocument


def build_body(params: dict[str, Any]) -> dict[str, Any]:
    filter_ = params.get("filter")
    return {
        "filter": {} if filter_ is None else filter_,
        "projection": params.get("projection"),
        "sort": params.get("sort"),
        "limit": params.get("limit"),
        "skip": params.get("skip"),
    }


SPEC = ActionSpec(action=Action.FIND, build_body=build_body)


class Adapter(ModelAdapter):
    """Adapter for parsing a find response into FindManyResponse."""

    action = Action.FIND.value

    def response_model(self, params: dict[str, Any]) -> type[FindManyResponse]:
        return FindManyResponse[params.get("document_type", RawDocument)]
