"""findOne action definition and adapter."""

from __future__ import annotations

from typing import Any

from ..core.enums import Action
from ..models.responses import FindOneResponse
from ..runtime.rest import ActionSpec
from .base import ModelAdapter, RawDocument


def build_body(params: dict[str, Any]) -> dict[str, Any]:
    return {
        "filter": params["filter"],
        "projection": params.get("projection"),
    }


SPEC = ActionSpec(action=Action.FIND_ONE, build_body=build_body)


class Adapter(ModelAdapter):
    """Adapter for parsing a findOne response into FindOneResponse."""

    action = Action.FIND_ONE.value

    def response_model(self, params: dict[str, Any]) -> type[FindOneResponse]:
        return FindOneResponse[params.get("document_type", RawDocument)]
