"""insertOne action definition and adapter."""

from __future__ import annotations

from typing import Any

from ..core.enums import Action
from ..models.responses import InsertOneResponse
from ..runtime.rest import ActionSpec
from .base import ModelAdapter, dump_document


def build_body(params: dict[str, Any]) -> dict[str, Any]:
    return {"document": dump_document(params["document"])}


SPEC = ActionSpec(action=Action.INSERT_ONE, build_body=build_body)


class Adapter(ModelAdapter):
    action = Action.INSERT_ONE.value

    def response_model(self, params: dict[str, Any]) -> type[InsertOneResponse]:
        return InsertOneResponse
