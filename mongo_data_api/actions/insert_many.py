"""insertMany action definition and adapter."""

from __future__ import annotations

from typing import Any

from ..core.enums import Action
from ..models.responses import InsertManyResponse
from ..runtime.rest import ActionSpec
from .base import ModelAdapter, dump_document


def build_body(params: dict[str, Any]) -> dict[str, Any]:
    return {"documents": [dump_document(document) for document in params["documents"]]}


SPEC = ActionSpec(action=Action.INSERT_MANY, build_body=build_body)


class Adapter(ModelAdapter):
    action = Action.INSERT_MANY.value

    def response_model(self, params: dict[str, Any]) -> type[InsertManyResponse]:
        return InsertManyResponse
