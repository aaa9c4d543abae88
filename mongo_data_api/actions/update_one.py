"""updateOne action definition and adapter.

``upsert`` is always sent, defaulting to False.
"""

from __future__ import annotations

from typing import Any

from ..core.enums import Action
from ..models.responses import UpdateResponse
from ..runtime.rest import ActionSpec
from .base import ModelAdapter, dump_document


def build_body(params: dict[str, Any]) -> dict[str, Any]:
    return {
        "filter": params["filter"],
        "update": dump_document(params["update"]),
        "upsert": bool(params.get("upsert", False)),
    }


SPEC = ActionSpec(action=Action.UPDATE_ONE, build_body=build_body)


class Adapter(ModelAdapter):
    action = Action.UPDATE_ONE.value

    def response_model(self, params: dict[str, Any]) -> type[UpdateResponse]:
        return UpdateResponse
