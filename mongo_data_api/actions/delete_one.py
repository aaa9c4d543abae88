"""deleteOne action definition and adapter."""

from __future__ import annotations

from typing import Any

from ..core.enums import Action
from ..models.responses import DeleteResponse
from ..runtime.rest import ActionSpec
from .base import ModelAdapter


def build_body(params: dict[str, Any]) -> dict[str, Any]:
    return {"filter": params["filter"]}


SPEC = ActionSpec(action=Action.DELETE_ONE, build_body=build_body)


class Adapter(ModelAdapter):
    action = Action.DELETE_ONE.value

    def response_model(self, params: dict[str, Any]) -> type[DeleteResponse]:
        return DeleteResponse
