"""aggregate action definition and adapter.

Pipeline stages are opaque to the client and sent exactly as given.
"""

from __future__ import annotations

from typing import Any

from ..core.enums import Action
from ..models.responses import AggregateResponse
from ..runtime.rest import ActionSpec
from .base import ModelAdapter, RawDocument


def build_body(params: dict[str, Any]) -> dict[str, Any]:
    return {"pipeline": list(params["pipeline"])}


SPEC = ActionSpec(action=Action.AGGREGATE, build_body=build_body)


class Adapter(ModelAdapter):
    """Adapter for parsing an aggregate response into AggregateResponse."""

    action = Action.AGGREGATE.value

    def response_model(self, params: dict[str, Any]) -> type[AggregateResponse]:
        # Aggregation output rarely matches the collection's document model
        return AggregateResponse[params.get("result_type", RawDocument)]
