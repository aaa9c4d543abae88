"""Data API action runner using action specs and response adapters."""

from __future__ import annotations

import logging
from collections.abc import Callable
from dataclasses import dataclass
from typing import Any

from pydantic_core import to_jsonable_python

from ...core.enums import Action
from ...core.exceptions import RequestFailedError
from ...models.env import DataAPIEnv
from ...utils.object_id import normalize_filter_id
from .http_client import HTTPClient

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class ActionSpec:
    action: Action
    # Operation-specific envelope fields; None values are dropped before sending
    build_body: Callable[[dict[str, Any]], dict[str, Any]]


class ResponseAdapter:
    def parse(self, response: Any, params: dict[str, Any]) -> Any:
        return response


class ActionRunner:
    """Turns an action spec plus parameters into one Data API request."""

    def __init__(self, http: HTTPClient, env: DataAPIEnv) -> None:
        self._http = http
        self._env = env

    def build_envelope(self, spec: ActionSpec, params: dict[str, Any]) -> dict[str, Any]:
        """Assemble the request body for ``spec``.

        The data source, database and collection always come from the
        environment. Optional fields left as None are omitted, and a
        string ``filter._id`` is tagged as an ObjectId. Values plain JSON
        cannot carry (datetimes, UUIDs, pydantic models) are converted to
        their JSON form, datetimes as ISO 8601 strings.
        """
        body = {
            "dataSource": self._env.data_source,
            "database": self._env.database,
            "collection": self._env.collection,
            **spec.build_body(params),
        }
        body = {key: value for key, value in body.items() if value is not None}
        return to_jsonable_python(normalize_filter_id(body))

    def build_headers(self) -> dict[str, str]:
        return {
            "Content-Type": "application/json",
            "api-key": self._env.api_key,
        }

    def build_url(self, spec: ActionSpec) -> str:
        return f"{self._env.api_url.rstrip('/')}/{spec.action.path}"

    async def run(
        self, *, spec: ActionSpec, adapter: ResponseAdapter, params: dict[str, Any]
    ) -> Any:
        body = self.build_envelope(spec, params)
        logger.debug(
            "Sending Data API request",
            extra={
                "action": spec.action.value,
                "database": self._env.database,
                "collection": self._env.collection,
            },
        )

        try:
            data = await self._http.post(self.build_url(spec), json=body, headers=self.build_headers())
        except RequestFailedError as e:
            e.action = spec.action.value
            logger.debug(
                "Data API request failed",
                extra={"action": spec.action.value, "status_code": e.status_code},
            )
            raise

        logger.debug("Data API request completed", extra={"action": spec.action.value})
        return adapter.parse(data, params)
