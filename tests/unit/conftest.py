"""Shared fixtures for unit tests."""

from __future__ import annotations

import json
from typing import Any
from unittest.mock import AsyncMock, MagicMock

import pytest

from mongo_data_api import DataAPIEnv


@pytest.fixture
def env() -> DataAPIEnv:
    return DataAPIEnv(
        api_url="https://data.mongodb-api.com/app/data-abc/endpoint/data/v1",
        api_key="secret-key",
        database="todo",
        collection="tasks",
        data_source="Cluster0",
    )


def make_response(status: int = 200, payload: Any = None, text: str | None = None) -> AsyncMock:
    """Build a fake aiohttp response usable as an async context manager.

    The body is ``text`` when given, else ``payload`` serialized as JSON.
    """
    response = AsyncMock()
    response.status = status
    response.text = AsyncMock(return_value=json.dumps(payload) if text is None else text)
    response.__aenter__ = AsyncMock(return_value=response)
    response.__aexit__ = AsyncMock(return_value=None)
    return response


def make_session(*responses: AsyncMock) -> MagicMock:
    session = MagicMock()
    session.closed = False  # Important: session property checks this
    session.post = MagicMock(side_effect=list(responses))
    return session


def sent_body(session: MagicMock, call: int = -1) -> dict[str, Any]:
    """Return the JSON body passed to session.post."""
    return session.post.call_args_list[call].kwargs["json"]


@pytest.fixture
def session_factory():
    return make_session


@pytest.fixture
def response_factory():
    return make_response
