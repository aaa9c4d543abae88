"""HTTP client helper."""

from __future__ import annotations

import json as jsonlib
from typing import Any

import aiohttp

from ...core.exceptions import RequestFailedError


class HTTPClient:
    """Async HTTP client wrapper.

    Sends exactly one request per call. There is no retry, throttling or
    rate-limit handling; every failure goes straight back to the caller.
    """

    def __init__(
        self,
        timeout: float = 30.0,
        session: aiohttp.ClientSession | None = None,
    ) -> None:
        self.timeout = aiohttp.ClientTimeout(total=timeout)
        self._session = session
        # Caller-supplied sessions are left open on close()
        self._owns_session = session is None

    @property
    def session(self) -> aiohttp.ClientSession:
        """Get or create session."""
        if self._session is None or self._session.closed:
            self._session = aiohttp.ClientSession(timeout=self.timeout)
            self._owns_session = True
        return self._session

    async def post(
        self,
        url: str,
        json: Any = None,
        headers: dict[str, str] | None = None,
    ) -> Any:
        """POST a JSON body and decode the JSON response.

        Raises:
            RequestFailedError: If the status is outside 200-299. The body
                is not read in that case.
            json.JSONDecodeError: If a successful response is not valid JSON,
                including an empty body
            aiohttp.ClientError: On transport failure
        """
        async with self.session.post(url, json=json, headers=headers) as response:
            if not 200 <= response.status < 300:
                raise RequestFailedError(response.status)
            # Decode regardless of the content type the server labelled the body with
            return jsonlib.loads(await response.text())

    async def close(self) -> None:
        """Close session."""
        if self._owns_session and self._session and not self._session.closed:
            await self._session.close()

    async def __aenter__(self) -> HTTPClient:
        """Context manager entry."""
        return self

    async def __aexit__(self, exc_type, exc_val, exc_tb) -> None:
        """Context manager exit."""
        await self.close()
