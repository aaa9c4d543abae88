"""Custom exception hierarchy."""

from __future__ import annotations

from typing import Any


class DataAPIError(Exception):
    """Base exception for all library errors."""

    pass


class ConfigurationError(DataAPIError):
    """Client environment is incomplete."""

    def __init__(self, message: str, missing: list[str] | None = None) -> None:
        super().__init__(message)
        self.missing = missing or []


class RequestFailedError(DataAPIError):
    """Data API answered with a non-success HTTP status.

    The response body is not inspected, so 4xx and 5xx responses surface
    the same way and only the status code is available.
    """

    def __init__(self, status_code: int, action: str | None = None) -> None:
        super().__init__(f"Request failed with status {status_code}")
        self.status_code = status_code
        self.action = action


class ResponseValidationError(DataAPIError):
    """Response body decoded fine but does not have the expected shape."""

    def __init__(
        self,
        message: str,
        action: str | None = None,
        errors: list[dict[str, Any]] | None = None,
    ) -> None:
        super().__init__(message)
        self.action = action
        self.errors = errors or []
