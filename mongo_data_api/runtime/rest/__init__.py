"""REST runtime abstractions."""

from .http_client import HTTPClient
from .runner import ActionRunner, ActionSpec, ResponseAdapter

__all__ = [
    "HTTPClient",
    "ActionRunner",
    "ActionSpec",
    "ResponseAdapter",
]
