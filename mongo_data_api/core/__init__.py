"""Core enums and exceptions."""

from .enums import Action, SortDirection
from .exceptions import (
    ConfigurationError,
    DataAPIError,
    RequestFailedError,
    ResponseValidationError,
)

__all__ = [
    "Action",
    "SortDirection",
    "DataAPIError",
    "ConfigurationError",
    "RequestFailedError",
    "ResponseValidationError",
]
