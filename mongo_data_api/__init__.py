"""Mongo Data API - typed async client for the MongoDB Atlas Data API."""

from .api import DataAPIClient
from .core import (
    Action,
    ConfigurationError,
    DataAPIError,
    RequestFailedError,
    ResponseValidationError,
    SortDirection,
)
from .models import (
    AggregateResponse,
    DataAPIEnv,
    DeleteResponse,
    Filter,
    FilterOperators,
    FindManyResponse,
    FindOneResponse,
    InsertManyResponse,
    InsertOneResponse,
    Pipeline,
    Projection,
    Sort,
    Update,
    UpdateResponse,
    to_wire,
)
from .utils import normalize_filter_id, to_object_id

__version__ = "0.1.0"

__all__ = [
    # Client
    "DataAPIClient",
    "DataAPIEnv",
    # Core enums
    "Action",
    "SortDirection",
    # Query types
    "Filter",
    "FilterOperators",
    "Projection",
    "Sort",
    "Pipeline",
    "Update",
    # Responses
    "FindOneResponse",
    "FindManyResponse",
    "InsertOneResponse",
    "InsertManyResponse",
    "UpdateResponse",
    "DeleteResponse",
    "AggregateResponse",
    "to_wire",
    # Exceptions
    "DataAPIError",
    "ConfigurationError",
    "RequestFailedError",
    "ResponseValidationError",
    # Helpers
    "normalize_filter_id",
    "to_object_id",
]
