"""Data models."""

from .env import DataAPIEnv
from .query import Filter, FilterOperators, Pipeline, Projection, Sort, Update
from .responses import (
    AggregateResponse,
    DeleteResponse,
    DocumentT,
    FindManyResponse,
    FindOneResponse,
    InsertManyResponse,
    InsertOneResponse,
    UpdateResponse,
    to_wire,
)

__all__ = [
    "DataAPIEnv",
    "Filter",
    "FilterOperators",
    "Pipeline",
    "Projection",
    "Sort",
    "Update",
    "DocumentT",
    "FindOneResponse",
    "FindManyResponse",
    "InsertOneResponse",
    "InsertManyResponse",
    "UpdateResponse",
    "DeleteResponse",
    "AggregateResponse",
    "to_wire",
]
