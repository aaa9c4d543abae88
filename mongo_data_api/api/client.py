"""Typed client for a collection exposed through the Data API.

Architecture:
    DataAPIClient is a thin facade. Each public method packs its arguments
    into a params dict and hands an action module's SPEC and Adapter to the
    ActionRunner, which builds the envelope, sends one POST and returns the
    adapter's parsed result.

    caller -> DataAPIClient -> ActionRunner -> HTTPClient -> Data API

Design Decisions:
    - Stateless per call: the only state is the immutable DataAPIEnv and the
      lazily created HTTP session, so concurrent calls need no locking
    - No retries, caching or pagination; one call is one request
    - Responses are validated into pydantic models, so a body of the wrong
      shape raises ResponseValidationError instead of returning partial data

See Also:
    - ActionRunner: envelope building and dispatch
    - normalize_filter_id: the ``_id`` rewrite applied to every filter
"""

from __future__ import annotations

from collections.abc import Sequence
from typing import Any, Generic, TypeVar

import aiohttp

from ..actions import aggregate, delete_one, find, find_one, insert_many, insert_one, update_one
from ..actions.base import RawDocument
from ..models.env import DataAPIEnv
from ..models.query import Filter, Pipeline, Projection, Sort, Update
from ..models.responses import (
    AggregateResponse,
    DeleteResponse,
    FindManyResponse,
    FindOneResponse,
    InsertManyResponse,
    InsertOneResponse,
    UpdateResponse,
)
from ..runtime.rest import ActionRunner, HTTPClient

T = TypeVar("T")
R = TypeVar("R")


class DataAPIClient(Generic[T]):
    """Perform CRUD operations and aggregations on one collection.

    Example:
        >>> env = DataAPIEnv.from_env()
        >>> async with DataAPIClient(env, document_model=Task) as tasks:
        ...     found = await tasks.find_one({"status": {"$eq": "complete"}})
        ...     print(found.document)
    """

    def __init__(
        self,
        env: DataAPIEnv,
        *,
        document_model: type[T] | None = None,
        timeout: float = 30.0,
        session: aiohttp.ClientSession | None = None,
    ) -> None:
        """Initialize the client. Performs no I/O.

        Args:
            env: Connection settings, stored unchanged
            document_model: Type documents are validated into. Defaults to
                plain dicts, returned exactly as received.
            timeout: Total per-request timeout in seconds for sessions the
                client creates itself
            session: Optional aiohttp session to reuse; it is not closed by
                ``close()``
        """
        self._env = env
        self._document_type: Any = document_model if document_model is not None else RawDocument
        self._http = HTTPClient(timeout=timeout, session=session)
        self._runner = ActionRunner(self._http, env)

    @property
    def env(self) -> DataAPIEnv:
        return self._env

    async def find_one(
        self,
        filter: Filter,
        projection: Projection | None = None,
    ) -> FindOneResponse[T]:
        """Find a single document matching the filter.

        Args:
            filter: Filter criteria
            projection: Optional fields to include (1) or exclude (0)

        Returns:
            Response whose ``document`` is None when nothing matched

        Example:
            >>> await tasks.find_one({"status": {"$eq": "complete"}})
        """
        return await self._runner.run(
            spec=find_one.SPEC,
            adapter=find_one.Adapter(),
            params={
                "filter": filter,
                "projection": projection,
                "document_type": self._document_type,
            },
        )

    async def find(
        self,
        filter: Filter | None = None,
        projection: Projection | None = None,
        sort: Sort | None = None,
        limit: int | None = None,
        skip: int | None = None,
    ) -> FindManyResponse[T]:
        """Find documents matching the filter.

        Args:
            filter: Filter criteria; omitted means match all
            projection: Optional fields to include (1) or exclude (0)
            sort: Optional sort order, 1 ascending or -1 descending
            limit: Optional maximum number of documents
            skip: Optional number of documents to skip

        Example:
            >>> await tasks.find({"status": "complete"}, {"text": 1}, {"completedAt": -1}, 10)
        """
        return await self._runner.run(
            spec=find.SPEC,
            adapter=find.Adapter(),
            params={
                "filter": filter,
                "projection": projection,
                "sort": sort,
                "limit": limit,
                "skip": skip,
                "document_type": self._document_type,
            },
        )

    async def insert_one(self, document: T) -> InsertOneResponse:
        """Insert one document and return its inserted id."""
        return await self._runner.run(
            spec=insert_one.SPEC,
            adapter=insert_one.Adapter(),
            params={"document": document},
        )

    async def insert_many(self, documents: Sequence[T]) -> InsertManyResponse:
        """Insert several documents and return their inserted ids, in order."""
        return await self._runner.run(
            spec=insert_many.SPEC,
            adapter=insert_many.Adapter(),
            params={"documents": documents},
        )

    async def update_one(
        self,
        filter: Filter,
        update: Update | T,
        upsert: bool = False,
    ) -> UpdateResponse:
        """Update a single document matching the filter.

        Args:
            filter: Filter criteria
            update: Partial document or update operators to apply
            upsert: Insert a new document when nothing matches

        Example:
            >>> result = await tasks.update_one({"text": "Do laundry"}, {"$set": {"status": "complete"}})
            >>> result.modified_count
        """
        return await self._runner.run(
            spec=update_one.SPEC,
            adapter=update_one.Adapter(),
            params={"filter": filter, "update": update, "upsert": upsert},
        )

    async def delete_one(self, filter: Filter) -> DeleteResponse:
        """Delete a single document matching the filter."""
        return await self._runner.run(
            spec=delete_one.SPEC,
            adapter=delete_one.Adapter(),
            params={"filter": filter},
        )

    async def aggregate(
        self,
        pipeline: Pipeline,
        result_type: type[R] | None = None,
    ) -> AggregateResponse[R]:
        """Run an aggregation pipeline on the collection.

        Args:
            pipeline: Ordered aggregation stages, sent verbatim
            result_type: Optional type to validate each result document
                into; defaults to plain dicts

        Example:
            >>> await tasks.aggregate([
            ...     {"$match": {"status": "complete"}},
            ...     {"$group": {"_id": "$status", "count": {"$sum": 1}}},
            ... ])
        """
        params: dict[str, Any] = {"pipeline": pipeline}
        if result_type is not None:
            params["result_type"] = result_type
        return await self._runner.run(
            spec=aggregate.SPEC,
            adapter=aggregate.Adapter(),
            params=params,
        )

    async def close(self) -> None:
        """Close the underlying HTTP session if the client created it."""
        await self._http.close()

    async def __aenter__(self) -> DataAPIClient[T]:
        return self

    async def __aexit__(self, exc_type, exc_val, exc_tb) -> None:
        await self.close()
