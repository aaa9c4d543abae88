"""Query structure types.

These describe the shapes of filters, projections, sorts and pipelines sent
to the Data API. They are typing aids only; nothing here is enforced at
runtime and the remote service remains the authority on validity (for
example mixing inclusion and exclusion in a projection).

Example:
    >>> filter: Filter = {
    ...     "status": {"$eq": "complete"},
    ...     "completedAt": {"$gt": "2023-01-01"},
    ... }
    >>> projection: Projection = {"text": 1, "status": 1}
    >>> sort: Sort = {"completedAt": -1}
"""

from __future__ import annotations

from typing import Any, Literal, TypedDict, Union

# Operator keys start with "$", so the functional TypedDict syntax is required.
FilterOperators = TypedDict(
    "FilterOperators",
    {
        "$eq": Any,
        "$ne": Any,
        "$gt": Any,
        "$gte": Any,
        "$lt": Any,
        "$lte": Any,
        "$in": list[Any],
        "$nin": list[Any],
        "$exists": bool,
    },
    total=False,
)

FilterValue = Union[FilterOperators, Any]

# Field name -> literal value (equality) or operator mapping
Filter = dict[str, FilterValue]

Projection = dict[str, Literal[0, 1]]

Sort = dict[str, Literal[1, -1]]

# Aggregation stages are passed through verbatim
Pipeline = list[dict[str, Any]]

Update = dict[str, Any]
