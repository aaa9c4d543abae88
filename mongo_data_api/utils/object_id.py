"""Object identifier normalization for request bodies."""

from __future__ import annotations

from collections.abc import Mapping
from typing import Any

# Extended JSON tag the Data API expects for ObjectId values
OBJECT_ID_TAG = "$oid"


def to_object_id(value: str) -> dict[str, str]:
    """Wrap a hex string in the tagged ObjectId form.

    Examples:
        >>> to_object_id("507f1f77bcf86cd799439011")
        {'$oid': '507f1f77bcf86cd799439011'}
    """
    return {OBJECT_ID_TAG: value}


def normalize_filter_id(body: Mapping[str, Any]) -> dict[str, Any]:
    """Rewrite a plain string ``filter._id`` into the tagged ObjectId form.

    The Data API rejects plain strings for ``_id``, so a non-empty string is
    wrapped as ``{"$oid": value}``. Anything else (no filter, no ``_id``,
    a non-string or already tagged ``_id``) passes through. Only the
    top-level filter is inspected: ``_id`` inside ``$or``/``$and`` clauses or
    inside an update document is sent as given.

    Args:
        body: Request envelope

    Returns:
        A new envelope; ``body`` itself is never modified
    """
    filter_ = body.get("filter")
    if not isinstance(filter_, Mapping):
        return dict(body)

    object_id = filter_.get("_id")
    if not object_id or not isinstance(object_id, str):
        return dict(body)

    return {**body, "filter": {**filter_, "_id": to_object_id(object_id)}}
