"""Utility helpers."""

from .object_id import OBJECT_ID_TAG, normalize_filter_id, to_object_id

__all__ = ["OBJECT_ID_TAG", "normalize_filter_id", "to_object_id"]
