"""Data API action definitions, one module per action."""

from . import aggregate, delete_one, find, find_one, insert_many, insert_one, update_one

__all__ = [
    "aggregate",
    "delete_one",
    "find",
    "find_one",
    "insert_many",
    "insert_one",
    "update_one",
]
