"""High-level API facade."""

from .client import DataAPIClient

__all__ = ["DataAPIClient"]
