"""Core enumerations for Data API actions and query values.

Key Types:
    - Action: The Data API actions this client can invoke
    - SortDirection: Ascending / descending sort flags
"""

from enum import Enum


class Action(str, Enum):
    """Data API action names, exactly as they appear in the URL."""

    FIND_ONE = "findOne"
    FIND = "find"
    INSERT_ONE = "insertOne"
    INSERT_MANY = "insertMany"
    UPDATE_ONE = "updateOne"
    DELETE_ONE = "deleteOne"
    AGGREGATE = "aggregate"

    @property
    def path(self) -> str:
        """Relative endpoint path, e.g. ``action/findOne``."""
        return f"action/{self.value}"


class SortDirection(int, Enum):
    """Sort order flags accepted in a sort specification."""

    ASCENDING = 1
    DESCENDING = -1
