"""Data API environment (connection settings) model."""

from __future__ import annotations

import os
from collections.abc import Mapping

from pydantic import BaseModel, ConfigDict, Field

from ..core.exceptions import ConfigurationError


class DataAPIEnv(BaseModel):
    """The five settings a client needs to reach one collection.

    Values are treated as opaque strings; nothing is checked against the
    remote service until an operation is attempted.
    """

    api_url: str = Field(..., alias="MONGO_API_URL", description="Data API base URL")
    api_key: str = Field(..., alias="MONGO_API_KEY", description="Data API key", repr=False)
    database: str = Field(..., alias="DATABASE")
    collection: str = Field(..., alias="COLLECTION")
    data_source: str = Field(..., alias="DATA_SOURCE", description="Cluster alias")

    model_config = ConfigDict(frozen=True, populate_by_name=True)

    @classmethod
    def from_env(
        cls,
        environ: Mapping[str, str] | None = None,
        prefix: str = "",
    ) -> DataAPIEnv:
        """Build an environment from process environment variables.

        Args:
            environ: Mapping to read from (defaults to ``os.environ``)
            prefix: Optional prefix prepended to every variable name,
                e.g. ``"TASKS_"`` reads ``TASKS_MONGO_API_URL``

        Returns:
            DataAPIEnv instance

        Raises:
            ConfigurationError: If any of the variables is unset
        """
        source = os.environ if environ is None else environ
        values: dict[str, str] = {}
        missing: list[str] = []
        for name, field in cls.model_fields.items():
            var = f"{prefix}{field.alias}"
            if var in source:
                values[name] = source[var]
            else:
                missing.append(var)
        if missing:
            raise ConfigurationError(
                f"Missing Data API environment variables: {', '.join(missing)}",
                missing=missing,
            )
        return cls(**values)

    def with_collection(self, collection: str) -> DataAPIEnv:
        """Return a copy of this environment pointing at another collection."""
        return self.model_copy(update={"collection": collection})
