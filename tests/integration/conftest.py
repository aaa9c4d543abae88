"""Shared fixtures for integration tests.

Tests here need a live Data API; run with RUN_MONGO_DATA_API_TESTS=1 and the
MONGO_API_URL, MONGO_API_KEY, DATABASE, COLLECTION and DATA_SOURCE variables set.
"""

import pytest

from mongo_data_api import DataAPIEnv


@pytest.fixture
def live_env() -> DataAPIEnv:
    return DataAPIEnv.from_env()
