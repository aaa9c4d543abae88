"""Unit tests for exception hierarchy."""

from mongo_data_api import (
    ConfigurationError,
    DataAPIError,
    RequestFailedError,
    ResponseValidationError,
)


def test_request_failed_error_includes_status():
    error = RequestFailedError(401, action="findOne")
    assert "401" in str(error)
    assert str(error) == "Request failed with status 401"
    assert error.status_code == 401
    assert error.action == "findOne"
    assert isinstance(error, DataAPIError)


def test_response_validation_error_context():
    error = ResponseValidationError("bad shape", action="find", errors=[{"loc": ("documents",)}])
    assert error.action == "find"
    assert error.errors == [{"loc": ("documents",)}]
    assert isinstance(error, DataAPIError)


def test_configuration_error_missing():
    error = ConfigurationError("missing", missing=["MONGO_API_KEY"])
    assert error.missing == ["MONGO_API_KEY"]
    assert ConfigurationError("x").missing == []
