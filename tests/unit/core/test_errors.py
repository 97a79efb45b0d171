"""
Tests for the Typesense client error classification system.

These tests verify the error hierarchy and helper functions for:
- Error classification based on HTTP status codes
- Retryable vs permanent error detection
- Vector query error context
"""

import pytest

from typesense_client.errors import (
    ApiConnectionError,
    ApiError,
    BadRequestError,
    ConfigurationError,
    ConflictError,
    ConflictingVectorQueryError,
    ForbiddenError,
    InvalidNumericLiteralError,
    MalformedVectorQueryError,
    MalformedVectorQueryParameterError,
    MissingVectorFieldNameError,
    NotFoundError,
    PermanentError,
    ResponseDecodeError,
    RetryableError,
    ServerError,
    ServiceUnavailableError,
    TypesenseError,
    UnauthorizedError,
    UnprocessableEntityError,
    VectorQueryError,
    classify_http_error,
    is_retryable,
)


class TestTypesenseError:
    """Tests for base TypesenseError class."""

    def test_basic_error(self):
        error = TypesenseError("Something went wrong")
        assert str(error) == "Something went wrong"
        assert error.message == "Something went wrong"
        assert error.details == {}
        assert error.original_error is None

    def test_error_with_details(self):
        error = TypesenseError("Failed", details={"collection": "companies"})
        assert error.details["collection"] == "companies"
        assert "Details:" in str(error)

    def test_error_with_original_error(self):
        original = ValueError("Original error")
        error = TypesenseError("Wrapped error", original_error=original)
        assert error.original_error is original
        assert "Caused by:" in str(error)
        assert "ValueError" in str(error)

    def test_to_dict(self):
        error = TypesenseError("Test error", details={"key": "value"}, original_error=RuntimeError("boom"))
        d = error.to_dict()
        assert d["error_type"] == "TypesenseError"
        assert d["message"] == "Test error"
        assert d["details"] == {"key": "value"}
        assert "boom" in d["original_error"]


class TestVectorQueryErrors:

    @pytest.mark.parametrize(
        "error_cls",
        [
            MalformedVectorQueryError,
            MissingVectorFieldNameError,
            ConflictingVectorQueryError,
        ],
    )
    def test_are_permanent_vector_query_errors(self, error_cls):
        error = error_cls("bad", query="vec:([])")
        assert isinstance(error, VectorQueryError)
        assert isinstance(error, PermanentError)
        assert is_retryable(error) is False
        assert error.query == "vec:([])"

    def test_invalid_numeric_literal_context(self):
        error = InvalidNumericLiteralError("not an int", parameter="k", value="ten")
        assert error.parameter == "k"
        assert error.value == "ten"
        assert error.details == {"parameter": "k", "value": "ten"}

    def test_malformed_parameter_context(self):
        error = MalformedVectorQueryParameterError("bad token", parameter="a:b:c", query="vec:([1.0], a:b:c)")
        assert error.parameter == "a:b:c"
        assert error.details["query"] == "vec:([1.0], a:b:c)"

    def test_not_value_errors(self):
        # Vector query errors must not be wrapped by pydantic's ValidationError
        assert not issubclass(VectorQueryError, ValueError)


class TestClassifyHttpError:

    @pytest.mark.parametrize(
        "status_code,error_cls",
        [
            (400, BadRequestError),
            (401, UnauthorizedError),
            (403, ForbiddenError),
            (404, NotFoundError),
            (409, ConflictError),
            (422, UnprocessableEntityError),
            (503, ServiceUnavailableError),
            (500, ServerError),
            (502, ServerError),
        ],
    )
    def test_status_mapping(self, status_code, error_cls):
        error = classify_http_error(status_code, "message")
        assert type(error) is error_cls
        assert error.status_code == status_code
        assert error.details["status_code"] == status_code
        assert error.message == "message"

    def test_unknown_client_status(self):
        error = classify_http_error(418)
        assert type(error) is ApiError
        assert "418" in error.message
        assert is_retryable(error) is False

    def test_default_message(self):
        assert classify_http_error(404).message == "HTTP error 404"
        assert "500" in classify_http_error(500).message

    def test_retryable_statuses(self):
        assert is_retryable(classify_http_error(503)) is True
        assert is_retryable(classify_http_error(500)) is True
        assert is_retryable(classify_http_error(404)) is False
        assert isinstance(classify_http_error(404), PermanentError)


class TestClientSideErrors:

    def test_connection_error_is_retryable(self):
        error = ApiConnectionError(original_error=OSError("refused"))
        assert isinstance(error, RetryableError)
        assert is_retryable(error)

    def test_decode_and_configuration_errors_are_permanent(self):
        assert isinstance(ResponseDecodeError("empty"), PermanentError)
        error = ConfigurationError()
        assert error.message == "Configuration error"
        assert is_retryable(error) is False

    def test_is_retryable_on_foreign_exception(self):
        assert is_retryable(ValueError("x")) is False
