"""
Typesense Client Error Classification System.

This module provides a hierarchy of exceptions for the failures the client
can surface to its caller.

Error Categories:
-----------------
1. Vector Query Errors: The vector search clause is malformed
   - Outer ``name:([...], ...)`` shape missing
   - Empty vector field name
   - Non-numeric vector element, ``k`` or ``flat_search_cutoff``
   - Both or neither of a vector and an ``id``
   - Parameter token not shaped as ``key:value``

2. API Errors: The service answered with a non-2xx status
   - Bad request (HTTP 400)
   - Unauthorized / forbidden (HTTP 401/403)
   - Not found (HTTP 404)
   - Conflict (HTTP 409)
   - Unprocessable entity (HTTP 422)
   - Service unavailable (HTTP 503) and other 5xx, which are retryable

3. Client-side Errors: Configuration, transport and decoding failures

Usage:
------
    from typesense_client.errors import (
        TypesenseError,
        NotFoundError,
        VectorQueryError,
        is_retryable,
    )

    try:
        collection = client.retrieve_collection("companies")
    except NotFoundError:
        collection = client.create_collection(schema)
    except TypesenseError as e:
        if is_retryable(e):
            # Caller decides how to back off
            ...
        raise
"""

from typing import Any


class TypesenseError(Exception):
    """
    Base exception for all errors raised by the client.

    Attributes:
        message: Human-readable error description
        details: Additional context about the error (optional)
        original_error: The underlying exception that caused this error (optional)
    """

    def __init__(
        self,
        message: str,
        details: dict[str, Any] | None = None,
        original_error: Exception | None = None
    ):
        super().__init__(message)
        self.message = message
        self.details = details or {}
        self.original_error = original_error

    def __str__(self) -> str:
        base = self.message
        if self.details:
            base += f" | Details: {self.details}"
        if self.original_error:
            base += f" | Caused by: {type(self.original_error).__name__}: {self.original_error}"
        return base

    def to_dict(self) -> dict[str, Any]:
        """Convert error to dictionary for logging/serialization."""
        return {
            "error_type": type(self).__name__,
            "message": self.message,
            "details": self.details,
            "original_error": str(self.original_error) if self.original_error else None
        }


class RetryableError(TypesenseError):
    """
    Base class for errors that may succeed on retry.

    The client never retries on its own; this category only tells the
    caller that repeating the same request is reasonable.
    """
    pass


class PermanentError(TypesenseError):
    """
    Base class for errors that will not succeed on retry.

    These errors require the caller to change the request or the
    configuration before trying again.
    """
    pass


# =============================================================================
# Vector Query Errors
# =============================================================================

class VectorQueryError(PermanentError):
    """Base class for every vector search clause validation failure."""

    def __init__(
        self,
        message: str = "Malformed vector query string.",
        query: str | None = None,
        details: dict[str, Any] | None = None,
        original_error: Exception | None = None
    ):
        details = details or {}
        if query is not None:
            details["query"] = query
        super().__init__(message, details, original_error)
        self.query = query


class MalformedVectorQueryError(VectorQueryError):
    """Raised when the clause does not have the ``name:([...], ...)`` shape."""
    pass


class MissingVectorFieldNameError(VectorQueryError):
    """Raised when the vector field name is empty or whitespace."""
    pass


class InvalidNumericLiteralError(VectorQueryError):
    """
    Raised when a numeric value cannot be parsed.

    Covers vector elements (floats) as well as ``k`` and
    ``flat_search_cutoff`` (integers).

    Attributes:
        parameter: Name of the offending parameter, ``vector`` for elements
        value: The raw text that failed to parse
    """

    def __init__(
        self,
        message: str,
        parameter: str,
        value: str,
        query: str | None = None,
        original_error: Exception | None = None
    ):
        super().__init__(
            message,
            query=query,
            details={"parameter": parameter, "value": value},
            original_error=original_error,
        )
        self.parameter = parameter
        self.value = value


class ConflictingVectorQueryError(VectorQueryError):
    """Raised when both a non-empty vector and an ``id`` are given, or neither."""
    pass


class MalformedVectorQueryParameterError(VectorQueryError):
    """
    Raised when a parameter token is not a single ``key:value`` pair.

    Also covers empty keys/values, duplicated keys and values containing
    the clause delimiters.
    """

    def __init__(
        self,
        message: str,
        parameter: str,
        query: str | None = None,
    ):
        super().__init__(message, query=query, details={"parameter": parameter})
        self.parameter = parameter


# =============================================================================
# API Errors - Non-2xx answers from the service
# =============================================================================

class ApiError(TypesenseError):
    """
    Raised when the service responds with a non-success status.

    Attributes:
        status_code: HTTP status code of the response
    """

    def __init__(
        self,
        message: str,
        status_code: int,
        details: dict[str, Any] | None = None,
        original_error: Exception | None = None
    ):
        details = details or {}
        details["status_code"] = status_code
        super().__init__(message, details, original_error)
        self.status_code = status_code


class BadRequestError(ApiError, PermanentError):
    """Raised on HTTP 400."""
    pass


class UnauthorizedError(ApiError, PermanentError):
    """Raised on HTTP 401, usually a missing or invalid API key."""
    pass


class ForbiddenError(ApiError, PermanentError):
    """Raised on HTTP 403, the key lacks the required action."""
    pass


class NotFoundError(ApiError, PermanentError):
    """Raised on HTTP 404."""
    pass


class ConflictError(ApiError, PermanentError):
    """Raised on HTTP 409, e.g. creating a collection that already exists."""
    pass


class UnprocessableEntityError(ApiError, PermanentError):
    """Raised on HTTP 422."""
    pass


class ServiceUnavailableError(ApiError, RetryableError):
    """Raised on HTTP 503, the node is lagging or not ready."""
    pass


class ServerError(ApiError, RetryableError):
    """Raised on any other 5xx status."""
    pass


# =============================================================================
# Client-side Errors
# =============================================================================

class ApiConnectionError(RetryableError):
    """Raised when the HTTP transport fails before a response is received."""

    def __init__(
        self,
        message: str = "Failed to connect to service",
        details: dict[str, Any] | None = None,
        original_error: Exception | None = None
    ):
        super().__init__(message, details, original_error)


class ResponseDecodeError(PermanentError):
    """Raised when a success response body is empty or not valid JSON."""
    pass


class ConfigurationError(PermanentError):
    """
    Raised when there's a configuration problem.

    Common causes:
    - Missing API key
    - No nodes configured
    - Non-numeric port or timeout in the environment
    """

    def __init__(
        self,
        message: str = "Configuration error",
        details: dict[str, Any] | None = None,
        original_error: Exception | None = None
    ):
        super().__init__(message, details, original_error)


# =============================================================================
# Helper Functions
# =============================================================================

def is_retryable(error: Exception) -> bool:
    """
    Check if an error is retryable.

    Args:
        error: The exception to check

    Returns:
        True if the error is an instance of RetryableError
    """
    return isinstance(error, RetryableError)


_STATUS_ERRORS: dict[int, type[ApiError]] = {
    400: BadRequestError,
    401: UnauthorizedError,
    403: ForbiddenError,
    404: NotFoundError,
    409: ConflictError,
    422: UnprocessableEntityError,
    503: ServiceUnavailableError,
}


def classify_http_error(status_code: int, message: str = "") -> ApiError:
    """
    Classify an HTTP error based on status code.

    Args:
        status_code: HTTP status code
        message: Error message from the response body

    Returns:
        Appropriate ApiError subclass instance

    Example:
        if response.status_code >= 400:
            raise classify_http_error(response.status_code, response.text)
    """
    error_cls = _STATUS_ERRORS.get(status_code)
    if error_cls is not None:
        return error_cls(message or f"HTTP error {status_code}", status_code)
    if status_code >= 500:
        return ServerError(message or f"Server error (HTTP {status_code})", status_code)
    return ApiError(message or f"HTTP error {status_code}", status_code)
