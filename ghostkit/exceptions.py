"""Exception classes for the Ghost Admin API client.

This module defines the exception hierarchy raised by the client. Every
failure surfaces to the caller as a subclass of GhostKitError, except local
file errors during image upload, which propagate as the built-in OSError.
"""

from typing import Optional, Dict, Any, List


class GhostKitError(Exception):
    """Base exception class for all ghostkit errors."""

    def __init__(self, message: str, details: Optional[Dict[str, Any]] = None) -> None:
        """Initialize the exception.

        Args:
            message: Human-readable error message
            details: Optional additional error details
        """
        super().__init__(message)
        self.message = message
        self.details = details or {}


class ConfigError(GhostKitError):
    """Exception raised for configuration-related errors."""
    pass


class AuthenticationError(GhostKitError):
    """Exception raised for authentication-related errors."""
    pass


class MalformedCredentialError(AuthenticationError):
    """Exception raised when an admin key is not in "id:hex-secret" form."""
    pass


class TokenError(AuthenticationError):
    """Exception raised when a request token cannot be minted."""
    pass


class NetworkError(GhostKitError):
    """Exception raised when the HTTP exchange itself fails."""
    pass


class DecodeError(GhostKitError):
    """Exception raised when a successful response has an unexpected body."""

    def __init__(self, message: str, status_code: Optional[int] = None, body: str = "") -> None:
        """Initialize the exception.

        Args:
            message: Human-readable error message
            status_code: HTTP status code of the response
            body: Raw response body text
        """
        super().__init__(message, details={"status_code": status_code})
        self.status_code = status_code
        self.body = body


class RecordValidationError(GhostKitError):
    """Exception raised when a record given as a dict does not fit its model."""
    pass


class APIError(GhostKitError):
    """Base exception for errors reported by the Ghost server (status >= 400)."""

    def __init__(
        self,
        message: str,
        status_code: Optional[int] = None,
        response_data: Optional[Dict[str, Any]] = None,
        errors: Optional[List[Any]] = None,
    ) -> None:
        """Initialize the exception.

        Args:
            message: Human-readable error message
            status_code: HTTP status code
            response_data: Decoded error envelope, if the body was JSON
            errors: Parsed error entries from the envelope
        """
        super().__init__(message, details={"status_code": status_code})
        self.status_code = status_code
        self.response_data = response_data or {}
        self.errors = errors or []


class BadRequestError(APIError):
    """Exception raised for 400 Bad Request and 422 validation errors."""
    pass


class UnauthorizedError(APIError):
    """Exception raised for 401 Unauthorized errors."""
    pass


class ForbiddenError(APIError):
    """Exception raised for 403 Forbidden errors."""
    pass


class NotFoundError(APIError):
    """Exception raised for 404 Not Found errors."""
    pass


class ConflictError(APIError):
    """Exception raised for 409 Conflict errors, e.g. a stale updated_at."""
    pass


class RateLimitError(APIError):
    """Exception raised for 429 Rate Limit errors."""

    def __init__(
        self,
        message: str,
        retry_after: Optional[int] = None,
        **kwargs: Any
    ) -> None:
        """Initialize the exception.

        Args:
            message: Human-readable error message
            retry_after: Seconds to wait before retrying, from Retry-After
            **kwargs: Additional arguments passed to parent class
        """
        super().__init__(message, **kwargs)
        self.retry_after = retry_after


class ServerError(APIError):
    """Exception raised for 5xx server errors."""
    pass


class ResourceNotFoundError(GhostKitError):
    """Exception raised when a request succeeded but returned no records."""

    def __init__(self, kind: str, key: str = "", message: Optional[str] = None) -> None:
        """Initialize the exception.

        Args:
            kind: Singular resource name, e.g. "post"
            key: The id or slug that was looked up
            message: Override for the default message
        """
        super().__init__(message or f"{kind} not found: {key}", details={"kind": kind, "key": key})
        self.kind = kind
        self.key = key


class EmptyResultError(ResourceNotFoundError):
    """Exception raised when a create or update returns an empty collection."""

    def __init__(self, kind: str) -> None:
        super().__init__(kind, message=f"no {kind} returned")


STATUS_ERRORS = {
    400: BadRequestError,
    401: UnauthorizedError,
    403: ForbiddenError,
    404: NotFoundError,
    409: ConflictError,
    422: BadRequestError,
    429: RateLimitError,
}


def error_class_for_status(status_code: int) -> type:
    """Return the APIError subclass matching an HTTP status code."""
    if status_code in STATUS_ERRORS:
        return STATUS_ERRORS[status_code]
    if status_code >= 500:
        return ServerError
    return APIError
