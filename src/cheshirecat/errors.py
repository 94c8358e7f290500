"""Exception classes for the Cheshire Cat SDK."""

from __future__ import annotations

from enum import Enum
from typing import Any
from typing import Dict
from typing import Optional
from typing import Type

import httpx


class ErrorKind(str, Enum):
    """Semantic category of a failed operation."""
    CONNECTION = "connection"
    AUTHENTICATION = "authentication"
    NOT_FOUND = "not_found"
    VALIDATION = "validation"
    FILE_UPLOAD = "file_upload"
    WEBSOCKET = "websocket"
    GENERIC = "generic"


class CheshireCatError(Exception):
    """Base exception for all Cheshire Cat SDK errors."""

    kind: ErrorKind = ErrorKind.GENERIC
    default_message: str = "API request failed"

    def __init__(
        self,
        message: Optional[str] = None,
        status_code: Optional[int] = None,
        cause: Optional[BaseException] = None,
        details: Optional[Dict[str, Any]] = None,
        response: Optional[httpx.Response] = None,
    ) -> None:
        """Initialize Cheshire Cat error.

        Args:
            message: Error message
            status_code: HTTP status code, when a response was received
            cause: Underlying transport or I/O error
            details: Optional error details from the service
            response: HTTP response that triggered the error
        """
        message = message or self.default_message
        super().__init__(message)
        self.message = message
        self.status_code = status_code
        self.cause = cause
        self.details = details or {}
        self.response = response

    def __str__(self) -> str:
        """String representation of the error."""
        if self.status_code:
            return f"HTTP {self.status_code}: {self.message}"
        return self.message

    def __repr__(self) -> str:
        """Detailed representation of the error."""
        return (
            f"{self.__class__.__name__}("
            f"kind={self.kind.value!r}, "
            f"message={self.message!r}, "
            f"status_code={self.status_code!r}, "
            f"details={self.details!r})"
        )


class CheshireCatConnectionError(CheshireCatError):
    """Network-level failure, no response was received."""

    kind = ErrorKind.CONNECTION
    default_message = "API connection failed"


class CheshireCatAuthenticationError(CheshireCatError):
    """The service rejected the credentials (HTTP 401)."""

    kind = ErrorKind.AUTHENTICATION
    default_message = "Authentication failed"


class CheshireCatNotFoundError(CheshireCatError):
    """The requested resource does not exist (HTTP 404)."""

    kind = ErrorKind.NOT_FOUND
    default_message = "Resource not found"


class CheshireCatValidationError(CheshireCatError):
    """The service rejected the request payload (HTTP 422)."""

    kind = ErrorKind.VALIDATION
    default_message = "Validation error"


class CheshireCatAPIError(CheshireCatError):
    """Any other non-2xx response, including 5xx."""

    kind = ErrorKind.GENERIC
    default_message = "API request failed"


class CheshireCatFileUploadError(CheshireCatError):
    """Local file precondition failed before any request was sent."""

    kind = ErrorKind.FILE_UPLOAD
    default_message = "File upload failed"


class CheshireCatWebSocketError(CheshireCatError):
    """WebSocket connection or communication error."""

    kind = ErrorKind.WEBSOCKET
    default_message = "WebSocket error"

    def __init__(
        self,
        message: Optional[str] = None,
        code: Optional[int] = None,
        reason: Optional[str] = None,
        cause: Optional[BaseException] = None,
    ) -> None:
        """Initialize WebSocket error.

        Args:
            message: Error message
            code: WebSocket close code
            reason: Close reason
            cause: Underlying socket error
        """
        super().__init__(message, cause=cause)
        self.code = code
        self.reason = reason

    def __str__(self) -> str:
        """String representation of the WebSocket error."""
        base = super().__str__()
        if self.code and self.reason:
            return f"{base} (code: {self.code}, reason: {self.reason})"
        elif self.code:
            return f"{base} (code: {self.code})"
        return base


class CheshireCatConfigurationError(CheshireCatError):
    """Invalid or missing SDK configuration."""

    kind = ErrorKind.GENERIC
    default_message = "Invalid configuration"


STATUS_ERRORS: Dict[int, Type[CheshireCatError]] = {
    401: CheshireCatAuthenticationError,
    404: CheshireCatNotFoundError,
    422: CheshireCatValidationError,
}


def _error_details(response: httpx.Response) -> Dict[str, Any]:
    try:
        body = response.json()
    except ValueError:
        return {}
    if isinstance(body, dict):
        if "detail" in body:
            return {"detail": body["detail"]}
        return body
    return {"detail": body}


def map_transport_error(exc: Exception) -> CheshireCatError:
    """Translate an httpx failure into a typed SDK error.

    A response-less failure (DNS, TCP, TLS, timeout) becomes a connection
    error; a status error is classified by its HTTP status code.

    Args:
        exc: Exception raised by httpx

    Returns:
        Typed error carrying the original exception as its cause
    """
    if isinstance(exc, httpx.HTTPStatusError):
        response = exc.response
        error_class = STATUS_ERRORS.get(response.status_code, CheshireCatAPIError)
        return error_class(
            status_code=response.status_code,
            cause=exc,
            details=_error_details(response),
            response=response,
        )

    if isinstance(exc, httpx.RequestError):
        return CheshireCatConnectionError(cause=exc)

    return CheshireCatAPIError(cause=exc)
