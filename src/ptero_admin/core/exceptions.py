"""
ptero-admin - Exception Hierarchy

This module contains all custom exceptions raised by the panel client.

Every failure surfaces as exactly one of:
- TransportError: the request never produced an HTTP status
- HTTPStatusError: non-2xx response without a decodable panel error envelope
- PanelAPIError: non-2xx response carrying the panel's error envelope
- SerializationError: local JSON encode/decode failure
"""

from datetime import datetime, timezone
from typing import Any


class PanelClientError(Exception):
    """Base exception for all panel client errors with enhanced context."""

    def __init__(
        self,
        message: str,
        error_code: str | None = None,
        context: dict[str, Any] | None = None,
    ):
        super().__init__(message)
        self.message = message
        self.error_code = error_code or self.__class__.__name__
        self.context = context or {}
        self.timestamp = datetime.now(timezone.utc)

    def to_dict(self) -> dict[str, Any]:
        """Convert exception to dictionary for structured logging."""
        return {
            "error_type": self.__class__.__name__,
            "error_code": self.error_code,
            "message": self.message,
            "context": self.context,
            "timestamp": self.timestamp.isoformat(),
        }


class ConfigurationError(PanelClientError):
    """Client not configured or invalid configuration."""


class ValidationError(PanelClientError):
    """Input parameter validation failed before any request was sent."""


class TransportError(PanelClientError):
    """The panel could not be reached (DNS, refused connection, bad URL, ...)."""

    def __init__(
        self,
        message: str,
        cause: BaseException | None = None,
        context: dict[str, Any] | None = None,
    ):
        super().__init__(message, context=context)
        self.cause = cause


class RequestTimeoutError(TransportError):
    """Request timed out before the panel answered."""


class HTTPStatusError(PanelClientError):
    """Non-2xx response whose body is not a panel error envelope."""

    def __init__(self, status_code: int, body: bytes = b"", context: dict[str, Any] | None = None):
        super().__init__(
            f"Panel returned HTTP {status_code}",
            context={"status_code": status_code, **(context or {})},
        )
        self.status_code = status_code
        self.body = body

    @property
    def text(self) -> str:
        """Response body decoded for display."""
        return self.body.decode("utf-8", errors="replace")


class PanelAPIError(PanelClientError):
    """Non-2xx response carrying a decodable panel error envelope."""

    def __init__(
        self,
        status_code: int,
        code: str,
        detail: str,
        errors: list[dict[str, Any]] | None = None,
    ):
        super().__init__(
            f"{code}: {detail}" if detail else code,
            error_code=code,
            context={"status_code": status_code},
        )
        self.status_code = status_code
        self.code = code
        self.detail = detail
        self.errors = errors or []


class SerializationError(PanelClientError):
    """Request payload could not be encoded or response body decoded."""
