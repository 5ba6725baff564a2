"""
ptero-admin - Error Handling Helpers

This module provides input validators and user-friendly error response
generation for command-line callers.
"""

import json
import logging
from datetime import datetime, timezone
from typing import Any, Dict

from ..core.exceptions import (
    ConfigurationError,
    HTTPStatusError,
    PanelAPIError,
    PanelClientError,
    RequestTimeoutError,
    SerializationError,
    TransportError,
    ValidationError,
)

logger = logging.getLogger("ptero-admin")


class ErrorResponse:
    """Structured error response with user-friendly messaging."""

    def __init__(self, error: Exception, operation: str):
        """Initialize error response.

        Args:
            error: The exception that occurred
            operation: Name of the operation that failed
        """
        self.error = error
        self.operation = operation
        self.timestamp = datetime.now(timezone.utc)
        self.error_id = f"{operation}_{int(self.timestamp.timestamp())}"

    def get_user_message(self) -> str:
        """Get user-friendly error message.

        Returns:
            Human-readable error message
        """
        if isinstance(self.error, ConfigurationError):
            return f"Panel connection not configured: {self.error.message}"
        elif isinstance(self.error, ValidationError):
            return f"Invalid input: {self.error.message}"
        elif isinstance(self.error, RequestTimeoutError):
            return "Request timed out. The panel may be overloaded or unreachable."
        elif isinstance(self.error, TransportError):
            return "Cannot connect to the panel. Please check the URL and network connectivity."
        elif isinstance(self.error, PanelAPIError):
            return f"Panel rejected the request ({self.error.code}): {self.error.detail}"
        elif isinstance(self.error, HTTPStatusError):
            if self.error.status_code in (401, 403):
                return "Authentication failed. Please check your application API key."
            elif self.error.status_code == 404:
                return "The requested resource was not found."
            return f"Panel returned HTTP {self.error.status_code}."
        elif isinstance(self.error, SerializationError):
            return f"Could not process panel data: {self.error.message}"
        else:
            return f"An unexpected error occurred during {self.operation}."

    def get_technical_details(self) -> Dict[str, Any]:
        """Get technical error details for logging.

        Returns:
            Dictionary containing technical error information
        """
        details = {
            "error_id": self.error_id,
            "operation": self.operation,
            "timestamp": self.timestamp.isoformat(),
            "error_type": type(self.error).__name__,
            "message": str(self.error),
        }

        if isinstance(self.error, PanelClientError):
            details.update(self.error.to_dict())

        if isinstance(self.error, HTTPStatusError):
            details["status_code"] = self.error.status_code
            details["response_text"] = self.error.text
        elif isinstance(self.error, PanelAPIError):
            details["status_code"] = self.error.status_code
            details["errors"] = self.error.errors

        return details

    def log(self) -> None:
        logger.error(f"Error in {self.operation}: {json.dumps(self.get_technical_details(), default=str)}")


def validate_resource_id(resource_id: Any, operation: str) -> None:
    """Validate a numeric panel identifier.

    Args:
        resource_id: Identifier to validate
        operation: Operation name for error context

    Raises:
        ValidationError: If the identifier is not a non-negative integer
    """
    if isinstance(resource_id, bool) or not isinstance(resource_id, int) or resource_id < 0:
        raise ValidationError(
            f"Invalid resource id: {resource_id!r}",
            context={"resource_id": repr(resource_id), "operation": operation, "expected": "non-negative integer"},
        )


def validate_external_id(external_id: Any, operation: str) -> None:
    """Validate an external identifier.

    Raises:
        ValidationError: If the identifier is not a non-empty string
    """
    if not isinstance(external_id, str) or not external_id.strip():
        raise ValidationError(
            f"Invalid external id: {external_id!r}",
            context={"external_id": repr(external_id), "operation": operation, "expected": "non-empty string"},
        )
