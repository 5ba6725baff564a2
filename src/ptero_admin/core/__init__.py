"""
ptero-admin - Core Infrastructure

Request dispatch, error decoding, configuration and the exception hierarchy.
"""

from .client import PanelClient, RequestResponseLogger
from .config_loader import ConfigLoader
from .errors import ErrorEnvelope, decode_error
from .exceptions import (
    ConfigurationError,
    HTTPStatusError,
    PanelAPIError,
    PanelClientError,
    RequestTimeoutError,
    SerializationError,
    TransportError,
    ValidationError,
)
from .models import LooseValue, Meta, PanelConfig

__all__ = [
    # Exceptions
    "PanelClientError",
    "ConfigurationError",
    "ValidationError",
    "TransportError",
    "RequestTimeoutError",
    "HTTPStatusError",
    "PanelAPIError",
    "SerializationError",
    # Models
    "PanelConfig",
    "Meta",
    "LooseValue",
    # Client
    "PanelClient",
    "RequestResponseLogger",
    # Errors
    "ErrorEnvelope",
    "decode_error",
    # Configuration
    "ConfigLoader",
]
