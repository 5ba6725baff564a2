"""
ptero-admin - API Client

This module provides the client class every resource accessor funnels
through. A PanelClient is built once from a PanelConfig and carries the only
state the library needs; it performs exactly one HTTP round trip per call
and never retries.
"""

import json
import logging
import ssl
import time
from typing import Any, Dict, Optional, Type, TypeVar

import certifi
import httpx
from pydantic import BaseModel
from pydantic import ValidationError as PydanticValidationError

from ..shared.constants import (
    API_NAMESPACE,
    BODYLESS_METHODS,
    CONTENT_TYPE_JSON,
    SUPPORTED_METHODS,
    USER_AGENT,
)
from .errors import decode_error
from .exceptions import (
    RequestTimeoutError,
    SerializationError,
    TransportError,
    ValidationError,
)
from .models import PanelConfig

logger = logging.getLogger("ptero-admin")

ModelT = TypeVar("ModelT", bound=BaseModel)


class RequestResponseLogger:
    """Framework for logging API requests and responses with sensitive data protection."""

    SENSITIVE_HEADERS = ("authorization", "x-api-key", "cookie")

    def __init__(self, logger: logging.Logger):
        """Initialize request/response logger.

        Args:
            logger: Logger instance to use for logging
        """
        self.logger = logger

    def log_request(
        self,
        method: str,
        url: str,
        headers: Optional[Dict] = None,
        body: Optional[bytes] = None,
        operation: str = "unknown"
    ):
        """Log API request details with sensitive data sanitization.

        Args:
            method: HTTP method
            url: Request URL
            headers: Request headers
            body: Request payload
            operation: Operation name for context
        """
        safe_headers = {}
        if headers:
            for key, value in headers.items():
                if key.lower() in self.SENSITIVE_HEADERS:
                    safe_headers[key] = '[REDACTED]'
                else:
                    safe_headers[key] = value

        log_data = {
            "operation": operation,
            "request": {
                "method": method,
                "url": url,
                "headers": safe_headers,
                "has_data": bool(body)
            }
        }

        self.logger.debug(f"API Request: {json.dumps(log_data)}")

    def log_response(
        self,
        status_code: int,
        response_size: Optional[int] = None,
        duration_ms: Optional[float] = None,
        operation: str = "unknown",
        error: Optional[Exception] = None
    ):
        """Log API response details with performance metrics.

        Args:
            status_code: HTTP status code, 0 when no response arrived
            response_size: Size of response in bytes
            duration_ms: Request duration in milliseconds
            operation: Operation name for context
            error: Exception if request failed
        """
        log_data = {
            "operation": operation,
            "response": {
                "status_code": status_code,
                "response_size": response_size,
                "duration_ms": duration_ms,
                "success": 200 <= status_code < 300,
                "has_error": bool(error)
            }
        }

        if error:
            log_data["error"] = str(error)

        level = logging.DEBUG if log_data["response"]["success"] else logging.WARNING
        self.logger.log(level, f"API Response: {json.dumps(log_data)}")


request_logger = RequestResponseLogger(logger)


class PanelClient:
    """Client for the panel's application API."""

    def _create_ssl_context(self, verify_ssl: bool) -> ssl.SSLContext:
        """
        Create SSL context.

        Args:
            verify_ssl: Whether to verify SSL certificates

        Returns:
            Configured SSL context
        """
        if not verify_ssl:
            logger.warning(
                "SSL certificate verification is disabled for %s. "
                "Only use this against panels with self-signed certificates you control.",
                self.base_url,
            )
            context = ssl.create_default_context()
            context.check_hostname = False
            context.verify_mode = ssl.CERT_NONE
            return context

        context = ssl.create_default_context(cafile=certifi.where())
        context.check_hostname = True
        context.verify_mode = ssl.CERT_REQUIRED
        context.minimum_version = ssl.TLSVersion.TLSv1_2
        return context

    def __init__(self, config: PanelConfig, transport: Optional[httpx.BaseTransport] = None):
        """Initialize panel API client.

        Args:
            config: Panel connection configuration
            transport: Optional httpx transport, used to stub the panel in tests
        """
        self.config = config
        self.base_url = config.url
        self.api_url = f"{self.base_url}/{API_NAMESPACE}/"

        ssl_context = self._create_ssl_context(config.verify_ssl)

        self.headers = {
            "Authorization": f"Bearer {config.api_key}",
            "Accept": CONTENT_TYPE_JSON,
            "Content-Type": CONTENT_TYPE_JSON,
            "User-Agent": USER_AGENT,
        }

        self.client = httpx.Client(
            base_url=self.api_url,
            headers=self.headers,
            verify=ssl_context,
            timeout=httpx.Timeout(config.timeout),
            transport=transport,
        )

        logger.info(
            f"Initialized panel client for {self.base_url} "
            f"(SSL verification: {'enabled' if config.verify_ssl else 'DISABLED'})"
        )

    def __enter__(self) -> "PanelClient":
        return self

    def __exit__(self, *exc_info) -> None:
        self.close()

    def close(self):
        """Close the underlying httpx client."""
        self.client.close()

    def dispatch(
        self,
        path: str,
        method: str = "GET",
        body: Optional[bytes] = None,
        params: Optional[Dict[str, Any]] = None,
        operation: str = "api_request",
    ) -> bytes:
        """Send one request to the application API and return the raw body.

        Args:
            path: Endpoint relative to the API namespace (e.g. "servers/42")
            method: GET, POST, PATCH or DELETE
            body: Serialized JSON payload, only for POST/PATCH
            params: Query parameters (page, include)
            operation: Name of operation for logging context

        Returns:
            Response body bytes; empty for bodyless responses such as 204

        Raises:
            ValidationError: For invalid path, method or body combinations
            TransportError: If the panel could not be reached or the URL is malformed
            RequestTimeoutError: If the request timed out
            PanelAPIError: For non-2xx responses with a panel error envelope
            HTTPStatusError: For any other non-2xx response
        """
        method = (method or "").upper()
        if method not in SUPPORTED_METHODS:
            raise ValidationError(f"Unsupported HTTP method: {method or None}",
                                  context={"method": method, "path": path})

        if not path or "://" in path or path.startswith("/"):
            raise ValidationError("Path must be relative to the API namespace",
                                  context={"path": path})

        if body and method in BODYLESS_METHODS:
            raise ValidationError(f"{method} requests cannot carry a body",
                                  context={"method": method, "path": path})

        url = f"{self.api_url}{path}"
        request_logger.log_request(method, url, self.headers, body, operation)
        start_time = time.monotonic()

        try:
            response = self.client.request(method, path, params=params, content=body or None)
        except httpx.TimeoutException as e:
            duration_ms = (time.monotonic() - start_time) * 1000
            request_logger.log_response(0, 0, duration_ms, operation, e)
            raise RequestTimeoutError(f"Request timed out after {self.config.timeout}s",
                                      cause=e,
                                      context={"timeout": self.config.timeout, "path": path}) from e
        except (httpx.RequestError, httpx.InvalidURL) as e:
            duration_ms = (time.monotonic() - start_time) * 1000
            request_logger.log_response(0, 0, duration_ms, operation, e)
            raise TransportError(f"Cannot reach panel at {self.base_url}: {e}",
                                 cause=e,
                                 context={"base_url": self.base_url, "path": path}) from e

        duration_ms = (time.monotonic() - start_time) * 1000
        content = response.content or b""

        if not response.is_success:
            error = decode_error(response.status_code, content)
            error.context.setdefault("path", path)
            request_logger.log_response(response.status_code, len(content), duration_ms, operation, error)
            raise error

        request_logger.log_response(response.status_code, len(content), duration_ms, operation)
        return content

    def request_json(
        self,
        path: str,
        method: str = "GET",
        payload: Any = None,
        params: Optional[Dict[str, Any]] = None,
        model: Optional[Type[ModelT]] = None,
        operation: str = "api_request",
    ) -> Any:
        """Encode a payload, dispatch it and decode the reply.

        Pydantic payloads are encoded with only the fields the caller set;
        plain dicts are encoded as-is.

        Args:
            path: Endpoint relative to the API namespace
            method: HTTP method
            payload: Pydantic model or JSON-serializable object
            params: Query parameters
            model: Pydantic model to decode the response into; if omitted
                the parsed JSON is returned (None for an empty body)
            operation: Name of operation for logging context

        Raises:
            SerializationError: If the payload cannot be encoded or the
                response cannot be decoded into ``model``
        """
        body = encode_payload(payload) if payload is not None else None
        content = self.dispatch(path, method, body, params=params, operation=operation)
        return decode_body(content, model)


def encode_payload(payload: Any) -> bytes:
    """Serialize a request payload to JSON bytes."""
    try:
        if isinstance(payload, BaseModel):
            return payload.model_dump_json(by_alias=True, exclude_unset=True).encode()
        return json.dumps(payload).encode()
    except (TypeError, ValueError) as e:
        raise SerializationError(f"Could not encode request payload: {e}",
                                 context={"payload_type": type(payload).__name__}) from e


def decode_body(content: bytes, model: Optional[Type[ModelT]] = None) -> Any:
    """Deserialize a response body, all-or-nothing."""
    if model is None:
        if not content:
            return None
        try:
            return json.loads(content)
        except ValueError as e:
            raise SerializationError(f"Invalid JSON response from panel: {e}") from e

    try:
        return model.model_validate_json(content)
    except PydanticValidationError as e:
        raise SerializationError(f"Could not decode {model.__name__} from panel response: {e}",
                                 context={"model": model.__name__}) from e
