"""
Shared pytest configuration and fixtures for ptero-admin tests.

This module provides common fixtures used across all test modules including:
- Panel configurations
- A recording mock transport that stands in for the panel
- Clients wired to that transport
"""

import copy
import json
from typing import Any, Callable

import httpx
import pytest

from fixtures.mock_responses import (
    MOCK_SERVER,
    MOCK_SERVER_LIST,
    MOCK_USER,
    MOCK_USER_LIST,
)
from ptero_admin.core.client import PanelClient
from ptero_admin.core.models import PanelConfig

# ========== Configuration Fixtures ==========


@pytest.fixture
def panel_config() -> PanelConfig:
    """Provide a panel configuration for testing."""
    return PanelConfig(
        url="https://panel.example.com",
        api_key="ptla_test_key_1234567890",
        verify_ssl=True,
    )


@pytest.fixture
def panel_config_dict() -> dict[str, Any]:
    """Provide a dictionary version of the panel configuration."""
    return {
        "url": "https://panel.example.com",
        "api_key": "ptla_test_key_1234567890",
        "verify_ssl": True,
        "timeout": 30.0,
    }


# ========== Mock Response Fixtures ==========


@pytest.fixture
def server_response() -> dict[str, Any]:
    return copy.deepcopy(MOCK_SERVER)


@pytest.fixture
def server_list_response() -> dict[str, Any]:
    return copy.deepcopy(MOCK_SERVER_LIST)


@pytest.fixture
def user_response() -> dict[str, Any]:
    return copy.deepcopy(MOCK_USER)


@pytest.fixture
def user_list_response() -> dict[str, Any]:
    return copy.deepcopy(MOCK_USER_LIST)


# ========== HTTP Mock Transport ==========


class PanelTransport(httpx.MockTransport):
    """Mock transport that records requests and replays queued responses.

    Responses are either an ``httpx.Response``, a ``(status, body)`` tuple
    where body is a dict (sent as JSON) or bytes, or an exception to raise.
    """

    def __init__(self):
        self.queue: list[Any] = []
        self.requests: list[httpx.Request] = []
        super().__init__(self._handle_request)

    def add(self, status_code: int = 200, body: Any = None) -> "PanelTransport":
        self.queue.append((status_code, body))
        return self

    def fail(self, error: Exception) -> "PanelTransport":
        self.queue.append(error)
        return self

    @property
    def last_request(self) -> httpx.Request:
        return self.requests[-1]

    def last_json(self) -> Any:
        return json.loads(self.last_request.content)

    def _handle_request(self, request: httpx.Request) -> httpx.Response:
        self.requests.append(request)
        if not self.queue:
            return httpx.Response(200, json={"object": "null_resource"}, request=request)

        item = self.queue.pop(0)
        if isinstance(item, Exception):
            raise item
        if isinstance(item, httpx.Response):
            return item

        status_code, body = item
        if body is None:
            return httpx.Response(status_code, request=request)
        if isinstance(body, (bytes, str)):
            return httpx.Response(status_code, content=body, request=request)
        return httpx.Response(status_code, json=body, request=request)


@pytest.fixture
def transport() -> PanelTransport:
    """Provide a fresh recording transport."""
    return PanelTransport()


@pytest.fixture
def client(panel_config, transport):
    """Provide a PanelClient talking to the mock transport."""
    panel_client = PanelClient(panel_config, transport=transport)
    yield panel_client
    panel_client.close()


@pytest.fixture
def make_client(transport) -> Callable[..., PanelClient]:
    """Factory for clients with custom configuration on the shared transport."""
    created = []

    def _make(**overrides) -> PanelClient:
        values = {"url": "https://panel.example.com", "api_key": "ptla_test_key_1234567890"}
        values.update(overrides)
        panel_client = PanelClient(PanelConfig(**values), transport=transport)
        created.append(panel_client)
        return panel_client

    yield _make
    for panel_client in created:
        panel_client.close()


# ========== Pytest Configuration ==========


def pytest_configure(config):
    """Configure pytest with custom markers."""
    config.addinivalue_line("markers", "unit: mark test as a unit test")
    config.addinivalue_line("markers", "integration: mark test as an integration test")
