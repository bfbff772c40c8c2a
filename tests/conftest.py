"""
Shared fixtures.

The Eversend client is built against httpx.MockTransport; MockApi holds the
canned answers and records every request it receives.
"""

import json
from typing import Any, Dict, List, Tuple

import httpx
import pytest

from eversend import Eversend

BASE_URL = "http://eversend.test"
TEST_TOKEN = "some_test_token"


class MockApi:
    """Route table of canned answers keyed by (method, path)."""

    def __init__(self):
        self.routes: Dict[Tuple[str, str], Tuple[int, Any]] = {}
        self.requests: List[httpx.Request] = []

    def add(self, method: str, path: str, body: Any = None, status: int = 200) -> None:
        self.routes[(method, path)] = (status, body)

    def handler(self, request: httpx.Request) -> httpx.Response:
        self.requests.append(request)
        key = (request.method, request.url.path)
        if key not in self.routes:
            return httpx.Response(404, json={"code": 404, "success": False})
        status, body = self.routes[key]
        if isinstance(body, (str, bytes)):
            return httpx.Response(status, content=body)
        return httpx.Response(status, json=body)

    @property
    def last_request(self) -> httpx.Request:
        return self.requests[-1]

    def last_json(self) -> Any:
        return json.loads(self.last_request.content)


def build_client(api: MockApi, token=TEST_TOKEN) -> Eversend:
    builder = (
        Eversend.builder("sk_example_123456789", "sk_example_123456780")
        .set_base_url(BASE_URL)
        .set_transport(httpx.MockTransport(api.handler))
    )
    if token is not None:
        builder.set_api_token(token)
    return builder.build()


@pytest.fixture
def mock_api():
    """Fresh route table for each test."""
    return MockApi()


@pytest.fixture
def eversend(mock_api):
    """Client with an API token, pointed at the mock API."""
    return build_client(mock_api)


@pytest.fixture
def eversend_without_token(mock_api):
    """Client built without set_api_token."""
    return build_client(mock_api, token=None)
