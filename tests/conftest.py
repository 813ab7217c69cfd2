"""Shared fixtures: anyio backend, isolated logs, fake Synter API."""

import json
import os
import tempfile

import httpx
import pytest

# Keep test runs out of ~/.synter/logs (must happen before synter_mcp is imported)
os.environ.setdefault("SYNTER_MCP_LOG_DIR", tempfile.mkdtemp(prefix="synter-mcp-logs-"))

from synter_mcp.api.client import SynterAPIClient  # noqa: E402
from synter_mcp.config import ApiSettings  # noqa: E402
from synter_mcp.tools import set_api_client  # noqa: E402

TEST_API_URL = "https://api.test"
TEST_API_KEY = "sk-test-123"


@pytest.fixture
def anyio_backend():
    return "asyncio"


@pytest.fixture(autouse=True)
def _reset_tool_client():
    set_api_client(None)
    yield
    set_api_client(None)


class FakeSynterAPI:
    """Records outbound requests and answers with a canned response."""

    def __init__(self, status_code: int = 200, payload=None, *, content: bytes = None):
        self.status_code = status_code
        self.payload = {"success": True} if payload is None else payload
        self.content = content
        self.requests: list[httpx.Request] = []

    def __call__(self, request: httpx.Request) -> httpx.Response:
        self.requests.append(request)
        if self.content is not None:
            return httpx.Response(self.status_code, content=self.content)
        return httpx.Response(self.status_code, json=self.payload)

    @property
    def last_body(self) -> dict:
        return json.loads(self.requests[-1].content)


@pytest.fixture
def fake_api():
    return FakeSynterAPI()


def make_client(fake, api_key=TEST_API_KEY, api_url=TEST_API_URL) -> SynterAPIClient:
    return SynterAPIClient(
        settings=lambda: ApiSettings(api_key=api_key, api_url=api_url),
        transport=httpx.MockTransport(fake),
    )


@pytest.fixture
def api_client(fake_api):
    """Client wired to fake_api and installed for handle_tool."""
    client = make_client(fake_api)
    set_api_client(client)
    return client
