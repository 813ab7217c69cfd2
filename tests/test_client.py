"""
Tests for SynterAPIClient against an httpx.MockTransport.

Covers the outbound request shape, credential checks, and the mapping
from upstream responses to ApiError subclasses.
"""

import httpx
import pytest

from conftest import TEST_API_KEY, TEST_API_URL, FakeSynterAPI, make_client
from synter_mcp.api import RemoteRequest, SynterAPIClient
from synter_mcp.config import ApiSettings, Config
from synter_mcp.errors import (
    ApiError,
    MissingCredentialError,
    RemoteRejectionError,
    TransportFailureError,
)

pytestmark = pytest.mark.anyio

PAUSE = RemoteRequest("pause_campaign", ("--campaign-id", "123"), "meta")


# ═══════════════════════════════════════════════════════════════════════════
# Test Request Shape
# ═══════════════════════════════════════════════════════════════════════════


class TestRequestShape:
    """What goes over the wire."""

    async def test_url_headers_and_body(self, fake_api, api_client):
        await api_client.run_script(PAUSE)

        assert len(fake_api.requests) == 1
        request = fake_api.requests[0]
        assert request.method == "POST"
        assert str(request.url) == f"{TEST_API_URL}/api/v1/tools/run"
        assert request.headers["authorization"] == f"Bearer {TEST_API_KEY}"
        assert request.headers["content-type"] == "application/json"
        assert fake_api.last_body == {
            "script_name": "pause_campaign",
            "args": ["--campaign-id", "123"],
            "platform": "meta",
        }

    async def test_platform_omitted_when_absent(self, fake_api, api_client):
        await api_client.run_script(RemoteRequest("generate_image", ("--prompt", "x")))
        assert "platform" not in fake_api.last_body

    async def test_returns_decoded_payload(self, api_client):
        fake = FakeSynterAPI(payload={"success": True, "campaigns": [{"id": "1"}]})
        client = make_client(fake)
        assert await client.run_script(PAUSE) == {"success": True, "campaigns": [{"id": "1"}]}

    async def test_empty_body_is_empty_result(self):
        client = make_client(FakeSynterAPI(content=b""))
        assert await client.run_script(PAUSE) == {}

    async def test_settings_read_per_call(self):
        """A rotated key takes effect on the next request."""
        fake = FakeSynterAPI()
        keys = iter(["sk-first", "sk-second"])
        client = SynterAPIClient(
            settings=lambda: ApiSettings(api_key=next(keys), api_url=TEST_API_URL),
            transport=httpx.MockTransport(fake),
        )
        await client.run_script(PAUSE)
        await client.run_script(PAUSE)
        assert [r.headers["authorization"] for r in fake.requests] == [
            "Bearer sk-first", "Bearer sk-second",
        ]


# ═══════════════════════════════════════════════════════════════════════════
# Test Credentials
# ═══════════════════════════════════════════════════════════════════════════


class TestCredentials:
    """Missing credentials fail before any network traffic."""

    @pytest.mark.parametrize("key", [None, ""])
    async def test_missing_key(self, key):
        fake = FakeSynterAPI()
        client = make_client(fake, api_key=key)
        with pytest.raises(MissingCredentialError) as exc:
            await client.run_script(PAUSE)
        assert exc.value.message == (
            "SYNTER_API_KEY not set. Get your API key at https://syntermedia.ai/developer"
        )
        assert fake.requests == []


# ═══════════════════════════════════════════════════════════════════════════
# Test Upstream Errors
# ═══════════════════════════════════════════════════════════════════════════


class TestUpstreamErrors:
    """Non-2xx, malformed and failed responses."""

    async def test_error_field_preferred(self):
        client = make_client(FakeSynterAPI(400, {"error": "budget too low", "message": "other"}))
        with pytest.raises(RemoteRejectionError) as exc:
            await client.run_script(PAUSE)
        assert exc.value.message == "budget too low"
        assert exc.value.status_code == 400

    async def test_message_field_fallback(self):
        client = make_client(FakeSynterAPI(403, {"message": "forbidden"}))
        with pytest.raises(RemoteRejectionError) as exc:
            await client.run_script(PAUSE)
        assert exc.value.message == "forbidden"

    async def test_status_fallback(self):
        client = make_client(FakeSynterAPI(500, {"detail": "boom"}))
        with pytest.raises(RemoteRejectionError) as exc:
            await client.run_script(PAUSE)
        assert exc.value.message == "API error: 500"

    async def test_non_json_error_body(self):
        client = make_client(FakeSynterAPI(502, content=b"<html>Bad Gateway</html>"))
        with pytest.raises(RemoteRejectionError) as exc:
            await client.run_script(PAUSE)
        assert exc.value.message == "API error: 502"

    async def test_structured_error_value(self):
        client = make_client(FakeSynterAPI(422, {"error": {"field": "budget"}}))
        with pytest.raises(RemoteRejectionError) as exc:
            await client.run_script(PAUSE)
        assert exc.value.message == '{"field": "budget"}'

    async def test_invalid_json_success_body(self):
        client = make_client(FakeSynterAPI(200, content=b"not json"))
        with pytest.raises(ApiError) as exc:
            await client.run_script(PAUSE)
        assert not isinstance(exc.value, RemoteRejectionError)
        assert "Invalid JSON" in exc.value.message

    async def test_transport_failure(self):
        def refuse(request):
            raise httpx.ConnectError("connection refused", request=request)

        client = SynterAPIClient(
            settings=lambda: ApiSettings(api_key=TEST_API_KEY, api_url=TEST_API_URL),
            transport=httpx.MockTransport(refuse),
        )
        with pytest.raises(TransportFailureError) as exc:
            await client.run_script(PAUSE)
        assert exc.value.message == "connection refused"
        assert exc.value.status_code is None


# ═══════════════════════════════════════════════════════════════════════════
# Test Settings
# ═══════════════════════════════════════════════════════════════════════════


class TestSettings:
    """Environment-derived settings."""

    def test_defaults(self):
        settings = Config.api_settings({})
        assert settings.api_key is None
        assert settings.api_url == "https://syntermedia.ai"
        assert not settings.has_credential

    def test_reads_process_environment(self, monkeypatch):
        monkeypatch.setenv("SYNTER_API_KEY", "sk-env")
        monkeypatch.delenv("SYNTER_API_URL", raising=False)
        settings = Config.api_settings()
        assert settings.api_key == "sk-env"
        assert settings.api_url == "https://syntermedia.ai"

    async def test_default_client_uses_environment(self, monkeypatch):
        """Without an injected loader the client reads SYNTER_API_KEY itself."""
        monkeypatch.delenv("SYNTER_API_KEY", raising=False)
        with pytest.raises(MissingCredentialError):
            await SynterAPIClient().run_script(PAUSE)

    def test_overrides_strip_trailing_slash(self):
        settings = Config.api_settings({
            "SYNTER_API_KEY": "sk-live", "SYNTER_API_URL": "https://staging.example/",
        })
        assert settings.api_key == "sk-live"
        assert settings.api_url == "https://staging.example"
        assert settings.has_credential
