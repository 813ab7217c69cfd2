"""Synter API client — authenticated POSTs to the advertising-automation API.

Every tool call becomes exactly one request to ``/api/v1/<endpoint>``. There
is no retry, no caching and no timeout override: a failure is terminal for
that invocation.
"""

import json
from dataclasses import dataclass, field
from typing import Any, Callable, Optional

import httpx

from ..config import ApiSettings, Config
from ..errors import (
    ApiError,
    MissingCredentialError,
    RemoteRejectionError,
    TransportFailureError,
)
from ..logger import get_logger

log = get_logger("api")

# Fields tried, in order, for an upstream error message
ERROR_MESSAGE_FIELDS = ("error", "message")


# ---------------------------------------------------------------------------
# Data types
# ---------------------------------------------------------------------------

@dataclass(frozen=True)
class RemoteRequest:
    script_name: str
    args: tuple[str, ...] = field(default_factory=tuple)
    platform: Optional[str] = None

    def to_body(self) -> dict[str, Any]:
        body: dict[str, Any] = {"script_name": self.script_name, "args": list(self.args)}
        if self.platform is not None:
            body["platform"] = self.platform
        return body


# ---------------------------------------------------------------------------
# Helpers
# ---------------------------------------------------------------------------

_UNDECODABLE = object()


def _decode(response: httpx.Response) -> Any:
    if not response.content:
        return None
    try:
        return response.json()
    except ValueError:
        return _UNDECODABLE


def _error_message(body: Any, status_code: int) -> str:
    if isinstance(body, dict):
        for key in ERROR_MESSAGE_FIELDS:
            value = body.get(key)
            if not value:
                continue
            return value if isinstance(value, str) else json.dumps(value)
    return f"API error: {status_code}"


def missing_credential_message() -> str:
    return f"{Config.API_KEY_ENV} not set. Get your API key at {Config.DEVELOPER_URL}"


# ---------------------------------------------------------------------------
# Main client
# ---------------------------------------------------------------------------

class SynterAPIClient:
    """Async gateway to the Synter API.

    ``settings`` is called on every request, so credential rotation needs no
    restart. ``transport`` lets tests swap in ``httpx.MockTransport``.
    """

    API_PREFIX = "/api/v1"

    def __init__(
        self,
        settings: Callable[[], ApiSettings] = Config.api_settings,
        transport: Optional[httpx.AsyncBaseTransport] = None,
    ):
        self._settings = settings
        self._transport = transport

    def _build_url(self, settings: ApiSettings, endpoint: str) -> str:
        return f"{settings.api_url}{self.API_PREFIX}/{endpoint.lstrip('/')}"

    async def send(self, endpoint: str, body: dict[str, Any]) -> Any:
        settings = self._settings()
        if not settings.has_credential:
            raise MissingCredentialError(missing_credential_message())

        url = self._build_url(settings, endpoint)
        headers = {
            "Content-Type": "application/json",
            "Authorization": f"Bearer {settings.api_key}",
        }

        try:
            async with httpx.AsyncClient(transport=self._transport) as client:
                response = await client.post(url, content=json.dumps(body), headers=headers)
        except httpx.HTTPError as exc:
            log.warning(f"POST {url} failed: {exc!r}")
            raise TransportFailureError(str(exc) or type(exc).__name__) from exc

        data = _decode(response)

        if not response.is_success:
            message = _error_message(data, response.status_code)
            log.warning(f"POST {url} -> {response.status_code}: {message}")
            raise RemoteRejectionError(message, status_code=response.status_code)

        if data is _UNDECODABLE:
            raise ApiError(
                f"Invalid JSON in API response (status {response.status_code})",
                status_code=response.status_code,
            )

        log.debug(f"POST {url} -> {response.status_code}")
        return data if data is not None else {}

    async def run_script(self, request: RemoteRequest) -> Any:
        return await self.send(Config.TOOLS_RUN_ENDPOINT, request.to_body())
