"""Configuration for the Synter MCP server"""

import os
from dataclasses import dataclass
from pathlib import Path
from typing import Mapping, Optional


@dataclass(frozen=True)
class ApiSettings:
    """Credential + base URL snapshot for one outbound call."""

    api_key: Optional[str]
    api_url: str

    @property
    def has_credential(self) -> bool:
        return bool(self.api_key)


class Config:
    # Server identity
    SERVER_NAME = "synter-mcp"
    SERVER_VERSION = "1.0.6"
    PROTOCOL_VERSION = "2025-06-18"
    SUPPORTED_PROTOCOL_VERSIONS = ("2024-11-05", "2025-03-26", "2025-06-18")

    # Upstream API
    API_KEY_ENV = "SYNTER_API_KEY"
    API_URL_ENV = "SYNTER_API_URL"
    DEFAULT_API_URL = "https://syntermedia.ai"
    DEVELOPER_URL = "https://syntermedia.ai/developer"
    TOOLS_RUN_ENDPOINT = "tools/run"

    # Logging (NEVER to stdout)
    LOG_DIR = Path(os.getenv("SYNTER_MCP_LOG_DIR", str(Path.home() / ".synter" / "logs")))
    LOG_FILE = LOG_DIR / "synter-mcp.log"
    ERROR_LOG = LOG_DIR / "synter-mcp-errors.log"

    @classmethod
    def ensure_dirs(cls):
        """Create required directories"""
        cls.LOG_DIR.mkdir(parents=True, exist_ok=True)

    @classmethod
    def api_settings(cls, environ: Optional[Mapping[str, str]] = None) -> ApiSettings:
        """
        Read credential and base URL from the environment.

        Called once per outbound request so a rotated key is picked up
        without a restart.
        """
        env = os.environ if environ is None else environ
        api_url = env.get(cls.API_URL_ENV) or cls.DEFAULT_API_URL
        return ApiSettings(
            api_key=env.get(cls.API_KEY_ENV) or None,
            api_url=api_url.rstrip("/"),
        )
