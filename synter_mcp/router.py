"""
Method Router — Dispatch MCP methods to handlers

Routes:
  initialize                  → server capabilities handshake
  notifications/initialized   → notification (no response)
  notifications/cancelled     → notification (no response, nothing to cancel)
  ping                        → {}
  tools/list                  → registered tool definitions
  tools/call                  → tool handler dispatch

Tool modules export:
  TOOLS: sequence[mcp.types.Tool]     — Tool definitions (MCP schema)
  handle_tool(name, args) -> dict     — Tool handler (returns CallToolResult dict)
"""

from typing import Any, Awaitable, Callable, Dict, List, Optional, Sequence, Tuple

from mcp.types import Tool

from .config import Config
from .errors import UnknownToolError
from .logger import get_logger
from .protocol import (
    INVALID_PARAMS,
    METHOD_NOT_FOUND,
    ProtocolError,
    initialize_result,
    negotiate_version,
    tool_error,
    tools_list_result,
)

log = get_logger("router")

ToolHandler = Callable[[str, Dict[str, Any]], Awaitable[Dict[str, Any]]]

_SILENT_NOTIFICATIONS = frozenset({
    "initialized",
    "notifications/initialized",
    "notifications/cancelled",
    "notifications/progress",
    "notifications/roots/list_changed",
})


class Router:
    """MCP method dispatcher."""

    def __init__(self):
        self._tools: List[Tool] = []
        self._tool_handlers: List[Tuple[frozenset, ToolHandler]] = []

    # ── registration ─────────────────────────────────────────────

    def register_tools_module(self, tools_list: Sequence[Tool], handler: ToolHandler):
        """
        Register a tools module.

        Args:
            tools_list: MCP tool definitions.
            handler:    async fn(name, args) -> dict with "content" key.
        """
        names = frozenset(t.name for t in tools_list)
        clash = names.intersection(t.name for t in self._tools)
        if clash:
            raise ValueError(f"Tools already registered: {sorted(clash)}")
        self._tools.extend(tools_list)
        self._tool_handlers.append((names, handler))
        log.info(f"Registered {len(tools_list)} tools: {[t.name for t in tools_list]}")

    # ── dispatch ─────────────────────────────────────────────────

    async def route(self, msg_type: str, msg: Dict[str, Any]) -> Optional[Dict[str, Any]]:
        """
        Route a validated message to the appropriate handler.

        Returns the result payload (to be wrapped in a JSON-RPC response),
        or None for notifications and stray responses.
        """
        if msg_type in ("response", "error"):
            return None

        method = msg.get("method", "")
        params = msg.get("params")
        if not isinstance(params, dict):
            params = {}

        if method in _SILENT_NOTIFICATIONS:
            log.debug(f"Notification: {method}")
            return None

        if msg_type == "notification":
            log.debug(f"Ignoring notification: {method}")
            return None

        if method == "initialize":
            return self._handle_initialize(params)

        if method == "ping":
            return {}

        if method == "tools/list":
            return self._handle_tools_list()

        if method == "tools/call":
            return await self._handle_tools_call(params)

        raise ProtocolError(METHOD_NOT_FOUND, f"Unknown method: {method}")

    # ── handlers ─────────────────────────────────────────────────

    def _handle_initialize(self, params: Dict) -> Dict[str, Any]:
        client_info = params.get("clientInfo") or {}
        requested = params.get("protocolVersion")
        version = negotiate_version(
            requested,
            Config.SUPPORTED_PROTOCOL_VERSIONS,
            Config.PROTOCOL_VERSION,
        )
        log.info(
            f"Client initialize: {client_info.get('name', '?')} "
            f"requested={requested or '?'} negotiated={version}"
        )
        return initialize_result(
            server_name=Config.SERVER_NAME,
            server_version=Config.SERVER_VERSION,
            protocol_version=version,
        )

    def _handle_tools_list(self) -> Dict[str, Any]:
        return tools_list_result(self._tools)

    async def _handle_tools_call(self, params: Dict) -> Dict[str, Any]:
        name = params.get("name", "")
        args = params.get("arguments") or {}

        if not name or not isinstance(name, str):
            raise ProtocolError(INVALID_PARAMS, "Missing tool name")

        for tool_names, handler in self._tool_handlers:
            if name in tool_names:
                try:
                    return await handler(name, args)
                except Exception as exc:
                    log.error(f"Tool {name} error: {exc}", exc_info=True)
                    return tool_error(str(exc) or type(exc).__name__)

        log.warning(f"Call for unregistered tool: {name}")
        return tool_error(str(UnknownToolError(name)))

    @property
    def tool_count(self) -> int:
        return len(self._tools)
