"""
MCP Protocol — JSON-RPC 2.0 envelopes and MCP result shapes

Message kinds:
  request       — has id + method
  notification  — has method, no id
  response      — has id + result
  error         — has id + error

Result payloads are built from the MCP SDK's pydantic types so the wire
shape tracks the published schema.

See: https://www.jsonrpc.org/specification
"""

from typing import Any, Dict, Iterable, List, Optional

from mcp.types import CallToolResult, TextContent, Tool

# Standard JSON-RPC error codes
PARSE_ERROR = -32700
INVALID_REQUEST = -32600
METHOD_NOT_FOUND = -32601
INVALID_PARAMS = -32602
INTERNAL_ERROR = -32603

JSONRPC_VERSION = "2.0"


class ProtocolError(Exception):
    """A JSON-RPC level failure, answered with an error envelope."""

    def __init__(self, code: int, message: str, data: Any = None):
        super().__init__(message)
        self.code = code
        self.message = message
        self.data = data


def validate_message(msg: Any) -> str:
    """
    Classify a decoded JSON-RPC message.

    Returns one of "request", "notification", "response", "error".
    Raises ProtocolError(INVALID_REQUEST) for anything else.
    """
    if not isinstance(msg, dict):
        raise ProtocolError(INVALID_REQUEST, "Message must be a JSON object")
    if msg.get("jsonrpc") != JSONRPC_VERSION:
        raise ProtocolError(INVALID_REQUEST, "Missing or invalid 'jsonrpc' version")

    if "method" in msg:
        if not isinstance(msg["method"], str):
            raise ProtocolError(INVALID_REQUEST, "'method' must be a string")
        params = msg.get("params")
        if params is not None and not isinstance(params, (dict, list)):
            raise ProtocolError(INVALID_REQUEST, "'params' must be an object or array")
        return "request" if "id" in msg else "notification"

    if "id" in msg and "result" in msg:
        return "response"
    if "id" in msg and "error" in msg:
        return "error"

    raise ProtocolError(INVALID_REQUEST, "Unrecognized JSON-RPC message")


def make_response(request_id: Any, result: Any) -> Dict[str, Any]:
    return {"jsonrpc": JSONRPC_VERSION, "id": request_id, "result": result}


def make_error(request_id: Any, code: int, message: str, data: Any = None) -> Dict[str, Any]:
    error: Dict[str, Any] = {"code": code, "message": message}
    if data is not None:
        error["data"] = data
    return {"jsonrpc": JSONRPC_VERSION, "id": request_id, "error": error}


# ── MCP result payloads ──────────────────────────────────────────


def initialize_result(
    server_name: str,
    server_version: str,
    protocol_version: str,
) -> Dict[str, Any]:
    return {
        "protocolVersion": protocol_version,
        "capabilities": {"tools": {"listChanged": False}},
        "serverInfo": {"name": server_name, "version": server_version},
    }


def tool_definition(tool: Tool) -> Dict[str, Any]:
    return tool.model_dump(by_alias=True, exclude_none=True, mode="json")


def tools_list_result(tools: Iterable[Tool]) -> Dict[str, Any]:
    return {"tools": [tool_definition(t) for t in tools]}


def text_content(text: str) -> TextContent:
    return TextContent(type="text", text=text)


def tool_result_content(content: List[TextContent], is_error: bool = False) -> Dict[str, Any]:
    result = CallToolResult(content=content, isError=is_error)
    return result.model_dump(by_alias=True, exclude_none=True, mode="json")


def tool_error(message: str) -> Dict[str, Any]:
    """Flagged tool result; the text is always prefixed with 'Error: '."""
    return tool_result_content([text_content(f"Error: {message}")], is_error=True)


def negotiate_version(requested: Optional[str], supported: Iterable[str], default: str) -> str:
    """Echo the client's protocol version when we speak it, else our default."""
    if requested and requested in tuple(supported):
        return requested
    return default
