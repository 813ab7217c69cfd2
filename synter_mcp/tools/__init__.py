"""
Synter MCP Tools

Modules:
  catalog    — tool definitions returned by tools/list
  arguments  — one pydantic argument model per tool
  dispatch   — tool name -> remote script, platform rule, argument mapper
  handlers   — handle_tool(name, args), the tools/call error boundary
"""

from .catalog import TOOL_NAMES, TOOLS
from .dispatch import DISPATCH, build_request
from .handlers import handle_tool, set_api_client

__all__ = [
    "TOOLS",
    "TOOL_NAMES",
    "DISPATCH",
    "build_request",
    "handle_tool",
    "set_api_client",
]
