#!/usr/bin/env python3
"""
Entry point: python -m synter_mcp  (or the ``synter-mcp`` console script)

Launches the Synter MCP server on stdio with all registered tools.

Environment:
  SYNTER_API_KEY       — API key (get one at syntermedia.ai/developer)
  SYNTER_API_URL       — optional API URL override (default: https://syntermedia.ai)
  SYNTER_MCP_LOG_DIR   — optional log directory (default: ~/.synter/logs)
"""

import asyncio
import importlib
import sys

from .logger import get_logger
from .server import SynterMCPServer

log = get_logger("main")

# Tool modules to load
TOOL_MODULES = [
    "synter_mcp.tools",
]


def load_tools(server: SynterMCPServer):
    """Import each tool module and register its TOOLS + handle_tool."""
    for module_path in TOOL_MODULES:
        mod = importlib.import_module(module_path)
        tools = getattr(mod, "TOOLS", ())
        handler = getattr(mod, "handle_tool", None)
        if not tools or handler is None:
            raise RuntimeError(f"Module {module_path} missing TOOLS or handle_tool")
        server.register_tools(tools, handler)
        log.info(f"Loaded {len(tools)} tools from {module_path}")


async def main():
    server = SynterMCPServer()
    load_tools(server)
    print("Synter MCP server running on stdio", file=sys.stderr)
    await server.run()


def run():
    try:
        asyncio.run(main())
    except KeyboardInterrupt:
        log.info("Server shutdown requested")
    except Exception as e:
        log.error(f"Fatal error: {e}", exc_info=True)
        print(f"Fatal error: {e}", file=sys.stderr)
        sys.exit(1)


if __name__ == "__main__":
    run()
