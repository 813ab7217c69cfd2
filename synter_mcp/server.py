"""
Synter MCP Server — Main Orchestrator

Ties together:
  Transport → Protocol → Router → Tools → Synter API

Flow:
  1. Transport reads one JSON line from stdin
  2. Protocol validates the JSON-RPC 2.0 envelope
  3. Router dispatches to the correct handler
  4. Transport writes the response to stdout

tools/call requests run as their own tasks so a slow upstream call never
holds up the read loop; every other method is answered inline, in order.
"""

import asyncio
import signal
from typing import Any, Dict, Optional, Set

from .config import Config
from .logger import get_logger
from .protocol import (
    INTERNAL_ERROR,
    INVALID_REQUEST,
    ProtocolError,
    make_error,
    make_response,
    validate_message,
)
from .router import Router
from .transport import RawStdioTransport

log = get_logger("server")


class SynterMCPServer:
    """
    Main server orchestrator.

    Usage:
        server = SynterMCPServer()
        server.register_tools(TOOLS, handle_tool)
        await server.run()
    """

    def __init__(self, transport: Optional[RawStdioTransport] = None):
        self._transport = transport or RawStdioTransport()
        self._router = Router()
        self._running = False
        self._inflight: Set[asyncio.Task] = set()

    # ── tool registration (call before run) ──────────────────────

    def register_tools(self, tools_list, handler):
        """Register a tools module with the router."""
        self._router.register_tools_module(tools_list, handler)

    @property
    def router(self) -> Router:
        return self._router

    @property
    def inflight_count(self) -> int:
        return len(self._inflight)

    # ── main loop ────────────────────────────────────────────────

    async def run(self):
        """Start the server and process messages until EOF or signal."""
        log.info(f"Starting {Config.SERVER_NAME} v{Config.SERVER_VERSION}")

        await self._transport.start()

        main_task = asyncio.current_task()
        loop = asyncio.get_running_loop()
        installed = []
        for sig in (signal.SIGINT, signal.SIGTERM):
            try:
                loop.add_signal_handler(sig, main_task.cancel)
                installed.append(sig)
            except (NotImplementedError, RuntimeError, ValueError):
                pass  # Windows / non-main thread

        self._running = True
        log.info(f"Server ready — tools={self._router.tool_count}")

        try:
            while self._running:
                try:
                    msg = await self._transport.read_message()
                except ProtocolError as exc:
                    await self._send(make_error(None, exc.code, exc.message))
                    continue

                if msg is None:
                    log.info("EOF on stdin — shutting down")
                    break

                await self.dispatch(msg)

        except asyncio.CancelledError:
            log.info("Server cancelled")
        finally:
            for sig in installed:
                loop.remove_signal_handler(sig)
            await self.shutdown()

    async def dispatch(self, msg: Any):
        """Handle one decoded message; tools/call is spawned as a task."""
        if isinstance(msg, dict) and msg.get("method") == "tools/call":
            task = asyncio.create_task(self._handle_message(msg))
            self._inflight.add(task)
            task.add_done_callback(self._inflight.discard)
            return
        await self._handle_message(msg)

    async def _handle_message(self, msg: Any):
        """Process a single JSON-RPC message through the full pipeline."""
        request_id = msg.get("id") if isinstance(msg, dict) else None

        try:
            msg_type = validate_message(msg)
            result = await self._router.route(msg_type, msg)

            # Notifications get no response
            if result is None or msg_type != "request":
                return

            await self._send(make_response(request_id, result))

        except ProtocolError as exc:
            log.warning(f"Protocol error: {exc.message} (code={exc.code})")
            if request_id is not None or exc.code == INVALID_REQUEST:
                await self._send(make_error(request_id, exc.code, exc.message, exc.data))

        except Exception as exc:
            log.error(f"Unhandled error: {exc}", exc_info=True)
            if request_id is not None:
                await self._send(make_error(request_id, INTERNAL_ERROR, str(exc)))

    async def _send(self, message: Dict[str, Any]):
        try:
            await self._transport.write_message(message)
        except (BrokenPipeError, ConnectionResetError) as exc:
            log.error(f"Client went away: {exc}")
            self._running = False

    async def shutdown(self):
        """Graceful shutdown — let in-flight tool calls answer, close transport."""
        if not self._running and not self._transport.running:
            return
        self._running = False

        if self._inflight:
            log.info(f"Waiting for {len(self._inflight)} in-flight tool calls")
            await asyncio.gather(*self._inflight, return_exceptions=True)

        await self._transport.close()
        log.info("Server stopped")
