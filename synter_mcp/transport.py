"""
Raw STDIO Transport — newline-delimited JSON-RPC

Reads from stdin, writes to stdout.
NEVER pollutes stdout with logs.
"""

import asyncio
import json
import sys
from typing import Any, BinaryIO, Dict, Optional

from .logger import get_logger
from .protocol import PARSE_ERROR, ProtocolError

log = get_logger("transport")

# Campaign payloads with many assets can exceed asyncio's 64 KiB default
READ_LIMIT = 2 ** 22


class RawStdioTransport:
    """Raw STDIO transport. ``reader``/``writer`` are injectable for tests."""

    def __init__(
        self,
        reader: Optional[asyncio.StreamReader] = None,
        writer: Optional[BinaryIO] = None,
    ):
        self.running = False
        self._reader = reader
        self._stdout = writer

    async def start(self):
        """Initialize async stdin reader and direct stdout writer"""
        if self._reader is None:
            loop = asyncio.get_running_loop()
            self._reader = asyncio.StreamReader(limit=READ_LIMIT)
            protocol = asyncio.StreamReaderProtocol(self._reader)
            await loop.connect_read_pipe(lambda: protocol, sys.stdin.buffer)

        # Direct stdout: synchronous writes
        # connect_write_pipe fails when stdout is not a proper pipe
        if self._stdout is None:
            self._stdout = sys.stdout.buffer

        self.running = True
        log.info("Transport initialized")

    async def read_message(self) -> Optional[Dict[str, Any]]:
        """
        Read one JSON-RPC message from stdin.

        Returns the decoded message, or None on EOF. Blank lines are skipped.
        Raises ProtocolError(PARSE_ERROR) for a line that is not JSON or is
        longer than the reader limit.
        """
        if not self._reader:
            raise RuntimeError("Transport not started")

        while True:
            try:
                raw_bytes = await self._reader.readline()
            except ValueError as exc:
                # StreamReader has already discarded the oversized line
                log.error(f"Message over read limit: {exc}")
                raise ProtocolError(PARSE_ERROR, "Parse error: message too large") from exc
            if not raw_bytes:
                return None  # EOF
            if raw_bytes.strip():
                break

        try:
            return json.loads(raw_bytes)
        except ValueError as exc:  # JSONDecodeError, or bytes that are not UTF-8
            log.error(f"JSON parse error: {exc}")
            raise ProtocolError(PARSE_ERROR, f"Parse error: {getattr(exc, 'msg', exc)}") from exc

    async def write_message(self, message: Dict[str, Any]):
        """Write a JSON-RPC message to stdout"""
        if self._stdout is None:
            raise RuntimeError("Transport not started")

        raw_text = json.dumps(message, separators=(",", ":"), ensure_ascii=False) + "\n"
        self._stdout.write(raw_text.encode("utf-8"))
        self._stdout.flush()

    async def close(self):
        self.running = False
        log.info("Transport closed")
