"""
Tool handler — the error boundary for every tools/call.

  handle_tool(name, args)
    -> build_request   (dispatch table + argument mapper)
    -> client.run_script (one POST to tools/run)
    -> tool_result_content

Nothing raised in here escapes: every failure becomes a flagged result
whose text starts with "Error: ".
"""

import json
from typing import Any, Optional

from ..api.client import SynterAPIClient
from ..errors import ApiError, SynterError
from ..logger import get_logger
from ..protocol import text_content, tool_error, tool_result_content
from .dispatch import build_request

log = get_logger("tools")

# Module-level client (replaced by server / tests via set_api_client)
_api_client: Optional[SynterAPIClient] = None


def set_api_client(client: Optional[SynterAPIClient]):
    global _api_client
    _api_client = client


def get_api_client() -> SynterAPIClient:
    global _api_client
    if _api_client is None:
        _api_client = SynterAPIClient()
    return _api_client


def _fmt(data: Any) -> str:
    return json.dumps(data, indent=2, ensure_ascii=False, default=str)


async def handle_tool(name: str, args: Optional[dict]) -> dict:
    """Route a tool call through dispatch and the Synter API."""
    try:
        request = build_request(name, args)
        log.info(
            f"Tool {name} -> script={request.script_name} "
            f"platform={request.platform or '-'} args={len(request.args)}"
        )
        result = await get_api_client().run_script(request)
        return tool_result_content([text_content(_fmt(result))])
    except ApiError as exc:
        status = f" (status={exc.status_code})" if exc.status_code else ""
        log.warning(f"Tool {name} API error{status}: {exc.message}")
        return tool_error(exc.message)
    except SynterError as exc:
        log.warning(f"Tool {name} rejected: {exc}")
        return tool_error(str(exc))
    except Exception as exc:
        log.error(f"Tool {name} error: {exc}", exc_info=True)
        return tool_error(str(exc) or type(exc).__name__)
