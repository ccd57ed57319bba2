"""Generic tool dispatcher.

One call runs Received -> Validated -> Dispatched -> one of
{Empty, Restricted, Shaped, Failed} -> Returned. Every outcome, including
every failure, comes back as a ``CallToolResult``; nothing propagates to
the host transport.
"""

import json
from collections.abc import Mapping
from typing import Any

import mcp.types as types

from fmp_mcp.client import FMPClient
from fmp_mcp.errors import UpstreamError
from fmp_mcp.logging import bind_context, get_logger, unbind_context
from fmp_mcp.tools import TOOL_REGISTRY
from fmp_mcp.tools.base import ToolDefinition
from fmp_mcp.validation import validate_tool_arguments

logger = get_logger(__name__)

# FMP's free plan answers some premium endpoints with HTTP 200 and a plain
# "Restricted Endpoint..." message. Matching on it is best-effort only.
RESTRICTION_MARKER = "Restricted"
FREE_PLAN_NOTE = "This endpoint is not available on the free plan."


def text_result(text: str, is_error: bool = False) -> types.CallToolResult:
    """Wrap text as the single content block of a tool result."""
    return types.CallToolResult(
        content=[types.TextContent(type="text", text=text)],
        isError=is_error,
    )


def is_restricted(data: Any) -> bool:
    return isinstance(data, str) and RESTRICTION_MARKER in data


def is_empty(data: Any) -> bool:
    return data is None or (isinstance(data, (list, dict, str)) and len(data) == 0)


class Dispatcher:
    """Routes tool calls to FMP and reshapes the answers."""

    def __init__(
        self,
        client: FMPClient | None = None,
        registry: Mapping[str, ToolDefinition] = TOOL_REGISTRY,
    ):
        self.client = client or FMPClient()
        self.registry = registry

    def list_tools(self) -> list[types.Tool]:
        return [tool.to_mcp_tool() for tool in self.registry.values()]

    async def dispatch(self, name: str, arguments: dict[str, Any] | None) -> types.CallToolResult:
        """Serve one tool call.

        Args:
            name: Tool name as sent by the host
            arguments: Raw tool arguments

        Returns:
            A result with one text block: pretty-printed JSON on success,
            an informational message for empty or plan-restricted data, or
            an error-flagged message on failure
        """
        tool = self.registry.get(name)
        if tool is None:
            logger.warning("unknown_tool", tool=name)
            return text_result(f"Unknown tool: {name}", is_error=True)

        bind_context(tool=name)
        try:
            return await self._run(tool, arguments or {})
        except Exception as e:
            logger.error("tool_call_failed", error=str(e), error_type=type(e).__name__)
            return text_result(f"{tool.failure_prefix}: {e}", is_error=True)
        finally:
            unbind_context("tool")

    async def _run(self, tool: ToolDefinition, arguments: dict[str, Any]) -> types.CallToolResult:
        args = validate_tool_arguments(tool, arguments)
        endpoint = tool.endpoint_path(args)
        params = tool.build_params(args)

        try:
            data = await self.client.call(endpoint, params)
        except UpstreamError as e:
            if e.status == 403:
                logger.info("tool_call_restricted", status=e.status)
                return text_result(tool.restricted_text(), is_error=True)
            raise

        if is_restricted(data):
            logger.info("tool_call_restricted", status=200)
            return text_result(f"{tool.restricted_text()} {FREE_PLAN_NOTE}")

        if is_empty(data):
            logger.info("tool_call_empty")
            return text_result(tool.empty_text(arguments))

        shaped = tool.shape(data)
        logger.info("tool_call_succeeded")
        return text_result(json.dumps(shaped, indent=2, ensure_ascii=False))
