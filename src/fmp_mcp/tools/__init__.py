"""Static registry of every FMP tool, keyed by tool name."""

from types import MappingProxyType

from fmp_mcp.tools import charts, company, quotes, statements
from fmp_mcp.tools.base import ToolDefinition


def _build_registry() -> MappingProxyType:
    registry: dict[str, ToolDefinition] = {}
    for module in (company, statements, charts, quotes):
        for tool in module.TOOLS:
            if tool.name in registry:
                raise ValueError(f"Duplicate tool name: {tool.name}")
            registry[tool.name] = tool
    return MappingProxyType(registry)


TOOL_REGISTRY = _build_registry()

__all__ = ["TOOL_REGISTRY", "ToolDefinition"]
