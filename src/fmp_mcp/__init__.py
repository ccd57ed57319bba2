"""FMP MCP Server - Financial Modeling Prep data exposed as MCP tools."""

__version__ = "1.0.0"

SERVER_NAME = "fmp-mcp-server"

__all__ = ["SERVER_NAME", "__version__"]
