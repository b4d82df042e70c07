"""MCP server adapter exposing the timezone tool."""

from timezone_finder.adapters.mcp.server import (
    GET_TIMEZONE_TOOL_NAME,
    SSE_MESSAGE_PATH,
    SSE_PATH,
    STREAMABLE_HTTP_PATH,
    create_mcp_server,
    describe_caller_timezone,
)

__all__ = [
    "GET_TIMEZONE_TOOL_NAME",
    "SSE_MESSAGE_PATH",
    "SSE_PATH",
    "STREAMABLE_HTTP_PATH",
    "create_mcp_server",
    "describe_caller_timezone",
]
