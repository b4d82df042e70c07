"""FastMCP server exposing the ``get_timezone`` tool.

The underlying HTTP request is recovered from the FastMCP context at the tool
boundary only and passed on as an explicit optional argument. A missing
request means the tool was invoked locally (stdio or in-process), where no
client address exists.
"""

import logging
from typing import Any

from mcp.server.fastmcp import Context, FastMCP

from timezone_finder import __version__
from timezone_finder.adapters.config import AppConfig
from timezone_finder.adapters.web.client_address import extract_client_address_from_request
from timezone_finder.application.services import TimezoneService

logger = logging.getLogger(__name__)

GET_TIMEZONE_TOOL_NAME = "get_timezone"
SSE_PATH = "/sse"
# Trailing slash so the endpoint announced to SSE clients matches the mounted route
SSE_MESSAGE_PATH = "/sse/message/"
STREAMABLE_HTTP_PATH = "/mcp"


def get_request_from_context(ctx: Any) -> Any | None:
    """Return the HTTP request behind a tool invocation, or None for local invocations."""
    try:
        request_context = ctx.request_context
    except (AttributeError, ValueError):
        return None
    return getattr(request_context, "request", None)


async def describe_caller_timezone(service: TimezoneService, request: Any | None) -> str:
    """Answer the timezone question for the client behind ``request``.

    Args:
        service: Timezone service used for the lookup.
        request: Inbound HTTP request, or None when invoked without HTTP.

    Returns:
        Text naming the timezone, an unknown timezone, or an unavailable address.
    """
    ip = extract_client_address_from_request(request) if request is not None else None
    if request is not None and ip is None:
        logger.info("No client address in request headers")
    return await service.describe(ip)


def create_mcp_server(service: TimezoneService, config: AppConfig) -> FastMCP:
    """Build the FastMCP server with the timezone tool registered."""
    mcp = FastMCP(
        config.server_name,
        instructions="Tells the calling client which timezone it is in, based on its IP address.",
        host=config.host,
        port=config.port,
        sse_path=SSE_PATH,
        message_path=SSE_MESSAGE_PATH,
        streamable_http_path=STREAMABLE_HTTP_PATH,
        stateless_http=config.stateless_http,
        log_level=config.log_level,
    )

    @mcp.tool(
        name=GET_TIMEZONE_TOOL_NAME,
        description="Get the timezone of the calling client, inferred from its IP address.",
    )
    async def get_timezone(ctx: Context) -> str:
        return await describe_caller_timezone(service, get_request_from_context(ctx))

    logger.info(f"MCP server '{config.server_name}' v{__version__} created")
    return mcp
