"""Starlette application routing the MCP transports and the diagnostic endpoint."""

import contextlib
import logging
from collections.abc import AsyncIterator
from typing import TYPE_CHECKING

from starlette.applications import Starlette
from starlette.exceptions import HTTPException
from starlette.requests import Request
from starlette.responses import JSONResponse, PlainTextResponse, Response
from starlette.routing import BaseRoute, Mount, Route
from starlette.types import ASGIApp, Receive, Scope, Send

from timezone_finder.adapters.web.client_address import extract_client_address

logger = logging.getLogger(__name__)

if TYPE_CHECKING:
    from mcp.server.fastmcp import FastMCP

    from timezone_finder.application.services import TimezoneService

TIMEZONE_PATH = "/timezone"


def create_timezone_endpoint(service: "TimezoneService"):
    """Create the diagnostic endpoint reporting the caller's address and timezone."""

    async def timezone_endpoint(request: Request) -> Response:
        ip = extract_client_address(request.headers)
        report = await service.report(ip)
        logger.debug(f"Timezone report for {ip}: {report.timezone}")
        return JSONResponse(report.model_dump())

    return timezone_endpoint


class _AsgiEndpoint:
    """Wraps an ASGI callable so a `Route` serves it as-is instead of as a request handler."""

    def __init__(self, app: ASGIApp) -> None:
        self._app = app

    async def __call__(self, scope: Scope, receive: Receive, send: Send) -> None:
        await self._app(scope, receive, send)


def exact_path_routes(routes: list[BaseRoute]) -> list[Route]:
    """Serve every mounted app at its bare path too, so POSTs there are not redirected."""
    return [
        Route(route.path, _AsgiEndpoint(route.app), methods=["POST"])
        for route in routes
        if isinstance(route, Mount)
    ]


async def not_found(request: Request, exc: HTTPException) -> Response:
    """Plain-text 404 for every unrouted path."""
    return PlainTextResponse("Not found", status_code=404)


def create_app(service: "TimezoneService", mcp: "FastMCP") -> Starlette:
    """Build the HTTP application.

    Routes:
        /sse, /sse/message: MCP over Server-Sent Events.
        /mcp: MCP over Streamable HTTP.
        /timezone: diagnostic JSON ``{"timezone": ..., "ip": ...}``.
        Anything else: 404 ``Not found``.
    """
    sse_app = mcp.sse_app()
    streamable_http_app = mcp.streamable_http_app()

    @contextlib.asynccontextmanager
    async def lifespan(app: Starlette) -> AsyncIterator[None]:
        # The Streamable HTTP transport needs its session manager running
        async with mcp.session_manager.run():
            logger.info("MCP transports ready")
            yield
        logger.info("MCP transports stopped")

    routes = [
        Route(TIMEZONE_PATH, create_timezone_endpoint(service), methods=["GET"]),
        *exact_path_routes(sse_app.routes),
        *sse_app.routes,
        *streamable_http_app.routes,
    ]

    return Starlette(
        routes=routes,
        exception_handlers={404: not_found},
        lifespan=lifespan,
    )
