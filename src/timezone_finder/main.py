"""Main entry point for the Timezone Finder MCP server."""

import argparse
import asyncio
import logging
import sys

import aiohttp
import uvicorn
from pydantic import ValidationError

from timezone_finder.adapters.config import AppConfig
from timezone_finder.adapters.geoip_api import IpApiTimezoneRepository
from timezone_finder.adapters.mcp import create_mcp_server
from timezone_finder.adapters.web import create_app
from timezone_finder.application.services import TimezoneService

# Configure logging
logging.basicConfig(
    level=logging.INFO,
    format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
    datefmt="%Y-%m-%d %H:%M:%S",
    stream=sys.stderr,
)

logger = logging.getLogger(__name__)


def _parse_args(argv: list[str] | None = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(
        description="MCP server telling clients which timezone they are in",
    )
    parser.add_argument(
        "--transport",
        choices=["http", "stdio"],
        help="Serve MCP over HTTP (SSE and Streamable HTTP) or stdio (default: from config)",
    )
    parser.add_argument("--host", help="Host to bind the HTTP server to")
    parser.add_argument("--port", type=int, help="Port to bind the HTTP server to")
    return parser.parse_args(argv)


def load_config(args: argparse.Namespace) -> AppConfig:
    """Load configuration from the environment, with command line overrides."""
    overrides = {
        key: value
        for key, value in (
            ("transport", args.transport),
            ("host", args.host),
            ("port", args.port),
        )
        if value is not None
    }
    return AppConfig(**overrides)


async def main(config: AppConfig) -> None:
    """Main application entry point."""
    logging.getLogger().setLevel(config.log_level)

    # One aiohttp session for all geolocation lookups
    async with aiohttp.ClientSession() as session:
        repository = IpApiTimezoneRepository(
            session,
            base_url=config.geoip_api_url,
            timeout=config.geoip_api_timeout,
        )
        service = TimezoneService(repository)
        mcp = create_mcp_server(service, config)

        if config.transport == "stdio":
            logger.info("Serving MCP over stdio")
            await mcp.run_stdio_async()
            return

        app = create_app(service, mcp)
        logger.info(f"Serving MCP over HTTP on {config.host}:{config.port}")
        server = uvicorn.Server(
            uvicorn.Config(
                app,
                host=config.host,
                port=config.port,
                log_level=config.log_level.lower(),
            )
        )
        await server.serve()


def run(argv: list[str] | None = None) -> None:
    """Console script entry point."""
    args = _parse_args(argv)
    try:
        config = load_config(args)
    except ValidationError as e:
        logger.error(f"Invalid configuration: {e}")
        sys.exit(1)

    try:
        asyncio.run(main(config))
    except KeyboardInterrupt:
        logger.info("Shutting down...")


if __name__ == "__main__":
    run()
