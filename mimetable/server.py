"""mimetable FastMCP server.

Thin wrapper that wires the MCP server to the tools/ and resources/
modules. Lookups go through the frozen MimeTable held by Config.
"""

import logging
import sys
from collections.abc import AsyncIterator
from contextlib import asynccontextmanager
from typing import Any

from fastmcp import FastMCP
from starlette.requests import Request
from starlette.responses import PlainTextResponse

from mimetable.config import Settings
from mimetable.middleware import ErrorHandlingMiddleware, LoggingMiddleware
from mimetable.resources import extension_resource, list_types_resource
from mimetable.services import get_config
from mimetable.tools import guess_type, lookup_extension, parse_media_type
from mimetable.utils.console import MCPRequestFormatter


def _configure_logging() -> None:
    """Configure colorful logging for the mimetable package.

    Called at module load time so logging is set up regardless of how
    the server is started.
    """
    settings = Settings.from_env()
    log_level = settings.log_level
    use_colors = settings.log_colors

    # Disable colors if not a TTY
    if not sys.stderr.isatty():
        use_colors = False

    pkg_logger = logging.getLogger("mimetable")
    pkg_logger.setLevel(getattr(logging, log_level, logging.INFO))

    # Only add handler if not already configured
    if not pkg_logger.handlers:
        handler = logging.StreamHandler(sys.stderr)
        handler.setFormatter(MCPRequestFormatter(use_colors=use_colors))
        pkg_logger.addHandler(handler)
        pkg_logger.propagate = False

    for noisy_logger in ["uvicorn", "uvicorn.access", "uvicorn.error", "fastmcp", "starlette"]:
        logging.getLogger(noisy_logger).setLevel(logging.WARNING)


_configure_logging()

logger = logging.getLogger(__name__)


@asynccontextmanager
async def app_lifespan(server: FastMCP) -> AsyncIterator[dict[str, Any]]:
    """Load the mime.types table at startup.

    Args:
        server: The FastMCP server instance

    Yields:
        Dict with the loaded extension count
    """
    logger.info("mimetable server starting up")

    config = get_config()
    table = config.get_table()
    logger.info("Loaded %d extension(s) from %s", len(table), config.mime_file)
    logger.info("mimetable server ready to accept connections")

    try:
        yield {"extensions": len(table)}
    finally:
        logger.info("mimetable server shutting down")


def configure_middleware(server: FastMCP) -> None:
    """Configure middleware stack for the server.

    Adds middleware in order: ErrorHandling -> Logging

    Args:
        server: The FastMCP server to configure.
    """
    settings = get_config().settings

    # First added = innermost
    server.add_middleware(
        ErrorHandlingMiddleware(include_traceback=settings.include_traceback)
    )
    server.add_middleware(
        LoggingMiddleware(
            include_payloads=settings.log_payloads,
            slow_threshold_ms=float(settings.slow_threshold_ms),
        )
    )


def create_server() -> FastMCP:
    """Create and configure the MCP server with middleware, tools and resources.

    Returns:
        Configured FastMCP server instance
    """
    server = FastMCP("mimetable", lifespan=app_lifespan)

    configure_middleware(server)

    server.tool()(parse_media_type)
    server.tool()(lookup_extension)
    server.tool()(guess_type)

    server.resource("types://list", mime_type="text/plain")(list_types_resource)
    server.resource("mime://{extension}", mime_type="text/plain")(extension_resource)

    @server.custom_route("/health", methods=["GET"])
    async def health_check(request: Request) -> PlainTextResponse:
        """Health check endpoint."""
        client_host = request.client.host if request.client else "unknown"
        logger.debug("Health check from %s", client_host)
        return PlainTextResponse("OK")

    return server


# Default server instance
mcp = create_server()
