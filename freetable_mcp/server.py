import logging
from logging.handlers import RotatingFileHandler
from pathlib import Path

from fastmcp import FastMCP
from starlette.applications import Starlette
from starlette.requests import Request
from starlette.responses import JSONResponse

from freetable_mcp.clients.freetable import FreeTableClient

logger = logging.getLogger(__name__)

SERVER_NAME = "FreeTable Restaurant Booking"
SERVER_VERSION = "1.0.0"

mcp = FastMCP(SERVER_NAME, version=SERVER_VERSION)


def get_client() -> FreeTableClient:
    """Build a FreeTableClient pointed at the configured backend."""
    from freetable_mcp.config import get_settings

    settings = get_settings()
    return FreeTableClient(
        base_url=settings.freetable_api_base,
        timeout=settings.http_timeout,
    )


@mcp.custom_route("/health", methods=["GET"])
async def health_check(request: Request) -> JSONResponse:
    """Liveness probe for HTTP deployments."""
    return JSONResponse({"status": "ok"})


def setup_logging(log_level: str, data_dir: Path) -> None:
    """Configure logging with file rotation and console output.

    Args:
        log_level: Logging level string (DEBUG, INFO, WARNING, ERROR).
        data_dir: Base data directory; logs go to data_dir/logs/server.log.
    """
    level = getattr(logging, log_level.upper(), logging.INFO)
    root_logger = logging.getLogger()
    root_logger.setLevel(level)

    formatter = logging.Formatter(
        "%(asctime)s [%(levelname)s] %(name)s: %(message)s",
        datefmt="%Y-%m-%d %H:%M:%S",
    )

    # Console handler: exact type check avoids matching subclasses (FileHandler, etc.)
    if not any(type(h) is logging.StreamHandler for h in root_logger.handlers):
        console = logging.StreamHandler()
        console.setLevel(level)
        console.setFormatter(formatter)
        root_logger.addHandler(console)

    log_dir = data_dir / "logs"
    log_dir.mkdir(parents=True, exist_ok=True)
    log_file = log_dir / "server.log"

    if not any(isinstance(h, RotatingFileHandler) for h in root_logger.handlers):
        file_handler = RotatingFileHandler(
            log_file,
            maxBytes=5 * 1024 * 1024,  # 5 MB
            backupCount=3,
        )
        file_handler.setLevel(level)
        file_handler.setFormatter(formatter)
        root_logger.addHandler(file_handler)


_tools_registered = False


def initialize() -> FastMCP:
    """Set up directories, logging, and register tools. Returns the MCP server."""
    global _tools_registered  # noqa: PLW0603
    from freetable_mcp.config import get_settings

    settings = get_settings()

    settings.data_dir.mkdir(parents=True, exist_ok=True)
    setup_logging(settings.log_level, settings.data_dir)

    if not _tools_registered:
        from freetable_mcp.tools.booking import register_booking_tools
        from freetable_mcp.tools.restaurants import register_restaurant_tools

        register_restaurant_tools(mcp)
        register_booking_tools(mcp)
        _tools_registered = True

    logger.info("FreeTable MCP server initialized (backend %s)", settings.freetable_api_base)
    return mcp


def create_http_app(server: FastMCP | None = None) -> Starlette:
    """Serve one MCP server over both HTTP transports.

    ``/mcp`` is the streamable HTTP (request/response) endpoint and ``/sse``
    the long-lived event stream with its message endpoint. Unknown paths
    fall through to Starlette's plain 404.
    """
    server = server or mcp
    streamable = server.http_app(path="/mcp", transport="http")
    sse = server.http_app(path="/sse", transport="sse")

    known = {getattr(route, "path", None) for route in streamable.routes}
    routes = list(streamable.routes)
    routes.extend(r for r in sse.routes if getattr(r, "path", None) not in known)

    return Starlette(
        routes=routes,
        middleware=streamable.user_middleware,
        lifespan=streamable.router.lifespan_context,
    )
