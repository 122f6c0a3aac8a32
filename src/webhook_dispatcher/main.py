"""FastAPI application entry point."""

import argparse
import json
import logging
import sys
from contextlib import asynccontextmanager

import uvicorn
from fastapi import FastAPI, Request
from fastapi.responses import JSONResponse, PlainTextResponse

from webhook_dispatcher import __version__
from webhook_dispatcher.config import Settings, get_settings
from webhook_dispatcher.exceptions import ConfigurationError, DispatcherError
from webhook_dispatcher.routing import list_routes, load_route_table
from webhook_dispatcher.routing.api import format_listing
from webhook_dispatcher.routing.api import router as routes_router
from webhook_dispatcher.webhook import router as webhook_router

logger = logging.getLogger(__name__)


def setup_logging(level: str) -> None:
    """Configure structured logging."""
    logging.basicConfig(
        level=getattr(logging, level.upper()),
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
        handlers=[logging.StreamHandler(sys.stdout)],
    )


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Application lifespan handler."""
    settings = getattr(app.state, "settings", None) or get_settings()
    app.state.settings = settings
    setup_logging(settings.effective_log_level)
    logger.info(f"Webhook dispatcher starting up, routes from {settings.route_file}")
    if not settings.signature_required:
        logger.warning("No webhook secret configured - signature verification is disabled")
    yield
    logger.info("Webhook dispatcher shutting down")


async def dispatcher_error_handler(_request: Request, exc: Exception) -> JSONResponse:
    """Map dispatcher errors to their status code with a generic detail."""
    status_code = getattr(exc, "status_code", 500)
    detail = getattr(exc, "detail", "Internal Server Error")

    if status_code >= 500:
        logger.error(f"{type(exc).__name__}: {exc}")
    else:
        logger.warning(f"Rejected request ({status_code}): {exc}")

    return JSONResponse(status_code=status_code, content={"detail": detail})


def create_app(settings: Settings | None = None) -> FastAPI:
    """Create and configure the FastAPI application."""
    app = FastAPI(
        title="Webhook Dispatcher",
        description="Routes GitHub webhook events to downstream services",
        version=__version__,
        lifespan=lifespan,
    )
    if settings is not None:
        app.state.settings = settings

    app.add_exception_handler(DispatcherError, dispatcher_error_handler)

    # Include routers
    app.include_router(webhook_router, tags=["webhook"])
    app.include_router(routes_router, tags=["routes"])

    @app.api_route("/health", methods=["GET", "POST"], response_class=PlainTextResponse)
    async def health_check() -> str:
        """Health check endpoint."""
        return "alive"

    return app


app = create_app()


def print_routes(settings: Settings, output_format: str) -> int:
    """Print the configured routes, returning a process exit code."""
    try:
        routes = list_routes(load_route_table(settings.route_file))
    except ConfigurationError as e:
        print(f"Error listing routes: {e}", file=sys.stderr)
        return 1

    if output_format == "json":
        print(json.dumps([route.as_dict() for route in routes], indent=2))
    else:
        print(format_listing(routes))
    return 0


def cli() -> None:
    """CLI entry point."""
    parser = argparse.ArgumentParser(description="Webhook Dispatcher - GitHub webhook router")
    subparsers = parser.add_subparsers(dest="command", help="Available commands")

    # Serve command
    serve_parser = subparsers.add_parser("serve", help="Start the webhook server")
    serve_parser.add_argument("--host", default=None, help="Host to bind to")
    serve_parser.add_argument("--port", type=int, default=None, help="Port to bind to")
    serve_parser.add_argument("--reload", action="store_true", help="Enable auto-reload")

    # Routes command
    routes_parser = subparsers.add_parser("routes", help="List configured routes")
    routes_parser.add_argument(
        "--format", choices=["text", "json"], default="text", help="Output format"
    )

    args = parser.parse_args()

    if args.command == "serve":
        settings = get_settings()
        setup_logging(settings.effective_log_level)
        uvicorn.run(
            "webhook_dispatcher.main:app",
            host=args.host or settings.host,
            port=args.port or settings.port,
            reload=args.reload,
        )
    elif args.command == "routes":
        sys.exit(print_routes(get_settings(), args.format))
    else:
        parser.print_help()


if __name__ == "__main__":
    cli()
