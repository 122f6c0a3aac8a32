"""Route listing endpoint."""

import logging

from fastapi import APIRouter, Depends
from fastapi.responses import JSONResponse, PlainTextResponse, Response

from webhook_dispatcher.config import Settings
from webhook_dispatcher.dependencies import get_app_settings
from webhook_dispatcher.routing.loader import load_route_table
from webhook_dispatcher.routing.models import RouteListing
from webhook_dispatcher.routing.resolver import list_routes

logger = logging.getLogger(__name__)
router = APIRouter()


def format_listing(routes: list[RouteListing]) -> str:
    """Render routes as one ``owner[/repo] -> target`` line each."""
    return "\n".join(str(route) for route in routes)


@router.get("/routes")
def get_routes(
    format: str | None = None,  # noqa: A002
    settings: Settings = Depends(get_app_settings),
) -> Response:
    """List all configured routes as text, or as JSON with ``?format=json``."""
    routes = list_routes(load_route_table(settings.route_file))
    logger.debug(f"Listing {len(routes)} routes")

    if format == "json":
        return JSONResponse(content=[route.as_dict() for route in routes])
    return PlainTextResponse(format_listing(routes))
