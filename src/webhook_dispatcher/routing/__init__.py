"""Routing table loading, resolution and event filtering."""

from webhook_dispatcher.routing.filters import is_event_allowed
from webhook_dispatcher.routing.loader import RouteFormat, load_route_table, parse_route_table
from webhook_dispatcher.routing.models import Route, RouteListing, RouteTable
from webhook_dispatcher.routing.resolver import list_routes, resolve_route

__all__ = [
    "Route",
    "RouteFormat",
    "RouteListing",
    "RouteTable",
    "is_event_allowed",
    "list_routes",
    "load_route_table",
    "parse_route_table",
    "resolve_route",
]
