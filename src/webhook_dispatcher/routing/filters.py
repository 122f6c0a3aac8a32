"""Event type filtering."""

from webhook_dispatcher.routing.models import Route


def is_event_allowed(event_type: str, route: Route) -> bool:
    """Check whether a route forwards the given event type (case-sensitive)."""
    if route.events is None:
        return True
    return event_type in route.events
