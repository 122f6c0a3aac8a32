"""Route resolution and filtering for a single inbound event."""

import logging
from dataclasses import dataclass
from pathlib import Path

from webhook_dispatcher.routing import Route, is_event_allowed, load_route_table, resolve_route
from webhook_dispatcher.webhook.events import InboundEvent

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class DispatchDecision:
    """Outcome of routing one event."""

    route: Route | None
    forward: bool
    reason: str


def dispatch_event(event: InboundEvent, route_file: Path) -> DispatchDecision:
    """
    Decide whether and where to forward an event.

    The route file is reloaded for every event, so each decision works on
    its own snapshot of the table.

    Raises:
        ConfigurationError: If the route file cannot be loaded
    """
    table = load_route_table(route_file)
    route = resolve_route(table, event.owner_login, event.repo_name)

    if route is None:
        return DispatchDecision(route=None, forward=False, reason="no route")

    if not is_event_allowed(event.event_type, route):
        logger.info(
            f"Event {event.event_type} not allowed for {event.full_name}, "
            f"route accepts {list(route.events or ())}"
        )
        return DispatchDecision(route=route, forward=False, reason="event filtered")

    return DispatchDecision(route=route, forward=True, reason="forwarded")
