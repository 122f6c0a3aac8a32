"""Route resolution for owner/repository pairs."""

import logging

from webhook_dispatcher.routing.models import Route, RouteListing, RouteTable

logger = logging.getLogger(__name__)


def resolve_route(table: RouteTable, owner: str, repo: str) -> Route | None:
    """
    Find the route for a repository.

    A repository entry with a target wins over the owner entry; there is no
    field merge between the two. Names are compared exactly.

    Args:
        table: Routing table from load_route_table
        owner: Repository owner login
        repo: Repository name

    Returns:
        The matching Route, or None if neither level has a target
    """
    owner_entry = table.get(owner)
    if not isinstance(owner_entry, dict):
        if owner_entry is not None:
            logger.warning(f"Ignoring non-mapping route entry for owner {owner}")
        logger.info(f"No route found for {owner}/{repo}")
        return None

    route = Route.from_entry(owner_entry.get(repo))
    if route is not None:
        logger.info(f"Routing {owner}/{repo} to {route.target}")
        return route

    route = Route.from_entry(owner_entry)
    if route is not None:
        logger.info(f"Owner target match, routing {owner}/{repo} to {route.target}")
        return route

    logger.info(f"No route found for {owner}/{repo}")
    return None


def list_routes(table: RouteTable) -> list[RouteListing]:
    """Flatten the routing table into owner and repository listings."""
    routes: list[RouteListing] = []

    for owner, owner_entry in table.items():
        if not isinstance(owner_entry, dict):
            continue

        owner_route = Route.from_entry(owner_entry)
        if owner_route is not None:
            routes.append(RouteListing(owner=owner, target=owner_route.target))

        for repo, repo_entry in owner_entry.items():
            repo_route = Route.from_entry(repo_entry)
            if repo_route is not None:
                routes.append(RouteListing(owner=owner, repo=repo, target=repo_route.target))

    return routes
