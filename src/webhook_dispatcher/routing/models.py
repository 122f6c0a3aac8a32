"""Route data structures."""

from dataclasses import dataclass
from typing import Any

# owner -> {"target": ..., "events": [...], "<repo>": {"target": ..., "events": [...]}}
RouteTable = dict[str, Any]


@dataclass(frozen=True)
class Route:
    """A resolved forwarding destination."""

    target: str
    events: tuple[str, ...] | None = None  # None means every event type is forwarded

    @classmethod
    def from_entry(cls, entry: Any) -> "Route | None":
        """
        Build a Route from a raw table entry.

        Returns None when the entry is not a mapping or has no usable target.
        An ``events`` value that is not a list is ignored, leaving the route
        unfiltered.
        """
        if not isinstance(entry, dict):
            return None

        target = entry.get("target")
        if not isinstance(target, str) or not target:
            return None

        events = entry.get("events")
        if isinstance(events, list):
            return cls(target=target, events=tuple(events))
        return cls(target=target)


@dataclass(frozen=True)
class RouteListing:
    """One line of the configured route listing."""

    owner: str
    target: str
    repo: str | None = None

    def as_dict(self) -> dict[str, str]:
        data = {"owner": self.owner}
        if self.repo is not None:
            data["repo"] = self.repo
        data["target"] = self.target
        return data

    def __str__(self) -> str:
        name = f"{self.owner}/{self.repo}" if self.repo is not None else self.owner
        return f"{name} -> {self.target}"
