"""Inbound webhook event extraction."""

import json
from dataclasses import dataclass
from typing import Any

from webhook_dispatcher.exceptions import PayloadValidationError


@dataclass(frozen=True)
class InboundEvent:
    """A single webhook delivery, built per request and never stored."""

    event_type: str
    owner_login: str
    repo_name: str
    raw_body: bytes
    signature_header: str | None = None
    delivery_id: str | None = None

    @property
    def full_name(self) -> str:
        return f"{self.owner_login}/{self.repo_name}"


def _require_str(data: Any, *path: str) -> str:
    value = data
    for key in path:
        if not isinstance(value, dict) or key not in value:
            raise PayloadValidationError(f"Payload is missing {'.'.join(path)}")
        value = value[key]

    if not isinstance(value, str) or not value:
        raise PayloadValidationError(f"Payload field {'.'.join(path)} must be a non-empty string")
    return value


def parse_inbound_event(
    raw_body: bytes,
    event_type: str | None,
    signature_header: str | None = None,
    delivery_id: str | None = None,
) -> InboundEvent:
    """
    Build an InboundEvent from the raw request.

    Args:
        raw_body: The request body exactly as received
        event_type: The X-GitHub-Event header value
        signature_header: The X-Hub-Signature-256 header value
        delivery_id: The X-GitHub-Delivery header value

    Raises:
        PayloadValidationError: If the event type or repository fields are missing
    """
    if not event_type or not event_type.strip():
        raise PayloadValidationError("X-GitHub-Event header missing")

    try:
        payload = json.loads(raw_body)
    except (json.JSONDecodeError, UnicodeDecodeError) as e:
        raise PayloadValidationError(f"Payload is not valid JSON: {e}") from e

    if not isinstance(payload, dict):
        raise PayloadValidationError("Payload must be a JSON object")

    return InboundEvent(
        event_type=event_type.strip(),
        owner_login=_require_str(payload, "repository", "owner", "login"),
        repo_name=_require_str(payload, "repository", "name"),
        raw_body=raw_body,
        signature_header=signature_header,
        delivery_id=delivery_id,
    )
