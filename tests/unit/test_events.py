"""Tests for inbound event extraction."""

import json

import pytest

from webhook_dispatcher.exceptions import PayloadValidationError
from webhook_dispatcher.webhook.events import parse_inbound_event


def _body(payload: object) -> bytes:
    return json.dumps(payload).encode()


def test_parse_push_event():
    """Test extraction of owner, repository and headers."""
    body = _body(
        {
            "ref": "refs/heads/main",
            "repository": {"name": "widgets", "owner": {"login": "acme"}},
        }
    )

    event = parse_inbound_event(body, "push", signature_header="sha256=abc", delivery_id="d-1")

    assert event.event_type == "push"
    assert event.owner_login == "acme"
    assert event.repo_name == "widgets"
    assert event.full_name == "acme/widgets"
    assert event.signature_header == "sha256=abc"
    assert event.delivery_id == "d-1"


def test_raw_body_is_preserved():
    """Test that the original bytes are kept unchanged."""
    body = b'{ "repository" : {"owner":{"login":"acme"},   "name":"widgets"} }'

    assert parse_inbound_event(body, "push").raw_body is body


@pytest.mark.parametrize("event_type", [None, "", "   "])
def test_missing_event_type(event_type: str | None):
    """Test that the event type header is required."""
    body = _body({"repository": {"name": "widgets", "owner": {"login": "acme"}}})

    with pytest.raises(PayloadValidationError, match="X-GitHub-Event"):
        parse_inbound_event(body, event_type)


@pytest.mark.parametrize("body", [b"not json", b"", b"\xff\xff\xff"])
def test_invalid_json(body: bytes):
    """Test that non-JSON bodies are rejected."""
    with pytest.raises(PayloadValidationError):
        parse_inbound_event(body, "push")


def test_non_object_payload():
    """Test that JSON arrays are rejected."""
    with pytest.raises(PayloadValidationError, match="JSON object"):
        parse_inbound_event(b"[1, 2]", "push")


@pytest.mark.parametrize(
    "payload",
    [
        {},
        {"repository": None},
        {"repository": {"name": "widgets"}},
        {"repository": {"name": "widgets", "owner": {}}},
        {"repository": {"name": "widgets", "owner": {"login": 7}}},
        {"repository": {"owner": {"login": "acme"}}},
        {"repository": {"name": "", "owner": {"login": "acme"}}},
        {"zen": "Keep it logically awesome."},
    ],
)
def test_missing_repository_fields(payload: dict):
    """Test that repository owner login and name are required."""
    with pytest.raises(PayloadValidationError):
        parse_inbound_event(_body(payload), "push")


def test_validation_error_status():
    """Test that payload errors map to 400."""
    assert PayloadValidationError.status_code == 400
