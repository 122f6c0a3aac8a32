"""Webhook handling for GitHub events."""

from webhook_dispatcher.webhook.handler import router
from webhook_dispatcher.webhook.validator import sign_payload, verify_signature

__all__ = ["router", "sign_payload", "verify_signature"]
