"""Downstream delivery."""

from webhook_dispatcher.delivery.forwarder import forward_payload

__all__ = ["forward_payload"]
