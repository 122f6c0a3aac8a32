"""Webhook Dispatcher - routes GitHub webhook events to downstream services."""

__version__ = "0.1.0"
