"""GitHub webhook handler."""

import asyncio
import logging

from fastapi import APIRouter, BackgroundTasks, Depends, Header, HTTPException, Request

from webhook_dispatcher.config import Settings
from webhook_dispatcher.delivery import forward_payload
from webhook_dispatcher.dependencies import get_app_settings
from webhook_dispatcher.exceptions import DispatcherError
from webhook_dispatcher.webhook.dispatcher import dispatch_event
from webhook_dispatcher.webhook.events import parse_inbound_event
from webhook_dispatcher.webhook.validator import verify_signature

logger = logging.getLogger(__name__)
router = APIRouter()


@router.post("/")
async def github_webhook(
    request: Request,
    background_tasks: BackgroundTasks,
    settings: Settings = Depends(get_app_settings),
    x_hub_signature_256: str | None = Header(None),
    x_github_event: str | None = Header(None),
    x_github_delivery: str | None = Header(None),
) -> dict[str, str]:
    """
    Handle incoming GitHub webhooks.

    Validates the signature, resolves the route for the repository,
    applies the route's event filter and queues the forward in the
    background. Unrouted and filtered events still get a 200 so GitHub
    does not disable the hook.
    """
    # Read raw body for signature validation
    body = await request.body()

    if not verify_signature(body, x_hub_signature_256, settings.webhook_secret):
        raise HTTPException(status_code=401, detail="Unauthorized")

    event = parse_inbound_event(
        body,
        x_github_event,
        signature_header=x_hub_signature_256,
        delivery_id=x_github_delivery,
    )
    logger.info(
        f"{event.full_name}: {event.event_type} event received"
        + (f" (delivery {event.delivery_id})" if event.delivery_id else "")
    )

    try:
        # Route file reads happen off the event loop
        decision = await asyncio.to_thread(dispatch_event, event, settings.route_file)
    except DispatcherError:
        raise
    except Exception as e:
        logger.exception(f"Unexpected error dispatching {event.full_name}: {e}")
        raise DispatcherError(str(e)) from e

    if not decision.forward or decision.route is None:
        return {"status": "ignored", "reason": decision.reason}

    background_tasks.add_task(
        forward_payload,
        decision.route.target,
        event.raw_body,
        timeout=settings.forward_timeout,
        debug=settings.debug,
    )
    return {"status": "forwarded"}
