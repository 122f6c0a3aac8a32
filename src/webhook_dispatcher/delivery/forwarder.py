"""Outbound delivery of webhook payloads."""

import logging

import httpx

logger = logging.getLogger(__name__)


async def forward_payload(
    target_url: str,
    payload: bytes,
    *,
    timeout: float = 10.0,
    debug: bool = False,
    transport: httpx.AsyncBaseTransport | None = None,
) -> None:
    """
    POST the original payload bytes to a downstream target.

    A single attempt is made. Failures are logged and never raised, since
    the inbound response has already been sent.

    Args:
        target_url: Resolved route target
        payload: The raw inbound request body
        timeout: Request timeout in seconds
        debug: Log the downstream response status and body
        transport: Optional httpx transport override
    """
    async with httpx.AsyncClient(transport=transport) as client:
        try:
            response = await client.post(
                target_url,
                content=payload,
                headers={"Content-Type": "application/json"},
                timeout=timeout,
            )
            if debug:
                logger.info(f"Response status from {target_url}: {response.status_code}")
                logger.info(f"Response body from {target_url}: {response.text[:1000]}")
            response.raise_for_status()
            logger.info(f"Payload sent to {target_url}")
        except (httpx.HTTPError, httpx.InvalidURL) as e:
            logger.error(f"Error sending payload to {target_url}: {e}")
