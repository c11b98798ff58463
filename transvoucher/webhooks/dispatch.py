import inspect
import logging
from collections.abc import Awaitable, Callable, Mapping
from types import MappingProxyType
from typing import Any, Optional

from transvoucher.core.errors import WebhookVerificationError
from transvoucher.webhooks.parser import parse_event
from transvoucher.webhooks.signature import Payload, Secret

logger = logging.getLogger(__name__)

EventHandler = Callable[[dict[str, Any]], Optional[Awaitable[None]]]
WebhookHandler = Callable[[Payload, str], Awaitable[None]]


def create_handler(
    secret: Secret, handlers: Mapping[str, EventHandler]
) -> WebhookHandler:
    """
    Bind ``secret`` and a per-event-type handler map into a delivery handler.

    The returned coroutine function raises WebhookVerificationError for
    deliveries that fail verification, runs the handler registered for the
    event type, and does nothing for event types without a handler.
    Handler exceptions propagate unchanged.
    """
    registry = MappingProxyType(dict(handlers))

    async def handle(payload: Payload, signature: str) -> None:
        result = parse_event(payload, signature, secret)
        if not result.is_valid or result.event is None:
            raise WebhookVerificationError(result.error or "Invalid webhook event")

        event_type = result.event_type
        handler = registry.get(event_type)
        if handler is None:
            logger.info(f"No handler registered for {event_type}, skipping")
            return

        logger.info(f"Dispatching {event_type}")
        outcome = handler(result.event)
        if inspect.isawaitable(outcome):
            await outcome

    return handle
