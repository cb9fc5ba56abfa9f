import hashlib
import hmac
import logging
from typing import Awaitable, Callable, Dict, List, Optional, Union

from hellosign.models import CallbackEvent, EventType

logger = logging.getLogger(__name__)

CALLBACK_RESPONSE = "Hello API Event Received"

Handler = Callable[[CallbackEvent], Awaitable[None]]


def compute_event_hash(event_time: str, event_type: str, api_key: str) -> str:
    """HMAC-SHA256 of the event time and type, keyed with the api key."""
    message = f"{event_time}{event_type}".encode("utf-8")
    return hmac.new(api_key.encode("utf-8"), message, hashlib.sha256).hexdigest()


def verify_event_hash(event: CallbackEvent, api_key: str) -> bool:
    """Check that an event was sent by HelloSign."""
    expected = compute_event_hash(event.event.event_time, event.event.event_type, api_key)
    return hmac.compare_digest(expected.encode("utf-8"), event.event.event_hash.encode("utf-8"))


class CallbackHandlers:
    """Routes callback events to the handlers registered for their type."""

    def __init__(self):
        self._handlers: Dict[str, List[Handler]] = {}

    def register(self, event_type: Union[EventType, str], handler: Optional[Handler] = None):
        """Register a handler, directly or as a decorator."""
        key = event_type.value if isinstance(event_type, EventType) else event_type

        def decorator(func: Handler) -> Handler:
            self._handlers.setdefault(key, []).append(func)
            return func

        if handler is not None:
            return decorator(handler)
        return decorator

    def handlers_for(self, event_type: str) -> List[Handler]:
        return list(self._handlers.get(event_type, []))

    async def dispatch(self, event: CallbackEvent) -> int:
        """Run the handlers for an event and return how many ran."""
        handlers = self.handlers_for(event.event_type)
        if not handlers:
            logger.info(f"No handler for {event.event_type} event, ignoring")
            return 0

        for handler in handlers:
            await handler(event)
        logger.info(f"Handled {event.event_type} event for signature request {event.signature_request_id}")
        return len(handlers)
