"""Delivery of refresh outcomes to the presentation layer."""
import logging
from typing import Callable, Iterable

from portfolio_dashboard.models import Event, EventType

logger = logging.getLogger(__name__)

Listener = Callable[[Event], None]


class EventBus:
    """Calls listeners in subscription order for each refresh outcome.

    Refreshes run on a single event loop, so listeners are invoked inline
    from publish() and see the snapshot that was just stored.
    """

    def __init__(self):
        self._listeners: list[tuple[frozenset[EventType], Listener]] = []

    @property
    def listener_count(self) -> int:
        return len(self._listeners)

    def subscribe(self, listener: Listener, event_types: Iterable[EventType] | None = None) -> None:
        """Register a listener.

        Args:
            listener: Called with each matching Event
            event_types: Outcomes to receive (None receives both)
        """
        types = frozenset(EventType) if event_types is None else frozenset(event_types)
        self._listeners.append((types, listener))
        logger.debug(f"Subscribed {getattr(listener, '__name__', listener)} to {sorted(t.value for t in types)}")

    def unsubscribe(self, listener: Listener) -> None:
        self._listeners = [(types, cb) for types, cb in self._listeners if cb != listener]

    def publish(self, event: Event) -> None:
        """Deliver event to every listener registered for its type.

        A failing listener is logged and does not stop the others.
        """
        for types, listener in list(self._listeners):
            if event.type not in types:
                continue
            try:
                listener(event)
            except Exception as e:
                logger.error(f"Error in listener {getattr(listener, '__name__', listener)}: {e}")
