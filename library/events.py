"""
Document change events and their delivery to listeners.
"""

import logging
from dataclasses import dataclass
from enum import Enum
from typing import List, Optional

from core.config import EventConfig
from core.interfaces import IDocument, IDocumentListener

logger = logging.getLogger(__name__)


class DocumentEventType(Enum):
    """Kind of change made to a library."""
    ADDED = "added"
    REMOVED = "removed"
    UPDATED = "updated"


@dataclass(frozen=True)
class DocumentEvent:
    """A change made to a library, carrying the affected document."""
    document: IDocument
    event_type: DocumentEventType


class EventEmitter:
    """
    Delivers document events to registered listeners.

    Listeners are kept in registration order and compared by identity, so a
    listener is notified at most once per event. Delivery is synchronous:
    ``publish`` returns once every listener has handled the event.
    """

    def __init__(self, config: Optional[EventConfig] = None):
        self.config = config or EventConfig()
        self._listeners: List[IDocumentListener] = []

    def __len__(self) -> int:
        return len(self._listeners)

    def listener_count(self) -> int:
        return len(self._listeners)

    def _index_of(self, listener: IDocumentListener) -> int:
        for index, registered in enumerate(self._listeners):
            if registered is listener:
                return index
        return -1

    def subscribe(self, listener: IDocumentListener) -> None:
        """Register a listener; None and already registered listeners are ignored."""
        if listener is None or self._index_of(listener) != -1:
            return
        self._listeners.append(listener)
        logger.debug(f"Subscribed listener {listener!r}")

    def unsubscribe(self, listener: IDocumentListener) -> None:
        """Unregister a listener if it is registered."""
        index = self._index_of(listener)
        if index != -1:
            del self._listeners[index]
            logger.debug(f"Unsubscribed listener {listener!r}")

    def publish(self, event: DocumentEvent) -> None:
        """Deliver an event to every listener in registration order.

        An exception raised by a listener propagates and the remaining
        listeners are not notified, unless ``isolate_listener_errors`` is set,
        in which case the failure is logged and delivery continues.

        Args:
            event: The event to deliver
        """
        logger.debug(
            f"Publishing {event.event_type.name} for {event.document!r} "
            f"to {len(self._listeners)} listener(s)"
        )
        for listener in list(self._listeners):
            if not self.config.isolate_listener_errors:
                listener.handle(event)
                continue
            try:
                listener.handle(event)
            except Exception:
                logger.exception(
                    f"Listener {listener!r} failed to handle {event.event_type.name} event"
                )
