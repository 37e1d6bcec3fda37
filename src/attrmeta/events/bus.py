"""Synchronous in-process event bus.

Usage:
    bus = EventBus()
    bus.subscribe(AttributeDeleted, handlers.on_attribute_deleted)
    bus.publish(AttributeDeleted(attribute_id=42))

Delivery is synchronous and exactly once per publish. Handlers run in
ascending priority, ties in subscription order. A handler exception stops
delivery and propagates to the publisher.
"""

from __future__ import annotations

import logging
from collections.abc import Callable
from dataclasses import dataclass
from typing import Any

logger = logging.getLogger(__name__)

Handler = Callable[[Any], Any]

DEFAULT_PRIORITY = 10


@dataclass(frozen=True, slots=True)
class _Subscription:
    priority: int
    order: int
    handler: Handler


class EventBus:
    """Typed handler registry keyed by event class."""

    def __init__(self) -> None:
        self._subscriptions: dict[type, list[_Subscription]] = {}
        self._counter = 0

    def subscribe(
        self, event_type: type, handler: Handler, priority: int = DEFAULT_PRIORITY
    ) -> None:
        """Register handler for events of exactly event_type.

        Args:
            event_type: Event class to listen for.
            handler: Callable receiving the event instance.
            priority: Lower runs first.
        """
        subs = self._subscriptions.setdefault(event_type, [])
        subs.append(_Subscription(priority, self._counter, handler))
        subs.sort(key=lambda s: (s.priority, s.order))
        self._counter += 1

    def unsubscribe(self, event_type: type, handler: Handler) -> bool:
        """Remove handler. Returns True if it was subscribed."""
        subs = self._subscriptions.get(event_type, [])
        for sub in subs:
            if sub.handler == handler:
                subs.remove(sub)
                return True
        return False

    def handlers(self, event_type: type) -> list[Handler]:
        """Handlers subscribed to event_type, in delivery order."""
        return [sub.handler for sub in self._subscriptions.get(event_type, [])]

    def publish(self, event: Any) -> list[Any]:
        """Deliver event to its handlers.

        Returns:
            Handler return values in delivery order.
        """
        handlers = self.handlers(type(event))
        if not handlers:
            logger.debug("No handlers for %s", type(event).__name__)
        return [handler(event) for handler in handlers]
