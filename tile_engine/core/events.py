"""
Typed publish/subscribe bus.

Event types are Enum members rather than strings. The simulation
publishes what happened during a tick; collaborators such as the HUD
listen without the simulation holding a reference to them.

Usage:
    class GameEvent(Enum):
        PLAYER_MOVED = auto()

    event_bus.subscribe(GameEvent.PLAYER_MOVED, on_player_moved)
    event_bus.publish(GameEvent.PLAYER_MOVED, x=1, y=0)
"""

from __future__ import annotations

import logging
from collections import deque
from dataclasses import dataclass, field
from enum import Enum
from typing import Any, Callable, Union
from weakref import WeakMethod, ref


logger = logging.getLogger(__name__)


@dataclass
class Event:
    """A published event: its type plus the keyword payload."""
    type: Enum
    data: dict[str, Any] = field(default_factory=dict)

    def __getitem__(self, key: str) -> Any:
        return self.data[key]


EventHandler = Callable[[Event], None]
_Subscriber = Union[EventHandler, ref, WeakMethod]


def _resolve(subscriber: _Subscriber) -> EventHandler | None:
    """Get the callable behind a subscriber entry (None once collected)."""
    if isinstance(subscriber, (ref, WeakMethod)):
        return subscriber()
    return subscriber


class EventBus:
    """
    Delivers events to subscribers in subscription order.

    Handlers are held weakly by default: a HUD or scene that goes away
    stops receiving events even if it never unsubscribed. An event
    published from inside a handler is delivered after the current one.
    """

    def __init__(self):
        self._subscribers: dict[Enum, list[_Subscriber]] = {}
        self._pending: deque[Event] = deque()
        self._delivering = False

    def subscribe(self, event_type: Enum, handler: EventHandler, weak: bool = True) -> None:
        """
        Listen for an event type.

        Args:
            event_type: Enum member to listen for
            handler: Callback taking the Event
            weak: Hold the handler through a weak reference
        """
        if weak:
            entry = WeakMethod(handler) if hasattr(handler, '__self__') else ref(handler)
        else:
            entry = handler
        self._subscribers.setdefault(event_type, []).append(entry)

    def unsubscribe(self, event_type: Enum, handler: EventHandler) -> None:
        """Stop delivering an event type to a handler."""
        entries = self._subscribers.get(event_type)
        if entries:
            entries[:] = [entry for entry in entries if _resolve(entry) != handler]

    def has_handlers(self, event_type: Enum) -> bool:
        """Check whether anything listens for an event type."""
        return bool(self._subscribers.get(event_type))

    def publish(self, event_type: Enum, **data: Any) -> None:
        """Deliver an event, or queue it when called from a handler."""
        self._pending.append(Event(type=event_type, data=data))
        if self._delivering:
            return

        self._delivering = True
        try:
            while self._pending:
                self._deliver(self._pending.popleft())
        finally:
            self._delivering = False

    def _deliver(self, event: Event) -> None:
        entries = self._subscribers.get(event.type)
        if not entries:
            return

        collected = False
        for entry in list(entries):
            handler = _resolve(entry)
            if handler is None:
                collected = True
                continue
            try:
                handler(event)
            except Exception:
                logger.exception("Error in event handler for %s", event.type)

        if collected:
            entries[:] = [entry for entry in entries if _resolve(entry) is not None]
