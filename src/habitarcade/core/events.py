"""
Event bus for Habit Arcade.

Provides pub/sub messaging between games, hosts and notification sinks.
"""

from dataclasses import dataclass, field
from typing import Any, Callable
from enum import Enum, auto
import logging
import time
from collections import defaultdict

logger = logging.getLogger(__name__)


class EventType(Enum):
    """Built-in event types."""
    # Input events
    BUTTON_PRESS = auto()   # Spin button
    START_REQUEST = auto()
    END_REQUEST = auto()

    # Game events
    GAME_STARTED = auto()
    GAME_ENDED = auto()
    SPIN_STARTED = auto()
    SPIN_RESOLVED = auto()
    SPIN_HALTED = auto()    # Stopped without a result (end or teardown)

    # Notification events
    XP_AWARDED = auto()


@dataclass
class Event:
    """
    Event data container.

    Attributes:
        type: Event type (EventType enum or custom string)
        data: Event payload
        source: Component that emitted the event
        timestamp: When event was created
    """
    type: EventType | str
    data: dict[str, Any] = field(default_factory=dict)
    source: str = "system"
    timestamp: float = field(default_factory=time.time)


Handler = Callable[[Event], None]


class EventBus:
    """
    Central event bus for component communication.

    Handlers run synchronously in subscription order. A handler that raises
    is logged and skipped so the others still see the event.
    """

    def __init__(self) -> None:
        self._handlers: dict[EventType | str, list[Handler]] = defaultdict(list)

    def subscribe(
        self,
        event_type: EventType | str,
        handler: Handler
    ) -> Callable[[], None]:
        """
        Subscribe to an event type.

        Args:
            event_type: Type of event to listen for
            handler: Callback function

        Returns:
            Unsubscribe function
        """
        self._handlers[event_type].append(handler)
        logger.debug(f"Handler subscribed to {event_type}")

        def unsubscribe() -> None:
            if handler in self._handlers[event_type]:
                self._handlers[event_type].remove(handler)
                logger.debug(f"Handler unsubscribed from {event_type}")

        return unsubscribe

    def emit(self, event: Event) -> None:
        """Deliver an event to its subscribers immediately."""
        # Copy so handlers may unsubscribe while being called
        for handler in list(self._handlers.get(event.type, [])):
            try:
                handler(event)
            except Exception as e:
                logger.error(f"Error in event handler for {event.type}: {e}")


# Convenience functions for creating common events
def button_press_event(source: str = "button") -> Event:
    """Create a spin button press event."""
    return Event(EventType.BUTTON_PRESS, source=source)


def xp_awarded_event(xp: int, source: str = "game") -> Event:
    """Create the end-of-game notification carrying the awarded XP."""
    return Event(
        EventType.XP_AWARDED,
        data={
            "xp": xp,
            "title": "Game Complete!",
            "message": f"You earned {xp} XP!",
        },
        source=source,
    )
