"""Core framework components for Habit Arcade."""

from .state import State, StateMachine
from .events import EventBus, Event, EventType
from .ticker import TickDriver

__all__ = ["State", "StateMachine", "EventBus", "Event", "EventType", "TickDriver"]
