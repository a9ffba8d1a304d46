"""Base class for all Habit Arcade mini-games."""

from abc import ABC, abstractmethod
from typing import Optional, Dict, Any, Callable
from dataclasses import dataclass, field
import logging

from habitarcade.core.events import EventBus, Event, EventType, xp_awarded_event
from habitarcade.core.state import StateMachine, State
from habitarcade.graphics.surface import Surface

logger = logging.getLogger(__name__)

# XP a single session can award, whatever the score
MAX_SESSION_XP = 10


def award_xp(score: int) -> int:
    """XP earned for a session score."""
    return min(score, MAX_SESSION_XP)


@dataclass
class GameResult:
    """Result of a finished session."""

    game_name: str
    score: int
    awarded_xp: int
    data: Dict[str, Any] = field(default_factory=dict)

    @property
    def display_text(self) -> str:
        return f"You earned {self.awarded_xp} XP!"


@dataclass
class GameContext:
    """Shared context passed to games."""

    event_bus: EventBus = field(default_factory=EventBus)
    state_machine: StateMachine = field(default_factory=StateMachine)
    surface: Optional[Surface] = None


class BaseGame(ABC):
    """Abstract base class for mini-games.

    A game is a session: it is started, accumulates a score, and is ended,
    at which point the score is converted into XP and announced once.

    Lifecycle:
        1. start() - reset score, mark active, on_start()
        2. update(delta) - per-frame logic while active
        3. handle_input(event) - start/end requests and game input
        4. end() - on_end(), award XP, notify
        5. teardown() - host is going away
    """

    # Game metadata (override in subclasses)
    name: str = "base"
    title: str = "Base Game"
    description: str = "Base game class"

    def __init__(self, context: GameContext):
        self.context = context
        self._score: int = 0
        self._result: Optional[GameResult] = None

        self._on_complete: Optional[Callable[[GameResult], None]] = None

        logger.debug(f"Game created: {self.name}")

    @property
    def state(self) -> State:
        return self.context.state_machine.state

    @property
    def is_started(self) -> bool:
        """Session is running."""
        return self.state == State.ACTIVE

    @property
    def is_over(self) -> bool:
        """Session has ended."""
        return self.state == State.OVER

    @property
    def score(self) -> int:
        return self._score

    @property
    def result(self) -> Optional[GameResult]:
        """Result of the last finished session."""
        return self._result

    def set_on_complete(self, callback: Callable[[GameResult], None]) -> None:
        """Set callback for when a session ends."""
        self._on_complete = callback

    # Lifecycle methods
    def start(self) -> bool:
        """Start (or restart) a session. Returns False if already running."""
        if not self.context.state_machine.transition(State.ACTIVE):
            return False

        self._score = 0
        self._result = None

        logger.info(f"Game started: {self.name}")
        self.on_start()
        self.emit_event(EventType.GAME_STARTED)
        return True

    def end(self) -> Optional[GameResult]:
        """End the running session and award XP. Returns None if not running."""
        if not self.context.state_machine.can_transition(State.OVER):
            logger.warning(f"End requested for {self.name} while {self.state.name}")
            return None

        self.on_end()

        xp = award_xp(self._score)
        result = GameResult(
            game_name=self.name,
            score=self._score,
            awarded_xp=xp,
            data=self.result_data(),
        )
        self._result = result
        self.context.state_machine.transition(State.OVER)

        logger.info(f"Game over: {self.name} score={result.score} xp={xp}")
        self.emit_event(EventType.GAME_ENDED, {"score": result.score, "xp": xp})
        self.context.event_bus.emit(xp_awarded_event(xp, source=f"game_{self.name}"))

        if self._on_complete:
            self._on_complete(result)

        return result

    def update(self, delta_ms: float) -> None:
        """Update game state each frame.

        Args:
            delta_ms: Time since last update in milliseconds
        """
        if not self.is_started:
            return

        self.on_update(delta_ms)

    def handle_input(self, event: Event) -> bool:
        """Process input event. Returns True if handled."""
        if event.type == EventType.START_REQUEST:
            return self.start()
        if event.type == EventType.END_REQUEST:
            return self.end() is not None
        if not self.is_started:
            return False
        return self.on_input(event)

    def teardown(self) -> None:
        """Release anything still running; the game will not be used again."""
        logger.debug(f"Tearing down game: {self.name}")
        self.on_teardown()

    def add_score(self, points: int) -> None:
        if points < 0:
            raise ValueError(f"Score can only grow: {points}")
        self._score += points

    # Abstract methods (must be implemented by subclasses)
    @abstractmethod
    def on_start(self) -> None:
        """Reset per-session state."""
        pass

    @abstractmethod
    def on_update(self, delta_ms: float) -> None:
        """Per-frame update logic."""
        pass

    @abstractmethod
    def on_input(self, event: Event) -> bool:
        """Handle game input. Return True if handled."""
        pass

    @abstractmethod
    def on_end(self) -> None:
        """Stop anything in progress before XP is awarded."""
        pass

    # Optional overrides
    def on_teardown(self) -> None:
        pass

    def result_data(self) -> Dict[str, Any]:
        """Extra data stored on the GameResult."""
        return {}

    def render_main(self, buffer) -> None:
        """Render the game. Override for custom rendering."""
        pass

    def status_text(self) -> str:
        """Short status line for small displays."""
        return f"SCORE {self._score}"

    # Utility methods
    def emit_event(self, event_type: EventType, data: Dict = None) -> None:
        """Emit an event through the event bus."""
        self.context.event_bus.emit(Event(
            type=event_type,
            data=data or {},
            source=f"game_{self.name}"
        ))

    def repaint(self) -> None:
        """Redraw the attached surface, if any."""
        surface = self.context.surface
        if surface is None:
            return
        buffer = surface.new_frame()
        self.render_main(buffer)
        surface.set_buffer(buffer)

    @classmethod
    def get_info(cls) -> Dict[str, Any]:
        """Get game metadata as dictionary."""
        return {
            "name": cls.name,
            "title": cls.title,
            "description": cls.description,
        }
