"""
Session state machine for Habit Arcade games.

States:
    READY: Game shown, not started yet (start button visible)
    ACTIVE: Session running, score accumulating
    OVER: Session ended, XP awarded
"""

from enum import Enum, auto
import logging

logger = logging.getLogger(__name__)


class State(Enum):
    """Session states."""
    READY = auto()
    ACTIVE = auto()
    OVER = auto()


class StateMachine:
    """
    Manages session state and transitions.

    Invalid transitions are rejected with a warning and leave the
    state untouched.
    """

    VALID_TRANSITIONS: list[tuple[State, State]] = [
        (State.READY, State.ACTIVE),
        (State.ACTIVE, State.OVER),
        (State.OVER, State.ACTIVE),  # Play again
    ]

    def __init__(self, initial_state: State = State.READY) -> None:
        self._state = initial_state
        self._valid_transitions = set(self.VALID_TRANSITIONS)
        logger.debug(f"StateMachine initialized with state: {initial_state.name}")

    @property
    def state(self) -> State:
        """Get current state."""
        return self._state

    def can_transition(self, to_state: State) -> bool:
        """Check if transition to given state is valid."""
        return (self._state, to_state) in self._valid_transitions

    def transition(self, to_state: State) -> bool:
        """
        Attempt to transition to a new state.

        Returns:
            True if transition successful, False otherwise
        """
        if not self.can_transition(to_state):
            logger.warning(
                f"Invalid transition: {self._state.name} -> {to_state.name}"
            )
            return False

        old_state = self._state
        self._state = to_state
        logger.debug(f"State transition: {old_state.name} -> {to_state.name}")
        return True
