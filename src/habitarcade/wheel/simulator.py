"""Discrete-time spin simulation for the reward wheel.

The simulator knows nothing about timers or drawing. A host calls
``tick()`` at a fixed cadence (pygame frame loop, asyncio driver, or a test
calling it in a loop) and the wheel decelerates one step per call:

    rotation = (rotation + velocity) % 360
    velocity *= decay            while velocity > threshold
    velocity = 0, stop, resolve  otherwise

Exponential decay never reaches zero on its own, so the threshold is the only
way a spin ends.
"""

from dataclasses import dataclass
import logging
import random
from typing import Callable, Optional, Protocol

from habitarcade.wheel.model import Segment, Wheel

logger = logging.getLogger(__name__)


class RandomSource(Protocol):
    """Anything with ``random() -> float`` in [0, 1)."""

    def random(self) -> float: ...


@dataclass
class SpinState:
    """Mutable spin state; created at rest."""

    rotation_degrees: float = 0.0
    angular_velocity: float = 0.0  # degrees per tick
    is_spinning: bool = False


@dataclass(frozen=True)
class SpinOutcome:
    """Result latched when a spin comes to rest."""

    index: int
    segment: Segment
    rotation_degrees: float
    ticks: int

    @property
    def value(self) -> int:
        return self.segment.value


class WheelSimulator:
    """Spin state machine for one wheel.

    Args:
        wheel: Segment layout
        rng: Random source for the initial velocity draw
        decay_factor: Per-tick velocity multiplier while above threshold
        stop_threshold: Velocity at or below which the spin ends
        min_velocity: Lower bound of the initial velocity draw (inclusive)
        max_velocity: Upper bound of the initial velocity draw (exclusive)
    """

    def __init__(
        self,
        wheel: Wheel,
        rng: Optional[RandomSource] = None,
        decay_factor: float = 0.99,
        stop_threshold: float = 0.1,
        min_velocity: float = 10.0,
        max_velocity: float = 20.0,
    ):
        if not 0.0 < decay_factor < 1.0:
            raise ValueError(f"decay_factor must be in (0, 1): {decay_factor}")
        if stop_threshold <= 0.0:
            raise ValueError(f"stop_threshold must be positive: {stop_threshold}")
        if not 0.0 < min_velocity <= max_velocity:
            raise ValueError(
                f"Invalid velocity range: [{min_velocity}, {max_velocity})"
            )

        self.wheel = wheel
        self._rng: RandomSource = rng or random.Random()
        self.decay_factor = decay_factor
        self.stop_threshold = stop_threshold
        self.min_velocity = min_velocity
        self.max_velocity = max_velocity

        self.state = SpinState()
        self._result: Optional[SpinOutcome] = None
        self._ticks_in_spin: int = 0
        self._on_resolved: Optional[Callable[[SpinOutcome], None]] = None

    @property
    def is_spinning(self) -> bool:
        return self.state.is_spinning

    @property
    def rotation(self) -> float:
        return self.state.rotation_degrees

    @property
    def velocity(self) -> float:
        return self.state.angular_velocity

    @property
    def result(self) -> Optional[SpinOutcome]:
        """Latched outcome of the last completed spin, if any."""
        return self._result

    @property
    def index_under_pointer(self) -> int:
        """Segment currently under the indicator (live, while spinning too)."""
        return self.wheel.index_at(self.state.rotation_degrees)

    def set_on_resolved(self, callback: Optional[Callable[[SpinOutcome], None]]) -> None:
        """Set callback fired once per completed spin."""
        self._on_resolved = callback

    def clear_result(self) -> None:
        self._result = None

    def start_spin(self) -> bool:
        """Kick the wheel. Returns False if a spin is already in progress."""
        if self.state.is_spinning:
            logger.debug("Spin request ignored: wheel already spinning")
            return False

        span = self.max_velocity - self.min_velocity
        self.state.angular_velocity = self.min_velocity + self._rng.random() * span
        self.state.is_spinning = True
        self._result = None
        self._ticks_in_spin = 0

        logger.info(f"Wheel spinning at {self.state.angular_velocity:.2f} deg/tick")
        return True

    def tick(self) -> Optional[SpinOutcome]:
        """Advance one step. Returns the outcome on the tick the wheel stops."""
        state = self.state
        if not state.is_spinning:
            return None

        state.rotation_degrees = (state.rotation_degrees + state.angular_velocity) % 360.0
        self._ticks_in_spin += 1

        if state.angular_velocity > self.stop_threshold:
            state.angular_velocity *= self.decay_factor
            return None

        state.angular_velocity = 0.0
        state.is_spinning = False
        return self._resolve()

    def halt(self) -> None:
        """Stop motion without resolving. Teardown only."""
        if self.state.is_spinning:
            logger.info("Spin halted before resolution")
        self.state.angular_velocity = 0.0
        self.state.is_spinning = False

    def _resolve(self) -> SpinOutcome:
        index = self.wheel.index_at(self.state.rotation_degrees)
        outcome = SpinOutcome(
            index=index,
            segment=self.wheel[index],
            rotation_degrees=self.state.rotation_degrees,
            ticks=self._ticks_in_spin,
        )
        self._result = outcome

        logger.info(
            f"Wheel stopped at {outcome.rotation_degrees:.1f} deg after "
            f"{outcome.ticks} ticks: {outcome.segment.label}"
        )

        if self._on_resolved:
            self._on_resolved(outcome)

        return outcome
