"""Spin Wheel - spin for XP, bank the total when you end the game.

The wheel itself lives in ``habitarcade.wheel``. This game owns the
session around it: host frames become fixed-cadence simulator ticks and
each resolved value is added to the score.
"""

from dataclasses import dataclass
import logging
from typing import Any, Dict, List, Optional

from habitarcade.core.events import Event, EventType
from habitarcade.games.base import BaseGame, GameContext
from habitarcade.graphics.wheel_painter import paint_result_overlay, paint_wheel
from habitarcade.settings import WheelSettings
from habitarcade.wheel.model import Wheel, default_wheel
from habitarcade.wheel.simulator import RandomSource, SpinOutcome, WheelSimulator

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class Control:
    """A button in the game's control strip."""

    key: str
    label: str
    enabled: bool


class SpinWheelGame(BaseGame):
    """Reward wheel mini-game."""

    name = "spin_wheel"
    title = "Spin Wheel"
    description = "Spin the wheel and try your luck!"

    def __init__(
        self,
        context: GameContext,
        wheel: Optional[Wheel] = None,
        rng: Optional[RandomSource] = None,
        settings: Optional[WheelSettings] = None,
    ):
        super().__init__(context)
        settings = settings or WheelSettings()

        self.tick_interval_ms = settings.tick_interval_ms
        self.simulator = WheelSimulator(
            wheel or default_wheel(),
            rng=rng,
            decay_factor=settings.decay_factor,
            stop_threshold=settings.stop_threshold,
            min_velocity=settings.min_velocity,
            max_velocity=settings.max_velocity,
        )
        self.simulator.set_on_resolved(self._on_spin_resolved)

        self._elapsed_ms: float = 0.0
        self._spins: List[int] = []

    @property
    def wheel(self) -> Wheel:
        return self.simulator.wheel

    @property
    def is_spinning(self) -> bool:
        return self.simulator.is_spinning

    @property
    def last_result(self) -> Optional[int]:
        """Value shown in the result overlay, if a spin has landed."""
        outcome = self.simulator.result
        return outcome.value if outcome else None

    @property
    def spins(self) -> List[int]:
        """Values resolved so far this session."""
        return list(self._spins)

    def spin(self) -> bool:
        """Spin request from the player. Ignored while spinning or inactive."""
        if not self.is_started:
            logger.warning("Spin requested with no game running")
            return False
        if not self.simulator.start_spin():
            return False

        self._elapsed_ms = 0.0
        self.emit_event(EventType.SPIN_STARTED, {"velocity": self.simulator.velocity})
        self.repaint()
        return True

    def step(self) -> Optional[SpinOutcome]:
        """Run exactly one simulator tick and repaint."""
        outcome = self.simulator.tick()
        self.repaint()
        return outcome

    def controls(self) -> List[Control]:
        """Spin and end buttons as the host should show them."""
        return [
            Control(
                key="spin",
                label="Spinning..." if self.is_spinning else "Spin",
                enabled=self.is_started and not self.is_spinning,
            ),
            Control(key="end", label="End Game", enabled=self.is_started),
        ]

    # BaseGame hooks
    def on_start(self) -> None:
        self.simulator.halt()
        self.simulator.clear_result()
        self._elapsed_ms = 0.0
        self._spins = []
        self.repaint()

    def on_update(self, delta_ms: float) -> None:
        if not self.simulator.is_spinning:
            return

        self._elapsed_ms += delta_ms
        while self._elapsed_ms >= self.tick_interval_ms and self.simulator.is_spinning:
            self._elapsed_ms -= self.tick_interval_ms
            self.step()

        if not self.simulator.is_spinning:
            self._elapsed_ms = 0.0

    def on_input(self, event: Event) -> bool:
        if event.type == EventType.BUTTON_PRESS:
            return self.spin()
        return False

    def on_end(self) -> None:
        # Ending mid-spin drops the spin; its value never reaches the score
        self._halt_spin()
        self.repaint()

    def on_teardown(self) -> None:
        self._halt_spin()
        self.simulator.set_on_resolved(None)

    def result_data(self) -> Dict[str, Any]:
        return {"spins": list(self._spins)}

    def render_main(self, buffer) -> None:
        paint_wheel(buffer, self.wheel, self.simulator.rotation)
        if not self.is_spinning:
            paint_result_overlay(buffer, self.last_result)

    def status_text(self) -> str:
        if self.is_spinning:
            return "SPINNING..."
        if self.last_result is not None:
            return f"+{self.last_result} XP  SCORE {self.score}"
        return super().status_text()

    def _halt_spin(self) -> None:
        """Stop a spin in progress and tell whoever drives the ticks."""
        if not self.simulator.is_spinning:
            return
        self.simulator.halt()
        self._elapsed_ms = 0.0
        self.emit_event(EventType.SPIN_HALTED, {"rotation": self.simulator.rotation})

    def _on_spin_resolved(self, outcome: SpinOutcome) -> None:
        self.add_score(outcome.value)
        self._spins.append(outcome.value)
        self.emit_event(
            EventType.SPIN_RESOLVED,
            {
                "index": outcome.index,
                "value": outcome.value,
                "label": outcome.segment.label,
                "score": self.score,
            },
        )
