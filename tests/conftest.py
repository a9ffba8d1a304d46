"""Shared fixtures for Habit Arcade tests."""

import pytest

from habitarcade.core.events import EventBus
from habitarcade.games.base import GameContext
from habitarcade.wheel.model import Segment, Wheel


class FixedRandom:
    """Random source that always returns the same draw."""

    def __init__(self, value: float):
        self.value = value
        self.calls = 0

    def random(self) -> float:
        self.calls += 1
        return self.value


@pytest.fixture
def rng_low():
    """Draws the minimum initial velocity (10 deg/tick)."""
    return FixedRandom(0.0)


@pytest.fixture
def rng_mid():
    """Draws 15 deg/tick."""
    return FixedRandom(0.5)


@pytest.fixture
def context():
    return GameContext(event_bus=EventBus())


@pytest.fixture
def rainbow_wheel():
    """Eight segments with distinct colors, for pixel checks."""
    colors = ["#ff0000", "#00ff00", "#0000ff", "#ffff00",
              "#ff00ff", "#00ffff", "#804000", "#008040"]
    return Wheel(
        Segment(label=f"{i} XP", color=color, value=i)
        for i, color in enumerate(colors)
    )


@pytest.fixture
def make_rng():
    """Factory for fixed random sources."""
    return FixedRandom
