"""Reward wheel geometry and spin simulation."""

from habitarcade.wheel.model import (
    Segment,
    Wheel,
    default_wheel,
    resolve_segment_index,
    DEFAULT_WHEEL_VALUES,
)
from habitarcade.wheel.simulator import SpinOutcome, SpinState, WheelSimulator

__all__ = [
    "Segment",
    "Wheel",
    "default_wheel",
    "resolve_segment_index",
    "DEFAULT_WHEEL_VALUES",
    "SpinOutcome",
    "SpinState",
    "WheelSimulator",
]
