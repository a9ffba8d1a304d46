"""Wheel geometry: segments, their order, and angle-to-segment resolution."""

from dataclasses import dataclass
import math
import re
from typing import Iterable, Iterator, Tuple

_COLOR_RE = re.compile(r"^#[0-9a-fA-F]{6}$")


@dataclass(frozen=True)
class Segment:
    """One wedge of the wheel."""

    label: str
    color: str  # "#RRGGBB"
    value: int

    def __post_init__(self) -> None:
        if not isinstance(self.value, int) or isinstance(self.value, bool):
            raise ValueError(f"Segment value must be an integer: {self.value!r}")
        if self.value < 0:
            raise ValueError(f"Segment value must be non-negative: {self.value}")
        if not _COLOR_RE.match(self.color):
            raise ValueError(f"Invalid color token: {self.color!r}")

    @property
    def rgb(self) -> Tuple[int, int, int]:
        """Color as an RGB tuple."""
        hex_color = self.color.lstrip("#")
        return tuple(int(hex_color[i:i + 2], 16) for i in (0, 2, 4))


def resolve_segment_index(rotation_degrees: float, count: int) -> int:
    """Map a wheel rotation to the index of the segment under the indicator.

    The indicator sits at angle 0 while wedge i starts at
    ``i * width + rotation``, so the wheel content under the indicator is at
    local angle ``-rotation``. The floor is clamped because
    ``(360 - r) % 360`` can round to exactly 360.0 for tiny ``r``.
    """
    if count < 1:
        raise ValueError("Wheel needs at least one segment")

    segment_width = 360.0 / count
    normalized = (360.0 - rotation_degrees) % 360.0
    index = math.floor(normalized / segment_width)
    return max(0, min(count - 1, index))


class Wheel:
    """Ordered, fixed-size sequence of equal-width segments."""

    def __init__(self, segments: Iterable[Segment]):
        self._segments: Tuple[Segment, ...] = tuple(segments)
        if not self._segments:
            raise ValueError("Wheel needs at least one segment")

    def __len__(self) -> int:
        return len(self._segments)

    def __iter__(self) -> Iterator[Segment]:
        return iter(self._segments)

    def __getitem__(self, index: int) -> Segment:
        return self._segments[index]

    @property
    def segments(self) -> Tuple[Segment, ...]:
        return self._segments

    @property
    def segment_angle(self) -> float:
        """Angular width of every segment in degrees."""
        return 360.0 / len(self._segments)

    def index_at(self, rotation_degrees: float) -> int:
        return resolve_segment_index(rotation_degrees, len(self._segments))

    def segment_at(self, rotation_degrees: float) -> Segment:
        return self._segments[self.index_at(rotation_degrees)]

    @classmethod
    def from_values(
        cls,
        values: Iterable[int],
        colors: Tuple[str, ...] = ("#4cc9f0", "#3a4353"),
    ) -> "Wheel":
        """Build a wheel labeled ``"<n> XP"`` with alternating colors."""
        return cls(
            Segment(label=f"{value} XP", color=colors[i % len(colors)], value=value)
            for i, value in enumerate(values)
        )

    def __repr__(self) -> str:
        values = ", ".join(str(s.value) for s in self._segments)
        return f"Wheel([{values}])"


# Reward wheel shown in the games panel
DEFAULT_WHEEL_VALUES = (5, 2, 7, 1, 10, 3, 8, 0)


def default_wheel() -> Wheel:
    return Wheel.from_values(DEFAULT_WHEEL_VALUES)
