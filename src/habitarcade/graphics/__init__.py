"""Graphics for Habit Arcade: primitives, surfaces and painters."""

from habitarcade.graphics.surface import Surface, BufferSurface
from habitarcade.graphics.wheel_painter import paint_wheel, paint_result_overlay

__all__ = ["Surface", "BufferSurface", "paint_wheel", "paint_result_overlay"]
