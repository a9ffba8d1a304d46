"""Wheel painter - draws a wheel at a given rotation.

Angles here run clockwise from 12 o'clock, where the indicator sits.
Wedge i starts at ``i * width + rotation``, which is the layout
``resolve_segment_index`` assumes, so the wedge drawn under the indicator
is always the one a spin resolves to.
"""

from typing import Optional

from habitarcade.graphics.primitives import (
    Buffer,
    Color,
    blend_rect,
    clock_angles,
    draw_centered_text,
    draw_circle,
    draw_polygon,
    draw_wedge,
    fill,
    polar_point,
    text_size,
)
from habitarcade.wheel.model import Wheel

BACKGROUND: Color = (26, 35, 50)     # #1a2332
HUB_FILL: Color = (26, 35, 50)       # #1a2332
ACCENT: Color = (76, 201, 240)       # #4cc9f0
LABEL_COLOR: Color = (255, 255, 255)

HUB_RADIUS = 15
RIM_MARGIN = 10


def wheel_radius(width: int, height: int) -> float:
    return min(width, height) / 2 - RIM_MARGIN


def paint_wheel(buffer: Buffer, wheel: Wheel, rotation_degrees: float) -> None:
    """Paint wedges, labels, hub and indicator. Pure in its inputs."""
    h, w = buffer.shape[:2]
    cx, cy = w / 2, h / 2
    radius = wheel_radius(w, h)
    width_deg = wheel.segment_angle

    fill(buffer, BACKGROUND)

    dist, angle = clock_angles(buffer, cx, cy)
    for i, segment in enumerate(wheel):
        start = i * width_deg + rotation_degrees
        draw_wedge(buffer, cx, cy, radius, start, width_deg, segment.rgb, dist=dist, angle=angle)

    # Labels sit along each wedge's mid line, right edge near the rim
    scale = 2 if radius >= 100 else 1
    for i, segment in enumerate(wheel):
        mid = i * width_deg + rotation_degrees + width_deg / 2
        tw, _ = text_size(segment.label, scale)
        lx, ly = polar_point(cx, cy, radius - RIM_MARGIN - tw / 2, mid)
        draw_centered_text(buffer, segment.label, lx, ly, LABEL_COLOR, scale)

    draw_circle(buffer, cx, cy, HUB_RADIUS, HUB_FILL)
    draw_circle(buffer, cx, cy, HUB_RADIUS, ACCENT, filled=False, thickness=2)

    paint_indicator(buffer, cx, cy, radius)


def paint_indicator(buffer: Buffer, cx: float, cy: float, radius: float) -> None:
    """Triangle at 12 o'clock pointing into the wheel."""
    draw_polygon(
        buffer,
        [
            (cx, cy - radius + RIM_MARGIN),
            (cx - RIM_MARGIN, cy - radius - RIM_MARGIN),
            (cx + RIM_MARGIN, cy - radius - RIM_MARGIN),
        ],
        ACCENT,
    )


def paint_result_overlay(buffer: Buffer, value: Optional[int]) -> None:
    """Panel showing the latched result, if any."""
    if value is None:
        return
    h, w = buffer.shape[:2]
    panel_w, panel_h = int(w * 0.6), int(h * 0.3)
    px, py = (w - panel_w) // 2, (h - panel_h) // 2
    blend_rect(buffer, px, py, panel_w, panel_h, BACKGROUND, alpha=0.9)

    scale = 3 if w >= 200 else 1
    draw_centered_text(buffer, f"{value} XP", w / 2, py + panel_h * 0.38, ACCENT, scale)
    draw_centered_text(buffer, "YOU WON!", w / 2, py + panel_h * 0.72, LABEL_COLOR, max(1, scale - 1))
