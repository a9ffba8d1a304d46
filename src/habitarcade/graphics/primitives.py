"""Basic drawing primitives for RGB numpy buffers."""

from typing import Dict, List, Optional, Sequence, Tuple
import math
import numpy as np
from numpy.typing import NDArray

# Type aliases
Color = Tuple[int, int, int]
Point = Tuple[float, float]
Buffer = NDArray[np.uint8]


def new_buffer(width: int, height: int) -> Buffer:
    return np.zeros((height, width, 3), dtype=np.uint8)


def fill(buffer: Buffer, color: Color) -> None:
    """Fill entire buffer with color."""
    buffer[:, :] = color


def clock_angles(buffer: Buffer, cx: float, cy: float) -> Tuple[NDArray, NDArray]:
    """Per-pixel distance and angle around a center.

    Angles are degrees in [0, 360), measured clockwise from 12 o'clock.
    """
    h, w = buffer.shape[:2]
    y_indices, x_indices = np.mgrid[:h, :w]
    dx = x_indices + 0.5 - cx
    dy = y_indices + 0.5 - cy
    dist = np.hypot(dx, dy)
    angle = np.degrees(np.arctan2(dx, -dy)) % 360.0
    return dist, angle


def draw_circle(
    buffer: Buffer,
    cx: float,
    cy: float,
    radius: float,
    color: Color,
    filled: bool = True,
    thickness: float = 1.0,
) -> None:
    """Draw a circle, filled or as a ring of the given thickness."""
    dist, _ = clock_angles(buffer, cx, cy)
    if filled:
        mask = dist <= radius
    else:
        mask = np.abs(dist - radius) <= thickness / 2
    buffer[mask] = color


def draw_wedge(
    buffer: Buffer,
    cx: float,
    cy: float,
    radius: float,
    start_deg: float,
    sweep_deg: float,
    color: Color,
    dist: Optional[NDArray] = None,
    angle: Optional[NDArray] = None,
) -> None:
    """Fill a pie slice starting at ``start_deg`` clockwise from 12 o'clock.

    ``dist``/``angle`` may be passed in from ``clock_angles`` when drawing
    many wedges around the same center.
    """
    if dist is None or angle is None:
        dist, angle = clock_angles(buffer, cx, cy)
    offset = (angle - start_deg) % 360.0
    mask = (dist <= radius) & (offset < sweep_deg)
    buffer[mask] = color


def draw_polygon(buffer: Buffer, points: Sequence[Point], color: Color) -> None:
    """Fill a convex polygon given in either winding order."""
    h, w = buffer.shape[:2]
    y_indices, x_indices = np.mgrid[:h, :w]
    px = x_indices + 0.5
    py = y_indices + 0.5

    inside_pos = np.ones((h, w), dtype=bool)
    inside_neg = np.ones((h, w), dtype=bool)
    for i, (x1, y1) in enumerate(points):
        x2, y2 = points[(i + 1) % len(points)]
        cross = (x2 - x1) * (py - y1) - (y2 - y1) * (px - x1)
        inside_pos &= cross >= 0
        inside_neg &= cross <= 0
    buffer[inside_pos | inside_neg] = color


def blend_rect(
    buffer: Buffer,
    x: int,
    y: int,
    width: int,
    height: int,
    color: Color,
    alpha: float,
) -> None:
    """Alpha-blend a solid rectangle over the buffer, clipped to bounds."""
    h, w = buffer.shape[:2]
    x1, y1 = max(0, x), max(0, y)
    x2, y2 = min(w, x + width), min(h, y + height)
    if x2 <= x1 or y2 <= y1:
        return
    region = buffer[y1:y2, x1:x2].astype(np.float32)
    blended = region * (1 - alpha) + np.array(color, dtype=np.float32) * alpha
    buffer[y1:y2, x1:x2] = blended.astype(np.uint8)


# 3x5 bitmap glyphs, rows top to bottom, "1" = lit
_GLYPHS: Dict[str, str] = {
    'A': "010101111101101", 'B': "110101110101110", 'C': "011100100100011",
    'D': "110101101101110", 'E': "111100110100111", 'F': "111100110100100",
    'G': "011100101101011", 'H': "101101111101101", 'I': "111010010010111",
    'J': "001001001101010", 'K': "101101110101101", 'L': "100100100100111",
    'M': "101111101101101", 'N': "101111111101101", 'O': "010101101101010",
    'P': "110101110100100", 'Q': "010101101111011", 'R': "110101110101101",
    'S': "011100010001110", 'T': "111010010010010", 'U': "101101101101010",
    'V': "101101101010010", 'W': "101101101111101", 'X': "101101010101101",
    'Y': "101101010010010", 'Z': "111001010100111",
    '0': "010101101101010", '1': "010110010010111", '2': "010101001010111",
    '3': "110001010001110", '4': "101101111001001", '5': "111100110001110",
    '6': "011100110101010", '7': "111001010010010", '8': "010101010101010",
    '9': "010101011001110",
    '?': "010101001000010", '!': "010010010000010", '.': "000000000000010",
    ':': "000010000010000", '-': "000000111000000", '+': "000010111010000",
}


def _glyph_rows(char: str) -> List[str]:
    bits = _GLYPHS.get(char.upper(), _GLYPHS['?'])
    return [bits[i:i + 3] for i in range(0, 15, 3)]


def text_size(text: str, scale: int = 1) -> Tuple[int, int]:
    """Width and height in pixels of ``text`` drawn with ``draw_text``."""
    if not text:
        return 0, 5 * scale
    return len(text) * 4 * scale - scale, 5 * scale


def draw_text(
    buffer: Buffer,
    text: str,
    x: int,
    y: int,
    color: Color,
    scale: int = 1,
) -> Tuple[int, int]:
    """Draw text with the built-in 3x5 font.

    Returns:
        Tuple of (width, height) of rendered text in pixels
    """
    h, w = buffer.shape[:2]
    cursor_x = x

    for char in text:
        if char == ' ':
            cursor_x += 4 * scale
            continue

        for row_idx, row in enumerate(_glyph_rows(char)):
            for col_idx, pixel in enumerate(row):
                if pixel != '1':
                    continue
                px = cursor_x + col_idx * scale
                py = y + row_idx * scale
                x1, y1 = max(0, px), max(0, py)
                x2, y2 = min(w, px + scale), min(h, py + scale)
                if x2 > x1 and y2 > y1:
                    buffer[y1:y2, x1:x2] = color

        cursor_x += 4 * scale

    return text_size(text, scale)


def draw_centered_text(
    buffer: Buffer,
    text: str,
    cx: float,
    cy: float,
    color: Color,
    scale: int = 1,
) -> None:
    """Draw text centered on (cx, cy)."""
    tw, th = text_size(text, scale)
    draw_text(buffer, text, int(round(cx - tw / 2)), int(round(cy - th / 2)), color, scale)


def polar_point(cx: float, cy: float, radius: float, clock_deg: float) -> Point:
    """Point at ``radius`` from center, ``clock_deg`` clockwise from 12 o'clock."""
    rad = math.radians(clock_deg)
    return cx + radius * math.sin(rad), cy - radius * math.cos(rad)
