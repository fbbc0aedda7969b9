"""A pixel canvas and antialiased line drawing with colour gradients."""

from __future__ import annotations

from collections.abc import Callable

from fdfview.color import Rgb, apply_brightness, get_color
from fdfview.projection import Point


def ipart(x: float) -> int:
    """Integer part, truncating toward zero."""
    return int(x)


def fpart(x: float) -> float:
    """Fractional part as used by the line drawer."""
    if x > 0:
        return x - ipart(x)
    return x - (ipart(x) + 1)


def rfpart(x: float) -> float:
    """One minus the fractional part."""
    return 1 - fpart(x)


def fround(x: float) -> int:
    """Round by adding one half and truncating."""
    return ipart(x + 0.5)


def curr_percent(start: int, curr: int, end: int) -> float:
    """How far ``curr`` lies from ``start`` toward ``end`` (1.0 if they coincide)."""
    distance = float(end - start)
    if distance == 0.0:
        return 1.0
    return float(curr - start) / distance


class Canvas:
    """A 32-bit BGRA pixel buffer of a fixed size."""

    BYTES_PER_PIXEL = 4

    def __init__(self, width: int, height: int) -> None:
        if width < 0 or height < 0:
            raise ValueError("canvas size must not be negative")
        self.width = width
        self.height = height
        self.size_line = width * self.BYTES_PER_PIXEL
        self.data = bytearray(self.size_line * height)

    def _offset(self, x: int, y: int) -> int:
        return x * self.BYTES_PER_PIXEL + y * self.size_line

    def _inside(self, x: int, y: int) -> bool:
        return 0 <= x < self.width and 0 <= y < self.height

    def clear(self) -> None:
        """Set every pixel to black."""
        self.data[:] = bytes(len(self.data))

    def plot_pixel(self, x: int, y: int, rgb: int) -> None:
        """Write a 0xRRGGBB colour; pixels outside the canvas are ignored."""
        if not self._inside(x, y):
            return
        i = self._offset(x, y)
        self.data[i] = rgb & 0xFF
        self.data[i + 1] = (rgb >> 8) & 0xFF
        self.data[i + 2] = (rgb >> 16) & 0xFF

    def pixel(self, x: int, y: int) -> int:
        """Read back the 0xRRGGBB colour of a pixel."""
        if not self._inside(x, y):
            raise IndexError(f"pixel ({x}, {y}) is outside the canvas")
        i = self._offset(x, y)
        return self.data[i] | (self.data[i + 1] << 8) | (self.data[i + 2] << 16)


def _wu_line(
    put: Callable[[int, int, int], None],
    a0: int,
    b0: int,
    a1: int,
    b1: int,
    gradient: float,
    rgb0: Rgb,
    rgb1: Rgb,
    swap: bool,
) -> None:
    """Draw along the major axis ``a``; ``put`` maps ``(a, b)`` to the canvas."""
    a_end = fround(a0)
    b_end = b0 + gradient * (a_end - a0)
    gap = rfpart(a0 + 0.5)
    a_first = a_end
    b_first = ipart(b_end)
    put(a_first, b_first, apply_brightness(rgb0, rfpart(b_end) * gap))
    put(a_first, b_first + 1, apply_brightness(rgb0, fpart(b_end) * gap))
    inter = b_end + gradient

    a_end = fround(a1)
    b_end = b1 + gradient * (a_end - a1)
    gap = fpart(a1 + 0.5)
    a_last = a_end
    b_last = ipart(b_end)
    put(a_last, b_last, apply_brightness(rgb1, rfpart(b_end) * gap))
    put(a_last, b_last + 1, apply_brightness(rgb1, fpart(b_end) * gap))

    for a in range(a_first + 1, a_last + 1):
        if swap:
            percent = curr_percent(a_last, a, a_first)
        else:
            percent = curr_percent(a_first, a, a_last)
        colour = get_color(rgb0, rgb1, percent)
        put(a, ipart(inter), apply_brightness(colour, rfpart(inter)))
        put(a, ipart(inter) + 1, apply_brightness(colour, fpart(inter)))
        inter += gradient


def plot_line(canvas: Canvas, p0: Point, p1: Point) -> None:
    """Draw an antialiased line from ``p0`` to ``p1``, blending their colours."""
    dx = float(p1.x) - float(p0.x)
    dy = float(p1.y) - float(p0.y)
    if dx == 0.0 and dy == 0.0:
        return
    x0, y0, x1, y1 = p0.x, p0.y, p1.x, p1.y
    swap = False
    if abs(dx) > abs(dy):
        if x1 < x0:
            swap = True
            x0, x1 = x1, x0
            y0, y1 = y1, y0
        _wu_line(canvas.plot_pixel, x0, y0, x1, y1, dy / dx, p0.rgb, p1.rgb, swap)
    else:
        if y1 < y0:
            swap = True
            x0, x1 = x1, x0
            y0, y1 = y1, y0

        def put(a: int, b: int, rgb: int) -> None:
            canvas.plot_pixel(b, a, rgb)

        _wu_line(put, y0, x0, y1, x1, dx / dy, p0.rgb, p1.rgb, swap)