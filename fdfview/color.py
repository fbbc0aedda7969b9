"""RGB colours, gradients and the elevation palette."""

from __future__ import annotations

from dataclasses import dataclass

FDF_RED = 0xFF0000
FDF_GREEN_YELLOW = 0xADFF2F
FDF_WHITE = 0xFFFFFF

# Variscan plutonic rocks
FDF_LIGHT_PINK = 0xFFB6C1
FDF_SALMON = 0xFA8072
FDF_ORANGE_RED = 0xFF4500
FDF_TOMATO = 0xFF6347
FDF_CRIMSON = 0xDC143C
# Iberian Variscan massif
FDF_DARK_SEA_GREEN = 0x8FBC8F
FDF_DARK_OLIVE_GREEN = 0x556B2F
FDF_TAN = 0xD2B48C
# Mesozoic-Cenozoic cover
FDF_PLUM = 0xDDA0DD
FDF_LIGHT_SKY_BLUE = 0x87CEFA
FDF_YELLOW_GREEN = 0x9ACD32
FDF_LIGHT_SALMON = 0xFFA07A
FDF_GOLD = 0xFFD700
FDF_WHEAT = 0xF5DEB3
FDF_LIGHT_GRAY = 0xD3D3D3

PALETTE_STEPS = 16

# Consecutive colours of the elevation gradient, lowest first.
PALETTE_STOPS = (
    FDF_TOMATO,
    FDF_ORANGE_RED,
    FDF_CRIMSON,
    FDF_RED,
    FDF_DARK_SEA_GREEN,
    FDF_DARK_OLIVE_GREEN,
    FDF_TAN,
    FDF_PLUM,
    FDF_LIGHT_SKY_BLUE,
    FDF_YELLOW_GREEN,
    FDF_GOLD,
    FDF_WHEAT,
    FDF_LIGHT_GRAY,
)


def _cdiv(a: int, b: int) -> int:
    """Integer division truncating toward zero."""
    q = abs(a) // abs(b)
    return q if (a >= 0) == (b >= 0) else -q


def _cmod(a: int, b: int) -> int:
    """Remainder whose sign follows the dividend."""
    return a - b * _cdiv(a, b)


@dataclass(frozen=True)
class Rgb:
    """A colour split into red, green and blue channels."""

    r: int
    g: int
    b: int

    def to_int(self) -> int:
        """Pack the channels into a 0xRRGGBB integer."""
        return (self.r << 16) + (self.g << 8) + self.b


def int_to_rgb(color: int) -> Rgb:
    """Split a packed colour into its channels."""
    return Rgb(
        r=_cdiv(color, 256 * 256),
        g=_cmod(_cdiv(color, 256), 256),
        b=_cmod(color, 256),
    )


def get_color(start: Rgb, end: Rgb, percent: float) -> Rgb:
    """Linearly interpolate between two colours."""
    return Rgb(
        r=int(start.r * (1.0 - percent) + end.r * percent),
        g=int(start.g * (1.0 - percent) + end.g * percent),
        b=int(start.b * (1.0 - percent) + end.b * percent),
    )


def get_color_index(z: int, size: int) -> int:
    """Map a height to an index into a gradient of ``size`` colours."""
    idx_steps = _cdiv(1024, size) or 1
    index = _cdiv(size, 2) + _cdiv(z, idx_steps)
    return max(0, min(index, size - 1))


def _step(start: int, end: int, steps: int, current: int) -> int:
    diff = abs(start - end) // steps
    return current + diff if start <= end else current - diff


def color_node(start: Rgb, steps: int, end: Rgb, rgb: Rgb) -> Rgb:
    """Return ``rgb`` moved one step of ``steps`` from ``start`` toward ``end``."""
    return Rgb(
        r=_step(start.r, end.r, steps, rgb.r),
        g=_step(start.g, end.g, steps, rgb.g),
        b=_step(start.b, end.b, steps, rgb.b),
    )


def palette(c_start: int, steps: int, c_end: int) -> list[Rgb]:
    """Return the ``steps`` colours leading from ``c_start`` to ``c_end``.

    The start colour itself is not included; the last colour is ``c_end``.
    """
    start = int_to_rgb(c_start)
    end = int_to_rgb(c_end)
    colours = []
    current = start
    for _ in range(steps - 1):
        current = color_node(start, steps, end, current)
        colours.append(current)
    colours.append(end)
    return colours


def palettes() -> list[Rgb]:
    """Build the full elevation gradient, lowest colour first."""
    gradient = [int_to_rgb(PALETTE_STOPS[0])]
    for c_start, c_end in zip(PALETTE_STOPS, PALETTE_STOPS[1:]):
        gradient.extend(palette(c_start, PALETTE_STEPS, c_end))
    return gradient


def apply_brightness(rgb: Rgb, brightness: float) -> int:
    """Scale a colour by ``brightness`` (capped at 1.0) and pack it."""
    brightness = min(brightness, 1.0)
    return Rgb(
        r=int(rgb.r * brightness),
        g=int(rgb.g * brightness),
        b=int(rgb.b * brightness),
    ).to_int()