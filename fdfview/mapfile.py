"""Reading height maps: rows of heights with optional hex colours."""

from __future__ import annotations

import os
from collections.abc import Iterable
from dataclasses import dataclass

ERR_MAP = "Incorrect MAP_FILE"
ERR_MAP_READING = "Reading error"

_LONG_MAX = 2**63 - 1
_LONG_MIN = -(2**63)
_HEX_DIGITS = "0123456789ABCDEF"


class MapError(Exception):
    """Raised when a map file cannot be read or is malformed."""


def _to_int32(value: int) -> int:
    value &= 0xFFFFFFFF
    return value - 2**32 if value >= 2**31 else value


def _to_long(value: int) -> int:
    value &= 2**64 - 1
    return value - 2**64 if value >= 2**63 else value


def _split(text: str, sep: str) -> list[str]:
    """Split on ``sep`` dropping empty pieces."""
    return [part for part in text.split(sep) if part]


@dataclass(frozen=True)
class HeightMap:
    """A rectangular grid of heights with per-point colours."""

    width: int
    height: int
    coords: tuple[int, ...]
    colors: tuple[int, ...]
    map_color: bool = False
    z_min: int = 0
    z_max: int = 0

    def _index(self, x: int, y: int) -> int:
        if not (0 <= x < self.width and 0 <= y < self.height):
            raise IndexError(f"point ({x}, {y}) is outside the map")
        return y * self.width + x

    def z_at(self, x: int, y: int) -> int:
        """Height of the point in column ``x`` and row ``y``."""
        return self.coords[self._index(x, y)]

    def color_at(self, x: int, y: int) -> int:
        """Colour of the point, or -1 when the map gives none."""
        return self.colors[self._index(x, y)]


def atoi(text: str) -> int:
    """Parse a leading decimal integer the way the map reader does."""
    pos = 0
    while pos < len(text) and (text[pos] == " " or "\t" <= text[pos] <= "\r"):
        pos += 1
    sign = 1
    if pos < len(text) and text[pos] in "+-":
        if text[pos] == "-":
            sign = -1
        pos += 1
    acc = 0
    while pos < len(text) and "0" <= text[pos] <= "9":
        if acc >= _LONG_MAX // 10:
            limit = _to_long(-_LONG_MIN) if sign < 0 else _LONG_MAX
            return _to_int32(limit)
        acc = acc * 10 + ord(text[pos]) - ord("0")
        pos += 1
    return _to_int32(sign * acc)


def hextoi(text: str) -> int:
    """Parse a ``0x``-prefixed hexadecimal colour.

    Characters that are not hex digits count as -1, as in the map reader.
    """
    result = 0
    for char in text[2:]:
        digit = _HEX_DIGITS.find(char.upper()) if len(char.upper()) == 1 else -1
        result = (result * 16 + digit) % 2**64
    return _to_int32(result)


def parse_coord(token: str) -> tuple[int, int]:
    """Parse ``z`` or ``z,0xRRGGBB`` into a height and a colour (-1 if none)."""
    parts = _split(token, ",")
    if not parts:
        raise MapError(ERR_MAP_READING)
    z = atoi(parts[0])
    rgb = hextoi(parts[1]) if len(parts) > 1 else -1
    return z, rgb


def parse_map(lines: Iterable[str]) -> HeightMap:
    """Build a height map from its text lines."""
    coords: list[int] = []
    colors: list[int] = []
    width = 0
    height = 0
    map_color = False
    for raw in lines:
        line = raw[:-1] if raw.endswith("\n") else raw
        tokens = _split(line, " ")
        map_color = map_color or "," in line
        for token in tokens:
            z, rgb = parse_coord(token)
            coords.append(z)
            colors.append(rgb)
        if height == 0:
            width = len(tokens)
        elif width != len(tokens):
            raise MapError(ERR_MAP)
        if not coords:
            raise MapError(ERR_MAP)
        height += 1
    return HeightMap(
        width=width,
        height=height,
        coords=tuple(coords),
        colors=tuple(colors),
        map_color=map_color,
        z_min=min([0, *coords]),
        z_max=max([0, *coords]),
    )


def load_map(path: str | os.PathLike[str]) -> HeightMap:
    """Read and parse the map file at ``path``."""
    try:
        handle = open(path, encoding="latin-1", newline="\n")
    except OSError as exc:
        raise MapError(f"{ERR_MAP}: {exc.strerror or exc}") from exc
    with handle:
        try:
            lines = list(handle)
        except OSError as exc:
            raise MapError(f"{ERR_MAP_READING}: {exc.strerror or exc}") from exc
    return parse_map(lines)