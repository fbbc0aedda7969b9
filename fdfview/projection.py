"""Camera state, rotations, isometric projection and automatic zoom."""

from __future__ import annotations

import math
from dataclasses import dataclass

from fdfview.color import Rgb
from fdfview.mapfile import HeightMap

D_MIN = 64
D_MAX = 96

DEFAULT_ZOOM = 40.0
DEFAULT_Z_ZOOM = 10.0
DEFAULT_ACCEL = 0.2
ZOOM_MAX = 60.0
ZOOM_MIN = 1.8
Z_ZOOM_MAX = 30.0
Z_ZOOM_MIN = 0.8

_ISO_ANGLE = 30 * math.pi / 180


@dataclass(frozen=True)
class Point:
    """A map point, or its position on screen after projection."""

    x: int
    y: int
    z: int
    rgb: Rgb = Rgb(0, 0, 0)


@dataclass
class Camera:
    """View parameters: zoom, rotation angles, offsets and projection mode."""

    zoom: float = DEFAULT_ZOOM
    zoom_accel: float = DEFAULT_ACCEL
    z_zoom: float = DEFAULT_Z_ZOOM
    z_accel: float = DEFAULT_ACCEL
    alpha: float = 0.0
    beta: float = 0.0
    eta: float = 0.0
    x_offset: int = 0
    y_offset: int = 0
    flyofview: bool = False

    def reset_rotation(self) -> None:
        """Set all three rotation angles back to zero."""
        self.alpha = 0.0
        self.beta = 0.0
        self.eta = 0.0


def rot_x(y: int, z: int, alpha: float) -> tuple[int, int]:
    """Rotate around the x axis; returns the new ``(y, z)``."""
    return (
        int(y * math.cos(alpha) + z * math.sin(alpha)),
        int(-y * math.sin(alpha) + z * math.cos(alpha)),
    )


def rot_y(x: int, z: int, beta: float) -> tuple[int, int]:
    """Rotate around the y axis; returns the new ``(x, z)``."""
    return (
        int(x * math.cos(beta) + z * math.sin(beta)),
        int(-x * math.sin(beta) + z * math.cos(beta)),
    )


def rot_z(x: int, y: int, eta: float) -> tuple[int, int]:
    """Rotate around the z axis; returns the new ``(x, y)``."""
    return (
        int(x * math.cos(eta) - y * math.sin(eta)),
        int(x * math.sin(eta) + y * math.cos(eta)),
    )


def iso(x: int, y: int, z: int) -> tuple[int, int]:
    """Apply the isometric projection; returns the new ``(x, y)``."""
    return (
        int((x - y) * math.cos(_ISO_ANGLE)),
        int((x + y) * math.sin(_ISO_ANGLE) - z),
    )


def project(
    point: Point,
    camera: Camera,
    map_width: int,
    map_height: int,
    win_width: int,
    win_height: int,
) -> Point:
    """Project a map point onto the window through ``camera``."""
    x = int(point.x * camera.zoom)
    y = int(point.y * camera.zoom)
    x = int(x - (map_width * camera.zoom) / 2)
    y = int(y - (map_height * camera.zoom) / 2)
    z = point.z
    y, z = rot_x(y, z, camera.alpha)
    x, z = rot_y(x, z, camera.beta)
    x, y = rot_z(x, y, camera.eta)
    if not camera.flyofview:
        x, y = iso(x, y, z)
    x += win_width // 2 + camera.x_offset
    y += win_height // 2 + camera.y_offset
    return Point(x, y, z, point.rgb)


def get_incr(
    win_width: int,
    win_height: int,
    dx: int,
    dy: int,
    zoom: float,
    zoom_max: float,
    zoom_min: float,
) -> float:
    """Return the zoom change that fits a ``dx`` by ``dy`` extent in the window."""
    low_w = win_width // D_MAX
    low_h = win_height // D_MAX
    high_w = win_width // D_MIN
    high_h = win_height // D_MIN
    incr = 0.0

    def scaled(extent: int) -> float:
        return (extent / zoom) * (zoom + incr)

    if dx < low_w and dy < low_h:
        while zoom + incr < zoom_max and scaled(dx) < high_w and scaled(dy) < high_h:
            incr += 0.5
    elif dx > high_w or dy > high_h:
        while zoom + incr > zoom_min and (scaled(dx) > high_w or scaled(dy) > high_h):
            incr -= 0.5
    return incr


def zoom_init(
    camera: Camera, heightmap: HeightMap, win_width: int, win_height: int
) -> None:
    """Reset the camera's zoom so the map fits the window."""
    camera.zoom = DEFAULT_ZOOM
    camera.z_zoom = DEFAULT_Z_ZOOM
    camera.zoom_accel = DEFAULT_ACCEL
    camera.z_accel = DEFAULT_ACCEL
    camera.zoom += get_incr(
        win_width,
        win_height,
        heightmap.width,
        heightmap.height,
        camera.zoom,
        ZOOM_MAX,
        ZOOM_MIN,
    )
    depth = heightmap.z_max - heightmap.z_min
    camera.z_zoom += get_incr(
        win_width,
        win_height,
        depth,
        depth,
        camera.z_zoom,
        Z_ZOOM_MAX,
        Z_ZOOM_MIN,
    )