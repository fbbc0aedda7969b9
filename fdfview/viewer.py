"""The interactive wire-frame viewer: state, input handling and main loop."""

from __future__ import annotations

import sys
from collections.abc import Sequence
from dataclasses import dataclass
from enum import IntEnum

from fdfview.color import Rgb, get_color_index, int_to_rgb, palettes
from fdfview.mapfile import HeightMap, MapError, load_map
from fdfview.projection import Camera, Point, project, zoom_init
from fdfview.raster import Canvas, plot_line

HEIGHT_2 = 1080
WIDTH_2 = 1920
HEIGHT_1 = 768
WIDTH_1 = 1024
HEIGHT_0 = 600
WIDTH_0 = 800

ERR_USAGE = "Usage: fdfview MAP_FILE"

ROTATION_STEP = 0.05
PAN_STEP = 5
MOUSE_SPEED = 0.002
WINDOW_TITLE = "FdF"


class Key(IntEnum):
    """Key codes understood by the viewer."""

    ESC = 53
    I = 34  # noqa: E741
    O = 31  # noqa: E741
    A = 0
    N = 45
    F = 3
    PLUS = 24
    MINUS = 27
    LEFT = 123
    RIGHT = 124
    UP = 126
    DOWN = 125
    NUM_PAD_1 = 83
    NUM_PAD_2 = 84
    NUM_PAD_3 = 85
    NUM_PAD_7 = 89
    NUM_PAD_8 = 91
    NUM_PAD_9 = 92
    MAIN_PAD_1 = 18
    MAIN_PAD_2 = 19
    MAIN_PAD_3 = 20
    MAIN_PAD_7 = 26
    MAIN_PAD_8 = 28
    MAIN_PAD_9 = 25


class MouseButton(IntEnum):
    """Mouse buttons understood by the viewer."""

    LEFT = 1
    RIGHT = 2
    SCROLL_UP = 4
    SCROLL_DOWN = 5


# Rotation keys: key -> (camera attribute, signed step).
_ROTATION_KEYS = {
    Key.NUM_PAD_1: ("alpha", ROTATION_STEP),
    Key.MAIN_PAD_1: ("alpha", ROTATION_STEP),
    Key.NUM_PAD_9: ("alpha", -ROTATION_STEP),
    Key.MAIN_PAD_9: ("alpha", -ROTATION_STEP),
    Key.NUM_PAD_2: ("beta", ROTATION_STEP),
    Key.MAIN_PAD_2: ("beta", ROTATION_STEP),
    Key.NUM_PAD_8: ("beta", -ROTATION_STEP),
    Key.MAIN_PAD_8: ("beta", -ROTATION_STEP),
    Key.NUM_PAD_3: ("eta", ROTATION_STEP),
    Key.MAIN_PAD_3: ("eta", ROTATION_STEP),
    Key.NUM_PAD_7: ("eta", -ROTATION_STEP),
    Key.MAIN_PAD_7: ("eta", -ROTATION_STEP),
}

_PAN_KEYS = {
    Key.UP: (0, -PAN_STEP),
    Key.DOWN: (0, PAN_STEP),
    Key.LEFT: (-PAN_STEP, 0),
    Key.RIGHT: (PAN_STEP, 0),
}

_RESOLUTIONS = {2: (WIDTH_2, HEIGHT_2), 1: (WIDTH_1, HEIGHT_1)}


@dataclass
class _MouseState:
    x: int = 0
    y: int = 0
    previous_x: int = 0
    previous_y: int = 0
    left: bool = False
    right: bool = False


class Viewer:
    """Holds a height map, the camera and the canvas it is drawn on."""

    def __init__(self, heightmap: HeightMap) -> None:
        self.map = heightmap
        self.camera = Camera()
        self.gradient: list[Rgb] = palettes()
        self.mouse = _MouseState()
        self.resolution = 0
        self.width = WIDTH_0
        self.height = HEIGHT_0
        self.canvas = Canvas(self.width, self.height)
        self.closed = False

    def point_at(self, x: int, y: int) -> Point:
        """The map point at column ``x`` and row ``y``, scaled and coloured."""
        idx = abs(y * self.map.width + x)
        z = int(self.map.coords[idx] * self.camera.z_zoom)
        if self.map.map_color:
            rgb = int_to_rgb(self.map.colors[idx])
        else:
            rgb = self.gradient[get_color_index(z, len(self.gradient))]
        return Point(x, y, z, rgb)

    def _screen_point(self, x: int, y: int) -> Point:
        return project(
            self.point_at(x, y),
            self.camera,
            self.map.width,
            self.map.height,
            self.width,
            self.height,
        )

    def draw(self) -> Canvas:
        """Render the wire frame onto the canvas and return it."""
        self.canvas.clear()
        last_x = self.map.width - 1
        last_y = self.map.height - 1
        for y in range(self.map.height):
            for x in range(self.map.width):
                here = self._screen_point(x, y)
                if x != last_x:
                    plot_line(self.canvas, here, self._screen_point(x + 1, y))
                if y != last_y:
                    plot_line(self.canvas, here, self._screen_point(x, y + 1))
        return self.canvas

    def fit_zoom(self) -> None:
        """Reset the zoom so the map fits the current window."""
        zoom_init(self.camera, self.map, self.width, self.height)

    def set_window(self, width: int, height: int) -> None:
        """Resize the window and advance the resolution cycle."""
        self.width = width
        self.height = height
        self.resolution += 1
        if self.resolution > 2:
            self.resolution = 0
        self.canvas = Canvas(width, height)

    def choose_resolution(self) -> None:
        """Pick a window size suited to the map's dimensions."""
        if self.map.width <= 200:
            if self.map.height < 100:
                self.set_window(WIDTH_0, HEIGHT_0)
            elif self.map.height < 190:
                self.set_window(WIDTH_1, HEIGHT_1)
            else:
                self.set_window(WIDTH_2, HEIGHT_2)
        else:
            self.set_window(WIDTH_2, HEIGHT_2)

    def handle_key(self, key: int) -> None:
        """React to a key press and redraw."""
        cam = self.camera
        if key == Key.ESC:
            self.closed = True
            return
        if key in _PAN_KEYS:
            dx, dy = _PAN_KEYS[Key(key)]
            cam.x_offset += dx
            cam.y_offset += dy
        elif key in _ROTATION_KEYS:
            name, step = _ROTATION_KEYS[Key(key)]
            setattr(cam, name, getattr(cam, name) + step)
        elif key == Key.I:
            cam.zoom += cam.zoom_accel
        elif key == Key.O:
            cam.zoom -= cam.zoom_accel
        elif key == Key.A:
            self.set_window(*_RESOLUTIONS.get(self.resolution, (WIDTH_0, HEIGHT_0)))
            self.fit_zoom()
        elif key == Key.F:
            cam.reset_rotation()
            cam.flyofview = not cam.flyofview
        self.draw()

    def mouse_press(self, button: int, x: int, y: int) -> None:
        """Record a button press; scrolling changes height or zoom."""
        cam = self.camera
        self.mouse.x = x
        self.mouse.y = y
        if button == MouseButton.LEFT:
            self.mouse.left = True
        elif button == MouseButton.RIGHT:
            self.mouse.right = True
        if button == MouseButton.SCROLL_UP:
            if self.mouse.right:
                cam.zoom += cam.zoom_accel
            else:
                cam.z_zoom += cam.z_accel
        elif button == MouseButton.SCROLL_DOWN:
            if self.mouse.right:
                cam.zoom -= cam.zoom_accel
            else:
                cam.z_zoom -= cam.z_accel
        self.draw()

    def mouse_release(self, button: int, x: int, y: int) -> None:
        """Record a button release."""
        self.mouse.x = x
        self.mouse.y = y
        if button == MouseButton.LEFT:
            self.mouse.left = False
        if button == MouseButton.RIGHT:
            self.mouse.right = False

    def mouse_move(self, x: int, y: int) -> None:
        """Rotate the view while a button is held."""
        mouse = self.mouse
        if not mouse.left and not mouse.right:
            return
        mouse.previous_x, mouse.previous_y = mouse.x, mouse.y
        mouse.x, mouse.y = x, y
        if mouse.left:
            self.camera.beta += (x - mouse.previous_x) * MOUSE_SPEED
            self.camera.alpha += (y - mouse.previous_y) * MOUSE_SPEED
        if mouse.right:
            self.camera.eta -= (x - mouse.previous_x) * MOUSE_SPEED
        self.draw()


def _key_map(pygame) -> dict[int, Key]:
    return {
        pygame.K_ESCAPE: Key.ESC,
        pygame.K_i: Key.I,
        pygame.K_o: Key.O,
        pygame.K_a: Key.A,
        pygame.K_n: Key.N,
        pygame.K_f: Key.F,
        pygame.K_PLUS: Key.PLUS,
        pygame.K_EQUALS: Key.PLUS,
        pygame.K_MINUS: Key.MINUS,
        pygame.K_LEFT: Key.LEFT,
        pygame.K_RIGHT: Key.RIGHT,
        pygame.K_UP: Key.UP,
        pygame.K_DOWN: Key.DOWN,
        pygame.K_KP1: Key.NUM_PAD_1,
        pygame.K_KP2: Key.NUM_PAD_2,
        pygame.K_KP3: Key.NUM_PAD_3,
        pygame.K_KP7: Key.NUM_PAD_7,
        pygame.K_KP8: Key.NUM_PAD_8,
        pygame.K_KP9: Key.NUM_PAD_9,
        pygame.K_1: Key.MAIN_PAD_1,
        pygame.K_2: Key.MAIN_PAD_2,
        pygame.K_3: Key.MAIN_PAD_3,
        pygame.K_7: Key.MAIN_PAD_7,
        pygame.K_8: Key.MAIN_PAD_8,
        pygame.K_9: Key.MAIN_PAD_9,
    }


_PYGAME_BUTTONS = {
    1: MouseButton.LEFT,
    3: MouseButton.RIGHT,
    4: MouseButton.SCROLL_UP,
    5: MouseButton.SCROLL_DOWN,
}


def _run(viewer: Viewer) -> None:
    import pygame

    pygame.init()
    try:
        keys = _key_map(pygame)
        pygame.display.set_caption(WINDOW_TITLE)
        screen = pygame.display.set_mode((viewer.width, viewer.height))
        clock = pygame.time.Clock()
        while not viewer.closed:
            for event in pygame.event.get():
                if event.type == pygame.QUIT:
                    viewer.closed = True
                elif event.type == pygame.KEYDOWN:
                    viewer.handle_key(keys.get(event.key, -1))
                elif event.type == pygame.MOUSEBUTTONDOWN:
                    button = _PYGAME_BUTTONS.get(event.button)
                    if button is not None:
                        viewer.mouse_press(button, *event.pos)
                elif event.type == pygame.MOUSEBUTTONUP:
                    button = _PYGAME_BUTTONS.get(event.button)
                    if button is not None:
                        viewer.mouse_release(button, *event.pos)
                elif event.type == pygame.MOUSEMOTION:
                    viewer.mouse_move(*event.pos)
            if viewer.closed:
                break
            size = (viewer.canvas.width, viewer.canvas.height)
            if screen.get_size() != size:
                screen = pygame.display.set_mode(size)
            pixels = bytearray(viewer.canvas.data)
            pixels[3::4] = b"\xff" * (len(pixels) // 4)
            frame = pygame.image.frombuffer(bytes(pixels), size, "BGRA")
            screen.blit(frame, (0, 0))
            pygame.display.flip()
            clock.tick(60)
    finally:
        pygame.quit()


def main(argv: Sequence[str] | None = None) -> int:
    """Open the map named on the command line in an interactive window."""
    args = list(sys.argv[1:] if argv is None else argv)
    if len(args) != 1:
        print(ERR_USAGE, file=sys.stderr)
        return 1
    try:
        heightmap = load_map(args[0])
    except MapError as exc:
        print(exc, file=sys.stderr)
        return 1
    viewer = Viewer(heightmap)
    viewer.choose_resolution()
    viewer.fit_zoom()
    viewer.draw()
    _run(viewer)
    return 0


if __name__ == "__main__":
    sys.exit(main())