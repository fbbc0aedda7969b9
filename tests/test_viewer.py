import pytest

from fdfview.color import get_color_index, int_to_rgb, palettes
from fdfview.mapfile import HeightMap, parse_map
from fdfview.viewer import Key, MouseButton, Viewer, main


def small_viewer(rows=("0 0 0", "0 1 0", "0 0 0")):
    return Viewer(parse_map(list(rows)))


def flat_map(width, height):
    size = width * height
    return HeightMap(
        width=width,
        height=height,
        coords=(0,) * size,
        colors=(-1,) * size,
    )


def test_point_at_uses_gradient_without_map_colours():
    viewer = small_viewer()
    point = viewer.point_at(1, 1)
    gradient = palettes()
    assert point.x == 1 and point.y == 1
    assert point.z == int(1 * viewer.camera.z_zoom)
    assert point.rgb == gradient[get_color_index(point.z, len(gradient))]


def test_point_at_uses_map_colours():
    viewer = small_viewer(("0,0xFF0000 2,0xADFF2F",))
    assert viewer.point_at(0, 0).rgb == int_to_rgb(0xFF0000)
    assert viewer.point_at(1, 0).rgb == int_to_rgb(0xADFF2F)
    assert viewer.point_at(1, 0).z == int(2 * viewer.camera.z_zoom)


def test_draw_clears_and_renders():
    viewer = small_viewer()
    viewer.fit_zoom()
    viewer.canvas.plot_pixel(0, 0, 0xFFFFFF)
    canvas = viewer.draw()
    assert canvas is viewer.canvas
    assert canvas.pixel(0, 0) == 0
    assert any(canvas.data)


@pytest.mark.parametrize(
    "width,height,expected",
    [
        (3, 3, (800, 600)),
        (10, 150, (1024, 768)),
        (10, 190, (1920, 1080)),
        (201, 1, (1920, 1080)),
    ],
)
def test_choose_resolution(width, height, expected):
    viewer = Viewer(flat_map(width, height))
    viewer.choose_resolution()
    assert (viewer.width, viewer.height) == expected
    assert (viewer.canvas.width, viewer.canvas.height) == expected
    assert viewer.resolution == 1


def test_set_window_cycles_resolution():
    viewer = small_viewer()
    seen = []
    for _ in range(4):
        viewer.set_window(800, 600)
        seen.append(viewer.resolution)
    assert seen == [1, 2, 0, 1]


def test_key_a_cycles_window_sizes():
    viewer = small_viewer()
    viewer.choose_resolution()
    viewer.handle_key(Key.A)
    assert (viewer.width, viewer.height) == (1024, 768)
    viewer.handle_key(Key.A)
    assert (viewer.width, viewer.height) == (1920, 1080)
    viewer.handle_key(Key.A)
    assert (viewer.width, viewer.height) == (800, 600)


@pytest.mark.parametrize(
    "key,dx,dy",
    [(Key.UP, 0, -5), (Key.DOWN, 0, 5), (Key.LEFT, -5, 0), (Key.RIGHT, 5, 0)],
)
def test_arrow_keys_pan(key, dx, dy):
    viewer = small_viewer()
    viewer.handle_key(key)
    assert (viewer.camera.x_offset, viewer.camera.y_offset) == (dx, dy)


@pytest.mark.parametrize(
    "key,attr,sign",
    [
        (Key.NUM_PAD_1, "alpha", 1),
        (Key.MAIN_PAD_9, "alpha", -1),
        (Key.MAIN_PAD_2, "beta", 1),
        (Key.NUM_PAD_8, "beta", -1),
        (Key.NUM_PAD_3, "eta", 1),
        (Key.MAIN_PAD_7, "eta", -1),
    ],
)
def test_rotation_keys(key, attr, sign):
    viewer = small_viewer()
    viewer.handle_key(key)
    assert getattr(viewer.camera, attr) == pytest.approx(sign * 0.05)


def test_zoom_keys_are_inverse():
    viewer = small_viewer()
    start = viewer.camera.zoom
    viewer.handle_key(Key.I)
    assert viewer.camera.zoom == pytest.approx(start + viewer.camera.zoom_accel)
    viewer.handle_key(Key.O)
    assert viewer.camera.zoom == pytest.approx(start)


def test_key_f_toggles_view_and_resets_rotation():
    viewer = small_viewer()
    viewer.camera.alpha = 1.0
    viewer.camera.eta = 2.0
    viewer.handle_key(Key.F)
    assert viewer.camera.flyofview is True
    assert (viewer.camera.alpha, viewer.camera.beta, viewer.camera.eta) == (0.0, 0.0, 0.0)
    viewer.handle_key(Key.F)
    assert viewer.camera.flyofview is False


def test_escape_closes():
    viewer = small_viewer()
    assert viewer.closed is False
    viewer.handle_key(Key.ESC)
    assert viewer.closed is True


def test_scroll_changes_height_scale_or_zoom():
    viewer = small_viewer()
    z_zoom = viewer.camera.z_zoom
    zoom = viewer.camera.zoom
    viewer.mouse_press(MouseButton.SCROLL_UP, 1, 1)
    assert viewer.camera.z_zoom == pytest.approx(z_zoom + viewer.camera.z_accel)
    viewer.mouse_press(MouseButton.RIGHT, 1, 1)
    viewer.mouse_press(MouseButton.SCROLL_DOWN, 1, 1)
    assert viewer.camera.zoom == pytest.approx(zoom - viewer.camera.zoom_accel)
    assert viewer.camera.z_zoom == pytest.approx(z_zoom + viewer.camera.z_accel)


def test_left_drag_rotates():
    viewer = small_viewer()
    viewer.mouse_press(MouseButton.LEFT, 10, 10)
    viewer.mouse_move(20, 30)
    assert viewer.camera.beta == pytest.approx(10 * 0.002)
    assert viewer.camera.alpha == pytest.approx(20 * 0.002)
    assert (viewer.mouse.previous_x, viewer.mouse.previous_y) == (10, 10)


def test_right_drag_rotates_around_z():
    viewer = small_viewer()
    viewer.mouse_press(MouseButton.RIGHT, 0, 0)
    viewer.mouse_move(50, 0)
    assert viewer.camera.eta == pytest.approx(-50 * 0.002)


def test_move_without_buttons_changes_nothing():
    viewer = small_viewer()
    viewer.mouse_press(MouseButton.LEFT, 5, 5)
    viewer.mouse_release(MouseButton.LEFT, 5, 5)
    assert viewer.mouse.left is False
    viewer.mouse_move(100, 100)
    assert (viewer.camera.alpha, viewer.camera.beta) == (0.0, 0.0)
    assert (viewer.mouse.x, viewer.mouse.y) == (5, 5)


def test_main_usage_error(capsys):
    assert main([]) == 1
    assert "Usage" in capsys.readouterr().err


def test_main_missing_file(tmp_path, capsys):
    assert main([str(tmp_path / "missing.fdf")]) == 1
    assert "Incorrect MAP_FILE" in capsys.readouterr().err


def test_main_ragged_map(tmp_path, capsys):
    path = tmp_path / "bad.fdf"
    path.write_text("0 0 0\n0 0\n")
    assert main([str(path)]) == 1
    assert "Incorrect MAP_FILE" in capsys.readouterr().err