import pytest

from fdfview.color import (
    FDF_LIGHT_GRAY,
    FDF_ORANGE_RED,
    FDF_RED,
    FDF_TOMATO,
    PALETTE_STOPS,
    Rgb,
    apply_brightness,
    color_node,
    get_color,
    get_color_index,
    int_to_rgb,
    palette,
    palettes,
)


@pytest.mark.parametrize("color", [0, FDF_RED, FDF_TOMATO, FDF_LIGHT_GRAY, 0x0000FF, 0x123456])
def test_int_to_rgb_round_trip(color):
    assert int_to_rgb(color).to_int() == color


def test_int_to_rgb_channels():
    assert int_to_rgb(0xFF6347) == Rgb(0xFF, 0x63, 0x47)


def test_negative_colour_round_trips():
    assert int_to_rgb(-1).to_int() == -1


def test_get_color_endpoints():
    start = int_to_rgb(FDF_TOMATO)
    end = int_to_rgb(FDF_LIGHT_GRAY)
    assert get_color(start, end, 0.0) == start
    assert get_color(start, end, 1.0) == end


def test_get_color_midpoint_between_channels():
    start = Rgb(0, 100, 200)
    end = Rgb(200, 100, 0)
    mid = get_color(start, end, 0.5)
    assert mid == Rgb(100, 100, 100)


def test_get_color_index_centre_and_clamps():
    size = 193
    assert get_color_index(0, size) == size // 2
    assert get_color_index(10**6, size) == size - 1
    assert get_color_index(-(10**6), size) == 0


def test_get_color_index_monotonic():
    indices = [get_color_index(z, 193) for z in range(-500, 500, 7)]
    assert indices == sorted(indices)


def test_get_color_index_large_size_uses_unit_steps():
    assert get_color_index(3, 2048) == 2048 // 2 + 3


def test_color_node_moves_toward_end():
    start = Rgb(0, 200, 50)
    end = Rgb(160, 40, 50)
    nxt = color_node(start, 16, end, start)
    assert nxt.r > start.r
    assert nxt.g < start.g
    assert nxt.b == start.b


def test_palette_length_and_end():
    colours = palette(FDF_TOMATO, 16, FDF_ORANGE_RED)
    assert len(colours) == 16
    assert colours[-1] == int_to_rgb(FDF_ORANGE_RED)
    assert int_to_rgb(FDF_TOMATO) not in colours[:1]


def test_palettes_order_and_size():
    gradient = palettes()
    assert len(gradient) == 1 + 16 * (len(PALETTE_STOPS) - 1)
    assert gradient[0] == int_to_rgb(FDF_TOMATO)
    assert gradient[-1] == int_to_rgb(FDF_LIGHT_GRAY)
    assert gradient[16] == int_to_rgb(FDF_ORANGE_RED)


def test_apply_brightness_full_and_clamped():
    rgb = int_to_rgb(FDF_TOMATO)
    assert apply_brightness(rgb, 1.0) == FDF_TOMATO
    assert apply_brightness(rgb, 3.5) == FDF_TOMATO


def test_apply_brightness_zero_is_black():
    assert apply_brightness(int_to_rgb(FDF_LIGHT_GRAY), 0.0) == 0


def test_apply_brightness_half_never_exceeds_original():
    rgb = int_to_rgb(FDF_LIGHT_GRAY)
    dimmed = int_to_rgb(apply_brightness(rgb, 0.5))
    assert dimmed.r <= rgb.r and dimmed.g <= rgb.g and dimmed.b <= rgb.b