import pytest

from fdfview.color import (
    BLACK,
    RED,
    WHITE,
    create_trgb,
    get_b,
    get_g,
    get_r,
    get_t,
    hex_to_int,
    lerp_color,
    next_color,
    parse_color,
)


@pytest.mark.parametrize("t, r, g, b", [(0, 0, 0, 0), (1, 2, 3, 4), (255, 255, 255, 255), (0, 200, 10, 99)])
def test_trgb_round_trip(t, r, g, b):
    packed = create_trgb(t, r, g, b)
    assert (get_t(packed), get_r(packed), get_g(packed), get_b(packed)) == (t, r, g, b)


def test_create_trgb_white():
    assert create_trgb(0, 255, 255, 255) == WHITE


@pytest.mark.parametrize("value", [0, 1, 0xABCDEF, 0xFF0000, 0x123456])
def test_hex_to_int_round_trip(value):
    assert hex_to_int(format(value, "X")) == value
    assert hex_to_int(format(value, "x") + "\n") == value


def test_hex_to_int_invalid_is_white():
    assert hex_to_int("12G4") == WHITE


@pytest.mark.parametrize("value", [0x00FF00, 0x0000FF, 0xABCDEF])
def test_parse_color_round_trip(value):
    assert parse_color("0x" + format(value, "06x")) == value
    assert parse_color("0X" + format(value, "06X")) == value


@pytest.mark.parametrize("text", [None, "", "0", "FF0000", "1xFF", "0yFF", "0xZZ"])
def test_parse_color_defaults_to_white(text):
    assert parse_color(text) == WHITE


def test_next_color_first_step_from_red():
    assert next_color(RED) == create_trgb(0, 255, 5, 0)


def test_next_color_cycles_back_to_red():
    seen = [next_color(RED)]
    while seen[-1] != RED and len(seen) < 400:
        seen.append(next_color(seen[-1]))
    assert seen[-1] == RED
    channels = [ch for c in seen for ch in (get_r(c), get_g(c), get_b(c))]
    assert all(ch % 5 == 0 and 0 <= ch <= 255 for ch in channels)
    assert create_trgb(0, 255, 255, 0) in seen
    assert create_trgb(0, 0, 0, 255) in seen


def test_lerp_endpoints():
    c1 = create_trgb(0, 10, 20, 30)
    c2 = create_trgb(0, 200, 100, 0)
    assert lerp_color(c1, c2, 0.0) == c1
    assert lerp_color(c1, c2, 1.0) == c2


@pytest.mark.parametrize("step", range(11))
def test_lerp_channels_stay_between_endpoints(step):
    c = lerp_color(WHITE, BLACK, step / 10)
    assert get_r(c) == get_g(c) == get_b(c)
    assert 0 <= get_r(c) <= 255


def test_lerp_is_monotonic_towards_black():
    assert get_r(lerp_color(WHITE, BLACK, 0.3)) >= get_r(lerp_color(WHITE, BLACK, 0.6))