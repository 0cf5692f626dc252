import io

import pytest

from fdfview.printf import FormatSpec, format_printf, parse_spec, print_formatted


@pytest.mark.parametrize(
    "fmt, args",
    [
        ("%d", (42,)),
        ("%d", (-42,)),
        ("%d", (0,)),
        ("%i", (123,)),
        ("%5d", (42,)),
        ("%-5d|", (42,)),
        ("%05d", (42,)),
        ("%05d", (-42,)),
        ("%+d", (42,)),
        ("% d", (42,)),
        ("% 5d", (42,)),
        ("%+ d", (42,)),
        ("%-05d", (42,)),
        ("%.3d", (7,)),
        ("%8.3d", (-7,)),
        ("%+5d", (0,)),
        ("% d", (0,)),
        ("%-+5d|", (0,)),
        ("%05d", (0,)),
        ("%+05d", (0,)),
        ("%d", (-2147483648,)),
        ("%u", (3000000000,)),
        ("%x", (255,)),
        ("%X", (255,)),
        ("%#x", (255,)),
        ("%#8x", (255,)),
        ("%#08x", (255,)),
        ("%.4x", (255,)),
        ("%-6x|", (255,)),
        ("%x", (0,)),
        ("%s", ("hello",)),
        ("%.2s", ("hello",)),
        ("%7s", ("hello",)),
        ("%-7s|", ("hello",)),
        ("%c", ("A",)),
        ("%3c", ("A",)),
        ("%-3c|", ("A",)),
        ("100%%", ()),
        ("a=%d b=%s c=%x", (1, "two", 3)),
        ("plain text", ()),
    ],
)
def test_matches_standard_formatting(fmt, args):
    assert format_printf(fmt, *args) == fmt % args


def test_signed_value_wraps_to_32_bits():
    assert format_printf("%d", 2**31) == "%d" % (-(2**31))


def test_unsigned_value_wraps_to_32_bits():
    assert format_printf("%u", -1) == str(2**32 - 1)
    assert format_printf("%x", -1) == "%x" % (2**32 - 1)


def test_zero_with_zero_precision_prints_nothing():
    assert format_printf("%.0d", 0) == ""


def test_char_from_integer():
    assert format_printf("%c", ord("z")) == "z"


@pytest.mark.parametrize("n", [0, 1, 9, 10, 99, 100, 65535, 2147483647, -1, -2147483647])
def test_decimal_round_trip(n):
    assert int(format_printf("%d", n)) == n


@pytest.mark.parametrize("n", [1, 15, 16, 255, 4096, 0xDEADBEEF])
def test_hex_round_trip(n):
    assert int(format_printf("%x", n), 16) == n
    assert int(format_printf("%X", n), 16) == n


@pytest.mark.parametrize("width", [1, 5, 12, 30])
def test_width_pads_to_exact_length(width):
    assert len(format_printf(f"%{width}s", "ab")) == max(width, 2)
    assert len(format_printf(f"%{width}d", 7)) == max(width, 1)


def test_parse_spec_width_and_precision():
    result = parse_spec("%12.4x", 1)
    assert result is not None
    spec, end = result
    assert spec.width == 12
    assert spec.precision == 4
    assert spec.dot is True
    assert spec.conversion == "x"
    assert end == len("%12.4x")


def test_parse_spec_flags():
    spec, end = parse_spec("%#+x rest", 1)
    assert spec.hash is True
    assert spec.plus is True
    assert spec.conversion == "x"
    assert end == 4


def test_parse_spec_dash_cancels_zero():
    spec, _ = parse_spec("%-08d", 1)
    assert spec.dash is True
    assert spec.zero is False
    assert spec.padding_char == " "
    assert spec.width == 8


def test_parse_spec_zero_sets_padding():
    spec, _ = parse_spec("%07d", 1)
    assert spec.zero is True
    assert spec.padding_char == "0"
    assert spec.width == 7


def test_parse_spec_plus_cancels_space_and_unsigned_drops_plus():
    spec, _ = parse_spec("%+ d", 1)
    assert spec.space is False
    spec, _ = parse_spec("%+u", 1)
    assert spec.plus is False


@pytest.mark.parametrize("fmt", ["%k", "%5q", "%", "%-"])
def test_parse_spec_invalid(fmt):
    assert parse_spec(fmt, 1) is None


def test_default_spec():
    spec = FormatSpec()
    assert spec.width == 0
    assert spec.precision == 0
    assert spec.padding_char == " "
    assert spec.conversion is None


def test_none_format_raises():
    with pytest.raises(TypeError):
        format_printf(None)


def test_missing_argument_raises():
    with pytest.raises(TypeError):
        format_printf("%d and %d", 1)


def test_multichar_string_for_char_raises():
    with pytest.raises(TypeError):
        format_printf("%c", "ab")


def test_print_formatted_writes_and_counts():
    out = io.StringIO()
    count = print_formatted("%s=%5d", "value", 42, file=out)
    expected = format_printf("%s=%5d", "value", 42)
    assert out.getvalue() == expected
    assert count == len(expected)


def test_print_formatted_defaults_to_stdout(capsys):
    count = print_formatted("%x", 255)
    assert capsys.readouterr().out == "ff"
    assert count == 2