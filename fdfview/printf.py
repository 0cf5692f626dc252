"""A printf-style formatter supporting the ``c s p d i u x X %`` conversions.

Flags ``# 0 - + space``, a field width and a ``.precision`` are understood.
Integers follow C's 32-bit conventions: ``%d`` wraps to a signed value and
``%u``/``%x``/``%X`` to an unsigned one.
"""

from __future__ import annotations

import sys
from dataclasses import dataclass
from typing import Any, Iterator, Optional, TextIO

from .textutil import atoi

# Some corner cases (null pointers, null strings, bad conversions, "%%" with
# a width) are rendered the way the host platform's C library does it.
ON_LINUX = sys.platform.startswith("linux")

CONVERSIONS = "cspdiuxX%"

_FLAG_ATTRS = {
    "#": "hash",
    " ": "space",
    ".": "dot",
    "-": "dash",
    "+": "plus",
    "0": "zero",
}

_DEC_DIGITS = "0123456789"
_HEX_LOWER = "0123456789abcdef"
_HEX_UPPER = "0123456789ABCDEF"


@dataclass
class FormatSpec:
    """One parsed conversion: flags, width, precision and conversion character."""

    dot: bool = False
    zero: bool = False
    hash: bool = False
    space: bool = False
    plus: bool = False
    dash: bool = False
    width: int = 0
    precision: int = 0
    padding_char: str = " "
    conversion: Optional[str] = None

    def _resolve(self) -> None:
        """Drop flags that other flags or the conversion override."""
        if self.dash or self.dot:
            self.zero = False
            self.padding_char = " "
        if self.plus:
            self.space = False
        if self.conversion == "u":
            self.plus = False


def _is_digit(ch: str) -> bool:
    return "0" <= ch <= "9"


def _skip_digits(fmt: str, i: int) -> int:
    while i < len(fmt) and _is_digit(fmt[i]):
        i += 1
    return i


def _validate(fmt: str, i: int, spec: FormatSpec) -> Optional[tuple[FormatSpec, int]]:
    if i < len(fmt) and fmt[i] in CONVERSIONS:
        spec.conversion = fmt[i]
        spec._resolve()
        return spec, i + 1
    return None


def _parse_digits(fmt: str, i: int, spec: FormatSpec) -> Optional[tuple[FormatSpec, int]]:
    if spec.dot:
        spec.precision = atoi(fmt[i:])
    else:
        spec.width = atoi(fmt[i:])
    i = _skip_digits(fmt, i)
    if i < len(fmt) and fmt[i] == ".":
        spec.dot = True
        spec.precision = atoi(fmt[i + 1:])
        i = _skip_digits(fmt, i + 1)
    return _validate(fmt, i, spec)


def parse_spec(fmt: str, start: int) -> Optional[tuple[FormatSpec, int]]:
    """Parse the conversion whose flags begin at ``fmt[start]`` (just after ``%``).

    Returns the spec, with overridden flags already dropped, and the index just
    past the conversion character; ``None`` when no valid conversion follows.
    """
    spec = FormatSpec()
    i = start
    while i < len(fmt):
        ch = fmt[i]
        attr = _FLAG_ATTRS.get(ch)
        if attr is None and not _is_digit(ch):
            return _validate(fmt, i, spec)
        if attr == "zero":
            spec.zero = True
            spec.padding_char = "0"
        elif attr is None:
            return _parse_digits(fmt, i, spec)
        else:
            setattr(spec, attr, True)
        i += 1
    return None


def _count_digits(nb: int, base: int) -> int:
    count = 1
    while nb >= base:
        count += 1
        nb //= base
    return count


def _to_base(nb: int, symbols: str) -> str:
    base = len(symbols)
    out = [symbols[nb % base]]
    while nb >= base:
        nb //= base
        out.append(symbols[nb % base])
    return "".join(reversed(out))


def _pad(spec: FormatSpec, size: int) -> str:
    return spec.padding_char * max(spec.width - size, 0)


def _zero_fill(nb: int, precision: int, base: int) -> str:
    return "0" * max(precision - _count_digits(nb, base), 0)


def _format_zero(spec: FormatSpec) -> str:
    precision = spec.precision if spec.dot else spec.precision + 1
    out_len = int(spec.plus) + int(spec.space) + precision
    parts = []
    if spec.space:
        parts.append(" ")
    if spec.plus and spec.padding_char == "0":
        parts.append("+")
    if not spec.dash:
        parts.append(_pad(spec, out_len))
    if spec.plus and spec.padding_char != "0":
        parts.append("+")
    parts.append("0" * max(precision, 0))
    if spec.dash:
        parts.append(_pad(spec, out_len))
    return "".join(parts)


def _format_number(d: int, sign: str, spec: FormatSpec) -> str:
    if d == 0:
        return _format_zero(spec)
    parts = []
    out_len = max(_count_digits(d, 10), spec.precision)
    if spec.space and sign == "+":
        out_len += 1
        parts.append(" ")
    signed = spec.plus or sign == "-"
    padd_len = out_len + int(signed)
    if signed and spec.zero:
        parts.append(sign)
    if not spec.dash:
        parts.append(_pad(spec, padd_len))
    if signed and not spec.zero:
        parts.append(sign)
    parts.append(_zero_fill(d & 0xFFFFFFFF, spec.precision, 10))
    parts.append(_to_base(d, _DEC_DIGITS))
    if spec.dash:
        parts.append(_pad(spec, padd_len))
    return "".join(parts)


def _format_dec(value: int, spec: FormatSpec) -> str:
    d = int(value) & 0xFFFFFFFF
    if d > 0x7FFFFFFF:
        d -= 0x100000000
    return _format_number(abs(d), "-" if d < 0 else "+", spec)


def _format_udec(value: int, spec: FormatSpec) -> str:
    return _format_number(int(value) & 0xFFFFFFFF, "+", spec)


def _format_hex(value: int, upper: bool, spec: FormatSpec) -> str:
    x = int(value) & 0xFFFFFFFF
    if x == 0:
        return _format_zero(spec)
    out_len = max(_count_digits(x, 16), spec.precision)
    prefixed_len = out_len + (2 if spec.hash else 0)
    parts = []
    if not spec.dash and not spec.zero:
        parts.append(_pad(spec, prefixed_len))
    if spec.hash:
        parts.append("0X" if upper else "0x")
    if not spec.dash and spec.zero:
        parts.append(_pad(spec, prefixed_len))
    parts.append(_zero_fill(x, spec.precision, 16))
    parts.append(_to_base(x, _HEX_UPPER if upper else _HEX_LOWER))
    if spec.dash:
        parts.append(_pad(spec, prefixed_len))
    return "".join(parts)


def _format_char(value: Any, spec: FormatSpec) -> str:
    if isinstance(value, str):
        if len(value) != 1:
            raise TypeError("%c requires a single character")
        ch = value
    else:
        ch = chr(int(value) & 0xFF)
    if spec.dash:
        return ch + _pad(spec, 1)
    return _pad(spec, 1) + ch


def _format_str(value: Optional[str], spec: FormatSpec) -> str:
    if value is None:
        value = "(null)"
        if ON_LINUX and spec.dot and spec.precision < 6:
            value = ""
    text = str(value)
    if spec.dot and len(text) > spec.precision:
        text = text[: max(spec.precision, 0)]
    if spec.dash:
        return text + _pad(spec, len(text))
    return _pad(spec, len(text)) + text


def _format_addr(value: Optional[int], spec: FormatSpec) -> str:
    nb = 0 if value is None else int(value) & 0xFFFFFFFFFFFFFFFF
    out_len = _count_digits(nb, 16)
    out_len += 2 + 2 * (nb == 0) if ON_LINUX else 2
    if ON_LINUX and nb == 0:
        body = "(nil)"
    else:
        body = "0x" + _to_base(nb, _HEX_LOWER)
    if spec.dash:
        return body + _pad(spec, out_len)
    return _pad(spec, out_len) + body


def _format_percent(spec: FormatSpec) -> str:
    if ON_LINUX:
        return "%"
    if spec.dash:
        return "%" + _pad(spec, 1)
    return _pad(spec, 1) + "%"


def _next_arg(args: Iterator[Any]) -> Any:
    try:
        return next(args)
    except StopIteration:
        raise TypeError("not enough arguments for format string") from None


def _render(spec: FormatSpec, args: Iterator[Any]) -> str:
    conv = spec.conversion
    if conv == "%":
        return _format_percent(spec)
    value = _next_arg(args)
    if conv == "c":
        return _format_char(value, spec)
    if conv == "s":
        return _format_str(value, spec)
    if conv == "p":
        return _format_addr(value, spec)
    if conv in ("d", "i"):
        return _format_dec(value, spec)
    if conv == "u":
        return _format_udec(value, spec)
    return _format_hex(value, conv == "X", spec)


def format_printf(fmt: str, *args: Any) -> str:
    """Format ``args`` according to ``fmt`` and return the text.

    Missing arguments raise ``TypeError``; surplus ones are ignored.
    """
    if fmt is None:
        raise TypeError("format string must not be None")
    remaining = iter(args)
    out = []
    i = 0
    while i < len(fmt):
        if fmt[i] != "%":
            out.append(fmt[i])
            i += 1
            continue
        parsed = parse_spec(fmt, i + 1)
        if parsed is None:
            if ON_LINUX:
                out.append("%")
            i += 1
            continue
        spec, i = parsed
        out.append(_render(spec, remaining))
    return "".join(out)


def print_formatted(fmt: str, *args: Any, file: Optional[TextIO] = None) -> int:
    """Write the formatted text to ``file`` (standard output by default); return its length."""
    text = format_printf(fmt, *args)
    stream = sys.stdout if file is None else file
    stream.write(text)
    return len(text)