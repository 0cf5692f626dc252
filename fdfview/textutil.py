"""Small text helpers used by the map reader: integer parsing, word splitting and line reading."""

from __future__ import annotations

from typing import IO, Iterator, Sequence

INT_MAX = 2147483647
INT_MIN = -2147483648
DEFAULT_BUFFER_SIZE = 1000

_WHITESPACE = " \t\n\v\f\r"


def _wrap_int32(value: int) -> int:
    """Wrap an integer into the signed 32-bit range."""
    value &= 0xFFFFFFFF
    return value - 0x100000000 if value > INT_MAX else value


def atoi(text: str) -> int:
    """Parse a leading decimal integer, ignoring leading whitespace and trailing junk.

    Returns 0 when no digits are found. The result wraps to a signed 32-bit int.
    """
    stripped = text.lstrip(_WHITESPACE)
    sign = 1
    if stripped[:1] in ("-", "+"):
        sign = -1 if stripped[0] == "-" else 1
        stripped = stripped[1:]
    digits = []
    for ch in stripped:
        if not ("0" <= ch <= "9"):
            break
        digits.append(ch)
    value = int("".join(digits)) if digits else 0
    return _wrap_int32(value * sign)


def split(text: str, sep: str) -> list[str]:
    """Split ``text`` on ``sep``, dropping empty pieces."""
    return [word for word in text.split(sep) if word]


def split_count(words: Sequence[str]) -> int:
    """Count words up to the first one that starts with a newline."""
    count = 0
    for word in words:
        if word.startswith("\n"):
            break
        count += 1
    return count


def itoa(n: int) -> str:
    """Format an integer in decimal."""
    return str(n)


def iter_lines(stream: IO[str], buffer_size: int = DEFAULT_BUFFER_SIZE) -> Iterator[str]:
    """Yield lines from ``stream``, each keeping its trailing newline.

    The stream is read in chunks of ``buffer_size`` characters.
    """
    if buffer_size <= 0:
        raise ValueError("buffer_size must be positive")
    pending = ""
    while True:
        newline = pending.find("\n")
        if newline >= 0:
            yield pending[: newline + 1]
            pending = pending[newline + 1:]
            continue
        chunk = stream.read(buffer_size)
        if not chunk:
            break
        pending += chunk
    if pending:
        yield pending