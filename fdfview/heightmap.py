"""Height maps: reading ``.fdf`` files into a grid of points and normalising heights."""

from __future__ import annotations

import errno
import logging
import os
from dataclasses import dataclass, field
from pathlib import Path
from typing import Iterable, Union

from .color import parse_color
from .geometry import Point
from .textutil import atoi, iter_lines, split, split_count

log = logging.getLogger(__name__)

PathLike = Union[str, "os.PathLike[str]"]


class MapError(ValueError):
    """A map file could not be opened or parsed."""


@dataclass
class HeightMap:
    """A ``width`` by ``height`` grid of points stored row by row."""

    width: int = 0
    height: int = 0
    points: list[Point] = field(default_factory=list)

    def point(self, i: int, j: int) -> Point:
        """The point in column ``i`` of row ``j``."""
        if not (0 <= i < self.width and 0 <= j < self.height):
            raise IndexError(f"point ({i}, {j}) outside {self.width}x{self.height} map")
        return self.points[j * self.width + i]

    def z_range(self) -> tuple[int, int]:
        """Lowest and highest height, truncated to integers."""
        if not self.points:
            raise ValueError("map has no points")
        heights = [int(p.z) for p in self.points]
        return min(heights), max(heights)

    def normalize_z(self) -> None:
        """Rescale heights into ``[-0.5, 0.5]``."""
        if not self.points:
            return
        low, high = self.z_range()
        fact = high - low if high != low else high
        if fact == 0:
            return
        for p in self.points:
            p.z = (p.z - low) / fact - 0.5


def _parse_point(word: str, i: int, j: int, div: int) -> Point:
    parts = split(word, ",")
    z = atoi(parts[0]) if parts else 0
    color = parse_color(parts[1] if len(parts) > 1 else None)
    return Point(i / div - 0.5, j / div - 0.5, float(z), color)


def parse_map(lines: Iterable[str]) -> HeightMap:
    """Build a map from text lines of space separated ``z[,0xCOLOR]`` entries.

    Every line must hold the same number of entries. Heights are left as read.
    """
    points: list[Point] = []
    width: int | None = None
    height = 0
    for j, line in enumerate(lines):
        height = j + 1
        words = split(line, " ")
        count = split_count(words)
        if width is not None and count != width:
            kind = "short" if count < width else "long"
            raise MapError(f"Line {height} is too {kind}.")
        width = count
        div = count - 1 if count != 1 else 1
        points.extend(_parse_point(word, i, j, div) for i, word in enumerate(words[:count]))
    if width is None:
        raise MapError("The map is empty.")
    return HeightMap(width, height, points)


def load_map(path: PathLike) -> HeightMap:
    """Read and normalise the map stored at ``path``."""
    log.info("Parsing the map...")
    try:
        with open(path, encoding="utf-8", errors="replace") as stream:
            hmap = parse_map(iter_lines(stream))
    except OSError as exc:
        raise MapError(f"could not open {path}: {exc.strerror}") from exc
    hmap.normalize_z()
    log.info("Parsing done.")
    log.info("Map %s ( %d x %d ) loaded.", os.path.basename(os.fspath(path)), hmap.width, hmap.height)
    return hmap


def check_map_path(path: PathLike) -> Path:
    """Reject directories and names not ending in ``.fdf``; return the path."""
    result = Path(path)
    if result.is_dir():
        raise MapError(f"could not open {path}: {os.strerror(errno.EISDIR)}.")
    if not os.fspath(path).endswith(".fdf"):
        raise MapError("Bad file extension. Usage: fdfview filename.fdf")
    return result