"""Points, rotation and the small numeric helpers used by the camera and renderer."""

from __future__ import annotations

import dataclasses
import math
from dataclasses import dataclass

from .color import WHITE

ANGLE_STEP = 1.0
OFFSET_STEP = 5.0


@dataclass
class Point:
    """A point in space carrying a colour."""

    x: float = 0.0
    y: float = 0.0
    z: float = 0.0
    color: int = WHITE

    def copy(self) -> "Point":
        """Return an independent copy."""
        return dataclasses.replace(self)


def sort_points(a: Point, b: Point) -> tuple[Point, Point, bool]:
    """Order two line ends along their major axis.

    Returns ``(first, second, steep)`` where ``steep`` is true when the line
    runs more along y than x; the ends are then ordered by y, otherwise by x.
    """
    if abs(a.x - b.x) < abs(a.y - b.y):
        if a.y > b.y:
            return b, a, True
        return a, b, True
    if a.x > b.x:
        return b, a, False
    return a, b, False


def deg_cos(angle: float) -> float:
    """Cosine of an angle in degrees."""
    return math.cos(math.radians(angle))


def deg_sin(angle: float) -> float:
    """Sine of an angle in degrees."""
    return math.sin(math.radians(angle))


def fmod_wrap(value: float, div: float) -> float:
    """Pull ``value`` back by one ``div`` once its magnitude reaches ``div``, keeping its sign."""
    if abs(value) >= div:
        sign = -1.0 if value < 0.0 else 1.0
        return (abs(value) - div) * sign
    return value


def rotate_xyz(point: Point, ax: float, ay: float, az: float) -> Point:
    """Rotate ``point`` by the angles (degrees) about x, y and z."""
    cx, sx = deg_cos(ax), deg_sin(ax)
    cy, sy = deg_cos(ay), deg_sin(ay)
    cz, sz = deg_cos(az), deg_sin(az)
    x, y, z = point.x, point.y, point.z
    rx = x * (cz * cy - sz * sx * sy) + y * (-cx * sz) + z * (cz * sy + sz * sx * cy)
    ry = x * (sz * cy + cz * sx * sy) + y * (cz * cx) + z * (sz * sy - cz * sx * cy)
    rz = x * (-cx * sy) + y * sx + z * (cx * cy)
    return Point(rx, ry, rz, point.color)


def scale_point(point: Point, scale: float, x_off: float, y_off: float) -> Point:
    """Scale x and y and shift them by the offsets; z and colour are kept."""
    return Point(point.x * scale + x_off, point.y * scale + y_off, point.z, point.color)


def distance(a: Point, b: Point) -> float:
    """Distance between two points in the x/y plane."""
    return math.hypot(b.x - a.x, b.y - a.y)


def step_angle(angle: float, decrease: bool) -> float:
    """Move an angle by one step, wrapping around a full turn."""
    direction = -1 if decrease else 1
    return fmod_wrap(angle + direction * ANGLE_STEP, 360.0)


def step_offset(value: float, target: float) -> float:
    """Move ``value`` one step towards ``target`` without overshooting it."""
    if value < target:
        return min(value + OFFSET_STEP, target)
    if value > target:
        return max(value - OFFSET_STEP, target)
    return value