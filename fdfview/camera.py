"""Camera options, preset views and the animation step between two cameras."""

from __future__ import annotations

from dataclasses import dataclass
from enum import IntEnum
from typing import Iterator, Optional

from .geometry import Point, rotate_xyz, scale_point, step_angle, step_offset

DEFAULT_ANGLE_X = 30.0
DEFAULT_ANGLE_Y = 0.0
DEFAULT_ANGLE_Z = 45.0
DEFAULT_X_OFF = 600.0
DEFAULT_Y_OFF = 400.0
DEFAULT_Z_OFF = 100.0
DEFAULT_SCALE = 500.0


class Option(IntEnum):
    """Camera options, in the order they are shown and edited."""

    ANGLE_X = 0
    ANGLE_Y = 1
    ANGLE_Z = 2
    X_OFF = 3
    Y_OFF = 4
    Z_OFF = 5
    SCALE = 6
    DOT_FACT = 7

    @property
    def attribute(self) -> str:
        """Name of the matching ``Camera`` attribute."""
        return self.name.lower()


class View(IntEnum):
    """Preset views selectable from the orientation cube."""

    DEFAULT = 1
    TOP = 2
    SIDE = 3
    FRONT = 4


# Options that take part in view animation: angles and offsets.
_ANIMATED = tuple(option for option in Option if option < Option.SCALE)


@dataclass
class Camera:
    """Rotation angles (degrees), screen offsets, height factor, zoom and dotted-line factor."""

    angle_x: float = DEFAULT_ANGLE_X
    angle_y: float = DEFAULT_ANGLE_Y
    angle_z: float = DEFAULT_ANGLE_Z
    x_off: float = DEFAULT_X_OFF
    y_off: float = DEFAULT_Y_OFF
    z_off: float = DEFAULT_Z_OFF
    scale: float = DEFAULT_SCALE
    dot_fact: float = 0.0

    def __getitem__(self, option: int) -> float:
        return getattr(self, Option(option).attribute)

    def __setitem__(self, option: int, value: float) -> None:
        setattr(self, Option(option).attribute, float(value))

    def __iter__(self) -> Iterator[float]:
        return (self[option] for option in Option)

    def step_towards(self, target: "Camera") -> None:
        """Move angles and offsets one animation step towards ``target``."""
        for option in _ANIMATED:
            current, goal = self[option], target[option]
            if current == goal:
                continue
            if option <= Option.ANGLE_Z:
                self[option] = step_angle(current, current > goal)
            else:
                self[option] = step_offset(current, goal)

    def same_orientation(self, other: "Camera") -> bool:
        """True when angles and offsets match; zoom and dot factor are ignored."""
        return all(self[option] == other[option] for option in _ANIMATED)

    def rotate(self, point: Point) -> Point:
        """Rotate ``point`` by this camera's angles."""
        return rotate_xyz(point, self.angle_x, self.angle_y, self.angle_z)

    def project(self, point: Point) -> Point:
        """Stretch height, rotate, then zoom and shift onto the screen."""
        stretched = point.copy()
        stretched.z = stretched.z * (self.z_off / DEFAULT_Z_OFF)
        return scale_point(self.rotate(stretched), self.scale, self.x_off, self.y_off)


def default_camera() -> Camera:
    """A camera in its starting position."""
    return Camera()


def camera_of_view(view: int, old: Optional[Camera]) -> Camera:
    """A camera that keeps ``old``'s offsets and zoom but looks along a preset view."""
    if old is None:
        camera = Camera(*(0.0 for _ in Option))
    else:
        camera = Camera(*old)
    camera.angle_x = 0.0
    camera.angle_y = 0.0
    camera.angle_z = 0.0
    if view == View.SIDE:
        camera.angle_x = 90.0
    elif view == View.FRONT:
        camera.angle_y = 90.0
        camera.angle_z = -90.0
    return camera