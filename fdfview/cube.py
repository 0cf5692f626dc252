"""The small orientation cube used to pick preset views."""

from __future__ import annotations

from typing import Optional

from .camera import Camera, View
from .color import WHITE
from .geometry import Point
from .image import Image

_EDGES = (
    (0, 1), (1, 2), (2, 3), (3, 0),
    (0, 3), (0, 4), (7, 3), (4, 7), (4, 5), (5, 1),
)


def unit_cube() -> list[Point]:
    """The eight corners of a unit cube centred on the origin."""
    corners = (
        (-0.5, 0.5, 0.5), (0.5, 0.5, 0.5), (0.5, 0.5, -0.5), (-0.5, 0.5, -0.5),
        (-0.5, -0.5, 0.5), (0.5, -0.5, 0.5), (0.5, -0.5, -0.5), (-0.5, -0.5, -0.5),
    )
    return [Point(x, y, z) for x, y, z in corners]


class CubeView:
    """A cube drawn in the default orientation; its faces select views when clicked.

    ``origin_x`` is the window x coordinate of the cube image's left edge.
    """

    def __init__(self, origin_x: int = 0) -> None:
        self.origin_x = origin_x
        self.points = unit_cube()

    def draw(self, img: Image) -> None:
        """Project the cube into ``img`` and draw its visible edges."""
        camera = Camera()
        projected = []
        for corner in unit_cube():
            p = camera.rotate(corner)
            p.x = p.x * img.width * 0.5 + img.width // 2
            p.y = p.y * img.width * 0.5 + img.height // 2
            p.color = WHITE
            projected.append(p)
        self.points = projected
        for a, b in _EDGES:
            img.draw_line(projected[a], projected[b], 1)

    def clicked(self, x: float, y: float) -> Optional[View]:
        """The view whose face lies under window point ``(x, y)``, if any.

        ``(-1, -1)`` stands for no click and selects the default view.
        """
        if x == -1 and y == -1:
            return View.DEFAULT
        x -= self.origin_x
        c = self.points
        if c[4].x < x < c[1].x and c[5].y < y < c[0].y:
            return View.TOP
        if c[7].x < x < c[3].x and c[0].y < y < c[3].y:
            return View.FRONT
        if c[3].x < x < c[2].x and c[0].y < y < c[3].y:
            return View.SIDE
        return None