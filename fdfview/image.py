"""In-memory raster images with the line, border, circle and square primitives."""

from __future__ import annotations

from dataclasses import dataclass

from .color import WHITE, get_b, get_g, get_r, lerp_color
from .geometry import Point, distance

_CIRCLE_RADIUS = 10


@dataclass
class Rect:
    """An axis-aligned rectangle."""

    x: int
    y: int
    w: int
    h: int

    def contains(self, x: float, y: float) -> bool:
        """True for points strictly inside the rectangle."""
        return self.x < x < self.x + self.w and self.y < y < self.y + self.h


class Image:
    """A width by height grid of packed colours, initially black."""

    def __init__(self, width: int, height: int) -> None:
        if width < 0 or height < 0:
            raise ValueError("image size must not be negative")
        self.width = width
        self.height = height
        self.pixels = [0] * (width * height)

    def put_pixel(self, x: float, y: float, color: int) -> None:
        """Set one pixel; coordinates are truncated and those outside are ignored."""
        x, y = int(x), int(y)
        if 0 <= x < self.width and 0 <= y < self.height:
            self.pixels[y * self.width + x] = color & 0xFFFFFFFF

    def get_pixel(self, x: int, y: int) -> int:
        """The colour at ``(x, y)``."""
        if not (0 <= x < self.width and 0 <= y < self.height):
            raise IndexError(f"pixel ({x}, {y}) outside {self.width}x{self.height} image")
        return self.pixels[y * self.width + x]

    def clear(self, color: int) -> None:
        """Fill the whole image with ``color``."""
        self.pixels = [color & 0xFFFFFFFF] * (self.width * self.height)

    def contains(self, point: Point) -> bool:
        """True when ``point`` lies on the image."""
        return 0 <= point.x < self.width and 0 <= point.y < self.height

    def draw_line(self, start: Point, end: Point, fact: int = 1) -> None:
        """Draw from ``start`` towards ``end`` (exclusive), blending their colours.

        Every ``fact``-th pixel is drawn, giving dotted lines for larger factors.
        Lines with neither end on the image are skipped.
        """
        if not self.contains(start) and not self.contains(end):
            return
        dist = int(distance(start, end))
        if dist <= 0:
            return
        dx = (end.x - start.x) / dist
        dy = (end.y - start.y) / dist
        # A zero factor would never advance along the line.
        step = abs(int(fact)) or 1
        x, y = start.x, start.y
        steps = dist
        while steps > 0:
            color = lerp_color(start.color, end.color, (dist - steps) / dist)
            self.put_pixel(x, y, color)
            x += dx * step
            y += dy * step
            steps -= step

    def draw_border(self, a: Point, w: float, h: float) -> None:
        """Outline the box with top-left corner ``a`` in ``a``'s colour."""
        top_right = Point(a.x + w, a.y, color=a.color)
        self.draw_line(a, top_right, 1)
        bottom_left = Point(a.x, a.y + h, color=a.color)
        self.draw_line(bottom_left, a, 1)
        bottom_right = Point(a.x + w, a.y + h, color=a.color)
        self.draw_line(bottom_right, bottom_left, 1)
        self.draw_line(bottom_right, Point(bottom_right.x, bottom_right.y - h, color=a.color), 1)

    def draw_rect(self, rect: Rect, color: int) -> None:
        """Outline ``rect`` in ``color``."""
        self.draw_border(Point(rect.x, rect.y, color=color), rect.w, rect.h)

    def draw_circle(self, center: Point) -> None:
        """Draw a small white ring around ``center``."""
        x, y = _CIRCLE_RADIUS, 0
        error = 1 - _CIRCLE_RADIUS
        cx, cy = center.x, center.y
        while x >= y:
            for px, py in ((x, y), (y, x), (-y, x), (-x, y),
                           (-x, -y), (-y, -x), (y, -x), (x, -y)):
                self.put_pixel(cx + px, cy + py, WHITE)
            y += 1
            if error < 0:
                error += 2 * y + 1
            else:
                x -= 1
                error += 2 * (y - x + 1)

    def fill_square(self, p: Point, w: float) -> None:
        """Fill the inside of the ``w``-sided square at ``p`` with ``p``'s colour."""
        y = int(p.y + 1)
        while y < p.y + w:
            x = int(p.x + 1)
            while x < p.x + w:
                self.put_pixel(x, y, p.color)
                x += 1
            y += 1

    def to_ppm(self) -> bytes:
        """Encode the image as a binary PPM."""
        header = f"P6\n{self.width} {self.height}\n255\n".encode("ascii")
        body = bytes(
            channel
            for color in self.pixels
            for channel in (get_r(color), get_g(color), get_b(color))
        )
        return header + body


@dataclass
class Layout:
    """The three panes of the window."""

    main: Image
    cube_view: Image
    menu: Image


def make_layout(
    main_size: tuple[int, int],
    cube_size: tuple[int, int],
    menu_size: tuple[int, int],
    background: int,
) -> Layout:
    """Create the panes; the menu is filled with ``background``."""
    layout = Layout(Image(*main_size), Image(*cube_size), Image(*menu_size))
    layout.menu.clear(background)
    return layout