"""The interactive viewer state: input handling, view animation and frame rendering."""

from __future__ import annotations

from enum import IntEnum
from typing import Optional

from .camera import Camera, Option, camera_of_view, default_camera
from .color import BLACK, WHITE, lerp_color
from .cube import CubeView
from .geometry import Point, distance, step_angle
from .heightmap import HeightMap
from .image import Layout, make_layout
from .widgets import (
    KEY_BACKSPACE,
    KEY_ENTER,
    MENU_WIDTH,
    ColorOption,
    ColorPicker,
    FieldPanel,
    Mode,
    color_option_from,
)

WINDOW_WIDTH = 1600
WINDOW_HEIGHT = 1000
CUBE_SIZE = 200
GREY = 0x2B2B2B

OFFSET_KEY_STEP = 10.0
Z_OFF_STEP = 10.0
SCALE_STEP = 10.0
MIN_ZOOM = 10.0
MAX_ZOOM = 5000.0

COLOR_BOX_SIZE = 30
# Lines whose projected ends are closer than this collapse to one pixel.
_EPSILON = 1.0


class Key(IntEnum):
    """Keyboard key symbols and mouse button numbers the viewer reacts to."""

    ESC = 0xFF1B
    A = ord("a")
    D = ord("d")
    S = ord("s")
    W = ord("w")
    Q = ord("q")
    E = ord("e")
    UP = 0xFF52
    DOWN = 0xFF54
    LEFT = 0xFF51
    RIGHT = 0xFF53
    PLUS = ord("=")
    MINUS = ord("-")
    SPACE = ord(" ")
    BACKSPACE = KEY_BACKSPACE
    ENTER = KEY_ENTER
    LEFT_CLICK = 1
    SCROLL_UP = 4
    SCROLL_DOWN = 5


class Animation(IntEnum):
    """State of the camera animation towards a target view."""

    STOP = 1
    RESET = 2
    UPDATE = 3


class Viewer:
    """Everything one window shows: map, camera, panes and menu widgets."""

    def __init__(self, hmap: HeightMap, width: int = WINDOW_WIDTH, height: int = WINDOW_HEIGHT) -> None:
        if width <= MENU_WIDTH or height <= 0:
            raise ValueError("window too small for the menu")
        self.map = hmap
        self.width = width
        self.height = height
        self.camera = default_camera()
        self.layout: Layout = make_layout(
            (width - MENU_WIDTH, height), (CUBE_SIZE, CUBE_SIZE), (MENU_WIDTH, height), GREY
        )
        self.cube = CubeView(origin_x=width - CUBE_SIZE)
        self.panel = FieldPanel(self.camera, menu_height=height)
        self.picker = ColorPicker(10, int(height * 0.7))
        self.low: ColorOption = color_option_from(self.picker)
        self.high: ColorOption = color_option_from(self.picker)
        self.color_box_x = int(MENU_WIDTH * 0.85)
        self.low_box_y = height // 2 - 40
        self.high_box_y = height // 2 + 20
        self.mouse_x = -1
        self.mouse_y = -1
        self.animation = Animation.STOP
        self.closed = False
        self._seen_low = 0
        self._seen_high = 0
        self._seen_camera = Camera(*(0.0 for _ in Option))

    @property
    def mode(self) -> Mode:
        """Current keyboard mode."""
        return self.panel.mode

    def key_down(self, key: int) -> None:
        """React to a key press."""
        if key == Key.ESC:
            self.closed = True
            return
        if self.panel.mode is Mode.INSERT:
            self.panel.key(key, self.camera)
            return
        c = self.camera
        if key in (Key.A, Key.D):
            c.angle_x = step_angle(c.angle_x, key == Key.D)
        if key in (Key.S, Key.W):
            c.angle_y = step_angle(c.angle_y, key == Key.W)
        if key in (Key.Q, Key.E):
            c.angle_z = step_angle(c.angle_z, key == Key.E)
        if key in (Key.UP, Key.DOWN):
            c.y_off += (-1 if key == Key.UP else 1) * OFFSET_KEY_STEP
        if key in (Key.LEFT, Key.RIGHT):
            c.x_off += (-1 if key == Key.LEFT else 1) * OFFSET_KEY_STEP
        if key in (Key.PLUS, Key.MINUS):
            c.z_off += (-1 if key == Key.MINUS else 1) * Z_OFF_STEP
        if key == Key.SPACE:
            self.step_animation(Animation.RESET)
        self.panel.sync(c)

    def mouse_down(self, button: int, x: int, y: int) -> None:
        """React to a mouse button press or wheel tick at window point ``(x, y)``."""
        c = self.camera
        if button == Key.SCROLL_UP and c.scale <= MAX_ZOOM:
            c.scale += SCALE_STEP
        if button == Key.SCROLL_DOWN and c.scale > MIN_ZOOM:
            c.scale -= SCALE_STEP
        if button == Key.LEFT_CLICK:
            self.mouse_x = x
            self.mouse_y = y
            self.picker.focused = self.picker.focus(x, y)
            if not self.picker.focused:
                self.focus_color_option(x, y)
            self.panel.focus(x, y)
            self.step_animation(Animation.UPDATE)
        self.panel.sync(c)

    def mouse_up(self, button: int, x: int, y: int) -> None:
        """Releasing the left button stops dragging a picker cursor."""
        if button == Key.LEFT_CLICK:
            self.picker.focused = ColorPicker.NONE

    def mouse_move(self, x: int, y: int) -> None:
        """Drag the focused picker cursor, keeping it inside its area."""
        cp = self.picker
        if not cp.focused:
            return
        if y <= cp.y:
            y = cp.y + 1
        if y >= cp.y + cp.hue.h:
            y = cp.y + cp.hue.h - 1
        if cp.focused == ColorPicker.HUE:
            x = cp.hue.x + cp.hue.w // 2
        elif x <= cp.x:
            x = cp.x + 1
        elif x >= cp.x + cp.sat.w:
            x = cp.x + cp.sat.w - 1
        cp.focus(x, y)

    def focus_color_option(self, x: int, y: int) -> None:
        """Select the low or high colour box under ``(x, y)`` and load it into the picker."""
        self.low.focused = False
        self.high.focused = False
        if not (self.color_box_x < x < self.color_box_x + COLOR_BOX_SIZE):
            return
        option: Optional[ColorOption] = None
        if self.low_box_y < y < self.low_box_y + COLOR_BOX_SIZE:
            option = self.low
        elif self.high_box_y < y < self.high_box_y + COLOR_BOX_SIZE:
            option = self.high
        if option is None:
            return
        option.focused = True
        self.picker.sat_cursor = option.sat.copy()
        self.picker.hue_cursor = option.hue.copy()

    def step_animation(self, state: Optional[Animation] = None) -> None:
        """Advance the camera one step towards the requested view.

        ``state`` starts a new animation; ``None`` continues the current one.
        """
        if state is not None:
            self.animation = state
        if self.animation is Animation.STOP:
            return
        if self.animation is Animation.RESET:
            target = default_camera()
        else:
            view = self.cube.clicked(self.mouse_x, self.mouse_y)
            if view is None:
                return
            target = camera_of_view(view, self.camera)
        self.camera.step_towards(target)
        if self.camera.same_orientation(target):
            self.animation = Animation.STOP

    def changed(self) -> bool:
        """True when colours or camera differ from the previous call."""
        result = False
        if self.low.color != self._seen_low:
            self._seen_low = self.low.color
            result = True
        if self.high.color != self._seen_high:
            self._seen_high = self.high.color
            result = True
        for option in Option:
            if self.camera[option] != self._seen_camera[option]:
                self._seen_camera[option] = self.camera[option]
                result = True
        return result

    def _projected(self, i: int, j: int) -> Point:
        point = self.map.point(i, j)
        p = point.copy()
        if self.low.focused or self.high.focused:
            p.color = lerp_color(self.low.color, self.high.color, p.z + 0.5)
        point.color = p.color
        return self.camera.project(p)

    def _draw_main(self) -> None:
        img = self.layout.main
        fact = 1 + int(self.camera.dot_fact)
        for j in range(self.map.height):
            for i in range(self.map.width):
                a = self._projected(i, j)
                neighbours = []
                if i + 1 < self.map.width:
                    neighbours.append((i + 1, j))
                if j + 1 < self.map.height:
                    neighbours.append((i, j + 1))
                for ni, nj in neighbours:
                    b = self._projected(ni, nj)
                    if distance(a, b) < _EPSILON:
                        img.put_pixel(a.x, a.y, lerp_color(a.color, b.color, 0.5))
                    else:
                        img.draw_line(a, b, fact)

    def _draw_menu(self) -> None:
        menu = self.layout.menu
        menu.clear(GREY)
        self.picker.draw(menu)
        if self.picker.focused:
            chosen = self.low if self.low.focused else self.high if self.high.focused else None
            if chosen is not None:
                chosen.color = self.picker.sat_cursor.color
                chosen.sat = self.picker.sat_cursor.copy()
                chosen.hue = self.picker.hue_cursor.copy()
        self.panel.draw(menu)
        for option, y in ((self.low, self.low_box_y), (self.high, self.high_box_y)):
            corner = Point(self.color_box_x, y, color=option.color)
            menu.fill_square(corner, COLOR_BOX_SIZE)
            menu.draw_border(Point(self.color_box_x, y, color=WHITE), COLOR_BOX_SIZE, COLOR_BOX_SIZE)

    def render(self) -> Layout:
        """Redraw every pane and return them."""
        self.layout.main.clear(BLACK)
        self._draw_main()
        self.layout.cube_view.clear(BLACK)
        self.cube.draw(self.layout.cube_view)
        self._draw_menu()
        return self.layout