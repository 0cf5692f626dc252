"""Menu widgets: the hue/saturation colour picker, colour options, numeric text fields and labels."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Optional

from .camera import Camera, Option
from .color import BLACK, RED, WHITE, lerp_color, next_color
from .geometry import Point
from .image import Image, Rect
from .textutil import atoi

GREEN = 0x00FF00

KEY_BACKSPACE = 0xFF08
KEY_ENTER = 0xFF0D

MAX_CHARS = 10
MENU_WIDTH = 400
MENU_HEIGHT = 1000
FIELD_WIDTH = 100
FIELD_HEIGHT = 30
PICKER_SIZE = 300

_PICKER_GAP = 20
_FIELD_MARGIN = 20
_FIELD_TOP = 50
_FIELD_SPACING = 10
_BLINK_PERIOD = 200
_FRAME_WRAP = 1000
_CHAR_WIDTH = 6

_OPTION_LABELS = (
    "X-anlge [A/D]",
    "Y-angle [W/S]",
    "Z-angle [Q/E]",
    "X-offset [LEFT/RIGHT]",
    "Y-offset [UP/DOWN]",
    "Z-offset [-/+]",
    "Scale [Wheel]",
    "Doted lines factor",
    "< Press SPACE to reset view >",
)


class ColorPicker:
    """A saturation square with a hue strip to its right, each with a cursor."""

    NONE = 0
    HUE = 1
    SAT = 2

    def __init__(self, x: int, y: int, hue_width: int = int(MENU_WIDTH * 0.1)) -> None:
        self.x = x
        self.y = y
        self.focused = ColorPicker.NONE
        self.sat = Rect(x, y, PICKER_SIZE, PICKER_SIZE)
        self.sat_cursor = Point(self.sat.x + 1, self.sat.y + 1, 0.0, WHITE)
        self.hue = Rect(self.sat.x + self.sat.w + _PICKER_GAP, self.sat.y, hue_width, self.sat.h)
        self.hue_cursor = Point(self.hue.x, self.hue.y, 0.0, WHITE)

    def _draw_hue(self, img: Image) -> None:
        hue = self.hue
        img.draw_rect(hue, WHITE)
        color = RED
        for y in range(hue.y + 1, hue.y + hue.h):
            for x in range(hue.x + 1, hue.x + hue.w):
                img.put_pixel(x, y, color)
            if y == self.hue_cursor.y:
                self.hue_cursor.color = color
            color = next_color(color)
        marker = self.hue_cursor.copy()
        marker.color = BLACK
        img.draw_border(marker, hue.w, 2)

    def _draw_sat(self, img: Image) -> None:
        sat = self.sat
        img.draw_rect(sat, WHITE)
        for y in range(sat.y + 1, sat.y + sat.h):
            step = (y - sat.y) / sat.h
            left = lerp_color(WHITE, BLACK, step)
            right = lerp_color(self.hue_cursor.color, BLACK, step)
            for x in range(sat.x + 1, sat.x + sat.w):
                color = lerp_color(left, right, (x - sat.x) / sat.w)
                img.put_pixel(x, y, color)
                # The cursor takes the colour of the pixel just left of it.
                if x + 1 == self.sat_cursor.x and y == self.sat_cursor.y:
                    self.sat_cursor.color = color
        img.draw_circle(self.sat_cursor)

    def draw(self, img: Image) -> None:
        """Paint the hue strip and saturation square, updating the cursor colours."""
        self._draw_hue(img)
        self._draw_sat(img)

    def focus(self, x: float, y: float) -> int:
        """Move the cursor under ``(x, y)`` and report which part was hit."""
        if self.hue.contains(x, y):
            self.hue_cursor.y = y
            return self.HUE
        if self.sat.contains(x, y):
            self.sat_cursor.x = x
            self.sat_cursor.y = y
            return self.SAT
        return self.NONE


@dataclass
class ColorOption:
    """A remembered picker state: both cursors and the chosen colour."""

    hue: Point
    sat: Point
    color: int
    focused: bool = False


def color_option_from(picker: ColorPicker) -> ColorOption:
    """Capture the picker's current cursors and colour."""
    return ColorOption(
        hue=picker.hue_cursor.copy(),
        sat=picker.sat_cursor.copy(),
        color=picker.sat_cursor.color,
    )


class Mode(Enum):
    """Keyboard mode: camera control or typing into a field."""

    NORMAL = "normal"
    INSERT = "insert"


@dataclass
class TextField:
    """An editable box showing one camera option."""

    x: int
    y: int
    w: int
    h: int
    focused: bool = False
    text: str = ""

    def _inside(self, x: float, y: float) -> bool:
        return self.x <= x <= self.x + self.w and self.y <= y <= self.y + self.h


def _option_text(camera: Camera, option: int) -> str:
    return str(int(camera[option]))


class FieldPanel:
    """One text field per camera option, stacked down the menu."""

    def __init__(
        self,
        camera: Camera,
        menu_width: int = MENU_WIDTH,
        menu_height: int = MENU_HEIGHT,
        field_width: int = FIELD_WIDTH,
        field_height: int = FIELD_HEIGHT,
    ) -> None:
        self.menu_width = menu_width
        self.menu_height = menu_height
        self.mode = Mode.NORMAL
        self.cursor = 0
        self.fields = [
            TextField(
                menu_width - field_width - _FIELD_MARGIN,
                _FIELD_TOP + (field_height + _FIELD_SPACING) * index,
                field_width,
                field_height,
                text=_option_text(camera, option),
            )
            for index, option in enumerate(Option)
        ]
        self._frames = 0
        self._cursor_hidden = False

    def _focused_index(self) -> Optional[int]:
        return next((i for i, f in enumerate(self.fields) if f.focused), None)

    def sync(self, camera: Camera) -> None:
        """Show the camera's current values in every field."""
        for option, f in zip(Option, self.fields):
            f.text = _option_text(camera, option)

    def key(self, key: int, camera: Camera) -> bool:
        """Feed a key to the focused field; returns False for keys a field never takes.

        Digits and '-' are typed, backspace deletes, enter stores the value in ``camera``.
        """
        accepted = key in (KEY_BACKSPACE, KEY_ENTER) or key == ord("-") or ord("0") <= key <= ord("9")
        if not accepted:
            return False
        index = self._focused_index()
        if index is None:
            return True
        f = self.fields[index]
        if key == KEY_BACKSPACE:
            self.cursor = max(self.cursor - 1, 0)
            f.text = f.text[: self.cursor]
        elif key == KEY_ENTER:
            f.focused = False
            self.mode = Mode.NORMAL
            self.cursor = 0
            camera[index] = atoi(f.text)
            f.text = _option_text(camera, index)
        elif self.cursor < MAX_CHARS:
            f.text = f.text[: self.cursor] + chr(key)
            self.cursor += 1
        return True

    def focus(self, x: float, y: float) -> Mode:
        """Focus the field under ``(x, y)``, if any, and return the resulting mode."""
        any_focused = False
        for f in self.fields:
            f.focused = f._inside(x, y)
            if f.focused:
                any_focused = True
                self.cursor = len(f.text)
        self.mode = Mode.INSERT if any_focused else Mode.NORMAL
        return self.mode

    def _draw_cursor(self, img: Image) -> None:
        if self._frames % _BLINK_PERIOD == 0:
            self._cursor_hidden = not self._cursor_hidden
        index = self._focused_index()
        if index is None or self._cursor_hidden:
            return
        f = self.fields[index]
        x = self.fields[0].x + 5 + self.cursor * _CHAR_WIDTH
        start = Point(x, f.y + 5, color=WHITE)
        end = Point(x, f.y + 5 + f.h - 10, color=WHITE)
        img.draw_line(start, end, 1)

    def draw(self, img: Image) -> None:
        """Outline every field and draw the blinking text cursor."""
        for f in self.fields:
            img.draw_border(Point(f.x, f.y, color=GREEN if f.focused else WHITE), f.w, f.h)
        self._draw_cursor(img)
        self._frames = (self._frames + 1) % _FRAME_WRAP


def option_labels() -> list[str]:
    """Captions for each camera option followed by the reset hint."""
    return list(_OPTION_LABELS)


def panel_labels(
    panel: FieldPanel, camera: Camera, low: ColorOption, high: ColorOption
) -> list[tuple[int, int, str]]:
    """Text to place on the menu as ``(x, y, text)`` triples."""
    labels = option_labels()
    out: list[tuple[int, int, str]] = []
    label_y = 0
    for option, f in zip(Option, panel.fields):
        label_y = f.y + f.h // 2 + 5
        out.append((20, label_y, labels[option]))
        value = f.text if f.focused else _option_text(camera, option)
        out.append((f.x + 5, label_y, value))
    width = panel.menu_width
    middle = panel.menu_height // 2
    out.append((int(width * 0.3), label_y + 50, labels[len(Option)]))
    out.append((int(width * 0.2), middle - 20, "Low  Point Color"))
    out.append((int(width * 0.2), middle + 40, "High Point Color"))
    out.append((int(width * 0.7), middle - 20, f"0x{low.color:06X}"))
    out.append((int(width * 0.7), middle + 40, f"0x{high.color:06X}"))
    return out