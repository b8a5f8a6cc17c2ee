"""Terminal colors for option text.

A color is either a member of the 8-color ``Palette`` or a 24-bit ``Rgb``
triplet. ``Palette.NONE`` and ``RGB_UNSET`` mean "inherit the terminal
default": no escape sequence is ever emitted for them.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import IntEnum
from typing import NamedTuple, Union

ESC = "\x1b"
RESET = f"{ESC}[0m"


class Palette(IntEnum):
    NONE = 0
    BLACK = 30
    RED = 31
    GREEN = 32
    YELLOW = 33
    BLUE = 34
    MAGENTA = 35
    CYAN = 36
    WHITE = 37


class Rgb(NamedTuple):
    r: int
    g: int
    b: int


RGB_UNSET = Rgb(-1, -1, -1)

Color = Union[Palette, Rgb]


def is_valid_rgb(r: int, g: int, b: int) -> bool:
    return all(0 <= channel <= 255 for channel in (r, g, b))


def is_unset(color: Color) -> bool:
    if isinstance(color, Palette):
        return color == Palette.NONE
    return not is_valid_rgb(*color)


def to_color(value) -> Color:
    """Coerce a palette member, palette name, or 3-sequence into a Color."""
    if value is None:
        return Palette.NONE
    if isinstance(value, Palette):
        return value
    if isinstance(value, str):
        return Palette[value.upper()]
    if isinstance(value, int):
        return Palette(value)
    r, g, b = value
    return Rgb(int(r), int(g), int(b))


def foreground_sequence(color: Color) -> str:
    if is_unset(color):
        return ""
    if isinstance(color, Palette):
        return f"{ESC}[{int(color)}m"
    return f"{ESC}[38;2;{color.r};{color.g};{color.b}m"


def background_sequence(color: Color) -> str:
    if is_unset(color):
        return ""
    if isinstance(color, Palette):
        return f"{ESC}[{int(color) + 10}m"
    return f"{ESC}[48;2;{color.r};{color.g};{color.b}m"


def colorize(text: str, foreground: Color, background: Color) -> str:
    prefix = foreground_sequence(foreground) + background_sequence(background)
    if not prefix:
        return text
    return f"{prefix}{text}{RESET}"


@dataclass
class ColorScheme:
    foreground: Color = Palette.NONE
    background: Color = Palette.NONE
    highlight_foreground: Color = Palette.GREEN
    highlight_background: Color = Palette.NONE

    def paint(self, text: str, highlighted: bool) -> str:
        if highlighted:
            return colorize(text, self.highlight_foreground, self.highlight_background)
        return colorize(text, self.foreground, self.background)
