# SPDX-License-Identifier: MIT

from typing import Optional

from rich.color import Color
from rich.style import Style

# Ayu dark palette
ORANGE = (255, 143, 64)
YELLOW = (255, 180, 84)
GREEN = (170, 217, 76)
BLUE = (89, 194, 255)
PURPLE = (210, 166, 255)
RED = (240, 113, 120)
CYAN = (149, 230, 203)
COMMENT = (99, 106, 114)

DIM_FACTOR = 0.7

# Foreground used on top of a colored background
TEXT_ON_COLOR = "black"

COLORS: dict[str, tuple[int, int, int]] = {
    "orange": ORANGE,
    "yellow": YELLOW,
    "green": GREEN,
    "blue": BLUE,
    "purple": PURPLE,
    "red": RED,
    "cyan": CYAN,
    "gray": COMMENT,
    "light_orange": ORANGE,
    "light_yellow": YELLOW,
    "light_green": GREEN,
    "light_blue": BLUE,
    "light_purple": PURPLE,
    "light_red": RED,
    "light_cyan": CYAN,
}


def dimmed(rgb: tuple[int, int, int]) -> tuple[int, int, int]:
    red, green, blue = rgb
    return (
        int(red * DIM_FACTOR),
        int(green * DIM_FACTOR),
        int(blue * DIM_FACTOR),
    )


def get_color_value(name: str) -> Optional[tuple[int, int, int]]:
    return COLORS.get(name)


def is_known_color(name: Optional[str]) -> bool:
    return name is not None and name in COLORS


def get_background_style(name: str, dim: bool = False) -> Style:
    """Return a black-on-color style for a palette name, or a null style if unknown.

    Args:
        name: Palette color name
        dim: Use the dimmed variant of the background
    """
    rgb = get_color_value(name)
    if rgb is None:
        return Style.null()
    if dim:
        rgb = dimmed(rgb)
    return Style(color=TEXT_ON_COLOR, bgcolor=Color.from_rgb(*rgb))
