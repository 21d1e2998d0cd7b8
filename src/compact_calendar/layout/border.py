# SPDX-License-Identifier: MIT

from typing import Optional

from compact_calendar.layout.calendar_math import DAYS_IN_WEEK

# A day cell is " DD" plus two spaces; the last cell keeps a single space.
CELL_WIDTH = 5
BODY_WIDTH = DAYS_IN_WEEK * CELL_WIDTH - 1
LABEL_WIDTH = 13
HEADER_WIDTH = LABEL_WIDTH + 1 + BODY_WIDTH

HORIZONTAL = "─"
VERTICAL = "│"

LABEL_GAP = VERTICAL + " " * LABEL_WIDTH


def dashes_before(idx: int) -> int:
    """Characters between the left frame and a divider inserted before cell idx."""
    if idx <= 0:
        return 0
    return idx * CELL_WIDTH - 1


def dashes_after(idx: int) -> int:
    """Characters between a divider inserted before cell idx and the right frame."""
    return BODY_WIDTH - idx * CELL_WIDTH


def border_width_before(idx: int) -> int:
    """Printed width left of the divider, counting the divider's own cell."""
    if idx == 0:
        return 0
    return dashes_before(idx) + 1


def border_width_after(idx: int) -> int:
    return dashes_after(idx) + 1


def split_line(
    idx: int,
    left: str,
    divider: str,
    right: str,
    fill_before: str = HORIZONTAL,
    fill_after: str = HORIZONTAL,
) -> str:
    """
    Build a body-width line split by a divider in front of cell idx.

    The divider takes the place of one fill character, so the body stays
    BODY_WIDTH wide.
    """
    return (
        left
        + fill_before * dashes_before(idx)
        + divider
        + fill_after * dashes_after(idx)
        + right
    )


def header_lines(year: int, weekday_names: list[str]) -> list[str]:
    title = f"COMPACT CALENDAR {year}"
    return [
        "┌" + HORIZONTAL * HEADER_WIDTH + "┐",
        VERTICAL + " " * 19 + title.ljust(HEADER_WIDTH - 19) + VERTICAL,
        "├" + HORIZONTAL * HEADER_WIDTH + "┤",
        LABEL_GAP + " " + "  ".join(weekday_names) + " " + VERTICAL,
    ]


def top_border(idx: int) -> str:
    return split_line(idx, LABEL_GAP + "┌", "┬", "┤")


def internal_separator(idx: int) -> str:
    return split_line(idx, LABEL_GAP + "├", "┘", VERTICAL, fill_after=" ")


def full_separator() -> str:
    return LABEL_GAP + "├" + HORIZONTAL * BODY_WIDTH + "┤"


def pre_month_separator(idx: int) -> str:
    if idx == 0:
        return full_separator()
    return split_line(idx, LABEL_GAP + VERTICAL, "┌", "┤", fill_before=" ")


def bottom_border(idx: Optional[int]) -> str:
    left = "└" + HORIZONTAL * LABEL_WIDTH + "┴"
    if idx is None or idx == 0:
        return left + HORIZONTAL * BODY_WIDTH + "┘"
    return split_line(idx, left, "┴", "┘")
