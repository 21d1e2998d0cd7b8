# SPDX-License-Identifier: MIT

import datetime
from typing import Optional

import pendulum

from compact_calendar.model.options import WeekStart

DAYS_IN_WEEK = 7

# (name, short name, days in a common year)
MONTHS: dict[int, tuple[str, str, int]] = {
    1: ("January", "Jan", 31),
    2: ("February", "Feb", 28),
    3: ("March", "Mar", 31),
    4: ("April", "Apr", 30),
    5: ("May", "May", 31),
    6: ("June", "Jun", 30),
    7: ("July", "Jul", 31),
    8: ("August", "Aug", 31),
    9: ("September", "Sep", 30),
    10: ("October", "Oct", 31),
    11: ("November", "Nov", 30),
    12: ("December", "Dec", 31),
}


def is_leap(year: int) -> bool:
    return (year % 4 == 0 and year % 100 != 0) or year % 400 == 0


def days_in_month(month: int, year: int) -> int:
    if month == 2 and is_leap(year):
        return 29
    return MONTHS[month][2]


def month_name(month: int) -> str:
    return MONTHS[month][0]


def month_short_name(month: int) -> str:
    return MONTHS[month][1]


def month_from_name(name: str) -> Optional[int]:
    """Look up a month number by full name or three-letter abbreviation."""
    wanted = name.strip().lower()
    for month, (full, short, _) in MONTHS.items():
        if wanted == full.lower() or wanted == short.lower():
            return month
    return None


def weekday_index(date: datetime.date, week_start: WeekStart) -> int:
    """
    Column of a date within a week that begins on the configured day.

    Args:
        date: The date to place
        week_start: "monday" or "sunday"

    Returns:
        0-6 offset, 0 being the week start day
    """
    monday_index = date.isoweekday() - 1
    if week_start == "sunday":
        return (monday_index + 1) % DAYS_IN_WEEK
    return monday_index


def is_weekend(date: datetime.date) -> bool:
    return pendulum.date(date.year, date.month, date.day).day_of_week in [
        pendulum.SATURDAY,
        pendulum.SUNDAY,
    ]


def align_to_week_start(date: datetime.date, week_start: WeekStart) -> pendulum.Date:
    aligned = pendulum.date(date.year, date.month, date.day)
    while weekday_index(aligned, week_start) != 0:
        aligned = aligned.subtract(days=1)
    return aligned
