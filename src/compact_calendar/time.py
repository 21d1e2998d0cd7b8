# SPDX-License-Identifier: MIT

import datetime
from typing import Optional

import pendulum

DATE_FORMAT = "YYYY-M-D"

# Leap year used to check the shape of year-less dates
MONTH_DAY_CHECK_YEAR = 2000


def today_local() -> pendulum.Date:
    return pendulum.today("local").date()


def to_pendulum_date(date: datetime.date) -> pendulum.Date:
    return pendulum.date(date.year, date.month, date.day)


def date_to_display_str(date: datetime.date) -> str:
    """Format a date as 'MM/DD' for annotations."""
    return to_pendulum_date(date).format("MM/DD")


def date_from_str(date_str: str) -> pendulum.Date:
    """Parse a 'YYYY-MM-DD' string, raising ValueError when it is not a valid date."""
    return pendulum.from_format(date_str, DATE_FORMAT).date()


def date_from_month_day_str(month_day_str: str, year: int) -> pendulum.Date:
    """Parse an 'MM-DD' string anchored to the given year."""
    return pendulum.from_format(f"{year}-{month_day_str}", DATE_FORMAT).date()


def resolve_date_for_year(value: object, year: int) -> Optional[pendulum.Date]:
    """
    Resolve a configured date to an absolute date for the render year.

    Accepts dates already parsed by YAML, 'YYYY-MM-DD' strings and year-less
    'MM-DD' strings. Returns None for anything that does not resolve.
    """
    if isinstance(value, datetime.datetime):
        return to_pendulum_date(value.date())
    if isinstance(value, datetime.date):
        return to_pendulum_date(value)
    if not isinstance(value, str):
        return None

    date_str = value.strip()
    try:
        if is_month_day_str(date_str):
            return date_from_month_day_str(date_str, year)
        return date_from_str(date_str)
    except ValueError:
        return None


def is_month_day_str(value: object) -> bool:
    if not isinstance(value, str):
        return False
    try:
        date_from_month_day_str(value.strip(), MONTH_DAY_CHECK_YEAR)
    except ValueError:
        return False
    return True
