# SPDX-License-Identifier: MIT

import datetime
from dataclasses import dataclass
from typing import Optional

import pendulum

from compact_calendar.layout.calendar_math import days_in_month, month_from_name

MAX_FOLLOWING_MONTHS = 11


class InvalidFilterError(Exception):
    """Raised when a month selection cannot be turned into a month span."""

    kind = "invalid_filter"

    def __init__(self, message: str, value: object) -> None:
        super().__init__(message)
        self.value = value


@dataclass(frozen=True)
class MonthSpan:
    start_month: int
    end_month: int

    def first_day(self, year: int) -> pendulum.Date:
        return pendulum.date(year, self.start_month, 1)

    def last_day(self, year: int) -> pendulum.Date:
        return pendulum.date(year, self.end_month, days_in_month(self.end_month, year))

    def is_full_year(self) -> bool:
        return self.start_month == 1 and self.end_month == 12


FULL_YEAR = MonthSpan(1, 12)


def parse_month(month: str, today: datetime.date) -> int:
    """
    Resolve a month designator.

    Args:
        month: An integer 1-12, a month name or abbreviation, or "current"
        today: Date used to resolve "current"

    Raises:
        InvalidFilterError: If the designator is not recognized
    """
    designator = month.strip()
    if designator.lower() == "current":
        return today.month

    if designator.isdigit():
        number = int(designator)
        if 1 <= number <= 12:
            return number
        raise InvalidFilterError(
            f"Month must be between 1 and 12, got {number}", month
        )

    number_from_name = month_from_name(designator)
    if number_from_name is None:
        raise InvalidFilterError(
            f"Unrecognized month '{month}' (expected 1-12, a month name or 'current')",
            month,
        )
    return number_from_name


def resolve_month_span(
    month: Optional[str],
    following: Optional[int],
    today: datetime.date,
) -> MonthSpan:
    """
    Turn a month selection into a contiguous span of months.

    No month selects the whole year. A following count is only valid together
    with "current" and extends the span by up to 11 months, clipped to December.

    Raises:
        InvalidFilterError: If the selection is invalid
    """
    if following is not None:
        if month is None or month.strip().lower() != "current":
            raise InvalidFilterError(
                "Following months can only be combined with the 'current' month",
                following,
            )
        if not 0 <= following <= MAX_FOLLOWING_MONTHS:
            raise InvalidFilterError(
                f"Following months must be between 0 and {MAX_FOLLOWING_MONTHS}, "
                f"got {following}",
                following,
            )

    if month is None:
        return FULL_YEAR

    start_month = parse_month(month, today)
    end_month = min(start_month + (following or 0), 12)
    return MonthSpan(start_month, end_month)
