# SPDX-License-Identifier: MIT

import datetime
from dataclasses import dataclass
from typing import Optional

import pendulum

from compact_calendar.layout.calendar_math import DAYS_IN_WEEK


def _differs(earlier: datetime.date, later: datetime.date) -> bool:
    return earlier.month != later.month or earlier.year != later.year


@dataclass(frozen=True)
class WeekLayout:
    """
    Seven consecutive dates of one displayed week and the transitions inside it.

    month_start: (index, month) of the first date that is the 1st of a month
    month_end: (index, month) of the last date before the first month/year change
    year_boundary: index of the first date of a new year
    """

    dates: tuple[pendulum.Date, ...]
    month_start: Optional[tuple[int, int]]
    month_end: Optional[tuple[int, int]]
    year_boundary: Optional[int]

    @classmethod
    def from_start(cls, start: datetime.date) -> "WeekLayout":
        first = pendulum.date(start.year, start.month, start.day)
        dates = tuple(first.add(days=offset) for offset in range(DAYS_IN_WEEK))
        return cls(
            dates=dates,
            month_start=_find_month_start(dates),
            month_end=_find_month_end(dates),
            year_boundary=_find_year_boundary(dates),
        )

    @property
    def first_date(self) -> pendulum.Date:
        return self.dates[0]

    @property
    def last_date(self) -> pendulum.Date:
        return self.dates[-1]

    @property
    def transition_index(self) -> Optional[int]:
        """Column in front of which the month/year divider is drawn."""
        if self.month_end is None:
            return None
        return self.month_end[0] + 1

    def contains(self, date: datetime.date) -> bool:
        return self.first_date <= date <= self.last_date

    def is_in_month(self, idx: int, year: int, month: Optional[int]) -> bool:
        if not 0 <= idx < DAYS_IN_WEEK:
            return False
        date = self.dates[idx]
        return date.year == year and date.month == month

    def was_prev_in_month(self, idx: int, year: int, month: Optional[int]) -> bool:
        return idx > 0 and self.is_in_month(idx - 1, year, month)

    def will_next_be_in_month(self, idx: int, year: int, month: Optional[int]) -> bool:
        return idx < DAYS_IN_WEEK - 1 and self.is_in_month(idx + 1, year, month)

    def count_days_in_month(self, month: int) -> int:
        return len([date for date in self.dates if date.month == month])

    def has_boundary_before(self, idx: int) -> bool:
        if not 0 < idx < DAYS_IN_WEEK:
            return False
        return _differs(self.dates[idx - 1], self.dates[idx])

    def has_boundary_after(self, idx: int) -> bool:
        return self.has_boundary_before(idx + 1)


def _find_month_start(dates: tuple[pendulum.Date, ...]) -> Optional[tuple[int, int]]:
    for idx, date in enumerate(dates):
        if date.day == 1:
            return (idx, date.month)
    return None


def _find_month_end(dates: tuple[pendulum.Date, ...]) -> Optional[tuple[int, int]]:
    for idx in range(len(dates) - 1):
        if _differs(dates[idx], dates[idx + 1]):
            return (idx, dates[idx].month)
    return None


def _find_year_boundary(dates: tuple[pendulum.Date, ...]) -> Optional[int]:
    for idx in range(1, len(dates)):
        if dates[idx].year != dates[idx - 1].year:
            return idx
    return None
