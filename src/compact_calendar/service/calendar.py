# SPDX-License-Identifier: MIT

from compact_calendar.model.calendar import Calendar
from compact_calendar.model.options import CalendarOptions
from compact_calendar.repository.calendar import CalendarConfigRepository


def build_calendar(
    year: int,
    options: CalendarOptions,
    repository: CalendarConfigRepository,
) -> Calendar:
    return {
        "year": year,
        "options": options,
        "details": repository.get_dates_for_year(year),
        "ranges": repository.get_ranges_for_year(year),
    }
