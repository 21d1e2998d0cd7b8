# SPDX-License-Identifier: MIT

import datetime
from typing import TypedDict

from compact_calendar.model.date_detail import DateDetail, DateRange
from compact_calendar.model.options import CalendarOptions


class Calendar(TypedDict):
    year: int
    options: CalendarOptions
    details: dict[datetime.date, DateDetail]
    ranges: list[DateRange]
