# SPDX-License-Identifier: MIT

from typing import Literal, TypedDict

WeekStart = Literal["monday", "sunday"]


class CalendarOptions(TypedDict):
    week_start: WeekStart
    dim_weekends: bool
    work_mode: bool
    strikethrough_past: bool
    styling_enabled: bool
