# SPDX-License-Identifier: MIT

import datetime
from dataclasses import dataclass
from typing import Optional

from rich.style import Style

from compact_calendar.color import get_background_style, is_known_color
from compact_calendar.layout.calendar_math import is_weekend
from compact_calendar.model.calendar import Calendar
from compact_calendar.model.options import CalendarOptions


@dataclass(frozen=True)
class DateStyle:
    color: Optional[str]
    is_today: bool
    is_past: bool
    is_weekend: bool

    @classmethod
    def for_date(
        cls,
        date: datetime.date,
        color: Optional[str],
        today: datetime.date,
        options: CalendarOptions,
    ) -> "DateStyle":
        return cls(
            color=color if is_known_color(color) else None,
            is_today=date == today,
            is_past=options["strikethrough_past"] and date < today,
            is_weekend=options["dim_weekends"] and is_weekend(date),
        )

    def to_style(self, styling_enabled: bool) -> Optional[Style]:
        """
        Compose the rich style for a day cell.

        A colored cell gets a background (dimmed on weekends) with dark text;
        an uncolored weekend is dimmed instead. Strikethrough and underline
        apply on top of either.
        """
        if not styling_enabled:
            return None

        effects = Style(
            strike=True if self.is_past else None,
            underline=True if self.is_today else None,
        )

        if self.color is not None:
            return get_background_style(self.color, dim=self.is_weekend) + effects

        if self.is_weekend:
            effects += Style(dim=True)
        if not effects:
            return None
        return effects


def resolve_date_color(date: datetime.date, calendar: Calendar) -> Optional[str]:
    if calendar["options"]["work_mode"] and is_weekend(date):
        return None

    detail = calendar["details"].get(date)
    if detail is not None and detail["color"] is not None:
        return detail["color"]

    for date_range in calendar["ranges"]:
        if date_range["start"] <= date <= date_range["end"]:
            return date_range["color"]

    return None
