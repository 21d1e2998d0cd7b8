# SPDX-License-Identifier: MIT

import datetime
from typing import Callable, Optional

from compact_calendar.layout.week import WeekLayout
from compact_calendar.model.date_detail import DateDetail, DateRange
from compact_calendar.time import date_to_display_str


class AnnotationContext:
    """Pending date details and already announced ranges for a single render."""

    def __init__(self) -> None:
        self.details_queue: list[tuple[datetime.date, DateDetail]] = []
        self.shown_ranges: set[int] = set()

    def add_detail(self, date: datetime.date, detail: DateDetail) -> None:
        if not any(queued_date == date for queued_date, _ in self.details_queue):
            self.details_queue.append((date, detail))

    def pop_next_detail(self) -> Optional[tuple[datetime.date, DateDetail]]:
        if len(self.details_queue) == 0:
            return None
        return self.details_queue.pop(0)

    def mark_range_shown(self, idx: int) -> None:
        self.shown_ranges.add(idx)

    def is_range_shown(self, idx: int) -> bool:
        return idx in self.shown_ranges

    def collect_details(
        self,
        layout: WeekLayout,
        details: dict[datetime.date, DateDetail],
        is_visible: Callable[[datetime.date], bool],
    ) -> None:
        for date in layout.dates:
            detail = details.get(date)
            if detail is not None and is_visible(date):
                self.add_detail(date, detail)

    def next_annotation(
        self,
        layout: WeekLayout,
        ranges: list[DateRange],
        is_visible: Callable[[datetime.date], bool],
    ) -> Optional[tuple[str, Optional[str]]]:
        """
        Choose the annotation for a week.

        A range starting inside the week wins over queued date details; each
        range is announced once.

        Returns:
            Tuple of (text, color name) or None when nothing is pending
        """
        for idx, date_range in enumerate(ranges):
            if (
                layout.contains(date_range["start"])
                and is_visible(date_range["start"])
                and not self.is_range_shown(idx)
            ):
                self.mark_range_shown(idx)
                return (format_range(date_range), date_range["color"])

        next_detail = self.pop_next_detail()
        if next_detail is None:
            return None
        date, detail = next_detail
        return (format_detail(date, detail), detail["color"])


def format_range(date_range: DateRange) -> str:
    text = (
        f"{date_to_display_str(date_range['start'])} to "
        f"{date_to_display_str(date_range['end'])}"
    )
    if date_range["description"] is not None:
        text += f" - {date_range['description']}"
    return text


def format_detail(date: datetime.date, detail: DateDetail) -> str:
    return f"{date_to_display_str(date)} - {detail['description']}"
