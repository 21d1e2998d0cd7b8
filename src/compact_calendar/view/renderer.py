# SPDX-License-Identifier: MIT

import datetime
import io
from dataclasses import dataclass, field
from typing import IO, Iterator, Optional, Union

import pendulum
from rich.console import Console
from rich.style import Style
from rich.text import Text

from compact_calendar.color import get_background_style, is_known_color
from compact_calendar.layout import border
from compact_calendar.layout.calendar_math import (
    DAYS_IN_WEEK,
    align_to_week_start,
    month_name,
)
from compact_calendar.layout.week import WeekLayout
from compact_calendar.model.calendar import Calendar
from compact_calendar.service.month_filter import FULL_YEAR, MonthSpan
from compact_calendar.view.annotation import AnnotationContext
from compact_calendar.view.style import DateStyle, resolve_date_color

CONSOLE_WIDTH = 200


@dataclass(frozen=True)
class BeforeFirstMonth:
    pass


@dataclass(frozen=True)
class InMonth:
    month: int


MonthState = Union[BeforeFirstMonth, InMonth]


@dataclass
class RenderState:
    week_num: int
    cursor: pendulum.Date
    month_state: MonthState = field(default_factory=BeforeFirstMonth)

    @property
    def current_month(self) -> Optional[int]:
        if isinstance(self.month_state, InMonth):
            return self.month_state.month
        return None

    def enter_month(self, month: int) -> bool:
        """Switch to a month, returning True if it is the first month of the render."""
        is_first_month = isinstance(self.month_state, BeforeFirstMonth)
        self.month_state = InMonth(month)
        return is_first_month

    def advance_week(self) -> None:
        self.cursor = self.cursor.add(days=DAYS_IN_WEEK)
        self.week_num += 1


class CalendarRenderer:
    """
    Render a calendar year (or a contiguous run of its months) as week rows.

    Lines are produced one at a time by iter_lines(); render() streams them to
    a console and render_to_string() captures the same console output.
    """

    def __init__(
        self,
        calendar: Calendar,
        today: datetime.date,
        span: MonthSpan = FULL_YEAR,
    ) -> None:
        self.calendar = calendar
        self.today = today
        self.span = span
        self.year = calendar["year"]
        self.options = calendar["options"]
        self.start_date = span.first_day(self.year)
        self.end_date = span.last_day(self.year)

    def render(self, console: Optional[Console] = None) -> None:
        if console is None:
            console = make_console(self.options["styling_enabled"])
        for line in self.iter_lines():
            console.print(line, soft_wrap=True)

    def render_to_string(self) -> str:
        output = io.StringIO()
        self.render(make_console(self.options["styling_enabled"], file=output))
        return output.getvalue()

    def iter_lines(self) -> Iterator[Text]:
        for line in self.header_lines():
            yield Text(line)
        yield from self.week_lines()
        yield Text("")

    def header_lines(self) -> list[str]:
        first_week = WeekLayout.from_start(
            align_to_week_start(self.start_date, self.options["week_start"])
        )
        weekday_names = [date.format("ddd") for date in first_week.dates]
        return border.header_lines(self.year, weekday_names)

    def week_lines(self) -> Iterator[Text]:
        week_start = self.options["week_start"]
        year_start = align_to_week_start(pendulum.date(self.year, 1, 1), week_start)
        scan_start = align_to_week_start(self.start_date, week_start)

        state = RenderState(
            week_num=year_start.diff(scan_start).in_days() // DAYS_IN_WEEK + 1,
            cursor=scan_start,
        )
        annotations = AnnotationContext()

        while state.cursor <= self.end_date:
            layout = WeekLayout.from_start(state.cursor)
            next_cursor = state.cursor.add(days=DAYS_IN_WEEK)
            next_layout = WeekLayout.from_start(next_cursor)
            month_start = self._month_start(layout)

            if month_start is not None:
                idx, month = month_start
                if state.enter_month(month) and idx > 0:
                    yield Text(border.top_border(idx))

            annotations.collect_details(
                layout, self.calendar["details"], self.is_visible
            )

            row = self._week_row(state.week_num, layout, month_start)
            annotation = annotations.next_annotation(
                layout, self.calendar["ranges"], self.is_visible
            )
            if annotation is not None:
                row.append_text(self._annotation_text(*annotation))
            yield row

            separator = self._separator(layout, next_cursor, next_layout, month_start)
            if separator is not None:
                yield Text(separator)

            state.advance_week()
            if state.cursor.year > self.year:
                break

    def is_visible(self, date: datetime.date) -> bool:
        """Dates of the render year outside the month span are left blank."""
        if date.year != self.year:
            return True
        return self.start_date <= date <= self.end_date

    def _month_start(self, layout: WeekLayout) -> Optional[tuple[int, int]]:
        if layout.month_start is None:
            return None
        idx, _ = layout.month_start
        if not self.is_visible(layout.dates[idx]):
            return None
        return layout.month_start

    def _separator(
        self,
        layout: WeekLayout,
        next_cursor: pendulum.Date,
        next_layout: WeekLayout,
        month_start: Optional[tuple[int, int]],
    ) -> Optional[str]:
        is_last_week = next_cursor.year > self.year or next_cursor > self.end_date
        if is_last_week:
            return border.bottom_border(layout.transition_index)

        if month_start is not None:
            idx, _ = month_start
            if idx == 0:
                return None
            return border.internal_separator(idx)

        next_month_start = self._month_start(next_layout)
        if next_month_start is not None and next_cursor.year == self.year:
            next_idx, _ = next_month_start
            return border.pre_month_separator(next_idx)

        return None

    def _week_row(
        self,
        week_num: int,
        layout: WeekLayout,
        month_start: Optional[tuple[int, int]],
    ) -> Text:
        row = Text()
        if month_start is not None:
            _, month = month_start
            row.append(f"{border.VERTICAL}W{week_num:02} {month_name(month):<9}")
        else:
            row.append(f"{border.VERTICAL}W{week_num:02}" + " " * 10)
        row.append(border.VERTICAL)

        for idx, date in enumerate(layout.dates):
            if layout.has_boundary_before(idx):
                row.append(border.VERTICAL)

            row.append(" ")
            if self.is_visible(date):
                row.append(f"{date.day:02}", style=self._day_style(date))
            else:
                row.append("  ")

            if idx < DAYS_IN_WEEK - 1 and not layout.has_boundary_after(idx):
                row.append("  ")
            else:
                row.append(" ")

        row.append(border.VERTICAL)
        return row

    def _day_style(self, date: pendulum.Date) -> Optional[Style]:
        date_style = DateStyle.for_date(
            date,
            resolve_date_color(date, self.calendar),
            self.today,
            self.options,
        )
        return date_style.to_style(self.options["styling_enabled"])

    def _annotation_text(self, text: str, color: Optional[str]) -> Text:
        if (
            not self.options["styling_enabled"]
            or color is None
            or not is_known_color(color)
        ):
            return Text(text)
        return Text(text, style=get_background_style(color))


def make_console(styling_enabled: bool, file: Optional[IO[str]] = None) -> Console:
    if file is None:
        return Console(
            color_system="auto" if styling_enabled else None,
            highlight=False,
        )
    return Console(
        file=file,
        force_terminal=styling_enabled,
        color_system="auto" if styling_enabled else None,
        highlight=False,
        width=CONSOLE_WIDTH,
    )
