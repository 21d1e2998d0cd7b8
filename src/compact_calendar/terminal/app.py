# SPDX-License-Identifier: MIT

import os
from pathlib import Path
from typing import Annotated, Optional

import typer
from rich.console import Console

from compact_calendar.configuration import default_calendar_path
from compact_calendar.model.options import CalendarOptions
from compact_calendar.repository.calendar import (
    CalendarConfigError,
    CalendarConfigRepository,
)
from compact_calendar.service.calendar import build_calendar
from compact_calendar.service.month_filter import (
    InvalidFilterError,
    resolve_month_span,
)
from compact_calendar.time import today_local
from compact_calendar.view.renderer import CalendarRenderer

app = typer.Typer(help="Compact Calendar - A year at a glance in the terminal")

error_console = Console(stderr=True)


def styling_enabled_from_environment(no_color: bool) -> bool:
    """Styling is off when --no-color is given or NO_COLOR is set."""
    if no_color:
        return False
    return "NO_COLOR" not in os.environ


@app.command()
def show(
    year: Annotated[
        Optional[int],
        typer.Option("--year", "-y", help="Year to display (defaults to current year)"),
    ] = None,
    config: Annotated[
        Optional[Path],
        typer.Option(
            "--config",
            "-c",
            help="Path to the YAML file with date details and ranges",
        ),
    ] = None,
    sunday: Annotated[
        bool,
        typer.Option("--sunday", "-s", help="Week starts on Sunday (default is Monday)"),
    ] = False,
    no_dim_weekends: Annotated[
        bool,
        typer.Option("--no-dim-weekends", help="Don't dim weekend dates"),
    ] = False,
    work: Annotated[
        bool,
        typer.Option("--work", "-w", help="Work mode: never color Saturday/Sunday"),
    ] = False,
    no_strikethrough_past: Annotated[
        bool,
        typer.Option("--no-strikethrough-past", help="Don't cross out past dates"),
    ] = False,
    month: Annotated[
        Optional[str],
        typer.Option(
            "--month",
            "-m",
            help="Only show one month: 1-12, a month name, or 'current'",
        ),
    ] = None,
    following: Annotated[
        Optional[int],
        typer.Option(
            "--following",
            "-f",
            help="With --month current, also show up to 11 following months",
        ),
    ] = None,
    no_color: Annotated[
        bool,
        typer.Option("--no-color", help="Disable colors and text effects"),
    ] = False,
) -> None:
    """Display a compact calendar of a year."""
    today = today_local()
    if year is None:
        year = today.year

    try:
        span = resolve_month_span(month, following, today)
    except InvalidFilterError as e:
        error_console.print(f"Error: {e}", style="red", markup=False)
        raise typer.Exit(1)

    config_path = config if config is not None else default_calendar_path()
    repository = CalendarConfigRepository(config_path)
    if not repository.exists:
        error_console.print(
            f"Config file not found at {config_path}, using empty configuration",
            style="yellow",
            markup=False,
        )

    options: CalendarOptions = {
        "week_start": "sunday" if sunday else "monday",
        "dim_weekends": not no_dim_weekends,
        "work_mode": work,
        "strikethrough_past": not no_strikethrough_past,
        "styling_enabled": styling_enabled_from_environment(no_color),
    }

    try:
        calendar = build_calendar(year, options, repository)
    except CalendarConfigError as e:
        error_console.print(f"Error: {e}", style="red", markup=False)
        raise typer.Exit(1)

    CalendarRenderer(calendar, today, span).render()


def run() -> None:
    app()
