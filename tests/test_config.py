# SPDX-License-Identifier: MIT

import datetime
from pathlib import Path

import pytest

from compact_calendar import configuration
from compact_calendar.repository.calendar import (
    CalendarConfigError,
    CalendarConfigRepository,
)
from compact_calendar.service.calendar import build_calendar
from calendar_helpers import make_options


def test_dates_for_year(calendar_file: Path) -> None:
    details = CalendarConfigRepository(calendar_file).get_dates_for_year(2024)

    assert details == {
        datetime.date(2024, 7, 4): {"description": "Independence Day", "color": "red"},
        datetime.date(2024, 12, 25): {"description": "Christmas", "color": None},
    }


def test_absolute_dates_keep_their_year(calendar_file: Path) -> None:
    details = CalendarConfigRepository(calendar_file).get_dates_for_year(2025)

    assert datetime.date(2024, 7, 4) in details
    assert datetime.date(2025, 12, 25) in details


def test_ranges_for_year(calendar_file: Path) -> None:
    ranges = CalendarConfigRepository(calendar_file).get_ranges_for_year(2024)

    assert ranges == [
        {
            "start": datetime.date(2024, 7, 1),
            "end": datetime.date(2024, 7, 4),
            "color": "red",
            "description": "Break",
        },
        {
            "start": datetime.date(2024, 12, 20),
            "end": datetime.date(2024, 12, 31),
            "color": "blue",
            "description": None,
        },
    ]


def test_missing_file_is_an_empty_configuration(tmp_path: Path) -> None:
    repository = CalendarConfigRepository(tmp_path / "missing.yaml")

    assert not repository.exists
    assert repository.config == configuration.empty_configuration()
    assert repository.get_ranges_for_year(2024) == []


def test_empty_file_is_an_empty_configuration(tmp_path: Path) -> None:
    path = tmp_path / "calendar.yaml"
    path.write_text("")

    assert CalendarConfigRepository(path).config == configuration.empty_configuration()


@pytest.mark.parametrize(
    "content", ["dates: [unclosed", "- just\n- a list\n", "plain text"]
)
def test_malformed_file_raises(tmp_path: Path, content: str) -> None:
    path = tmp_path / "calendar.yaml"
    path.write_text(content)

    with pytest.raises(CalendarConfigError) as exc_info:
        CalendarConfigRepository(path).get_dates_for_year(2024)

    assert exc_info.value.path == path


def test_build_calendar(calendar_file: Path) -> None:
    options = make_options(week_start="sunday")

    calendar = build_calendar(2024, options, CalendarConfigRepository(calendar_file))

    assert calendar["year"] == 2024
    assert calendar["options"] is options
    assert len(calendar["details"]) == 2
    assert len(calendar["ranges"]) == 2


def test_default_calendar_path_prefers_working_directory(
    tmp_path: Path, monkeypatch: pytest.MonkeyPatch
) -> None:
    monkeypatch.chdir(tmp_path)
    assert configuration.default_calendar_path() == configuration.APP_CALENDAR_PATH

    (tmp_path / configuration.CALENDAR_FILE_NAME).write_text("dates: {}\n")
    assert configuration.default_calendar_path() == tmp_path / "calendar.yaml"
