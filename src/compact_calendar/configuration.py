# SPDX-License-Identifier: MIT

from pathlib import Path
from typing import Any, NotRequired, Optional, TypedDict

import platformdirs

APP_NAME = "compact-calendar"

CONFIG_PATH = platformdirs.user_config_path(APP_NAME)
CALENDAR_FILE_NAME = "calendar.yaml"
APP_CALENDAR_PATH = CONFIG_PATH / CALENDAR_FILE_NAME


class RawDateDetail(TypedDict):
    description: NotRequired[str]
    color: NotRequired[Optional[str]]


class RawDateRange(TypedDict):
    start: Any
    end: Any
    color: str
    description: NotRequired[Optional[str]]


class CalendarConfiguration(TypedDict):
    dates: dict[Any, RawDateDetail]
    ranges: list[RawDateRange]


def empty_configuration() -> CalendarConfiguration:
    return {"dates": {}, "ranges": []}


def default_calendar_path() -> Path:
    """
    Resolve the calendar file used when none is given.

    A calendar.yaml in the working directory wins over the one in the user
    config directory.
    """
    local_path = Path.cwd() / CALENDAR_FILE_NAME
    if local_path.is_file():
        return local_path
    return APP_CALENDAR_PATH
