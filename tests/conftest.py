# SPDX-License-Identifier: MIT

import datetime
from pathlib import Path

import pytest

CALENDAR_YAML = """\
dates:
  2024-07-04:
    description: Independence Day
    color: red
  "12-25":
    description: Christmas
  "02-30":
    description: Not a day
  "someday":
    description: Not a date
ranges:
  - start: 2024-07-01
    end: 2024-07-04
    color: red
    description: Break
  - start: "12-20"
    end: "12-31"
    color: blue
  - start: "2024-05-10"
    end: "2024-05-01"
    color: green
  - start: "2024-01-01"
    end: "01-05"
    color: green
  - start: "2024-03-01"
    end: "2024-03-02"
"""


@pytest.fixture
def today() -> datetime.date:
    return datetime.date(2000, 1, 1)


@pytest.fixture
def calendar_file(tmp_path: Path) -> Path:
    path = tmp_path / "calendar.yaml"
    path.write_text(CALENDAR_YAML)
    return path
