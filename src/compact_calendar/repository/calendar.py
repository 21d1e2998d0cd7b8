# SPDX-License-Identifier: MIT

import datetime
from pathlib import Path
from typing import Any, Optional

from yaml import YAMLError, load

try:
    from yaml import CLoader as Loader
except ImportError:
    from yaml import Loader  # type: ignore[assignment]

from compact_calendar import configuration
from compact_calendar.model.date_detail import DateDetail, DateRange
from compact_calendar.time import is_month_day_str, resolve_date_for_year


class CalendarConfigError(Exception):
    def __init__(self, path: Path, reason: str) -> None:
        super().__init__(f"{path}: {reason}")
        self.path = path
        self.reason = reason


class CalendarConfigRepository:
    def __init__(self, path: Path) -> None:
        self.path = path
        self._config: Optional[configuration.CalendarConfiguration] = None

    @property
    def exists(self) -> bool:
        return self.path.is_file()

    @property
    def config(self) -> configuration.CalendarConfiguration:
        if self._config is None:
            self.__load_data()
        if self._config is None:
            raise ValueError()
        return self._config

    def __load_data(self) -> None:
        if not self.exists:
            self._config = configuration.empty_configuration()
            return

        try:
            loaded = load(self.path.read_text(), Loader=Loader)
        except OSError as e:
            raise CalendarConfigError(self.path, f"failed to read file: {e}")
        except YAMLError as e:
            raise CalendarConfigError(self.path, f"failed to parse YAML: {e}")

        if loaded is None:
            loaded = {}
        if not isinstance(loaded, dict):
            raise CalendarConfigError(self.path, "top level must be a mapping")

        config = configuration.empty_configuration()
        dates = loaded.get("dates")
        if isinstance(dates, dict):
            config["dates"] = dates
        ranges = loaded.get("ranges")
        if isinstance(ranges, list):
            config["ranges"] = ranges
        self._config = config

    def get_dates_for_year(self, year: int) -> dict[datetime.date, DateDetail]:
        """
        Resolve configured dates for a render year.

        Absolute dates are kept as they are and 'MM-DD' keys are anchored to
        the year. Entries that do not resolve are dropped.
        """
        details: dict[datetime.date, DateDetail] = {}
        for key, raw_detail in self.config["dates"].items():
            date = resolve_date_for_year(key, year)
            if date is None:
                continue
            if not isinstance(raw_detail, dict):
                raw_detail = {}
            details[date] = {
                "description": str(raw_detail.get("description") or ""),
                "color": _optional_str(raw_detail.get("color")),
            }
        return details

    def get_ranges_for_year(self, year: int) -> list[DateRange]:
        """
        Resolve configured ranges for a render year, keeping declaration order.

        Both ends must use the same form (absolute or 'MM-DD'), resolve, and
        satisfy start <= end; other ranges are dropped.
        """
        ranges: list[DateRange] = []
        for raw_range in self.config["ranges"]:
            if not isinstance(raw_range, dict) or "color" not in raw_range:
                continue
            raw_start = raw_range.get("start")
            raw_end = raw_range.get("end")
            if is_month_day_str(raw_start) != is_month_day_str(raw_end):
                continue

            start = resolve_date_for_year(raw_start, year)
            end = resolve_date_for_year(raw_end, year)
            if start is None or end is None or start > end:
                continue

            ranges.append(
                {
                    "start": start,
                    "end": end,
                    "color": str(raw_range["color"]),
                    "description": _optional_str(raw_range.get("description")),
                }
            )
        return ranges


def _optional_str(value: Any) -> Optional[str]:
    if value is None:
        return None
    return str(value)
