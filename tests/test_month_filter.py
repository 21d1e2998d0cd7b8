# SPDX-License-Identifier: MIT

import datetime

import pytest

from compact_calendar.service.month_filter import (
    FULL_YEAR,
    InvalidFilterError,
    MonthSpan,
    parse_month,
    resolve_month_span,
)

TODAY = datetime.date(2024, 5, 15)


@pytest.mark.parametrize(
    "designator, expected",
    [
        ("current", 5),
        ("Current", 5),
        ("1", 1),
        ("12", 12),
        ("march", 3),
        ("Mar", 3),
        ("DECEMBER", 12),
    ],
)
def test_parse_month(designator: str, expected: int) -> None:
    assert parse_month(designator, TODAY) == expected


@pytest.mark.parametrize("designator", ["0", "13", "nope", "", "-1"])
def test_parse_month_rejects(designator: str) -> None:
    with pytest.raises(InvalidFilterError) as exc_info:
        parse_month(designator, TODAY)

    assert exc_info.value.kind == "invalid_filter"
    assert exc_info.value.value == designator


def test_no_month_is_the_whole_year() -> None:
    span = resolve_month_span(None, None, TODAY)

    assert span == FULL_YEAR
    assert span.is_full_year()


def test_single_month() -> None:
    span = resolve_month_span("april", None, TODAY)

    assert span == MonthSpan(4, 4)
    assert not span.is_full_year()


def test_following_months() -> None:
    assert resolve_month_span("current", 3, TODAY) == MonthSpan(5, 8)
    assert resolve_month_span("current", 0, TODAY) == MonthSpan(5, 5)


def test_following_months_from_january() -> None:
    january = datetime.date(2024, 1, 15)

    assert resolve_month_span("current", 3, january) == MonthSpan(1, 4)


def test_following_months_are_clipped_to_december() -> None:
    october = datetime.date(2024, 10, 1)

    assert resolve_month_span("current", 11, october) == MonthSpan(10, 12)


@pytest.mark.parametrize(
    "month, following",
    [
        ("march", 2),
        (None, 2),
        ("5", 1),
        ("current", 12),
        ("current", -1),
    ],
)
def test_invalid_following(month: str, following: int) -> None:
    with pytest.raises(InvalidFilterError) as exc_info:
        resolve_month_span(month, following, TODAY)

    assert exc_info.value.value == following


def test_span_days() -> None:
    span = MonthSpan(2, 2)

    assert span.first_day(2024) == datetime.date(2024, 2, 1)
    assert span.last_day(2024) == datetime.date(2024, 2, 29)
    assert span.last_day(2023) == datetime.date(2023, 2, 28)
    assert FULL_YEAR.last_day(2024) == datetime.date(2024, 12, 31)
