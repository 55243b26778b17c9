"""Tests for calendar date helpers."""

from __future__ import annotations

from datetime import date

import pytest

from habitflow.dates import parse_iso_date, utc_today


def test_parses_plain_calendar_date():
    assert parse_iso_date("2024-03-10") == date(2024, 3, 10)
    assert parse_iso_date(" 2024-02-29 ") == date(2024, 2, 29)


@pytest.mark.parametrize(
    "value",
    ["", "2024-3-10", "2024-03-1", "2024-W10-7", "20240310", "2024-13-01", "2023-02-29", "2024-03-10T00"],
)
def test_rejects_anything_but_year_month_day(value):
    with pytest.raises(ValueError):
        parse_iso_date(value)


def test_utc_today_is_a_plain_date():
    today = utc_today()
    assert type(today) is date
