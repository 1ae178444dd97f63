# tests/test_dates.py

from __future__ import annotations

from datetime import date, datetime

import pytest

from todo_keeper.tasks.dates import NO_DUE_DATE, display_due, format_date, parse_date


def test_format_uses_month_day_year() -> None:
    assert format_date(date(2024, 1, 5)) == "01/05/2024"
    assert format_date(datetime(2024, 12, 25, 18, 30)) == "12/25/2024"


@pytest.mark.parametrize("d", [date(2024, 2, 29), date(1999, 12, 31), date(2030, 7, 4)])
def test_parse_inverts_format(d: date) -> None:
    assert parse_date(format_date(d)) == d


@pytest.mark.parametrize("raw", [NO_DUE_DATE, None, "", "2024-12-25", "13/01/2024", "02/30/2024", "soon"])
def test_parse_rejects_sentinel_and_garbage(raw) -> None:
    assert parse_date(raw) is None


def test_display_due_substitutes_sentinel() -> None:
    assert display_due(None) == NO_DUE_DATE
    assert display_due(date(2024, 3, 9)) == "03/09/2024"


@pytest.mark.parametrize("d", [date(1, 1, 1), date(999, 1, 1), date(9999, 12, 31)])
def test_years_are_padded_to_four_digits(d: date) -> None:
    text = format_date(d)
    assert len(text) == 10
    assert parse_date(text) == d
