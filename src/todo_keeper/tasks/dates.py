# src/todo_keeper/tasks/dates.py

"""
Due-date display format.

Dates are stored and shown as MM/dd/yyyy. A task without a due date carries
the NO_DUE_DATE sentinel instead of a date string.
"""

from __future__ import annotations

from datetime import date, datetime

NO_DUE_DATE = "No due date"
DATE_FORMAT = "%m/%d/%Y"


def format_date(value: date) -> str:
    if isinstance(value, datetime):
        value = value.date()
    # strftime does not zero-pad years below 1000 on every platform.
    return f"{value.month:02d}/{value.day:02d}/{value.year:04d}"


def parse_date(text: str | None) -> date | None:
    """
    Inverse of format_date().

    Returns None for the sentinel, for None and for anything that is not a
    valid MM/dd/yyyy date.
    """
    if not text:
        return None
    raw = text.strip()
    if not raw or raw == NO_DUE_DATE:
        return None
    try:
        return datetime.strptime(raw, DATE_FORMAT).date()
    except ValueError:
        return None


def display_due(value: date | None) -> str:
    return NO_DUE_DATE if value is None else format_date(value)
