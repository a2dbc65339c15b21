# src/storehours/clock/__init__.py
"""
storehours.clock
~~~~~~~~~~~~~~~~

Clock-time and calendar-date helpers shared by the rest of the package.

Basic usage::

    from storehours.clock import TimeOfDay, format_clock_time, iter_days

    t = TimeOfDay.parse("20:00")
    format_clock_time(t)                           # → "8:00 pm"
    list(iter_days(date(2026, 10, 19), 3))         # Mon, Tue, Wed

Public API
----------
SEPARATOR              " • " joiner for labels and notes.
TimeOfDay              Hour/minute pair in 24-hour local time.
time_to_minutes        Minutes since midnight for a TimeOfDay.
minutes_since_midnight Minutes since midnight for a datetime.
as_date                Calendar date of a date or datetime.
format_clock_time      "6:30 am" style rendering.
format_hours_range     "6:30 am – 8:00 pm" style rendering.
date_to_iso            YYYY-MM-DD from local calendar fields.
day_of_week_name       Full English weekday name.
short_day_name         Three-letter weekday abbreviation.
format_short_date      "Mon 19 Oct" style rendering.
iter_days              Bounded forward iteration over calendar dates.
"""

from __future__ import annotations

from storehours.clock.clock import (
    DAY_NAMES,
    SEPARATOR,
    TimeOfDay,
    as_date,
    date_to_iso,
    day_of_week_name,
    format_clock_time,
    format_hours_range,
    format_short_date,
    iter_days,
    minutes_since_midnight,
    short_day_name,
    time_to_minutes,
)

__all__ = [
    "DAY_NAMES",
    "SEPARATOR",
    "TimeOfDay",
    "as_date",
    "date_to_iso",
    "day_of_week_name",
    "format_clock_time",
    "format_hours_range",
    "format_short_date",
    "iter_days",
    "minutes_since_midnight",
    "short_day_name",
    "time_to_minutes",
]
