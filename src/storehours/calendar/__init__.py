# src/storehours/calendar/__init__.py
"""
storehours.calendar
~~~~~~~~~~~~~~~~~~~

The static tables behind a store's opening status: the weekly hours, the
dated public holidays and the annual forced closures.

Basic usage::

    from datetime import date
    from storehours.calendar import (
        DaySchedule, WeeklySchedule, HolidayRegistry, ClosurePolicy,
        FixedDateClosure, StoreCalendar,
    )
    from storehours.clock import TimeOfDay, DAY_NAMES

    week = WeeklySchedule(
        DaySchedule(d, TimeOfDay(9), TimeOfDay(17)) for d in DAY_NAMES
    )
    cal = StoreCalendar(
        schedule=week,
        closures=ClosurePolicy([FixedDateClosure(12, 25, "Christmas Day")]),
    )
    cal.closures.evaluate(date(2026, 12, 25)).reason   # → "Christmas Day"

Public API
----------
DaySchedule        Open/close times for one weekday.
WeeklySchedule     Weekday-keyed hours table.
Holiday            A dated public holiday.
HolidayScope       National or regional.
HolidayRegistry    Lookup of holidays by calendar date.
ForcedClosure      Result of evaluating the closure rules for a date.
ClosureRule        Protocol for annual closure patterns.
FixedDateClosure   Closed on a month/day every year.
NthWeekdayClosure  Closed on the n-th weekday of a month every year.
ClosurePolicy      Ordered closure rules, first match wins.
StoreCalendar      Bundle of the three tables.
CalendarError      Raised for malformed tables.
"""

from __future__ import annotations

from storehours.calendar._exceptions import CalendarError
from storehours.calendar.closures import (
    DEFAULT_CLOSURES,
    ClosurePolicy,
    ClosureRule,
    FixedDateClosure,
    ForcedClosure,
    NthWeekdayClosure,
)
from storehours.calendar.holidays import Holiday, HolidayRegistry, HolidayScope
from storehours.calendar.schedule import DaySchedule, WeeklySchedule
from storehours.calendar.store import StoreCalendar

__all__ = [
    "CalendarError",
    "ClosurePolicy",
    "ClosureRule",
    "DEFAULT_CLOSURES",
    "DaySchedule",
    "FixedDateClosure",
    "ForcedClosure",
    "Holiday",
    "HolidayRegistry",
    "HolidayScope",
    "NthWeekdayClosure",
    "StoreCalendar",
    "WeeklySchedule",
]
