from __future__ import annotations

import logging
from dataclasses import dataclass
from datetime import date, datetime
from typing import Iterator, Optional

from storehours.calendar import DaySchedule, ForcedClosure, Holiday, StoreCalendar
from storehours.clock import (
    SEPARATOR,
    date_to_iso,
    day_of_week_name,
    format_hours_range,
    format_short_date,
    iter_days,
)
from storehours.config import settings

logger = logging.getLogger(__name__)

MAX_WINDOW_DAYS = 14

NO_HOURS_TEXT = "—"


@dataclass(frozen=True, slots=True)
class ScheduleRow:
    """
    One day of the upcoming-hours table.

    Display precedence is forced closure, then public holiday, then the
    normal weekly hours. A forced closure hides the holiday name.
    """

    date: date
    day_name: str
    is_today: bool
    base_hours: Optional[DaySchedule]
    holiday: Optional[Holiday]
    forced_closure: ForcedClosure

    @property
    def iso(self) -> str:
        return date_to_iso(self.date)

    @property
    def label(self) -> str:
        return format_short_date(self.date)

    @property
    def is_forced_closed(self) -> bool:
        return self.forced_closure.closed

    @property
    def is_public_holiday(self) -> bool:
        return self.holiday is not None and not self.forced_closure.closed

    @property
    def hours_text(self) -> str:
        if self.forced_closure.closed:
            return "Closed"
        if self.base_hours is None:
            return NO_HOURS_TEXT
        return format_hours_range(self.base_hours.open, self.base_hours.close)

    @property
    def note(self) -> str | None:
        if self.forced_closure.closed:
            return f"{self.forced_closure.reason}{SEPARATOR}{self.forced_closure.note}"
        if self.holiday is not None:
            return f"{self.holiday.name}{SEPARATOR}Hours may differ"
        return None


def iter_schedule_rows(
    calendar: StoreCalendar,
    now: date | datetime,
    window_days: int | None = None,
) -> Iterator[ScheduleRow]:
    if window_days is None:
        window_days = settings.window_days
    if not 1 <= window_days <= MAX_WINDOW_DAYS:
        raise ValueError(f"window_days must be 1..{MAX_WINDOW_DAYS}; got {window_days}.")

    for i, d in enumerate(iter_days(now, window_days)):
        yield ScheduleRow(
            date=d,
            day_name=day_of_week_name(d),
            is_today=i == 0,
            base_hours=calendar.schedule.for_date(d),
            holiday=calendar.holidays.lookup(d),
            forced_closure=calendar.closures.evaluate(d),
        )


def build_schedule_rows(
    calendar: StoreCalendar,
    now: date | datetime,
    window_days: int | None = None,
) -> list[ScheduleRow]:
    """
    The next ``window_days`` days starting today, one row each
    (``settings.window_days`` when omitted).

    Rows depend only on the calendar date of ``now`` so repeated calls with
    the same ``now`` give identical results.
    """
    rows = list(iter_schedule_rows(calendar, now, window_days))
    logger.debug("projected %d schedule rows from %s", len(rows), rows[0].iso)
    return rows
