from __future__ import annotations

from dataclasses import dataclass, field

from storehours.calendar.closures import DEFAULT_CLOSURES, ClosurePolicy
from storehours.calendar.holidays import HolidayRegistry
from storehours.calendar.schedule import WeeklySchedule


@dataclass(frozen=True)
class StoreCalendar:
    """
    The static tables a store's status is computed from.

    Everything downstream reads hours, holidays and closures through this
    bundle; swap it out to evaluate against another calendar.
    """

    schedule: WeeklySchedule
    holidays: HolidayRegistry = field(default_factory=HolidayRegistry)
    closures: ClosurePolicy = DEFAULT_CLOSURES
