from __future__ import annotations

import enum
import logging
from dataclasses import dataclass
from datetime import date, datetime
from typing import Optional

import numpy as np

from storehours.calendar import DaySchedule, StoreCalendar
from storehours.clock import (
    SEPARATOR,
    day_of_week_name,
    format_clock_time,
    iter_days,
    minutes_since_midnight,
    short_day_name,
)
from storehours.config import default_store, settings

logger = logging.getLogger(__name__)

DEFAULT_CLOSING_SOON_MINUTES = 45
DEFAULT_HORIZON_DAYS = 14


class StatusState(str, enum.Enum):
    OPEN = "open"
    CLOSING_SOON = "closing_soon"
    CLOSED_FORCED = "closed_forced"
    CLOSED = "closed"


@dataclass(frozen=True, slots=True)
class NextOpening:
    date: date
    offset: int
    hours: DaySchedule

    @property
    def is_today(self) -> bool:
        return self.offset == 0

    @property
    def day_name(self) -> str:
        return self.hours.day


@dataclass(frozen=True, slots=True)
class StatusResult:
    is_open: bool
    closing_soon: bool
    minutes_to_close: Optional[int]
    day_name: str
    label: str
    forced_closed: bool = False
    forced_reason: Optional[str] = None
    next_open: Optional[NextOpening] = None

    @property
    def state(self) -> StatusState:
        if self.is_open:
            return StatusState.CLOSING_SOON if self.closing_soon else StatusState.OPEN
        return StatusState.CLOSED_FORCED if self.forced_closed else StatusState.CLOSED

    @property
    def badge(self) -> str:
        if not self.is_open:
            return "CLOSED"
        return "CLOSING SOON" if self.closing_soon else "OPEN"


def _closed(day_name: str, label: str, **kwargs) -> StatusResult:
    return StatusResult(
        is_open=False,
        closing_soon=False,
        minutes_to_close=None,
        day_name=day_name,
        label=label,
        **kwargs,
    )


class StatusEngine:
    """
    Open/closed status of a store at a caller-supplied local time.

    Holds no clock state: every call recomputes from ``now`` and the static
    calendar, so results are idempotent. The forward search for the next
    opening is capped at ``horizon_days`` candidate days, which bounds the
    work even when every day is closed.
    """

    def __init__(
        self,
        calendar: StoreCalendar,
        closing_soon_minutes: int = DEFAULT_CLOSING_SOON_MINUTES,
        horizon_days: int = DEFAULT_HORIZON_DAYS,
    ) -> None:
        if closing_soon_minutes < 0:
            raise ValueError("closing_soon_minutes must be non-negative.")
        if not 1 <= horizon_days <= DEFAULT_HORIZON_DAYS:
            raise ValueError(f"horizon_days must be 1..{DEFAULT_HORIZON_DAYS}; got {horizon_days}.")
        self._calendar = calendar
        self._closing_soon_minutes = closing_soon_minutes
        self._horizon = horizon_days

    # ── next-open search ─────────────────────────────────────────────────

    def find_next_open(self, now: datetime, start_offset: int = 0) -> NextOpening | None:
        """
        First day at or after ``start_offset`` days from ``now`` on which the
        store opens, or None within the horizon.

        Offset 0 is today: it only counts while ``now`` is still before
        today's opening time. Any later day counts as soon as it has hours
        and is not force-closed.
        """
        schedule = self._calendar.schedule
        closures = self._calendar.closures

        days = list(iter_days(now, self._horizon, offset=start_offset))
        weekdays = np.fromiter((d.weekday() for d in days), dtype=np.int64, count=len(days))
        forced = np.fromiter((closures.is_closed(d) for d in days), dtype=bool, count=len(days))

        candidate = schedule.has_hours[weekdays] & ~forced
        if start_offset == 0 and candidate[0]:
            candidate[0] = minutes_since_midnight(now) < schedule.open_minutes[weekdays[0]]

        hits = np.flatnonzero(candidate)
        if hits.size == 0:
            logger.debug("no opening within %d days of %s", self._horizon, now)
            return None

        i = int(hits[0])
        found = NextOpening(
            date=days[i],
            offset=start_offset + i,
            hours=schedule.for_weekday(int(weekdays[i])),
        )
        logger.debug("next opening after %s: %s (offset %d)", now, found.date, found.offset)
        return found

    # ── status ───────────────────────────────────────────────────────────

    def get_open_status(
        self,
        now: datetime,
        closing_soon_minutes: int | None = None,
    ) -> StatusResult:
        """
        Status at ``now``. ``closing_soon_minutes`` overrides the engine's
        threshold for this call only.

        On a force-closed day the search starts tomorrow, and tomorrow counts
        at any hour, even when ``now`` is already past tomorrow's opening time.
        """
        if closing_soon_minutes is not None and closing_soon_minutes < 0:
            raise ValueError("closing_soon_minutes must be non-negative.")
        threshold = (
            self._closing_soon_minutes if closing_soon_minutes is None else closing_soon_minutes
        )
        day_name = day_of_week_name(now)

        forced = self._calendar.closures.evaluate(now)
        if forced.closed:
            logger.debug("%s is force-closed: %s", now.date(), forced.reason)
            nxt = self.find_next_open(now, start_offset=1)
            label = f"Closed today{SEPARATOR}{forced.reason}"
            if nxt is not None:
                label += f"{SEPARATOR}Opens {short_day_name(nxt.day_name)} {format_clock_time(nxt.hours.open)}"
            return _closed(
                day_name,
                label,
                forced_closed=True,
                forced_reason=forced.reason,
                next_open=nxt,
            )

        today = self._calendar.schedule.for_day(day_name)
        if today is None:
            logger.warning("no opening hours configured for %s", day_name)
            return _closed(day_name, "Hours unavailable")

        minutes_now = minutes_since_midnight(now)
        if today.open_minutes <= minutes_now < today.close_minutes:
            minutes_to_close = today.close_minutes - minutes_now
            closing_soon = minutes_to_close <= threshold
            closes = format_clock_time(today.close)
            if closing_soon:
                label = f"Open now{SEPARATOR}Closing soon ({minutes_to_close} min){SEPARATOR}Closes {closes}"
            else:
                label = f"Open now{SEPARATOR}Closes {closes}"
            return StatusResult(
                is_open=True,
                closing_soon=closing_soon,
                minutes_to_close=minutes_to_close,
                day_name=day_name,
                label=label,
            )

        nxt = self.find_next_open(now)
        if nxt is None:
            logger.warning("no opening found within %d days of %s", self._horizon, now)
            return _closed(day_name, f"Closed{SEPARATOR}Hours unavailable")

        opens = format_clock_time(nxt.hours.open)
        if nxt.is_today:
            label = f"Closed{SEPARATOR}Opens {opens}"
        else:
            label = f"Closed{SEPARATOR}Opens {short_day_name(nxt.day_name)} {opens}"
        return _closed(day_name, label, next_open=nxt)

    # ── properties / repr ────────────────────────────────────────────────

    @property
    def calendar(self) -> StoreCalendar:
        return self._calendar

    @property
    def closing_soon_minutes(self) -> int:
        return self._closing_soon_minutes

    @property
    def horizon_days(self) -> int:
        return self._horizon

    def __repr__(self) -> str:
        return (
            f"StatusEngine(closing_soon_minutes={self._closing_soon_minutes}, "
            f"horizon_days={self._horizon}, "
            f"schedule={self._calendar.schedule!r})"
        )


def get_open_status(
    now: datetime,
    closing_soon_minutes: int | None = None,
    *,
    calendar: StoreCalendar | None = None,
) -> StatusResult:
    """
    Status at ``now`` for ``calendar``, or for the configured store when
    omitted. The threshold and search horizon default to ``settings``.
    """
    if calendar is None:
        calendar = default_store().calendar
    if closing_soon_minutes is None:
        closing_soon_minutes = settings.closing_soon_minutes
    engine = StatusEngine(calendar, closing_soon_minutes, settings.search_horizon_days)
    return engine.get_open_status(now)
