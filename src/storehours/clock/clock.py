from __future__ import annotations

import re
from dataclasses import dataclass
from datetime import date, datetime, timedelta
from typing import Iterator

DAY_NAMES: tuple[str, ...] = (
    "Monday",
    "Tuesday",
    "Wednesday",
    "Thursday",
    "Friday",
    "Saturday",
    "Sunday",
)

# Joins the parts of status labels and schedule notes.
SEPARATOR = " • "

_SHORT_DAY_NAMES: dict[str, str] = {name: name[:3] for name in DAY_NAMES}

_MONTH_ABBR: tuple[str, ...] = (
    "Jan", "Feb", "Mar", "Apr", "May", "Jun",
    "Jul", "Aug", "Sep", "Oct", "Nov", "Dec",
)

_HHMM = re.compile(r"^\s*(\d{1,2}):(\d{2})\s*$")


@dataclass(frozen=True, slots=True)
class TimeOfDay:
    """Hour/minute pair in 24-hour local time."""

    hour: int
    minute: int = 0

    def __post_init__(self) -> None:
        if not (0 <= self.hour <= 23 and 0 <= self.minute <= 59):
            raise ValueError(
                f"TimeOfDay out of range: {self.hour:02d}:{self.minute:02d}"
            )

    @classmethod
    def parse(cls, hhmm: str) -> TimeOfDay:
        """
        '06:30' -> TimeOfDay(6, 30)

        Only meant for configuration loading; the engine never parses.
        """
        m = _HHMM.match(str(hhmm))
        if not m:
            raise ValueError(f"Expected HH:MM, got {hhmm!r}")
        return cls(int(m.group(1)), int(m.group(2)))

    @property
    def minutes(self) -> int:
        return time_to_minutes(self)

    def __str__(self) -> str:
        return f"{self.hour:02d}:{self.minute:02d}"


def as_date(d: date) -> date:
    # datetime is a subclass of date; drop the clock part.
    return d.date() if isinstance(d, datetime) else d


def time_to_minutes(t: TimeOfDay) -> int:
    return t.hour * 60 + t.minute


def minutes_since_midnight(now: datetime) -> int:
    return now.hour * 60 + now.minute


def format_clock_time(t: TimeOfDay) -> str:
    ampm = "pm" if t.hour >= 12 else "am"
    hour = t.hour % 12 or 12
    return f"{hour}:{t.minute:02d} {ampm}"


def format_hours_range(open_: TimeOfDay, close: TimeOfDay) -> str:
    return f"{format_clock_time(open_)} – {format_clock_time(close)}"


def date_to_iso(d: date) -> str:
    return f"{d.year:04d}-{d.month:02d}-{d.day:02d}"


def day_of_week_name(d: date) -> str:
    return DAY_NAMES[d.weekday()]


def short_day_name(name: str) -> str:
    """Three-letter abbreviation; unrecognised names come back unchanged."""
    return _SHORT_DAY_NAMES.get(name, name)


def format_short_date(d: date) -> str:
    return f"{short_day_name(day_of_week_name(d))} {d.day} {_MONTH_ABBR[d.month - 1]}"


def iter_days(start: date, count: int, offset: int = 0) -> Iterator[date]:
    """
    Yield ``count`` consecutive calendar dates beginning ``offset`` days after
    ``start``.

    Datetimes are reduced to their calendar date first, so the walk is plain
    day arithmetic and cannot drift across DST changes or sub-day offsets.
    The iteration is bounded by ``count``; callers that search forward get
    termination for free.
    """
    base = as_date(start)
    for i in range(max(count, 0)):
        yield base + timedelta(days=offset + i)
