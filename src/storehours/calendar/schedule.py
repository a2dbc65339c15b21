from __future__ import annotations

from dataclasses import dataclass
from datetime import date
from typing import Iterable, Iterator, Optional

import numpy as np

from storehours.calendar._exceptions import CalendarError
from storehours.clock import DAY_NAMES, TimeOfDay

_DAY_INDEX: dict[str, int] = {name: i for i, name in enumerate(DAY_NAMES)}

# Marks a weekday with no entry in the open/close minute arrays.
_NO_HOURS: int = -1


@dataclass(frozen=True, slots=True)
class DaySchedule:
    """Opening hours for one weekday. Same-day hours only."""

    day: str
    open: TimeOfDay
    close: TimeOfDay

    @property
    def open_minutes(self) -> int:
        return self.open.minutes

    @property
    def close_minutes(self) -> int:
        return self.close.minutes


class WeeklySchedule:
    """
    Weekly opening hours keyed by weekday.

    Stored densely as two length-7 minute arrays indexed by
    ``date.weekday()``, with -1 where a weekday has no entry. A well-formed
    store has all seven days; a partial table is accepted so callers can
    degrade gracefully instead of failing.
    """

    def __init__(self, entries: Iterable[DaySchedule]) -> None:
        self._entries: list[Optional[DaySchedule]] = [None] * len(DAY_NAMES)
        self._open: np.ndarray = np.full(len(DAY_NAMES), _NO_HOURS, dtype=np.int64)
        self._close: np.ndarray = np.full(len(DAY_NAMES), _NO_HOURS, dtype=np.int64)

        for entry in entries:
            idx = _DAY_INDEX.get(entry.day)
            if idx is None:
                raise CalendarError(f"Unknown weekday name {entry.day!r}.")
            if self._entries[idx] is not None:
                raise CalendarError(f"Duplicate schedule entry for {entry.day}.")
            if entry.open_minutes >= entry.close_minutes:
                raise CalendarError(
                    f"{entry.day}: open ({entry.open}) must be before close ({entry.close})."
                )
            self._entries[idx] = entry
            self._open[idx] = entry.open_minutes
            self._close[idx] = entry.close_minutes

    # ── lookups ──────────────────────────────────────────────────────────

    def for_weekday(self, index: int) -> DaySchedule | None:
        return self._entries[index % len(DAY_NAMES)]

    def for_day(self, name: str) -> DaySchedule | None:
        idx = _DAY_INDEX.get(name)
        return None if idx is None else self._entries[idx]

    def for_date(self, d: date) -> DaySchedule | None:
        return self._entries[d.weekday()]

    # ── dense views ──────────────────────────────────────────────────────

    @property
    def has_hours(self) -> np.ndarray:
        return self._open != _NO_HOURS

    @property
    def open_minutes(self) -> np.ndarray:
        return self._open.copy()

    @property
    def close_minutes(self) -> np.ndarray:
        return self._close.copy()

    @property
    def is_complete(self) -> bool:
        return bool(self.has_hours.all())

    def __len__(self) -> int:
        return int(self.has_hours.sum())

    def __iter__(self) -> Iterator[DaySchedule]:
        return (e for e in self._entries if e is not None)

    def __repr__(self) -> str:
        return f"WeeklySchedule(days={len(self)}, complete={self.is_complete})"
