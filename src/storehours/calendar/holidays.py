from __future__ import annotations

import enum
from dataclasses import dataclass
from datetime import date
from typing import Iterable, Iterator, Optional

from storehours.clock import date_to_iso


class HolidayScope(str, enum.Enum):
    NATIONAL = "National"
    REGIONAL = "Regional"


@dataclass(frozen=True, slots=True)
class Holiday:
    date: date
    name: str
    scope: HolidayScope = HolidayScope.NATIONAL
    region: Optional[str] = None

    @property
    def iso(self) -> str:
        return date_to_iso(self.date)


class HolidayRegistry:
    """
    Static, ordered list of dated public holidays.

    Dates are expected to be unique but this is not enforced; lookups return
    the first record whose date matches.
    """

    def __init__(self, holidays: Iterable[Holiday] = ()) -> None:
        self._holidays: tuple[Holiday, ...] = tuple(holidays)

    def lookup(self, d: date) -> Holiday | None:
        iso = date_to_iso(d)
        for holiday in self._holidays:
            if holiday.iso == iso:
                return holiday
        return None

    def in_range(self, start: date, end: date) -> list[Holiday]:
        """Holidays with ``start <= date <= end`` (both inclusive), registry order."""
        lo, hi = date_to_iso(start), date_to_iso(end)
        return [h for h in self._holidays if lo <= h.iso <= hi]

    def __len__(self) -> int:
        return len(self._holidays)

    def __iter__(self) -> Iterator[Holiday]:
        return iter(self._holidays)

    def __repr__(self) -> str:
        return f"HolidayRegistry(holidays={len(self._holidays)})"
