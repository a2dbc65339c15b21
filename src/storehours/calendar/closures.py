from __future__ import annotations

import calendar as _stdcal
from dataclasses import dataclass
from datetime import date
from typing import ClassVar, Iterable, Iterator, Optional, Protocol, runtime_checkable

from storehours.calendar._exceptions import CalendarError
from storehours.clock import DAY_NAMES, as_date

CLOSED_ALL_DAY = "Closed all day"


@dataclass(frozen=True, slots=True)
class ForcedClosure:
    closed: bool
    reason: Optional[str] = None
    note: Optional[str] = None

    OPEN: ClassVar[ForcedClosure]

    @classmethod
    def for_reason(cls, reason: str) -> ForcedClosure:
        return cls(closed=True, reason=reason, note=CLOSED_ALL_DAY)


ForcedClosure.OPEN = ForcedClosure(closed=False)


@runtime_checkable
class ClosureRule(Protocol):
    """A date pattern that forces the store closed whenever it matches."""

    reason: str

    def matches(self, d: date) -> bool:
        ...


@dataclass(frozen=True, slots=True)
class FixedDateClosure:
    """Closed on the same month/day every year."""

    month: int
    day: int
    reason: str

    def __post_init__(self) -> None:
        if not 1 <= self.month <= 12:
            raise CalendarError(f"Closure month must be 1..12; got {self.month}.")
        # Leap year so Feb 29 is accepted.
        last = _stdcal.monthrange(2000, self.month)[1]
        if not 1 <= self.day <= last:
            raise CalendarError(
                f"Closure day must be 1..{last} for month {self.month}; got {self.day}."
            )

    def matches(self, d: date) -> bool:
        return d.month == self.month and d.day == self.day


@dataclass(frozen=True, slots=True)
class NthWeekdayClosure:
    """
    Closed on the n-th given weekday of a month, every year.

    ``weekday`` follows ``date.weekday()`` (0 = Monday). ``n`` counts from 1;
    ``n = -1`` selects the last such weekday of the month.
    """

    month: int
    weekday: int
    n: int
    reason: str

    def __post_init__(self) -> None:
        if not 1 <= self.month <= 12:
            raise CalendarError(f"Closure month must be 1..12; got {self.month}.")
        if not 0 <= self.weekday <= 6:
            raise CalendarError(f"Closure weekday must be 0..6; got {self.weekday}.")
        if self.n == 0 or not -1 <= self.n <= 5:
            raise CalendarError(f"Closure n must be 1..5 or -1; got {self.n}.")

    def matches(self, d: date) -> bool:
        if d.month != self.month or d.weekday() != self.weekday:
            return False
        if self.n == -1:
            last = _stdcal.monthrange(d.year, d.month)[1]
            return d.day + 7 > last
        return (d.day - 1) // 7 + 1 == self.n

    def __str__(self) -> str:
        which = "last" if self.n == -1 else f"#{self.n}"
        return f"{which} {DAY_NAMES[self.weekday]} of month {self.month}"


class ClosurePolicy:
    """
    Ordered list of forced-closure rules.

    Rules are checked in order and the first match decides the reason. A
    forced closure overrides both the weekly hours and any holiday flag.
    """

    def __init__(self, rules: Iterable[ClosureRule] = ()) -> None:
        self._rules: tuple[ClosureRule, ...] = tuple(rules)

    def evaluate(self, d: date) -> ForcedClosure:
        d = as_date(d)
        for rule in self._rules:
            if rule.matches(d):
                return ForcedClosure.for_reason(rule.reason)
        return ForcedClosure.OPEN

    def is_closed(self, d: date) -> bool:
        return self.evaluate(d).closed

    @property
    def rules(self) -> tuple[ClosureRule, ...]:
        return self._rules

    def __len__(self) -> int:
        return len(self._rules)

    def __iter__(self) -> Iterator[ClosureRule]:
        return iter(self._rules)

    def __repr__(self) -> str:
        return f"ClosurePolicy(rules={len(self._rules)})"


DEFAULT_CLOSURES = ClosurePolicy([FixedDateClosure(12, 25, "Christmas Day")])
