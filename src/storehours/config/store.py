from __future__ import annotations

import datetime as dt
import functools
import json
import logging
import re
import tomllib
from dataclasses import dataclass
from pathlib import Path
from typing import Any, Optional
from urllib.parse import quote

from pydantic import BaseModel, ConfigDict, Field, ValidationError, field_validator, model_validator

from storehours.calendar import (
    CalendarError,
    ClosurePolicy,
    ClosureRule,
    DaySchedule,
    FixedDateClosure,
    Holiday,
    HolidayRegistry,
    HolidayScope,
    NthWeekdayClosure,
    StoreCalendar,
    WeeklySchedule,
)
from storehours.clock import DAY_NAMES, TimeOfDay
from storehours.config.config import settings
from storehours.config.defaults import DEFAULT_STORE_DATA

logger = logging.getLogger(__name__)

_REGION_TAG = re.compile(r"^[A-Z]{2,4}$")


class StoreConfigError(Exception):
    """Raised when a store file cannot be read or fails validation."""


# ── file schema ──────────────────────────────────────────────────────────────

class StoreInfo(BaseModel):
    """Static contact details, passed through to presentation as-is."""

    model_config = ConfigDict(frozen=True)

    name: str
    address: str = ""
    phone_display: str = ""
    phone_tel: str = ""
    maps_query: str = ""
    reviews_url: Optional[str] = None
    last_updated: Optional[str] = None

    @property
    def maps_link(self) -> str:
        return f"https://www.google.com/maps/search/?api=1&query={quote(self.maps_query, safe='')}"

    @property
    def maps_embed_link(self) -> str:
        return f"https://www.google.com/maps?q={quote(self.maps_query, safe='')}&output=embed"


class HoursEntry(BaseModel):
    day: str
    open: str
    close: str

    @field_validator("day")
    @classmethod
    def check_day(cls, v: str) -> str:
        if v not in DAY_NAMES:
            raise ValueError(f"unknown weekday {v!r}")
        return v

    @field_validator("open", "close")
    @classmethod
    def check_hhmm(cls, v: str) -> str:
        TimeOfDay.parse(v)
        return v

    @model_validator(mode="after")
    def check_order(self) -> HoursEntry:
        if TimeOfDay.parse(self.open).minutes >= TimeOfDay.parse(self.close).minutes:
            raise ValueError(f"{self.day}: open {self.open} must be before close {self.close}")
        return self

    def to_schedule(self) -> DaySchedule:
        return DaySchedule(self.day, TimeOfDay.parse(self.open), TimeOfDay.parse(self.close))


class HolidayEntry(BaseModel):
    date: dt.date
    name: str
    # "National", "Regional", or a region tag such as "QLD".
    scope: str = HolidayScope.NATIONAL.value

    @field_validator("scope")
    @classmethod
    def check_scope(cls, v: str) -> str:
        if v in (HolidayScope.NATIONAL.value, HolidayScope.REGIONAL.value) or _REGION_TAG.match(v):
            return v
        raise ValueError(
            f"holiday scope must be 'National', 'Regional' or a region tag like 'QLD'; got {v!r}"
        )

    def to_holiday(self) -> Holiday:
        if self.scope == HolidayScope.NATIONAL.value:
            return Holiday(self.date, self.name, HolidayScope.NATIONAL)
        if self.scope == HolidayScope.REGIONAL.value:
            return Holiday(self.date, self.name, HolidayScope.REGIONAL)
        return Holiday(self.date, self.name, HolidayScope.REGIONAL, region=self.scope)


class ClosureEntry(BaseModel):
    month: int = Field(ge=1, le=12)
    reason: str
    day: Optional[int] = Field(default=None, ge=1, le=31)
    weekday: Optional[str] = None
    n: Optional[int] = None

    @model_validator(mode="after")
    def check_pattern(self) -> ClosureEntry:
        fixed = self.day is not None
        nth = self.weekday is not None or self.n is not None
        if fixed == nth:
            raise ValueError("closure needs either 'day' or both 'weekday' and 'n'")
        if nth and (self.weekday not in DAY_NAMES or self.n is None):
            raise ValueError(f"closure needs a weekday name and 'n'; got {self.weekday!r}, {self.n!r}")
        return self

    def to_rule(self) -> ClosureRule:
        if self.day is not None:
            return FixedDateClosure(self.month, self.day, self.reason)
        return NthWeekdayClosure(self.month, DAY_NAMES.index(self.weekday), self.n, self.reason)


class StoreFile(BaseModel):
    store: StoreInfo
    hours: list[HoursEntry]
    holidays: list[HolidayEntry] = Field(default_factory=list)
    closures: list[ClosureEntry] = Field(default_factory=list)

    @field_validator("hours")
    @classmethod
    def check_full_week(cls, v: list[HoursEntry]) -> list[HoursEntry]:
        days = [e.day for e in v]
        missing = [d for d in DAY_NAMES if d not in days]
        if missing or len(days) != len(DAY_NAMES):
            raise ValueError(
                f"hours must list each weekday exactly once; missing={missing}, got={days}"
            )
        return v


# ── runtime store ────────────────────────────────────────────────────────────

@dataclass(frozen=True)
class Store:
    info: StoreInfo
    calendar: StoreCalendar


def build_store(data: dict[str, Any]) -> Store:
    try:
        parsed = StoreFile.model_validate(data)
        calendar = StoreCalendar(
            schedule=WeeklySchedule(e.to_schedule() for e in parsed.hours),
            holidays=HolidayRegistry(h.to_holiday() for h in parsed.holidays),
            closures=ClosurePolicy(c.to_rule() for c in parsed.closures),
        )
    except (ValidationError, CalendarError) as exc:
        raise StoreConfigError(f"Invalid store configuration: {exc}") from exc
    return Store(info=parsed.store, calendar=calendar)


def _read(path: Path) -> dict[str, Any]:
    suffix = path.suffix.lower()
    try:
        if suffix == ".toml":
            with path.open("rb") as fh:
                return tomllib.load(fh)
        if suffix == ".json":
            with path.open(encoding="utf-8") as fh:
                return json.load(fh)
    except OSError as exc:
        raise StoreConfigError(f"Cannot read store file {path}: {exc}") from exc
    except (tomllib.TOMLDecodeError, json.JSONDecodeError) as exc:
        raise StoreConfigError(f"Cannot parse store file {path}: {exc}") from exc
    raise StoreConfigError(f"Unsupported store file type {suffix!r}; use .toml or .json")


def load_store(path: str | Path | None = None) -> Store:
    """
    Load and validate a store.

    Resolution order: the explicit ``path``, then ``STOREHOURS_CONFIG``, then
    the built-in store. All validation happens here, so the status engine can
    trust the tables it is handed.
    """
    if path is None:
        path = settings.store_config
    if path is None:
        return build_store(DEFAULT_STORE_DATA)

    path = Path(path)
    logger.info("loading store configuration from %s", path)
    store = build_store(_read(path))
    logger.info(
        "loaded %s: %d holidays, %d closure rules",
        store.info.name,
        len(store.calendar.holidays),
        len(store.calendar.closures),
    )
    return store


@functools.lru_cache(maxsize=1)
def default_store() -> Store:
    return load_store()
