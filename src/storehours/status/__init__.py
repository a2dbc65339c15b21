# src/storehours/status/__init__.py
"""
storehours.status
~~~~~~~~~~~~~~~~~

Live open/closed status and the upcoming-hours table for a store.

Basic usage::

    from datetime import datetime
    from storehours.config import load_store
    from storehours.status import StatusEngine, build_schedule_rows

    store  = load_store()
    engine = StatusEngine(store.calendar, closing_soon_minutes=45)
    engine.get_open_status(datetime(2026, 10, 18, 19, 30)).label
    # → "Open now • Closing soon (30 min) • Closes 8:00 pm"

    rows = build_schedule_rows(store.calendar, datetime.now(), window_days=7)

Public API
----------
StatusEngine         Computes StatusResult values from a StoreCalendar.
StatusResult         Open flag, closing-soon flag, label and closure details.
StatusState          OPEN / CLOSING_SOON / CLOSED_FORCED / CLOSED.
NextOpening          Result of the bounded next-open search.
get_open_status      One-shot status, defaulting to the configured store.
ScheduleRow          One day of the upcoming-hours table.
build_schedule_rows  The upcoming-hours table as a list.
iter_schedule_rows   The same rows, lazily.
"""

from __future__ import annotations

from storehours.status.projector import (
    MAX_WINDOW_DAYS,
    ScheduleRow,
    build_schedule_rows,
    iter_schedule_rows,
)
from storehours.status.status import (
    DEFAULT_CLOSING_SOON_MINUTES,
    DEFAULT_HORIZON_DAYS,
    NextOpening,
    StatusEngine,
    StatusResult,
    StatusState,
    get_open_status,
)

__all__ = [
    "DEFAULT_CLOSING_SOON_MINUTES",
    "DEFAULT_HORIZON_DAYS",
    "MAX_WINDOW_DAYS",
    "NextOpening",
    "ScheduleRow",
    "StatusEngine",
    "StatusResult",
    "StatusState",
    "build_schedule_rows",
    "get_open_status",
    "iter_schedule_rows",
]
