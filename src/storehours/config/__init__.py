# src/storehours/config/__init__.py
"""
storehours.config
~~~~~~~~~~~~~~~~~

Environment settings and the store file loader.

Settings come from ``STOREHOURS_*`` environment variables or a ``.env``
file. The store itself (contact details, weekly hours, holidays, closure
rules) comes from a TOML or JSON file named by ``STOREHOURS_CONFIG``, falling
back to the built-in store.

Example store file (TOML)::

    [store]
    name = "Hawthorne Corner Store"
    maps_query = "Hawthorne Corner Store Hawthorne QLD"

    [[hours]]
    day = "Monday"
    open = "06:30"
    close = "20:00"
    # ... one entry per weekday

    [[holidays]]
    date = 2026-01-26
    name = "Australia Day"
    scope = "National"

    [[closures]]
    month = 12
    day = 25
    reason = "Christmas Day"

Public API
----------
Settings          pydantic-settings model for the STOREHOURS_* variables.
settings          The process-wide Settings instance.
Store             Loaded store: StoreInfo plus StoreCalendar.
StoreInfo         Contact details and map links.
StoreConfigError  Raised for unreadable or invalid store files.
load_store        Load and validate a store file.
build_store       Validate an already-parsed mapping.
default_store     Cached store for the current settings.
"""

from __future__ import annotations

from storehours.config.config import Settings, settings
from storehours.config.store import (
    Store,
    StoreConfigError,
    StoreInfo,
    build_store,
    default_store,
    load_store,
)

__all__ = [
    "Settings",
    "Store",
    "StoreConfigError",
    "StoreInfo",
    "build_store",
    "default_store",
    "load_store",
    "settings",
]
