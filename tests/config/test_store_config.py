"""
tests/config/test_store_config.py

Covers:
  - The built-in store
  - Loading TOML and JSON store files
  - Holiday scopes and closure rule variants
  - Validation failures surfacing as StoreConfigError
  - STOREHOURS_* environment settings
"""

import json
from datetime import date, datetime

import pytest
from pydantic import ValidationError

from storehours.calendar import HolidayScope, NthWeekdayClosure
from storehours.clock import DAY_NAMES
from storehours.config import (
    Settings,
    StoreConfigError,
    build_store,
    default_store,
    load_store,
)
from storehours.status import StatusEngine


TOML_STORE = """
[store]
name = "Test Deli"
address = "1 Main St"
maps_query = "Test Deli Main St"

{hours}

[[holidays]]
date = 2026-01-26
name = "Australia Day"
scope = "National"

[[holidays]]
date = 2026-08-12
name = "Ekka (Brisbane)"
scope = "QLD"

[[closures]]
month = 12
day = 25
reason = "Christmas Day"

[[closures]]
month = 11
weekday = "Thursday"
n = -1
reason = "Stocktake"
"""


def _hours_toml(days=DAY_NAMES):
    return "\n".join(
        f'[[hours]]\nday = "{d}"\nopen = "08:00"\nclose = "18:00"\n' for d in days
    )


def _data(**overrides):
    data = {
        "store": {"name": "Test Deli"},
        "hours": [{"day": d, "open": "08:00", "close": "18:00"} for d in DAY_NAMES],
    }
    data.update(overrides)
    return data


# ── Built-in store ────────────────────────────────────────────────────────────

class TestDefaultStore:

    def test_loads(self):
        store = load_store()
        assert store.info.name == "Hawthorne Corner Store"
        assert store.calendar.schedule.is_complete
        assert len(store.calendar.holidays) == 12

    def test_hours(self):
        week = load_store().calendar.schedule
        assert str(week.for_day("Monday").open) == "06:30"
        assert str(week.for_day("Sunday").open) == "07:30"
        assert str(week.for_day("Sunday").close) == "20:00"

    def test_regional_holiday(self):
        h = load_store().calendar.holidays.lookup(date(2026, 5, 4))
        assert h.scope is HolidayScope.REGIONAL
        assert h.region == "QLD"

    def test_christmas_closure(self):
        assert load_store().calendar.closures.evaluate(date(2027, 12, 25)).closed

    def test_maps_links(self):
        info = load_store().info
        assert info.maps_link == (
            "https://www.google.com/maps/search/?api=1"
            "&query=Hawthorne%20Corner%20Store%20Hawthorne%20QLD"
        )
        assert info.maps_embed_link.endswith("&output=embed")

    def test_default_store_is_cached(self):
        assert default_store() is default_store()


# ── Files ─────────────────────────────────────────────────────────────────────

class TestLoadFiles:

    def test_toml(self, tmp_path):
        path = tmp_path / "store.toml"
        path.write_text(TOML_STORE.format(hours=_hours_toml()), encoding="utf-8")
        store = load_store(path)

        assert store.info.name == "Test Deli"
        assert store.calendar.holidays.lookup(date(2026, 8, 12)).region == "QLD"
        rules = store.calendar.closures.rules
        assert isinstance(rules[1], NthWeekdayClosure)
        assert store.calendar.closures.evaluate(date(2026, 11, 26)).reason == "Stocktake"

    def test_toml_drives_engine(self, tmp_path):
        path = tmp_path / "store.toml"
        path.write_text(TOML_STORE.format(hours=_hours_toml()), encoding="utf-8")
        engine = StatusEngine(load_store(str(path)).calendar)
        s = engine.get_open_status(datetime(2026, 10, 19, 7, 0))
        assert s.label == "Closed • Opens 8:00 am"

    def test_json(self, tmp_path):
        path = tmp_path / "store.json"
        path.write_text(json.dumps(_data(holidays=[
            {"date": "2026-04-03", "name": "Good Friday", "scope": "Regional"},
        ])), encoding="utf-8")
        store = load_store(path)
        h = store.calendar.holidays.lookup(date(2026, 4, 3))
        assert h.scope is HolidayScope.REGIONAL
        assert h.region is None
        assert len(store.calendar.closures) == 0

    def test_settings_path(self, tmp_path, monkeypatch):
        from storehours.config import store as store_module

        path = tmp_path / "store.json"
        path.write_text(json.dumps(_data()), encoding="utf-8")
        monkeypatch.setattr(store_module.settings, "store_config", path)
        assert load_store().info.name == "Test Deli"

    def test_missing_file(self, tmp_path):
        with pytest.raises(StoreConfigError):
            load_store(tmp_path / "nope.toml")

    def test_unsupported_suffix(self, tmp_path):
        path = tmp_path / "store.yaml"
        path.write_text("store: {}", encoding="utf-8")
        with pytest.raises(StoreConfigError):
            load_store(path)

    def test_malformed_toml(self, tmp_path):
        path = tmp_path / "store.toml"
        path.write_text("[store\nname = ", encoding="utf-8")
        with pytest.raises(StoreConfigError):
            load_store(path)


# ── Validation ────────────────────────────────────────────────────────────────

class TestValidation:

    def test_six_days_rejected(self):
        data = _data()
        data["hours"] = data["hours"][:6]
        with pytest.raises(StoreConfigError):
            build_store(data)

    def test_duplicate_day_rejected(self):
        data = _data()
        data["hours"][6] = {"day": "Monday", "open": "08:00", "close": "18:00"}
        with pytest.raises(StoreConfigError):
            build_store(data)

    @pytest.mark.parametrize("open_, close", [("8am", "18:00"), ("08:00", "25:00"), ("18:00", "08:00")])
    def test_bad_times_rejected(self, open_, close):
        data = _data()
        data["hours"][0] = {"day": "Monday", "open": open_, "close": close}
        with pytest.raises(StoreConfigError) as info:
            build_store(data)
        assert isinstance(info.value.__cause__, ValidationError)

    def test_bad_holiday_date_rejected(self):
        with pytest.raises(StoreConfigError):
            build_store(_data(holidays=[{"date": "2026-02-30", "name": "Nope"}]))

    @pytest.mark.parametrize(
        "closure",
        [
            {"month": 12, "reason": "no pattern"},
            {"month": 12, "day": 25, "weekday": "Friday", "n": 1, "reason": "both"},
            {"month": 5, "weekday": "Funday", "n": 1, "reason": "bad weekday"},
            {"month": 13, "day": 1, "reason": "bad month"},
        ],
    )
    def test_bad_closure_rejected(self, closure):
        with pytest.raises(StoreConfigError):
            build_store(_data(closures=[closure]))

    @pytest.mark.parametrize("scope", ["Nationl", "national", "qld", "Queensland", ""])
    def test_unknown_holiday_scope_rejected(self, scope):
        holiday = {"date": "2026-05-04", "name": "Labour Day", "scope": scope}
        with pytest.raises(StoreConfigError):
            build_store(_data(holidays=[holiday]))

    @pytest.mark.parametrize("scope", ["National", "Regional", "QLD", "NSW", "ACT"])
    def test_known_holiday_scopes_accepted(self, scope):
        holiday = {"date": "2026-05-04", "name": "Labour Day", "scope": scope}
        store = build_store(_data(holidays=[holiday]))
        assert store.calendar.holidays.lookup(date(2026, 5, 4)).name == "Labour Day"

    def test_impossible_closure_date_rejected(self):
        with pytest.raises(StoreConfigError):
            build_store(_data(closures=[{"month": 2, "day": 31, "reason": "nope"}]))


# ── Settings ──────────────────────────────────────────────────────────────────

class TestSettings:

    def test_defaults(self, monkeypatch):
        for var in (
            "STOREHOURS_CONFIG",
            "STOREHOURS_CLOSING_SOON_MINUTES",
            "STOREHOURS_WINDOW_DAYS",
            "STOREHOURS_SEARCH_HORIZON_DAYS",
        ):
            monkeypatch.delenv(var, raising=False)
        s = Settings(_env_file=None)
        assert s.store_config is None
        assert s.closing_soon_minutes == 45
        assert s.window_days == 7
        assert s.search_horizon_days == 14

    def test_from_environment(self, monkeypatch):
        monkeypatch.setenv("STOREHOURS_CLOSING_SOON_MINUTES", "30")
        monkeypatch.setenv("STOREHOURS_WINDOW_DAYS", "14")
        s = Settings(_env_file=None)
        assert s.closing_soon_minutes == 30
        assert s.window_days == 14

    def test_window_out_of_range(self, monkeypatch):
        monkeypatch.setenv("STOREHOURS_WINDOW_DAYS", "21")
        with pytest.raises(ValidationError):
            Settings(_env_file=None)

    @pytest.mark.parametrize("value", ["0", "15", "60"])
    def test_search_horizon_out_of_range(self, monkeypatch, value):
        monkeypatch.setenv("STOREHOURS_SEARCH_HORIZON_DAYS", value)
        with pytest.raises(ValidationError):
            Settings(_env_file=None)
