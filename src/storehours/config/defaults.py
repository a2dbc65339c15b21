"""Built-in store data, used when no store file is configured."""

DEFAULT_STORE_DATA: dict = {
    "store": {
        "name": "Hawthorne Corner Store",
        "address": "331 Hawthorne Rd, Hawthorne, QLD",
        "phone_display": "(07) 3399 6611",
        "phone_tel": "+61733996611",
        "maps_query": "Hawthorne Corner Store Hawthorne QLD",
        "reviews_url": "https://www.google.com/search?q=Hawthorne+Corner+Store+Hawthorne+QLD&hl=en",
        "last_updated": "December 2025",
    },
    "hours": [
        {"day": "Monday", "open": "06:30", "close": "20:00"},
        {"day": "Tuesday", "open": "06:30", "close": "20:00"},
        {"day": "Wednesday", "open": "06:30", "close": "20:00"},
        {"day": "Thursday", "open": "06:30", "close": "20:00"},
        {"day": "Friday", "open": "06:30", "close": "20:00"},
        {"day": "Saturday", "open": "07:30", "close": "20:00"},
        {"day": "Sunday", "open": "07:30", "close": "20:00"},
    ],
    # QLD + national. Add future years as they are gazetted.
    "holidays": [
        {"date": "2025-12-25", "name": "Christmas Day", "scope": "National"},
        {"date": "2025-12-26", "name": "Boxing Day", "scope": "National"},
        {"date": "2026-01-01", "name": "New Year’s Day", "scope": "National"},
        {"date": "2026-01-26", "name": "Australia Day", "scope": "National"},
        {"date": "2026-04-03", "name": "Good Friday", "scope": "National"},
        {"date": "2026-04-04", "name": "Easter Saturday", "scope": "National"},
        {"date": "2026-04-06", "name": "Easter Monday", "scope": "National"},
        {"date": "2026-04-25", "name": "Anzac Day", "scope": "National"},
        {"date": "2026-12-25", "name": "Christmas Day", "scope": "National"},
        {"date": "2026-12-26", "name": "Boxing Day", "scope": "National"},
        {"date": "2026-05-04", "name": "Labour Day (QLD)", "scope": "QLD"},
        {"date": "2026-10-05", "name": "King’s Birthday (QLD)", "scope": "QLD"},
    ],
    "closures": [
        {"month": 12, "day": 25, "reason": "Christmas Day"},
    ],
}
