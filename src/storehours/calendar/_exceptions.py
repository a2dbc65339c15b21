class CalendarError(ValueError):
    """Raised when a static calendar table is malformed."""
