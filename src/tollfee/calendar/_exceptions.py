class CalendarError(ValueError):
    """Raised when a toll-free calendar is configured with invalid data."""
