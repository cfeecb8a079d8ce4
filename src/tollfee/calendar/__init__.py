# src/tollfee/calendar/__init__.py
"""
tollfee.calendar
~~~~~~~~~~~~~~~~

Toll-free day calendar.  Saturdays and Sundays are always toll-free; on top
of that a TollFreeCalendar holds an injected set of holiday dates and,
optionally, whole toll-free months.

Basic usage::

    from datetime import date
    from tollfee.calendar import TollFreeCalendar, fixed_date_holidays

    cal = TollFreeCalendar(fixed_date_holidays([2025]))
    cal.add_holiday(date(2025, 4, 18))              # Good Friday
    cal.is_toll_free(date(2025, 4, 18))             # → True

NumPy ``datetime64`` arrays are accepted too::

    import numpy as np
    days = np.array(["2025-04-04", "2025-04-05"], dtype="datetime64[D]")
    cal.is_toll_free(days)                          # → array([False,  True])

Public API
----------
TollFreeCalendar            The main class.
CalendarError               Raised for invalid calendar data.
fixed_date_holidays         Fixed-date Swedish holidays for given years.
SWEDISH_HOLIDAYS_2025_2026  Precomputed holidays, moveable feasts included.
"""

from __future__ import annotations

from tollfee.calendar._exceptions import CalendarError
from tollfee.calendar.calendar import TollFreeCalendar
from tollfee.calendar.holidays import SWEDISH_HOLIDAYS_2025_2026, fixed_date_holidays

__all__ = [
    "CalendarError",
    "SWEDISH_HOLIDAYS_2025_2026",
    "TollFreeCalendar",
    "fixed_date_holidays",
]
