"""Holiday date sets to feed a TollFreeCalendar.

Only data lives here.  Moveable feasts (Easter, Midsummer, Ascension) are
not computed; they appear only in the precomputed tuple below.
"""

from __future__ import annotations

from datetime import date
from typing import Iterable

# (month, day) pairs that fall on the same date every year.
FIXED_DATES: tuple[tuple[int, int], ...] = (
    (1, 1),    # New Year's Day
    (1, 6),    # Epiphany
    (5, 1),    # Labour Day
    (6, 6),    # National Day
    (12, 24),  # Christmas Eve
    (12, 25),  # Christmas Day
    (12, 26),  # Boxing Day
    (12, 31),  # New Year's Eve
)


def fixed_date_holidays(years: Iterable[int]) -> list[date]:
    return [date(year, month, day) for year in years for month, day in FIXED_DATES]


SWEDISH_HOLIDAYS_2025_2026: tuple[date, ...] = (
    date(2025, 1, 1),
    date(2025, 1, 6),
    date(2025, 4, 18),
    date(2025, 4, 20),
    date(2025, 4, 21),
    date(2025, 5, 1),
    date(2025, 5, 29),
    date(2025, 6, 6),
    date(2025, 6, 8),
    date(2025, 6, 20),
    date(2025, 6, 21),
    date(2025, 11, 1),
    date(2025, 12, 24),
    date(2025, 12, 25),
    date(2025, 12, 26),
    date(2025, 12, 31),
    date(2026, 1, 1),
    date(2026, 1, 6),
    date(2026, 4, 3),
    date(2026, 4, 4),
    date(2026, 4, 5),
    date(2026, 4, 6),
    date(2026, 5, 1),
    date(2026, 5, 14),
    date(2026, 5, 24),
    date(2026, 6, 6),
    date(2026, 6, 19),
    date(2026, 6, 20),
    date(2026, 10, 31),
    date(2026, 12, 24),
    date(2026, 12, 25),
    date(2026, 12, 26),
    date(2026, 12, 31),
)
