import logging
from datetime import date, datetime
from typing import Iterable, Optional, Union

import numpy as np

from ._exceptions import CalendarError

logger = logging.getLogger(__name__)

DateLike = Union[date, datetime, "np.datetime64", "np.ndarray"]

# Mon–Fri are business days; the weekend is toll-free regardless of holidays.
_WEEKMASK: str = "1111100"


def _as_date(value: date) -> date:
    if isinstance(value, datetime):
        return value.date()
    if isinstance(value, date):
        return value
    raise CalendarError(f"Expected a datetime.date; got {value!r}.")


class TollFreeCalendar:
    """
    Weekend rule plus an injected holiday set.

    The holiday set may be changed with add_holiday()/remove_holiday() while
    configuring; callers sharing one calendar between threads must not
    change it while a fee computation is running.
    """

    def __init__(
        self,
        holidays: Iterable[date] = (),
        toll_free_months: Iterable[int] = (),
    ) -> None:
        self._holidays: set[date] = {_as_date(d) for d in holidays}

        months = frozenset(toll_free_months)
        for m in months:
            if isinstance(m, bool) or not isinstance(m, int) or not 1 <= m <= 12:
                raise CalendarError(f"Toll-free month must be in 1..12; got {m!r}.")
        self._months: frozenset[int] = months

        self._np_holidays: Optional[np.ndarray] = None

    # ── holiday management ───────────────────────────────────────────────

    def add_holiday(self, day: date) -> None:
        day = _as_date(day)
        self._holidays.add(day)
        self._np_holidays = None
        logger.debug("Registered holiday %s", day.isoformat())

    def remove_holiday(self, day: date) -> None:
        day = _as_date(day)
        if day in self._holidays:
            self._holidays.discard(day)
            self._np_holidays = None
            logger.debug("Removed holiday %s", day.isoformat())

    def is_holiday(self, day: date) -> bool:
        return _as_date(day) in self._holidays

    # ── public query ─────────────────────────────────────────────────────

    def is_toll_free(self, value: DateLike) -> Union[bool, np.ndarray]:
        if isinstance(value, date):
            day = _as_date(value)
            return (
                day.weekday() >= 5
                or day in self._holidays
                or day.month in self._months
            )

        days = np.asarray(value)
        if not np.issubdtype(days.dtype, np.datetime64):
            raise TypeError(
                f"Expected date, datetime or datetime64 values; got dtype {days.dtype}."
            )
        days = days.astype("datetime64[D]")
        free = ~np.is_busday(days, weekmask=_WEEKMASK, holidays=self._holiday_array())
        if self._months:
            month = days.astype("datetime64[M]").astype(np.int64) % 12 + 1
            free |= np.isin(month, sorted(self._months))

        if free.ndim == 0:
            return bool(free)
        return free

    def _holiday_array(self) -> np.ndarray:
        if self._np_holidays is None:
            self._np_holidays = np.array(sorted(self._holidays), dtype="datetime64[D]")
        return self._np_holidays

    # ── properties / repr ────────────────────────────────────────────────

    @property
    def holidays(self) -> tuple[date, ...]:
        return tuple(sorted(self._holidays))

    @property
    def toll_free_months(self) -> frozenset[int]:
        return self._months

    def __repr__(self) -> str:
        return (
            f"TollFreeCalendar(holidays={len(self._holidays)}, "
            f"toll_free_months={sorted(self._months)})"
        )
