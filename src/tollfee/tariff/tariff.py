import logging
import warnings
from dataclasses import dataclass
from datetime import datetime, time
from typing import Sequence, Union

import numpy as np

from ._exceptions import ConfigurationAnomaly, TariffError

logger = logging.getLogger(__name__)

MINUTES_PER_DAY: int = 24 * 60
_UNCOVERED: int = -1

TimeLike = Union[time, datetime, "np.datetime64", "np.ndarray"]


def _minute_of_day(t: time) -> int:
    return t.hour * 60 + t.minute


def _format_minute(minute: int) -> str:
    return f"{minute // 60:02d}:{minute % 60:02d}"


@dataclass(frozen=True)
class TariffInterval:
    """
    Inclusive ``start``..``end`` time-of-day range charged at ``fee``.
    When ``start > end`` the interval wraps past midnight.
    """

    start: time
    end: time
    fee: int

    @property
    def wraps(self) -> bool:
        return self.start > self.end

    def contains(self, t: time) -> bool:
        m = _minute_of_day(t)
        lo, hi = _minute_of_day(self.start), _minute_of_day(self.end)
        if lo > hi:
            return m >= lo or m <= hi
        return lo <= m <= hi

    def _mask(self, minutes: np.ndarray) -> np.ndarray:
        lo, hi = _minute_of_day(self.start), _minute_of_day(self.end)
        if lo > hi:
            return (minutes >= lo) | (minutes <= hi)
        return (minutes >= lo) & (minutes <= hi)


DEFAULT_INTERVALS: tuple[TariffInterval, ...] = (
    TariffInterval(time(6, 0), time(6, 29), 8),
    TariffInterval(time(6, 30), time(6, 59), 13),
    TariffInterval(time(7, 0), time(7, 59), 18),
    TariffInterval(time(8, 0), time(8, 29), 13),
    TariffInterval(time(8, 30), time(14, 59), 8),
    TariffInterval(time(15, 0), time(15, 29), 13),
    TariffInterval(time(15, 30), time(16, 59), 18),
    TariffInterval(time(17, 0), time(17, 59), 13),
    TariffInterval(time(18, 0), time(18, 29), 8),
    TariffInterval(time(18, 30), time(5, 59), 0),
)


class TariffTable:
    """
    Compiled tariff: one fee per minute of the day.

    Intervals are applied in the given order and the first one containing a
    minute decides its fee.  Minutes no interval contains are kept as
    uncovered; looking one up issues a ConfigurationAnomaly and charges 0.
    """

    def __init__(self, intervals: Sequence[TariffInterval] = DEFAULT_INTERVALS) -> None:
        if not intervals:
            raise TariffError("Tariff must contain at least one interval.")

        self._intervals: tuple[TariffInterval, ...] = tuple(intervals)
        for iv in self._intervals:
            self._check_interval(iv)

        minutes = np.arange(MINUTES_PER_DAY, dtype=np.int64)
        fees = np.full(MINUTES_PER_DAY, _UNCOVERED, dtype=np.int64)
        hits = np.zeros(MINUTES_PER_DAY, dtype=np.int64)
        for iv in self._intervals:
            mask = iv._mask(minutes)
            fees[mask & (fees == _UNCOVERED)] = iv.fee
            hits += mask
        self._fees: np.ndarray = fees
        self._hits: np.ndarray = hits

    @staticmethod
    def _check_interval(iv: TariffInterval) -> None:
        if not isinstance(iv, TariffInterval):
            raise TariffError(f"Expected TariffInterval; got {type(iv).__name__}.")
        for bound in (iv.start, iv.end):
            if not isinstance(bound, time):
                raise TariffError(f"Interval bounds must be datetime.time; got {bound!r}.")
        if isinstance(iv.fee, bool) or not isinstance(iv.fee, (int, np.integer)):
            raise TariffError(f"Interval fee must be an integer; got {iv.fee!r}.")
        if iv.fee < 0:
            raise TariffError(f"Interval fee must be non-negative; got {iv.fee}.")

    # ── lookup ───────────────────────────────────────────────────────────

    def fee_at(self, value: TimeLike) -> Union[int, np.ndarray]:
        if isinstance(value, datetime):
            return self._fee_for_minute(_minute_of_day(value.time()))
        if isinstance(value, time):
            return self._fee_for_minute(_minute_of_day(value))

        stamps = np.asarray(value)
        if not np.issubdtype(stamps.dtype, np.datetime64):
            raise TypeError(
                f"Expected time, datetime or datetime64 values; got dtype {stamps.dtype}."
            )
        # Seconds and below are truncated by the cast to minute precision.
        stamps = stamps.astype("datetime64[m]")
        minutes = (stamps - stamps.astype("datetime64[D]")).astype(np.int64)
        fees = self._fees[minutes]

        missing = fees == _UNCOVERED
        if missing.any():
            for minute in np.unique(minutes[missing]):
                self._report_uncovered(int(minute))
            fees = np.where(missing, 0, fees)

        if fees.ndim == 0:
            return int(fees)
        return fees

    def _fee_for_minute(self, minute: int) -> int:
        fee = int(self._fees[minute])
        if fee == _UNCOVERED:
            self._report_uncovered(minute)
            return 0
        return fee

    @staticmethod
    def _report_uncovered(minute: int) -> None:
        msg = f"No tariff interval covers {_format_minute(minute)}; charging 0."
        logger.warning(msg)
        warnings.warn(msg, ConfigurationAnomaly, stacklevel=4)

    # ── introspection ────────────────────────────────────────────────────

    @property
    def intervals(self) -> tuple[TariffInterval, ...]:
        return self._intervals

    @property
    def uncovered_minutes(self) -> tuple[time, ...]:
        return tuple(
            time(int(m) // 60, int(m) % 60) for m in np.flatnonzero(self._hits == 0)
        )

    @property
    def overlapping_minutes(self) -> tuple[time, ...]:
        return tuple(
            time(int(m) // 60, int(m) % 60) for m in np.flatnonzero(self._hits > 1)
        )

    @property
    def is_complete(self) -> bool:
        """True when every minute of the day falls in exactly one interval."""
        return bool(np.all(self._hits == 1))

    @property
    def max_fee(self) -> int:
        return int(self._fees.max(initial=0))

    def __repr__(self) -> str:
        return (
            f"TariffTable(intervals={len(self._intervals)}, "
            f"max_fee={self.max_fee}, "
            f"complete={self.is_complete})"
        )
