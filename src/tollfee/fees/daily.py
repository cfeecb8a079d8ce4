import logging
from datetime import date, datetime
from typing import Iterable, Sequence

import numpy as np

from tollfee.exemption import Vehicle

from ._exceptions import ValidationError
from .config import TollConfig

logger = logging.getLogger(__name__)


def as_local(passage: datetime) -> datetime:
    """Validate one passage and drop its tzinfo, keeping the wall-clock time."""
    if not isinstance(passage, datetime):
        raise ValidationError(f"Passage must be a datetime.datetime; got {passage!r}.")
    return passage.replace(tzinfo=None)


def shared_day(passages: Sequence[datetime]) -> date:
    days = sorted({p.date() for p in passages})
    if len(days) > 1:
        listed = ", ".join(d.isoformat() for d in days)
        raise ValidationError(f"All passages must be on the same day; got {listed}.")
    return days[0]


class DailyFeeAggregator:
    """
    Fee for one calendar day of passages.

    Passages are charged once per rolling window: the earliest uncharged
    passage anchors a window, every passage less than ``config.window``
    after the anchor falls in it, and the window costs the highest fee among
    its passages.  The first passage at or beyond the window end anchors the
    next one.  The day's total is capped at ``config.daily_cap``.
    """

    def __init__(self, config: TollConfig | None = None) -> None:
        self._config = config if config is not None else TollConfig()
        self._window = np.timedelta64(self._config.window)

    def daily_fee(self, vehicle: Vehicle, passages: Iterable[datetime]) -> int:
        stamps = [as_local(p) for p in passages]
        if not stamps:
            return 0

        day = shared_day(stamps)
        if self._config.policy.is_exempt(vehicle, day):
            return 0

        times = np.array(sorted(stamps), dtype="datetime64[us]")
        fees = np.asarray(self._config.tariff.fee_at(times))
        total, windows = self._collapse(times, fees)
        capped = min(total, self._config.daily_cap)

        logger.debug(
            "Daily fee %s: passages=%d windows=%d raw=%d capped=%d",
            day.isoformat(), len(stamps), windows, total, capped,
        )
        return capped

    def _collapse(self, times: np.ndarray, fees: np.ndarray) -> tuple[int, int]:
        """Sum of per-window maxima over chronologically sorted passages."""
        total = 0
        windows = 0
        cursor = 0
        n = len(times)
        while cursor < n:
            # First passage at or past anchor + window; strictly later than cursor.
            limit = times[cursor] + self._window
            end = cursor + int(np.searchsorted(times[cursor:], limit, side="left"))
            total += int(fees[cursor:end].max())
            windows += 1
            cursor = end
        return total, windows

    @property
    def config(self) -> TollConfig:
        return self._config

    def __repr__(self) -> str:
        return (
            f"DailyFeeAggregator(daily_cap={self._config.daily_cap}, "
            f"window={self._config.window})"
        )
