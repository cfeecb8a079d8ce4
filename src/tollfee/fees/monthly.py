from __future__ import annotations

import logging
from collections import defaultdict
from concurrent.futures import ThreadPoolExecutor
from dataclasses import dataclass
from datetime import date, datetime
from typing import Any, Iterable, Optional

from tollfee.exemption import Vehicle

from .daily import DailyFeeAggregator, as_local

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class DailyBreakdown:
    date: str
    passages: tuple[str, ...]
    fee: int

    def as_dict(self) -> dict[str, Any]:
        return {"date": self.date, "passages": list(self.passages), "fee": self.fee}


@dataclass(frozen=True)
class MonthlySummary:
    total_fee: int = 0
    daily_breakdown: tuple[DailyBreakdown, ...] = ()

    def as_dict(self) -> dict[str, Any]:
        return {
            "totalFee": self.total_fee,
            "dailyBreakdown": [entry.as_dict() for entry in self.daily_breakdown],
        }


class MonthlyFeeAggregator:
    """
    Groups passages by calendar day and charges each day separately.

    Days are independent, so with ``max_workers > 1`` they are charged on a
    thread pool; the summary is the same either way.  Days that cost nothing
    are left out of the breakdown.
    """

    def __init__(
        self,
        daily: Optional[DailyFeeAggregator] = None,
        max_workers: Optional[int] = None,
    ) -> None:
        if max_workers is not None and max_workers < 1:
            raise ValueError("max_workers must be at least 1.")
        self._daily = daily if daily is not None else DailyFeeAggregator()
        self._max_workers = max_workers

    def monthly_summary(self, vehicle: Vehicle, passages: Iterable[datetime]) -> MonthlySummary:
        stamps = [as_local(p) for p in passages]
        if not stamps or self._daily.config.policy.is_exempt_vehicle(vehicle):
            return MonthlySummary()

        groups = self._group_by_day(stamps)

        def charge(day: date) -> int:
            return self._daily.daily_fee(vehicle, groups[day])

        fees = self._map(charge, list(groups))

        breakdown = [
            DailyBreakdown(
                date=day.isoformat(),
                passages=tuple(p.strftime("%H:%M") for p in groups[day]),
                fee=fee,
            )
            for day, fee in zip(groups, fees)
            if fee > 0
        ]
        breakdown.sort(key=lambda entry: entry.date)
        total = sum(entry.fee for entry in breakdown)

        logger.debug(
            "Monthly fee: days=%d charged_days=%d total=%d",
            len(groups), len(breakdown), total,
        )
        return MonthlySummary(total_fee=total, daily_breakdown=tuple(breakdown))

    @staticmethod
    def _group_by_day(stamps: list[datetime]) -> dict[date, list[datetime]]:
        groups: dict[date, list[datetime]] = defaultdict(list)
        for stamp in stamps:
            groups[stamp.date()].append(stamp)
        return {day: sorted(group) for day, group in groups.items()}

    def _map(self, fn, days: list[date]) -> list[int]:
        if self._max_workers is None or self._max_workers == 1 or len(days) < 2:
            return [fn(day) for day in days]
        with ThreadPoolExecutor(max_workers=self._max_workers) as pool:
            return list(pool.map(fn, days))

    @property
    def daily(self) -> DailyFeeAggregator:
        return self._daily

    @property
    def max_workers(self) -> Optional[int]:
        return self._max_workers

    def __repr__(self) -> str:
        return f"MonthlyFeeAggregator(daily={self._daily!r}, max_workers={self._max_workers})"
