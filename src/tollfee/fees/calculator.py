from datetime import datetime
from typing import Iterable, Optional

from tollfee.exemption import Vehicle

from .config import TollConfig
from .daily import DailyFeeAggregator, as_local
from .monthly import MonthlyFeeAggregator, MonthlySummary


class TollCalculator:
    """Caller-facing entry points over one TollConfig."""

    def __init__(self, config: Optional[TollConfig] = None, max_workers: Optional[int] = None) -> None:
        self._config = config if config is not None else TollConfig()
        self._daily = DailyFeeAggregator(self._config)
        self._monthly = MonthlyFeeAggregator(self._daily, max_workers=max_workers)

    def calculate_fee(self, vehicle: Vehicle, instant: datetime) -> int:
        instant = as_local(instant)
        if self._config.policy.is_exempt(vehicle, instant.date()):
            return 0
        return int(self._config.tariff.fee_at(instant))

    def calculate_daily_fee(self, vehicle: Vehicle, instants: Iterable[datetime]) -> int:
        return self._daily.daily_fee(vehicle, instants)

    def calculate_monthly_fee(self, vehicle: Vehicle, instants: Iterable[datetime]) -> MonthlySummary:
        return self._monthly.monthly_summary(vehicle, instants)

    @property
    def config(self) -> TollConfig:
        return self._config

    def __repr__(self) -> str:
        return (
            f"TollCalculator(tariff={self._config.tariff!r}, "
            f"policy={self._config.policy!r}, "
            f"daily_cap={self._config.daily_cap})"
        )
