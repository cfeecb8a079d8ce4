from dataclasses import dataclass, field
from datetime import date, timedelta
from typing import Iterable

from tollfee.calendar import TollFreeCalendar
from tollfee.exemption import ExemptionPolicy
from tollfee.tariff import TariffTable


@dataclass(frozen=True)
class TollConfig:
    """
    One tariff regime: tariff table, exemption policy, daily cap and the
    length of the rolling charge window.  Built once, shared read-only.
    """

    tariff: TariffTable = field(default_factory=TariffTable)
    policy: ExemptionPolicy = field(default_factory=ExemptionPolicy)
    daily_cap: int = 60
    window: timedelta = timedelta(minutes=60)

    def __post_init__(self) -> None:
        if isinstance(self.daily_cap, bool) or not isinstance(self.daily_cap, int):
            raise ValueError(f"daily_cap must be an integer; got {self.daily_cap!r}.")
        if self.daily_cap < 0:
            raise ValueError(f"daily_cap must be non-negative; got {self.daily_cap}.")
        if self.window <= timedelta(0):
            raise ValueError(f"window must be positive; got {self.window}.")

    @classmethod
    def default(cls, holidays: Iterable[date] = ()) -> "TollConfig":
        return cls(policy=ExemptionPolicy(TollFreeCalendar(holidays)))
