from datetime import date
from typing import Optional

from tollfee.calendar import TollFreeCalendar

from .vehicle import Vehicle


class ExemptionPolicy:

    def __init__(self, calendar: Optional[TollFreeCalendar] = None) -> None:
        self._calendar = calendar if calendar is not None else TollFreeCalendar()

    def is_exempt_vehicle(self, vehicle: Vehicle) -> bool:
        return vehicle.is_exempt

    def is_toll_free_date(self, day: date) -> bool:
        return bool(self._calendar.is_toll_free(day))

    def is_exempt(self, vehicle: Vehicle, day: date) -> bool:
        return self.is_exempt_vehicle(vehicle) or self.is_toll_free_date(day)

    @property
    def calendar(self) -> TollFreeCalendar:
        return self._calendar

    def __repr__(self) -> str:
        return f"ExemptionPolicy(calendar={self._calendar!r})"
