from dataclasses import dataclass
from enum import Enum


class VehicleType(str, Enum):
    CAR = "car"
    MOTORBIKE = "motorbike"
    TRACTOR = "tractor"
    EMERGENCY = "emergency"
    DIPLOMAT = "diplomat"
    FOREIGN = "foreign"
    MILITARY = "military"
    BUS = "bus"


EXEMPT_VEHICLE_TYPES: frozenset[VehicleType] = frozenset({
    VehicleType.MOTORBIKE,
    VehicleType.EMERGENCY,
    VehicleType.DIPLOMAT,
    VehicleType.FOREIGN,
    VehicleType.MILITARY,
    VehicleType.TRACTOR,
    VehicleType.BUS,
})


@dataclass(frozen=True)
class Vehicle:
    type: VehicleType = VehicleType.CAR

    @classmethod
    def of(cls, tag: str) -> "Vehicle":
        try:
            return cls(VehicleType(tag.strip().lower()))
        except ValueError:
            raise ValueError(f"Unknown vehicle type {tag!r}.") from None

    @property
    def is_exempt(self) -> bool:
        return self.type in EXEMPT_VEHICLE_TYPES
