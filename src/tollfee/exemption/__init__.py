# src/tollfee/exemption/__init__.py
"""
tollfee.exemption
~~~~~~~~~~~~~~~~~

Who and when is not charged.  Vehicle categories are a closed set of tags;
exemption is a lookup against EXEMPT_VEHICLE_TYPES.  ExemptionPolicy adds
the toll-free calendar so both questions are answered in one place.

Basic usage::

    from datetime import date
    from tollfee.exemption import ExemptionPolicy, Vehicle

    policy = ExemptionPolicy()
    policy.is_exempt_vehicle(Vehicle.of("motorbike"))   # → True
    policy.is_toll_free_date(date(2025, 4, 5))          # → True (Saturday)
"""

from tollfee.exemption.policy import ExemptionPolicy
from tollfee.exemption.vehicle import EXEMPT_VEHICLE_TYPES, Vehicle, VehicleType

__all__ = ["EXEMPT_VEHICLE_TYPES", "ExemptionPolicy", "Vehicle", "VehicleType"]
