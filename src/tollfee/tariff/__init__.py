# src/tollfee/tariff/__init__.py
"""
tollfee.tariff
~~~~~~~~~~~~~~

Time-of-day tariff lookup.  A TariffTable compiles an ordered list of
(start, end, fee) intervals into a dense minute-of-day fee array; lookups
are a single index into that array.

Basic usage::

    from datetime import time
    from tollfee.tariff import TariffTable

    table = TariffTable()                  # reference regime
    table.fee_at(time(7, 30))              # → 18

NumPy ``datetime64`` arrays are accepted as well::

    import numpy as np
    stamps = np.array(["2025-04-01T06:10", "2025-04-01T07:30"], dtype="datetime64[m]")
    table.fee_at(stamps)                   # → array([ 8, 18])

Public API
----------
TariffInterval        One (start, end, fee) row; may wrap past midnight.
TariffTable           The compiled lookup table.
DEFAULT_INTERVALS     The reference tariff.
TariffError           Raised for malformed interval lists.
ConfigurationAnomaly  Warning issued when a minute matches no interval.
"""

from __future__ import annotations

from tollfee.tariff._exceptions import ConfigurationAnomaly, TariffError
from tollfee.tariff.tariff import DEFAULT_INTERVALS, TariffInterval, TariffTable

__all__ = [
    "ConfigurationAnomaly",
    "DEFAULT_INTERVALS",
    "TariffError",
    "TariffInterval",
    "TariffTable",
]
