# src/tollfee/fees/__init__.py
"""
tollfee.fees
~~~~~~~~~~~~

Fee aggregation over passages.  A DailyFeeAggregator charges one calendar
day: passages are collapsed into rolling 60-minute windows anchored at the
first uncharged passage, each window costs its highest fee, and the day is
capped.  A MonthlyFeeAggregator splits arbitrary passages by day and sums
the daily fees into a MonthlySummary.

Basic usage::

    from datetime import datetime
    from tollfee.exemption import Vehicle
    from tollfee.fees import TollCalculator

    calc = TollCalculator()
    car = Vehicle.of("car")
    calc.calculate_fee(car, datetime(2025, 4, 1, 7, 30))           # → 18
    calc.calculate_daily_fee(car, [
        datetime(2025, 4, 1, 6, 55),
        datetime(2025, 4, 1, 7, 10),
    ])                                                              # → 18
    calc.calculate_monthly_fee(car, passages).as_dict()
    # → {"totalFee": ..., "dailyBreakdown": [{"date": ..., "passages": [...], "fee": ...}]}

Public API
----------
TollConfig            Tariff, exemption policy, daily cap and window length.
DailyFeeAggregator    Rolling-window fee for one day.
MonthlyFeeAggregator  Per-day breakdown and total for many days.
DailyBreakdown        One charged day in a summary.
MonthlySummary        Total fee plus the per-day breakdown.
TollCalculator        Single-passage, daily and monthly entry points.
ValidationError       Raised for passages not sharing one calendar day.
"""

from __future__ import annotations

from tollfee.fees._exceptions import ValidationError
from tollfee.fees.calculator import TollCalculator
from tollfee.fees.config import TollConfig
from tollfee.fees.daily import DailyFeeAggregator
from tollfee.fees.monthly import DailyBreakdown, MonthlyFeeAggregator, MonthlySummary

__all__ = [
    "DailyBreakdown",
    "DailyFeeAggregator",
    "MonthlyFeeAggregator",
    "MonthlySummary",
    "TollCalculator",
    "TollConfig",
    "ValidationError",
]
