"""
tests/calendar/test_calendar.py

Covers:
  - Weekend rule (absolute, not overridable)
  - Holiday set: construction, add, remove, query
  - Toll-free months
  - NumPy datetime64 inputs and agreement with the scalar path
  - Invalid configuration
"""

from datetime import date, datetime

import numpy as np
import pytest

from tollfee.calendar import CalendarError, TollFreeCalendar


# ── Fixtures ──────────────────────────────────────────────────────────────────

@pytest.fixture
def plain():
    """Weekend rule only."""
    return TollFreeCalendar()


@pytest.fixture
def with_holidays():
    """New Year's Day, Good Friday and Christmas Eve 2025."""
    return TollFreeCalendar([date(2025, 1, 1), date(2025, 4, 18), date(2025, 12, 24)])


# ── Weekend rule ──────────────────────────────────────────────────────────────

class TestWeekendRule:

    def test_saturday_is_toll_free(self, plain):
        assert plain.is_toll_free(date(2025, 4, 5))

    def test_sunday_is_toll_free(self, plain):
        assert plain.is_toll_free(date(2025, 4, 6))

    @pytest.mark.parametrize("day", [7, 8, 9, 10, 11])
    def test_weekdays_are_charged(self, plain, day):
        assert not plain.is_toll_free(date(2025, 4, day))

    def test_datetime_input_uses_its_date(self, plain):
        assert plain.is_toll_free(datetime(2025, 4, 5, 7, 30))
        assert not plain.is_toll_free(datetime(2025, 4, 7, 7, 30))

    def test_removing_weekend_day_keeps_it_toll_free(self, plain):
        plain.remove_holiday(date(2025, 4, 5))
        assert plain.is_toll_free(date(2025, 4, 5))

    def test_returns_python_bool(self, plain):
        assert plain.is_toll_free(date(2025, 4, 5)) is True


# ── Holidays ──────────────────────────────────────────────────────────────────

class TestHolidays:

    def test_holidays_at_construction(self, with_holidays):
        assert with_holidays.is_toll_free(date(2025, 1, 1))
        assert with_holidays.is_toll_free(date(2025, 4, 18))
        assert not with_holidays.is_toll_free(date(2025, 4, 17))

    def test_add_holiday(self, plain):
        plain.add_holiday(date(2025, 6, 6))
        assert plain.is_toll_free(date(2025, 6, 6))
        assert plain.is_holiday(date(2025, 6, 6))

    def test_add_holiday_from_datetime(self, plain):
        plain.add_holiday(datetime(2025, 6, 6, 12, 0))
        assert plain.holidays == (date(2025, 6, 6),)

    def test_add_holiday_twice_is_idempotent(self, plain):
        plain.add_holiday(date(2025, 6, 6))
        plain.add_holiday(date(2025, 6, 6))
        assert len(plain.holidays) == 1

    def test_remove_holiday(self, with_holidays):
        with_holidays.remove_holiday(date(2025, 4, 18))
        assert not with_holidays.is_toll_free(date(2025, 4, 18))
        assert not with_holidays.is_holiday(date(2025, 4, 18))

    def test_remove_nonexistent_holiday_is_noop(self, with_holidays):
        before = with_holidays.holidays
        with_holidays.remove_holiday(date(2025, 3, 3))
        assert with_holidays.holidays == before

    def test_holidays_property_is_sorted(self):
        cal = TollFreeCalendar([date(2025, 12, 24), date(2025, 1, 1), date(2025, 4, 18)])
        assert cal.holidays == (date(2025, 1, 1), date(2025, 4, 18), date(2025, 12, 24))

    def test_weekend_holiday_is_still_toll_free(self, plain):
        plain.add_holiday(date(2025, 4, 5))
        plain.remove_holiday(date(2025, 4, 5))
        assert plain.is_toll_free(date(2025, 4, 5))

    def test_invalid_holiday_raises(self):
        with pytest.raises(CalendarError):
            TollFreeCalendar(["2025-01-01"])

    def test_add_invalid_holiday_raises(self, plain):
        with pytest.raises(CalendarError):
            plain.add_holiday(20250101)


# ── Toll-free months ──────────────────────────────────────────────────────────

class TestTollFreeMonths:

    def test_whole_month_toll_free(self):
        cal = TollFreeCalendar(toll_free_months=[7])
        assert cal.is_toll_free(date(2025, 7, 1))
        assert cal.is_toll_free(date(2025, 7, 31))
        assert not cal.is_toll_free(date(2025, 8, 1))

    def test_months_property(self):
        cal = TollFreeCalendar(toll_free_months=[7, 7, 12])
        assert cal.toll_free_months == frozenset({7, 12})

    @pytest.mark.parametrize("month", [0, 13, -1, 7.0, True])
    def test_invalid_month_raises(self, month):
        with pytest.raises(CalendarError):
            TollFreeCalendar(toll_free_months=[month])

    def test_calendar_error_is_value_error(self):
        with pytest.raises(ValueError):
            TollFreeCalendar(toll_free_months=[13])


# ── NumPy inputs ──────────────────────────────────────────────────────────────

class TestNumPyInputs:

    def test_1d_array(self, plain):
        days = np.array(
            ["2025-04-04", "2025-04-05", "2025-04-06", "2025-04-07"],
            dtype="datetime64[D]",
        )
        np.testing.assert_array_equal(plain.is_toll_free(days), [False, True, True, False])

    def test_array_sees_added_holiday(self, plain):
        days = np.array(["2025-04-07", "2025-04-08"], dtype="datetime64[D]")
        np.testing.assert_array_equal(plain.is_toll_free(days), [False, False])
        plain.add_holiday(date(2025, 4, 7))
        np.testing.assert_array_equal(plain.is_toll_free(days), [True, False])
        plain.remove_holiday(date(2025, 4, 7))
        np.testing.assert_array_equal(plain.is_toll_free(days), [False, False])

    def test_minute_precision_array(self, with_holidays):
        stamps = np.array(
            ["2025-04-18T07:30", "2025-04-17T07:30"], dtype="datetime64[m]"
        )
        np.testing.assert_array_equal(with_holidays.is_toll_free(stamps), [True, False])

    def test_scalar_datetime64_returns_bool(self, plain):
        result = plain.is_toll_free(np.datetime64("2025-04-05"))
        assert result is True

    def test_array_with_toll_free_month(self):
        cal = TollFreeCalendar(toll_free_months=[7])
        days = np.array(["2025-06-30", "2025-07-01", "2025-08-01"], dtype="datetime64[D]")
        np.testing.assert_array_equal(cal.is_toll_free(days), [False, True, False])

    def test_array_consistency_with_scalar(self, with_holidays):
        """Array and scalar paths must agree on every day of the year."""
        with_holidays.add_holiday(date(2025, 6, 6))
        days = np.arange(np.datetime64("2025-01-01"), np.datetime64("2026-01-01"))
        scalar = [with_holidays.is_toll_free(d.item()) for d in days]
        np.testing.assert_array_equal(with_holidays.is_toll_free(days), scalar)

    def test_non_datetime_array_raises(self, plain):
        with pytest.raises(TypeError):
            plain.is_toll_free(np.array([1, 2]))

    def test_repr(self, with_holidays):
        assert "holidays=3" in repr(with_holidays)
