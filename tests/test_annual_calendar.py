"""Tests for AnnualHolidayCalendar."""

import pytest
from datetime import date, datetime

from holidaycal.errors import DateOutOfRangeError, InvalidArgumentError
from holidaycal.holidays.annual import AnnualHolidayCalendar
from holidaycal.holidays.base import Holiday, HolidayName
from holidaycal.holidays.catalog import federal_names


class TestConstruction:
    """Tests for constructors and the fiscal window."""

    def test_with_year(self, calendar_2026: AnnualHolidayCalendar) -> None:
        assert calendar_2026.start == date(2026, 1, 1)
        assert calendar_2026.end == date(2026, 12, 31)
        assert calendar_2026.fiscal_year == 2026
        assert calendar_2026.holidays == ()
        assert len(calendar_2026) == 0

    @pytest.mark.parametrize("year", [0, -1, 10000])
    def test_invalid_year_raises(self, year: int) -> None:
        with pytest.raises(InvalidArgumentError):
            AnnualHolidayCalendar(year)

    def test_bool_rejected(self) -> None:
        with pytest.raises(InvalidArgumentError):
            AnnualHolidayCalendar(True)

    def test_with_start_date(self, fiscal_2027_start: date) -> None:
        cal = AnnualHolidayCalendar(fiscal_2027_start)
        assert cal.start == fiscal_2027_start
        assert cal.end == date(2027, 6, 30)
        assert cal.fiscal_year == 2027
        assert cal.holidays == ()

    def test_with_datetime_start(self) -> None:
        cal = AnnualHolidayCalendar(datetime(2026, 10, 1, 9, 30))
        assert cal.start == date(2026, 10, 1)
        assert cal.end == date(2027, 9, 30)

    def test_leap_day_start(self) -> None:
        """A Feb 29 start ends the day before Feb 28 of the next year."""
        cal = AnnualHolidayCalendar(date(2024, 2, 29))
        assert cal.end == date(2025, 2, 27)

    def test_window_past_max_date_raises(self) -> None:
        with pytest.raises(InvalidArgumentError):
            AnnualHolidayCalendar(date(9999, 6, 1))

    def test_last_representable_year_from_start_date(self) -> None:
        """A Jan 1 start in year 9999 ends on the last representable date."""
        cal = AnnualHolidayCalendar(date(9999, 1, 1))
        assert cal.end == date(9999, 12, 31)
        assert cal.fiscal_year == 9999
        assert cal.end == AnnualHolidayCalendar(9999).end

    def test_jan_1_start_matches_calendar_year(self) -> None:
        assert AnnualHolidayCalendar(date(2026, 1, 1)).end == AnnualHolidayCalendar(2026).end


class TestBuilders:
    """Tests for with_* and remove_holiday."""

    def test_holidays_sorted(self) -> None:
        cal = (
            AnnualHolidayCalendar(2026)
            .with_holiday(date(2026, 12, 25), "B")
            .with_holiday(date(2026, 1, 1), "A", True)
        )
        holidays = cal.holidays
        assert len(holidays) == 2
        assert holidays[0].name == "A"
        assert holidays[-1].name == "B"

    def test_chaining_returns_same_instance(self, calendar_2026: AnnualHolidayCalendar) -> None:
        chained = (
            calendar_2026
            .with_federal_holidays()
            .with_all_holidays()
            .with_holiday(date(2026, 12, 26), "Custom")
            .remove_holiday("Custom")
        )
        assert chained is calendar_2026

    def test_with_federal_holidays(self, federal_2026: AnnualHolidayCalendar) -> None:
        names = [h.name for h in federal_2026.holidays]
        assert len(names) == 10
        assert HolidayName.INDEPENDENCE_DAY.value in names
        assert HolidayName.VALENTINES_DAY.value not in names
        assert sorted(names) == sorted(federal_names())

    def test_with_all_holidays(self, calendar_2026: AnnualHolidayCalendar) -> None:
        cal = calendar_2026.with_all_holidays()
        names = {h.name for h in cal.holidays}
        assert HolidayName.VALENTINES_DAY.value in names
        assert HolidayName.EASTER.value in names
        assert len(cal) == 15

    def test_federal_holidays_for_fiscal_year(self, fiscal_2027_start: date) -> None:
        """A July-June fiscal year picks holidays from both calendar years."""
        cal = AnnualHolidayCalendar(fiscal_2027_start).with_federal_holidays()
        assert len(cal) == 10
        assert cal.holiday_by_name("Independence Day").date == date(2026, 7, 4)
        assert cal.holiday_by_name("Memorial Day").date == date(2027, 5, 31)

    def test_federal_holidays_observed_outside_window(self) -> None:
        """New Year's Day 2022 is observed in 2021, so FY2022 does not get it."""
        cal = AnnualHolidayCalendar(2022).with_federal_holidays()
        assert len(cal) == 9
        assert cal.holiday_by_name("New Year's Day") is None

    def test_with_holiday(self, calendar_2026: AnnualHolidayCalendar) -> None:
        calendar_2026.with_holiday(date(2026, 12, 26), "Boxing Day", True)
        holiday = calendar_2026.holiday_by_name("Boxing Day")
        assert holiday is not None
        assert holiday.name == "Boxing Day"
        assert holiday.observes_weekend_adjustment
        assert holiday.observed_date == date(2026, 12, 25)
        assert len(calendar_2026.holidays) == 1

    def test_with_holiday_from_holiday(self, calendar_2026: AnnualHolidayCalendar) -> None:
        existing = Holiday(name="Test", date=date(2026, 1, 1), observes_weekend_adjustment=True)
        calendar_2026.with_holiday(existing)
        assert calendar_2026.holiday_by_name("Test") == existing

    @pytest.mark.parametrize("kwargs", [
        {"name": "Other"},
        {"observes_weekend_adjustment": True},
    ])
    def test_with_holiday_rejects_overrides_for_holiday(
        self, calendar_2026: AnnualHolidayCalendar, kwargs
    ) -> None:
        existing = Holiday(name="Test", date=date(2026, 1, 1))
        with pytest.raises(TypeError):
            calendar_2026.with_holiday(existing, **kwargs)
        assert len(calendar_2026) == 0

    def test_duplicate_is_noop(self, calendar_2026: AnnualHolidayCalendar) -> None:
        calendar_2026.with_holiday(date(2026, 3, 1), "X").with_holiday(date(2026, 3, 1), "X")
        assert len(calendar_2026) == 1
        # Different flag is a different holiday
        calendar_2026.with_holiday(date(2026, 3, 1), "X", True)
        assert len(calendar_2026) == 2

    @pytest.mark.parametrize("d", [date(2025, 12, 31), date(2027, 1, 1)])
    def test_date_outside_window_raises(self, calendar_2026: AnnualHolidayCalendar, d: date) -> None:
        with pytest.raises(DateOutOfRangeError, match="between 2026-01-01 and 2026-12-31"):
            calendar_2026.with_holiday(d, "X")
        assert len(calendar_2026) == 0

    def test_out_of_range_is_invalid_argument(self, calendar_2026: AnnualHolidayCalendar) -> None:
        with pytest.raises(InvalidArgumentError):
            calendar_2026.with_holiday(date(2025, 12, 31), "X")
        with pytest.raises(ValueError):
            calendar_2026.with_holiday(date(2025, 12, 31), "X")

    @pytest.mark.parametrize("name", ["", "  ", None])
    def test_blank_name_raises(self, calendar_2026: AnnualHolidayCalendar, name) -> None:
        with pytest.raises(InvalidArgumentError, match="must not be empty"):
            calendar_2026.with_holiday(date(2026, 3, 1), name)
        assert len(calendar_2026) == 0

    def test_remove_by_holiday(self) -> None:
        holiday = Holiday(name="Test", date=date(2026, 1, 1), observes_weekend_adjustment=True)
        cal = AnnualHolidayCalendar(2026).with_holiday(holiday).remove_holiday(holiday)
        assert cal.holidays == ()

    def test_remove_by_date_removes_all_matches(self) -> None:
        cal = (
            AnnualHolidayCalendar(2026)
            .with_holiday(date(2026, 7, 4), "A")
            .with_holiday(date(2026, 7, 4), "B", True)
        )
        cal.remove_holiday(date(2026, 7, 4))
        assert cal.holidays == ()

    def test_remove_by_observed_date(self, federal_2026: AnnualHolidayCalendar) -> None:
        federal_2026.remove_holiday(date(2026, 7, 3))
        assert federal_2026.holiday_by_name("Independence Day") is None
        assert len(federal_2026) == 9

    def test_remove_by_name_ignores_case(self) -> None:
        cal = (
            AnnualHolidayCalendar(2026)
            .with_holiday(date(2026, 3, 1), "Retreat")
            .with_holiday(date(2026, 9, 1), "RETREAT")
            .with_holiday(date(2026, 10, 1), "Picnic")
        )
        cal.remove_holiday("retreat")
        assert [h.name for h in cal.holidays] == ["Picnic"]

    def test_remove_missing_is_noop(self, federal_2026: AnnualHolidayCalendar) -> None:
        federal_2026.remove_holiday("Festivus")
        federal_2026.remove_holiday(date(2026, 3, 3))
        federal_2026.remove_holiday(Holiday(name="Festivus", date=date(2026, 12, 23)))
        assert len(federal_2026) == 10

    def test_remove_unsupported_type_raises(self, calendar_2026: AnnualHolidayCalendar) -> None:
        with pytest.raises(TypeError):
            calendar_2026.remove_holiday(2026)


class TestQueries:
    """Tests for lookups by name and date."""

    def test_holiday_by_name_ignores_case(self) -> None:
        cal = AnnualHolidayCalendar(2026).with_holiday(date(2026, 2, 14), "Valentine's")
        result = cal.holiday_by_name("valentine's")
        assert result is not None
        assert result.name == "Valentine's"
        assert cal.holiday_by_name("NonExistent") is None

    def test_holiday_by_name_first_by_date(self) -> None:
        cal = (
            AnnualHolidayCalendar(2026)
            .with_holiday(date(2026, 9, 1), "Retreat")
            .with_holiday(date(2026, 3, 1), "Retreat")
        )
        assert cal.holiday_by_name("retreat").date == date(2026, 3, 1)
        assert [h.date for h in cal.holidays_by_name("RETREAT")] == [
            date(2026, 3, 1),
            date(2026, 9, 1),
        ]

    def test_holiday_by_name_blank_raises(self, calendar_2026: AnnualHolidayCalendar) -> None:
        with pytest.raises(InvalidArgumentError):
            calendar_2026.holiday_by_name(" ")

    def test_holidays_by_date_nominal_or_observed(self) -> None:
        cal = AnnualHolidayCalendar(2026).with_holiday(date(2026, 7, 4), "Independence", True)

        on_nominal = cal.holidays_by_date(date(2026, 7, 4))
        assert len(on_nominal) == 1
        assert on_nominal[0].name == "Independence"

        on_observed = cal.holidays_by_date(date(2026, 7, 3))
        assert len(on_observed) == 1
        assert on_observed[0].name == "Independence"

        assert cal.holidays_by_date(date(2026, 7, 5)) == []

    def test_holidays_by_date_sorted(self) -> None:
        cal = (
            AnnualHolidayCalendar(2026)
            .with_holiday(date(2026, 7, 4), "Nominal", True)
            .with_holiday(date(2026, 7, 3), "Friday")
        )
        assert [h.name for h in cal.holidays_by_date(date(2026, 7, 3))] == ["Friday", "Nominal"]

    def test_is_holiday(self) -> None:
        cal = AnnualHolidayCalendar(2026).with_holiday(date(2026, 7, 4), "Independence", True)
        assert cal.is_holiday(date(2026, 7, 4))   # nominal
        assert cal.is_holiday(date(2026, 7, 3))   # observed
        assert not cal.is_holiday(date(2026, 7, 5))

    def test_contains_and_iter(self, federal_2026: AnnualHolidayCalendar) -> None:
        assert date(2026, 11, 26) in federal_2026
        assert date(2026, 11, 27) not in federal_2026
        first = next(iter(federal_2026))
        assert first in federal_2026
        assert first.name == "New Year's Day"
        assert "New Year's Day" not in federal_2026

    def test_to_dict(self, federal_2026: AnnualHolidayCalendar) -> None:
        data = federal_2026.to_dict()
        assert data["start"] == "2026-01-01"
        assert data["end"] == "2026-12-31"
        assert data["fiscal_year"] == 2026
        assert len(data["holidays"]) == 10
        assert data["holidays"][4]["observed_date"] == "2026-07-03"

    def test_business_calendar(self, federal_2026: AnnualHolidayCalendar) -> None:
        bdays = federal_2026.business_calendar()
        assert bdays.name == "FY2026"
        assert not bdays.is_business_day(date(2026, 7, 3))
        assert bdays.is_business_day(date(2026, 7, 6))
        assert not bdays.is_business_day(date(2026, 11, 26))
