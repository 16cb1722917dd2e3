"""U.S. holidays: rules, the rule catalog and annual calendars."""

from holidaycal.holidays.base import Holiday, HolidayName
from holidaycal.holidays.rules import HolidayRule, easter_sunday_date, inauguration_day_date
from holidaycal.holidays.catalog import FEDERAL_HOLIDAYS, HolidayCatalog
from holidaycal.holidays.annual import AnnualHolidayCalendar
from holidaycal.holidays.schema import (
    CalendarSpec,
    CustomHoliday,
    HolidaySet,
    build_calendar,
    calendar_from_json,
    load_calendar_spec,
    print_calendar_summary,
    validate_calendar_spec_json,
)

__all__ = [
    "Holiday",
    "HolidayName",
    "HolidayRule",
    "easter_sunday_date",
    "inauguration_day_date",
    "FEDERAL_HOLIDAYS",
    "HolidayCatalog",
    "AnnualHolidayCalendar",
    "CalendarSpec",
    "CustomHoliday",
    "HolidaySet",
    "build_calendar",
    "calendar_from_json",
    "load_calendar_spec",
    "print_calendar_summary",
    "validate_calendar_spec_json",
]
