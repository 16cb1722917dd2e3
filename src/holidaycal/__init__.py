"""
holidaycal - U.S. holiday calendar library.

Computes U.S. holidays from their historical rules and manages per-year
holiday calendars:
- Sixteen holiday rules (fixed dates, Nth weekday of month, Easter computus)
- Weekend observation (Saturday -> Friday, Sunday -> Monday)
- Catalog lookups by name, by year and by date range
- Fiscal-year calendars built from federal, all, or custom holidays
- Business day calendars that skip observed holidays

Example:
    >>> from datetime import date
    >>> from holidaycal import AnnualHolidayCalendar
    >>> cal = AnnualHolidayCalendar(2026).with_federal_holidays()
    >>> [h.name for h in cal.holidays_by_date(date(2026, 7, 3))]
    ['Independence Day']
"""

__version__ = "0.1.0"

from holidaycal.errors import (
    HolidayCalendarError,
    InvalidArgumentError,
    DateOutOfRangeError,
)

# Date utilities
from holidaycal.core.dates import (
    Weekday,
    adjust_to_observed_weekday,
    count_weekdays,
    find_nth_weekday_of_month,
)

# Business day calendars
from holidaycal.core.calendar import (
    Calendar,
    business_days_between,
    count_weekdays_excluding_holidays,
    us_holiday_calendar,
)

# Holidays
from holidaycal.holidays import (
    Holiday,
    HolidayName,
    HolidayRule,
    HolidayCatalog,
    AnnualHolidayCalendar,
    CalendarSpec,
    build_calendar,
    load_calendar_spec,
)

__all__ = [
    # Version
    "__version__",
    # Errors
    "HolidayCalendarError",
    "InvalidArgumentError",
    "DateOutOfRangeError",
    # Dates
    "Weekday",
    "adjust_to_observed_weekday",
    "count_weekdays",
    "find_nth_weekday_of_month",
    # Business days
    "Calendar",
    "business_days_between",
    "count_weekdays_excluding_holidays",
    "us_holiday_calendar",
    # Holidays
    "Holiday",
    "HolidayName",
    "HolidayRule",
    "HolidayCatalog",
    "AnnualHolidayCalendar",
    "CalendarSpec",
    "build_calendar",
    "load_calendar_spec",
]
