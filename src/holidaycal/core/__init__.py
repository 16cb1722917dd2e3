"""Core utilities: date arithmetic and business day calendars."""

from holidaycal.core.dates import (
    Weekday,
    add_weekdays,
    adjust_to_observed_weekday,
    count_days,
    count_weekdays,
    find_nth_weekday_of_month,
    inclusive_days,
    is_weekday,
    weekdays,
)
from holidaycal.core.calendar import (
    Calendar,
    business_days_between,
    count_weekdays_excluding_holidays,
    us_holiday_calendar,
    weekdays_excluding_holidays,
)

__all__ = [
    "Weekday",
    "add_weekdays",
    "adjust_to_observed_weekday",
    "count_days",
    "count_weekdays",
    "find_nth_weekday_of_month",
    "inclusive_days",
    "is_weekday",
    "weekdays",
    "Calendar",
    "business_days_between",
    "count_weekdays_excluding_holidays",
    "us_holiday_calendar",
    "weekdays_excluding_holidays",
]
