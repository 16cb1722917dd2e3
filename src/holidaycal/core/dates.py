"""
Date utilities for holiday and weekday arithmetic.

Inclusive day ranges, weekday counting, weekend observation rules and the
"Nth weekday of a month" finder used by the holiday rules.
"""

import calendar
from datetime import date, timedelta
from enum import IntEnum
from typing import Iterator, Optional

import numpy as np

from holidaycal.errors import InvalidArgumentError


class Weekday(IntEnum):
    """Days of the week, numbered like ``date.weekday()``."""

    MONDAY = 0
    TUESDAY = 1
    WEDNESDAY = 2
    THURSDAY = 3
    FRIDAY = 4
    SATURDAY = 5
    SUNDAY = 6


# Mon-Fri
WEEKMASK = "1111100"


def _ordered(d1: date, d2: date) -> tuple:
    return (d2, d1) if d2 < d1 else (d1, d2)


def inclusive_days(d1: date, d2: date) -> Iterator[date]:
    """Yield every date between the two dates, inclusive (order-independent)."""
    current, end = _ordered(d1, d2)
    while current <= end:
        yield current
        if current == date.max:
            break
        current += timedelta(days=1)


def count_days(d1: date, d2: date) -> int:
    """Count all days inclusive of both dates."""
    return abs((d2 - d1).days) + 1


def is_weekday(d: date) -> bool:
    """Check if a date falls Monday through Friday."""
    return d.weekday() < Weekday.SATURDAY


def weekdays(d1: date, d2: date) -> Iterator[date]:
    """Yield the weekdays (Mon-Fri) between the two dates, inclusive."""
    return (d for d in inclusive_days(d1, d2) if is_weekday(d))


def count_weekdays(start: date, end: date) -> int:
    """
    Count weekdays inclusive of both dates (order-independent).

    Examples:
        >>> from datetime import date
        >>> count_weekdays(date(2026, 1, 1), date(2026, 1, 31))
        22
    """
    start, end = _ordered(start, end)
    # busday_count excludes the end date
    stop = np.datetime64(end, "D") + np.timedelta64(1, "D")
    return int(np.busday_count(np.datetime64(start, "D"), stop, weekmask=WEEKMASK))


def adjust_to_observed_weekday(d: date) -> date:
    """
    Move a weekend date to the weekday it is observed on.

    Saturday moves back to Friday, Sunday moves forward to Monday and
    weekdays are returned unchanged.
    """
    weekday = d.weekday()
    if weekday == Weekday.SATURDAY:
        return d - timedelta(days=1)
    if weekday == Weekday.SUNDAY:
        return d + timedelta(days=1)
    return d


def add_weekdays(d: date, count: int) -> date:
    """
    Add (or subtract, when negative) weekdays to a date.

    Weekend days are skipped, so adding one weekday to a Friday gives the
    following Monday.
    """
    if count == 0:
        return d
    # A weekend start must count the first weekday it reaches as step one
    roll = "backward" if count > 0 else "forward"
    result = np.busday_offset(np.datetime64(d, "D"), count, roll=roll, weekmask=WEEKMASK)
    return result.item()


def find_nth_weekday_of_month(
    year: int,
    month: int,
    weekday: int,
    position: int
) -> Optional[date]:
    """
    Find the Nth occurrence of a weekday in a month.

    Args:
        year: Calendar year (>= 1)
        month: Month number (1-12)
        weekday: Day of week (``Weekday`` or 0=Monday ... 6=Sunday)
        position: 1-based occurrence (1-5)

    Returns:
        The matching date, or None if the month has fewer occurrences

    Raises:
        InvalidArgumentError: If any argument is out of bounds

    Examples:
        >>> find_nth_weekday_of_month(2026, 11, Weekday.THURSDAY, 4)
        datetime.date(2026, 11, 26)
    """
    if year < 1:
        raise InvalidArgumentError(f"year must be >= 1, got {year}")
    if not 1 <= month <= 12:
        raise InvalidArgumentError(f"month must be in [1, 12], got {month}")
    if not 1 <= position <= 5:
        raise InvalidArgumentError(f"position must be in [1, 5], got {position}")
    try:
        weekday = Weekday(weekday)
    except ValueError:
        raise InvalidArgumentError(f"Unknown weekday: {weekday}") from None

    last_day = calendar.monthrange(year, month)[1]
    matches = [
        date(year, month, day)
        for day in range(1, last_day + 1)
        if date(year, month, day).weekday() == weekday
    ]

    if position > len(matches):
        return None
    return matches[position - 1]
