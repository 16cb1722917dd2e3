"""
Business day calendars built from holiday dates.

A Calendar treats weekends and a set of holiday dates as non-business days.
Business day arithmetic runs on numpy's busday functions. Helpers build
calendars from the U.S. holiday catalog and count weekdays with holidays
excluded.
"""

from datetime import date
from typing import Iterable, List, Optional, Set

import numpy as np

from holidaycal.core.dates import WEEKMASK, count_weekdays, is_weekday, weekdays


def _day(d: date) -> np.datetime64:
    return np.datetime64(d, "D")


class Calendar:
    """
    Business day calendar closed on weekends and holiday dates.

    Holiday dates may be added after construction; the numpy
    busdaycalendar is rebuilt on the next query.
    """

    def __init__(
        self,
        name: str = "WE",  # Weekend-only calendar
        holidays: Optional[Iterable[date]] = None
    ) -> None:
        """
        Initialize calendar.

        Args:
            name: Calendar identifier (e.g., "WE", "US-FED", "FY2026")
            holidays: Dates on which business is closed
        """
        self.name = name
        self._holidays: Set[date] = set(holidays or ())
        self._busdaycal: Optional[np.busdaycalendar] = None

    def __repr__(self) -> str:
        return f"Calendar(name={self.name!r}, holidays={len(self._holidays)})"

    @property
    def holidays(self) -> List[date]:
        return sorted(self._holidays)

    @property
    def busdaycal(self) -> np.busdaycalendar:
        if self._busdaycal is None:
            self._busdaycal = np.busdaycalendar(
                weekmask=WEEKMASK,
                holidays=np.array(self.holidays, dtype="datetime64[D]"),
            )
        return self._busdaycal

    def is_holiday(self, d: date) -> bool:
        return d in self._holidays

    def is_business_day(self, d: date) -> bool:
        """Check if a date is a business day."""
        return is_weekday(d) and d not in self._holidays

    def add_business_days(self, d: date, days: int) -> date:
        """
        Move a date by a number of business days.

        A closed start date counts the first business day reached in the
        direction of travel as step one.
        """
        if days == 0:
            return d
        roll = "backward" if days > 0 else "forward"
        return np.busday_offset(_day(d), days, roll=roll, busdaycal=self.busdaycal).item()

    def next_business_day(self, d: date) -> date:
        """Get the next business day on or after the given date."""
        return np.busday_offset(_day(d), 0, roll="forward", busdaycal=self.busdaycal).item()

    def prev_business_day(self, d: date) -> date:
        """Get the previous business day on or before the given date."""
        return np.busday_offset(_day(d), 0, roll="backward", busdaycal=self.busdaycal).item()

    def add_holidays(self, holidays: Iterable[date]) -> None:
        """Add holidays to the calendar."""
        self._holidays.update(holidays)
        self._busdaycal = None


# Default weekend-only calendar
DEFAULT_CALENDAR = Calendar("WE")


def business_days_between(
    start: date,
    end: date,
    calendar: Optional[Calendar] = None
) -> int:
    """Count business days between two dates (exclusive of start, inclusive of end)."""
    cal = calendar or DEFAULT_CALENDAR

    if end <= start:
        return 0

    one_day = np.timedelta64(1, "D")
    return int(np.busday_count(_day(start) + one_day, _day(end) + one_day, busdaycal=cal.busdaycal))


def us_holiday_calendar(start: date, end: date, federal_only: bool = True) -> Calendar:
    """
    Build a calendar closed on U.S. holidays observed between two dates.

    Args:
        start: First date of the range (inclusive)
        end: Last date of the range (inclusive)
        federal_only: Restrict to the federal holiday subset

    Returns:
        Calendar whose holidays are the observed dates in range
    """
    from holidaycal.holidays import catalog

    observed = {
        h.observed_date
        for h in catalog.holidays_between(start, end)
        if not federal_only or catalog.is_federal(h.name)
    }
    return Calendar("US-FED" if federal_only else "US-ALL", observed)


def _weekday_holidays(start: date, end: date) -> Set[date]:
    from holidaycal.holidays import catalog

    return {d for d in catalog.dates_between(start, end) if is_weekday(d)}


def weekdays_excluding_holidays(start: date, end: date) -> List[date]:
    """
    Weekdays between two dates (inclusive) that are not holidays.

    Only holidays whose nominal date is a weekday are excluded; a holiday
    falling on a weekend does not remove its observed weekday.
    """
    excluded = _weekday_holidays(start, end)
    return [d for d in weekdays(start, end) if d not in excluded]


def count_weekdays_excluding_holidays(start: date, end: date) -> int:
    """Count weekdays between two dates (inclusive) that are not holidays."""
    excluded = _weekday_holidays(start, end)
    lo, hi = (start, end) if start <= end else (end, start)
    in_range = sum(1 for d in excluded if lo <= d <= hi)
    return count_weekdays(start, end) - in_range
