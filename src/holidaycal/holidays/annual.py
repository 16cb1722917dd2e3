"""
Annual holiday calendar scoped to one fiscal year.

A fiscal year runs from ``start`` through ``start + 1 year - 1 day``. The
calendar is filled with builder-style ``with_*`` calls that return the same
instance, so construction chains:

    >>> cal = AnnualHolidayCalendar(2026).with_federal_holidays()
    >>> cal.is_holiday(date(2026, 7, 3))
    True
"""

import logging
from datetime import date, datetime, timedelta
from typing import Any, Dict, Iterator, List, Optional, Set, Tuple, Union

from holidaycal.core.calendar import Calendar
from holidaycal.errors import DateOutOfRangeError, InvalidArgumentError
from holidaycal.holidays import catalog
from holidaycal.holidays.base import Holiday

logger = logging.getLogger(__name__)


def _fiscal_end(start: date) -> date:
    """Day before the same month/day next year; Feb 29 falls back to Feb 28."""
    if (start.month, start.day) == (1, 1):
        return date(start.year, 12, 31)
    if start.year >= date.max.year:
        raise InvalidArgumentError(f"Fiscal year starting {start} ends past {date.max}")
    try:
        next_start = start.replace(year=start.year + 1)
    except ValueError:
        next_start = date(start.year + 1, 2, 28)
    return next_start - timedelta(days=1)


def _require_name(name: Optional[str]) -> str:
    if name is None or not name.strip():
        raise InvalidArgumentError("Holiday name must not be empty")
    return name


class AnnualHolidayCalendar:
    """
    Mutable set of holidays for a single fiscal year.

    Holidays are deduplicated by value and always reported sorted by
    nominal date. Not safe for concurrent mutation.
    """

    def __init__(self, year_or_start: Union[int, date]) -> None:
        """
        Initialize calendar.

        Args:
            year_or_start: A calendar year (Jan 1 - Dec 31) or the first
                day of a fiscal year

        Raises:
            InvalidArgumentError: If the year is below 1 or out of range
        """
        if isinstance(year_or_start, bool):
            raise InvalidArgumentError("year must be an int or a date, not bool")

        if isinstance(year_or_start, date):
            start = year_or_start.date() if isinstance(year_or_start, datetime) else year_or_start
            end = _fiscal_end(start)
        elif isinstance(year_or_start, int):
            if not 1 <= year_or_start <= date.max.year:
                raise InvalidArgumentError(
                    f"year must be in [1, {date.max.year}], got {year_or_start}"
                )
            start = date(year_or_start, 1, 1)
            end = date(year_or_start, 12, 31)
        else:
            raise InvalidArgumentError(
                f"Expected a year or a start date, got {type(year_or_start).__name__}"
            )

        self._start = start
        self._end = end
        self._holidays: Set[Holiday] = set()

    def __repr__(self) -> str:
        return (
            f"AnnualHolidayCalendar(start={self._start}, end={self._end}, "
            f"holidays={len(self._holidays)})"
        )

    def __len__(self) -> int:
        return len(self._holidays)

    def __iter__(self) -> Iterator[Holiday]:
        return iter(self.holidays)

    def __contains__(self, item: Union[Holiday, date]) -> bool:
        if isinstance(item, Holiday):
            return item in self._holidays
        if isinstance(item, date):
            return self.is_holiday(item)
        return False

    @property
    def start(self) -> date:
        return self._start

    @property
    def end(self) -> date:
        return self._end

    @property
    def fiscal_year(self) -> int:
        """Fiscal year, named after the calendar year it ends in."""
        return self._end.year

    @property
    def holidays(self) -> Tuple[Holiday, ...]:
        """All holidays, sorted by nominal date."""
        return tuple(sorted(self._holidays, key=lambda h: h.sort_key))

    def contains_date(self, d: date) -> bool:
        """Check if a date is inside the fiscal window."""
        return self._start <= d <= self._end

    # ------------------------------------------------------------------
    # Builders
    # ------------------------------------------------------------------

    def with_federal_holidays(self) -> "AnnualHolidayCalendar":
        """Add the federal holidays observed within the fiscal window."""
        added = self._add_all(
            h for h in catalog.holidays_between(self._start, self._end)
            if catalog.is_federal(h.name)
        )
        logger.debug(f"Added {added} federal holidays to FY{self.fiscal_year}")
        return self

    def with_all_holidays(self) -> "AnnualHolidayCalendar":
        """Add every catalog holiday observed within the fiscal window."""
        added = self._add_all(catalog.holidays_between(self._start, self._end))
        logger.debug(f"Added {added} catalog holidays to FY{self.fiscal_year}")
        return self

    def with_holiday(
        self,
        holiday_or_date: Union[Holiday, date],
        name: Optional[str] = None,
        observes_weekend_adjustment: bool = False
    ) -> "AnnualHolidayCalendar":
        """
        Add a single holiday.

        Args:
            holiday_or_date: An existing Holiday, or the nominal date of a new one
            name: Holiday name (required when a date is given)
            observes_weekend_adjustment: Whether a weekend date moves to a weekday

        Raises:
            TypeError: If a Holiday is given together with a name or flag
            InvalidArgumentError: If the name is empty
            DateOutOfRangeError: If the date is outside the fiscal window
        """
        if isinstance(holiday_or_date, Holiday):
            if name is not None or observes_weekend_adjustment:
                raise TypeError("name and observes_weekend_adjustment come from the Holiday itself")
            return self.with_holiday(
                holiday_or_date.date,
                holiday_or_date.name,
                holiday_or_date.observes_weekend_adjustment,
            )

        name = _require_name(name)
        if not self.contains_date(holiday_or_date):
            raise DateOutOfRangeError(
                f"Holidays must be between {self._start.isoformat()} and {self._end.isoformat()}, "
                f"got {holiday_or_date.isoformat()}"
            )

        self._holidays.add(Holiday(
            name=name,
            date=holiday_or_date,
            observes_weekend_adjustment=observes_weekend_adjustment,
        ))
        return self

    def remove_holiday(self, target: Union[Holiday, date, str]) -> "AnnualHolidayCalendar":
        """
        Remove holidays matching ``target``.

        A Holiday removes that exact value, a date removes holidays whose
        nominal or observed date matches, and a name removes every holiday
        with that name (case-insensitive). Missing targets are ignored.
        """
        if isinstance(target, Holiday):
            self._holidays.discard(target)
            return self

        if isinstance(target, date):
            matches = {h for h in self._holidays if h.falls_on(target)}
        elif isinstance(target, str):
            matches = {h for h in self._holidays if h.is_named(target)}
        else:
            raise TypeError(f"Cannot remove holidays by {type(target).__name__}")

        self._holidays -= matches
        if matches:
            logger.debug(f"Removed {len(matches)} holidays matching {target!r}")
        return self

    def _add_all(self, holidays) -> int:
        before = len(self._holidays)
        self._holidays.update(holidays)
        return len(self._holidays) - before

    # ------------------------------------------------------------------
    # Queries
    # ------------------------------------------------------------------

    def holiday_by_name(self, name: str) -> Optional[Holiday]:
        """
        First holiday (by date) with the given name, case-insensitive.

        Raises:
            InvalidArgumentError: If the name is empty
        """
        _require_name(name)
        matches = self.holidays_by_name(name)
        return matches[0] if matches else None

    def holidays_by_name(self, name: str) -> List[Holiday]:
        """All holidays with the given name, sorted by nominal date."""
        return [h for h in self.holidays if h.is_named(name)]

    def holidays_by_date(self, d: date) -> List[Holiday]:
        """Holidays whose nominal or observed date is ``d``."""
        return [h for h in self.holidays if h.falls_on(d)]

    def is_holiday(self, d: date) -> bool:
        return any(h.falls_on(d) for h in self._holidays)

    def business_calendar(self) -> Calendar:
        """Business-day calendar closed on each holiday's observed date."""
        return Calendar(
            name=f"FY{self.fiscal_year}",
            holidays={h.observed_date for h in self._holidays},
        )

    def to_dict(self) -> Dict[str, Any]:
        """Serialize calendar to dictionary."""
        return {
            "start": self._start.isoformat(),
            "end": self._end.isoformat(),
            "fiscal_year": self.fiscal_year,
            "holidays": [h.to_dict() for h in self.holidays],
        }
