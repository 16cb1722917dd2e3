"""
Holiday rules: one pure function per U.S. holiday.

Each rule maps a year to the Holiday it produces, or None when the holiday
did not exist yet (or the year has no occurrence, e.g. Inauguration Day
outside a presidential inauguration year). Years below 1 are rejected.
"""

from dataclasses import dataclass
from datetime import date, timedelta
from typing import Callable, Optional

from holidaycal.core.dates import Weekday, find_nth_weekday_of_month
from holidaycal.errors import InvalidArgumentError
from holidaycal.holidays.base import Holiday, HolidayName


RuleFunction = Callable[[int], Optional[Holiday]]


@dataclass(frozen=True)
class HolidayRule:
    """
    A named, stateless holiday rule.

    Attributes:
        name: Canonical holiday name
        compute: Function mapping a year to its Holiday (or None)
    """

    name: HolidayName
    compute: RuleFunction

    def __call__(self, year: int) -> Optional[Holiday]:
        return self.compute(year)

    def date_for(self, year: int) -> Optional[date]:
        """Nominal date of the holiday in ``year``, if it has one."""
        holiday = self.compute(year)
        return holiday.date if holiday is not None else None


def _check_year(year: int) -> None:
    if year < 1:
        raise InvalidArgumentError(f"year must be >= 1, got {year}")


def _holiday(name: HolidayName, d: Optional[date], observes: bool = False) -> Optional[Holiday]:
    if d is None:
        return None
    return Holiday(name=name.value, date=d, observes_weekend_adjustment=observes)


# ============================================================================
# Placement algorithms
# ============================================================================

def easter_sunday_date(year: int) -> date:
    """
    Easter Sunday by the anonymous Gregorian algorithm.

    Examples:
        >>> easter_sunday_date(2025)
        datetime.date(2025, 4, 20)
    """
    _check_year(year)

    a = year % 19
    b = year // 100
    c = year % 100
    d = b // 4
    e = b % 4
    f = (b + 8) // 25
    g = (b - f + 1) // 3
    h = (19 * a + b - d - g + 15) % 30
    i = c // 4
    k = c % 4
    l = (32 + 2 * e + 2 * i - h - k) % 7
    m = (a + 11 * h + 22 * l) // 451
    month = (h + l - 7 * m + 114) // 31  # 3 = March, 4 = April
    day = (h + l - 7 * m + 114) % 31 + 1

    return date(year, month, day)


def _walk_to_monday(start: date, step: int) -> date:
    current = start
    while current.weekday() != Weekday.MONDAY:
        current += timedelta(days=step)
    return current


def inauguration_day_date(year: int) -> Optional[date]:
    """
    Inauguration Day, held in years following a presidential election.

    Unlike other holidays only a Sunday moves (to Monday); a Saturday
    inauguration stays on Saturday.
    """
    _check_year(year)
    if year % 4 != 1:
        return None

    if year > 1936:
        d = date(year, 1, 20)
    elif year == 1789:
        d = date(year, 4, 30)
    elif year > 1789:
        d = date(year, 3, 4)
    else:
        return None

    if d.weekday() == Weekday.SUNDAY:
        return d + timedelta(days=1)
    return d


# ============================================================================
# Rules
# ============================================================================

def new_years_day(year: int) -> Optional[Holiday]:
    _check_year(year)
    return _holiday(HolidayName.NEW_YEARS_DAY, date(year, 1, 1), observes=True)


def martin_luther_king_jr_day(year: int) -> Optional[Holiday]:
    """Third Monday of January, from 1986."""
    _check_year(year)
    if year < 1986:
        return None
    d = find_nth_weekday_of_month(year, 1, Weekday.MONDAY, 3)
    return _holiday(HolidayName.MLK_DAY, d)


def inauguration_day(year: int) -> Optional[Holiday]:
    return _holiday(HolidayName.INAUGURATION_DAY, inauguration_day_date(year))


def presidents_day(year: int) -> Optional[Holiday]:
    """Third Monday of February, from 1885."""
    _check_year(year)
    if year < 1885:
        return None
    d = find_nth_weekday_of_month(year, 2, Weekday.MONDAY, 3)
    return _holiday(HolidayName.PRESIDENTS_DAY, d)


def valentines_day(year: int) -> Optional[Holiday]:
    _check_year(year)
    return _holiday(HolidayName.VALENTINES_DAY, date(year, 2, 14))


def easter_sunday(year: int) -> Optional[Holiday]:
    return _holiday(HolidayName.EASTER, easter_sunday_date(year))


def memorial_day(year: int) -> Optional[Holiday]:
    """Last Monday of May, from 1868."""
    _check_year(year)
    if year < 1868:
        return None
    return _holiday(HolidayName.MEMORIAL_DAY, _walk_to_monday(date(year, 5, 31), -1))


def juneteenth(year: int) -> Optional[Holiday]:
    _check_year(year)
    if year < 2021:
        return None
    return _holiday(HolidayName.JUNETEENTH, date(year, 6, 19), observes=True)


def independence_day(year: int) -> Optional[Holiday]:
    _check_year(year)
    if year < 1870:
        return None
    return _holiday(HolidayName.INDEPENDENCE_DAY, date(year, 7, 4), observes=True)


def labor_day(year: int) -> Optional[Holiday]:
    """First Monday of September, from 1887."""
    _check_year(year)
    if year < 1887:
        return None
    return _holiday(HolidayName.LABOR_DAY, _walk_to_monday(date(year, 9, 1), 1))


def columbus_day(year: int) -> Optional[Holiday]:
    """Second Monday of October, from 1937."""
    _check_year(year)
    if year < 1937:
        return None
    d = find_nth_weekday_of_month(year, 10, Weekday.MONDAY, 2)
    return _holiday(HolidayName.COLUMBUS_DAY, d)


def veterans_day(year: int) -> Optional[Holiday]:
    _check_year(year)
    if year < 1938:
        return None
    return _holiday(HolidayName.VETERANS_DAY, date(year, 11, 11), observes=True)


def thanksgiving_day(year: int) -> Optional[Holiday]:
    """Fourth Thursday of November, fixed by Congress in 1941."""
    _check_year(year)
    if year < 1941:
        return None
    d = find_nth_weekday_of_month(year, 11, Weekday.THURSDAY, 4)
    return _holiday(HolidayName.THANKSGIVING, d)


def christmas_day(year: int) -> Optional[Holiday]:
    _check_year(year)
    if year < 1870:
        return None
    return _holiday(HolidayName.CHRISTMAS, date(year, 12, 25), observes=True)


def christmas_eve_day(year: int) -> Optional[Holiday]:
    christmas = christmas_day(year)
    if christmas is None:
        return None
    return _holiday(HolidayName.CHRISTMAS_EVE, christmas.date - timedelta(days=1))


def new_years_eve_day(year: int) -> Optional[Holiday]:
    _check_year(year)
    if year < 1870:
        return None
    return _holiday(HolidayName.NEW_YEARS_EVE, date(year, 12, 31))


# Registry order follows the calendar; catalog queries sort by date anyway.
RULES = (
    HolidayRule(HolidayName.NEW_YEARS_DAY, new_years_day),
    HolidayRule(HolidayName.MLK_DAY, martin_luther_king_jr_day),
    HolidayRule(HolidayName.INAUGURATION_DAY, inauguration_day),
    HolidayRule(HolidayName.PRESIDENTS_DAY, presidents_day),
    HolidayRule(HolidayName.VALENTINES_DAY, valentines_day),
    HolidayRule(HolidayName.EASTER, easter_sunday),
    HolidayRule(HolidayName.MEMORIAL_DAY, memorial_day),
    HolidayRule(HolidayName.JUNETEENTH, juneteenth),
    HolidayRule(HolidayName.INDEPENDENCE_DAY, independence_day),
    HolidayRule(HolidayName.LABOR_DAY, labor_day),
    HolidayRule(HolidayName.COLUMBUS_DAY, columbus_day),
    HolidayRule(HolidayName.VETERANS_DAY, veterans_day),
    HolidayRule(HolidayName.THANKSGIVING, thanksgiving_day),
    HolidayRule(HolidayName.CHRISTMAS_EVE, christmas_eve_day),
    HolidayRule(HolidayName.CHRISTMAS, christmas_day),
    HolidayRule(HolidayName.NEW_YEARS_EVE, new_years_eve_day),
)
