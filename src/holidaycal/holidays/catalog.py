"""
Catalog of U.S. holiday rules.

The registry is a fixed tuple of HolidayRules; lookups are by canonical
name (case-insensitive) and enumerations run every rule for a year.
"""

import logging
from datetime import date
from typing import Dict, Iterator, List, Optional

from holidaycal.holidays.base import Holiday, HolidayName
from holidaycal.holidays.rules import RULES, HolidayRule

logger = logging.getLogger(__name__)


# Inauguration Day is excluded because it is seldom observed by businesses.
FEDERAL_HOLIDAYS = (
    HolidayName.NEW_YEARS_DAY,
    HolidayName.MLK_DAY,
    HolidayName.PRESIDENTS_DAY,
    HolidayName.MEMORIAL_DAY,
    HolidayName.INDEPENDENCE_DAY,
    HolidayName.LABOR_DAY,
    HolidayName.COLUMBUS_DAY,
    HolidayName.VETERANS_DAY,
    HolidayName.THANKSGIVING,
    HolidayName.CHRISTMAS,
)

_RULES_BY_NAME: Dict[str, HolidayRule] = {rule.name.value.casefold(): rule for rule in RULES}
_FEDERAL_KEYS = frozenset(name.value.casefold() for name in FEDERAL_HOLIDAYS)


def rule_for(name: str) -> Optional[HolidayRule]:
    """Find the rule for a canonical holiday name (case-insensitive)."""
    return _RULES_BY_NAME.get(name.casefold())


def all_names() -> List[str]:
    """Names of every holiday in the catalog."""
    return [rule.name.value for rule in RULES]


def federal_names() -> List[str]:
    """Names of the holidays treated as federal (nationally observed) holidays."""
    return [name.value for name in FEDERAL_HOLIDAYS]


def is_federal(name: str) -> bool:
    """Check if a holiday name is in the federal subset (case-insensitive)."""
    return name.casefold() in _FEDERAL_KEYS


def all_for_year(year: int) -> List[Holiday]:
    """
    Every holiday occurring in ``year``, sorted by nominal date.

    Holidays sharing a date keep registry order.
    """
    holidays = [h for h in (rule(year) for rule in RULES) if h is not None]
    holidays.sort(key=lambda h: h.date)
    logger.debug(f"{len(holidays)} of {len(RULES)} rules produced a holiday for {year}")
    return holidays


def federal_for_year(year: int) -> List[Holiday]:
    """The federal holidays occurring in ``year``, sorted by nominal date."""
    return [h for h in all_for_year(year) if is_federal(h.name)]


def holiday_by_name(name: str, year: int) -> Optional[Holiday]:
    """The named holiday in ``year``, or None if unknown or not held that year."""
    rule = rule_for(name)
    return rule(year) if rule is not None else None


def holiday_date_by_name(name: str, year: int) -> Optional[date]:
    """Nominal date of the named holiday in ``year``."""
    rule = rule_for(name)
    return rule.date_for(year) if rule is not None else None


def name_for_date(d: date) -> Optional[str]:
    """Name of the first holiday whose nominal date is ``d``."""
    for holiday in all_for_year(d.year):
        if holiday.date == d:
            return holiday.name
    return None


def holidays_between(start: date, end: date) -> Iterator[Holiday]:
    """
    Yield holidays observed within ``[start, end]`` (inclusive).

    Arguments may be given in either order. A holiday is included when its
    observed date is inside the range, even if its nominal date is not.
    """
    if end < start:
        start, end = end, start

    for year in range(start.year, end.year + 1):
        for holiday in all_for_year(year):
            if start <= holiday.observed_date <= end:
                yield holiday


def dates_between(start: date, end: date) -> Iterator[date]:
    """Nominal dates of the holidays observed within ``[start, end]``."""
    return (holiday.date for holiday in holidays_between(start, end))


class HolidayCatalog:
    """
    Read-only registry of U.S. holiday rules.

    Thin namespace over the module-level functions so callers can pass the
    catalog around as a single object.

    Example:
        >>> [h.name for h in HolidayCatalog.federal_for_year(2026)][:2]
        ["New Year's Day", "Martin Luther King Jr's Birthday"]
    """

    rules = RULES
    federal = FEDERAL_HOLIDAYS

    rule_for = staticmethod(rule_for)
    all_names = staticmethod(all_names)
    federal_names = staticmethod(federal_names)
    is_federal = staticmethod(is_federal)
    all_for_year = staticmethod(all_for_year)
    federal_for_year = staticmethod(federal_for_year)
    holiday_by_name = staticmethod(holiday_by_name)
    holiday_date_by_name = staticmethod(holiday_date_by_name)
    name_for_date = staticmethod(name_for_date)
    holidays_between = staticmethod(holidays_between)
    dates_between = staticmethod(dates_between)
