"""
Pydantic schema for holiday calendar configuration.

A CalendarSpec describes one fiscal year: the catalog holidays to include,
any custom holidays, and catalog holidays to leave out. Specs are loaded
from JSON and turned into AnnualHolidayCalendar instances.
"""

import json
import logging
from datetime import date
from enum import Enum
from pathlib import Path
from typing import List, Optional, Union

from pydantic import BaseModel, ConfigDict, Field, ValidationError, field_validator, model_validator

from holidaycal.core.dates import count_weekdays, inclusive_days
from holidaycal.errors import InvalidArgumentError
from holidaycal.holidays import catalog
from holidaycal.holidays.annual import AnnualHolidayCalendar

logger = logging.getLogger(__name__)


class HolidaySet(str, Enum):
    """Which catalog holidays a calendar starts from."""

    NONE = "none"
    FEDERAL = "federal"
    ALL = "all"


class CustomHoliday(BaseModel):
    """A holiday not produced by the catalog (e.g. a company day off)."""

    model_config = ConfigDict(extra="forbid")

    name: str = Field(..., min_length=1)
    date: date
    observes_weekend_adjustment: bool = False

    @field_validator("name")
    @classmethod
    def validate_name(cls, v: str) -> str:
        if not v.strip():
            raise ValueError("custom holiday name must not be blank")
        return v


class CalendarSpec(BaseModel):
    """
    Configuration for one fiscal-year holiday calendar.

    Exactly one of ``year`` (calendar year) or ``start`` (first day of the
    fiscal year) must be given.
    """

    model_config = ConfigDict(extra="forbid")

    year: Optional[int] = Field(default=None, ge=1, le=9999)
    start: Optional[date] = None
    include: HolidaySet = HolidaySet.FEDERAL
    custom: List[CustomHoliday] = Field(default_factory=list)
    exclude: List[str] = Field(
        default_factory=list,
        description="Catalog holiday names to remove after including"
    )

    @model_validator(mode='after')
    def validate_window(self) -> 'CalendarSpec':
        """Require exactly one way of defining the fiscal window."""
        if (self.year is None) == (self.start is None):
            raise ValueError("exactly one of year or start is required")
        return self

    @model_validator(mode='after')
    def validate_custom(self) -> 'CalendarSpec':
        """Reject duplicate custom entries."""
        seen = set()
        for holiday in self.custom:
            key = (holiday.name.casefold(), holiday.date)
            if key in seen:
                raise ValueError(f"duplicate custom holiday {holiday.name!r} on {holiday.date}")
            seen.add(key)
        return self


def load_calendar_spec(path: Union[str, Path]) -> CalendarSpec:
    """
    Load and validate a calendar spec from a JSON file.

    Args:
        path: Path to JSON file

    Returns:
        Validated CalendarSpec

    Raises:
        FileNotFoundError: If file doesn't exist
        ValidationError: If JSON doesn't match schema
    """
    filepath = Path(path)
    if not filepath.exists():
        raise FileNotFoundError(f"Calendar spec not found: {path}")

    with open(filepath, "r") as f:
        data = json.load(f)

    logger.info(f"Loaded calendar spec from {filepath.name}")
    return CalendarSpec(**data)


def validate_calendar_spec_json(data: dict) -> CalendarSpec:
    """Validate a calendar spec dictionary."""
    return CalendarSpec(**data)


def build_calendar(spec: CalendarSpec) -> AnnualHolidayCalendar:
    """
    Build the calendar a spec describes.

    Catalog holidays are added first, ``exclude`` names are removed, then
    custom holidays are added.

    Raises:
        DateOutOfRangeError: If a custom holiday is outside the fiscal window
    """
    cal = AnnualHolidayCalendar(spec.year if spec.year is not None else spec.start)

    if spec.include == HolidaySet.FEDERAL:
        cal.with_federal_holidays()
    elif spec.include == HolidaySet.ALL:
        cal.with_all_holidays()

    for name in spec.exclude:
        if catalog.rule_for(name) is None:
            logger.warning(f"Excluded holiday {name!r} is not in the catalog")
        cal.remove_holiday(name)

    for holiday in spec.custom:
        cal.with_holiday(holiday.date, holiday.name, holiday.observes_weekend_adjustment)

    return cal


def calendar_from_json(data: dict) -> AnnualHolidayCalendar:
    """
    Validate a spec dictionary and build its calendar.

    Raises:
        InvalidArgumentError: If the spec is invalid
    """
    try:
        spec = validate_calendar_spec_json(data)
    except ValidationError as e:
        raise InvalidArgumentError(f"Invalid calendar spec: {e}") from e
    return build_calendar(spec)


def print_calendar_summary(cal: AnnualHolidayCalendar) -> None:
    """Print a clean summary of a holiday calendar."""
    print("=" * 70)
    print(f"HOLIDAY CALENDAR: FY{cal.fiscal_year}")
    print("=" * 70)

    print(f"  Start:      {cal.start}")
    print(f"  End:        {cal.end}")
    print(f"  Holidays:   {len(cal)}")

    print(f"\n--- HOLIDAYS ---")
    for h in cal.holidays:
        observed = f" (observed {h.observed_date:%a %Y-%m-%d})" if h.observed_date != h.date else ""
        print(f"  {h.date:%a %Y-%m-%d}  {h.name}{observed}")

    bdays = cal.business_calendar()
    open_days = sum(1 for d in inclusive_days(cal.start, cal.end) if bdays.is_business_day(d))
    print(f"\n--- BUSINESS DAYS ---")
    print(f"  Weekdays:   {count_weekdays(cal.start, cal.end)}")
    print(f"  Open days:  {open_days}")
    print("=" * 70)
