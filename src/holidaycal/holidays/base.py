"""
Holiday value type and the canonical U.S. holiday names.
"""

from datetime import date
from enum import Enum
from typing import Any, Dict, Tuple

from pydantic import BaseModel, ConfigDict, field_validator

from holidaycal.core.dates import adjust_to_observed_weekday


class HolidayName(str, Enum):
    """Canonical names of the holidays the catalog knows how to compute."""

    NEW_YEARS_DAY = "New Year's Day"
    MLK_DAY = "Martin Luther King Jr's Birthday"
    INAUGURATION_DAY = "Inauguration Day"
    PRESIDENTS_DAY = "Presidents Day"
    VALENTINES_DAY = "St. Valentine's Day"
    EASTER = "Easter Sunday"
    MEMORIAL_DAY = "Memorial Day"
    JUNETEENTH = "Juneteenth"
    INDEPENDENCE_DAY = "Independence Day"
    LABOR_DAY = "Labor Day"
    COLUMBUS_DAY = "Columbus Day"
    VETERANS_DAY = "Veterans Day"
    THANKSGIVING = "Thanksgiving Day"
    CHRISTMAS_EVE = "Christmas Eve Day"
    CHRISTMAS = "Christmas Day"
    NEW_YEARS_EVE = "New Year's Eve Day"


class Holiday(BaseModel):
    """
    A named holiday on a nominal date.

    When ``observes_weekend_adjustment`` is set, a holiday landing on a
    weekend is observed on the nearest weekday (Saturday -> Friday,
    Sunday -> Monday). Instances are immutable and compare by value.
    """

    model_config = ConfigDict(frozen=True, extra="forbid")

    name: str
    date: date
    observes_weekend_adjustment: bool = False

    @field_validator("name")
    @classmethod
    def validate_name(cls, v: str) -> str:
        """Reject empty or whitespace-only names."""
        if not v or not v.strip():
            raise ValueError("Holiday name must not be empty")
        return v

    @property
    def observed_date(self) -> date:
        """The date the holiday is observed on."""
        if self.observes_weekend_adjustment:
            return adjust_to_observed_weekday(self.date)
        return self.date

    @property
    def sort_key(self) -> Tuple[date, str]:
        return (self.date, self.name)

    def falls_on(self, d: date) -> bool:
        """True if ``d`` is either the nominal or the observed date."""
        return self.date == d or self.observed_date == d

    def is_named(self, name: str) -> bool:
        """Case-insensitive name comparison."""
        return self.name.casefold() == name.casefold()

    def to_dict(self) -> Dict[str, Any]:
        return {
            "name": self.name,
            "date": self.date.isoformat(),
            "observed_date": self.observed_date.isoformat(),
            "observes_weekend_adjustment": self.observes_weekend_adjustment,
        }
