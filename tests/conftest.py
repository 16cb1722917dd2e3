"""
Shared pytest fixtures for holidaycal tests.

Provides reusable calendars and configuration data.
"""

import pytest
from datetime import date
from pathlib import Path
from typing import Dict, Any

from holidaycal.holidays.annual import AnnualHolidayCalendar


@pytest.fixture
def calendar_2026() -> AnnualHolidayCalendar:
    """Empty calendar for calendar year 2026."""
    return AnnualHolidayCalendar(2026)


@pytest.fixture
def federal_2026() -> AnnualHolidayCalendar:
    """Calendar year 2026 with the federal holidays."""
    return AnnualHolidayCalendar(2026).with_federal_holidays()


@pytest.fixture
def fiscal_2027_start() -> date:
    """First day of a July-June fiscal year ending in 2027."""
    return date(2026, 7, 1)


@pytest.fixture
def examples_dir() -> Path:
    return Path(__file__).parent.parent / "examples"


@pytest.fixture
def calendar_spec_dict() -> Dict[str, Any]:
    """Calendar spec as a dictionary, as it would be read from JSON."""
    return {
        "year": 2026,
        "include": "federal",
        "exclude": ["Columbus Day"],
        "custom": [
            {"name": "Day After Thanksgiving", "date": "2026-11-27"},
        ],
    }


# Years spanning every rule's start year through the near future
@pytest.fixture(params=[1789, 1870, 1937, 1986, 2021, 2025, 2026, 2027, 2028, 2100])
def sample_year(request) -> int:
    """Parametrized years for property checks."""
    return request.param
