"""Custom errors for the holiday calendar library."""


class HolidayCalendarError(ValueError):
    """Base class for holiday calendar errors."""


class InvalidArgumentError(HolidayCalendarError):
    """An argument is outside the range the operation accepts."""


class DateOutOfRangeError(InvalidArgumentError):
    """A date falls outside a calendar's fiscal window."""
