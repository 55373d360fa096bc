"""
Errors raised by the Bikram Sambat conversion engine
"""


class NepaliDateError(ValueError):
    """Base class for every error raised while building or converting a BS date"""


class ParseError(NepaliDateError):
    """A date string has a missing or non-numeric component"""


class OutOfRangeError(NepaliDateError):
    """Year, month or day falls outside the calendar table"""


class DateOutOfRangeError(OutOfRangeError):
    """A Gregorian instant lies before the epoch or after the last table day"""


class InvalidArgumentError(NepaliDateError, TypeError):
    """Unsupported input shape or argument count for a NepaliDate"""
