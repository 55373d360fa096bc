"""
Parsing of delimited BS date strings
"""
import re
from typing import Tuple

from .calendar_data import DEFAULT_TABLE, CalendarTable
from .exceptions import OutOfRangeError, ParseError


# Expected date formats are yyyy-mm-dd, yyyy.mm.dd and yyyy/mm/dd
DATE_SEPARATORS = re.compile(r'[-./]')

# ASCII digits only; int() alone would also take signs, underscores and spaces
DIGITS = re.compile(r'\d+', re.ASCII)


def parse(date_string: str, table: CalendarTable = DEFAULT_TABLE) -> Tuple[int, int, int]:
    """
    Parse a BS date string into a validated triple

    Args:
        date_string: Year, month (1-12) and day joined by '-', '.' or '/'
        table: Calendar table the date is validated against

    Returns:
        (year, month, day) with the month 0-indexed

    Raises:
        ParseError: If the string does not hold three numeric components
        OutOfRangeError: If the year, month or day is outside the table
    """
    if not isinstance(date_string, str):
        raise ParseError(f"Invalid date: expected a string, got {type(date_string).__name__}")

    parts = DATE_SEPARATORS.split(date_string.strip())
    if len(parts) != 3:
        raise ParseError(f"Invalid date '{date_string}': expected year, month and day")

    if not all(DIGITS.fullmatch(part) for part in parts):
        raise ParseError(f"Invalid date '{date_string}': components must be numeric")
    year, month, day = (int(part) for part in parts)

    if not table.contains_year(year):
        raise OutOfRangeError(
            f"Nepal year {year} out of range. "
            f"Supported years: {table.start_year}-{table.end_year}"
        )

    if month < 1 or month > 12:
        raise OutOfRangeError(f"Invalid nepali month {month}, must be between 1 - 12")

    days_in_month = table.days_in_month(year, month)
    if day < 1 or day > days_in_month:
        raise OutOfRangeError(
            f"Invalid nepali date {day}, must be between 1 - {days_in_month} in {year} {month}"
        )

    return year, month - 1, day
