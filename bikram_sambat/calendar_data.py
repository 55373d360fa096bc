"""
Bikram Sambat calendar data and the lookup table built from it
"""
from datetime import date
from typing import Dict, List, Sequence, Tuple

from .exceptions import OutOfRangeError


# Nepali Calendar Data (2000-2090 BS)
NEPALI_CALENDAR_DATA = {
    2000: [30, 32, 31, 32, 31, 30, 30, 30, 29, 30, 29, 31],
    2001: [31, 31, 32, 31, 31, 31, 30, 29, 30, 29, 30, 30],
    2002: [31, 31, 32, 32, 31, 30, 30, 29, 30, 29, 30, 30],
    2003: [31, 32, 31, 32, 31, 30, 30, 30, 29, 29, 30, 31],
    2004: [30, 32, 31, 32, 31, 30, 30, 30, 29, 30, 29, 31],
    2005: [31, 31, 32, 31, 31, 31, 30, 29, 30, 29, 30, 30],
    2006: [31, 31, 32, 32, 31, 30, 30, 29, 30, 29, 30, 30],
    2007: [31, 32, 31, 32, 31, 30, 30, 30, 29, 29, 30, 31],
    2008: [31, 31, 31, 32, 31, 31, 29, 30, 30, 29, 29, 31],
    2009: [31, 31, 32, 31, 31, 31, 30, 29, 30, 29, 30, 30],
    2010: [31, 31, 32, 32, 31, 30, 30, 29, 30, 29, 30, 30],
    2011: [31, 32, 31, 32, 31, 30, 30, 30, 29, 29, 30, 31],
    2012: [31, 31, 31, 32, 31, 31, 29, 30, 30, 29, 30, 30],
    2013: [31, 31, 32, 31, 31, 31, 30, 29, 30, 29, 30, 30],
    2014: [31, 31, 32, 32, 31, 30, 30, 29, 30, 29, 30, 30],
    2015: [31, 32, 31, 32, 31, 30, 30, 30, 29, 29, 30, 31],
    2016: [31, 31, 31, 32, 31, 31, 29, 30, 30, 29, 30, 30],
    2017: [31, 31, 32, 31, 31, 31, 30, 29, 30, 29, 30, 30],
    2018: [31, 32, 31, 32, 31, 30, 30, 29, 30, 29, 30, 30],
    2019: [31, 32, 31, 32, 31, 30, 30, 30, 29, 30, 29, 31],
    2020: [31, 31, 31, 32, 31, 31, 30, 29, 30, 29, 30, 30],
    2021: [31, 31, 32, 31, 31, 31, 30, 29, 30, 29, 30, 30],
    2022: [31, 32, 31, 32, 31, 30, 30, 30, 29, 29, 30, 30],
    2023: [31, 32, 31, 32, 31, 30, 30, 30, 29, 30, 29, 31],
    2024: [31, 31, 31, 32, 31, 31, 30, 29, 30, 29, 30, 30],
    2025: [31, 31, 32, 31, 31, 31, 30, 29, 30, 29, 30, 30],
    2026: [31, 32, 31, 32, 31, 30, 30, 30, 29, 29, 30, 31],
    2027: [30, 32, 31, 32, 31, 30, 30, 30, 29, 30, 29, 31],
    2028: [31, 31, 32, 31, 31, 31, 30, 29, 30, 29, 30, 30],
    2029: [31, 31, 32, 31, 32, 30, 30, 29, 30, 29, 30, 30],
    2030: [31, 32, 31, 32, 31, 30, 30, 30, 29, 29, 30, 31],
    2031: [30, 32, 31, 32, 31, 30, 30, 30, 29, 30, 29, 31],
    2032: [31, 31, 32, 31, 31, 31, 30, 29, 30, 29, 30, 30],
    2033: [31, 31, 32, 32, 31, 30, 30, 29, 30, 29, 30, 30],
    2034: [31, 32, 31, 32, 31, 30, 30, 30, 29, 29, 30, 31],
    2035: [30, 32, 31, 32, 31, 31, 29, 30, 30, 29, 29, 31],
    2036: [31, 31, 32, 31, 31, 31, 30, 29, 30, 29, 30, 30],
    2037: [31, 31, 32, 32, 31, 30, 30, 29, 30, 29, 30, 30],
    2038: [31, 32, 31, 32, 31, 30, 30, 30, 29, 29, 30, 31],
    2039: [31, 31, 31, 32, 31, 31, 29, 30, 30, 29, 30, 30],
    2040: [31, 31, 32, 31, 31, 31, 30, 29, 30, 29, 30, 30],
    2041: [31, 31, 32, 32, 31, 30, 30, 29, 30, 29, 30, 30],
    2042: [31, 32, 31, 32, 31, 30, 30, 30, 29, 29, 30, 31],
    2043: [31, 31, 31, 32, 31, 31, 29, 30, 30, 29, 30, 30],
    2044: [31, 31, 32, 31, 31, 31, 30, 29, 30, 29, 30, 30],
    2045: [31, 32, 31, 32, 31, 30, 30, 29, 30, 29, 30, 30],
    2046: [31, 32, 31, 32, 31, 30, 30, 30, 29, 29, 30, 31],
    2047: [31, 31, 31, 32, 31, 31, 30, 29, 30, 29, 30, 30],
    2048: [31, 31, 32, 31, 31, 31, 30, 29, 30, 29, 30, 30],
    2049: [31, 32, 31, 32, 31, 30, 30, 30, 29, 29, 30, 30],
    2050: [31, 32, 31, 32, 31, 30, 30, 30, 29, 30, 29, 31],
    2051: [31, 31, 31, 32, 31, 31, 30, 29, 30, 29, 30, 30],
    2052: [31, 31, 32, 31, 31, 31, 30, 29, 30, 29, 30, 30],
    2053: [31, 32, 31, 32, 31, 30, 30, 30, 29, 29, 30, 30],
    2054: [31, 32, 31, 32, 31, 30, 30, 30, 29, 30, 29, 31],
    2055: [31, 31, 32, 31, 31, 31, 30, 29, 30, 29, 30, 30],
    2056: [31, 31, 32, 31, 32, 30, 30, 29, 30, 29, 30, 30],
    2057: [31, 32, 31, 32, 31, 30, 30, 30, 29, 29, 30, 31],
    2058: [30, 32, 31, 32, 31, 30, 30, 30, 29, 30, 29, 31],
    2059: [31, 31, 32, 31, 31, 31, 30, 29, 30, 29, 30, 30],
    2060: [31, 31, 32, 32, 31, 30, 30, 29, 30, 29, 30, 30],
    2061: [31, 32, 31, 32, 31, 30, 30, 30, 29, 29, 30, 31],
    2062: [30, 32, 31, 32, 31, 31, 29, 30, 29, 30, 29, 31],
    2063: [31, 31, 32, 31, 31, 31, 30, 29, 30, 29, 30, 30],
    2064: [31, 31, 32, 32, 31, 30, 30, 29, 30, 29, 30, 30],
    2065: [31, 32, 31, 32, 31, 30, 30, 30, 29, 29, 30, 31],
    2066: [31, 31, 31, 32, 31, 31, 29, 30, 30, 29, 29, 31],
    2067: [31, 31, 32, 31, 31, 31, 30, 29, 30, 29, 30, 30],
    2068: [31, 31, 32, 32, 31, 30, 30, 29, 30, 29, 30, 30],
    2069: [31, 32, 31, 32, 31, 30, 30, 30, 29, 29, 30, 31],
    2070: [31, 31, 31, 32, 31, 31, 29, 30, 30, 29, 30, 30],
    2071: [31, 31, 32, 31, 31, 31, 30, 29, 30, 29, 30, 30],
    2072: [31, 32, 31, 32, 31, 30, 30, 29, 30, 29, 30, 30],
    2073: [31, 32, 31, 32, 31, 30, 30, 30, 29, 29, 30, 31],
    2074: [31, 31, 31, 32, 31, 31, 30, 29, 30, 29, 30, 30],
    2075: [31, 31, 32, 31, 31, 31, 30, 29, 30, 29, 30, 30],
    2076: [31, 32, 31, 32, 31, 30, 30, 30, 29, 29, 30, 30],
    2077: [31, 32, 31, 32, 31, 30, 30, 30, 29, 30, 29, 31],
    2078: [31, 31, 31, 32, 31, 31, 30, 29, 30, 29, 30, 30],
    2079: [31, 31, 32, 31, 31, 31, 30, 29, 30, 29, 30, 30],
    2080: [31, 32, 31, 32, 31, 30, 30, 30, 29, 29, 30, 30],
    2081: [31, 31, 32, 32, 31, 30, 30, 30, 29, 30, 30, 30],
    2082: [30, 32, 31, 32, 31, 30, 30, 30, 29, 30, 30, 30],
    2083: [31, 31, 32, 31, 31, 30, 30, 30, 29, 30, 30, 30],
    2084: [31, 31, 32, 31, 31, 30, 30, 30, 29, 30, 30, 30],
    2085: [31, 32, 31, 32, 30, 31, 30, 30, 29, 30, 30, 30],
    2086: [30, 32, 31, 32, 31, 30, 30, 30, 29, 30, 30, 30],
    2087: [31, 31, 32, 31, 31, 31, 30, 30, 29, 30, 30, 30],
    2088: [30, 31, 32, 32, 30, 31, 30, 30, 29, 30, 30, 30],
    2089: [30, 32, 31, 32, 31, 30, 30, 30, 29, 30, 30, 30],
    2090: [30, 32, 31, 32, 31, 30, 30, 30, 29, 30, 30, 30],
}

NEPALI_MONTHS = [
    'Baisakh', 'Jestha', 'Ashadh', 'Shrawan', 'Bhadra', 'Ashwin',
    'Kartik', 'Mangsir', 'Poush', 'Magh', 'Falgun', 'Chaitra'
]

# Base reference point: 2000/01/01 BS = 1943/04/14 AD
EPOCH = date(1943, 4, 14)

# Month lengths shown for years the table does not cover (display only)
DEFAULT_MONTH_LENGTHS = (30, 29, 30, 29, 30, 29, 30, 29, 30, 29, 30, 30)

MIN_MONTH_LENGTH = 29
MAX_MONTH_LENGTH = 32


class CalendarTable:
    """
    Immutable per-year month lengths with running day totals.

    Entry ``i`` describes BS year ``start_year + i``. ``cumulative_days(i)``
    is the number of days from the epoch through the last day of that year,
    and ``cumulative_days(-1)`` is zero.
    """

    __slots__ = ('_start_year', '_months', '_cumulative')

    def __init__(self, data: Dict[int, Sequence[int]]):
        if not data:
            raise ValueError("Calendar data must contain at least one year")

        years = sorted(data)
        if years != list(range(years[0], years[-1] + 1)):
            raise ValueError("Calendar data years must be contiguous")

        months: List[Tuple[int, ...]] = []
        cumulative: List[int] = []
        running = 0
        for year in years:
            lengths = tuple(data[year])
            if len(lengths) != 12:
                raise ValueError(f"Year {year} must list 12 month lengths, got {len(lengths)}")
            for length in lengths:
                if not MIN_MONTH_LENGTH <= length <= MAX_MONTH_LENGTH:
                    raise ValueError(f"Year {year} has an invalid month length: {length}")
            running += sum(lengths)
            months.append(lengths)
            cumulative.append(running)

        object.__setattr__(self, '_start_year', years[0])
        object.__setattr__(self, '_months', tuple(months))
        object.__setattr__(self, '_cumulative', tuple(cumulative))

    def __setattr__(self, name, value):
        raise AttributeError(f"{type(self).__name__} is immutable")

    def __len__(self) -> int:
        return len(self._months)

    def __repr__(self) -> str:
        return f"<CalendarTable {self.start_year}-{self.end_year}>"

    @property
    def start_year(self) -> int:
        return self._start_year

    @property
    def end_year(self) -> int:
        return self._start_year + len(self._months) - 1

    @property
    def total_days(self) -> int:
        """Number of days covered by the whole table"""
        return self._cumulative[-1]

    def year_range(self) -> Tuple[int, int]:
        """Supported BS years as an inclusive (min, max) pair"""
        return self.start_year, self.end_year

    def contains_year(self, year: int) -> bool:
        return self.start_year <= year <= self.end_year

    def index_of(self, year: int) -> int:
        """
        Table index of a BS year

        Raises:
            OutOfRangeError: If the year is not covered by the table
        """
        if not self.contains_year(year):
            raise OutOfRangeError(
                f"Nepali year {year} out of range. "
                f"Supported years: {self.start_year}-{self.end_year}"
            )
        return year - self.start_year

    def cumulative_days(self, index: int) -> int:
        """Days from the epoch through the end of the year at ``index``"""
        if index < 0:
            return 0
        return self._cumulative[index]

    def month_lengths_at(self, index: int) -> Tuple[int, ...]:
        return self._months[index]

    def month_lengths(self, year: int) -> Tuple[int, ...]:
        return self._months[self.index_of(year)]

    def days_in_year(self, year: int) -> int:
        return sum(self.month_lengths(year))

    def days_in_month(self, year: int, month: int) -> int:
        """
        Number of days in a BS month

        Args:
            year: BS year
            month: BS month (1-12)

        Raises:
            OutOfRangeError: If the year or month is outside the table
        """
        if month < 1 or month > 12:
            raise OutOfRangeError(f"Invalid nepali month {month}, must be between 1 - 12")
        return self.month_lengths(year)[month - 1]

    def display_days_in_month(self, year: int, month: int, lenient: bool = False) -> int:
        """
        Days in a month for calendar grids and pickers.

        With ``lenient=True`` a year outside the table falls back to
        DEFAULT_MONTH_LENGTHS instead of raising. Conversion code must not
        call this.
        """
        if lenient and not self.contains_year(year) and 1 <= month <= 12:
            return DEFAULT_MONTH_LENGTHS[month - 1]
        return self.days_in_month(year, month)


DEFAULT_TABLE = CalendarTable(NEPALI_CALENDAR_DATA)
