"""
Day-count conversion between Gregorian instants and Bikram Sambat dates
"""
from datetime import date, datetime, time, timedelta, tzinfo
from functools import lru_cache
from typing import Optional, Tuple, Union
from zoneinfo import ZoneInfo

from .calendar_data import DEFAULT_TABLE, EPOCH, CalendarTable
from .conf import get_setting
from .exceptions import DateOutOfRangeError, InvalidArgumentError


# Upper bound on days in a BS year, used to estimate a table index
MAX_DAYS_IN_YEAR = 366

BSTriple = Tuple[int, int, int]


class Converter:
    """
    Maps Gregorian instants to BS (year, month, day) triples and back.

    Months in triples are 0-indexed. All arithmetic counts whole days from
    ``epoch``, which is BS day 1 of the table's first year.

    ``tz`` decides which calendar day an instant falls on. Aware datetimes
    are converted into ``tz`` before their date is taken; naive datetimes are
    read as wall-clock time in ``tz``. With ``tz=None`` the host's local
    wall clock is used.
    """

    def __init__(
        self,
        table: CalendarTable = DEFAULT_TABLE,
        epoch: date = EPOCH,
        tz: Optional[Union[tzinfo, str]] = None,
    ):
        if isinstance(tz, str):
            tz = ZoneInfo(tz)
        self.table = table
        self.epoch = epoch
        self.tz = tz

    def __repr__(self) -> str:
        return f"<Converter {self.table!r} epoch={self.epoch} tz={self.tz}>"

    def local_date(self, instant: Union[datetime, date]) -> date:
        """Calendar day of an instant under this converter's day boundary"""
        if isinstance(instant, datetime):
            if instant.utcoffset() is not None:
                instant = instant.astimezone(self.tz)
            return instant.date()
        if isinstance(instant, date):
            return instant
        raise InvalidArgumentError(
            f"Expected a datetime or date, got {type(instant).__name__}"
        )

    def days_since_epoch(self, instant: Union[datetime, date]) -> int:
        return (self.local_date(instant) - self.epoch).days

    def days_to_bs(self, days: int) -> BSTriple:
        """
        Convert a day count from the epoch to a BS triple

        Raises:
            DateOutOfRangeError: If the day is not covered by the table
        """
        table = self.table
        if days < 0 or days >= table.total_days:
            first = self.epoch
            last = self.epoch + timedelta(days=table.total_days - 1)
            raise DateOutOfRangeError(
                f"Date out of range: supported dates are {first.isoformat()} to {last.isoformat()}"
            )

        # The estimate never overshoots since no year is longer than 366 days
        index = days // MAX_DAYS_IN_YEAR
        while days >= table.cumulative_days(index):
            index += 1

        remaining = days - table.cumulative_days(index - 1)
        lengths = table.month_lengths_at(index)
        month = 0
        while remaining >= lengths[month]:
            remaining -= lengths[month]
            month += 1

        return table.start_year + index, month, remaining + 1

    def bs_to_days(self, year: int, month: int, day: int) -> int:
        """
        Count days from the epoch to a BS date

        Month overflow folds into the year, so month 12 is the first month
        of the next year and month -1 the last month of the previous one.
        Days are not checked against the month length.

        Raises:
            OutOfRangeError: If the normalized year is not in the table
        """
        year += month // 12
        month %= 12
        index = self.table.index_of(year)
        lengths = self.table.month_lengths_at(index)
        return self.table.cumulative_days(index - 1) + sum(lengths[:month]) + day - 1

    def gregorian_to_bs(self, instant: Union[datetime, date]) -> BSTriple:
        return self.days_to_bs(self.days_since_epoch(instant))

    def bs_to_gregorian(self, year: int, month: int, day: int) -> datetime:
        """Midnight, in this converter's zone, of the given BS date"""
        return self.day_to_datetime(self.bs_to_days(year, month, day))

    def day_to_datetime(self, days: int) -> datetime:
        return datetime.combine(self.epoch + timedelta(days=days), time(), tzinfo=self.tz)

    def minimum(self) -> datetime:
        """First representable day: BS day 1 of the table's first year"""
        return self.day_to_datetime(0)

    def maximum(self) -> datetime:
        """Last representable day: final day of the table's last year"""
        return self.day_to_datetime(self.table.total_days - 1)

    def now(self) -> datetime:
        return datetime.now(self.tz)


@lru_cache(maxsize=None)
def get_default_converter() -> Converter:
    """Converter for the configured BIKRAM_SAMBAT['TIME_ZONE']"""
    return Converter(tz=get_setting('TIME_ZONE'))
