"""
NepaliDate: a BS date bundled with its Gregorian instant
"""
from datetime import date, datetime
from typing import Optional

from .calendar_data import NEPALI_MONTHS
from .converter import Converter, get_default_converter
from .exceptions import InvalidArgumentError
from .formatter import format_date
from .parser import parse


class NepaliDate:
    """
    Immutable BS date paired with the Gregorian instant of the same day.

    ``month`` is 0-indexed (0 = Baisakh). Both representations are always
    derived from one day count, so they never disagree. The ``with_*``
    methods return new values; nothing mutates an existing one.

    Build one with ``NepaliDate(year, month, day)`` or a named constructor:
    ``now()``, ``from_datetime()``, ``from_date()``, ``from_timestamp()``,
    ``from_string()``. ``coerce()`` and ``create()`` accept loosely typed
    input at API boundaries.
    """

    __slots__ = ('_year', '_month', '_day', '_instant', '_converter')

    def __init__(self, year: int, month: int, day: int, converter: Optional[Converter] = None):
        converter = converter or get_default_converter()
        days = converter.bs_to_days(year, month, day)
        self._assign(converter.days_to_bs(days), converter.day_to_datetime(days), converter)

    def _assign(self, triple, instant: datetime, converter: Converter):
        year, month, day = triple
        object.__setattr__(self, '_year', year)
        object.__setattr__(self, '_month', month)
        object.__setattr__(self, '_day', day)
        object.__setattr__(self, '_instant', instant)
        object.__setattr__(self, '_converter', converter)

    def __setattr__(self, name, value):
        raise AttributeError(f"{type(self).__name__} is immutable")

    # -- construction --------------------------------------------------

    @classmethod
    def _from_instant(cls, instant: datetime, converter: Converter) -> 'NepaliDate':
        if instant.utcoffset() is not None:
            instant = instant.astimezone(converter.tz)
        elif converter.tz is not None:
            # Naive input is wall-clock time in the converter's zone
            instant = instant.replace(tzinfo=converter.tz)
        value = cls.__new__(cls)
        value._assign(converter.gregorian_to_bs(instant), instant, converter)
        return value

    @classmethod
    def now(cls, converter: Optional[Converter] = None) -> 'NepaliDate':
        converter = converter or get_default_converter()
        return cls._from_instant(converter.now(), converter)

    @classmethod
    def from_datetime(cls, value: datetime, converter: Optional[Converter] = None) -> 'NepaliDate':
        """Convert a Gregorian datetime, keeping its time of day"""
        if not isinstance(value, datetime):
            raise InvalidArgumentError(f"Expected a datetime, got {type(value).__name__}")
        return cls._from_instant(value, converter or get_default_converter())

    @classmethod
    def from_date(cls, value: date, converter: Optional[Converter] = None) -> 'NepaliDate':
        """Convert a Gregorian date; the instant is its midnight"""
        if isinstance(value, datetime):
            return cls.from_datetime(value, converter)
        if not isinstance(value, date):
            raise InvalidArgumentError(f"Expected a date, got {type(value).__name__}")
        converter = converter or get_default_converter()
        return cls._from_instant(converter.day_to_datetime((value - converter.epoch).days), converter)

    @classmethod
    def from_timestamp(cls, value: float, converter: Optional[Converter] = None) -> 'NepaliDate':
        """Convert a POSIX timestamp in seconds"""
        if isinstance(value, bool) or not isinstance(value, (int, float)):
            raise InvalidArgumentError(f"Expected a numeric timestamp, got {type(value).__name__}")
        converter = converter or get_default_converter()
        return cls._from_instant(datetime.fromtimestamp(value, converter.tz), converter)

    @classmethod
    def from_string(cls, value: str, converter: Optional[Converter] = None) -> 'NepaliDate':
        """Parse "YYYY-MM-DD" (or '.' / '/' separated) with a 1-indexed month"""
        converter = converter or get_default_converter()
        year, month, day = parse(value, converter.table)
        return cls(year, month, day, converter)

    @classmethod
    def coerce(cls, value, converter: Optional[Converter] = None) -> 'NepaliDate':
        """
        Build a NepaliDate from a single value of any supported type

        Raises:
            InvalidArgumentError: If the value's type is not supported
        """
        if isinstance(value, NepaliDate):
            return value.copy()
        if isinstance(value, datetime):
            return cls.from_datetime(value, converter)
        if isinstance(value, date):
            return cls.from_date(value, converter)
        if isinstance(value, str):
            return cls.from_string(value, converter)
        if isinstance(value, (int, float)) and not isinstance(value, bool):
            return cls.from_timestamp(value, converter)
        raise InvalidArgumentError(f"Invalid date argument: {value!r}")

    @classmethod
    def create(cls, *args, converter: Optional[Converter] = None) -> 'NepaliDate':
        """
        Build a NepaliDate from zero, one or three positional arguments

        No arguments gives the current moment, one argument goes through
        ``coerce()`` and three integers are a BS (year, month, day) triple.

        Raises:
            InvalidArgumentError: For any other argument count or shape
        """
        if not args:
            return cls.now(converter)
        if len(args) == 1:
            return cls.coerce(args[0], converter)
        if len(args) == 3:
            if not all(isinstance(arg, int) and not isinstance(arg, bool) for arg in args):
                raise InvalidArgumentError(f"Invalid date arguments: {args!r}")
            return cls(*args, converter=converter)
        raise InvalidArgumentError(f"Invalid argument syntax: expected 0, 1 or 3 arguments, got {len(args)}")

    def copy(self) -> 'NepaliDate':
        value = type(self).__new__(type(self))
        value._assign((self._year, self._month, self._day), self._instant, self._converter)
        return value

    @classmethod
    def minimum(cls, converter: Optional[Converter] = None) -> datetime:
        return (converter or get_default_converter()).minimum()

    @classmethod
    def maximum(cls, converter: Optional[Converter] = None) -> datetime:
        return (converter or get_default_converter()).maximum()

    # -- accessors -----------------------------------------------------

    @property
    def year(self) -> int:
        return self._year

    @property
    def month(self) -> int:
        return self._month

    @property
    def day(self) -> int:
        return self._day

    @property
    def weekday(self) -> int:
        """Day of the week, 0 = Sunday"""
        return (self._instant.weekday() + 1) % 7

    @property
    def hour(self) -> int:
        return self._instant.hour

    @property
    def minute(self) -> int:
        return self._instant.minute

    @property
    def second(self) -> int:
        return self._instant.second

    @property
    def millisecond(self) -> int:
        return self._instant.microsecond // 1000

    @property
    def converter(self) -> Converter:
        return self._converter

    @property
    def days_since_epoch(self) -> int:
        return self._converter.days_since_epoch(self._instant)

    @property
    def days_in_month(self) -> int:
        return self._converter.table.days_in_month(self._year, self._month + 1)

    @property
    def month_name(self) -> str:
        return NEPALI_MONTHS[self._month]

    def to_datetime(self) -> datetime:
        return self._instant

    def to_date(self) -> date:
        return self._instant.date()

    def timestamp(self) -> float:
        return self._instant.timestamp()

    # -- derived values ------------------------------------------------

    def with_year(self, year: int) -> 'NepaliDate':
        return type(self)(year, self._month, self._day, self._converter)

    def with_month(self, month: int) -> 'NepaliDate':
        """Same day in another month; 12 and -1 roll into the next and previous year"""
        return type(self)(self._year, month, self._day, self._converter)

    def with_day(self, day: int) -> 'NepaliDate':
        return type(self)(self._year, self._month, day, self._converter)

    def format(self, pattern: str) -> str:
        return format_date(self, pattern)

    def __eq__(self, other):
        if not isinstance(other, NepaliDate):
            return NotImplemented
        return self._instant == other._instant

    def __hash__(self):
        return hash(self._instant)

    def __str__(self):
        return f"{self._year}/{self._month + 1}/{self._day}"

    def __repr__(self):
        return f"NepaliDate({self._year}, {self._month}, {self._day})"
