"""
Bikram Sambat - Nepali (BS) and Gregorian (AD) date conversion
"""

__version__ = '1.0.0'
__author__ = 'NEPSE Analyst Team'

# Import commonly used names for easy access
from .calendar_data import (
    DEFAULT_TABLE,
    EPOCH,
    NEPALI_CALENDAR_DATA,
    NEPALI_MONTHS,
    CalendarTable,
)
from .converter import Converter, get_default_converter
from .date import NepaliDate
from .exceptions import (
    DateOutOfRangeError,
    InvalidArgumentError,
    NepaliDateError,
    OutOfRangeError,
    ParseError,
)
from .formatter import format_date, format_nepali_date, format_nepali_datetime
from .parser import parse
from .utils import (
    ad_to_bs,
    bs_to_ad,
    format_bs_date,
    get_bs_date_from_ad,
    get_nepali_month_name,
    is_valid_nepali_date,
)

__all__ = [
    'CalendarTable',
    'DEFAULT_TABLE',
    'EPOCH',
    'NEPALI_CALENDAR_DATA',
    'NEPALI_MONTHS',
    'Converter',
    'get_default_converter',
    'NepaliDate',
    'NepaliDateError',
    'ParseError',
    'OutOfRangeError',
    'DateOutOfRangeError',
    'InvalidArgumentError',
    'format_date',
    'format_nepali_date',
    'format_nepali_datetime',
    'parse',
    'bs_to_ad',
    'ad_to_bs',
    'is_valid_nepali_date',
    'format_bs_date',
    'get_nepali_month_name',
    'get_bs_date_from_ad',
]
