"""
Utility functions for Nepali-English date conversion

These work with 1-indexed months and plain dicts, for callers that do not
need a NepaliDate value.
"""
from datetime import date, datetime
from typing import Dict, Union

from django.core.cache import cache

from .calendar_data import DEFAULT_TABLE, NEPALI_MONTHS
from .conf import get_setting, settings_available
from .converter import get_default_converter
from .exceptions import OutOfRangeError


def get_nepali_month_name(month: int) -> str:
    """Get Nepali month name from month number (1-12)"""
    if 1 <= month <= 12:
        return NEPALI_MONTHS[month - 1]
    raise OutOfRangeError(f"Invalid month: {month}")


def is_valid_nepali_date(year: int, month: int, day: int) -> bool:
    """Validate if a Nepali date is valid"""
    if not DEFAULT_TABLE.contains_year(year):
        return False
    if month < 1 or month > 12:
        return False
    if day < 1 or day > DEFAULT_TABLE.days_in_month(year, month):
        return False
    return True


def _cache_timeout():
    # No cache backend exists outside a Django project
    if not settings_available():
        return None
    return get_setting('CACHE_TIMEOUT')


def _cache_get(key):
    if _cache_timeout() is None:
        return None
    return cache.get(key)


def _cache_set(key, value):
    timeout = _cache_timeout()
    if timeout is not None:
        cache.set(key, value, timeout)


def bs_to_ad(year: int, month: int, day: int) -> date:
    """
    Convert Bikram Sambat (BS) date to Anno Domini (AD) date

    Args:
        year: BS year
        month: BS month (1-12)
        day: BS day

    Returns:
        date object representing the AD date

    Raises:
        OutOfRangeError: If date is invalid or year not supported
    """
    cache_key = f"bs_to_ad_{year}_{month}_{day}"
    cached_result = _cache_get(cache_key)
    if cached_result:
        return cached_result

    if not is_valid_nepali_date(year, month, day):
        start_year, end_year = DEFAULT_TABLE.year_range()
        raise OutOfRangeError(
            f"Invalid Nepali date: {year}/{month}/{day}. "
            f"Supported years: {start_year}-{end_year}"
        )

    result_date = get_default_converter().bs_to_gregorian(year, month - 1, day).date()
    _cache_set(cache_key, result_date)

    return result_date


def ad_to_bs(ad_date: Union[datetime, date, str]) -> Dict[str, Union[int, str]]:
    """
    Convert Anno Domini (AD) date to Bikram Sambat (BS) date

    Args:
        ad_date: datetime, date, or 'YYYY-MM-DD' string

    Returns:
        Dictionary with keys: year, month (1-12), day, month_name

    Raises:
        DateOutOfRangeError: If the date is outside the supported range
    """
    if isinstance(ad_date, str):
        ad_date = datetime.strptime(ad_date, '%Y-%m-%d').date()

    converter = get_default_converter()
    local_date = converter.local_date(ad_date)

    cache_key = f"ad_to_bs_{local_date.isoformat()}"
    cached_result = _cache_get(cache_key)
    if cached_result:
        return cached_result

    year, month, day = converter.gregorian_to_bs(local_date)
    result = {
        'year': year,
        'month': month + 1,
        'day': day,
        'month_name': NEPALI_MONTHS[month],
    }
    _cache_set(cache_key, result)

    return result


def format_bs_date(year: int, month: int, day: int, format='full') -> str:
    """
    Format BS date in different styles

    Args:
        year, month, day: BS date components (month 1-12)
        format: 'full', 'short', 'numeric'

    Returns:
        Formatted date string
    """
    month_name = get_nepali_month_name(month)

    if format == 'full':
        return f"{month_name} {day}, {year}"
    elif format == 'short':
        return f"{month_name[:3]} {day}, {year}"
    elif format == 'numeric':
        return f"{year}/{month:02d}/{day:02d}"
    else:
        return f"{year}/{month}/{day}"


def get_bs_date_from_ad(ad_date: Union[datetime, date], format='dict'):
    """
    Convenience function to get BS date from AD date

    Args:
        ad_date: datetime or date object
        format: 'dict', 'string', or 'formatted'

    Returns:
        BS date in requested format
    """
    bs_date = ad_to_bs(ad_date)

    if format == 'dict':
        return bs_date
    elif format == 'string':
        return f"{bs_date['year']}/{bs_date['month']}/{bs_date['day']}"
    elif format == 'formatted':
        return format_bs_date(bs_date['year'], bs_date['month'], bs_date['day'])
    else:
        return bs_date
