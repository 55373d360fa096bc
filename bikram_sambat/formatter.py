"""
String rendering of BS dates
"""
import re

from .calendar_data import NEPALI_MONTHS


# Longest tokens first so YYYY is never read as two YY
FORMAT_TOKENS = re.compile(r'YYYY|YY|MM|M|DD|D')


def format_date(value, pattern: str) -> str:
    """
    Substitute date tokens in a pattern

    Tokens: YYYY (zero-padded year), YY (last two digits of the year),
    MM / M (padded / unpadded 1-indexed month), DD / D (padded / unpadded
    day). Everything else is copied unchanged.

    Args:
        value: Object with ``year``, 0-indexed ``month`` and ``day``
        pattern: Format string, e.g. "YYYY-MM-DD"
    """
    year = value.year
    month = value.month + 1
    day = value.day

    replacements = {
        'YYYY': f'{year:04d}',
        'YY': f'{year % 100:02d}',
        'MM': f'{month:02d}',
        'M': str(month),
        'DD': f'{day:02d}',
        'D': str(day),
    }
    return FORMAT_TOKENS.sub(lambda match: replacements[match.group(0)], pattern)


def format_nepali_date(value) -> str:
    """Month-name form, e.g. "Shrawan 7, 2082" """
    return f"{NEPALI_MONTHS[value.month]} {value.day}, {value.year}"


def format_nepali_datetime(value) -> str:
    """Month-name form with 24-hour time, e.g. "Shrawan 7, 2082 14:30" """
    return f"{format_nepali_date(value)} {value.hour:02d}:{value.minute:02d}"
