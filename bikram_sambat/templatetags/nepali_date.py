"""
Template filters rendering AD dates, timestamps or BS strings as BS dates

    {% load nepali_date %}
    {{ trade.date|bs_format }}            -> 2075-12-25
    {{ trade.date|bs_format:"YYYY/MM/DD" }}
    {{ trade.date|bs_display }}           -> Chaitra 25, 2075
    {{ trade.created_at|bs_display_time }}
"""
import logging

from django import template

from bikram_sambat.conf import get_setting
from bikram_sambat.date import NepaliDate
from bikram_sambat.exceptions import NepaliDateError
from bikram_sambat.formatter import format_nepali_date, format_nepali_datetime

logger = logging.getLogger(__name__)

register = template.Library()

INVALID_DATE = 'Invalid Date'


def _to_nepali_date(value):
    try:
        return NepaliDate.coerce(value)
    except NepaliDateError as e:
        logger.warning("Error converting %r to a BS date: %s", value, e)
        return None


@register.filter
def bs_format(value, pattern=None):
    """Format a date-like value as BS with a YYYY/MM/DD token pattern"""
    if value in (None, ''):
        return ''
    nepali_date = _to_nepali_date(value)
    if nepali_date is None:
        return INVALID_DATE
    return nepali_date.format(pattern or get_setting('DEFAULT_FORMAT'))


@register.filter
def bs_display(value):
    """Month-name form, e.g. "Shrawan 7, 2082" """
    if value in (None, ''):
        return ''
    nepali_date = _to_nepali_date(value)
    if nepali_date is None:
        return INVALID_DATE
    return format_nepali_date(nepali_date)


@register.filter
def bs_display_time(value):
    if value in (None, ''):
        return ''
    nepali_date = _to_nepali_date(value)
    if nepali_date is None:
        return INVALID_DATE
    return format_nepali_datetime(nepali_date)
