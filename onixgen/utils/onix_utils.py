"""Utility functions for ONIX generation"""
import logging
import re
from datetime import date, datetime
from decimal import Decimal, InvalidOperation

from .onix_constants import (
    DATE_FORMAT_YYYY,
    DATE_FORMAT_YYYYMM,
    DATE_FORMAT_YYYYMMDD,
    DATESTAMP_FORMAT,
)

logger = logging.getLogger(__name__)

_CONTROL_CHARS = re.compile(r'[\x00-\x08\x0B\x0C\x0E-\x1F\x7F]')


def is_present(value):
    """Check whether an optional product field carries exportable data.

    None, blank strings and empty collections are absent; everything else
    (including 0 and False) is present.
    """
    if value is None:
        return False
    if isinstance(value, str):
        return bool(value.strip())
    if isinstance(value, (list, tuple, set, frozenset, dict)):
        return len(value) > 0
    return True


def strip_control_chars(text):
    """Remove characters XML 1.0 cannot carry"""
    return _CONTROL_CHARS.sub('', text)


def clean_text(text):
    """Clean and format text content"""
    if not text:
        return ""
    text = strip_control_chars(str(text))
    return text.strip()


def format_number(value):
    """Render a numeric value without a spurious trailing fraction"""
    if isinstance(value, bool):
        return str(value).lower()
    if isinstance(value, float) and value.is_integer():
        return str(int(value))
    if isinstance(value, Decimal):
        if value == value.to_integral_value():
            return str(value.quantize(Decimal(1)))
        return str(value.normalize())
    return str(value)


def format_price(amount):
    """Format a price amount with at least two decimal places.

    Amounts with more precision are written unchanged.
    """
    try:
        value = Decimal(str(amount))
        if value.is_finite() and value.as_tuple().exponent < -2:
            return str(value)
        return str(value.quantize(Decimal('0.01')))
    except (InvalidOperation, ValueError) as e:
        logger.warning(f"Price formatting error for {amount}: {str(e)}")
        raise


def format_date(value):
    """Format a date as YYYYMMDD"""
    return value.strftime("%Y%m%d")


def format_datestamp(value):
    """Format a datetime for ONIX ``datestamp`` attributes"""
    if isinstance(value, datetime):
        return value.strftime(DATESTAMP_FORMAT)
    if isinstance(value, date):
        return format_date(value)
    return str(value)


def format_partial_date(year=None, month=None, day=None):
    """Build a possibly partial date and its list 55 format code.

    Returns (None, None) when not even the year is known.
    """
    if year and month and day:
        return f"{year:04d}{month:02d}{day:02d}", DATE_FORMAT_YYYYMMDD
    if year and month:
        return f"{year:04d}{month:02d}", DATE_FORMAT_YYYYMM
    if year:
        return f"{year:04d}", DATE_FORMAT_YYYY
    return None, None


def strip_separators(identifier):
    """Drop dashes and spaces from tax or product identifiers"""
    return re.sub(r'[\s-]', '', str(identifier))


def dialect_at_least(dialect, minimum):
    """Compare dotted dialect versions numerically"""
    def as_tuple(version):
        return tuple(int(part) for part in str(version).split('.'))
    return as_tuple(dialect) >= as_tuple(minimum)
