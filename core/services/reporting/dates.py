"""
Date helpers for report values.
"""

import re
from datetime import date, datetime
from typing import Optional

MISSING_DATE = 'N/A'

# English month names, independent of the process locale
MONTH_NAMES = (
    'January', 'February', 'March', 'April', 'May', 'June',
    'July', 'August', 'September', 'October', 'November', 'December',
)

# Strict RFC 3339: date, 'T', time, optional fraction, 'Z' or a numeric offset.
RFC3339_PATTERN = re.compile(
    r'(?P<date>\d{4}-\d{2}-\d{2})T(?P<time>\d{2}:\d{2}:\d{2})(?:\.\d+)?'
    r'(?P<offset>Z|[+-]\d{2}:\d{2})'
)


def format_long_date(value: date) -> str:
    """Format a date as 'January 2, 2006'."""
    return f"{MONTH_NAMES[value.month - 1]} {value.day}, {value.year}"


def parse_timestamp(value: str) -> Optional[datetime]:
    """
    Parse a strict RFC 3339 timestamp.
    
    Args:
        value: Timestamp string such as '2010-05-04T00:00:00Z'
        
    Returns:
        Timezone-aware datetime, or None if the value is not a valid timestamp
    """
    match = RFC3339_PATTERN.fullmatch(value)
    if not match:
        return None
    
    offset = match.group('offset')
    if offset == 'Z':
        offset = '+00:00'
    
    try:
        return datetime.strptime(
            f"{match.group('date')}T{match.group('time')}{offset}",
            '%Y-%m-%dT%H:%M:%S%z'
        )
    except ValueError:
        return None


def normalize_date(value: str) -> str:
    """
    Convert a wire timestamp to a long-form calendar date for display.
    
    Empty input yields 'N/A'. Anything that is not a valid RFC 3339
    timestamp is returned unchanged so the reader still sees it.
    
    Args:
        value: Raw date string from the student record
        
    Returns:
        Display string for the date field
    """
    if not value:
        return MISSING_DATE
    
    parsed = parse_timestamp(value)
    if parsed is None:
        return value
    
    # Calendar date as written, no conversion to the server's timezone
    return format_long_date(parsed.date())
