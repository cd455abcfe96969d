"""Utility functions for date operations."""

import logging
from datetime import datetime, timezone

import dateutil.parser

logger = logging.getLogger("jira-mcp")

UNKNOWN_DATE = "Unknown"


def parse_date(date_str: str | int | None) -> datetime | None:
    """
    Parse a date string from any format to a datetime object for type consistency.

    The input string `date_str` accepts:
    - None
    - Epoch timestamp (only contains digits and is in milliseconds)
    - Other formats supported by `dateutil.parser` (ISO 8601, RFC 3339, etc.)

    Args:
        date_str: Date string

    Returns:
        Parsed date string or None if date_str is None / empty string
    """

    if not date_str:
        return None
    if isinstance(date_str, int) or date_str.isdigit():
        return datetime.fromtimestamp(int(date_str) / 1000, tz=timezone.utc)
    return dateutil.parser.parse(date_str)


def format_locale_date(date_str: str | None) -> str:
    """
    Render a Jira timestamp as a calendar date in the current locale.

    Only the date is shown; the time of day and timezone are dropped.

    Args:
        date_str: Jira timestamp (e.g. '2024-01-01T10:00:00.000+0000')

    Returns:
        The locale date, 'Unknown' when missing, or the input when unparseable
    """
    try:
        parsed = parse_date(date_str)
    except (ValueError, OverflowError) as e:
        logger.debug(f"Could not parse date '{date_str}': {e}")
        return str(date_str)
    if parsed is None:
        return UNKNOWN_DATE
    return parsed.strftime("%x")
