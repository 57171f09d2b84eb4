# -*- coding: utf-8 -*-
"""
DateTime Utilities

Conversions between the display format (DD/MM/YYYY) used by the wizard
forms and the ISO format (YYYY-MM-DD) stored by the backend.
"""

import calendar
import re
from datetime import datetime, date
from typing import Optional, Union

_ISO_DATE = re.compile(r"^(\d{4})-(\d{2})-(\d{2})$")
_DISPLAY_DATE = re.compile(r"^(\d{2})[/-](\d{2})[/-](\d{4})$")


def parse_date(value: Union[str, date, datetime, None]) -> Optional[date]:
    """
    Parse an ISO or DD/MM/YYYY (or DD-MM-YYYY) string into a date.

    Returns None for empty input or for strings that are not a real
    calendar date (e.g. 31/02/2024).
    """
    if value is None or value == "":
        return None
    if isinstance(value, datetime):
        return value.date()
    if isinstance(value, date):
        return value

    text = str(value).strip()
    if "T" in text:
        text = text.split("T")[0]

    match = _ISO_DATE.match(text)
    if match:
        year, month, day = match.groups()
    else:
        match = _DISPLAY_DATE.match(text)
        if not match:
            return None
        day, month, year = match.groups()

    try:
        return date(int(year), int(month), int(day))
    except ValueError:
        return None


def to_iso_date(value: Union[str, date, datetime, None]) -> Optional[str]:
    """
    Convert a date-like value to YYYY-MM-DD.

    Examples:
        >>> to_iso_date("15/01/1990")
        '1990-01-15'
        >>> to_iso_date("1990-01-15")
        '1990-01-15'
        >>> to_iso_date("")
    """
    parsed = parse_date(value)
    return parsed.isoformat() if parsed else None


def to_display_date(value: Union[str, date, datetime, None]) -> str:
    """Convert a date-like value to DD/MM/YYYY, or '' when not a date."""
    parsed = parse_date(value)
    return parsed.strftime("%d/%m/%Y") if parsed else ""


def add_months(value: date, months: int) -> date:
    """
    Add calendar months to a date.

    The day is clamped to the last day of the target month
    (31 Jan + 1 month -> 28/29 Feb).
    """
    month_index = value.month - 1 + months
    year = value.year + month_index // 12
    month = month_index % 12 + 1
    day = min(value.day, calendar.monthrange(year, month)[1])
    return date(year, month, day)
