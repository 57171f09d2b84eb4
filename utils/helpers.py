# -*- coding: utf-8 -*-
"""
Utility helper functions.
"""

import math
import re
from typing import Any, Optional
from urllib.parse import unquote, urlsplit

_NON_NUMERIC = re.compile(r"[^\d.+-]")


def to_number(value: Any) -> float:
    """
    Parse a user-entered amount into a float.

    Currency symbols, separators and spaces are dropped. Anything that does
    not parse to a finite number becomes 0.
    """
    if value is None or value == "" or isinstance(value, bool):
        return 0.0
    if isinstance(value, (int, float)):
        return float(value) if math.isfinite(value) else 0.0

    cleaned = _NON_NUMERIC.sub("", str(value))
    match = re.match(r"[+-]?\d*\.?\d+", cleaned)
    if not match:
        return 0.0
    try:
        number = float(match.group(0))
    except ValueError:
        return 0.0
    return number if math.isfinite(number) else 0.0


def to_optional_number(value: Any) -> Optional[float]:
    """Like to_number() but keeps blank input as None."""
    if value is None or (isinstance(value, str) and not value.strip()):
        return None
    return to_number(value)


def round_half_up(value: float) -> int:
    """Round to the nearest integer, .5 going up (not banker's rounding)."""
    return int(math.floor(value + 0.5))


def is_blank(value: Any) -> bool:
    """True for None and whitespace-only strings."""
    return value is None or (isinstance(value, str) and not value.strip())


def extract_file_name_from_url(url: Optional[str]) -> str:
    """
    Last path segment of a file URL, URL-decoded and without query string.

    Examples:
        >>> extract_file_name_from_url("/media/contracts/%D8%B9%D9%82%D8%AF.pdf?x=1")
        'عقد.pdf'
    """
    if not url:
        return ""
    path = urlsplit(str(url)).path or str(url)
    segment = path.rstrip("/").rsplit("/", 1)[-1]
    return unquote(segment)
