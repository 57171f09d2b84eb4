# -*- coding: utf-8 -*-
"""Internal project code: "M" followed by digits."""

import re

from app.config import Config

ODD_DIGITS = ("1", "3", "5", "7", "9")


def to_digits(raw: str) -> str:
    return re.sub(r"[^0-9]", "", raw or "")


def format_internal_code(raw: str) -> str:
    """Prefix + the digits of `raw`, truncated to the maximum length."""
    code = Config.INTERNAL_CODE_PREFIX + to_digits(raw)
    return code[:Config.INTERNAL_CODE_MAX_LENGTH]


def is_last_digit_odd(code: str) -> bool:
    digits = to_digits(code)
    return bool(digits) and digits[-1] in ODD_DIGITS
