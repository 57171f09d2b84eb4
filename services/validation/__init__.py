# -*- coding: utf-8 -*-
"""Validation services package."""

from .validation_strategy import ValidationStrategy, SetupValidator
from .validation_factory import ValidationFactory
from .internal_code import format_internal_code, is_last_digit_odd

__all__ = [
    'ValidationStrategy', 'SetupValidator',
    'ValidationFactory', 'format_internal_code', 'is_last_digit_odd',
]
