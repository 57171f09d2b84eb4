# -*- coding: utf-8 -*-
"""
Project Records Wizard - Utility Module
"""

from .logger import get_logger, setup_logger
from .helpers import to_number, round_half_up

__all__ = [
    "get_logger",
    "setup_logger",
    "to_number",
    "round_half_up",
]
