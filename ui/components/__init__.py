# -*- coding: utf-8 -*-
"""
Project Records Wizard UI Components
"""

from .date_mask import DateMaskEngine, MaskState

__all__ = [
    "DateMaskEngine",
    "MaskState",
]
