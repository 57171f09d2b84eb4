# -*- coding: utf-8 -*-
"""
Wizard Framework - navigation shared by the project wizard.
"""

from .step_navigator import StepNavigator

__all__ = [
    'StepNavigator'
]
