# -*- coding: utf-8 -*-
"""Wizard step graph and step validation."""

from .step_graph import StepGraphResolver, WizardStep, STEP_INDEX
from .step_validator import StepValidator

__all__ = ['StepGraphResolver', 'WizardStep', 'STEP_INDEX', 'StepValidator']
