# -*- coding: utf-8 -*-
"""Project records wizard."""

from .project_context import ProjectWizardContext

__all__ = ['ProjectWizardContext']
