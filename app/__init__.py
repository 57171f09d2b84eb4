# -*- coding: utf-8 -*-
"""
Project Records Wizard - Application Core Module
"""

from .config import Config

__all__ = ["Config"]
