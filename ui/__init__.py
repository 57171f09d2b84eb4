# -*- coding: utf-8 -*-
"""Project Records Wizard UI layer (headless parts)."""
