# -*- coding: utf-8 -*-
"""Translation dictionaries (ar, en)."""
