# -*- coding: utf-8 -*-
"""
MD Stepper - Multi-step wizard components for PyQt5.
"""

__version__ = "1.0.0"
