# -*- coding: utf-8 -*-
"""
MD Stepper Application Core Module
"""

from .config import Config

__all__ = ["Config"]
