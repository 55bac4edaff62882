# -*- coding: utf-8 -*-
"""
MD Stepper Data Models
"""

from .step import Step
from .state_tracker import StateTracker, StepState

__all__ = [
    "Step",
    "StateTracker",
    "StepState",
]
