# -*- coding: utf-8 -*-
"""
MD Stepper Services
"""

from .exceptions import (
    EmptySequenceException,
    IllegalTransitionException,
    StepperException,
    UnsupportedMutationException,
)
from .navigation_events import CollectionChangeEvent, NavigationEvent, NavigationKind
from .step_iterator import StepIterator

__all__ = [
    "CollectionChangeEvent",
    "EmptySequenceException",
    "IllegalTransitionException",
    "NavigationEvent",
    "NavigationKind",
    "StepIterator",
    "StepperException",
    "UnsupportedMutationException",
]
