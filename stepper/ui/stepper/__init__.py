# -*- coding: utf-8 -*-
"""
Stepper renderers.

Every renderer drives a StepIterator through the AbstractStepper facade
and only decides how steps, labels and buttons are laid out.
"""

from .label_provider import LabelIconStrategy, LabelProvider
from .abstract_stepper import AbstractStepper
from .horizontal_stepper import HorizontalStepper
from .vertical_stepper import VerticalStepper
from .list_stepper import ListStepper

__all__ = [
    'AbstractStepper',
    'HorizontalStepper',
    'LabelIconStrategy',
    'LabelProvider',
    'ListStepper',
    'VerticalStepper',
]
