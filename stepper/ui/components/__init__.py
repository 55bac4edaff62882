# -*- coding: utf-8 -*-
"""
Reusable stepper widgets.
"""

from .feedback_panel import FeedbackPanel
from .step_button_bar import StepButtonBar
from .step_content import StepContent
from .step_label import StepLabel

__all__ = [
    'FeedbackPanel',
    'StepButtonBar',
    'StepContent',
    'StepLabel',
]
