# -*- coding: utf-8 -*-
"""
Step Content Component - Shows the active step's content or a feedback message.
"""

from typing import Iterable, Optional

from PyQt5.QtWidgets import QStackedWidget, QWidget

from stepper.models.step import Step
from stepper.ui.components.feedback_panel import FeedbackPanel
from stepper.ui.design_system import DEFAULT_THEME, StepperTheme


class StepContent(QStackedWidget):
    """Stack holding the content widgets of the steps that were shown."""

    def __init__(self, theme: StepperTheme = DEFAULT_THEME, parent=None):
        super().__init__(parent)
        self.empty_page = QWidget()
        self.feedback_panel = FeedbackPanel(theme)
        self.addWidget(self.empty_page)
        self.addWidget(self.feedback_panel)

    def show_step(self, step: Optional[Step]):
        if step is None or step.content is None:
            self.setCurrentWidget(self.empty_page)
            return

        if self.indexOf(step.content) < 0:
            self.addWidget(step.content)
        self.setCurrentWidget(step.content)

    def show_feedback(self, message: str):
        self.feedback_panel.set_message(message)
        self.setCurrentWidget(self.feedback_panel)

    def is_showing_feedback(self) -> bool:
        return self.currentWidget() is self.feedback_panel

    def prune(self, steps: Iterable[Step]):
        """Drop content widgets of steps that are no longer in the sequence."""
        keep = [step.content for step in steps if step.content is not None]
        for index in range(self.count() - 1, -1, -1):
            widget = self.widget(index)
            if widget is self.empty_page or widget is self.feedback_panel:
                continue
            if not any(widget is content for content in keep):
                self.removeWidget(widget)
