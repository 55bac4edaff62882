# -*- coding: utf-8 -*-
"""
Vertical Stepper - Labels stacked vertically, the active step expanded below its label.
"""

from typing import Optional

from PyQt5.QtWidgets import QWidget, QVBoxLayout, QLabel

from stepper.models.step import Step
from stepper.services.step_iterator import StepIterator
from stepper.ui.components.step_button_bar import StepButtonBar
from stepper.ui.components.step_content import StepContent
from stepper.ui.design_system import Spacing, StepperTheme
from stepper.ui.stepper.abstract_stepper import AbstractStepper
from stepper.ui.stepper.label_provider import LabelProvider


class VerticalStepper(AbstractStepper):
    """Stepper that shows the steps in a vertical style."""

    def __init__(
        self,
        step_iterator: StepIterator,
        label_provider: Optional[LabelProvider] = None,
        theme: Optional[StepperTheme] = None,
        parent: Optional[QWidget] = None
    ):
        super().__init__(step_iterator, label_provider, theme, parent)
        self._buttons_hidden = False

        self._setup_ui()
        self.refresh()

    def _setup_ui(self):
        self.steps_layout = QVBoxLayout(self)
        self.steps_layout.setContentsMargins(Spacing.MD, Spacing.MD, Spacing.MD, Spacing.MD)
        self.steps_layout.setSpacing(Spacing.XS)

        # Panel shown under the active label, indented to the label text
        self.active_panel = QWidget(self)
        panel_layout = QVBoxLayout(self.active_panel)
        indent = self.theme.icon_size + 2 * Spacing.SM
        panel_layout.setContentsMargins(indent, 0, 0, Spacing.SM)
        panel_layout.setSpacing(Spacing.SM)

        self.feedback_label = QLabel()
        self.feedback_label.setStyleSheet(f"color: {self.theme.secondary_text_color};")
        self.feedback_label.hide()
        panel_layout.addWidget(self.feedback_label)

        self.content = StepContent(self.theme)
        panel_layout.addWidget(self.content, 1)

        self.button_bar = StepButtonBar(self.theme)
        self.connect_button_bar(self.button_bar)
        panel_layout.addWidget(self.button_bar)

        self.active_panel.hide()

    def _refresh_labels(self):
        while self.steps_layout.count():
            self.steps_layout.takeAt(0)

        for step in self.get_steps():
            self.steps_layout.addWidget(self.label_provider.get_step_label(step))
        self.steps_layout.addStretch(1)

    # =========================================================================
    # Rendering
    # =========================================================================

    def refresh(self):
        self.content.prune(self.get_steps())
        self._refresh_labels()
        super().refresh()

    def render(self, step: Optional[Step]):
        self.steps_layout.removeWidget(self.active_panel)
        self.feedback_label.hide()

        if step is None or step not in self.step_iterator:
            self.active_panel.hide()
            return

        label = self.label_provider.get_step_label(step)
        self.steps_layout.insertWidget(self.steps_layout.indexOf(label) + 1, self.active_panel, 1)
        self.active_panel.show()

        self.content.show_step(step)
        self.button_bar.update_for(**self.button_states(step))
        self.button_bar.setVisible(not self._buttons_hidden)

    def show_feedback(self, message: Optional[str]):
        if message is None:
            self.render(self.get_current())
            return

        self.button_bar.hide()
        self.feedback_label.setText(message)
        self.feedback_label.show()
        self.content.show_feedback(message)

    def set_buttons_hidden(self, hidden: bool):
        self._buttons_hidden = hidden
        self.button_bar.setVisible(not hidden and self.get_current() is not None)
