# -*- coding: utf-8 -*-
"""
Horizontal Stepper - Label bar on top, step content below, buttons at the bottom.
"""

from typing import Optional

from PyQt5.QtWidgets import QWidget, QVBoxLayout, QHBoxLayout, QFrame, QLabel

from stepper.app.config import Config
from stepper.models.step import Step
from stepper.services.step_iterator import StepIterator
from stepper.ui.components.step_button_bar import StepButtonBar
from stepper.ui.components.step_content import StepContent
from stepper.ui.design_system import Spacing, StepperTheme
from stepper.ui.stepper.abstract_stepper import AbstractStepper
from stepper.ui.stepper.label_provider import LabelProvider

LABEL_STRETCH = 100


class HorizontalStepper(AbstractStepper):
    """Stepper that shows the steps in a horizontal label bar."""

    def __init__(
        self,
        step_iterator: StepIterator,
        label_provider: Optional[LabelProvider] = None,
        theme: Optional[StepperTheme] = None,
        divider_expand_ratio: Optional[float] = None,
        parent: Optional[QWidget] = None
    ):
        """
        Initialize the stepper.

        Args:
            step_iterator: Iterator handling the navigation over the steps
            label_provider: Provider of the step labels
            theme: Theming table
            divider_expand_ratio: Width of the dividers relative to the labels
            parent: Parent widget
        """
        super().__init__(step_iterator, label_provider, theme, parent)
        if divider_expand_ratio is None:
            divider_expand_ratio = Config.DIVIDER_EXPAND_RATIO
        self.divider_expand_ratio = divider_expand_ratio
        self._buttons_hidden = False

        self._setup_ui()
        self.refresh()

    def _setup_ui(self):
        root_layout = QVBoxLayout(self)
        root_layout.setContentsMargins(0, 0, 0, 0)
        root_layout.setSpacing(Spacing.SM)

        # Label bar
        self.label_bar = QWidget()
        self.label_bar_layout = QHBoxLayout(self.label_bar)
        self.label_bar_layout.setContentsMargins(Spacing.MD, Spacing.SM, Spacing.MD, Spacing.SM)
        self.label_bar_layout.setSpacing(Spacing.SM)
        root_layout.addWidget(self.label_bar)

        # Feedback message (replaces the labels while shown)
        self.feedback_label = QLabel()
        self.feedback_label.setStyleSheet(f"color: {self.theme.secondary_text_color};")
        self.feedback_label.hide()
        root_layout.addWidget(self.feedback_label)

        # Separator
        if self.theme.show_divider:
            separator = QFrame()
            separator.setFrameShape(QFrame.HLine)
            separator.setStyleSheet(f"background-color: {self.theme.border_color};")
            separator.setFixedHeight(1)
            root_layout.addWidget(separator)

        # Step content
        self.content = StepContent(self.theme)
        root_layout.addWidget(self.content, 1)

        # Buttons
        self.button_bar = StepButtonBar(self.theme)
        self.connect_button_bar(self.button_bar)
        root_layout.addWidget(self.button_bar)

    def _refresh_label_bar(self):
        while self.label_bar_layout.count():
            item = self.label_bar_layout.takeAt(0)
            widget = item.widget()
            if widget is not None and widget.objectName() == "labelDivider":
                widget.deleteLater()

        steps = self.get_steps()
        for index, step in enumerate(steps):
            label = self.label_provider.get_step_label(step)
            self.label_bar_layout.addWidget(label, LABEL_STRETCH)
            if index < len(steps) - 1:
                self._add_divider()

    def _add_divider(self):
        divider = QFrame()
        divider.setObjectName("labelDivider")
        divider.setFixedHeight(1)
        divider.setStyleSheet(f"background-color: {self.theme.divider_color};")
        self.label_bar_layout.addWidget(divider, int(round(self.divider_expand_ratio * LABEL_STRETCH)))

    def set_divider_expand_ratio(self, ratio: float):
        """Set the width of the dividers between the labels (labels count as 1)."""
        self.divider_expand_ratio = ratio
        self._refresh_label_bar()

    def get_divider_expand_ratio(self) -> float:
        return self.divider_expand_ratio

    # =========================================================================
    # Rendering
    # =========================================================================

    def refresh(self):
        self.content.prune(self.get_steps())
        self._refresh_label_bar()
        super().refresh()

    def render(self, step: Optional[Step]):
        self.label_bar.show()
        self.feedback_label.hide()
        self.content.show_step(step)

        if step is None:
            self.button_bar.hide()
            return

        self.button_bar.update_for(**self.button_states(step))
        self.button_bar.setVisible(not self._buttons_hidden)

    def show_feedback(self, message: Optional[str]):
        if message is None:
            self.render(self.get_current())
            return

        self.button_bar.hide()
        self.label_bar.hide()
        self.feedback_label.setText(message)
        self.feedback_label.show()
        self.content.show_feedback(message)

    def set_buttons_hidden(self, hidden: bool):
        self._buttons_hidden = hidden
        self.button_bar.setVisible(not hidden and self.get_current() is not None)
