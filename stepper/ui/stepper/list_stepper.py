# -*- coding: utf-8 -*-
"""
List Stepper - Step list on the left, active step content and buttons on the right.
"""

from typing import Dict, List, Optional

from PyQt5.QtWidgets import QWidget, QHBoxLayout, QVBoxLayout, QFrame

from stepper.models.step import Step
from stepper.services.step_iterator import StepIterator
from stepper.ui.components.step_button_bar import StepButtonBar
from stepper.ui.components.step_content import StepContent
from stepper.ui.design_system import Spacing, StepperTheme
from stepper.ui.stepper.abstract_stepper import AbstractStepper
from stepper.ui.stepper.label_provider import LabelProvider

STEPS_LIST_WIDTH = 320


class ListStepper(AbstractStepper):
    """Stepper that lists the steps next to the active step's content."""

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

    @classmethod
    def from_steps(cls, steps: List[Step], linear: bool = True, **kwargs) -> "ListStepper":
        """Create a list stepper over a new iterator for the given steps."""
        return cls(StepIterator(steps, linear), **kwargs)

    def _setup_ui(self):
        root_layout = QHBoxLayout(self)
        root_layout.setContentsMargins(0, 0, 0, 0)
        root_layout.setSpacing(0)

        # (left) Steps list
        self.steps_list = QWidget()
        self.steps_list.setFixedWidth(STEPS_LIST_WIDTH)
        self.steps_list_layout = QVBoxLayout(self.steps_list)
        self.steps_list_layout.setContentsMargins(Spacing.SM, Spacing.MD, Spacing.SM, Spacing.MD)
        self.steps_list_layout.setSpacing(Spacing.XS)
        root_layout.addWidget(self.steps_list)

        if self.theme.show_divider:
            separator = QFrame()
            separator.setFrameShape(QFrame.VLine)
            separator.setStyleSheet(f"background-color: {self.theme.border_color};")
            separator.setFixedWidth(1)
            root_layout.addWidget(separator)

        # (right) Step content and buttons
        right_panel = QWidget()
        right_layout = QVBoxLayout(right_panel)
        right_layout.setContentsMargins(0, 0, 0, 0)
        right_layout.setSpacing(0)

        self.content = StepContent(self.theme)
        right_layout.addWidget(self.content, 1)

        self.button_bar = StepButtonBar(self.theme)
        self.connect_button_bar(self.button_bar)
        right_layout.addWidget(self.button_bar)

        root_layout.addWidget(right_panel, 1)

    def _refresh_steps_list(self):
        while self.steps_list_layout.count():
            self.steps_list_layout.takeAt(0)

        for step in self.get_steps():
            self.steps_list_layout.addWidget(self.label_provider.get_step_label(step))
        self.steps_list_layout.addStretch(1)

    def button_states(self, step: Step) -> Dict[str, bool]:
        steps = self.get_steps()
        return {
            "back": bool(steps) and steps[0] is not step,
            "cancel": step.cancellable,
            "skip": step.optional,
            "next": True,
        }

    # =========================================================================
    # Rendering
    # =========================================================================

    def refresh(self):
        self.content.prune(self.get_steps())
        self._refresh_steps_list()
        super().refresh()

    def render(self, step: Optional[Step]):
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
        self.content.show_feedback(message)

    def set_buttons_hidden(self, hidden: bool):
        self._buttons_hidden = hidden
        self.button_bar.setVisible(not hidden and self.get_current() is not None)
