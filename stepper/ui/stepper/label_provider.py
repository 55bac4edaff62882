# -*- coding: utf-8 -*-
"""
Label Provider - Creates step labels and keeps them in sync with the iterator.
"""

from enum import Enum
from typing import Callable, Dict, Optional, Set

from PyQt5.QtCore import QObject, pyqtSignal

from stepper.models.step import Step
from stepper.services.navigation_events import (
    CollectionChangeEvent,
    NavigationEvent,
    NavigationKind,
)
from stepper.services.step_iterator import StepIterator
from stepper.ui.components.step_label import StepLabel
from stepper.ui.design_system import DEFAULT_THEME, StepperTheme
from stepper.utils.logger import get_logger

logger = get_logger(__name__)

ICON_COMPLETE = "✓"
ICON_EDITABLE = "✎"
ICON_SKIPPED = "↷"
ICON_ERROR = "!"


class LabelIconStrategy(Enum):
    """Which state icons a label may show instead of its number."""

    DEFAULT = (True, True, True)
    NUMBERS_ONLY = (False, False, False)

    def __init__(self, allow_nexted: bool, allow_skipped: bool, allow_editable: bool):
        self.allow_nexted = allow_nexted
        self.allow_skipped = allow_skipped
        self.allow_editable = allow_editable


class LabelProvider(QObject):
    """
    Provides one StepLabel per step.

    Listens to the iterator so labels reflect the active, complete, skipped
    and error state of their step after every transition.
    """

    # Signals
    label_clicked = pyqtSignal(object)  # step

    def __init__(
        self,
        step_iterator: StepIterator,
        label_factory: Optional[Callable[[StepperTheme], StepLabel]] = None,
        icon_strategy: LabelIconStrategy = LabelIconStrategy.DEFAULT,
        theme: StepperTheme = DEFAULT_THEME,
        parent: Optional[QObject] = None
    ):
        super().__init__(parent)
        self.step_iterator = step_iterator
        self.label_factory = label_factory or StepLabel
        self.icon_strategy = icon_strategy
        self.theme = theme

        self._labels: Dict[Step, StepLabel] = {}
        self._skipped: Set[Step] = set()
        self._errors: Dict[Step, str] = {}

        self.step_iterator.navigated.connect(self._on_navigated)
        self.step_iterator.element_removed.connect(self._on_element_removed)

    def get_step_label(self, step: Step) -> StepLabel:
        """Get the (cached) label of a step, refreshed to its current state."""
        label = self._labels.get(step)
        if label is None:
            label = self.label_factory(self.theme)
            label.clicked.connect(lambda s=step: self.label_clicked.emit(s))
            self._labels[step] = label
        self.refresh_label(step)
        return label

    def set_icon_strategy(self, icon_strategy: LabelIconStrategy):
        self.icon_strategy = icon_strategy
        self.refresh()

    def set_error(self, step: Step, message: Optional[str]):
        """Show an error on a step's label (None clears it)."""
        if message is None:
            self._errors.pop(step, None)
        else:
            self._errors[step] = message
        if step in self._labels:
            self.refresh_label(step)

    def is_skipped(self, step: Step) -> bool:
        return step in self._skipped and not self.step_iterator.is_step_complete(step)

    def get_icon_text(self, step: Step) -> str:
        if step in self._errors:
            return ICON_ERROR

        strategy = self.icon_strategy
        complete = self.step_iterator.is_step_complete(step)
        if complete and step.editable and strategy.allow_editable \
                and step is not self.step_iterator.get_current():
            return ICON_EDITABLE
        if complete and strategy.allow_nexted:
            return ICON_COMPLETE
        if self.is_skipped(step) and strategy.allow_skipped:
            return ICON_SKIPPED

        steps = self.step_iterator.get_steps()
        return str(steps.index(step) + 1) if step in steps else ""

    def refresh_label(self, step: Step):
        label = self._labels[step]
        label.set_caption(step.caption)
        label.set_error(self._errors.get(step))
        label.set_description(step.description)
        label.set_icon_text(self.get_icon_text(step))
        label.set_active(step is self.step_iterator.get_current())
        label.set_complete(self.step_iterator.is_step_complete(step))
        label.set_disabled(step.disabled)

    def refresh(self):
        """Refresh every label created so far."""
        for step in list(self._labels):
            if step in self.step_iterator:
                self.refresh_label(step)

    # =========================================================================
    # Signal Handlers
    # =========================================================================

    def _on_navigated(self, event: NavigationEvent):
        if event.kind is NavigationKind.SKIP and event.previous is not None:
            self._skipped.add(event.previous)
        self.refresh()

    def _on_element_removed(self, event: CollectionChangeEvent):
        self._skipped.discard(event.step)
        self._errors.pop(event.step, None)
        label = self._labels.pop(event.step, None)
        if label is not None:
            logger.debug(f"Dropping label of {event.step!r}")
            label.deleteLater()
