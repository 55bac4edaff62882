# -*- coding: utf-8 -*-
"""
Step - A single unit of work inside a stepper.

A step only holds its attributes and publishes two signals:
- step_completed: the user finished the step
- step_reset: the step's progress should be invalidated

The iterator owning the step decides its position and visitation state.
"""

from typing import Optional

from PyQt5.QtCore import QObject, pyqtSignal
from PyQt5.QtWidgets import QWidget


class Step(QObject):
    """
    Attribute holder for a stepper step.

    Steps are compared by identity, never by value, so two steps with the
    same caption are still distinct entries of a sequence.
    """

    # Signals
    step_completed = pyqtSignal(object)  # step
    step_reset = pyqtSignal(object)  # step

    def __init__(
        self,
        caption: str = "",
        description: str = "",
        optional: bool = False,
        editable: bool = False,
        disabled: bool = False,
        cancellable: bool = False,
        content: Optional[QWidget] = None,
        parent: Optional[QObject] = None
    ):
        """
        Initialize the step.

        Args:
            caption: Title shown in the step label
            description: Secondary text shown under the caption
            optional: Whether the step may be skipped
            editable: Whether the step may be re-entered once visited
            disabled: Whether the step can never be navigated to
            cancellable: Whether a cancel action is offered for the step
            content: Widget rendered while the step is active
            parent: Parent object
        """
        super().__init__(parent)
        self.caption = caption
        self.description = description
        self.optional = optional
        self.editable = editable
        self.disabled = disabled
        self.cancellable = cancellable
        self.content = content

    def fire_complete(self):
        """Notify listeners that the step has been completed."""
        self.step_completed.emit(self)

    def fire_reset(self):
        """Notify listeners that the step's progress is no longer valid."""
        self.step_reset.emit(self)

    def __repr__(self) -> str:
        return f"<Step caption={self.caption!r}>"
