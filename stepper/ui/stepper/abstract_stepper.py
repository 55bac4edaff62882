# -*- coding: utf-8 -*-
"""
Abstract Stepper - Base class for all stepper renderers.

Provides the facade the host application talks to:
- start/back/next/skip delegating to the StepIterator
- Per-step errors and a transient feedback message
- Locking and read-only mode

Renderers only implement how things look:
- render(): Show a step as the active one
- show_feedback(): Show or hide a feedback message
- set_buttons_hidden(): Hide or show the navigation buttons
"""

from typing import Dict, Optional, Tuple
from abc import ABCMeta, abstractmethod

from PyQt5.QtWidgets import QWidget
from PyQt5.QtCore import pyqtSignal

from stepper.app.config import Config
from stepper.models.step import Step
from stepper.services.error_mapper import map_exception
from stepper.services.exceptions import StepperException
from stepper.services.navigation_events import CollectionChangeEvent, NavigationEvent
from stepper.services.step_iterator import StepIterator
from stepper.ui.components.step_button_bar import StepButtonBar
from stepper.ui.design_system import DEFAULT_THEME, StepperTheme
from stepper.ui.error_handler import ErrorHandler
from stepper.ui.stepper.label_provider import LabelIconStrategy, LabelProvider
from stepper.utils.logger import get_logger

logger = get_logger(__name__)


# Combine PyQt5 metaclass with ABC metaclass
class ABCQWidgetMeta(type(QWidget), ABCMeta):
    """Metaclass that combines PyQt5's metaclass with ABC."""
    pass


class AbstractStepper(QWidget, metaclass=ABCQWidgetMeta):
    """
    Abstract base class for steppers.

    Subclasses must implement:
    - render(step)
    - show_feedback(message)
    - set_buttons_hidden(hidden)
    """

    # Signals
    stepper_completed = pyqtSignal(object)  # stepper
    step_activated = pyqtSignal(object)  # NavigationEvent
    step_cancelled = pyqtSignal(object)  # step

    def __init__(
        self,
        step_iterator: StepIterator,
        label_provider: Optional[LabelProvider] = None,
        theme: Optional[StepperTheme] = None,
        parent: Optional[QWidget] = None
    ):
        """
        Initialize the stepper.

        Args:
            step_iterator: Iterator handling the navigation over the steps
            label_provider: Provider of the step labels, created if omitted
            theme: Theming table, taken from the label provider if omitted
            parent: Parent widget
        """
        super().__init__(parent)
        self.setObjectName("stepperRoot")

        if theme is None:
            theme = label_provider.theme if label_provider is not None else DEFAULT_THEME
        self.theme = theme

        self.step_iterator = step_iterator
        self.label_provider = label_provider or LabelProvider(
            step_iterator,
            icon_strategy=LabelIconStrategy[Config.LABEL_ICON_STRATEGY],
            theme=theme,
        )

        self._errors: Dict[Step, BaseException] = {}
        self._feedback_message: Optional[str] = None

        # Connect iterator signals
        self.step_iterator.navigated.connect(self._on_navigated)
        self.step_iterator.element_added.connect(self._on_collection_changed)
        self.step_iterator.element_removed.connect(self._on_collection_changed)
        self.label_provider.label_clicked.connect(self._on_label_clicked)

        self.setStyleSheet(self.theme.container_stylesheet())

    # =========================================================================
    # Abstract Methods - Must be implemented by subclasses
    # =========================================================================

    @abstractmethod
    def render(self, step: Optional[Step]):
        """Show the given step as the active one (None shows no step)."""
        pass

    @abstractmethod
    def show_feedback(self, message: Optional[str]):
        """Show a transition message, or restore the step view when None."""
        pass

    @abstractmethod
    def set_buttons_hidden(self, hidden: bool):
        """Hide or show the navigation buttons."""
        pass

    # =========================================================================
    # Queries
    # =========================================================================

    def get_steps(self) -> Tuple[Step, ...]:
        return self.step_iterator.get_steps()

    def get_current(self) -> Optional[Step]:
        return self.step_iterator.get_current()

    def is_complete(self) -> bool:
        return self.step_iterator.is_complete()

    def is_step_complete(self, step: Step) -> bool:
        return self.step_iterator.is_step_complete(step)

    def button_states(self, step: Step) -> Dict[str, bool]:
        """Which navigation buttons are offered for the given active step."""
        return {
            "back": self.step_iterator.has_previous(),
            "cancel": step.cancellable,
            "skip": step.optional,
            "next": not self.is_complete(),
        }

    # =========================================================================
    # Navigation
    # =========================================================================

    def start(self):
        """Start the stepper on its first step, or on the start step if reachable."""
        if self.get_current() is not None:
            logger.debug("Stepper already started")
            return

        self.step_iterator.next()

        start_at = self.step_iterator.get_start_at()
        if start_at is not None and start_at is not self.get_current() \
                and self.step_iterator.has_move_to(start_at):
            self.step_iterator.move_to(start_at)

    def back(self):
        """Move a step back."""
        if self.is_stepper_locked():
            logger.debug("Stepper locked: back() ignored")
            return
        self.step_iterator.previous()

    def next(self):
        """Complete the current step and move a step forward."""
        if self.is_stepper_locked():
            logger.debug("Stepper locked: next() ignored")
            return

        current = self.get_current()
        if current is None:
            self.start()
            return

        if self.is_read_only():
            logger.debug("Read-only: next() ignored")
            return

        self.hide_error(current)
        current.fire_complete()

        if self.step_iterator.has_next():
            self.step_iterator.next()
        else:
            self._complete()

    def skip(self):
        """Skip the current step and move a step forward."""
        if self.is_stepper_locked():
            logger.debug("Stepper locked: skip() ignored")
            return
        self.step_iterator.skip()

    def cancel(self):
        """Signal that the user cancelled the current step."""
        current = self.get_current()
        if current is not None and current.cancellable:
            logger.info(f"Cancelled {current!r}")
            self.step_cancelled.emit(current)

    def _complete(self):
        logger.info("Stepper completed")
        self.set_buttons_hidden(True)
        self.stepper_completed.emit(self)

    # =========================================================================
    # Errors & Feedback
    # =========================================================================

    def show_error(
        self,
        error: Optional[BaseException],
        step: Optional[Step] = None,
        message: Optional[str] = None
    ):
        """
        Show the given error for a step (the current step if omitted).

        Passing None as error hides the error. The label shows message when
        given, otherwise the mapped text of the error.
        """
        if step is None:
            step = self.get_current()
        if step is None:
            return

        if error is None:
            self._errors.pop(step, None)
            self.label_provider.set_error(step, None)
        else:
            self._errors[step] = error
            if message is None:
                message = map_exception(error)
            self.label_provider.set_error(step, message)

    def hide_error(self, step: Optional[Step] = None):
        self.show_error(None, step)

    def get_error(self, step: Optional[Step] = None) -> Optional[BaseException]:
        if step is None:
            step = self.get_current()
        return self._errors.get(step)

    def show_feedback_message(self, message: Optional[str]):
        """Show the given feedback message (None hides it)."""
        self._feedback_message = message
        self.show_feedback(message)

    def hide_feedback_message(self):
        self.show_feedback_message(None)

    def get_feedback_message(self) -> Optional[str]:
        return self._feedback_message

    # =========================================================================
    # Lock & Read-only
    # =========================================================================

    def lock_stepper(self):
        """Lock the stepper to the current step."""
        self.step_iterator.set_locked(True)
        self.set_buttons_hidden(True)

    def unlock_stepper(self):
        self.step_iterator.set_locked(False)
        self.set_buttons_hidden(False)
        self.render(self.get_current())

    def is_stepper_locked(self) -> bool:
        return self.step_iterator.is_locked()

    def set_read_only(self, read_only: bool):
        self.step_iterator.set_read_only(read_only)

    def is_read_only(self) -> bool:
        return self.step_iterator.is_read_only()

    def refresh(self):
        """
        Refresh the stepper (labels, content and buttons).

        Use this method if a step has changed.
        """
        self.label_provider.refresh()
        if self._feedback_message is None:
            self.render(self.get_current())

    # =========================================================================
    # Button Handlers
    # =========================================================================

    def connect_button_bar(self, button_bar: StepButtonBar):
        """Wire a button bar to the navigation handlers."""
        button_bar.back_clicked.connect(self._handle_back)
        button_bar.cancel_clicked.connect(self.cancel)
        button_bar.skip_clicked.connect(self._handle_skip)
        button_bar.next_clicked.connect(self._handle_next)

    def _handle_back(self):
        self._run_guarded(self.back, "previous")

    def _handle_next(self):
        self._run_guarded(self.next, "next")

    def _handle_skip(self):
        self._run_guarded(self.skip, "skip")

    def _run_guarded(self, action, context: str):
        try:
            action()
        except StepperException as e:
            ErrorHandler.handle(e, self, context=context)

    # =========================================================================
    # Event Handlers
    # =========================================================================

    def _on_navigated(self, event: NavigationEvent):
        """Handle a transition of the iterator."""
        self._feedback_message = None
        self.render(event.current)
        self.step_activated.emit(event)

    def _on_collection_changed(self, event: CollectionChangeEvent):
        for step in list(self._errors):
            if step not in event.steps:
                del self._errors[step]
        self.refresh()

    def _on_label_clicked(self, step: Step):
        if self.is_stepper_locked() or self.is_read_only():
            return
        if self.step_iterator.has_move_to(step):
            self.step_iterator.move_to(step)
