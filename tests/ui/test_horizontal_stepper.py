# -*- coding: utf-8 -*-
"""
Tests for HorizontalStepper and the AbstractStepper facade.

Tests cover:
- Starting and walking through the steps with the buttons
- Completion, cancel, errors and feedback messages
- Locking and read-only mode
- Label bar layout following sequence changes
"""

import pytest
from PyQt5.QtCore import Qt

from stepper.models.step import Step
from stepper.services.exceptions import IllegalTransitionException
from stepper.services.navigation_events import NavigationKind
from stepper.services.step_iterator import StepIterator
from stepper.ui.error_handler import ErrorHandler
from stepper.ui.stepper import HorizontalStepper
from stepper.ui.stepper import abstract_stepper
from stepper.ui.stepper.label_provider import ICON_ERROR
from stepper.ui.stepper.horizontal_stepper import LABEL_STRETCH


@pytest.fixture
def stepper_steps(qapp):
    return [
        Step("A"),
        Step("B", optional=True),
        Step("C", cancellable=True),
        Step("D"),
    ]


@pytest.fixture
def stepper(qtbot, stepper_steps):
    """Create a started linear horizontal stepper."""
    widget = HorizontalStepper(StepIterator(stepper_steps, linear=True), divider_expand_ratio=0.75)
    qtbot.addWidget(widget)
    widget.show()
    widget.start()
    return widget


def _dividers(stepper):
    layout = stepper.label_bar_layout
    items = [layout.itemAt(i).widget() for i in range(layout.count())]
    return [w for w in items if w is not None and w.objectName() == "labelDivider"]


class TestStart:
    """Test starting the stepper."""

    def test_start_activates_first_step(self, stepper, stepper_steps):
        assert stepper.get_current() is stepper_steps[0]

    def test_start_twice_is_ignored(self, stepper, stepper_steps):
        stepper.start()
        assert stepper.get_current() is stepper_steps[0]

    def test_start_at_reachable_step(self, qtbot, stepper_steps):
        widget = HorizontalStepper(StepIterator(stepper_steps, start_at=stepper_steps[2]))
        qtbot.addWidget(widget)
        widget.start()
        assert widget.get_current() is stepper_steps[2]

    def test_start_at_unreachable_step(self, qtbot, stepper_steps):
        widget = HorizontalStepper(
            StepIterator(stepper_steps, linear=True, start_at=stepper_steps[2])
        )
        qtbot.addWidget(widget)
        widget.start()
        assert widget.get_current() is stepper_steps[0]

    def test_step_activated_signal(self, qtbot, stepper_steps):
        widget = HorizontalStepper(StepIterator(stepper_steps, linear=True))
        qtbot.addWidget(widget)

        with qtbot.waitSignal(widget.step_activated, timeout=1000) as blocker:
            widget.start()
        assert blocker.args[0].kind is NavigationKind.NEXT
        assert blocker.args[0].current is stepper_steps[0]


class TestButtons:
    """Test the button bar of the active step."""

    def test_first_step_buttons(self, stepper):
        bar = stepper.button_bar
        assert bar.btn_back.isHidden()
        assert bar.btn_skip.isHidden()
        assert bar.btn_cancel.isHidden()
        assert not bar.btn_next.isHidden()

    def test_next_button_completes_and_advances(self, stepper, stepper_steps, qtbot):
        qtbot.mouseClick(stepper.button_bar.btn_next, Qt.LeftButton)

        assert stepper.is_step_complete(stepper_steps[0])
        assert stepper.get_current() is stepper_steps[1]
        assert not stepper.button_bar.btn_skip.isHidden()

    def test_skip_button(self, stepper, stepper_steps):
        stepper.next()
        stepper.button_bar.skip_clicked.emit()

        assert stepper.get_current() is stepper_steps[2]
        assert not stepper.is_step_complete(stepper_steps[1])
        assert not stepper.button_bar.btn_cancel.isHidden()

    def test_cancel_button(self, stepper, stepper_steps, qtbot):
        stepper.next()
        stepper.skip()

        with qtbot.waitSignal(stepper.step_cancelled, timeout=1000) as blocker:
            stepper.button_bar.cancel_clicked.emit()
        assert blocker.args == [stepper_steps[2]]

    def test_cancel_ignored_on_regular_step(self, stepper, qtbot):
        with qtbot.assertNotEmitted(stepper.step_cancelled):
            stepper.cancel()

    def test_walk_to_completion(self, stepper, qtbot):
        for _ in range(3):
            stepper.next()

        with qtbot.waitSignal(stepper.stepper_completed, timeout=1000) as blocker:
            stepper.next()

        assert blocker.args == [stepper]
        assert stepper.is_complete()
        assert stepper.button_bar.isHidden()


class TestErrors:
    """Test errors raised behind the buttons."""

    def test_illegal_skip_shows_error(self, stepper, stepper_steps):
        stepper.button_bar.skip_clicked.emit()

        assert isinstance(stepper.get_error(), IllegalTransitionException)
        label = stepper.label_provider.get_step_label(stepper_steps[0])
        assert label.icon_text() == ICON_ERROR
        assert stepper.get_current() is stepper_steps[0]

    def test_next_clears_error(self, stepper, stepper_steps):
        stepper.show_error(ValueError("Invalid input"))
        assert stepper.get_error() is not None

        stepper.next()
        assert stepper.get_error(stepper_steps[0]) is None

    def test_error_on_other_step(self, stepper, stepper_steps):
        error = ValueError("Invalid input")
        stepper.show_error(error, stepper_steps[3])
        assert stepper.get_error(stepper_steps[3]) is error
        assert stepper.get_error() is None

        stepper.hide_error(stepper_steps[3])
        assert stepper.get_error(stepper_steps[3]) is None

    def test_handled_error_is_mapped_once(self, stepper, stepper_steps, monkeypatch):
        """Test the handler passes its mapped message on to the label."""
        def fail(*args, **kwargs):
            raise AssertionError("error mapped a second time")

        monkeypatch.setattr(abstract_stepper, "map_exception", fail)
        error = IllegalTransitionException("No skip", operation="skip")

        message = ErrorHandler.handle(error, stepper, context="skip")

        assert message == "This step cannot be skipped."
        assert error.context == "skip"
        assert stepper.get_error() is error
        label = stepper.label_provider.get_step_label(stepper_steps[0])
        assert label.get_error() == message


class TestFeedback:
    """Test feedback messages."""

    def test_feedback_replaces_labels_and_buttons(self, stepper):
        stepper.show_feedback_message("Saving...")

        assert stepper.get_feedback_message() == "Saving..."
        assert stepper.label_bar.isHidden()
        assert stepper.button_bar.isHidden()
        assert stepper.content.is_showing_feedback()
        assert stepper.feedback_label.text() == "Saving..."

    def test_hide_feedback_restores_step(self, stepper):
        stepper.show_feedback_message("Saving...")
        stepper.hide_feedback_message()

        assert stepper.get_feedback_message() is None
        assert not stepper.label_bar.isHidden()
        assert not stepper.button_bar.isHidden()
        assert not stepper.content.is_showing_feedback()

    def test_navigation_clears_feedback(self, stepper):
        stepper.show_feedback_message("Saving...")
        stepper.next()

        assert stepper.get_feedback_message() is None
        assert not stepper.content.is_showing_feedback()


class TestLockAndReadOnly:
    """Test lock and read-only modes."""

    def test_lock_hides_buttons_and_blocks_navigation(self, stepper, stepper_steps):
        stepper.lock_stepper()
        assert stepper.is_stepper_locked()
        assert stepper.button_bar.isHidden()

        stepper.next()
        assert stepper.get_current() is stepper_steps[0]
        assert not stepper.is_step_complete(stepper_steps[0])

    def test_unlock_restores_buttons(self, stepper):
        stepper.lock_stepper()
        stepper.unlock_stepper()

        assert not stepper.is_stepper_locked()
        assert not stepper.button_bar.isHidden()

    def test_read_only_blocks_next(self, stepper, stepper_steps):
        stepper.set_read_only(True)
        stepper.next()

        assert stepper.is_read_only()
        assert stepper.get_current() is stepper_steps[0]
        assert not stepper.is_step_complete(stepper_steps[0])


class TestLabelBar:
    """Test the label bar layout."""

    def test_labels_and_dividers(self, stepper):
        assert stepper.label_bar_layout.count() == 7
        assert len(_dividers(stepper)) == 3

    def test_divider_stretch(self, stepper):
        assert stepper.label_bar_layout.stretch(0) == LABEL_STRETCH
        assert stepper.label_bar_layout.stretch(1) == 75

        stepper.set_divider_expand_ratio(2.0)
        assert stepper.get_divider_expand_ratio() == 2.0
        assert stepper.label_bar_layout.stretch(1) == 200

    def test_add_step_extends_label_bar(self, stepper, stepper_steps, qapp):
        extra = Step("X")
        stepper.step_iterator.add(extra)

        assert stepper.get_steps()[1] is extra
        assert len(_dividers(stepper)) == 4

    def test_remove_step_shrinks_label_bar(self, stepper, stepper_steps):
        stepper.step_iterator.remove()

        assert stepper.get_current() is stepper_steps[1]
        assert len(_dividers(stepper)) == 2

    def test_label_click_moves_in_free_mode(self, qtbot, stepper_steps):
        widget = HorizontalStepper(StepIterator(stepper_steps, linear=False))
        qtbot.addWidget(widget)
        widget.start()

        widget.label_provider.label_clicked.emit(stepper_steps[3])
        assert widget.get_current() is stepper_steps[3]

    def test_label_click_ignored_when_not_allowed(self, stepper, stepper_steps):
        stepper.label_provider.label_clicked.emit(stepper_steps[3])
        assert stepper.get_current() is stepper_steps[0]
