# -*- coding: utf-8 -*-
"""
Shared test fixtures.
"""

import os

# Widgets are created without a display
os.environ.setdefault("QT_QPA_PLATFORM", "offscreen")

import pytest

from stepper.models.step import Step
from stepper.services.step_iterator import StepIterator


@pytest.fixture
def steps(qapp):
    """Four plain steps A, B, C, D."""
    return [Step(caption=name) for name in ("A", "B", "C", "D")]


@pytest.fixture
def linear_iterator(steps):
    return StepIterator(steps, linear=True)


@pytest.fixture
def free_iterator(steps):
    return StepIterator(steps, linear=False)


class SignalRecorder:
    """Collects the events emitted by a StepIterator, in order."""

    def __init__(self, iterator: StepIterator):
        self.events = []
        iterator.element_added.connect(lambda e: self.events.append(("added", e)))
        iterator.element_removed.connect(lambda e: self.events.append(("removed", e)))
        iterator.navigation_started.connect(lambda e: self.events.append(("started", e)))
        iterator.navigated.connect(lambda e: self.events.append(("navigated", e)))
        iterator.navigation_ended.connect(lambda e: self.events.append(("ended", e)))

    def names(self):
        return [name for name, _ in self.events]

    def clear(self):
        self.events.clear()


@pytest.fixture
def recorder_for():
    """Factory attaching a SignalRecorder to an iterator."""
    return SignalRecorder
