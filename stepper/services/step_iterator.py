# -*- coding: utf-8 -*-
"""
Step Iterator - Navigation state machine for stepper steps.

Handles:
- Ordered step collection (add after current, remove current)
- Per-step visitation state (VISITED / UNVISITED)
- Transition legality for linear and free navigation
- Navigation (next/previous/skip/move_to) and its events
"""

from typing import Iterable, List, Optional, Tuple

from PyQt5.QtCore import QObject, pyqtSignal

from stepper.models.step import Step
from stepper.models.state_tracker import StateTracker, StepState
from stepper.services.exceptions import (
    EmptySequenceException,
    IllegalTransitionException,
    UnsupportedMutationException,
)
from stepper.services.navigation_events import (
    CollectionChangeEvent,
    NavigationEvent,
    NavigationKind,
)
from stepper.utils.logger import get_logger

logger = get_logger(__name__)


class StepIterator(QObject):
    """
    Iterates over steps, allowing transitions based upon the step attributes.

    Responsibilities:
    - Own the step sequence and the state tracker
    - Decide which step is reachable next
    - Emit signals for collection changes and navigation
    """

    # Signals
    element_added = pyqtSignal(object)  # CollectionChangeEvent
    element_removed = pyqtSignal(object)  # CollectionChangeEvent
    navigation_started = pyqtSignal(object)  # NavigationEvent
    navigated = pyqtSignal(object)  # NavigationEvent (NEXT, PREVIOUS, SKIP, MOVE)
    navigation_ended = pyqtSignal(object)  # NavigationEvent

    def __init__(
        self,
        steps: Optional[Iterable[Step]] = None,
        linear: bool = False,
        start_at: Optional[Step] = None,
        parent: Optional[QObject] = None
    ):
        """
        Initialize the iterator.

        Args:
            steps: Steps to add, in navigation order
            linear: True for strict in-order navigation, False for free navigation
            start_at: Optional step the stepper should start at
            parent: Parent object
        """
        super().__init__(parent)
        self._steps: List[Step] = []
        self._state_tracker: StateTracker[Step] = StateTracker()

        self._linear = linear
        self._current: Optional[Step] = None
        self._start_at = start_at
        self._read_only = False
        self._locked = False

        for step in steps or []:
            self.add(step)

    # =========================================================================
    # Attributes
    # =========================================================================

    def is_linear(self) -> bool:
        return self._linear

    def set_linear(self, linear: bool):
        self._linear = linear

    def is_read_only(self) -> bool:
        return self._read_only

    def set_read_only(self, read_only: bool):
        self._read_only = read_only

    def is_locked(self) -> bool:
        """Locking is only consulted by renderers; navigation ignores it."""
        return self._locked

    def set_locked(self, locked: bool):
        self._locked = locked

    def get_start_at(self) -> Optional[Step]:
        return self._start_at

    def get_steps(self) -> Tuple[Step, ...]:
        """Get a read-only snapshot of the steps."""
        return tuple(self._steps)

    def get_current(self) -> Optional[Step]:
        """Get the current step, or None if navigation has not started."""
        return self._current

    def __len__(self) -> int:
        return len(self._steps)

    def __contains__(self, step) -> bool:
        return step in self._steps

    def __getitem__(self, index: int) -> Step:
        return self._steps[index]

    def __setitem__(self, index, step):
        self.set(step)

    # =========================================================================
    # Completion
    # =========================================================================

    def is_complete(self) -> bool:
        """Check if every step of the sequence has been visited."""
        return all(
            self._state_tracker.get_state(step) is StepState.VISITED
            for step in self._steps
        )

    def is_step_complete(self, step: Step) -> bool:
        return self._state_tracker.get_state(step) is StepState.VISITED

    def reset_step(self, step: Step):
        """Mark a step as unvisited."""
        self._set_state(step, StepState.UNVISITED)

    def set_step_visited(self, step: Step):
        """Mark a step as visited."""
        self._set_state(step, StepState.VISITED)

    def _set_state(self, step: Step, state: StepState):
        if step not in self._steps:
            logger.warning(f"Ignoring state {state.value} for unknown step {step!r}")
            return
        self._state_tracker.set_state(step, state)
        logger.debug(f"{step!r} is now {state.value}")

    def get_last_visitable_step(self) -> Step:
        """
        Get the last step that is not disabled.

        Raises:
            EmptySequenceException: If every step is disabled or there are no steps
        """
        enabled = [step for step in self._steps if not step.disabled]
        if not enabled:
            raise EmptySequenceException("No enabled step available")
        return enabled[-1]

    # =========================================================================
    # Transition legality
    # =========================================================================

    def is_transition_allowed(self, to: Optional[Step], current_should_be_complete: bool = False) -> bool:
        """
        Check if the current step may be left for the given step.

        Args:
            to: Target step, None meaning "no step"
            current_should_be_complete: Treat the current step as if it were
                eligible itself, so that it stays part of the open steps

        Returns:
            True if the transition is allowed
        """
        if to is None:
            return True

        if to.disabled:
            return False

        if to not in self._steps or to is self._current or self.is_complete():
            return False

        if self._state_tracker.get_state(to) is StepState.VISITED and to.editable:
            return True

        open_steps = [
            step for step in self._steps
            if (current_should_be_complete or step is not self._current)
            and self._state_tracker.get_state(step) is StepState.UNVISITED
            and not step.disabled
        ]

        if self._linear:
            return bool(open_steps) and open_steps[0] is to
        return to in open_steps

    # =========================================================================
    # Navigation
    # =========================================================================

    def next_index(self) -> int:
        if not self._steps:
            return -1

        if self._current is None:
            return 0

        for index, step in enumerate(self._steps):
            if self._state_tracker.get_state(step) is not StepState.UNVISITED:
                continue
            if step is self._current or self.is_transition_allowed(step):
                return index
        return -1

    def has_next(self) -> bool:
        return self.next_index() >= 0

    def next(self) -> Optional[Step]:
        """
        Move to the next step.

        Returns:
            The new current step

        Raises:
            IllegalTransitionException: If no next step is available
        """
        next_index = self.next_index()
        if next_index < 0:
            logger.warning("Cannot go next: no next step available")
            raise IllegalTransitionException("No next step available", operation="next")

        if self._read_only:
            logger.debug("Read-only: next() ignored")
            return self._current

        previous = self._current
        self._current = self._steps[next_index]
        logger.info(f"Navigating next: {previous!r} → {self._current!r}")
        self._notify_forward(NavigationKind.NEXT, previous)
        return self._current

    def previous_index(self) -> int:
        if self._current is None:
            return -1

        limit = self._steps.index(self._current)
        for index in range(limit - 1, -1, -1):
            if self.is_transition_allowed(self._steps[index]):
                return index
        return -1

    def has_previous(self) -> bool:
        return self.previous_index() >= 0

    def previous(self) -> Optional[Step]:
        """
        Move to the closest reachable step before the current one.

        Raises:
            IllegalTransitionException: If no previous step is available
        """
        previous_index = self.previous_index()
        if previous_index < 0:
            logger.warning("Cannot go back: no previous step available")
            raise IllegalTransitionException("No previous step available", operation="previous")

        if self._read_only:
            logger.debug("Read-only: previous() ignored")
            return self._current

        previous = self._current
        self._current = self._steps[previous_index]
        logger.info(f"Navigating back: {previous!r} → {self._current!r}")
        self.navigated.emit(NavigationEvent(self, NavigationKind.PREVIOUS, previous, self._current))
        return self._current

    def _skip_index(self) -> int:
        for index, step in enumerate(self._steps):
            if (self._state_tracker.get_state(step) is StepState.UNVISITED
                    and self.is_transition_allowed(step)):
                return index
        return -1

    def has_skip(self) -> bool:
        return (
            self._current is not None
            and self._current.optional
            and self.has_next()
            and self._skip_index() >= 0
        )

    def skip(self) -> Optional[Step]:
        """
        Leave the current optional step without completing it.

        Raises:
            IllegalTransitionException: If the current step cannot be skipped
        """
        if not self.has_skip():
            logger.warning(f"Cannot skip {self._current!r}")
            raise IllegalTransitionException("Current step cannot be skipped", operation="skip")

        if self._read_only:
            logger.debug("Read-only: skip() ignored")
            return self._current

        previous = self._current
        self._current = self._steps[self._skip_index()]
        logger.info(f"Skipping: {previous!r} → {self._current!r}")
        self._notify_forward(NavigationKind.SKIP, previous)
        return self._current

    def has_move_to(self, step: Optional[Step]) -> bool:
        return self.is_transition_allowed(step, self._linear)

    def move_to(self, step: Optional[Step]) -> Optional[Step]:
        """
        Jump to the given step.

        Args:
            step: Target step, None to leave the sequence without a current step

        Raises:
            IllegalTransitionException: If the transition is not allowed
        """
        if not self.has_move_to(step):
            logger.warning(f"Cannot move to {step!r}")
            raise IllegalTransitionException(
                f"Transition to {step!r} not allowed", operation="move_to", target=step
            )

        if self._read_only:
            logger.debug(f"Read-only: move_to({step!r}) ignored")
            return self._current

        previous = self._current
        self._current = step
        logger.info(f"Moving: {previous!r} → {step!r}")
        self.navigated.emit(NavigationEvent(self, NavigationKind.MOVE, previous, step))
        return self._current

    def _notify_forward(self, kind: NavigationKind, previous: Optional[Step]):
        if previous is None:
            self.navigation_started.emit(
                NavigationEvent(self, NavigationKind.START, None, self._current, cause=kind)
            )

        self.navigated.emit(NavigationEvent(self, kind, previous, self._current))

        if not self.has_skip() and not self.has_next():
            logger.info("Navigation reached its end")
            self.navigation_ended.emit(
                NavigationEvent(self, NavigationKind.END, previous, self._current, cause=kind)
            )

    # =========================================================================
    # Mutation
    # =========================================================================

    def add(self, step: Step):
        """
        Insert a step right after the current step, or at the end if there is none.

        Raises:
            UnsupportedMutationException: If the step is already part of the sequence
        """
        if step in self._steps:
            raise UnsupportedMutationException(f"{step!r} is already part of the sequence")

        if self._current is None:
            insert_index = len(self._steps)
        else:
            insert_index = self._steps.index(self._current) + 1

        self._steps.insert(insert_index, step)
        step.step_completed.connect(self._on_step_completed)
        step.step_reset.connect(self._on_step_reset)
        logger.debug(f"Added {step!r} at position {insert_index}")

        self.element_added.emit(CollectionChangeEvent(tuple(self._steps), step))

    def remove(self):
        """
        Remove the current step and move on to the next reachable step.

        If no step is reachable afterwards, the current step becomes None.

        Raises:
            IllegalTransitionException: If there is no current step
        """
        removed = self._current
        if removed is None:
            raise IllegalTransitionException("No current step to remove", operation="remove")

        self._state_tracker.remove(removed)
        self._steps.remove(removed)
        removed.step_completed.disconnect(self._on_step_completed)
        removed.step_reset.disconnect(self._on_step_reset)
        logger.debug(f"Removed {removed!r}")

        # Current still refers to the removed step here, so it is outside
        # the sequence and never matches a candidate.
        next_index = self.next_index()
        target = self._steps[next_index] if 0 <= next_index < len(self._steps) else None

        self._current = None
        self.element_removed.emit(CollectionChangeEvent(tuple(self._steps), removed))

        self._current = target
        logger.info(f"Moving after removal: {removed!r} → {target!r}")
        self.navigated.emit(NavigationEvent(self, NavigationKind.MOVE, removed, target))

    def set(self, step: Step):
        raise UnsupportedMutationException("Steps can only be added after the current step")

    # =========================================================================
    # Signal Handlers
    # =========================================================================

    def _on_step_completed(self, step: Step):
        self._state_tracker.set_state(step, StepState.VISITED)
        logger.debug(f"{step!r} completed")

    def _on_step_reset(self, step: Step):
        self._state_tracker.set_state(step, StepState.UNVISITED)
        logger.debug(f"{step!r} reset")
