# -*- coding: utf-8 -*-
"""Visitation state tracking for steps."""

from enum import Enum
from typing import Dict, Generic, Hashable, TypeVar

T = TypeVar("T", bound=Hashable)


class StepState(Enum):
    UNVISITED = "unvisited"
    VISITED = "visited"


class StateTracker(Generic[T]):
    """Maps elements to a StepState. Unknown elements read as UNVISITED."""

    def __init__(self):
        self._states: Dict[T, StepState] = {}

    def get_state(self, element: T) -> StepState:
        return self._states.get(element, StepState.UNVISITED)

    def set_state(self, element: T, state: StepState):
        self._states[element] = state

    def remove(self, element: T):
        self._states.pop(element, None)

    def __contains__(self, element) -> bool:
        return element in self._states

    def __len__(self) -> int:
        return len(self._states)
