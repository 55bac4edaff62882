# -*- coding: utf-8 -*-
"""Events published by the step iterator."""

from dataclasses import dataclass
from enum import Enum
from typing import Any, Optional, Tuple


class NavigationKind(Enum):
    START = "start"
    NEXT = "next"
    PREVIOUS = "previous"
    SKIP = "skip"
    MOVE = "move"
    END = "end"


@dataclass(frozen=True)
class NavigationEvent:
    """
    A transition of the iterator's current step.

    For START and END events, cause holds the operation (NEXT or SKIP)
    that triggered them.
    """
    source: Any
    kind: NavigationKind
    previous: Optional[Any]
    current: Optional[Any]
    cause: Optional[NavigationKind] = None


@dataclass(frozen=True)
class CollectionChangeEvent:
    """A step was added to or removed from the sequence."""
    steps: Tuple[Any, ...]
    step: Any
