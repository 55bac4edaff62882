# -*- coding: utf-8 -*-
"""Centralized error message mapper."""

from stepper.services.exceptions import (
    EmptySequenceException,
    IllegalTransitionException,
    StepperException,
    UnsupportedMutationException,
)
from stepper.utils.logger import get_logger

logger = get_logger(__name__)


_TRANSITION_MESSAGES = {
    "next": "There is no further step to continue with.",
    "previous": "There is no earlier step to go back to.",
    "skip": "This step cannot be skipped.",
    "move_to": "This step cannot be opened right now.",
    "remove": "There is no active step to remove.",
}


def map_transition_error(error: IllegalTransitionException) -> str:
    """Map an illegal transition to a user-friendly message."""
    return _TRANSITION_MESSAGES.get(error.operation, "This navigation is not possible.")


def map_exception(error: Exception, context: str = None) -> str:
    """Map any exception to a user-friendly message.

    Technical details are logged only.
    """
    if isinstance(error, StepperException) and not error.context and context:
        error.context = context

    if isinstance(error, IllegalTransitionException):
        return map_transition_error(error)

    if isinstance(error, UnsupportedMutationException):
        logger.warning(f"Unsupported mutation: {error}")
        return "The steps cannot be changed this way."

    if isinstance(error, EmptySequenceException):
        return "There are no available steps."

    # Log unexpected errors
    logger.warning(f"Unexpected error: {error}")
    return str(error) or type(error).__name__
