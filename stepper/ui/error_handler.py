# -*- coding: utf-8 -*-
"""Centralized error handler for the stepper UI layer."""

from stepper.services.error_mapper import map_exception
from stepper.services.exceptions import StepperException
from stepper.utils.logger import get_logger

logger = get_logger(__name__)


class ErrorHandler:
    """Maps exceptions raised behind stepper controls to messages on the stepper."""

    @staticmethod
    def handle(error: Exception, stepper=None,
               context: str = None, show_on_stepper: bool = True) -> str:
        """
        Handle any exception: log it, map it, optionally show it on the stepper.

        Args:
            error: The exception to handle
            stepper: Stepper showing the error on its current step
            context: Context for error mapping (e.g., "next", "skip")
            show_on_stepper: Whether to show the error to the user

        Returns:
            User-friendly error message string
        """
        if isinstance(error, StepperException):
            logger.warning(f"Rejected {context or 'operation'}: {error}")
        else:
            logger.error(f"Error in {context or 'unknown'}: {error}", exc_info=True)

        message = map_exception(error, context)

        if show_on_stepper and stepper is not None:
            stepper.show_error(error, message=message)

        return message
