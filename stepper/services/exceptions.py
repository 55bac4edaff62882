# -*- coding: utf-8 -*-
"""Custom exceptions for the stepper."""


class StepperException(Exception):
    """Base exception for stepper navigation and mutation errors."""

    def __init__(self, message: str, context: str = None):
        super().__init__(message)
        self.message = message
        self.context = context


class IllegalTransitionException(StepperException):
    """Exception raised when a navigation request has no legal target."""

    def __init__(self, message: str, operation: str = None,
                 target=None, context: str = None):
        super().__init__(message, context=context)
        self.operation = operation
        self.target = target

    def __str__(self):
        if self.operation:
            return f"[{self.operation}] {self.message}"
        return self.message


class UnsupportedMutationException(StepperException):
    """Exception raised for sequence changes other than add-after-current and remove-current."""


class EmptySequenceException(StepperException):
    """Exception raised when no enabled step exists."""
