"""
Error handling utilities - Custom exceptions and silent-fallback helpers.

Configuration mistakes raise. Calendar computations never raise to the caller:
they report failure through safe_compute() and the public helpers fall back
to the original value.
"""

import logging
from typing import Any, Callable, Dict, Optional, Tuple, Type


class DateHelperError(Exception):
    """Base exception class for the datehelper library"""

    def __init__(self, message: str, details: Optional[Dict[str, Any]] = None):
        super().__init__(message)
        self.details = details or {}

    def __str__(self):
        base_msg = super().__str__()
        if self.details:
            details_str = ", ".join([f"{k}={v}" for k, v in self.details.items()])
            return f"{base_msg} (Details: {details_str})"
        return base_msg


class ConfigurationError(DateHelperError):
    """Exception raised for unknown calendars, time zones, locales or invalid settings"""

    def __init__(self, message: str, config_key: Optional[str] = None,
                 config_value: Optional[Any] = None, **kwargs):
        details = kwargs
        if config_key:
            details['config_key'] = config_key
        if config_value is not None:
            details['config_value'] = config_value

        super().__init__(message, details)


class CalendarComputationError(DateHelperError):
    """Exception describing a calendar computation that produced no value"""

    def __init__(self, message: str, operation: Optional[str] = None,
                 calendar: Optional[str] = None, **kwargs):
        details = kwargs
        if operation:
            details['operation'] = operation
        if calendar:
            details['calendar'] = calendar

        super().__init__(message, details)


class DateParsingError(DateHelperError):
    """Exception raised while matching a string against a date pattern"""

    def __init__(self, message: str, pattern: Optional[str] = None,
                 value: Optional[str] = None, **kwargs):
        details = kwargs
        if pattern:
            details['pattern'] = pattern
        if value is not None:
            details['value'] = value

        super().__init__(message, details)


class IntervalError(DateHelperError):
    """Exception raised when an operand is not a date-time interval"""

    def __init__(self, message: str, operand: Optional[Any] = None, **kwargs):
        details = kwargs
        if operand is not None:
            details['operand_type'] = type(operand).__name__

        super().__init__(message, details)


# Errors the calendar engine may raise for out-of-range or invalid components
COMPUTATION_ERRORS: Tuple[Type[Exception], ...] = (
    ArithmeticError,
    ValueError,
    CalendarComputationError,
)


def safe_compute(operation: Callable, operation_name: str,
                 logger: logging.Logger, *args, **kwargs) -> Tuple[bool, Any]:
    """
    Run a calendar computation and return success status with result.

    Args:
        operation: Function to execute
        operation_name: Name of the operation for logging
        logger: Logger instance
        *args: Arguments for the operation
        **kwargs: Keyword arguments for the operation

    Returns:
        Tuple of (success: bool, result or CalendarComputationError)
    """
    try:
        result = operation(*args, **kwargs)
    except CalendarComputationError as e:
        logger.debug(f"Calendar computation {operation_name} failed: {str(e)}")
        return False, e
    except COMPUTATION_ERRORS as e:
        logger.debug(f"Calendar computation {operation_name} failed: {type(e).__name__}: {str(e)}")
        return False, CalendarComputationError(
            f"{operation_name} produced no value: {str(e)}",
            operation=operation_name
        )

    if result is None:
        logger.debug(f"Calendar computation {operation_name} produced no value")
        return False, CalendarComputationError(
            f"{operation_name} produced no value",
            operation=operation_name
        )

    return True, result


def validate_and_raise(condition: bool, error_class: Type[DateHelperError],
                       message: str, **error_kwargs) -> None:
    """
    Validate a condition and raise an exception if it fails.

    Args:
        condition: Condition to validate (should be True for success)
        error_class: Exception class to raise if condition fails
        message: Error message
        **error_kwargs: Additional arguments for the exception
    """
    if not condition:
        raise error_class(message, **error_kwargs)
