"""
Unit tests for the error handling utilities.
"""

import logging

import pytest

from datehelper.utils.error_handlers import (
    CalendarComputationError,
    ConfigurationError,
    DateHelperError,
    DateParsingError,
    IntervalError,
    safe_compute,
    validate_and_raise,
)


logger = logging.getLogger(__name__)


class TestExceptionHierarchy:
    """Test the custom exception classes."""

    def test_base_error_without_details(self):
        """A bare message renders as-is."""
        error = DateHelperError("Something failed")
        assert str(error) == "Something failed"
        assert error.details == {}

    def test_base_error_with_details(self):
        """Details are appended to the message."""
        error = DateHelperError("Something failed", {"unit": "day"})
        assert str(error) == "Something failed (Details: unit=day)"

    def test_configuration_error_details(self):
        """Config key and value are recorded as details."""
        error = ConfigurationError("Unknown time zone", config_key="time_zone", config_value="Mars/Base")
        assert error.details == {"config_key": "time_zone", "config_value": "Mars/Base"}
        assert isinstance(error, DateHelperError)

    def test_calendar_computation_error_details(self):
        """Operation and calendar are recorded as details."""
        error = CalendarComputationError("No value", operation="start_of_day", calendar="gregorian")
        assert error.details["operation"] == "start_of_day"
        assert error.details["calendar"] == "gregorian"

    def test_date_parsing_error_keeps_empty_value(self):
        """An empty string value is still a recorded detail."""
        error = DateParsingError("No match", pattern="yyyy", value="")
        assert error.details == {"pattern": "yyyy", "value": ""}

    def test_interval_error_records_operand_type(self):
        """Only the operand's type name is recorded."""
        error = IntervalError("Not an interval", operand=42)
        assert error.details == {"operand_type": "int"}


class TestSafeCompute:
    """Test the (success, result) wrapper for calendar computations."""

    def test_success(self):
        """A value is passed through."""
        ok, result = safe_compute(lambda a, b: a + b, "add", logger, 2, 3)
        assert ok is True
        assert result == 5

    def test_none_result_is_failure(self):
        """A computation without a value reports failure."""
        ok, result = safe_compute(lambda: None, "nothing", logger)
        assert ok is False
        assert isinstance(result, CalendarComputationError)
        assert result.details["operation"] == "nothing"

    def test_arithmetic_error_is_wrapped(self):
        """Overflow and value errors become CalendarComputationError."""
        def overflow():
            raise OverflowError("date value out of range")

        ok, result = safe_compute(overflow, "overflow", logger)
        assert ok is False
        assert isinstance(result, CalendarComputationError)
        assert "date value out of range" in str(result)

    def test_calendar_error_passes_through(self):
        """An existing CalendarComputationError is returned unchanged."""
        original = CalendarComputationError("out of range", operation="inner")

        def fail():
            raise original

        ok, result = safe_compute(fail, "outer", logger)
        assert ok is False
        assert result is original

    def test_programming_errors_propagate(self):
        """Errors outside the computation family are not swallowed."""
        def broken():
            raise TypeError("bad operand")

        with pytest.raises(TypeError):
            safe_compute(broken, "broken", logger)

    def test_failure_is_logged_at_debug(self, caplog):
        """Failures leave a DEBUG record."""
        with caplog.at_level(logging.DEBUG):
            safe_compute(lambda: None, "quiet", logger)
        assert any("quiet" in record.message and record.levelno == logging.DEBUG
                   for record in caplog.records)


class TestValidateAndRaise:
    """Test the validation helper."""

    def test_passes_when_condition_holds(self):
        """No exception for a true condition."""
        validate_and_raise(True, IntervalError, "unused")

    def test_raises_with_kwargs(self):
        """The error class receives the message and keyword details."""
        with pytest.raises(IntervalError, match="Right-hand operand") as exc_info:
            validate_and_raise(False, IntervalError, "Right-hand operand must be an interval", operand="x")
        assert exc_info.value.details == {"operand_type": "str"}
