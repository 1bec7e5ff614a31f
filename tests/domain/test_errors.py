"""Tests for domain error classes."""

from installment_engine.domain.errors import (
    ComputationOverflow,
    DomainError,
    InternalError,
    InvalidInput,
    InvalidPrincipal,
    ValidationError,
)


class TestDomainError:
    """Tests for base DomainError class."""

    def test_creates_error_with_message(self) -> None:
        """DomainError stores message and has correct error code."""
        error = DomainError("Something went wrong")

        assert error.message == "Something went wrong"
        assert error.error_code == "DOMAIN_ERROR"
        assert error.context == {}

    def test_creates_error_with_context(self) -> None:
        """DomainError stores additional context."""
        error = DomainError("Error occurred", model="half-half", field="event_date")

        assert error.message == "Error occurred"
        assert error.context == {"model": "half-half", "field": "event_date"}

    def test_to_dict_returns_structured_format(self) -> None:
        """DomainError.to_dict() returns structured error format."""
        error = DomainError("Test error", field="total", value=123)

        result = error.to_dict()

        assert result == {
            "message": "Test error",
            "code": "DOMAIN_ERROR",
            "field": "total",
            "value": 123,
        }

    def test_str_representation(self) -> None:
        """DomainError string representation is the message."""
        error = DomainError("Test message")

        assert str(error) == "Test message"


class TestValidationError:
    """Tests for ValidationError class."""

    def test_creates_simple_validation_error(self) -> None:
        """ValidationError can be created with just a message."""
        error = ValidationError("Invalid input")

        assert error.message == "Invalid input"
        assert error.error_code == "VALIDATION_ERROR"
        assert error.errors is None

    def test_creates_validation_error_with_default_message(self) -> None:
        """ValidationError uses default message if none provided."""
        error = ValidationError()

        assert error.message == "Validation error"
        assert error.errors is None

    def test_creates_validation_error_with_field_errors(self) -> None:
        """ValidationError can store multiple field-level errors."""
        errors = [
            {"field": "total", "message": "Must be a valid decimal: abc", "code": "INVALID_DECIMAL"},
            {"field": "rate", "message": "Must be a valid decimal: x", "code": "INVALID_DECIMAL"},
        ]

        error = ValidationError(errors=errors)

        assert error.message == "Validation failed"
        assert error.errors == errors

    def test_to_dict_includes_field_errors(self) -> None:
        """ValidationError.to_dict() includes field errors if present."""
        errors = [{"field": "total", "message": "Must be a valid decimal: abc"}]

        error = ValidationError(errors=errors)

        assert error.to_dict() == {
            "message": "Validation failed",
            "code": "VALIDATION_ERROR",
            "errors": errors,
        }

    def test_to_dict_without_field_errors(self) -> None:
        """ValidationError.to_dict() works without field errors."""
        error = ValidationError("Simple error")

        assert error.to_dict() == {
            "message": "Simple error",
            "code": "VALIDATION_ERROR",
        }


class TestInvalidInput:
    """Tests for calculator guard-clause errors."""

    def test_is_a_validation_error(self) -> None:
        """InvalidInput maps to the same error code as boundary validation."""
        error = InvalidInput("total must be > 0", field="total")

        assert isinstance(error, ValidationError)
        assert error.error_code == "VALIDATION_ERROR"

    def test_to_dict_includes_field_context(self) -> None:
        """InvalidInput carries the offending field in its context."""
        error = InvalidInput("installment_count must be <= 18", field="installment_count")

        assert error.to_dict() == {
            "message": "installment_count must be <= 18",
            "code": "VALIDATION_ERROR",
            "field": "installment_count",
        }

    def test_invalid_principal_is_invalid_input(self) -> None:
        """InvalidPrincipal is a specialised InvalidInput."""
        error = InvalidPrincipal("principal must be finite", principal="NaN")

        assert isinstance(error, InvalidInput)
        assert error.context == {"principal": "NaN"}


class TestInternalErrors:
    """Tests for InternalError and ComputationOverflow."""

    def test_creates_internal_error(self) -> None:
        """InternalError has correct error code."""
        error = InternalError("Unexpected condition")

        assert error.message == "Unexpected condition"
        assert error.error_code == "INTERNAL_ERROR"

    def test_computation_overflow_is_internal(self) -> None:
        """ComputationOverflow surfaces as an internal error."""
        error = ComputationOverflow("compound growth produced a non-finite amount")

        assert isinstance(error, InternalError)
        assert error.error_code == "INTERNAL_ERROR"
