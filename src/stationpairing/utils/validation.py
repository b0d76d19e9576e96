"""Validation utilities for Station Pairing.

This module provides reusable field validators with consistent error handling.
They are used when loading tournament data and when recording results.
"""

from typing import Any, Iterable, Optional

from stationpairing.exceptions import InvalidTournamentDataException


class ValidationResult:
    """Result of a validation operation.

    Attributes:
        is_valid: Whether the validation passed
        error_message: Human-readable error message if invalid
        sanitized_value: Cleaned/normalized value if valid
    """

    def __init__(
        self,
        is_valid: bool,
        error_message: Optional[str] = None,
        sanitized_value: Any = None,
    ):
        self.is_valid = is_valid
        self.error_message = error_message
        self.sanitized_value = sanitized_value

    def __bool__(self) -> bool:
        """Allow using result in boolean context: if result: ..."""
        return self.is_valid

    def __repr__(self) -> str:
        if self.is_valid:
            return f"ValidationResult(VALID, {self.sanitized_value!r})"
        return f"ValidationResult(INVALID, {self.error_message!r})"


def _raise_if_invalid(result: ValidationResult) -> Any:
    if not result.is_valid:
        raise InvalidTournamentDataException(result.error_message)
    return result.sanitized_value


# ========== Generic Validation ==========


def validate_non_empty(value: Any, field_name: str = "Field") -> ValidationResult:
    """Validate that a field is not empty.

    Args:
        value: Value to validate
        field_name: Name of the field for error messages

    Returns:
        ValidationResult with the stripped string as sanitized value
    """
    if value is None or not str(value).strip():
        return ValidationResult(
            is_valid=False,
            error_message=f"{field_name} cannot be empty",
        )
    return ValidationResult(is_valid=True, sanitized_value=str(value).strip())


def validate_positive_integer(value: Any, field_name: str = "Value") -> ValidationResult:
    """Validate that a value is a positive integer.

    Booleans and floats with a fractional part are rejected.

    Args:
        value: Value to validate
        field_name: Name of the field for error messages

    Returns:
        ValidationResult with the integer as sanitized value
    """
    if value is None:
        return ValidationResult(
            is_valid=False,
            error_message=f"{field_name} is required",
        )

    if isinstance(value, bool) or (isinstance(value, float) and not value.is_integer()):
        return ValidationResult(
            is_valid=False,
            error_message=f"{field_name} must be a whole number",
        )

    try:
        int_value = int(value)
    except (ValueError, TypeError):
        return ValidationResult(
            is_valid=False,
            error_message=f"{field_name} must be a number",
        )

    if int_value <= 0:
        return ValidationResult(
            is_valid=False,
            error_message=f"{field_name} must be positive",
        )
    return ValidationResult(is_valid=True, sanitized_value=int_value)


def validate_number(value: Any, field_name: str = "Value") -> ValidationResult:
    """Validate that a value is numeric (int or float, not bool)."""
    if isinstance(value, bool) or not isinstance(value, (int, float)):
        return ValidationResult(
            is_valid=False,
            error_message=f"{field_name} must be a number: {value!r}",
        )
    return ValidationResult(is_valid=True, sanitized_value=value)


def validate_choice(
    value: Any, choices: Iterable[str], field_name: str = "Value"
) -> ValidationResult:
    """Validate that a value is one of a fixed set of strings."""
    options = tuple(choices)
    if value not in options:
        return ValidationResult(
            is_valid=False,
            error_message=f"{field_name} must be one of {', '.join(options)}: {value!r}",
        )
    return ValidationResult(is_valid=True, sanitized_value=value)


# ========== Strict variants (raise on failure) ==========


def require_non_empty(value: Any, field_name: str = "Field") -> str:
    """Validate a required string and return it stripped.

    Raises:
        InvalidTournamentDataException: If the value is empty
    """
    return _raise_if_invalid(validate_non_empty(value, field_name))


def require_positive_integer(value: Any, field_name: str = "Value") -> int:
    """Validate a positive integer and return it.

    Raises:
        InvalidTournamentDataException: If the value is not a positive integer
    """
    return _raise_if_invalid(validate_positive_integer(value, field_name))


def require_choice(value: Any, choices: Iterable[str], field_name: str = "Value") -> str:
    """Validate a choice and return it.

    Raises:
        InvalidTournamentDataException: If the value is not an allowed choice
    """
    return _raise_if_invalid(validate_choice(value, choices, field_name))
