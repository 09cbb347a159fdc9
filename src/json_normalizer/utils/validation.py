"""Validation utilities for raw JSON input."""

import json
from typing import List
from ..types import ValidationResult, ValidationError, ErrorType


def reject_constant(name: str) -> None:
    """Reject the non-standard NaN and Infinity literals json accepts by default."""
    raise ValueError(f"invalid literal {name}")


class ValidationUtils:
    """Utility class for validating raw input before normalization."""

    @staticmethod
    def validate_json_string(json_string: str) -> ValidationResult:
        """
        Validate JSON string syntax.

        Args:
            json_string: JSON string to validate

        Returns:
            ValidationResult with validation details
        """
        errors: List[ValidationError] = []
        warnings: List[str] = []

        # Check if string is empty
        if not json_string.strip():
            errors.append(ValidationError(
                type=ErrorType.DECODE,
                message="JSON input is empty",
                location="input"
            ))
            return ValidationResult(is_valid=False, errors=errors, warnings=warnings)

        # Try to parse JSON
        try:
            json.loads(json_string, parse_constant=reject_constant)
        except json.JSONDecodeError as e:
            errors.append(ValidationError(
                type=ErrorType.DECODE,
                message=f"Invalid JSON syntax: {e.msg}",
                location=f"line {e.lineno}, column {e.colno}"
            ))
        except ValueError as e:
            errors.append(ValidationError(
                type=ErrorType.DECODE,
                message=f"Invalid JSON syntax: {e}",
                location="input"
            ))
        except RecursionError:
            errors.append(ValidationError(
                type=ErrorType.DEPTH_EXCEEDED,
                message="JSON input is nested too deeply to decode",
                location="input"
            ))

        return ValidationResult(
            is_valid=len(errors) == 0,
            errors=errors,
            warnings=warnings
        )
