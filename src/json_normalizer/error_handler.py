"""Error handling implementation for the JSON Normalizer."""

import logging
from typing import Optional
from .types import (
    ErrorHandlerInterface,
    ValidationResult,
    ValidationError,
    ErrorResponse,
    ProcessingError,
    ErrorType
)
from .utils.validation import ValidationUtils

# sysexits.h: EX_DATAERR and EX_SOFTWARE
EXIT_DATA_ERROR = 65
EXIT_INTERNAL_ERROR = 70


class ErrorHandler(ErrorHandlerInterface):
    """
    Error handler for JSON Normalizer operations.

    Validates raw input and turns fatal processing errors into an exit
    status and a message for the diagnostic stream.
    """

    def __init__(self, logger: Optional[logging.Logger] = None):
        """
        Initialize the error handler.

        Args:
            logger: Optional logger instance for error reporting
        """
        self.logger = logger or logging.getLogger(__name__)

    def validate_input(self, input_data: str) -> ValidationResult:
        """
        Validate input JSON string.

        Args:
            input_data: JSON string to validate

        Returns:
            ValidationResult with validation details
        """
        try:
            return ValidationUtils.validate_json_string(input_data)
        except Exception as e:
            self.logger.error(f"Unexpected error during input validation: {e}")
            return ValidationResult(
                is_valid=False,
                errors=[ValidationError(
                    type=ErrorType.DECODE,
                    message=f"Validation failed with unexpected error: {str(e)}",
                    location="input"
                )],
                warnings=[]
            )

    def handle_processing_error(self, error: ProcessingError) -> ErrorResponse:
        """
        Map a fatal processing error to an exit status and message.

        The caller reports the returned message, so the error itself is
        only logged at DEBUG.

        Args:
            error: ProcessingError to handle

        Returns:
            ErrorResponse with exit code and message
        """
        self.logger.debug(f"Processing error: {error.error_type.value} - {error}")

        if error.error_type == ErrorType.DECODE:
            return ErrorResponse(
                exit_code=EXIT_DATA_ERROR,
                message=f"error decoding input JSON: {error}"
            )
        elif error.error_type == ErrorType.INVALID_INPUT_KIND:
            return ErrorResponse(
                exit_code=EXIT_DATA_ERROR,
                message=f"unsupported input document: {error}"
            )
        elif error.error_type == ErrorType.DEPTH_EXCEEDED:
            return ErrorResponse(
                exit_code=EXIT_DATA_ERROR,
                message=f"input document too deep: {error}"
            )
        elif error.error_type == ErrorType.ENCODE:
            return ErrorResponse(
                exit_code=EXIT_INTERNAL_ERROR,
                message=f"error encoding output JSON: {error}"
            )
        else:
            return ErrorResponse(
                exit_code=EXIT_INTERNAL_ERROR,
                message=f"unexpected error: {error}"
            )
