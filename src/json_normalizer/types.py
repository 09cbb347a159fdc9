"""Core type definitions for the JSON Normalizer."""

import json
from abc import ABC, abstractmethod
from dataclasses import dataclass, field
from enum import Enum
from typing import Any, Dict, List, Optional


DEFAULT_MAX_DEPTH = 500
DEFAULT_INDENT = 2


class JSONKind(Enum):
    """Closed set of kinds a decoded JSON value can take."""
    NULL = "null"
    BOOLEAN = "boolean"
    NUMBER = "number"
    STRING = "string"
    OBJECT = "object"
    LIST = "list"


class ErrorType(Enum):
    """Enumeration of error types."""
    DECODE = "decode"
    INVALID_INPUT_KIND = "invalid_input_kind"
    DEPTH_EXCEEDED = "depth_exceeded"
    ENCODE = "encode"
    UNSUPPORTED_TYPE = "unsupported_type"


@dataclass
class Diagnostic:
    """A non-fatal problem found while normalizing.

    ``key`` is the (trimmed) key for object and top-level contexts and
    ``None`` for list elements.
    """
    error_type: ErrorType
    kind: JSONKind
    key: Optional[str] = None

    @property
    def message(self) -> str:
        if self.key is None:
            return "Skipping unsupported data type in list"
        return f"Skipping unsupported data type for key {json.dumps(self.key, ensure_ascii=False)}"

    def __str__(self) -> str:
        return f"Warning: {self.message}"


@dataclass
class NormalizeResult:
    """Result of a normalize operation."""
    value: Any
    warnings: List[Diagnostic] = field(default_factory=list)


@dataclass
class NormalizeOutput:
    """Encoded result of normalizing a whole document."""
    json_string: str
    warnings: List[Diagnostic] = field(default_factory=list)


@dataclass
class ValidationError:
    """Validation error details."""
    type: ErrorType
    message: str
    location: Optional[str] = None


@dataclass
class ValidationResult:
    """Result of input validation."""
    is_valid: bool
    errors: List[ValidationError]
    warnings: List[str]


@dataclass
class ErrorResponse:
    """Response for error handling."""
    exit_code: int
    message: str


class ProcessingError(Exception):
    """Custom exception for processing errors."""

    def __init__(self, message: str, error_type: ErrorType, context: Optional[Dict[str, Any]] = None):
        super().__init__(message)
        self.error_type = error_type
        self.context = context


class DecodeError(ProcessingError):
    """Input is not valid JSON."""

    def __init__(self, message: str, context: Optional[Dict[str, Any]] = None,
                 error_type: ErrorType = ErrorType.DECODE):
        super().__init__(message, error_type, context)


class InvalidInputKindError(DecodeError):
    """Input decoded to something other than an object."""

    def __init__(self, message: str, context: Optional[Dict[str, Any]] = None):
        super().__init__(message, context, ErrorType.INVALID_INPUT_KIND)


class DepthExceededError(ProcessingError):
    """Input nesting is deeper than the configured limit."""

    def __init__(self, message: str, context: Optional[Dict[str, Any]] = None):
        super().__init__(message, ErrorType.DEPTH_EXCEEDED, context)


class EncodeError(ProcessingError):
    """Output could not be serialized."""

    def __init__(self, message: str, context: Optional[Dict[str, Any]] = None):
        super().__init__(message, ErrorType.ENCODE, context)


# Abstract base classes for interfaces

class DataProcessorInterface(ABC):
    """Abstract interface for value processors."""

    @abstractmethod
    def process(self, data: Any) -> NormalizeResult:
        """Normalize data, collecting diagnostics into the result."""
        pass

    @abstractmethod
    def normalize(self, data: Any, warnings: List[Diagnostic], depth: int) -> Any:
        """Normalize data at the given nesting depth, appending diagnostics to warnings."""
        pass


class ErrorHandlerInterface(ABC):
    """Abstract interface for error handling."""

    @abstractmethod
    def validate_input(self, input_data: str) -> ValidationResult:
        """Validate input data."""
        pass

    @abstractmethod
    def handle_processing_error(self, error: ProcessingError) -> ErrorResponse:
        """Handle processing errors."""
        pass
