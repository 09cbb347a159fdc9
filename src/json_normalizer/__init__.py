"""
JSON Normalizer - one-shot JSON field normalization.

Reads a JSON object, trims keys and strings, converts RFC 3339
timestamps to Unix seconds and integer strings in lists to numbers,
and emits one record per top-level field.
"""

from .json_normalizer import JSONNormalizer
from .types import (
    Diagnostic,
    NormalizeResult,
    NormalizeOutput,
    ProcessingError,
    DecodeError,
    InvalidInputKindError,
    DepthExceededError,
    EncodeError,
)

__version__ = "1.0.0"
__all__ = [
    "JSONNormalizer",
    "Diagnostic",
    "NormalizeResult",
    "NormalizeOutput",
    "ProcessingError",
    "DecodeError",
    "InvalidInputKindError",
    "DepthExceededError",
    "EncodeError",
]
