"""Utility functions for the JSON Normalizer."""

from .numeric import is_numeric, parse_number
from .text import replace_lone_surrogates, trim_space
from .timestamps import parse_rfc3339
from .validation import ValidationUtils

__all__ = [
    "is_numeric",
    "parse_number",
    "parse_rfc3339",
    "replace_lone_surrogates",
    "trim_space",
    "ValidationUtils",
]
