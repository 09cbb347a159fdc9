"""Dictionary processor for nested JSON objects."""

import logging
from typing import Any, Dict, List, Optional
from ..data_type_detector import DataTypeDetector
from ..types import (
    DEFAULT_MAX_DEPTH,
    DataProcessorInterface,
    DepthExceededError,
    Diagnostic,
    ErrorType,
    JSONKind,
    NormalizeResult,
)
from ..utils import trim_space
from .list_processor import ListProcessor


class DictProcessor(DataProcessorInterface):
    """
    Processor for objects found below the top level of a document.

    Keys are visited in lexical order and trimmed. String values are
    trimmed but never parsed as timestamps or numbers. Nested objects are
    kept even when they normalize to {}, while lists that normalize to []
    are dropped together with their key.
    """

    def __init__(self, list_processor: Optional[ListProcessor] = None,
                 detector: Optional[DataTypeDetector] = None,
                 logger: Optional[logging.Logger] = None,
                 max_depth: int = DEFAULT_MAX_DEPTH):
        """
        Initialize the dictionary processor.

        Args:
            list_processor: Optional ListProcessor used for list values
            detector: Optional DataTypeDetector instance
            logger: Optional logger instance
            max_depth: Maximum container nesting depth
        """
        self.detector = detector or DataTypeDetector()
        self.logger = logger or logging.getLogger(__name__)
        self.max_depth = max_depth
        if list_processor is None:
            list_processor = ListProcessor(
                self, detector=self.detector, logger=self.logger, max_depth=max_depth
            )
        self.list_processor = list_processor

    def process(self, data: Any) -> NormalizeResult:
        """
        Normalize a nested object.

        Args:
            data: Dictionary to normalize

        Returns:
            NormalizeResult with the normalized dictionary and diagnostics

        Raises:
            ValueError: If data is not a dictionary
            DepthExceededError: If data nests deeper than max_depth
        """
        if not isinstance(data, dict):
            raise ValueError(f"DictProcessor expects dict data, got {type(data).__name__}")

        warnings: List[Diagnostic] = []
        value = self.normalize(data, warnings, 1)
        return NormalizeResult(value=value, warnings=warnings)

    def normalize(self, data: Dict[str, Any], warnings: List[Diagnostic], depth: int) -> Dict[str, Any]:
        if depth > self.max_depth:
            raise DepthExceededError(
                f"Nesting depth exceeds maximum of {self.max_depth}",
                context={"depth": depth}
            )

        output: Dict[str, Any] = {}
        for raw_key in sorted(data):
            key = trim_space(raw_key)
            value = data[raw_key]
            kind = self.detector.detect_kind(value)

            if kind is JSONKind.OBJECT:
                output[key] = self.normalize(value, warnings, depth + 1)
            elif kind is JSONKind.STRING:
                output[key] = trim_space(value)
            elif kind is JSONKind.LIST:
                items = self.list_processor.normalize(value, warnings, depth + 1)
                if items:
                    output[key] = items
            elif kind in (JSONKind.NULL, JSONKind.BOOLEAN, JSONKind.NUMBER):
                self.logger.debug(f"Dropping {kind.value} value for key {key!r}")
                warnings.append(Diagnostic(ErrorType.UNSUPPORTED_TYPE, kind, key))

        # Trimmed keys can sort differently from the raw keys.
        return dict(sorted(output.items()))
