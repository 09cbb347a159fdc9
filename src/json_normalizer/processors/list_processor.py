"""List processor for nested JSON arrays."""

import logging
from typing import Any, List, Optional, TYPE_CHECKING
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
from ..utils import is_numeric, parse_number, parse_rfc3339, trim_space

if TYPE_CHECKING:
    from .dict_processor import DictProcessor


class ListProcessor(DataProcessorInterface):
    """
    Processor for arrays at any depth.

    Elements keep their relative order. Strings are tried as an RFC 3339
    timestamp first, then as an integer literal, and otherwise trimmed.
    Objects that normalize to {} are dropped. Nested lists and all other
    scalars are unsupported.
    """

    def __init__(self, dict_processor: Optional["DictProcessor"] = None,
                 detector: Optional[DataTypeDetector] = None,
                 logger: Optional[logging.Logger] = None,
                 max_depth: int = DEFAULT_MAX_DEPTH):
        """
        Initialize the list processor.

        Args:
            dict_processor: Optional DictProcessor used for object elements
            detector: Optional DataTypeDetector instance
            logger: Optional logger instance
            max_depth: Maximum container nesting depth
        """
        self.detector = detector or DataTypeDetector()
        self.logger = logger or logging.getLogger(__name__)
        self.max_depth = max_depth
        if dict_processor is None:
            from .dict_processor import DictProcessor
            dict_processor = DictProcessor(
                self, detector=self.detector, logger=self.logger, max_depth=max_depth
            )
        self.dict_processor = dict_processor

    def process(self, data: Any) -> NormalizeResult:
        """
        Normalize a list.

        Args:
            data: List to normalize

        Returns:
            NormalizeResult with the normalized list and diagnostics

        Raises:
            ValueError: If data is not a list
            DepthExceededError: If data nests deeper than max_depth
        """
        if not isinstance(data, list):
            raise ValueError(f"ListProcessor expects list data, got {type(data).__name__}")

        warnings: List[Diagnostic] = []
        value = self.normalize(data, warnings, 1)
        return NormalizeResult(value=value, warnings=warnings)

    def normalize(self, data: List[Any], warnings: List[Diagnostic], depth: int) -> List[Any]:
        if depth > self.max_depth:
            raise DepthExceededError(
                f"Nesting depth exceeds maximum of {self.max_depth}",
                context={"depth": depth}
            )

        output: List[Any] = []
        for item in data:
            kind = self.detector.detect_kind(item)

            if kind is JSONKind.OBJECT:
                normalized = self.dict_processor.normalize(item, warnings, depth + 1)
                if normalized:
                    output.append(normalized)
            elif kind is JSONKind.STRING:
                output.append(self._normalize_string(item))
            elif kind in (JSONKind.LIST, JSONKind.NULL, JSONKind.BOOLEAN, JSONKind.NUMBER):
                self.logger.debug(f"Dropping {kind.value} element from list")
                warnings.append(Diagnostic(ErrorType.UNSUPPORTED_TYPE, kind))

        return output

    def _normalize_string(self, value: str) -> Any:
        """Timestamp, then integer literal, then trimmed string."""
        timestamp = parse_rfc3339(value)
        if timestamp is not None:
            return timestamp
        if is_numeric(value):
            # None when the literal is all zeros
            return parse_number(value)
        return trim_space(value)
