"""Processor for the top-level JSON document."""

import logging
from typing import Any, Dict, List, Optional
from ..data_type_detector import DataTypeDetector
from ..types import (
    DEFAULT_MAX_DEPTH,
    DataProcessorInterface,
    DepthExceededError,
    Diagnostic,
    ErrorType,
    InvalidInputKindError,
    JSONKind,
    NormalizeResult,
)
from ..utils import parse_rfc3339, trim_space
from .dict_processor import DictProcessor


class DocumentProcessor(DataProcessorInterface):
    """
    Processor for the root object of a document.

    Turns the root object into a list of records, visiting keys in lexical
    order. Empty raw keys are skipped. String fields become
    ``{key: epoch_seconds}`` when they are RFC 3339 timestamps and
    ``{key: trimmed}`` otherwise; list fields become ``{key: list}``; object
    fields contribute their normalized object directly. Empty objects and
    lists are dropped, as are fields of any other kind.
    """

    def __init__(self, dict_processor: Optional[DictProcessor] = None,
                 detector: Optional[DataTypeDetector] = None,
                 logger: Optional[logging.Logger] = None,
                 max_depth: int = DEFAULT_MAX_DEPTH):
        """
        Initialize the document processor.

        Args:
            dict_processor: Optional DictProcessor for nested objects
            detector: Optional DataTypeDetector instance
            logger: Optional logger instance
            max_depth: Maximum container nesting depth
        """
        self.detector = detector or DataTypeDetector()
        self.logger = logger or logging.getLogger(__name__)
        self.max_depth = max_depth
        self.dict_processor = dict_processor or DictProcessor(
            detector=self.detector, logger=self.logger, max_depth=max_depth
        )
        self.list_processor = self.dict_processor.list_processor

    def process(self, data: Any) -> NormalizeResult:
        """
        Normalize a whole document.

        Args:
            data: Decoded root value

        Returns:
            NormalizeResult with the list of records and diagnostics

        Raises:
            InvalidInputKindError: If data is not an object
            DepthExceededError: If data nests deeper than max_depth
        """
        kind = self.detector.detect_kind(data)
        if kind is not JSONKind.OBJECT:
            raise InvalidInputKindError(
                f"Root element must be an object, got {kind.value}",
                context={"kind": kind.value}
            )

        warnings: List[Diagnostic] = []
        records = self.normalize(data, warnings, 1)

        self.logger.info(f"Normalized {len(data)} top-level keys into {len(records)} records "
                         f"with {len(warnings)} warnings")
        return NormalizeResult(value=records, warnings=warnings)

    def normalize(self, data: Dict[str, Any], warnings: List[Diagnostic], depth: int) -> List[Any]:
        if depth > self.max_depth:
            raise DepthExceededError(
                f"Nesting depth exceeds maximum of {self.max_depth}",
                context={"depth": depth}
            )

        records: List[Any] = []
        for raw_key in sorted(data):
            # Only the raw key is tested; "  " trims to "" and is kept.
            if raw_key == "":
                continue

            key = trim_space(raw_key)
            value = data[raw_key]
            kind = self.detector.detect_kind(value)

            if kind is JSONKind.OBJECT:
                normalized = self.dict_processor.normalize(value, warnings, depth + 1)
                if normalized:
                    records.append(normalized)
            elif kind is JSONKind.STRING:
                timestamp = parse_rfc3339(value)
                if timestamp is not None:
                    records.append({key: timestamp})
                else:
                    records.append({key: trim_space(value)})
            elif kind is JSONKind.LIST:
                items = self.list_processor.normalize(value, warnings, depth + 1)
                if items:
                    records.append({key: items})
            elif kind in (JSONKind.NULL, JSONKind.BOOLEAN, JSONKind.NUMBER):
                self.logger.debug(f"Dropping {kind.value} value for key {key!r}")
                warnings.append(Diagnostic(ErrorType.UNSUPPORTED_TYPE, kind, key))

        return records
