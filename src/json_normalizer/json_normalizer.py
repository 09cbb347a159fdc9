"""Main JSON Normalizer implementation."""

import json
import logging
from typing import Any, Optional
from .types import (
    DEFAULT_INDENT,
    DEFAULT_MAX_DEPTH,
    EncodeError,
    NormalizeOutput,
    NormalizeResult,
)
from .parser import JSONParser
from .data_type_detector import DataTypeDetector
from .processors import DictProcessor, DocumentProcessor
from .error_handler import ErrorHandler
from .profiler import PerformanceProfiler


class JSONNormalizer:
    """
    Normalizes a JSON document into a list of trimmed, typed records.

    Wires together the parser, the three processors and the encoder. The
    normalize methods are pure: unsupported values are reported as
    diagnostics on the result instead of being printed, and only decode,
    depth and encode failures are raised.
    """

    def __init__(self, max_depth: int = DEFAULT_MAX_DEPTH,
                 indent: int = DEFAULT_INDENT,
                 logger: Optional[logging.Logger] = None,
                 enable_profiling: bool = True):
        """
        Initialize the JSON Normalizer.

        Args:
            max_depth: Maximum container nesting depth accepted
            indent: Indentation of the encoded output
            logger: Optional logger instance
            enable_profiling: Record performance metrics for each document
        """
        self.max_depth = max_depth
        self.indent = indent
        self.logger = logger or logging.getLogger(__name__)

        self.error_handler = ErrorHandler(self.logger)
        self.detector = DataTypeDetector(self.logger)
        self.parser = JSONParser(self.error_handler, self.detector, self.logger)
        self.dict_processor = DictProcessor(
            detector=self.detector, logger=self.logger, max_depth=max_depth
        )
        self.list_processor = self.dict_processor.list_processor
        self.document_processor = DocumentProcessor(
            self.dict_processor, detector=self.detector, logger=self.logger, max_depth=max_depth
        )
        self.profiler = PerformanceProfiler(self.logger) if enable_profiling else None

    def normalize(self, data: Any) -> NormalizeResult:
        """
        Normalize a decoded top-level document.

        Args:
            data: Decoded root value, must be a dict

        Returns:
            NormalizeResult with the list of records and diagnostics

        Raises:
            InvalidInputKindError: If data is not a dict
            DepthExceededError: If data nests deeper than max_depth
        """
        return self.document_processor.process(data)

    def normalize_object(self, data: Any) -> NormalizeResult:
        """Normalize a nested object, as found below the top level."""
        return self.dict_processor.process(data)

    def normalize_list(self, data: Any) -> NormalizeResult:
        """Normalize a list, as found at any level."""
        return self.list_processor.process(data)

    def encode(self, value: Any) -> str:
        """
        Encode a normalized value as indented JSON with a trailing newline.

        Raises:
            EncodeError: If the value cannot be serialized
        """
        try:
            text = json.dumps(value, indent=self.indent, ensure_ascii=False, allow_nan=False)
            # Lone surrogates survive decoding but cannot be written as UTF-8.
            text.encode("utf-8")
        except (TypeError, ValueError, RecursionError) as e:
            raise EncodeError(str(e)) from e
        return text + "\n"

    def normalize_json(self, json_string: str) -> NormalizeOutput:
        """
        Parse, normalize and encode a JSON document.

        Args:
            json_string: Input JSON text

        Returns:
            NormalizeOutput with the encoded document and diagnostics

        Raises:
            ProcessingError: On any fatal decode, depth or encode failure
        """
        data = self.parser.parse(json_string)
        return self._normalize_and_encode(data, len(json_string.encode("utf-8", "surrogatepass")))

    def normalize_bytes(self, raw: bytes) -> NormalizeOutput:
        """
        Parse, normalize and encode a UTF-8 encoded JSON document.

        Args:
            raw: Input bytes

        Returns:
            NormalizeOutput with the encoded document and diagnostics

        Raises:
            ProcessingError: On any fatal decode, depth or encode failure
        """
        data = self.parser.parse_bytes(raw)
        return self._normalize_and_encode(data, len(raw))

    def _normalize_and_encode(self, data: Any, input_size: int) -> NormalizeOutput:
        if self.profiler is None:
            result = self.normalize(data)
            return NormalizeOutput(json_string=self.encode(result.value), warnings=result.warnings)

        with self.profiler.profile_operation("normalize_document", input_size) as profile:
            result = self.normalize(data)
            json_string = self.encode(result.value)
            profile.output_size = len(json_string.encode("utf-8"))
            profile.warnings_emitted = len(result.warnings)

        return NormalizeOutput(json_string=json_string, warnings=result.warnings)
