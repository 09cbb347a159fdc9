"""JSON parser with validation for the normalizer input."""

import json
import logging
from typing import Any, Optional
from .types import DecodeError, DepthExceededError, ErrorType
from .error_handler import ErrorHandler
from .data_type_detector import DataTypeDetector
from .utils.text import replace_lone_surrogates
from .utils.validation import reject_constant


class JSONParser:
    """
    JSON parser that reports failures through the normalizer's error types.

    Decoding itself is delegated to the standard json module.
    """

    def __init__(self, error_handler: Optional[ErrorHandler] = None,
                 detector: Optional[DataTypeDetector] = None,
                 logger: Optional[logging.Logger] = None):
        """
        Initialize the JSON parser.

        Args:
            error_handler: Optional ErrorHandler instance
            detector: Optional DataTypeDetector instance
            logger: Optional logger instance
        """
        self.error_handler = error_handler or ErrorHandler()
        self.detector = detector or DataTypeDetector()
        self.logger = logger or logging.getLogger(__name__)

    def parse_bytes(self, raw: bytes) -> Any:
        """
        Decode UTF-8 bytes and parse them as JSON.

        Args:
            raw: Raw input bytes; a leading BOM is ignored

        Returns:
            Parsed JSON value

        Raises:
            DecodeError: If the bytes are not UTF-8 or not valid JSON
            DepthExceededError: If the input nests too deeply to decode
        """
        try:
            json_string = raw.decode("utf-8-sig")
        except UnicodeDecodeError as e:
            raise DecodeError(f"input is not valid UTF-8: {e.reason} at byte {e.start}",
                              context={"position": e.start})
        return self.parse(json_string)

    def parse(self, json_string: str) -> Any:
        """
        Parse a JSON string.

        Args:
            json_string: JSON string to parse

        Returns:
            Parsed JSON value

        Raises:
            DecodeError: If JSON is invalid
            DepthExceededError: If the input nests too deeply to decode
        """
        validation_result = self.error_handler.validate_input(json_string)
        if not validation_result.is_valid:
            error_messages = [
                f"{error.message} ({error.location})" if error.location else error.message
                for error in validation_result.errors
            ]
            message = f"Invalid JSON input: {'; '.join(error_messages)}"
            if any(error.type == ErrorType.DEPTH_EXCEEDED for error in validation_result.errors):
                raise DepthExceededError(message)
            raise DecodeError(message)

        data = json.loads(json_string, parse_constant=reject_constant)
        # Unpaired \u escapes decode to surrogates that cannot be written as UTF-8.
        data = replace_lone_surrogates(data)

        kind = self.detector.detect_kind(data)
        if isinstance(data, (dict, list)):
            self.logger.info(f"Parsed JSON {kind.value} with children {self.detector.count_kinds(data)}")
        else:
            self.logger.info(f"Parsed JSON {kind.value}")
        return data
