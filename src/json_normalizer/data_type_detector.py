"""Data type detection for decoded JSON values."""

import logging
from typing import Any, Dict, Optional
from collections import Counter
from .types import JSONKind


class DataTypeDetector:
    """
    Maps decoded JSON values onto the closed set of JSON kinds.

    Processors dispatch on the returned kind rather than on Python types,
    so every kind has to be handled explicitly by each of them.
    """

    def __init__(self, logger: Optional[logging.Logger] = None):
        """
        Initialize the data type detector.

        Args:
            logger: Optional logger instance
        """
        self.logger = logger or logging.getLogger(__name__)

    def detect_kind(self, value: Any) -> JSONKind:
        """
        Detect the kind of a single decoded value.

        Args:
            value: Value produced by the JSON decoder

        Returns:
            JSONKind for the value

        Raises:
            TypeError: If the value could not have come from a JSON decoder
        """
        if value is None:
            return JSONKind.NULL
        # bool is a subclass of int
        if isinstance(value, bool):
            return JSONKind.BOOLEAN
        if isinstance(value, (int, float)):
            return JSONKind.NUMBER
        if isinstance(value, str):
            return JSONKind.STRING
        if isinstance(value, dict):
            return JSONKind.OBJECT
        if isinstance(value, list):
            return JSONKind.LIST
        raise TypeError(f"Not a JSON value: {type(value).__name__}")

    def count_kinds(self, data: Any) -> Dict[str, int]:
        """
        Count the kinds of the direct children of a container.

        Args:
            data: Object or list

        Returns:
            Mapping of kind name to number of children of that kind
        """
        values = data.values() if isinstance(data, dict) else data
        counts = Counter(self.detect_kind(value).value for value in values)
        return dict(counts)
