"""Processors for the three normalization contexts."""

from .dict_processor import DictProcessor
from .list_processor import ListProcessor
from .document_processor import DocumentProcessor

__all__ = ["DictProcessor", "ListProcessor", "DocumentProcessor"]
