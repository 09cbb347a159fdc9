"""Tests for top-level document processor."""

import pytest
from json_normalizer.processors.document_processor import DocumentProcessor
from json_normalizer.types import DecodeError, DepthExceededError, ErrorType, InvalidInputKindError


class TestDocumentProcessor:
    """Tests for DocumentProcessor class."""

    def setup_method(self):
        """Set up test fixtures."""
        self.processor = DocumentProcessor()

    def test_empty_document(self):
        """Test that {} gives an empty list."""
        result = self.processor.process({})

        assert result.value == []
        assert result.warnings == []

    def test_timestamp_field(self):
        """Test that top-level timestamps become epoch seconds."""
        result = self.processor.process({"created": "2023-01-15T10:30:00Z"})

        assert result.value == [{"created": 1673778600}]

    def test_string_field_trimmed(self):
        """Test that other strings are trimmed without numeric coercion."""
        result = self.processor.process({" name ": "  Widget  ", "code": "007"})

        assert result.value == [{"name": "Widget"}, {"code": "007"}]

    def test_list_field(self):
        """Test that list fields are wrapped under their key."""
        result = self.processor.process({"tags": ["  hello  ", "007", "3.14"]})

        assert result.value == [{"tags": ["hello", 7, "3.14"]}]

    def test_empty_list_field_dropped(self):
        """Test that empty and emptied lists are dropped."""
        result = self.processor.process({"a": [], "b": [1]})

        assert result.value == []
        assert len(result.warnings) == 1
        assert result.warnings[0].key is None

    def test_object_field_emitted_unwrapped(self):
        """Test that nested objects contribute their normalized body."""
        result = self.processor.process({"user": {" name ": "Ann", "age": 30}})

        assert result.value == [{"name": "Ann"}]
        assert result.warnings[0].key == "age"

    def test_empty_object_field_dropped(self):
        """Test that {"a": {}} gives []."""
        assert self.processor.process({"a": {}}).value == []

    def test_object_with_empty_child_kept(self):
        """Test that an object whose only value is {} is not empty."""
        assert self.processor.process({"a": {"b": {}}}).value == [{"b": {}}]

    def test_unsupported_field_dropped(self):
        """Test that {"n": 42} gives [] with a warning."""
        result = self.processor.process({"n": 42})

        assert result.value == []
        assert len(result.warnings) == 1
        assert result.warnings[0].error_type == ErrorType.UNSUPPORTED_TYPE
        assert str(result.warnings[0]) == 'Warning: Skipping unsupported data type for key "n"'

    def test_empty_raw_key_dropped_silently(self):
        """Test that the empty key is skipped without a warning."""
        result = self.processor.process({"": "x", "a": "y"})

        assert result.value == [{"a": "y"}]
        assert result.warnings == []

    def test_whitespace_key_kept_as_empty(self):
        """Test that a whitespace-only key trims to "" and is kept."""
        assert self.processor.process({"  ": "x"}).value == [{"": "x"}]

    def test_keys_processed_in_lexical_order(self, sample_document):
        """Test the full sample document, including record order."""
        result = self.processor.process(sample_document)

        assert result.value == [
            {"name": "Widget"},
            {"created": 1673778600},
            {"a": "one", "b": "two", "nested": {}},
            {"tags": ["hello", 7, "3.14"]},
        ]
        assert [w.key for w in result.warnings] == ["active", "count", "missing"]

    def test_padded_timestamp_stays_string(self):
        """Test that timestamps are only detected on the raw string."""
        result = self.processor.process({"t": " 2023-01-15T10:30:00Z "})

        assert result.value == [{"t": "2023-01-15T10:30:00Z"}]

    @pytest.mark.parametrize("data", [[], "text", 1, None, True])
    def test_non_object_root(self, data):
        """Test that non-object roots are rejected."""
        with pytest.raises(InvalidInputKindError) as exc_info:
            self.processor.process(data)

        assert isinstance(exc_info.value, DecodeError)
        assert exc_info.value.error_type == ErrorType.INVALID_INPUT_KIND

    def test_depth_limit(self, deep_document):
        """Test that the root counts as depth one."""
        processor = DocumentProcessor(max_depth=3)

        assert processor.process(deep_document(3)).value == [{"child": {"leaf": "value"}}]
        with pytest.raises(DepthExceededError):
            processor.process(deep_document(4))

    def test_information_separators_not_trimmed(self):
        """Test that U+001F is content at the top level."""
        result = self.processor.process({"a": "\x1fx\x1f", " \x1fb ": "y"})

        assert result.value == [{"\x1fb": "y"}, {"a": "\x1fx\x1f"}]
