"""Pytest configuration and fixtures."""

import pytest
import json


@pytest.fixture
def sample_document():
    """Sample top-level document covering every kind of field."""
    return {
        " name ": "  Widget  ",
        "created": "2023-01-15T10:30:00Z",
        "tags": ["  hello  ", "007", "3.14"],
        "details": {
            "b": " two ",
            " a": "one",
            "empty": [],
            "nested": {},
        },
        "count": 42,
        "active": True,
        "missing": None,
        "": "dropped",
    }


@pytest.fixture
def sample_document_json(sample_document):
    """Sample document encoded as JSON text."""
    return json.dumps(sample_document)


@pytest.fixture
def normalized_object():
    """An object that is already normalized."""
    return {
        "city": "Oslo",
        "profile": {"nickname": "ola", "settings": {}},
        "tags": ["alpha", "beta", {"kind": "x"}],
    }


@pytest.fixture
def deep_document():
    """Build a document nested to a requested depth."""
    def build(depth):
        data = {"leaf": "value"}
        for _ in range(depth - 1):
            data = {"child": data}
        return data
    return build
