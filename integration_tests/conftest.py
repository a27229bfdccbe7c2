"""Pytest configuration for integration tests."""

import os

import pytest


# Mark all tests in this directory as integration tests
def pytest_collection_modifyitems(items):
    """Add the integration marker, and skip everything without an API key."""
    has_key = bool(os.environ.get("GEMINI_API_KEY") or os.environ.get("API_KEY"))
    skip = pytest.mark.skip(reason="GEMINI_API_KEY is not set")
    for item in items:
        if "integration_tests" in str(item.fspath):
            item.add_marker(pytest.mark.integration)
            if not has_key:
                item.add_marker(skip)
