"""Shared fixtures for postaldedupe tests."""

import pytest

import postaldedupe


@pytest.fixture(autouse=True)
def expander():
    """Set up the process-wide expander around every test."""
    instance = postaldedupe.setup()
    yield instance
    postaldedupe.teardown()
