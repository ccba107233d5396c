"""Shared fixtures for the nodeit test suite."""

import pytest

from nodeit import load_document


def pytest_configure(config):
    config.addinivalue_line("markers", "slow: large trees, excluded by run_tests.py")


@pytest.fixture
def map_doc():
    """Document wrapping the mapping a: b, c: d, e: f."""
    return load_document("a: b\nc: d\ne: f")


@pytest.fixture
def seq_doc():
    """Document wrapping the sequence [a, b, c, d]."""
    return load_document("[a, b, c, d]")

