# tests/conftest.py
"""
Pytest configuration and fixtures for oopconcepts tests.
"""

import logging

import pytest


@pytest.fixture(autouse=True)
def reset_package_logger():
    """Restore the package log level that running examples may change."""
    package_logger = logging.getLogger("oopconcepts")
    level = package_logger.level

    yield

    package_logger.setLevel(level)


def pytest_configure(config):
    """Configure pytest with custom markers."""
    config.addinivalue_line(
        "markers", "integration: Integration tests"
    )
    config.addinivalue_line(
        "markers", "unit: Unit tests"
    )
