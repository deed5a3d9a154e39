"""Shared fixtures for the test suite."""

import logging

import pytest


@pytest.fixture(autouse=True)
def _reset_root_logger():
    """Drop handlers installed by configure_logging after each test."""
    root = logging.getLogger()
    level = root.level
    yield
    for handler in root.handlers[:]:
        if type(handler) is logging.StreamHandler:
            root.removeHandler(handler)
    root.setLevel(level)
