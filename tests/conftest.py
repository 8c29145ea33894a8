# ABOUTME: Shared pytest configuration for Shelfmark tests.
# ABOUTME: Resets the package logger so handlers added by the CLI do not leak between tests.

import logging

import pytest


@pytest.fixture(autouse=True)
def _reset_shelfmark_logger():
    """Undo the handler and propagation changes the CLI makes to the shelfmark logger."""
    yield
    package_logger = logging.getLogger("shelfmark")
    package_logger.handlers.clear()
    package_logger.setLevel(logging.NOTSET)
    package_logger.propagate = True
