"""
Pytest configuration and fixtures for RandPass tests.
"""

import logging
import os
import random

import pytest

# Widgets and timers need a Qt application but no display.
os.environ.setdefault("QT_QPA_PLATFORM", "offscreen")

from PySide6.QtWidgets import QApplication  # noqa: E402


@pytest.fixture(scope="session")
def qapp():
    """Single QApplication shared by every Qt test."""
    app = QApplication.instance() or QApplication([])
    yield app


@pytest.fixture
def rng():
    """Seeded source so failures can be reproduced."""
    return random.Random(1234)


class FakeClipboard:
    """Collects copied text; raises instead when `broken` is set."""

    def __init__(self, broken=False):
        self.broken = broken
        self.contents = []

    def __call__(self, text):
        if self.broken:
            raise RuntimeError("clipboard is locked by another application")
        self.contents.append(text)


@pytest.fixture
def clipboard():
    return FakeClipboard()


@pytest.fixture
def broken_clipboard():
    return FakeClipboard(broken=True)


@pytest.fixture(autouse=True)
def reset_randpass_logger():
    """Drop handlers the CLI attached so they don't outlive captured streams."""
    yield
    logger = logging.getLogger("randpass")
    for handler in list(logger.handlers):
        logger.removeHandler(handler)
        handler.close()
    logger.setLevel(logging.NOTSET)
