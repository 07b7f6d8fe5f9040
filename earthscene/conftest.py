"""
Shared pytest fixtures
"""

import os

import pytest
from PyQt6.QtWidgets import QApplication


@pytest.fixture(scope="session")
def qt_app():
    """One QApplication for every test that needs Qt objects."""
    # Widgets must be creatable without a display
    os.environ.setdefault("QT_QPA_PLATFORM", "offscreen")
    app = QApplication.instance()
    if app is None:
        app = QApplication([])
    return app
