"""pytest configuration and fixtures for pyqt-toolkit tests."""

import os

import pytest

os.environ.setdefault("QT_QPA_PLATFORM", "offscreen")

from PyQt6.QtWidgets import QApplication  # noqa: E402


@pytest.fixture(scope="session")
def qapp():
    """Create QApplication instance for tests."""
    app = QApplication.instance() or QApplication([])
    yield app
    # Don't quit - may cause issues with other tests


@pytest.fixture
def toolkit_config():
    """Install a fresh ToolkitConfig for one test and restore defaults afterwards."""
    from pyqt_toolkit.protocols import ToolkitConfig, set_toolkit_config

    config = ToolkitConfig()
    set_toolkit_config(config)
    yield config
    set_toolkit_config(None)
