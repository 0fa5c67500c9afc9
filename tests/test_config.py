"""Tests for toolkit configuration."""


def test_default_config():
    """Test defaults when no config is installed."""
    from pyqt_toolkit import get_toolkit_config

    config = get_toolkit_config()
    assert config.delete_later is False
    assert config.main_thread_timeout is None
    assert config.qt_modules[0] == "PyQt6.QtWidgets"


def test_set_and_reset_config():
    """Test installing and clearing a global config."""
    from pyqt_toolkit import ToolkitConfig, get_toolkit_config, set_toolkit_config

    custom = ToolkitConfig(application_name="viewer", delete_later=True)
    set_toolkit_config(custom)
    try:
        assert get_toolkit_config() is custom
    finally:
        set_toolkit_config(None)
    assert get_toolkit_config().application_name == "pyqt-toolkit"
