"""Global toolkit configuration.

Provides hooks for applications to customize toolkit behavior.
"""

from typing import List, Optional
from dataclasses import dataclass, field


@dataclass
class ToolkitConfig:
    """Base configuration for toolkit behavior.

    Applications can subclass this to provide custom configuration.

    Attributes:
        application_name: Name given to a QApplication created by the toolkit
        qt_modules: Modules searched when resolving class designators, in order
        delete_later: Whether maybe_delete() defaults to deleteLater()
        main_thread_timeout: Seconds to wait for a main-thread hand-off (None waits forever)
        quit_on_last_window_closed: Applied to a QApplication created by the toolkit
    """

    application_name: str = "pyqt-toolkit"
    qt_modules: List[str] = field(default_factory=lambda: [
        "PyQt6.QtWidgets",
        "PyQt6.QtGui",
        "PyQt6.QtCore",
    ])
    delete_later: bool = False
    main_thread_timeout: Optional[float] = None
    quit_on_last_window_closed: bool = True


# Global config instance (set by application)
_toolkit_config: Optional[ToolkitConfig] = None


def set_toolkit_config(config: Optional[ToolkitConfig]) -> None:
    """Set the global toolkit configuration.

    Args:
        config: ToolkitConfig instance, or None to restore defaults
    """
    global _toolkit_config
    _toolkit_config = config


def get_toolkit_config() -> ToolkitConfig:
    """Get the current toolkit configuration.

    Returns:
        Current ToolkitConfig or default if not set
    """
    if _toolkit_config is None:
        return ToolkitConfig()
    return _toolkit_config
