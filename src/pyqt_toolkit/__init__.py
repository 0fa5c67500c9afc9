"""
pyqt-toolkit: convenience and utility layer over PyQt6.

Architecture:
- Protocols: ABC contracts and global configuration
- Core: small adapters over the PyQt6 object model

Key Features:
- Generic value/parent/property accessors over Qt's inconsistent APIs
- Safe deletion and liveness checks for wrapped objects
- Layout sweeping and recursive child search
- Enum and class-designator case dispatch
- Declarative slot binding
- plist/alist option merging
- Main-window bootstrap on the main thread
"""

__version__ = "0.1.0"

from .exceptions import (
    ToolkitError,
    NoCorrespondingClassError,
    DeletedObjectError,
    NoSuchMethodError,
    MainThreadError,
)
from .protocols import ToolkitConfig, set_toolkit_config, get_toolkit_config

__all__ = [
    "__version__",
    "ToolkitError",
    "NoCorrespondingClassError",
    "DeletedObjectError",
    "NoSuchMethodError",
    "MainThreadError",
    "ToolkitConfig",
    "set_toolkit_config",
    "get_toolkit_config",
]
