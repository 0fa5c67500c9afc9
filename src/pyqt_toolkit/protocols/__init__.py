"""
Protocol definitions and configuration.

ABC contracts that let custom objects take part in the generic toolkit
operations, plus the global toolkit configuration.
"""

from .widget_protocols import (
    PyQtWidgetMeta,
    ValueGettable,
    ValueSettable,
    Finalizable,
    Copyable,
)
from .toolkit_config import ToolkitConfig, set_toolkit_config, get_toolkit_config

__all__ = [
    "PyQtWidgetMeta",
    "ValueGettable",
    "ValueSettable",
    "Finalizable",
    "Copyable",
    "ToolkitConfig",
    "set_toolkit_config",
    "get_toolkit_config",
]
