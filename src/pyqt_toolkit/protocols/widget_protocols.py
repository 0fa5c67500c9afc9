"""
ABC contracts for objects taking part in the generic toolkit operations.

Custom widgets and plain Python objects opt into value(), set_value(),
finalize() and copy_qobject() by inheriting these ABCs. Qt classes mixing
them in need PyQtWidgetMeta as their metaclass.
"""

from abc import ABC, ABCMeta, abstractmethod
from typing import Any

from PyQt6.QtCore import QObject


class PyQtWidgetMeta(type(QObject), ABCMeta):
    """Metaclass for Qt classes that need ABC support."""
    pass


class ValueGettable(ABC):
    """ABC for objects that can return a value."""

    @abstractmethod
    def get_value(self) -> Any:
        """
        Get the current value.

        Returns:
            The current value. None if no value set.
        """
        pass


class ValueSettable(ABC):
    """ABC for objects that can accept a value."""

    @abstractmethod
    def set_value(self, value: Any) -> None:
        """
        Set the value.

        Args:
            value: The value to set. None clears the object.
        """
        pass


class Finalizable(ABC):
    """
    ABC for objects that release resources when finalized.

    finalize() is called by pyqt_toolkit.core.lifecycle.finalize() before any
    Qt-level deletion of the object.
    """

    @abstractmethod
    def finalize(self) -> None:
        pass


class Copyable(ABC):
    """ABC for objects that know how to copy themselves."""

    @abstractmethod
    def copy(self) -> Any:
        pass
