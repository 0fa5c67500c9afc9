"""
Generic accessors translating to underlying widget calls.

Normalizes Qt's inconsistent APIs:
- QLineEdit.text() vs QSpinBox.value() vs QCheckBox.isChecked()
- QLineEdit.setText() vs QSpinBox.setValue() vs QComboBox.setCurrentText()
- QObject.parent() vs QGraphicsItem.parentItem()

Objects implementing the ValueGettable/ValueSettable ABCs are dispatched
through their own methods first; everything else dispatches on the nearest
registered class in its MRO. Dispatch fails loud on unknown types.
"""

import logging
from typing import Any, Callable, Dict, List, Optional, Tuple

from PyQt6.QtCore import QObject
from PyQt6.QtWidgets import (
    QAbstractButton, QAbstractSlider, QAbstractSpinBox, QComboBox, QDateEdit,
    QDateTimeEdit, QGraphicsItem, QLabel, QLineEdit, QPlainTextEdit, QProgressBar,
    QTextEdit, QTimeEdit, QWidget,
)

from pyqt_toolkit.exceptions import NoSuchMethodError
from pyqt_toolkit.protocols import ValueGettable, ValueSettable
from .strings import setter_name, to_method_name

logger = logging.getLogger(__name__)

Getter = Callable[[Any], Any]
Setter = Callable[[Any, Any], None]

# Registry: class -> (getter, setter). Lookup walks the MRO, nearest class wins.
VALUE_ACCESSORS: Dict[type, Tuple[Getter, Optional[Setter]]] = {
    QLineEdit: (lambda w: w.text(), lambda w, v: w.setText("" if v is None else str(v))),
    QLabel: (lambda w: w.text(), lambda w, v: w.setText("" if v is None else str(v))),
    QTextEdit: (lambda w: w.toPlainText(), lambda w, v: w.setPlainText("" if v is None else str(v))),
    QPlainTextEdit: (lambda w: w.toPlainText(), lambda w, v: w.setPlainText("" if v is None else str(v))),
    QAbstractButton: (lambda w: w.isChecked(), lambda w, v: w.setChecked(bool(v))),
    QComboBox: (lambda w: w.currentText(), lambda w, v: w.setCurrentText(str(v))),
    QAbstractSlider: (lambda w: w.value(), lambda w, v: w.setValue(v)),
    QProgressBar: (lambda w: w.value(), lambda w, v: w.setValue(v)),
    QDateTimeEdit: (lambda w: w.dateTime(), lambda w, v: w.setDateTime(v)),
    QDateEdit: (lambda w: w.date(), lambda w, v: w.setDate(v)),
    QTimeEdit: (lambda w: w.time(), lambda w, v: w.setTime(v)),
    # QSpinBox and QDoubleSpinBox; other QAbstractSpinBox subclasses are registered above
    QAbstractSpinBox: (lambda w: w.value(), lambda w, v: w.setValue(v)),
}


def register_value_accessor(cls: type, getter: Getter, setter: Optional[Setter] = None) -> None:
    """
    Register value()/set_value() dispatch for cls and its subclasses.

    Args:
        cls: Class to dispatch on
        getter: getter(obj) -> value
        setter: setter(obj, value); None makes set_value() fail for cls
    """
    VALUE_ACCESSORS[cls] = (getter, setter)
    logger.debug(f"Registered value accessor for {cls.__name__}")


def _find_accessor(obj: Any) -> Optional[Tuple[Getter, Optional[Setter]]]:
    for klass in type(obj).__mro__:
        if klass in VALUE_ACCESSORS:
            return VALUE_ACCESSORS[klass]
    return None


def value(obj: Any) -> Any:
    """
    Get the value of a widget or ValueGettable object.

    Raises:
        TypeError: If no value accessor exists for the object's type
    """
    if isinstance(obj, ValueGettable):
        return obj.get_value()
    accessor = _find_accessor(obj)
    if accessor is None:
        raise TypeError(
            f"No value accessor for {type(obj).__name__}. "
            f"Implement ValueGettable or call register_value_accessor()."
        )
    return accessor[0](obj)


def set_value(obj: Any, new_value: Any) -> None:
    """
    Set the value of a widget or ValueSettable object.

    Raises:
        TypeError: If no value setter exists for the object's type
    """
    if isinstance(obj, ValueSettable):
        obj.set_value(new_value)
        return
    accessor = _find_accessor(obj)
    if accessor is None or accessor[1] is None:
        raise TypeError(
            f"No value setter for {type(obj).__name__}. "
            f"Implement ValueSettable or call register_value_accessor()."
        )
    accessor[1](obj, new_value)


def parent(obj: Any) -> Any:
    """Parent of a QObject or parent item of a QGraphicsItem."""
    if isinstance(obj, QGraphicsItem):
        return obj.parentItem()
    if isinstance(obj, QObject):
        return obj.parent()
    raise TypeError(f"{type(obj).__name__} has no parent")


def set_parent(obj: Any, new_parent: Any) -> None:
    """
    Reparent a QObject or QGraphicsItem. None detaches it.

    Raises:
        TypeError: If the pairing is not supported by Qt (e.g. a widget
            parented to a non-widget QObject)
    """
    if isinstance(obj, QGraphicsItem):
        obj.setParentItem(new_parent)
    elif isinstance(obj, QWidget):
        if new_parent is not None and not isinstance(new_parent, QWidget):
            raise TypeError(f"A widget's parent must be a QWidget, got {type(new_parent).__name__}")
        obj.setParent(new_parent)
    elif isinstance(obj, QObject):
        obj.setParent(new_parent)
    else:
        raise TypeError(f"Cannot set the parent of {type(obj).__name__}")


def children(obj: Any) -> List[Any]:
    """Direct children of a QObject or child items of a QGraphicsItem."""
    if isinstance(obj, QGraphicsItem):
        return list(obj.childItems())
    if isinstance(obj, QObject):
        return list(obj.children())
    raise TypeError(f"{type(obj).__name__} has no children")


def _resolve_method(obj: Any, name: str) -> Optional[Callable]:
    method = getattr(obj, name, None)
    # Bound signals are not methods
    if method is None or hasattr(method, "emit") or not callable(method):
        return None
    return method


def invoke(obj: Any, name: str, *args: Any) -> Any:
    """
    Call a method by toolkit name: invoke(w, "set-window-title", "Main").

    Raises:
        NoSuchMethodError: If obj has no such method
    """
    method_name = to_method_name(name)
    method = _resolve_method(obj, method_name)
    if method is None:
        raise NoSuchMethodError(f"{type(obj).__name__} has no method {method_name}")
    return method(*args)


def get_property(obj: Any, name: str) -> Any:
    """
    Read a property by toolkit name: get_property(w, "window-title").

    Tries the getter methods name(), isName() and hasName(), then
    QObject.property().

    Raises:
        NoSuchMethodError: If neither a getter nor a Qt property exists
    """
    method_name = to_method_name(name)
    capitalized = method_name[0].upper() + method_name[1:]
    for candidate in (method_name, f"is{capitalized}", f"has{capitalized}"):
        method = _resolve_method(obj, candidate)
        if method is not None:
            return method()

    if isinstance(obj, QObject):
        result = obj.property(method_name)
        if result is not None or method_name in _dynamic_property_names(obj):
            return result
    raise NoSuchMethodError(f"{type(obj).__name__} has no property {method_name}")


def set_property(obj: Any, name: str, new_value: Any) -> None:
    """
    Write a property by toolkit name: set_property(w, "window-title", "Main").

    Tries setName(), then QObject.setProperty() (which creates a dynamic
    property when no static one exists).

    Raises:
        NoSuchMethodError: If obj has no setter and is not a QObject
    """
    method = _resolve_method(obj, setter_name(name))
    if method is not None:
        method(new_value)
        return
    if isinstance(obj, QObject):
        obj.setProperty(to_method_name(name), new_value)
        return
    raise NoSuchMethodError(f"{type(obj).__name__} has no setter {setter_name(name)}")


def _dynamic_property_names(obj: QObject) -> List[str]:
    return [name.data().decode("utf-8") for name in obj.dynamicPropertyNames()]
