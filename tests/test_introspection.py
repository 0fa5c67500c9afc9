"""Tests for class introspection."""

import pytest
from PyQt6.QtCore import QObject, pyqtSignal, pyqtSlot
from PyQt6.QtWidgets import QAbstractButton, QLineEdit, QPushButton, QWidget


class Counter(QObject):
    changed = pyqtSignal(int)

    @pyqtSlot()
    def bump(self):
        self.changed.emit(1)


class FancyButton(QPushButton):
    pass


def test_ensure_qclass_resolves_designators():
    """Test class designators in every supported form."""
    from pyqt_toolkit.core import ensure_qclass

    assert ensure_qclass("push-button") is QPushButton
    assert ensure_qclass("QPushButton") is QPushButton
    assert ensure_qclass("PushButton") is QPushButton
    assert ensure_qclass(QLineEdit) is QLineEdit
    assert ensure_qclass("object") is QObject


def test_ensure_qclass_of_instance(qapp):
    """Test instances resolve to their class."""
    from pyqt_toolkit.core import ensure_qclass

    assert ensure_qclass(FancyButton()) is FancyButton


def test_ensure_qclass_fails_loud():
    """Test unknown designators raise NoCorrespondingClassError."""
    from pyqt_toolkit import NoCorrespondingClassError
    from pyqt_toolkit.core import ensure_qclass, find_qclass

    with pytest.raises(NoCorrespondingClassError):
        ensure_qclass("no-such-widget")
    with pytest.raises(LookupError):
        ensure_qclass(42)
    assert find_qclass("no-such-widget") is None
    assert find_qclass("Qt") is None


def test_qt_modules_come_from_config(toolkit_config):
    """Test designator lookup only searches configured modules."""
    from pyqt_toolkit.core import find_qclass

    toolkit_config.qt_modules = ["PyQt6.QtCore"]
    assert find_qclass("push-button") is None
    assert find_qclass("timer") is not None


def test_qclass_name_and_superclasses(qapp):
    """Test native class lookup for Python subclasses."""
    from pyqt_toolkit.core import qclass_name, qt_superclasses, is_direct_qsubclass

    assert qclass_name(FancyButton) == "QPushButton"
    assert qclass_name(FancyButton()) == "QPushButton"
    supers = qt_superclasses(FancyButton)
    assert supers[:3] == [QPushButton, QAbstractButton, QWidget]
    assert FancyButton not in supers
    assert is_direct_qsubclass(FancyButton, "push-button")
    assert not is_direct_qsubclass(FancyButton, QWidget)


def test_is_qclass_and_qobject(qapp):
    """Test wrapper detection."""
    from pyqt_toolkit.core import is_qclass, is_qobject

    assert is_qclass(QWidget)
    assert not is_qclass(dict)
    assert is_qobject(QObject())
    assert not is_qobject(object())


def test_qtypecase(qapp):
    """Test qtypecase picks the first matching case."""
    from pyqt_toolkit.core import qtypecase, is_qinstance

    cases = {
        "push-button": "button",
        ("line-edit", "text-edit"): "text",
        QWidget: "widget",
    }
    assert qtypecase(QPushButton(), cases) == "button"
    assert qtypecase(QLineEdit(), cases) == "text"
    assert qtypecase(QWidget(), cases) == "widget"
    assert qtypecase(QObject(), cases, default="other") == "other"
    assert is_qinstance(FancyButton(), "abstract-button")
    assert not is_qinstance(QWidget(), "unknown-thing")


def test_enumerate_methods_of_python_subclass(qapp):
    """Test QMetaObject enumeration includes declared signals and slots."""
    from pyqt_toolkit.core import enumerate_methods, list_signals, list_slots

    counter = Counter()
    own = enumerate_methods(counter, own_only=True)
    assert {d.signature for d in own} == {"changed(int)", "bump()"}

    changed = next(d for d in own if d.name == "changed")
    assert changed.kind == "signal"
    assert changed.parameter_types == ("int",)
    assert "changed(int)" in list_signals(counter)
    assert "bump()" in list_slots(counter)
    assert "destroyed()" in list_signals(counter)


def test_enumerate_methods_of_qt_class():
    """Test enumeration through staticMetaObject."""
    from pyqt_toolkit.core import enumerate_methods

    signals = enumerate_methods("push-button", kind="signal")
    assert "clicked(bool)" in [d.signature for d in signals]
    assert all(d.kind == "signal" for d in signals)


def test_enumerate_methods_rejects_unknown_kind():
    """Test kind validation."""
    from pyqt_toolkit.core import enumerate_methods

    with pytest.raises(ValueError):
        enumerate_methods(QObject, kind="property")
