"""Tests for string utilities."""

import pytest


def test_capitalize_on_keeps_marker_by_default():
    """Test capitalize_on leaves the marker in place."""
    from pyqt_toolkit.core import capitalize_on

    assert capitalize_on("-", "push-button") == "push-Button"


def test_capitalize_on_drops_or_replaces_marker():
    """Test capitalize_on replacement handling."""
    from pyqt_toolkit.core import capitalize_on

    assert capitalize_on("-", "push-button", None, True) == "PushButton"
    assert capitalize_on("-", "push-button", " ") == "push Button"


def test_capitalize_on_rejects_long_marker():
    """Test capitalize_on fails loud on multi-character markers."""
    from pyqt_toolkit.core import capitalize_on

    with pytest.raises(ValueError):
        capitalize_on("--", "a--b")


def test_method_name_conversions():
    """Test toolkit <-> Qt method name conversion."""
    from pyqt_toolkit.core import to_method_name, from_method_name, setter_name

    assert to_method_name("set-window-title") == "setWindowTitle"
    assert to_method_name("set_text") == "setText"
    assert to_method_name("setText") == "setText"
    assert from_method_name("setWindowTitle") == "set-window-title"
    assert from_method_name("toHTML", "_") == "to_html"
    assert setter_name("window-title") == "setWindowTitle"


def test_to_qt_class_name():
    """Test class designator strings map to Qt class names."""
    from pyqt_toolkit.core import to_qt_class_name

    assert to_qt_class_name("push-button") == "QPushButton"
    assert to_qt_class_name("push_button") == "QPushButton"
    assert to_qt_class_name("PushButton") == "QPushButton"
    assert to_qt_class_name("QPushButton") == "QPushButton"
    assert to_qt_class_name("widget") == "QWidget"


def test_natural_sort():
    """Test natural ordering of numbered names."""
    from pyqt_toolkit.core import natural_sort

    assert natural_sort(["item10", "item2", "Item1"]) == ["Item1", "item2", "item10"]
