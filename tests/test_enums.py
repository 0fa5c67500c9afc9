"""Tests for enum comparison and case dispatch."""

import pytest
from PyQt6.QtCore import Qt


def test_enum_value_and_equal():
    """Test enums, flags and ints compare by value."""
    from pyqt_toolkit.core import enum_value, enum_equal

    assert enum_value(Qt.Key.Key_A) == 0x41
    assert enum_value(7) == 7
    assert enum_equal(Qt.Key.Key_Escape, int(Qt.Key.Key_Escape.value))
    combined = Qt.AlignmentFlag.AlignLeft | Qt.AlignmentFlag.AlignTop
    assert enum_value(combined) == Qt.AlignmentFlag.AlignLeft.value | Qt.AlignmentFlag.AlignTop.value
    assert not enum_equal(Qt.Key.Key_A, Qt.Key.Key_B)


def test_enum_value_rejects_non_enums():
    """Test enum_value fails loud on strings and bools."""
    from pyqt_toolkit.core import enum_value

    with pytest.raises(TypeError):
        enum_value("Key_A")
    with pytest.raises(TypeError):
        enum_value(True)


def test_qtenumcase():
    """Test qtenumcase matches single keys and key tuples."""
    from pyqt_toolkit.core import qtenumcase

    cases = {
        Qt.Key.Key_Escape: "close",
        (Qt.Key.Key_Return, Qt.Key.Key_Enter): "accept",
    }
    assert qtenumcase(Qt.Key.Key_Escape.value, cases) == "close"
    assert qtenumcase(Qt.Key.Key_Enter, cases) == "accept"
    assert qtenumcase(Qt.Key.Key_Space, cases) is None
    assert qtenumcase(Qt.Key.Key_Space, cases, default="ignore") == "ignore"


def test_eqtenumcase_fails_loud():
    """Test eqtenumcase raises on fall-through."""
    from pyqt_toolkit import ToolkitError
    from pyqt_toolkit.core import eqtenumcase

    assert eqtenumcase(Qt.Key.Key_A, {Qt.Key.Key_A: 1}) == 1
    with pytest.raises(ToolkitError):
        eqtenumcase(Qt.Key.Key_B, {Qt.Key.Key_A: 1})


def test_enum_members():
    """Test enum member listing."""
    from pyqt_toolkit.core import enum_members

    members = enum_members(Qt.CheckState)
    assert members["Checked"] is Qt.CheckState.Checked
    with pytest.raises(TypeError):
        enum_members(int)
