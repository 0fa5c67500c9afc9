"""Tests for layout helpers and child search."""

import pytest
from PyQt6.QtWidgets import QHBoxLayout, QLabel, QPushButton, QSpacerItem, QVBoxLayout, QWidget


def _build_form():
    container = QWidget()
    layout = QVBoxLayout(container)
    title = QLabel("Title")
    layout.addWidget(title)
    row = QHBoxLayout()
    ok = QPushButton("OK")
    ok.setObjectName("ok_button")
    row.addWidget(ok)
    row.addStretch()
    layout.addLayout(row)
    return container, layout, row, title, ok


def test_iter_layout_yields_item_contents(qapp):
    """Test widgets, nested layouts and spacers are yielded in order."""
    from pyqt_toolkit.core import iter_layout

    container, layout, row, title, ok = _build_form()
    contents = list(iter_layout(layout))
    assert contents == [title, row]

    row_contents = list(iter_layout(row))
    assert row_contents[0] is ok
    assert isinstance(row_contents[1], QSpacerItem)


def test_map_layout_and_layout_widgets(qapp):
    """Test mapping over items and collecting widgets."""
    from pyqt_toolkit.core import map_layout, layout_widgets

    container, layout, row, title, ok = _build_form()
    assert map_layout(lambda c: type(c).__name__, layout) == ["QLabel", "QHBoxLayout"]
    assert layout_widgets(layout) == [title]
    assert layout_widgets(layout, recursive=True) == [title, ok]


def test_sweep_layout_finalizes_widgets(qapp):
    """Test sweeping removes every item and deletes widgets."""
    from pyqt_toolkit.core import sweep_layout, is_alive

    container, layout, row, title, ok = _build_form()
    assert sweep_layout(layout) == 2
    assert layout.count() == 0
    assert not is_alive(title)
    assert not is_alive(ok)
    assert not is_alive(row)


def test_sweep_layout_can_keep_widgets(qapp):
    """Test finalize_items=False only detaches widgets."""
    from pyqt_toolkit.core import clear_layout, is_alive

    container, layout, row, title, ok = _build_form()
    clear_layout(layout, finalize_items=False)
    assert layout.count() == 0
    assert is_alive(title)
    assert title.parent() is None


def test_sweep_empty_layout(qapp):
    """Test sweeping an empty layout is a no-op."""
    from pyqt_toolkit.core import sweep_layout

    assert sweep_layout(QVBoxLayout()) == 0


def test_find_children_recursive(qapp):
    """Test depth-first search by designator, name and predicate."""
    from pyqt_toolkit.core import find_children, find_child

    container, layout, row, title, ok = _build_form()
    assert find_children(container, "push-button") == [ok]
    assert find_child(container, name="ok_button") is ok
    assert find_child(container, QLabel, predicate=lambda w: w.text() == "Title") is title
    assert find_child(container, "push-button", name="missing") is None


def test_find_children_non_recursive(qapp):
    """Test recursive=False only inspects direct children."""
    from pyqt_toolkit.core import find_children

    outer = QWidget()
    inner = QWidget(outer)
    deep = QLabel(inner)
    assert find_children(outer, QLabel) == [deep]
    assert find_children(outer, QLabel, recursive=False) == []


def test_find_children_unknown_designator(qapp):
    """Test unknown designators fail loud."""
    from pyqt_toolkit import NoCorrespondingClassError
    from pyqt_toolkit.core import find_children

    with pytest.raises(NoCorrespondingClassError):
        find_children(QWidget(), "no-such-widget")
