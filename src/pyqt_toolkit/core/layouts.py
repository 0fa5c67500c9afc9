"""
Layout iteration and clearing, and recursive child search.
"""

import logging
from typing import Any, Callable, Iterator, List, Optional

from PyQt6.QtCore import QObject
from PyQt6.QtWidgets import QLayout, QLayoutItem, QWidget

from .accessors import children
from .introspection import ensure_qclass
from .lifecycle import finalize, is_alive

logger = logging.getLogger(__name__)


def _item_content(item: QLayoutItem) -> Any:
    """Widget, nested layout or spacer held by a layout item."""
    for content in (item.widget(), item.layout(), item.spacerItem()):
        if content is not None:
            return content
    return item


def iter_layout(layout: QLayout) -> Iterator[Any]:
    """
    Yield the content of each item in layout.

    Widget items yield the widget, nested layouts yield the layout and
    spacers yield the QSpacerItem.
    """
    for index in range(layout.count()):
        item = layout.itemAt(index)
        if item is not None:
            yield _item_content(item)


def map_layout(function: Callable[[Any], Any], layout: QLayout) -> List[Any]:
    """Apply function to the content of each layout item."""
    return [function(content) for content in iter_layout(layout)]


def layout_widgets(layout: QLayout, recursive: bool = False) -> List[QWidget]:
    """Widgets held by layout, optionally descending into nested layouts."""
    widgets = []
    for content in iter_layout(layout):
        if isinstance(content, QWidget):
            widgets.append(content)
        elif recursive and isinstance(content, QLayout):
            widgets.extend(layout_widgets(content, recursive=True))
    return widgets


def sweep_layout(layout: QLayout, finalize_items: bool = True) -> int:
    """
    Remove every item from layout.

    Args:
        layout: Layout to clear
        finalize_items: Finalize removed widgets. When False widgets are only
            detached from their parent and left to the caller.

    Returns:
        Number of items removed, nested layouts counted as one item
    """
    removed = 0
    while layout.count():
        item = layout.takeAt(0)
        if item is None:
            break
        removed += 1

        widget = item.widget()
        nested = item.layout()
        if widget is not None:
            if finalize_items:
                finalize(widget)
            else:
                widget.setParent(None)
        elif nested is not None:
            sweep_layout(nested, finalize_items)
            if finalize_items:
                finalize(nested)

    logger.debug(f"Swept {removed} items from {type(layout).__name__}")
    return removed


clear_layout = sweep_layout


def _matches(obj: Any, cls: Optional[type], name: Optional[str],
             predicate: Optional[Callable[[Any], bool]]) -> bool:
    if cls is not None and not isinstance(obj, cls):
        return False
    if name is not None and (not isinstance(obj, QObject) or obj.objectName() != name):
        return False
    return predicate is None or predicate(obj)


def _walk(obj: Any, recursive: bool) -> Iterator[Any]:
    for child in children(obj):
        if not is_alive(child):
            continue
        yield child
        if recursive:
            yield from _walk(child, recursive)


def find_children(obj: Any, designator: Any = None, name: Optional[str] = None,
                  predicate: Optional[Callable[[Any], bool]] = None,
                  recursive: bool = True) -> List[Any]:
    """
    Depth-first search for children of obj.

    Args:
        obj: QObject or QGraphicsItem to search under
        designator: Only match instances of this class designator
        name: Only match QObjects with this objectName()
        predicate: Only match children for which predicate(child) is true
        recursive: Descend into grandchildren

    Raises:
        NoCorrespondingClassError: If designator does not resolve to a class
    """
    cls = ensure_qclass(designator) if designator is not None else None
    return [child for child in _walk(obj, recursive) if _matches(child, cls, name, predicate)]


def find_child(obj: Any, designator: Any = None, name: Optional[str] = None,
               predicate: Optional[Callable[[Any], bool]] = None,
               recursive: bool = True) -> Optional[Any]:
    """First child matching the criteria of find_children(), or None."""
    cls = ensure_qclass(designator) if designator is not None else None
    for child in _walk(obj, recursive):
        if _matches(child, cls, name, predicate):
            return child
    return None
