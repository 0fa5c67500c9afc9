"""
Object lifecycle helpers: liveness checks, safe deletion, finalization, copying.

A Python wrapper can outlive the C++ object it wraps (for example after its
parent was destroyed). Every helper here treats such wrappers, and None, as
dead and never touches them.
"""

import logging
from contextlib import contextmanager
from typing import Any, Callable, Dict, Optional

from PyQt6 import sip
from PyQt6.QtCore import QLine, QLineF, QObject, QPoint, QPointF, QRect, QRectF, QSize, QSizeF
from PyQt6.QtGui import QBrush, QColor, QFont, QImage, QPalette, QPen, QPixmap, QPolygon, QPolygonF, QTransform

from pyqt_toolkit.exceptions import DeletedObjectError, ToolkitError
from pyqt_toolkit.protocols import Copyable, Finalizable, get_toolkit_config

logger = logging.getLogger(__name__)

# Qt value types and how to copy them
COPIERS: Dict[type, Callable[[Any], Any]] = {
    QColor: QColor,
    QPoint: QPoint,
    QPointF: QPointF,
    QSize: QSize,
    QSizeF: QSizeF,
    QRect: QRect,
    QRectF: QRectF,
    QLine: QLine,
    QLineF: QLineF,
    QPolygon: QPolygon,
    QPolygonF: QPolygonF,
    QFont: QFont,
    QPen: QPen,
    QBrush: QBrush,
    QPalette: QPalette,
    QTransform: QTransform,
    QImage: lambda image: image.copy(),
    QPixmap: lambda pixmap: pixmap.copy(),
}


def is_alive(obj: Any) -> bool:
    """False for None and for wrappers whose C++ object has been deleted."""
    if obj is None:
        return False
    if isinstance(obj, sip.simplewrapper):
        return not sip.isdeleted(obj)
    return True


def ensure_alive(obj: Any) -> Any:
    """
    Return obj if it is alive.

    Raises:
        DeletedObjectError: If obj is None or its C++ object is gone
    """
    if not is_alive(obj):
        raise DeletedObjectError(f"{type(obj).__name__} object has been deleted")
    return obj


def maybe_delete(obj: Any, later: Optional[bool] = None) -> bool:
    """
    Delete obj if it is alive, otherwise do nothing.

    Args:
        obj: Object to delete
        later: Use QObject.deleteLater() instead of deleting immediately.
            Defaults to ToolkitConfig.delete_later. Ignored for non-QObjects.

    Returns:
        True if a deletion was performed or scheduled
    """
    if not is_alive(obj) or not isinstance(obj, sip.simplewrapper):
        return False
    if later is None:
        later = get_toolkit_config().delete_later

    if later and isinstance(obj, QObject):
        obj.deleteLater()
        logger.debug(f"Scheduled deletion of {type(obj).__name__}")
    else:
        sip.delete(obj)
        logger.debug(f"Deleted {type(obj).__name__}")
    return True


def finalize(obj: Any) -> None:
    """
    Release obj.

    Finalizable objects get finalize() called first, lists and tuples are
    finalized item by item, and wrapped Qt objects are then deleted.
    """
    if isinstance(obj, (list, tuple)):
        for item in obj:
            finalize(item)
        return
    if isinstance(obj, Finalizable) and is_alive(obj):
        obj.finalize()
    maybe_delete(obj)


@contextmanager
def finalizing(*objs: Any):
    """
    Context manager that finalizes objs on exit, in reverse order.

    Example:
        with finalizing(QPixmap(path)) as (pixmap,):
            painter.drawPixmap(0, 0, pixmap)
    """
    try:
        yield objs
    finally:
        for obj in reversed(objs):
            finalize(obj)


def copy_qobject(obj: Any) -> Any:
    """
    Copy a Qt value type or Copyable object.

    Raises:
        ToolkitError: For QObjects, which have identity and cannot be copied,
            and for types with no known copy
    """
    if isinstance(obj, Copyable):
        return obj.copy()
    if isinstance(obj, QObject):
        raise ToolkitError(f"{type(obj).__name__} is a QObject and cannot be copied")
    ensure_alive(obj)
    for klass in type(obj).__mro__:
        if klass in COPIERS:
            return COPIERS[klass](obj)
    raise ToolkitError(f"Don't know how to copy {type(obj).__name__}")
