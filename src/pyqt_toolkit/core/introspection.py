"""
Class introspection for Qt classes wrapped by PyQt6.

Resolves class designators ('push-button', 'QPushButton', a class or an
instance) to wrapped classes, walks the native part of a class hierarchy and
enumerates methods through QMetaObject.
"""

import importlib
import logging
from dataclasses import dataclass
from typing import Any, Dict, List, Mapping, Optional, Tuple

from PyQt6 import sip
from PyQt6.QtCore import QMetaMethod

from pyqt_toolkit.exceptions import NoCorrespondingClassError
from pyqt_toolkit.protocols import get_toolkit_config
from .strings import to_qt_class_name

logger = logging.getLogger(__name__)

_QT_MODULE_PREFIX = "PyQt6."

_METHOD_KINDS: Dict[QMetaMethod.MethodType, str] = {
    QMetaMethod.MethodType.Method: "method",
    QMetaMethod.MethodType.Signal: "signal",
    QMetaMethod.MethodType.Slot: "slot",
    QMetaMethod.MethodType.Constructor: "constructor",
}


@dataclass(frozen=True)
class MethodDescriptor:
    """A method entry from a class's QMetaObject."""
    name: str
    signature: str
    kind: str  # "method", "signal", "slot", "constructor"
    return_type: str
    parameter_types: Tuple[str, ...]


def is_qclass(obj: Any) -> bool:
    """True if obj is a class wrapped by the binding (or a subclass of one)."""
    return isinstance(obj, type) and issubclass(obj, sip.simplewrapper)


def is_qobject(obj: Any) -> bool:
    """True if obj is an instance of a wrapped class."""
    return isinstance(obj, sip.simplewrapper)


def _is_native(cls: type) -> bool:
    return (
        is_qclass(cls)
        and cls not in (sip.wrapper, sip.simplewrapper)
        and cls.__module__.startswith(_QT_MODULE_PREFIX)
    )


def _lookup(class_name: str) -> Optional[type]:
    for module_name in get_toolkit_config().qt_modules:
        try:
            module = importlib.import_module(module_name)
        except ImportError:
            logger.debug(f"Skipping unavailable Qt module {module_name}")
            continue
        candidate = getattr(module, class_name, None)
        if is_qclass(candidate):
            return candidate
    return None


def find_qclass(designator: Any) -> Optional[type]:
    """
    Resolve designator to a wrapped class, or None.

    Args:
        designator: A wrapped class, an instance of one, or a class name in any
            form to_qt_class_name() understands ('push-button', 'QPushButton')
    """
    if is_qclass(designator):
        return designator
    if is_qobject(designator):
        return type(designator)
    if not isinstance(designator, str):
        return None
    try:
        class_name = to_qt_class_name(designator)
    except ValueError:
        return None
    return _lookup(class_name)


def ensure_qclass(designator: Any) -> type:
    """
    Resolve designator to a wrapped class.

    Raises:
        NoCorrespondingClassError: If no class corresponds to the designator
    """
    cls = find_qclass(designator)
    if cls is None:
        raise NoCorrespondingClassError(designator)
    return cls


def qt_superclasses(designator: Any) -> List[type]:
    """Native Qt classes in the MRO of designator, nearest first."""
    cls = ensure_qclass(designator)
    return [klass for klass in cls.__mro__ if _is_native(klass)]


def qclass_name(obj: Any) -> str:
    """Name of the nearest native Qt class of a class or instance."""
    natives = qt_superclasses(obj)
    if not natives:
        raise NoCorrespondingClassError(obj)
    return natives[0].__name__


def is_direct_qsubclass(sub: Any, sup: Any) -> bool:
    """True if sup is one of the direct bases of sub."""
    return ensure_qclass(sup) in ensure_qclass(sub).__bases__


def is_qinstance(obj: Any, designator: Any) -> bool:
    """isinstance() with designator resolution. Unknown designators match nothing."""
    cls = find_qclass(designator)
    return cls is not None and isinstance(obj, cls)


def _case_classes(key: Any) -> Tuple[type, ...]:
    keys = key if isinstance(key, tuple) else (key,)
    return tuple(ensure_qclass(k) for k in keys)


def qtypecase(obj: Any, cases: Mapping[Any, Any], default: Any = None) -> Any:
    """
    Return the value of the first case whose class matches obj.

    Keys are class designators or tuples of them; cases are tried in order.

    Example:
        kind = qtypecase(widget, {
            "push-button": "button",
            ("line-edit", "text-edit"): "text",
            QWidget: "widget",
        })
    """
    for key, result in cases.items():
        if isinstance(obj, _case_classes(key)):
            return result
    return default


def _decode(data) -> str:
    return data.data().decode("utf-8")


def _describe(method: QMetaMethod) -> MethodDescriptor:
    return MethodDescriptor(
        name=_decode(method.name()),
        signature=_decode(method.methodSignature()),
        kind=_METHOD_KINDS.get(method.methodType(), "method"),
        return_type=method.typeName() or "",
        parameter_types=tuple(_decode(t) for t in method.parameterTypes()),
    )


def enumerate_methods(designator: Any, kind: Optional[str] = None,
                      own_only: bool = False) -> List[MethodDescriptor]:
    """
    Enumerate methods registered with the Qt meta-object system.

    Args:
        designator: Class designator or instance of a QObject subclass
        kind: Only return "method", "signal", "slot" or "constructor" entries
        own_only: Skip methods inherited from superclasses

    Raises:
        ValueError: If kind is not a known method kind
        TypeError: If the class has no meta object (not a QObject subclass)
    """
    if kind is not None and kind not in _METHOD_KINDS.values():
        raise ValueError(f"Unknown method kind {kind!r}. Expected one of {sorted(_METHOD_KINDS.values())}")

    if is_qobject(designator) and hasattr(designator, "metaObject"):
        meta = designator.metaObject()
    else:
        cls = ensure_qclass(designator)
        meta = getattr(cls, "staticMetaObject", None)
        if meta is None:
            raise TypeError(f"{cls.__name__} is not a QObject subclass and has no meta object")

    start = meta.methodOffset() if own_only else 0
    descriptors = [_describe(meta.method(i)) for i in range(start, meta.methodCount())]
    if kind is not None:
        descriptors = [d for d in descriptors if d.kind == kind]
    logger.debug(f"Enumerated {len(descriptors)} methods of {meta.className()} (kind={kind})")
    return descriptors


def list_signals(designator: Any) -> List[str]:
    return [d.signature for d in enumerate_methods(designator, kind="signal")]


def list_slots(designator: Any) -> List[str]:
    return [d.signature for d in enumerate_methods(designator, kind="slot")]
