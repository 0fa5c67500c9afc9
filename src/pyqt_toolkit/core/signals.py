"""
Slot binding and signal blocking.

Signals are named the way Qt documents them, optionally with an argument
list that selects an overload: "clicked", "clicked()", "valueChanged(int)",
"textChanged(QString)".

Examples:
    # Connect and keep the handle:
    conn = connect(button, "clicked()", on_click)
    disconnect(conn)

    # Connect for the duration of a block:
    with slot_bindings(line_edit, {"textChanged(QString)": on_text}):
        dialog.exec()

    # Declare connections on methods:
    class Editor(QWidget):
        @connected("save_button", "clicked()")
        def save(self): ...

    connect_declared_slots(editor)
"""

import logging
import operator
import re
from contextlib import contextmanager
from dataclasses import dataclass, field
from typing import Any, Callable, List, Mapping, Optional, Tuple

from pyqt_toolkit.exceptions import NoSuchMethodError, ToolkitError
from .introspection import find_qclass
from .lifecycle import is_alive

logger = logging.getLogger(__name__)

_SIGNAL_SPEC = re.compile(r"^\s*([A-Za-z_][A-Za-z0-9_]*)\s*(?:\((.*)\))?\s*$")

# C++ argument type names and their Python counterparts
_ARGUMENT_TYPES = {
    "int": int,
    "uint": int,
    "qint64": int,
    "double": float,
    "float": float,
    "qreal": float,
    "bool": bool,
    "QString": str,
    "str": str,
    "QVariant": object,
}

_DECLARED_ATTR = "_pyqt_toolkit_connections"


@dataclass
class Connection:
    """A live signal-slot connection made by connect()."""
    sender: Any
    spec: str
    slot: Callable
    signal: Any = field(repr=False)
    handle: Any = field(repr=False)
    active: bool = True


def parse_signal(spec: str) -> Tuple[str, Tuple[str, ...]]:
    """
    Split a signal spec into name and argument types.

    Example:
        >>> parse_signal("valueChanged(int)")
        ('valueChanged', ('int',))

    Raises:
        ValueError: If spec is not a valid signal spec
    """
    match = _SIGNAL_SPEC.match(spec)
    if match is None:
        raise ValueError(f"Invalid signal spec {spec!r}")
    name, args = match.groups()
    if not args or not args.strip():
        return name, ()
    return name, tuple(arg.strip().rstrip("&").replace("const ", "").strip() for arg in args.split(","))


def _argument_type(type_name: str) -> Any:
    if type_name in _ARGUMENT_TYPES:
        return _ARGUMENT_TYPES[type_name]
    cls = find_qclass(type_name) if type_name.startswith("Q") else None
    # PyQt accepts C++ type names for types it has no Python class for
    return cls if cls is not None else type_name


def resolve_signal(obj: Any, spec: str) -> Any:
    """
    Return the bound signal of obj named by spec.

    Raises:
        NoSuchMethodError: If obj has no such signal
        ToolkitError: If no overload matches the argument types
    """
    name, arg_types = parse_signal(spec)
    signal = getattr(obj, name, None)
    if signal is None or not hasattr(signal, "connect") or not hasattr(signal, "emit"):
        raise NoSuchMethodError(f"{type(obj).__name__} has no signal {name}")
    if not arg_types:
        return signal

    types = tuple(_argument_type(t) for t in arg_types)
    key = types[0] if len(types) == 1 else types
    try:
        return signal[key]
    except (KeyError, TypeError) as e:
        raise ToolkitError(f"{type(obj).__name__}.{name} has no overload {spec}") from e


def connect(sender: Any, spec: str, slot: Callable) -> Connection:
    """Connect slot to the signal of sender named by spec."""
    signal = resolve_signal(sender, spec)
    handle = signal.connect(slot)
    logger.debug(f"Connected {type(sender).__name__}.{spec} -> {getattr(slot, '__name__', slot)}")
    return Connection(sender=sender, spec=spec, slot=slot, signal=signal, handle=handle)


def disconnect(connection: Connection) -> bool:
    """
    Break a connection made by connect().

    Disconnecting twice, or after the sender was deleted, is a no-op.

    Returns:
        True if a live connection was broken
    """
    if not connection.active:
        return False
    connection.active = False
    if not is_alive(connection.sender):
        return False
    connection.signal.disconnect(connection.handle)
    logger.debug(f"Disconnected {type(connection.sender).__name__}.{connection.spec}")
    return True


def bind_slots(sender: Any, bindings: Mapping[str, Callable]) -> List[Connection]:
    """Connect each {spec: slot} of bindings on sender."""
    return [connect(sender, spec, slot) for spec, slot in bindings.items()]


@contextmanager
def slot_bindings(sender: Any, bindings: Mapping[str, Callable]):
    """Context manager connecting bindings on entry and disconnecting on exit."""
    connections = bind_slots(sender, bindings)
    try:
        yield connections
    finally:
        for connection in connections:
            disconnect(connection)


def connected(source: Optional[str], spec: str):
    """
    Declare that a method is a slot for a signal.

    Args:
        source: Attribute path of the sender on the instance ("ui.button"),
            or None for the instance itself
        spec: Signal spec

    Declarations are wired by connect_declared_slots(). A method may carry
    several declarations.
    """
    parse_signal(spec)

    def decorator(function: Callable) -> Callable:
        declarations = list(getattr(function, _DECLARED_ATTR, ()))
        declarations.append((source, spec))
        setattr(function, _DECLARED_ATTR, declarations)
        return function

    return decorator


def connect_declared_slots(instance: Any) -> List[Connection]:
    """
    Wire every @connected declaration of instance's class hierarchy.

    Methods overridden in a subclass are wired once, using the subclass's
    declarations.
    """
    seen = set()
    connections = []
    for klass in type(instance).__mro__:
        for attr_name, function in vars(klass).items():
            if attr_name in seen:
                continue
            seen.add(attr_name)
            for source, spec in getattr(function, _DECLARED_ATTR, ()):
                sender = instance if source is None else operator.attrgetter(source)(instance)
                connections.append(connect(sender, spec, getattr(instance, attr_name)))
    logger.debug(f"Wired {len(connections)} declared slots on {type(instance).__name__}")
    return connections


@contextmanager
def block_signals(*objs: Any):
    """
    Context manager blocking signals of objs, restoring the previous state on exit.

    Example:
        with block_signals(checkbox, spinbox):
            checkbox.setChecked(True)
            spinbox.setValue(2)
    """
    previous = []
    for obj in objs:
        if obj is not None:
            previous.append((obj, obj.blockSignals(True)))
    try:
        yield
    finally:
        for obj, was_blocked in previous:
            if is_alive(obj):
                obj.blockSignals(was_blocked)
