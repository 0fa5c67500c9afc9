"""
Enum comparison and case dispatch.

PyQt6 exposes Qt enums as Python Enum/Flag classes while many event and
model accessors still return plain ints (QKeyEvent.key(), for example).
These helpers compare both by integer value.
"""

from enum import Enum
from typing import Any, Dict, Mapping, Type

from pyqt_toolkit.exceptions import ToolkitError

_NO_MATCH = object()


def enum_value(value: Any) -> int:
    """
    Integer value of an enum member, flag combination or int.

    Raises:
        TypeError: If value is neither an enum member nor an int
    """
    if isinstance(value, Enum):
        value = value.value
    if isinstance(value, bool) or not isinstance(value, int):
        raise TypeError(f"Cannot take the enum value of {type(value).__name__}: {value!r}")
    return int(value)


def enum_equal(a: Any, b: Any) -> bool:
    """Compare enum members, flags and ints by integer value."""
    return enum_value(a) == enum_value(b)


def _match(value: Any, cases: Mapping[Any, Any]) -> Any:
    target = enum_value(value)
    for key, result in cases.items():
        keys = key if isinstance(key, tuple) else (key,)
        if any(enum_value(k) == target for k in keys):
            return result
    return _NO_MATCH


def qtenumcase(value: Any, cases: Mapping[Any, Any], default: Any = None) -> Any:
    """
    Return the value mapped to the first key equal to value.

    Keys are enum members, ints or tuples of them.

    Example:
        action = qtenumcase(event.key(), {
            Qt.Key.Key_Escape: self.close,
            (Qt.Key.Key_Return, Qt.Key.Key_Enter): self.accept,
        }, default=lambda: None)
        action()
    """
    result = _match(value, cases)
    return default if result is _NO_MATCH else result


def eqtenumcase(value: Any, cases: Mapping[Any, Any]) -> Any:
    """
    Like qtenumcase() but fail loud when no key matches.

    Raises:
        ToolkitError: If value matches none of the keys
    """
    result = _match(value, cases)
    if result is _NO_MATCH:
        raise ToolkitError(f"{value!r} fell through eqtenumcase, expected one of {list(cases.keys())}")
    return result


def enum_members(enum_type: Type[Enum]) -> Dict[str, Enum]:
    """{name: member} of an enum class, aliases included."""
    if not (isinstance(enum_type, type) and issubclass(enum_type, Enum)):
        raise TypeError(f"Expected an Enum class, got {enum_type!r}")
    return dict(enum_type.__members__)
