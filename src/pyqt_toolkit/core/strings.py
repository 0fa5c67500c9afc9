"""String utilities for translating between toolkit and Qt naming."""

import re
from typing import Iterable, List, TypeVar

T = TypeVar("T")

# Sentinel: keep the marker character in capitalize_on()
KEEP = object()

_SEPARATORS = "-_"
_CAMEL_BOUNDARY = re.compile(r"(?<=[a-z0-9])(?=[A-Z])|(?<=[A-Z])(?=[A-Z][a-z])")


def capitalize_on(char: str, text: str, replacement=KEEP, start_capitalized: bool = False) -> str:
    """
    Upper-case every character that follows an occurrence of char.

    Args:
        char: Marker character
        text: String to transform
        replacement: What to put in place of the marker. KEEP leaves it, None drops it.
        start_capitalized: Also upper-case the first character

    Example:
        >>> capitalize_on("-", "push-button", None, True)
        'PushButton'
    """
    if len(char) != 1:
        raise ValueError(f"Marker must be a single character, got {char!r}")

    out = []
    capitalize_next = start_capitalized
    for c in text:
        if c == char:
            if replacement is KEEP:
                out.append(c)
            elif replacement is not None:
                out.append(replacement)
            capitalize_next = True
        elif capitalize_next:
            out.append(c.upper())
            capitalize_next = False
        else:
            out.append(c)
    return "".join(out)


def _normalize_separators(name: str) -> str:
    return name.strip().replace("_", "-")


def to_method_name(name: str) -> str:
    """Convert 'set-text' or 'set_text' -> 'setText'. camelCase passes through."""
    name = _normalize_separators(name).strip("-")
    if not name:
        raise ValueError("Method name cannot be empty")
    head, _, rest = name.partition("-")
    if not rest:
        return head
    return head + capitalize_on("-", rest, None, True)


def from_method_name(name: str, separator: str = "-") -> str:
    """Convert 'setWindowTitle' -> 'set-window-title'."""
    return _CAMEL_BOUNDARY.sub(separator, name).lower()


def setter_name(name: str) -> str:
    """Convert 'window-title' -> 'setWindowTitle'."""
    method = to_method_name(name)
    return f"set{method[0].upper()}{method[1:]}"


def to_qt_class_name(name: str) -> str:
    """
    Convert a class designator string into a Qt class name.

    'push-button', 'push_button' and 'PushButton' all become 'QPushButton'.
    Names already in Qt form ('QPushButton') are returned unchanged.
    """
    name = _normalize_separators(name)
    if not name:
        raise ValueError("Class name cannot be empty")
    if re.match(r"^Q[A-Z]", name) and "-" not in name:
        return name
    camel = capitalize_on("-", name, None, True)
    if name.lower().startswith("q-"):
        return camel
    return f"Q{camel}"


def natural_sort(items: Iterable[T]) -> List[T]:
    """Return a naturally sorted list for human-friendly ordering."""
    def sort_key(value: T):
        parts = re.split(r"(\d+)", str(value))
        return [(0, int(p), "") if p.isdigit() else (1, 0, p.lower()) for p in parts]

    return sorted(list(items), key=sort_key)

