"""
Core PyQt6 utilities.

Small adapters over the PyQt6 object model: generic accessors, lifecycle
helpers, layout helpers, enum and class introspection, slot binding,
option-list helpers, string utilities and main-thread bootstrap.
"""

from .strings import (
    KEEP,
    capitalize_on,
    to_method_name,
    from_method_name,
    setter_name,
    to_qt_class_name,
    natural_sort,
)
from .options import (
    ensure_list,
    plist_pairs,
    plist_get,
    remove_plist_keys,
    plist_to_alist,
    alist_to_plist,
    fuse_plists,
    fuse_alists,
    split,
)
from .introspection import (
    MethodDescriptor,
    is_qclass,
    is_qobject,
    find_qclass,
    ensure_qclass,
    qt_superclasses,
    qclass_name,
    is_direct_qsubclass,
    is_qinstance,
    qtypecase,
    enumerate_methods,
    list_signals,
    list_slots,
)
from .enums import enum_value, enum_equal, qtenumcase, eqtenumcase, enum_members
from .accessors import (
    VALUE_ACCESSORS,
    register_value_accessor,
    value,
    set_value,
    parent,
    set_parent,
    children,
    invoke,
    get_property,
    set_property,
)
from .lifecycle import is_alive, ensure_alive, maybe_delete, finalize, finalizing, copy_qobject
from .layouts import (
    iter_layout,
    map_layout,
    layout_widgets,
    sweep_layout,
    clear_layout,
    find_children,
    find_child,
)
from .signals import (
    Connection,
    parse_signal,
    resolve_signal,
    connect,
    disconnect,
    bind_slots,
    slot_bindings,
    connected,
    connect_declared_slots,
    block_signals,
)
from .application import (
    MainThreadDispatcher,
    is_main_thread,
    get_main_thread_dispatcher,
    ensure_qapplication,
    with_main_window,
)

__all__ = [
    "KEEP",
    "capitalize_on",
    "to_method_name",
    "from_method_name",
    "setter_name",
    "to_qt_class_name",
    "natural_sort",
    "ensure_list",
    "plist_pairs",
    "plist_get",
    "remove_plist_keys",
    "plist_to_alist",
    "alist_to_plist",
    "fuse_plists",
    "fuse_alists",
    "split",
    "MethodDescriptor",
    "is_qclass",
    "is_qobject",
    "find_qclass",
    "ensure_qclass",
    "qt_superclasses",
    "qclass_name",
    "is_direct_qsubclass",
    "is_qinstance",
    "qtypecase",
    "enumerate_methods",
    "list_signals",
    "list_slots",
    "enum_value",
    "enum_equal",
    "qtenumcase",
    "eqtenumcase",
    "enum_members",
    "VALUE_ACCESSORS",
    "register_value_accessor",
    "value",
    "set_value",
    "parent",
    "set_parent",
    "children",
    "invoke",
    "get_property",
    "set_property",
    "is_alive",
    "ensure_alive",
    "maybe_delete",
    "finalize",
    "finalizing",
    "copy_qobject",
    "iter_layout",
    "map_layout",
    "layout_widgets",
    "sweep_layout",
    "clear_layout",
    "find_children",
    "find_child",
    "Connection",
    "parse_signal",
    "resolve_signal",
    "connect",
    "disconnect",
    "bind_slots",
    "slot_bindings",
    "connected",
    "connect_declared_slots",
    "block_signals",
    "MainThreadDispatcher",
    "is_main_thread",
    "get_main_thread_dispatcher",
    "ensure_qapplication",
    "with_main_window",
]
