"""
Property-list and association-list helpers.

A plist is a flat sequence of alternating keys and values:
    ["title", "Main", "width", 400]
An alist is a sequence of (key, value) pairs:
    [("title", "Main"), ("width", 400)]

Both are used for option lists passed to widget constructors and
bootstrap helpers, where the same key may legitimately appear more than once.
"""

import operator
from typing import Any, Callable, Dict, Iterable, Iterator, List, Optional, Sequence, Tuple


def ensure_list(value: Any) -> list:
    """None -> [], list -> itself, tuple -> list, anything else -> [value]."""
    if value is None:
        return []
    if isinstance(value, list):
        return value
    if isinstance(value, tuple):
        return list(value)
    return [value]


def plist_pairs(plist: Sequence) -> Iterator[Tuple[Any, Any]]:
    """Iterate (key, value) pairs of a plist."""
    if len(plist) % 2:
        raise ValueError(f"Plist has an odd number of elements: {list(plist)!r}")
    it = iter(plist)
    return zip(it, it)


def plist_get(plist: Sequence, key: Any, default: Any = None) -> Any:
    """Return the first value stored under key, or default."""
    for k, v in plist_pairs(plist):
        if k == key:
            return v
    return default


def remove_plist_keys(plist: Sequence, *keys: Any) -> list:
    """Return a new plist with every entry for the given keys removed."""
    result = []
    for k, v in plist_pairs(plist):
        if k not in keys:
            result.extend((k, v))
    return result


def plist_to_alist(plist: Sequence) -> List[Tuple[Any, Any]]:
    return list(plist_pairs(plist))


def alist_to_plist(alist: Iterable[Tuple[Any, Any]]) -> list:
    result = []
    for k, v in alist:
        result.extend((k, v))
    return result


def _fuse(pairs: Iterable[Tuple[Any, Any]]) -> Dict[Any, list]:
    fused: Dict[Any, list] = {}
    for k, v in pairs:
        fused.setdefault(k, []).extend(ensure_list(v))
    return fused


def fuse_plists(*plists: Sequence) -> list:
    """
    Combine plists into one, each key appearing once.

    Values of the same key are concatenated into a list, in order.

    Example:
        >>> fuse_plists(["a", 1, "b", 2], ["a", [3, 4]])
        ['a', [1, 3, 4], 'b', [2]]
    """
    fused = _fuse(pair for plist in plists for pair in plist_pairs(plist))
    return alist_to_plist(fused.items())


def fuse_alists(*alists: Iterable[Tuple[Any, Any]]) -> List[Tuple[Any, list]]:
    """
    Combine alists into one, each key appearing once.

    Example:
        >>> fuse_alists([("a", 1)], [("a", 2), ("b", 3)])
        [('a', [1, 2]), ('b', [3])]
    """
    fused = _fuse(pair for alist in alists for pair in alist)
    return list(fused.items())


def split(
    items: Iterable,
    markers: Sequence,
    key: Optional[Callable[[Any], Any]] = None,
    test: Callable[[Any, Any], bool] = operator.eq,
) -> List[list]:
    """
    Segregate items into buckets according to markers.

    Returns a list of len(markers) + 1 lists. The first holds items matching
    no marker; bucket i + 1 holds items matching markers[i]. An item goes to
    the first marker it matches.

    Example:
        >>> split([1, 2, 3, 1], [1, 3])
        [[2], [1, 1], [3]]
    """
    buckets: List[list] = [[] for _ in range(len(markers) + 1)]
    for item in items:
        probe = key(item) if key is not None else item
        for index, marker in enumerate(markers):
            if test(probe, marker):
                buckets[index + 1].append(item)
                break
        else:
            buckets[0].append(item)
    return buckets
