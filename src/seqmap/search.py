"""
Search algorithms.

Offsets follow one convention throughout: a negative ``from_index`` counts
back from the end of the data (``len + from_index``). Equality is native
equality (``same_value``), so ``3`` and ``3.0`` are different values here.
"""

from __future__ import annotations

from typing import Any

from .callbacks import expect_predicate, for_sequence, inspect_callback, invoke
from .errors import NegativeSize, WrongShape
from .iteration import for_each_map, for_each_sequence
from .values import inspect_value, require_sequence, same_value

_NOT_FOUND = -1


def _forward_start(length: int, from_index: int) -> int:
    if from_index < 0:
        return max(0, length + from_index)
    return from_index


def _backward_start(length: int, from_index: int | None) -> int:
    if from_index is None:
        return length - 1
    if from_index < 0:
        return length + from_index
    return min(from_index, length - 1)


def index_of(data: Any, search: Any, from_index: int = 0) -> int:
    """
    Index of the first occurrence of ``search`` at or after ``from_index``.

    Returns -1 when absent or when ``from_index`` is past the end.

    Example:
        >>> index_of(["a", "b", "b"], "b", -1)
        2
    """
    value = require_sequence(data)
    if from_index >= value.length:
        return _NOT_FOUND

    for i in range(_forward_start(value.length, from_index), value.length):
        if same_value(data[i], search):
            return i
    return _NOT_FOUND


def last_index_of(data: Any, search: Any, from_index: int | None = None) -> int:
    """
    Index of the last occurrence of ``search`` at or before ``from_index``
    (default: the last element). Returns -1 when absent or the start
    falls before the first element.
    """
    value = require_sequence(data)
    start = _backward_start(value.length, from_index)

    for i in range(start, -1, -1):
        if same_value(data[i], search):
            return i
    return _NOT_FOUND


def _predicate(data: Any, predicate: Any):
    value = require_sequence(data)
    desc = expect_predicate(for_sequence(inspect_callback(predicate), value))
    return value, desc


def find_index(data: Any, predicate: Any, from_index: int = 0) -> int:
    """Position of the first element ``predicate`` accepts, else -1."""
    value, desc = _predicate(data, predicate)
    if from_index >= value.length:
        return _NOT_FOUND

    for i in range(_forward_start(value.length, from_index), value.length):
        if invoke(desc, data[i], i):
            return i
    return _NOT_FOUND


def find(data: Any, predicate: Any, from_index: int = 0) -> Any:
    """First element ``predicate`` accepts, else ``None``."""
    i = find_index(data, predicate, from_index)
    return data[i] if i != _NOT_FOUND else None


def find_last_index(data: Any, predicate: Any, from_index: int | None = None) -> int:
    """Like ``find_index`` but scans right to left from ``from_index``."""
    value, desc = _predicate(data, predicate)
    start = _backward_start(value.length, from_index)

    for i in range(start, -1, -1):
        if invoke(desc, data[i], i):
            return i
    return _NOT_FOUND


def find_last(data: Any, predicate: Any, from_index: int | None = None) -> Any:
    """Last element ``predicate`` accepts, else ``None``."""
    i = find_last_index(data, predicate, from_index)
    return data[i] if i != _NOT_FOUND else None


def includes(data: Any, search: Any, from_index: int = 0) -> bool:
    """
    Membership test.

    Strings test for a substring. Sequences are scanned from
    ``from_index``; maps are scanned by value, never by key.
    """
    if isinstance(data, str):
        if isinstance(search, str):
            return search in data
        return False

    value = inspect_value(data)

    if from_index < 0:
        raise NegativeSize("start index must not be negative number")

    if value.length == 0:
        return False

    found = False

    def matches(each: Any, i: int) -> bool:
        nonlocal found
        if i >= from_index and same_value(each, search):
            found = True
            return False
        return True

    if value.is_map:
        for_each_map(data, lambda each, key, i: matches(each, i), stoppable=True)
    elif value.is_sequence:
        for_each_sequence(data, matches, stoppable=True)
    else:
        raise WrongShape("data must be slice, map, or a string")

    return found


contains = includes


def nth(data: Any, n: int) -> Any:
    """Element at ``n``; negative ``n`` counts from the end. ``None`` if out of range."""
    value = require_sequence(data)
    if n < 0:
        n = value.length + n
    if 0 <= n < value.length:
        return data[n]
    return None


def first(data: Any) -> Any:
    value = require_sequence(data)
    return data[0] if value.length else None


head = first


def last(data: Any) -> Any:
    value = require_sequence(data)
    return data[value.length - 1] if value.length else None
