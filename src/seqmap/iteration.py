"""
Traversal primitives.

Four walks (sequence and map, each forward or backward). Visitors receive
``(value, index)`` for sequences and ``(value, key, index)`` for maps. With
``stoppable=True`` a visitor returning ``False`` ends the walk; any other
return value, ``None`` included, continues it.

Map walks follow the mapping's own key order.
"""

from __future__ import annotations

from collections.abc import Mapping, Sequence
from typing import Any, Callable

from .callbacks import expect_side_effect, for_container, inspect_callback, invoke
from .values import require_collection

SequenceVisitor = Callable[[Any, int], Any]
MapVisitor = Callable[[Any, Any, int], Any]


def _halt(stoppable: bool, outcome: Any) -> bool:
    return stoppable and outcome is False


def for_each_sequence(data: Sequence[Any], visit: SequenceVisitor, stoppable: bool = False) -> None:
    for i in range(len(data)):
        if _halt(stoppable, visit(data[i], i)):
            return


def for_each_sequence_right(data: Sequence[Any], visit: SequenceVisitor, stoppable: bool = False) -> None:
    for i in range(len(data) - 1, -1, -1):
        if _halt(stoppable, visit(data[i], i)):
            return


def for_each_map(data: Mapping[Any, Any], visit: MapVisitor, stoppable: bool = False) -> None:
    for i, key in enumerate(list(data.keys())):
        if _halt(stoppable, visit(data[key], key, i)):
            return


def for_each_map_right(data: Mapping[Any, Any], visit: MapVisitor, stoppable: bool = False) -> None:
    keys = list(data.keys())
    for i in range(len(keys) - 1, -1, -1):
        key = keys[i]
        if _halt(stoppable, visit(data[key], key, i)):
            return


def _each(data: Any, callback: Any, forward: bool) -> None:
    value = require_collection(data)
    desc = expect_side_effect(for_container(inspect_callback(callback), value))

    if value.is_map:
        walk = for_each_map if forward else for_each_map_right
        walk(data, lambda v, k, i: invoke(desc, v, k, i), stoppable=True)
    else:
        walk = for_each_sequence if forward else for_each_sequence_right
        walk(data, lambda v, i: invoke(desc, v, i), stoppable=True)


def each(data: Any, callback: Any) -> None:
    """
    Invoke ``callback`` for every element of a sequence or map.

    The callback may return ``False`` to stop early.

    Example:
        >>> seen = []
        >>> each([1, 2, 3], lambda v: seen.append(v) or v < 2)
        >>> seen
        [1, 2]
    """
    _each(data, callback, forward=True)


def each_right(data: Any, callback: Any) -> None:
    """Like ``each`` but walks from the last element to the first."""
    _each(data, callback, forward=False)


for_each = each
for_each_right = each_right
