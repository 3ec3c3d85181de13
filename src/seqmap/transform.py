"""
Transformation algorithms.

Each function validates its input first, then walks it with the iteration
primitives and builds a fresh result. Inputs are never modified.

``group_by``, ``key_by`` and ``from_pairs`` build plain dicts, so keys follow
dict equality rather than the native equality used by search and set
algebra: ``1``, ``True`` and ``1.0`` land on the same key, and the first of
them to arrive is the key that is kept.
"""

from __future__ import annotations

from collections.abc import Hashable
from typing import Any

from .callbacks import (
    expect_predicate,
    expect_transform,
    for_container,
    for_sequence,
    inspect_callback,
    invoke,
)
from .errors import BoundsInvalid, NegativeSize, TypeMismatch, UnhashableKey, WrongShape
from .iteration import for_each_map, for_each_sequence, for_each_sequence_right
from .logger import logger
from .values import (
    is_falsy,
    is_sequence,
    require_collection,
    require_sequence,
    types_compatible,
)


def _check_size(size: int, data: Any, label: str = "size") -> None:
    if size < 0:
        raise NegativeSize(f"{label} must not be negative number", result=data)


def _hashable(key: Any) -> bool:
    if not isinstance(key, Hashable):
        return False
    try:
        hash(key)
    except TypeError:
        return False
    return True


def chunk(data: Any, size: int) -> list[list[Any]]:
    """
    Split ``data`` into lists of ``size`` elements; the last may be shorter.

    Example:
        >>> chunk([1, 2, 3, 4, 5], 2)
        [[1, 2], [3, 4], [5]]
    """
    require_sequence(data)
    if size < 0:
        raise NegativeSize("size must not be negative number")

    result: list[list[Any]] = []
    if size == 0:
        return result

    current: list[Any] = []

    def visit(each: Any, i: int) -> None:
        nonlocal current
        current.append(each)
        if len(current) == size or i + 1 == len(data):
            result.append(current)
            current = []

    for_each_sequence(data, visit)
    return result


def compact(data: Any) -> list[Any]:
    """Drop ``None``, ``False``, zeros and empty strings."""
    require_sequence(data)
    return [each for each in data if not is_falsy(each)]


def concat(data: Any, *others: Any) -> list[Any]:
    """
    Append ``others`` to ``data``.

    Raises:
        WrongShape: an operand is not a sequence.
        TypeMismatch: an operand's element type differs from ``data``'s.
                      The error carries ``data`` as its result.
    """
    value = require_sequence(data)
    result = list(data)

    for n, other in enumerate(others, start=1):
        label = f"concat data {n}"
        if not is_sequence(other):
            raise WrongShape(f"{label} must be slice", result=data)
        other_value = require_sequence(other, label)
        if not types_compatible(value.element_type, other_value.element_type):
            logger.debug("concat operand %d element type %r", n, other_value.element_type)
            raise TypeMismatch(
                "data type of each elements between slice must be same", result=data
            )
        result.extend(other)

    return result


def concat_many(data: Any, others: Any = ()) -> list[Any]:
    """``concat`` taking the extra operands as one sequence."""
    return concat(data, *others)


def map_(data: Any, callback: Any) -> list[Any]:
    """
    Run every element through ``callback`` and collect the outputs.

    Maps are walked value-first: the callback receives
    ``(value)``, ``(value, key)`` or ``(value, key, index)``.
    """
    value = require_collection(data)
    desc = expect_transform(for_container(inspect_callback(callback), value))

    result: list[Any] = []
    if value.is_map:
        for_each_map(data, lambda v, k, i: result.append(invoke(desc, v, k, i)))
    else:
        for_each_sequence(data, lambda v, i: result.append(invoke(desc, v, i)))
    return result


def _select(data: Any, predicate: Any, keep: bool) -> Any:
    value = require_collection(data)
    desc = expect_predicate(for_container(inspect_callback(predicate), value))

    if value.is_map:
        selected: dict[Any, Any] = {}

        def visit_map(v: Any, k: Any, i: int) -> None:
            if bool(invoke(desc, v, k, i)) is keep:
                selected[k] = v

        for_each_map(data, visit_map)
        return selected

    result: list[Any] = []

    def visit(v: Any, i: int) -> None:
        if bool(invoke(desc, v, i)) is keep:
            result.append(v)

    for_each_sequence(data, visit)
    return result


def filter_(data: Any, predicate: Any) -> Any:
    """Elements ``predicate`` accepts. A dict input gives a dict."""
    return _select(data, predicate, keep=True)


def reject(data: Any, predicate: Any) -> Any:
    """Elements ``predicate`` refuses. A dict input gives a dict."""
    return _select(data, predicate, keep=False)


def group_by(data: Any, callback: Any) -> dict[Any, list[Any]]:
    """
    Bucket elements by ``callback``'s result, keeping discovery order
    inside each bucket.

    Example:
        >>> group_by([1.1, 2.5, 1.9], int)
        {1: [1.1, 1.9], 2: [2.5]}
    """
    value = require_sequence(data)
    desc = expect_transform(for_sequence(inspect_callback(callback), value))

    groups: dict[Any, list[Any]] = {}

    def visit(each: Any, i: int) -> None:
        key = invoke(desc, each, i)
        if not _hashable(key):
            raise UnhashableKey(f"hash of unhashable type {type(key).__name__}")
        groups.setdefault(key, []).append(each)

    for_each_sequence(data, visit)
    return groups


def key_by(data: Any, callback: Any) -> dict[Any, Any]:
    """Map ``callback``'s result to the element; the last element wins."""
    value = require_sequence(data)
    desc = expect_transform(for_sequence(inspect_callback(callback), value))

    keyed: dict[Any, Any] = {}

    def visit(each: Any, i: int) -> None:
        key = invoke(desc, each, i)
        if not _hashable(key):
            raise UnhashableKey(f"hash of unhashable type {type(key).__name__}")
        keyed[key] = each

    for_each_sequence(data, visit)
    return keyed


def from_pairs(data: Any) -> dict[Any, Any]:
    """
    Build a dict from ``[key, value]`` pairs.

    A pair missing its value maps to ``None``; elements past the second are
    ignored; empty pairs are skipped.

    Raises:
        WrongShape: a pair is not a sequence.
        UnhashableKey: a pair's key cannot be a dict key.
    """
    require_sequence(data)
    result: dict[Any, Any] = {}

    for pair in data:
        if not is_sequence(pair):
            raise WrongShape("each pair must be slice")
        if len(pair) == 0:
            continue
        key = pair[0]
        if not _hashable(key):
            raise UnhashableKey(f"hash of unhashable type {type(key).__name__}")
        result[key] = pair[1] if len(pair) > 1 else None

    return result


def partition(data: Any, predicate: Any) -> tuple[list[Any], list[Any]]:
    """Split into ``(accepted, refused)``, each in original order."""
    value = require_sequence(data)
    desc = expect_predicate(for_sequence(inspect_callback(predicate), value))

    truthy: list[Any] = []
    falsy: list[Any] = []

    def visit(each: Any, i: int) -> None:
        (truthy if invoke(desc, each, i) else falsy).append(each)

    for_each_sequence(data, visit)
    return truthy, falsy


def fill(data: Any, value: Any, start: int = 0, end: int | None = None) -> list[Any]:
    """
    Copy of ``data`` with positions ``start`` up to, not including, ``end``
    replaced by ``value``.

    Raises:
        NegativeSize: ``start`` or ``end`` is negative (result: ``data``).
        BoundsInvalid: ``end`` is before ``start``.
        TypeMismatch: ``value`` is not of the element type. ``True`` does not
                      fit an ``int`` list, nor ``0`` a ``float`` list.
    """
    inspected = require_sequence(data)
    if end is None:
        end = inspected.length

    _check_size(start, data, "start index")
    _check_size(end, data, "last index")
    if end < start:
        raise BoundsInvalid("last index must be greater or equal than start index")

    if inspected.length == 0:
        return []

    if not types_compatible(inspected.element_type, type(value)):
        raise TypeMismatch("replacement data type must be same with slice's element type")

    return [value if start <= i < end else each for i, each in enumerate(data)]


def reverse(data: Any) -> list[Any]:
    require_sequence(data)
    result: list[Any] = []
    for_each_sequence_right(data, lambda each, i: result.append(each))
    return result


def take(data: Any, size: int) -> list[Any]:
    """First ``size`` elements."""
    require_sequence(data)
    _check_size(size, data)
    return list(data[:size])


def take_right(data: Any, size: int) -> list[Any]:
    """Last ``size`` elements."""
    value = require_sequence(data)
    _check_size(size, data)
    return list(data[max(0, value.length - size):])


def drop(data: Any, size: int) -> list[Any]:
    """All but the first ``size`` elements."""
    require_sequence(data)
    _check_size(size, data)
    return list(data[size:])


def drop_right(data: Any, size: int) -> list[Any]:
    """All but the last ``size`` elements."""
    value = require_sequence(data)
    _check_size(size, data)
    return list(data[: max(0, value.length - size)])


def initial(data: Any) -> list[Any]:
    return drop_right(data, 1)


def tail(data: Any) -> list[Any]:
    return drop(data, 1)


def join(data: Any, separator: str) -> str:
    """``str`` of every non-``None`` element, joined by ``separator``."""
    require_sequence(data)
    return separator.join(str(each) for each in data if each is not None)
