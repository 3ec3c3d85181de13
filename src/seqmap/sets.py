"""
Set algebra over sequences.

Membership uses ``ValueSet`` (native equality keyed by type and value), so
``1`` and ``1.0`` are different members. Order always follows ``data``.
"""

from __future__ import annotations

from typing import Any

from .callbacks import expect_predicate, for_sequence, inspect_callback, invoke
from .errors import NegativeSize, TypeMismatch, WrongShape
from .iteration import for_each_sequence
from .logger import logger
from .values import (
    DynamicValue,
    ValueCounter,
    ValueSet,
    is_sequence,
    require_sequence,
    types_compatible,
)


def _operands(value: DynamicValue, others: tuple[Any, ...], label: str, check_types: bool = True) -> list[Any]:
    checked = []
    for n, other in enumerate(others, start=1):
        name = f"{label} data {n}"
        if not is_sequence(other):
            raise WrongShape(f"{name} must be slice")
        other_value = require_sequence(other, name)
        if check_types and not types_compatible(value.element_type, other_value.element_type):
            logger.debug("%s element type %r", name, other_value.element_type)
            raise TypeMismatch("data type of each elements between slice must be same")
        checked.append(other)
    return checked


def difference(data: Any, *excludes: Any) -> list[Any]:
    """
    Elements of ``data`` absent from every exclude sequence. Duplicates in
    ``data`` are kept.

    Example:
        >>> difference([1, 2, 3, 4, 4, 6, 7], [2, 7])
        [1, 3, 4, 4, 6]
    """
    value = require_sequence(data)
    excluded = ValueSet()
    for other in _operands(value, excludes, "difference"):
        for each in other:
            excluded.add(each)
    return [each for each in data if each not in excluded]


def intersection(data: Any, *others: Any) -> list[Any]:
    """Unique elements of ``data`` present in all ``others``, in ``data`` order."""
    value = require_sequence(data)
    members = [ValueSet(other) for other in _operands(value, others, "intersection", check_types=False)]

    seen = ValueSet()
    result: list[Any] = []

    def visit(each: Any, i: int) -> None:
        if all(each in m for m in members) and seen.add(each):
            result.append(each)

    for_each_sequence(data, visit)
    return result


def union(data: Any, *others: Any) -> list[Any]:
    """Unique elements of all operands in argument order; first occurrence wins."""
    value = require_sequence(data)
    operands = [data, *_operands(value, others, "union")]

    seen = ValueSet()
    result: list[Any] = []
    for operand in operands:
        for each in operand:
            if seen.add(each):
                result.append(each)
    return result


def uniq(data: Any) -> list[Any]:
    return union(data)


def xor(data: Any, *others: Any) -> list[Any]:
    """
    Values that occur exactly once across ``data`` and ``others``, in the
    order they are first seen.

    An empty ``data`` gives an empty result; the other operands are still
    shape-checked.

    Example:
        >>> xor([2, 1, 4], [2, 3])
        [1, 4, 3]
    """
    value = require_sequence(data)
    operands = _operands(value, others, "xor")
    if value.length == 0:
        return []

    counter = ValueCounter()
    for operand in (data, *operands):
        for each in operand:
            counter.add(each)
    return counter.singles()


def pull(data: Any, *items: Any) -> list[Any]:
    """``data`` without any element equal to one of ``items``."""
    require_sequence(data)
    unwanted = ValueSet(items)
    return [each for each in data if each not in unwanted]


def pull_all(data: Any, items: Any) -> list[Any]:
    """Like ``pull`` with the values to remove given as one sequence."""
    require_sequence(data)
    require_sequence(items, "items")
    return pull(data, *items)


without = pull


def pull_at(data: Any, *indexes: int) -> list[Any]:
    """
    ``data`` without the elements at ``indexes``.

    Raises:
        NegativeSize: an index is negative (result: ``data``).
    """
    require_sequence(data)
    for index in indexes:
        if index < 0:
            raise NegativeSize("index must not be negative number", result=data)

    dropped = set(indexes)
    return [each for i, each in enumerate(data) if i not in dropped]


def remove(data: Any, predicate: Any) -> tuple[list[Any], list[Any]]:
    """
    Split ``data`` into ``(kept, removed)`` where ``removed`` holds the
    elements ``predicate`` accepts. Each element is visited once.
    """
    value = require_sequence(data)
    desc = expect_predicate(for_sequence(inspect_callback(predicate), value))

    kept: list[Any] = []
    removed: list[Any] = []

    def visit(each: Any, i: int) -> None:
        (removed if invoke(desc, each, i) else kept).append(each)

    for_each_sequence(data, visit)
    return kept, removed
