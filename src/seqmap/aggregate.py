"""Aggregation: count, reduce and size."""

from __future__ import annotations

from typing import Any

from .callbacks import (
    expect_predicate,
    expect_transform,
    for_container,
    inspect_callback,
    invoke,
)
from .errors import ArityMismatch, ParameterTypeMismatch, WrongShape
from .iteration import for_each_map, for_each_sequence
from .values import Shape, accepts, accepts_all, inspect_value, require_collection


def count(data: Any, predicate: Any = None) -> int:
    """
    Number of elements, or of elements ``predicate`` accepts.

    Works on sequences and maps; map predicates see
    ``(value[, key[, index]])``.
    """
    value = require_collection(data)
    if predicate is None:
        return value.length

    desc = expect_predicate(for_container(inspect_callback(predicate), value))
    total = 0

    def hit(outcome: Any) -> None:
        nonlocal total
        if outcome:
            total += 1

    if value.is_map:
        for_each_map(data, lambda v, k, i: hit(invoke(desc, v, k, i)))
    else:
        for_each_sequence(data, lambda v, i: hit(invoke(desc, v, i)))
    return total


def count_by(data: Any, predicate: Any) -> int:
    return count(data, predicate)


def reduce(data: Any, callback: Any, initial: Any) -> Any:
    """
    Left fold of ``data`` starting from ``initial``.

    The callback takes ``(accumulator, value)`` or
    ``(accumulator, value, index)`` (``key`` instead of ``index`` for maps).
    The type of ``initial`` fixes the accumulator type: an annotated first
    parameter must accept it.

    Example:
        >>> reduce([1, 2, 3], lambda acc, v: acc + v, 10)
        16
    """
    value = require_collection(data)
    desc = inspect_callback(callback)

    if desc.arg_count < 2 or desc.arg_count > 3:
        raise ArityMismatch("callback must only have two or three parameters")

    if not accepts(desc.param(0), type(initial)):
        raise ParameterTypeMismatch(
            "callback 1st parameter's data type should be same with initial value's data type"
        )

    what = "map value data type" if value.is_map else "slice element data type"
    if not accepts_all(desc.param(1), value.element_types):
        raise ParameterTypeMismatch(f"callback 2nd parameter's data type should be same with {what}")

    if desc.arg_count == 3:
        third = value.key_types if value.is_map else (int,)
        if not accepts_all(desc.param(2), third):
            raise ParameterTypeMismatch(
                "callback 3rd parameter's data type should be same with "
                + ("map key type" if value.is_map else "int")
            )

    expect_transform(desc)

    accumulator = initial

    def step(each: Any, key_or_index: Any) -> None:
        nonlocal accumulator
        if desc.arg_count == 2:
            accumulator = desc.func(accumulator, each)
        else:
            accumulator = desc.func(accumulator, each, key_or_index)

    if value.is_map:
        for_each_map(data, lambda v, k, i: step(v, k))
    else:
        for_each_sequence(data, step)
    return accumulator


def size(data: Any) -> int:
    """Length of a sequence or map; character count of a string."""
    value = inspect_value(data)
    if value.shape is Shape.STRING and not isinstance(data, str):
        raise WrongShape("data must be slice, map, or a string")
    return value.length
