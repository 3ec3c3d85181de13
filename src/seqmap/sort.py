"""
Ordering engine: a stable merge sort over key-function results.

Keys are compared across kinds:

- numbers with numbers and strings with strings compare natively;
- a number against a string parses the string as the number's type,
  falling back to 0 when it does not parse;
- anything else cannot be ordered. The whole run is then abandoned and
  the data comes back in its original order, with a warning logged and no
  error raised.

With ``concurrent=True`` the two halves of every split are sorted as
separate asyncio tasks and joined before their merge, so the merge always
sees both halves complete.
"""

from __future__ import annotations

import asyncio
import inspect
import numbers
from typing import Any, Awaitable, Callable, TypeVar, Union

from .callbacks import expect_transform, for_key_only, inspect_callback
from .logger import logger
from .values import is_numeric, require_sequence

T = TypeVar("T")

KeyFunc = Callable[[T], Union[Any, Awaitable[Any]]]

_Keyed = list[tuple[Any, Any]]


class _Unsortable(Exception):
    """Two keys of incomparable kinds met in a merge."""


def _parse_as(number: Any, text: str) -> Any:
    stripped = text.strip()
    if not stripped:
        return 0
    try:
        if isinstance(number, numbers.Integral):
            return int(stripped)
        return type(number)(stripped)
    except (ValueError, TypeError, ArithmeticError):
        return 0


def compare_keys(left: Any, right: Any) -> int:
    """
    Three-way comparison of two key values under the cross-kind rules.

    Returns negative, zero or positive like a classic ``cmp``.

    Raises:
        _Unsortable: the kinds cannot be ordered against each other.
    """
    if isinstance(left, str) and isinstance(right, str):
        pass
    elif is_numeric(left) and is_numeric(right):
        pass
    elif is_numeric(left) and isinstance(right, str):
        right = _parse_as(left, right)
    elif isinstance(left, str) and is_numeric(right):
        left = _parse_as(right, left)
    else:
        raise _Unsortable(f"cannot order {type(left).__name__} against {type(right).__name__}")
    try:
        return (left > right) - (left < right)
    except TypeError as err:
        # e.g. Fraction against Decimal
        raise _Unsortable(str(err)) from err


def _merge(left: _Keyed, right: _Keyed, ascending: bool) -> _Keyed:
    merged: _Keyed = []
    i = j = 0
    while i < len(left) and j < len(right):
        order = compare_keys(left[i][0], right[j][0])
        take_left = order <= 0 if ascending else order >= 0
        if take_left:
            merged.append(left[i])
            i += 1
        else:
            merged.append(right[j])
            j += 1
    merged.extend(left[i:])
    merged.extend(right[j:])
    return merged


def _merge_sort(items: _Keyed, ascending: bool) -> _Keyed:
    if len(items) < 2:
        return items
    mid = len(items) // 2
    return _merge(_merge_sort(items[:mid], ascending), _merge_sort(items[mid:], ascending), ascending)


async def _merge_sort_async(items: _Keyed, ascending: bool) -> _Keyed:
    if len(items) < 2:
        return items
    mid = len(items) // 2
    halves = await asyncio.gather(
        _merge_sort_async(items[:mid], ascending),
        _merge_sort_async(items[mid:], ascending),
        return_exceptions=True,
    )
    for half in halves:
        if isinstance(half, BaseException):
            raise half
    return _merge(halves[0], halves[1], ascending)


async def _resolve_key(key: Callable[[Any], Any], each: Any) -> tuple[Any, Any]:
    k = key(each)
    if inspect.isawaitable(k):
        k = await k
    return (k, each)


def _validate(data: Any, key: Any):
    value = require_sequence(data)
    return value, expect_transform(for_key_only(inspect_callback(key), value))


def _fallback(data: Any, err: _Unsortable) -> list[Any]:
    logger.warning("order_by: %s; returning data in original order", err)
    return list(data)


async def order_by_async(data: Any, key: KeyFunc, ascending: bool = True) -> list[Any]:
    """
    Sort ``data`` by ``key`` with concurrent merge sort tasks.

    ``key`` may be a coroutine function; all keys are awaited together
    before sorting starts.

    Example:
        sorted_people = await order_by_async(people, lambda p: p["age"])
    """
    _validate(data, key)
    keyed = list(await asyncio.gather(*(_resolve_key(key, each) for each in data)))
    try:
        ordered = await _merge_sort_async(keyed, ascending)
    except _Unsortable as err:
        return _fallback(data, err)
    return [each for _, each in ordered]


def order_by(data: Any, key: KeyFunc, ascending: bool = True, concurrent: bool = False) -> list[Any]:
    """
    Stable merge sort of ``data`` by ``key``.

    Args:
        data: Sequence to sort. Not modified.
        key: Function of one element returning its sort key.
        ascending: Sort direction. Ties keep input order in both directions.
        concurrent: Fork each half of the merge sort as an asyncio task.
                    Runs its own event loop, so it cannot be used from
                    inside a running loop (await ``order_by_async`` there).
                    Coroutine key functions always take this path.

    Returns:
        A new sorted list, or the data in original order if two keys could
        not be compared.
    """
    _validate(data, key)

    if concurrent or inspect.iscoroutinefunction(key):
        return asyncio.run(order_by_async(data, key, ascending))

    keyed = [(key(each), each) for each in data]
    try:
        ordered = _merge_sort(keyed, ascending)
    except _Unsortable as err:
        return _fallback(data, err)
    return [each for _, each in ordered]


sort_by = order_by


__all__ = ["KeyFunc", "compare_keys", "order_by", "order_by_async", "sort_by"]
