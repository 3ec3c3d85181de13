"""
Value inspection: shape, element types and equality for untyped containers.

Every public operation starts here. ``inspect_value`` classifies the input
as a sequence, a map, a string or nil and infers the element type the
rest of the engine validates callbacks and operands against.
"""

from __future__ import annotations

import datetime
import numbers
import types
from collections.abc import Hashable, Mapping, Sequence
from dataclasses import dataclass
from enum import Enum
from typing import Any, Iterable

from .errors import NilInput, WrongShape

_STRING_TYPES = (str, bytes, bytearray)

# declared type -> narrower types it also accepts
_NUMERIC_PROMOTION: dict[type, tuple[type, ...]] = {
    float: (int,),
    complex: (int, float),
}


class Shape(str, Enum):
    SEQUENCE = "sequence"
    MAP = "map"
    STRING = "string"
    NIL = "nil"


@dataclass(frozen=True)
class DynamicValue:
    """Immutable view over a caller-supplied value."""

    value: Any
    shape: Shape
    element_type: type | None = None
    key_type: type | None = None
    length: int = 0
    # every concrete type present, in first-seen order
    element_types: tuple[type, ...] = ()
    key_types: tuple[type, ...] = ()

    @property
    def is_sequence(self) -> bool:
        return self.shape is Shape.SEQUENCE

    @property
    def is_map(self) -> bool:
        return self.shape is Shape.MAP


def is_nil(value: object) -> bool:
    return value is None


def is_sequence(value: object) -> bool:
    return isinstance(value, Sequence) and not isinstance(value, _STRING_TYPES)


def is_map(value: object) -> bool:
    return isinstance(value, Mapping)


def is_bool(value: object) -> bool:
    return isinstance(value, bool)


def is_int(value: object) -> bool:
    """Integers, excluding ``bool``."""
    return isinstance(value, numbers.Integral) and not isinstance(value, bool)


def is_float(value: object) -> bool:
    return isinstance(value, float)


def is_numeric(value: object) -> bool:
    """Real numbers, excluding ``bool``."""
    return isinstance(value, numbers.Real) and not isinstance(value, bool)


def is_string(value: object) -> bool:
    return isinstance(value, str)


def is_function(value: object) -> bool:
    return callable(value) and not isinstance(value, type)


def is_date(value: object) -> bool:
    """``datetime.date`` and ``datetime.datetime`` instances."""
    return isinstance(value, datetime.date)


def is_empty(value: object) -> bool:
    """
    Zero value of its kind, or a sized container with no elements.

    ``None``, ``False``, ``0``, ``0.0``, ``""``, ``[]`` and ``{}`` are all
    empty.
    """
    if is_zero_value(value):
        return True
    try:
        return len(value) == 0
    except TypeError:
        return False


def is_zero_value(value: object) -> bool:
    if value is None:
        return True
    if isinstance(value, (bool, numbers.Number)):
        return not value
    if isinstance(value, _STRING_TYPES):
        return len(value) == 0
    return False


def is_falsy(value: object) -> bool:
    """
    Falsy-per-kind test used by ``compact``.

    ``None``, ``False``, zero numbers and empty strings are falsy.
    Containers only count as nil when they are ``None`` themselves, so an
    empty list is kept.
    """
    return is_zero_value(value)


def distinct_types(items: Iterable[Any]) -> tuple[type, ...]:
    """Concrete types of ``items`` in first-seen order."""
    found: dict[type, None] = {}
    for item in items:
        found.setdefault(type(item), None)
    return tuple(found)


def _collapse(kinds: tuple[type, ...]) -> type | None:
    if not kinds:
        return None
    if len(kinds) == 1:
        return kinds[0]
    return object


def inspect_value(data: Any) -> DynamicValue:
    """
    Classify ``data``.

    Raises:
        NilInput: ``data`` is ``None``.
    """
    if data is None:
        raise NilInput("data cannot be nil")

    if isinstance(data, _STRING_TYPES):
        return DynamicValue(data, Shape.STRING, element_type=str, length=len(data))

    if isinstance(data, Mapping):
        element_types = distinct_types(data.values())
        key_types = distinct_types(data.keys())
        return DynamicValue(
            data,
            Shape.MAP,
            element_type=_collapse(element_types),
            key_type=_collapse(key_types),
            length=len(data),
            element_types=element_types,
            key_types=key_types,
        )

    if isinstance(data, Sequence):
        element_types = distinct_types(data)
        return DynamicValue(
            data,
            Shape.SEQUENCE,
            element_type=_collapse(element_types),
            length=len(data),
            element_types=element_types,
        )

    raise WrongShape(f"data must be slice, got {type(data).__name__}")


def require_sequence(data: Any, label: str = "data") -> DynamicValue:
    """Inspect ``data`` and insist on a sequence."""
    if data is None:
        raise NilInput(f"{label} cannot be nil")
    if not is_sequence(data):
        raise WrongShape(f"{label} must be slice")
    return inspect_value(data)


def require_collection(data: Any, label: str = "data") -> DynamicValue:
    """Inspect ``data`` and insist on a sequence or a map."""
    if data is None:
        raise NilInput(f"{label} cannot be nil")
    if not (is_sequence(data) or is_map(data)):
        raise WrongShape(f"{label} must be slice or map")
    return inspect_value(data)


def accepts(declared: Any, actual: type | None) -> bool:
    """
    Whether a parameter declared as ``declared`` can take values of type
    ``actual``. Only plain classes are checked; anything else is accepted.
    """
    if actual is None or declared is object or not isinstance(declared, type):
        return True
    if isinstance(declared, types.GenericAlias):
        return True
    if actual is object:
        return False
    if issubclass(actual, declared):
        return True
    return actual in _NUMERIC_PROMOTION.get(declared, ())


def accepts_all(declared: Any, actual: Iterable[type]) -> bool:
    """``accepts`` for every type in ``actual``. Vacuously true when empty."""
    return all(accepts(declared, kind) for kind in actual)


def types_compatible(left: type | None, right: type | None) -> bool:
    """Element-type identity between two operands. Unknown or mixed matches anything."""
    if left is None or right is None or left is object or right is object:
        return True
    return left is right


def same_value(a: Any, b: Any) -> bool:
    """Native equality: same concrete type and equal, so ``3 != 3.0`` here."""
    if type(a) is not type(b):
        return False
    try:
        return bool(a == b)
    except (TypeError, ValueError):
        return a is b


def _equality_key(value: Any) -> tuple[type, Any] | None:
    if not isinstance(value, Hashable):
        return None
    try:
        hash(value)
    except TypeError:
        return None
    return (type(value), value)


class ValueSet:
    """
    Equality-keyed accumulator.

    Hashable values are tracked by ``(type, value)``; unhashable ones fall
    back to a linear ``same_value`` scan.
    """

    def __init__(self, values: Iterable[Any] = ()):
        self._hashed: set[tuple[type, Any]] = set()
        self._unhashed: list[Any] = []
        for value in values:
            self.add(value)

    def add(self, value: Any) -> bool:
        """Add ``value``. Returns ``False`` if it was already present."""
        key = _equality_key(value)
        if key is not None:
            if key in self._hashed:
                return False
            self._hashed.add(key)
            return True
        if any(same_value(value, seen) for seen in self._unhashed):
            return False
        self._unhashed.append(value)
        return True

    def __contains__(self, value: Any) -> bool:
        key = _equality_key(value)
        if key is not None:
            return key in self._hashed
        return any(same_value(value, seen) for seen in self._unhashed)

    def __len__(self) -> int:
        return len(self._hashed) + len(self._unhashed)


class ValueCounter:
    """
    Occurrence counts under ``same_value`` equality, in first-seen order.
    """

    def __init__(self) -> None:
        self._positions: dict[tuple[type, Any], int] = {}
        self._entries: list[list[Any]] = []

    def add(self, value: Any) -> None:
        key = _equality_key(value)
        if key is not None:
            position = self._positions.get(key)
        else:
            position = next(
                (
                    i
                    for i, (seen, _) in enumerate(self._entries)
                    if _equality_key(seen) is None and same_value(value, seen)
                ),
                None,
            )
        if position is None:
            if key is not None:
                self._positions[key] = len(self._entries)
            self._entries.append([value, 1])
        else:
            self._entries[position][1] += 1

    def singles(self) -> list[Any]:
        """Values seen exactly once."""
        return [value for value, seen in self._entries if seen == 1]
