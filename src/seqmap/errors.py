"""Error kinds raised by the collection engine."""

from __future__ import annotations

from typing import Any


class CollectionError(Exception):
    """
    Base class for engine failures.

    Attributes:
        result: The value an operation hands back alongside the failure.
                ``None`` for most errors, the untouched input for size and
                bounds failures. The chain wrapper keeps it as its data.
    """

    def __init__(self, message: str, result: Any = None):
        super().__init__(message)
        self.message = message
        self.result = result

    def __str__(self) -> str:
        return self.message


class NilInput(CollectionError):
    """Input is ``None``."""


class WrongShape(CollectionError):
    """Input is not a sequence, map or string where one is required."""


class NegativeSize(CollectionError):
    """A size, offset or index argument is negative."""


class BoundsInvalid(CollectionError):
    """An end bound lies before its start bound."""


class TypeMismatch(CollectionError):
    """Element types disagree across operands or with a callback."""


class ParameterTypeMismatch(TypeMismatch):
    """A callback parameter annotation rejects the container's types."""


class ReturnTypeMismatch(TypeMismatch):
    """A callback return annotation does not fit the operation."""


class ArityMismatch(CollectionError):
    """A callback takes the wrong number of parameters."""


class NotCallable(CollectionError):
    """A callback argument is not callable."""


class UnhashableKey(CollectionError):
    """A value that must become a dict key is unhashable."""


__all__ = [
    "CollectionError",
    "NilInput",
    "WrongShape",
    "NegativeSize",
    "BoundsInvalid",
    "TypeMismatch",
    "ParameterTypeMismatch",
    "ReturnTypeMismatch",
    "ArityMismatch",
    "NotCallable",
    "UnhashableKey",
]
