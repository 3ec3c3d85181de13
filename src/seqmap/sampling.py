"""
Randomization: sample, sample_size and shuffle.

Each function takes an optional ``rng`` (a ``random.Random``). Without one
the module's shared source is used; it is not synchronized, so callers
sharing it across threads must serialize access themselves.
"""

from __future__ import annotations

import random
from collections.abc import MutableSequence
from typing import Any

from .errors import NegativeSize, WrongShape
from .values import require_sequence

_shared = random.Random()


def seed(value: Any = None) -> None:
    """Reseed the shared random source."""
    _shared.seed(value)


def _source(rng: random.Random | None) -> random.Random:
    return rng if rng is not None else _shared


def sample(data: Any, rng: random.Random | None = None) -> Any:
    """A uniformly chosen element of ``data``, ``None`` if it is empty."""
    value = require_sequence(data)
    if value.length == 0:
        return None
    return data[_source(rng).randint(0, value.length - 1)]


def sample_size(data: Any, n: int, rng: random.Random | None = None) -> Any:
    """
    ``n`` elements drawn at distinct positions.

    Returns ``data`` itself when ``n`` covers the whole sequence.

    Raises:
        NegativeSize: ``n`` is negative.
    """
    value = require_sequence(data)
    if n < 0:
        raise NegativeSize("size must not be negative number")
    if value.length == 0:
        return []
    if n >= value.length:
        return data

    source = _source(rng)
    picked: set[int] = set()
    result: list[Any] = []
    while len(result) < n:
        i = source.randint(0, value.length - 1)
        if i in picked:
            continue
        picked.add(i)
        result.append(data[i])
    return result


def shuffle(data: Any, rng: random.Random | None = None) -> Any:
    """
    Fisher-Yates shuffle of ``data`` in place.

    This is the one operation that modifies its input; the same object is
    returned.

    Raises:
        WrongShape: ``data`` is an immutable sequence.
    """
    value = require_sequence(data)
    if not isinstance(data, MutableSequence):
        raise WrongShape("data must be a mutable slice")

    source = _source(rng)
    for i in range(value.length - 1, 0, -1):
        j = source.randint(0, i)
        data[i], data[j] = data[j], data[i]
    return data
