"""
Fluent wrapper around the engine functions.

``from_(data)`` captures a value; every method runs one engine function on
the current value and stores what it returns as the next value. Failures
do not stop the chain: the error is recorded, the value the failed
operation handed back (``None`` or its untouched input) becomes the current
value, and later calls still run against it.

Example:
    >>> from_([1, 2, 3, 4, 5]).filter(lambda v: v % 2).map(lambda v: v * 10).result()
    [10, 30, 50]
"""

from __future__ import annotations

from typing import Any, Callable, Generic, TypeVar

from . import aggregate, iteration, sampling, search, sets, sort, transform
from .errors import CollectionError
from .logger import logger

T = TypeVar("T")


def _passthrough(walk: Callable[[Any, Any], None]) -> Callable[[Any, Any], Any]:
    def run(data: Any, callback: Any) -> Any:
        walk(data, callback)
        return data

    return run


class Chain(Generic[T]):
    """Holds the current value plus the most recent error and operation names."""

    def __init__(self, data: T):
        self._data: Any = data
        self._error: CollectionError | None = None
        self.last_operation = ""
        self.last_success_operation = ""
        self.last_error_operation = ""

    # -- state -------------------------------------------------------------

    def _should_return(self) -> bool:
        # Never short-circuits: operations after an error still run.
        return False

    def _mark_error(self, data: Any, err: CollectionError) -> Chain[Any]:
        logger.debug("chain %s failed: %s", self.last_operation, err)
        self._data = data
        self._error = err
        self.last_error_operation = self.last_operation
        return self

    def _mark_result(self, data: Any) -> Chain[Any]:
        self._data = data
        self.last_success_operation = self.last_operation
        return self

    def _apply(self, name: str, func: Callable[..., Any], *args: Any, **kwargs: Any) -> Chain[Any]:
        self.last_operation = name
        if self._should_return():
            return self
        try:
            result = func(self._data, *args, **kwargs)
        except CollectionError as err:
            return self._mark_error(err.result, err)
        return self._mark_result(result)

    def result(self) -> Any:
        return self._data

    def error(self) -> CollectionError | None:
        return self._error

    def is_error(self) -> bool:
        return self._error is not None

    def result_and_error(self) -> tuple[Any, CollectionError | None]:
        return self.result(), self.error()

    # -- side effects ------------------------------------------------------

    def each(self, callback: Any) -> Chain[Any]:
        """Run ``callback`` over the value; the value itself is unchanged."""
        return self._apply("each", _passthrough(iteration.each), callback)

    def each_right(self, callback: Any) -> Chain[Any]:
        return self._apply("each_right", _passthrough(iteration.each_right), callback)

    for_each = each
    for_each_right = each_right

    # -- search ------------------------------------------------------------

    def find(self, predicate: Any, from_index: int = 0) -> Chain[Any]:
        return self._apply("find", search.find, predicate, from_index)

    def find_index(self, predicate: Any, from_index: int = 0) -> Chain[Any]:
        return self._apply("find_index", search.find_index, predicate, from_index)

    def find_last(self, predicate: Any, from_index: int | None = None) -> Chain[Any]:
        return self._apply("find_last", search.find_last, predicate, from_index)

    def find_last_index(self, predicate: Any, from_index: int | None = None) -> Chain[Any]:
        return self._apply("find_last_index", search.find_last_index, predicate, from_index)

    def first(self) -> Chain[Any]:
        return self._apply("first", search.first)

    head = first

    def last(self) -> Chain[Any]:
        return self._apply("last", search.last)

    def includes(self, value: Any, from_index: int = 0) -> Chain[Any]:
        return self._apply("includes", search.includes, value, from_index)

    contains = includes

    def index_of(self, value: Any, from_index: int = 0) -> Chain[Any]:
        return self._apply("index_of", search.index_of, value, from_index)

    def last_index_of(self, value: Any, from_index: int | None = None) -> Chain[Any]:
        return self._apply("last_index_of", search.last_index_of, value, from_index)

    def nth(self, n: int) -> Chain[Any]:
        return self._apply("nth", search.nth, n)

    # -- transformation ----------------------------------------------------

    def chunk(self, size: int) -> Chain[Any]:
        return self._apply("chunk", transform.chunk, size)

    def compact(self) -> Chain[Any]:
        return self._apply("compact", transform.compact)

    def concat(self, other: Any) -> Chain[Any]:
        return self._apply("concat", transform.concat, other)

    def concat_many(self, *others: Any) -> Chain[Any]:
        return self._apply("concat_many", transform.concat, *others)

    def map(self, callback: Any) -> Chain[Any]:
        return self._apply("map", transform.map_, callback)

    def filter(self, predicate: Any) -> Chain[Any]:
        return self._apply("filter", transform.filter_, predicate)

    def reject(self, predicate: Any) -> Chain[Any]:
        return self._apply("reject", transform.reject, predicate)

    def group_by(self, callback: Any) -> Chain[Any]:
        return self._apply("group_by", transform.group_by, callback)

    def key_by(self, callback: Any) -> Chain[Any]:
        return self._apply("key_by", transform.key_by, callback)

    def from_pairs(self) -> Chain[Any]:
        return self._apply("from_pairs", transform.from_pairs)

    def partition(self, predicate: Any) -> Chain[Any]:
        return self._apply("partition", transform.partition, predicate)

    def fill(self, value: Any, start: int = 0, end: int | None = None) -> Chain[Any]:
        return self._apply("fill", transform.fill, value, start, end)

    def reverse(self) -> Chain[Any]:
        return self._apply("reverse", transform.reverse)

    def take(self, size: int) -> Chain[Any]:
        return self._apply("take", transform.take, size)

    def take_right(self, size: int) -> Chain[Any]:
        return self._apply("take_right", transform.take_right, size)

    def drop(self, size: int) -> Chain[Any]:
        return self._apply("drop", transform.drop, size)

    def drop_right(self, size: int) -> Chain[Any]:
        return self._apply("drop_right", transform.drop_right, size)

    def initial(self) -> Chain[Any]:
        return self._apply("initial", transform.initial)

    def tail(self) -> Chain[Any]:
        return self._apply("tail", transform.tail)

    def join(self, separator: str) -> Chain[Any]:
        return self._apply("join", transform.join, separator)

    # -- aggregation -------------------------------------------------------

    def count(self, predicate: Any = None) -> Chain[Any]:
        return self._apply("count", aggregate.count, predicate)

    def count_by(self, predicate: Any) -> Chain[Any]:
        return self._apply("count_by", aggregate.count_by, predicate)

    def reduce(self, callback: Any, initial: Any) -> Chain[Any]:
        return self._apply("reduce", aggregate.reduce, callback, initial)

    def size(self) -> Chain[Any]:
        return self._apply("size", aggregate.size)

    # -- set algebra -------------------------------------------------------

    def difference(self, *excludes: Any) -> Chain[Any]:
        return self._apply("difference", sets.difference, *excludes)

    def intersection(self, *others: Any) -> Chain[Any]:
        return self._apply("intersection", sets.intersection, *others)

    def union(self, *others: Any) -> Chain[Any]:
        return self._apply("union", sets.union, *others)

    def uniq(self) -> Chain[Any]:
        return self._apply("uniq", sets.uniq)

    def xor(self, *others: Any) -> Chain[Any]:
        return self._apply("xor", sets.xor, *others)

    def pull(self, *items: Any) -> Chain[Any]:
        return self._apply("pull", sets.pull, *items)

    def pull_all(self, items: Any) -> Chain[Any]:
        return self._apply("pull_all", sets.pull_all, items)

    def pull_at(self, *indexes: int) -> Chain[Any]:
        return self._apply("pull_at", sets.pull_at, *indexes)

    def without(self, *items: Any) -> Chain[Any]:
        return self._apply("without", sets.without, *items)

    def remove(self, predicate: Any) -> Chain[Any]:
        return self._apply("remove", sets.remove, predicate)

    # -- ordering and randomization ---------------------------------------

    def order_by(self, key: Any, ascending: bool = True, concurrent: bool = False) -> Chain[Any]:
        return self._apply("order_by", sort.order_by, key, ascending, concurrent)

    sort_by = order_by

    def sample(self, rng: Any = None) -> Chain[Any]:
        return self._apply("sample", sampling.sample, rng)

    def sample_size(self, n: int, rng: Any = None) -> Chain[Any]:
        return self._apply("sample_size", sampling.sample_size, n, rng)

    def shuffle(self, rng: Any = None) -> Chain[Any]:
        return self._apply("shuffle", sampling.shuffle, rng)


def from_(data: T) -> Chain[T]:
    """Start a chain over ``data``."""
    return Chain(data)
