"""
Seqmap: collection algorithms for sequences and maps of any element type.

Provides search, transformation, aggregation, set algebra, ordering and
sampling functions that inspect their inputs and callbacks at call time,
plus a fluent wrapper that threads one value through many of them.

Usage:
    from seqmap import chunk, filter_, group_by, order_by, from_

    chunks = chunk([1, 2, 3, 4, 5], 2)            # [[1, 2], [3, 4], [5]]
    adults = filter_(people, lambda p: p["age"] >= 18)
    by_age = order_by(people, lambda p: p["age"], ascending=False)

    # Concurrent merge sort
    ordered = order_by(records, key_fn, concurrent=True)

    # Fluent chaining, recording the last error
    chain = from_(data).compact().uniq().take(3)
    result, err = chain.result_and_error()
"""

from .errors import (
    ArityMismatch,
    BoundsInvalid,
    CollectionError,
    NegativeSize,
    NilInput,
    NotCallable,
    ParameterTypeMismatch,
    ReturnTypeMismatch,
    TypeMismatch,
    UnhashableKey,
    WrongShape,
)
from .values import (
    DynamicValue,
    Shape,
    inspect_value,
    is_bool,
    is_date,
    is_empty,
    is_float,
    is_function,
    is_int,
    is_map,
    is_nil,
    is_numeric,
    is_sequence,
    is_string,
)
from .callbacks import Arity, CallbackDescriptor, inspect_callback
from .iteration import each, each_right, for_each, for_each_right
from .search import (
    contains,
    find,
    find_index,
    find_last,
    find_last_index,
    first,
    head,
    includes,
    index_of,
    last,
    last_index_of,
    nth,
)
from .transform import (
    chunk,
    compact,
    concat,
    concat_many,
    drop,
    drop_right,
    fill,
    filter_,
    from_pairs,
    group_by,
    initial,
    join,
    key_by,
    map_,
    partition,
    reject,
    reverse,
    tail,
    take,
    take_right,
)
from .aggregate import count, count_by, reduce, size
from .sets import (
    difference,
    intersection,
    pull,
    pull_all,
    pull_at,
    remove,
    union,
    uniq,
    without,
    xor,
)
from .sort import KeyFunc, order_by, order_by_async, sort_by
from .sampling import sample, sample_size, seed, shuffle
from .chain import Chain, from_

__version__ = "0.1.0"
__all__ = [
    # Errors
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
    # Inspection
    "DynamicValue",
    "Shape",
    "inspect_value",
    "Arity",
    "CallbackDescriptor",
    "inspect_callback",
    # Predicates
    "is_bool",
    "is_date",
    "is_empty",
    "is_float",
    "is_function",
    "is_int",
    "is_map",
    "is_nil",
    "is_numeric",
    "is_sequence",
    "is_string",
    # Iteration
    "each",
    "each_right",
    "for_each",
    "for_each_right",
    # Search
    "contains",
    "find",
    "find_index",
    "find_last",
    "find_last_index",
    "first",
    "head",
    "includes",
    "index_of",
    "last",
    "last_index_of",
    "nth",
    # Transformation
    "chunk",
    "compact",
    "concat",
    "concat_many",
    "drop",
    "drop_right",
    "fill",
    "filter_",
    "from_pairs",
    "group_by",
    "initial",
    "join",
    "key_by",
    "map_",
    "partition",
    "reject",
    "reverse",
    "tail",
    "take",
    "take_right",
    # Aggregation
    "count",
    "count_by",
    "reduce",
    "size",
    # Set algebra
    "difference",
    "intersection",
    "pull",
    "pull_all",
    "pull_at",
    "remove",
    "union",
    "uniq",
    "without",
    "xor",
    # Ordering
    "KeyFunc",
    "order_by",
    "order_by_async",
    "sort_by",
    # Randomization
    "sample",
    "sample_size",
    "seed",
    "shuffle",
    # Chaining
    "Chain",
    "from_",
]
