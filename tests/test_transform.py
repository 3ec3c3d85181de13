"""Tests for transformation algorithms."""

import pytest
from seqmap import (
    BoundsInvalid,
    NegativeSize,
    ParameterTypeMismatch,
    ReturnTypeMismatch,
    TypeMismatch,
    UnhashableKey,
    WrongShape,
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


class TestChunk:
    def test_uneven(self):
        assert chunk(["a", "b", "c", "d", "e"], 2) == [["a", "b"], ["c", "d"], ["e"]]

    def test_larger_than_data(self):
        assert chunk([1, 2], 5) == [[1, 2]]

    def test_zero_size(self):
        assert chunk([1, 2, 3], 0) == []

    def test_empty(self):
        assert chunk([], 3) == []

    def test_negative_size(self):
        with pytest.raises(NegativeSize) as excinfo:
            chunk([1, 2], -1)
        assert excinfo.value.result is None

    @pytest.mark.parametrize("size", [1, 2, 3, 4, 5, 6])
    def test_concatenation_restores_data(self, size):
        data = list(range(11))
        chunks = chunk(data, size)
        assert [each for c in chunks for each in c] == data
        assert all(len(c) == size for c in chunks[:-1])
        assert 1 <= len(chunks[-1]) <= size


class TestCompact:
    def test_mixed(self):
        data = [-2, 0, 1, 2, False, True, "", "damian", None, [], [1, 2, 3], {}, {"name": "damian"}]
        assert compact(data) == [-2, 1, 2, True, "damian", [], [1, 2, 3], {}, {"name": "damian"}]

    def test_idempotent(self):
        data = [0, 1, "", "a", None]
        assert compact(compact(data)) == compact(data)

    def test_input_untouched(self):
        data = [0, 1]
        compact(data)
        assert data == [0, 1]


class TestConcat:
    def test_many(self):
        assert concat([1, 2, 3, 4], [4, 6, 7], [8, 9]) == [1, 2, 3, 4, 4, 6, 7, 8, 9]

    def test_concat_many(self):
        assert concat_many([1], [[2], [3]]) == [1, 2, 3]

    def test_type_mismatch_returns_data(self):
        data = [1]
        with pytest.raises(TypeMismatch) as excinfo:
            concat(data, ["a"])
        assert excinfo.value.result is data

    def test_operand_not_sequence(self):
        with pytest.raises(WrongShape) as excinfo:
            concat([1], 5)
        assert str(excinfo.value) == "concat data 1 must be slice"

    def test_empty_operand(self):
        assert concat([1], []) == [1]


class TestMapFilter:
    def test_map(self):
        assert map_([1, 2, 3], lambda v: v * 2) == [2, 4, 6]
        assert map_(["a", "b"], lambda v, i: f"{i}:{v}") == ["0:a", "1:b"]

    def test_map_over_dict(self):
        assert map_({"a": 1, "b": 2}, lambda v, k: f"{k}{v}") == ["a1", "b2"]

    def test_map_rejects_none_returning_callback(self):
        def nothing(v) -> None:
            pass

        with pytest.raises(ReturnTypeMismatch):
            map_([1], nothing)

    def test_filter_and_reject(self):
        data = [1, 2, 3, 4, 5]
        assert filter_(data, lambda v: v % 2 == 0) == [2, 4]
        assert reject(data, lambda v: v % 2 == 0) == [1, 3, 5]

    def test_float_predicate_on_mixed_numbers(self):
        def big(v: float) -> bool:
            return v > 2

        assert filter_([1, 2.5, 3], big) == [2.5, 3]

    def test_int_predicate_on_bools_and_ints(self):
        def odd(v: int) -> bool:
            return v % 2 == 1

        assert filter_([True, 1, 2], odd) == [True, 1]

    def test_annotation_checked_against_every_element(self):
        def big(v: float) -> bool:
            return v > 2

        with pytest.raises(ParameterTypeMismatch):
            filter_([1, "a"], big)

    def test_filter_dict(self):
        data = {"damian": 17, "jason": 19, "tim": 15}
        assert filter_(data, lambda v: v >= 17) == {"damian": 17, "jason": 19}
        assert reject(data, lambda v, k: k.startswith("t")) == {"damian": 17, "jason": 19}


class TestGrouping:
    def test_group_by(self):
        data = [1, 2, 3, 5, 6, 4, 2, 5, 2]
        assert group_by(data, lambda v: v) == {1: [1], 2: [2, 2, 2], 3: [3], 5: [5, 5], 6: [6], 4: [4]}

    def test_group_by_length(self):
        assert group_by(["one", "two", "three"], len) == {3: ["one", "two"], 5: ["three"]}

    def test_dict_equality_merges_keys(self):
        groups = group_by([1, True, 1.0], lambda v: v)
        assert list(groups) == [1]
        assert groups[1] == [1, True, 1.0]

    def test_unhashable_key(self):
        with pytest.raises(UnhashableKey) as excinfo:
            group_by([1, 2], lambda v: [v])
        assert str(excinfo.value) == "hash of unhashable type list"

    def test_key_by_last_wins(self):
        data = [{"id": 1, "n": "a"}, {"id": 2, "n": "b"}, {"id": 1, "n": "c"}]
        assert key_by(data, lambda v: v["id"]) == {1: {"id": 1, "n": "c"}, 2: {"id": 2, "n": "b"}}

    def test_from_pairs(self):
        assert from_pairs([["a", 1], ["b"], [], ("c", 3, "ignored")]) == {"a": 1, "b": None, "c": 3}

    def test_from_pairs_bad_pair(self):
        with pytest.raises(WrongShape):
            from_pairs([5])
        with pytest.raises(UnhashableKey):
            from_pairs([[[1], 2]])

    def test_partition(self):
        assert partition([1, 2, 3, 4], lambda v: v % 2 == 0) == ([2, 4], [1, 3])


class TestFill:
    def test_whole(self):
        assert fill([1, 2, 3, 4], 0) == [0, 0, 0, 0]

    def test_range(self):
        assert fill([1, 2, 3, 4], 9, 1, 3) == [1, 9, 9, 4]

    def test_end_past_length(self):
        assert fill([1, 2], 9, 1, 10) == [1, 9]

    def test_negative_start(self):
        data = [1, 2]
        with pytest.raises(NegativeSize) as excinfo:
            fill(data, 9, -1)
        assert excinfo.value.result is data

    def test_end_before_start(self):
        with pytest.raises(BoundsInvalid):
            fill([1, 2, 3], 9, 2, 1)

    def test_type_mismatch(self):
        with pytest.raises(TypeMismatch):
            fill([1, 2], "x")

    def test_bool_does_not_fill_int_list(self):
        with pytest.raises(TypeMismatch):
            fill([1, 2, 3], True)

    def test_int_does_not_fill_float_list(self):
        with pytest.raises(TypeMismatch):
            fill([1.5, 2.5], 0)

    def test_mixed_list_takes_any_value(self):
        assert fill([1, "a"], None, 1) == [1, None]

    def test_empty(self):
        assert fill([], 1) == []


class TestSlicing:
    def test_reverse(self):
        data = [1, 2, 3]
        assert reverse(data) == [3, 2, 1]
        assert reverse(reverse(data)) == data

    def test_take_and_drop(self):
        data = [1, 2, 3, 4, 5]
        assert take(data, 2) == [1, 2]
        assert take(data, 10) == data
        assert take_right(data, 2) == [4, 5]
        assert drop(data, 2) == [3, 4, 5]
        assert drop_right(data, 2) == [1, 2, 3]
        assert drop(data, 10) == []

    def test_initial_and_tail(self):
        assert initial([1, 2, 3]) == [1, 2]
        assert tail([1, 2, 3]) == [2, 3]
        assert tail([]) == []

    def test_negative_size(self):
        data = [1, 2]
        for op in (take, take_right, drop, drop_right):
            with pytest.raises(NegativeSize) as excinfo:
                op(data, -1)
            assert excinfo.value.result is data

    def test_join(self):
        assert join([1, None, "a"], "-") == "1-a"
        assert join([], ",") == ""
