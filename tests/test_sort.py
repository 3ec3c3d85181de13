"""Tests for the merge sort ordering engine."""

import logging
import random

import pytest
from seqmap import ArityMismatch, NilInput, order_by, order_by_async, sort_by
from seqmap.sort import compare_keys

PEOPLE = [
    {"name": "grayson", "age": 21},
    {"name": "jason", "age": 19},
    {"name": "tim", "age": 15},
    {"name": "damian", "age": 17},
]


def names(people):
    return [p["name"] for p in people]


class TestCompareKeys:
    def test_same_kind(self):
        assert compare_keys(1, 2) < 0
        assert compare_keys(2.5, 2) > 0
        assert compare_keys("b", "a") > 0
        assert compare_keys("a", "a") == 0

    def test_number_against_string(self):
        assert compare_keys(1, "3") < 0
        assert compare_keys("10", 9) > 0
        assert compare_keys(1.5, " 1.5 ") == 0

    def test_unparseable_string_is_zero(self):
        assert compare_keys(2.5, "x") > 0
        assert compare_keys("", -1) > 0


class TestOrderBy:
    def test_ascending(self):
        assert names(order_by(PEOPLE, lambda p: p["age"])) == ["tim", "damian", "jason", "grayson"]

    def test_descending(self):
        result = order_by(PEOPLE, lambda p: p["age"], ascending=False)
        assert names(result) == ["grayson", "jason", "damian", "tim"]

    def test_by_string(self):
        assert names(order_by(PEOPLE, lambda p: p["name"])) == ["damian", "grayson", "jason", "tim"]

    def test_input_untouched(self):
        data = [3, 1, 2]
        assert order_by(data, lambda v: v) == [1, 2, 3]
        assert data == [3, 1, 2]

    def test_stable_both_directions(self):
        data = [("a", 1), ("b", 1), ("c", 0)]
        assert order_by(data, lambda v: v[1]) == [("c", 0), ("a", 1), ("b", 1)]
        assert order_by(data, lambda v: v[1], ascending=False) == [("a", 1), ("b", 1), ("c", 0)]

    def test_idempotent(self):
        data = [5, 3, 9, 1, 3]
        once = order_by(data, lambda v: v)
        assert order_by(once, lambda v: v) == once

    def test_descending_is_reverse_without_ties(self):
        data = [5, 3, 9, 1, 7]
        assert order_by(data, lambda v: v, ascending=False) == list(reversed(order_by(data, lambda v: v)))

    def test_mixed_string_and_number_keys(self):
        data = [{"v": "3"}, {"v": 1}, {"v": 2}]
        assert order_by(data, lambda d: d["v"]) == [{"v": 1}, {"v": 2}, {"v": "3"}]

    def test_empty_and_single(self):
        assert order_by([], lambda v: v) == []
        assert order_by([1], lambda v: v) == [1]

    def test_unsortable_keys_fall_back(self, caplog):
        data = [3, None, 1]
        with caplog.at_level(logging.WARNING, logger="seqmap"):
            assert order_by(data, lambda v: v) == [3, None, 1]
        assert any("original order" in r.getMessage() for r in caplog.records)

    def test_bool_keys_are_unsortable(self):
        assert order_by([True, False], lambda v: v) == [True, False]

    def test_alias(self):
        assert sort_by is order_by

    def test_nil(self):
        with pytest.raises(NilInput):
            order_by(None, lambda v: v)

    def test_key_arity(self):
        with pytest.raises(ArityMismatch):
            order_by([1, 2], lambda v, i: v)


class TestConcurrentOrderBy:
    def test_matches_sequential(self):
        rng = random.Random(7)
        data = [rng.randint(0, 50) for _ in range(200)]
        expected = order_by(data, lambda v: v)
        assert order_by(data, lambda v: v, concurrent=True) == expected
        assert expected == sorted(data)

    def test_descending(self):
        result = order_by(PEOPLE, lambda p: p["age"], ascending=False, concurrent=True)
        assert names(result) == ["grayson", "jason", "damian", "tim"]

    def test_coroutine_key(self):
        async def age(p):
            return p["age"]

        assert names(order_by(PEOPLE, age)) == ["tim", "damian", "jason", "grayson"]

    def test_unsortable_fallback(self):
        assert order_by([2, "a", None], lambda v: v, concurrent=True) == [2, "a", None]

    @pytest.mark.asyncio
    async def test_order_by_async(self):
        async def age(p):
            return p["age"]

        result = await order_by_async(PEOPLE, age)
        assert names(result) == ["tim", "damian", "jason", "grayson"]

    @pytest.mark.asyncio
    async def test_order_by_async_plain_key(self):
        data = list(range(100))
        random.shuffle(data)
        assert await order_by_async(data, lambda v: v) == list(range(100))
