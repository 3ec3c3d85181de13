"""Tests for the fluent chain wrapper."""

from seqmap import Chain, NegativeSize, NilInput, from_


class TestChain:
    def test_pipeline(self):
        result = from_([1, 2, 3, 4, 5]).filter(lambda v: v % 2).map(lambda v: v * 10).result()
        assert result == [10, 30, 50]

    def test_from_returns_chain(self):
        chain = from_([1])
        assert isinstance(chain, Chain)
        assert chain.result() == [1]
        assert not chain.is_error()
        assert chain.error() is None

    def test_each_passes_value_through(self):
        seen = []
        chain = from_([1, 2]).each(seen.append)
        assert seen == [1, 2]
        assert chain.result() == [1, 2]

    def test_operation_names(self):
        chain = from_([3, 1, 2]).order_by(lambda v: v).take(2)
        assert chain.result() == [1, 2]
        assert chain.last_operation == "take"
        assert chain.last_success_operation == "take"
        assert chain.last_error_operation == ""

    def test_error_keeps_returned_data(self):
        chain = from_([1, 2, 3]).drop(-1)
        result, err = chain.result_and_error()
        assert result == [1, 2, 3]
        assert isinstance(err, NegativeSize)
        assert chain.last_error_operation == "drop"

    def test_operations_after_error_still_run(self):
        chain = from_([1, 2, 3]).drop(-1).take(2)
        assert chain.result() == [1, 2]
        assert chain.is_error()
        assert chain.last_error_operation == "drop"
        assert chain.last_success_operation == "take"

    def test_error_without_result_clears_data(self):
        chain = from_([1, 2]).chunk(-1)
        assert chain.result() is None
        chain.compact()
        assert isinstance(chain.error(), NilInput)
        assert chain.last_error_operation == "compact"

    def test_scalar_results(self):
        assert from_([1, 2, 3]).count().result() == 3
        assert from_(["a", "b"]).index_of("b").result() == 1
        assert from_([1, 2, 3]).reduce(lambda acc, v: acc + v, 0).result() == 6

    def test_set_operations(self):
        chain = from_([1, 2, 2, 3]).uniq().union([4]).difference([1]).pull(4)
        assert chain.result() == [2, 3]

    def test_xor(self):
        chain = from_([1, 2, 3]).xor([3, 4])
        assert chain.result() == [1, 2, 4]
        assert chain.last_success_operation == "xor"

    def test_grouping(self):
        chain = from_([["a", 1], ["b", 2]]).from_pairs()
        assert chain.result() == {"a": 1, "b": 2}
        assert from_([1, 2, 3]).partition(lambda v: v > 1).result() == ([2, 3], [1])

    def test_concurrent_order(self):
        chain = from_([3, 1, 2]).order_by(lambda v: v, ascending=False, concurrent=True)
        assert chain.result() == [3, 2, 1]
