from __future__ import annotations

import pytest
from kungfu import Error, Ok, Result

from lazyseq import Seq, Trace, empty, of


def parse(text: str) -> Result[int, str]:
    if text.isdigit():
        return Ok(int(text))
    return Error(f"not a number: {text}")


class TestTraverse:
    def test_all_ok(self) -> None:
        match of("1", "2", "3").traverse(parse):
            case Ok(values):
                assert values == [1, 2, 3]
            case Error(err):
                pytest.fail(f"unexpected error: {err}")

    def test_first_error_wins(self) -> None:
        match of("1", "x", "y").traverse(parse):
            case Ok(values):
                pytest.fail(f"unexpected success: {values}")
            case Error(err):
                assert err == "not a number: x"

    def test_stops_pulling_at_error(self, trace: Trace[str]) -> None:
        source = of("1", "x", "2", "3").traced(trace, "texts")
        source.traverse(parse)
        assert trace.pulls("texts") == 2

    def test_empty(self) -> None:
        match empty().traverse(parse):
            case Ok(values):
                assert values == []
            case Error(err):
                pytest.fail(f"unexpected error: {err}")

    def test_sequence_results(self) -> None:
        match of(Ok(1), Ok(2)).sequence_results():
            case Ok(values):
                assert values == [1, 2]
            case Error(err):
                pytest.fail(f"unexpected error: {err}")

        match of(Ok(1), Error("boom"), Error("later")).sequence_results():
            case Ok(values):
                pytest.fail(f"unexpected success: {values}")
            case Error(err):
                assert err == "boom"


class TestTryFold:
    @staticmethod
    def spend(budget: int, cost: int) -> Result[int, str]:
        if cost > budget:
            return Error(f"over budget by {cost - budget}")
        return Ok(budget - cost)

    def test_try_foldl_ok(self, numbers: Seq[int]) -> None:
        match numbers.subsequence(3).try_foldl(10, self.spend):
            case Ok(left):
                assert left == 4
            case Error(err):
                pytest.fail(f"unexpected error: {err}")

    def test_try_foldl_short_circuits(self, numbers: Seq[int], trace: Trace[int]) -> None:
        match numbers.traced(trace, "numbers").try_foldl(10, self.spend):
            case Ok(left):
                pytest.fail(f"unexpected success: {left}")
            case Error(err):
                assert err == "over budget by 5"
        # 10 - 1 - 2 - 3 - 4 = 0, then 5 > 0
        assert trace.pulls("numbers") == 5


class TestPartitionResults:
    def test_partition_results(self) -> None:
        results = of("1", "a", "2", "b").map(parse)
        oks, errors = results.partition_results()
        assert oks.as_list() == [1, 2]
        assert errors.as_list() == ["not a number: a", "not a number: b"]

    def test_partition_results_independent(self) -> None:
        oks, errors = of(Ok(1), Error("e")).partition_results()
        assert errors.as_list() == ["e"]
        assert oks.as_list() == [1]
