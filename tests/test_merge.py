from __future__ import annotations

import pytest

from lazyseq import MergePolicy, Seq, Trace, empty, merge, of, umerge


def by_number(pair: tuple[int, str]) -> int:
    return pair[0]


class TestMerge:
    def test_merge_interleaves(self) -> None:
        merged = of(2, 4, 6, 8).merge(of(1, 3, 5, 7, 9))
        assert merged.as_list() == [1, 2, 3, 4, 5, 6, 7, 8, 9]

    def test_merge_preserves_duplicates(self) -> None:
        left = of(1, 2, 2, 3)
        right = of(2, 3, 4)
        merged = left.merge(right).as_list()
        assert merged == [1, 2, 2, 2, 3, 3, 4]
        assert len(merged) == left.count() + right.count()

    def test_this_sequence_wins_ties(self) -> None:
        left = of((1, "a"), (2, "a"))
        right = of((1, "b"), (2, "b"))
        merged = left.merge(right, policy=MergePolicy.by(by_number))
        assert merged.as_list() == [(1, "a"), (1, "b"), (2, "a"), (2, "b")]

    def test_merge_with_empty(self, numbers: Seq[int]) -> None:
        assert numbers.merge(empty()).as_list() == numbers.as_list()
        assert empty().merge(numbers).as_list() == numbers.as_list()
        assert empty().merge(empty()).as_list() == []

    def test_merge_is_restartable(self) -> None:
        merged = merge(of(1, 3), of(2, 4))
        assert merged.as_list() == merged.as_list() == [1, 2, 3, 4]

    def test_merge_pull_discipline(self, trace: Trace[int]) -> None:
        left = of(1, 3, 5).traced(trace, "left")
        right = of(2, 4).traced(trace, "right")

        assert left.merge(right).first().unwrap() == 1
        assert trace.pulls("left") == 1
        assert trace.pulls("right") == 1

        trace.clear()
        left.merge(right).as_list()
        assert trace.pulls("left") == 3
        assert trace.pulls("right") == 2
        # each exhausted side is asked exactly once
        assert trace.exhaustions("left") == 1
        assert trace.exhaustions("right") == 1


class TestUmerge:
    def test_umerge(self) -> None:
        merged = of(1, 2, 3, 4).umerge(of(1, 4, 5, 6))
        assert merged.as_list() == [1, 2, 3, 4, 5, 6]

    def test_umerge_keeps_first_value_on_ties(self) -> None:
        left = of((1, "a"), (3, "a"))
        right = of((1, "b"), (2, "b"), (3, "b"))
        merged = umerge(left, right, policy=MergePolicy.by(by_number))
        assert merged.as_list() == [(1, "a"), (2, "b"), (3, "a")]

    def test_umerge_disjoint(self) -> None:
        assert of(1, 3).umerge(of(2, 4)).as_list() == [1, 2, 3, 4]

    def test_umerge_empty(self) -> None:
        assert empty().umerge(empty()).as_list() == []


class TestMerge3:
    def test_merge3(self) -> None:
        merged = of(1, 4, 7).merge3(of(2, 5, 8), of(3, 6, 9))
        assert merged.as_list() == [1, 2, 3, 4, 5, 6, 7, 8, 9]

    def test_merge3_count(self) -> None:
        merged = of(1, 1, 2).merge3(of(1, 3), of(2, 2))
        assert merged.as_list() == [1, 1, 1, 2, 2, 2, 3]

    def test_merge3_ties_in_source_order(self) -> None:
        merged = of((1, "a")).merge3(
            of((1, "b")),
            of((0, "c"), (1, "c")),
            policy=MergePolicy.by(by_number),
        )
        assert merged.as_list() == [(0, "c"), (1, "a"), (1, "b"), (1, "c")]

    def test_merge3_uneven_exhaustion(self) -> None:
        merged = empty().merge3(of(5), of(1, 2, 3))
        assert merged.as_list() == [1, 2, 3, 5]

    def test_umerge3(self) -> None:
        merged = of(1, 2).umerge3(of(2, 3), of(1, 3))
        assert merged.as_list() == [1, 2, 3]

    def test_umerge3_keeps_earliest_source_on_ties(self) -> None:
        first = of((1, "a"), (3, "a"))
        second = of((1, "b"), (2, "b"), (3, "b"))
        third = of((1, "c"), (2, "c"), (3, "c"), (4, "c"))
        merged = first.umerge3(second, third, policy=MergePolicy.by(by_number))
        # three-way ties at 1 and 3, second/third tie at 2
        assert merged.as_list() == [(1, "a"), (2, "b"), (3, "a"), (4, "c")]


class TestMergePolicy:
    def test_constructors(self) -> None:
        assert MergePolicy.stable().unique is False
        assert MergePolicy.distinct().unique is True
        assert MergePolicy.by(by_number).key is by_number

    def test_as_unique(self) -> None:
        policy = MergePolicy.distinct()
        assert policy.as_unique() is policy
        assert MergePolicy.by(by_number).as_unique().key is by_number

    def test_key_must_be_callable(self) -> None:
        with pytest.raises(TypeError):
            MergePolicy(key=5)  # type: ignore[arg-type]
