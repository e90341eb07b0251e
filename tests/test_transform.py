from __future__ import annotations

from kungfu import Nothing, Some

from lazyseq import Seq, as_sequence, empty, of


class TestMap:
    def test_map(self, numbers: Seq[int]) -> None:
        assert numbers.map(str).as_list() == ["1", "2", "3", "4", "5", "6", "7", "8", "9"]

    def test_map_is_lazy(self, numbers: Seq[int]) -> None:
        calls: list[int] = []

        def track(x: int) -> int:
            calls.append(x)
            return x * 2

        mapped = numbers.map(track)
        assert calls == []
        assert mapped.subsequence(3).as_list() == [2, 4, 6]
        assert calls == [1, 2, 3]

    def test_map_empty(self, empty_seq: Seq[int]) -> None:
        assert empty_seq.map(lambda x: x + 1).as_list() == []


class TestFilter:
    def test_filter(self, numbers: Seq[int]) -> None:
        assert numbers.filter(lambda x: x % 2 == 0).as_list() == [2, 4, 6, 8]

    def test_filter_no_match(self, numbers: Seq[int]) -> None:
        assert numbers.filter(lambda x: x > 100).as_list() == []

    def test_filter_empty(self, empty_seq: Seq[int]) -> None:
        assert empty_seq.filter(lambda x: True).as_list() == []

    def test_filtermap(self, numbers: Seq[int]) -> None:
        evens = numbers.filtermap(lambda x: Some(str(x)) if x % 2 == 0 else Nothing())
        assert evens.as_list() == ["2", "4", "6", "8"]

    def test_filtermap_keeps_none_values(self) -> None:
        result = of(1, 2).filtermap(lambda x: Some(None))
        assert result.as_list() == [None, None]


class TestFlatMap:
    def test_flatmap_iterables(self) -> None:
        assert of(1, 2, 3).flatmap(lambda x: [x] * x).as_list() == [1, 2, 2, 3, 3, 3]

    def test_flatmap_skips_empty_inner(self) -> None:
        result = of(0, 1, 0, 2).flatmap(lambda x: range(x))
        assert result.as_list() == [0, 0, 1]

    def test_flatten_sequences(self) -> None:
        nested = of(of(1, 2), empty(), as_sequence([3]))
        assert nested.flatten().as_list() == [1, 2, 3]


class TestTap:
    def test_tap_observes_pulled_elements(self, numbers: Seq[int]) -> None:
        seen: list[int] = []
        tapped = numbers.tap(seen.append)
        assert seen == []
        assert tapped.takewhile(lambda x: x < 3).as_list() == [1, 2]
        # the element that stopped takewhile was pulled too
        assert seen == [1, 2, 3]

    def test_tap_passes_elements_through(self, numbers: Seq[int]) -> None:
        assert numbers.tap(lambda _: None).as_list() == numbers.as_list()
