from __future__ import annotations

from lazyseq import Seq, Trace, empty, of, unzip, zip_with


class TestZip:
    def test_zip_same_sequence(self, numbers: Seq[int]) -> None:
        zipped = numbers.zip(numbers).as_list()
        assert len(zipped) == 9
        assert all(first == second for first, second in zipped)

    def test_zip_stops_at_shorter(self, numbers: Seq[int]) -> None:
        assert numbers.zip(of("a", "b")).as_list() == [(1, "a"), (2, "b")]
        assert of("a", "b").zip(numbers).count() == 2

    def test_zip_empty(self, numbers: Seq[int]) -> None:
        assert numbers.zip(empty()).as_list() == []
        assert empty().zip(numbers).as_list() == []

    def test_zip_abandons_remaining(self, numbers: Seq[int], trace: Trace[int]) -> None:
        short = of(1, 2).traced(trace, "short")
        long = numbers.traced(trace, "long")
        short.zip(long).as_list()
        assert trace.pulls("long") == 2
        assert trace.exhaustions("long") == 0

    def test_zip3(self) -> None:
        zipped = of(1, 2, 3).zip3(of("a", "b", "c"), of(True, False))
        assert zipped.as_list() == [(1, "a", True), (2, "b", False)]

    def test_zip_with(self, numbers: Seq[int]) -> None:
        sums = numbers.zip_with(lambda a, b: a + b, of(10, 20, 30))
        assert sums.as_list() == [11, 22, 33]
        assert zip_with(lambda a, b: a * b, of(2, 3), of(4, 5)).as_list() == [8, 15]

    def test_zip3_with(self) -> None:
        joined = of("a", "b").zip3_with(lambda x, y, z: x + y + z, of("c", "d"), of("e", "f", "g"))
        assert joined.as_list() == ["ace", "bdf"]


class TestUnzip:
    def test_unzip(self) -> None:
        letters, digits = unzip(of(("a", 1), ("b", 2), ("c", 3)))
        assert letters.as_list() == ["a", "b", "c"]
        assert digits.as_list() == [1, 2, 3]

    def test_unzip_halves_are_independent(self) -> None:
        pairs = of((1, "a"), (2, "b"))
        left, right = pairs.unzip()
        right_generator = right.generate()
        assert right_generator.next().unwrap() == "a"
        assert left.as_list() == [1, 2]
        assert right_generator.next().unwrap() == "b"

    def test_unzip3(self) -> None:
        first, second, third = of((1, "a", True), (2, "b", False)).unzip3()
        assert first.as_list() == [1, 2]
        assert second.as_list() == ["a", "b"]
        assert third.as_list() == [True, False]

    def test_zip_unzip(self, numbers: Seq[int]) -> None:
        left, right = numbers.zip(numbers.reverse()).unzip()
        assert left.as_list() == numbers.as_list()
        assert right.as_list() == numbers.reverse().as_list()
