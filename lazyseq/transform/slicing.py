"""
Slicing combinators
===================

Take, drop and delete. Most of these keep a small amount of state
between pulls: a "done" flag, a counter or one element of lookahead.

Counts follow one policy: a non-positive count degenerates to an empty
sequence (`nthtail(0)`, `subsequence(-1)`), it is never an error and
never the identity.
"""

from __future__ import annotations

from kungfu import Nothing, Option, Some

from .._types import Predicate
from ..core.generator import EmptyGenerator, Generator
from ..core.sequence import Seq


class _TakeWhileGenerator[T](Generator[T]):
    """The element failing the predicate is consumed and discarded."""

    __slots__ = ("_source", "_predicate")

    def __init__(self, source: Generator[T], predicate: Predicate[T]) -> None:
        super().__init__()
        self._source = source
        self._predicate = predicate

    def _pull(self) -> Option[T]:
        item = self._source.next()
        match item:
            case Some(value) if self._predicate(value):
                return item
            case _:
                return Nothing()


class _DropWhileGenerator[T](Generator[T]):
    __slots__ = ("_source", "_predicate", "_dropped")

    def __init__(self, source: Generator[T], predicate: Predicate[T]) -> None:
        super().__init__()
        self._source = source
        self._predicate = predicate
        self._dropped = False

    def _pull(self) -> Option[T]:
        item = self._source.next()
        if self._dropped:
            return item
        self._dropped = True
        while True:
            match item:
                case Some(value) if self._predicate(value):
                    item = self._source.next()
                case _:
                    return item


class _DropLastGenerator[T](Generator[T]):
    """One element of lookahead: the candidate is emitted only once a successor exists."""

    __slots__ = ("_source", "_candidate", "_primed")

    def __init__(self, source: Generator[T]) -> None:
        super().__init__()
        self._source = source
        self._candidate: Option[T] = Nothing()
        self._primed = False

    def _pull(self) -> Option[T]:
        if not self._primed:
            self._primed = True
            self._candidate = self._source.next()
        if isinstance(self._candidate, Nothing):
            return Nothing()
        ahead = self._source.next()
        if isinstance(ahead, Nothing):
            # the held candidate was the final element
            return Nothing()
        held, self._candidate = self._candidate, ahead
        return held


class _NthTailGenerator[T](Generator[T]):
    __slots__ = ("_source", "_skip")

    def __init__(self, source: Generator[T], n: int) -> None:
        super().__init__()
        self._source = source
        self._skip = n

    def _pull(self) -> Option[T]:
        while self._skip > 0:
            self._skip -= 1
            if isinstance(self._source.next(), Nothing):
                return Nothing()
        return self._source.next()


class _SubsequenceGenerator[T](Generator[T]):
    __slots__ = ("_source", "_remaining")

    def __init__(self, source: Generator[T], length: int) -> None:
        super().__init__()
        self._source = source
        self._remaining = length

    def _pull(self) -> Option[T]:
        if self._remaining <= 0:
            return Nothing()
        self._remaining -= 1
        return self._source.next()


class _DeleteGenerator[T](Generator[T]):
    __slots__ = ("_source", "_element", "_deleted")

    def __init__(self, source: Generator[T], element: T) -> None:
        super().__init__()
        self._source = source
        self._element = element
        self._deleted = False

    def _pull(self) -> Option[T]:
        item = self._source.next()
        match item:
            case Some(value) if not self._deleted and value == self._element:
                self._deleted = True
                return self._source.next()
            case _:
                return item


class _SubtractGenerator[T](Generator[T]):
    """`other` is materialized on the first pull; each entry cancels one equal element."""

    __slots__ = ("_source", "_other", "_pending")

    def __init__(self, source: Generator[T], other: Seq[T]) -> None:
        super().__init__()
        self._source = source
        self._other = other
        self._pending: list[T] | None = None

    def _pull(self) -> Option[T]:
        if self._pending is None:
            self._pending = self._other.as_list()
        while True:
            item = self._source.next()
            match item:
                case Some(value) if value in self._pending:
                    self._pending.remove(value)
                case _:
                    return item


def takewhile[T](source: Seq[T], predicate: Predicate[T]) -> Seq[T]:
    """Elements from the start while predicate holds."""
    return Seq(lambda: _TakeWhileGenerator(source.generate(), predicate))


def dropwhile[T](source: Seq[T], predicate: Predicate[T]) -> Seq[T]:
    """
    Skip leading elements while predicate holds, emit the rest.

    The skipping happens once, on the first pull. The element that broke
    the predicate is emitted; later elements pass through unchecked.
    """
    return Seq(lambda: _DropWhileGenerator(source.generate(), predicate))


def droplast[T](source: Seq[T]) -> Seq[T]:
    """Everything except the last element."""
    return Seq(lambda: _DropLastGenerator(source.generate()))


def nthtail[T](source: Seq[T], n: int) -> Seq[T]:
    """Skip the first n elements. `n <= 0` yields an empty sequence."""
    if n <= 0:
        return Seq(EmptyGenerator)
    return Seq(lambda: _NthTailGenerator(source.generate(), n))


def subsequence[T](source: Seq[T], length: int, *, start: int | None = None) -> Seq[T]:
    """
    At most `length` elements.

    With `start`, this is `nthtail(start)` followed by `subsequence(length)`,
    so a non-positive start is empty as well.
    """
    if start is not None:
        return subsequence(nthtail(source, start), length)
    if length <= 0:
        return Seq(EmptyGenerator)
    return Seq(lambda: _SubsequenceGenerator(source.generate(), length))


def delete[T](source: Seq[T], element: T) -> Seq[T]:
    """Drop the first element equal to `element`, if any."""
    return Seq(lambda: _DeleteGenerator(source.generate(), element))


def subtract[T](source: Seq[T], other: Seq[T]) -> Seq[T]:
    """
    Erlang `--`: for each element of `other`, remove the first equal element.

    as_sequence([3, 1, 3, 2]).subtract(of(3, 2))  # 1, 3
    """
    return Seq(lambda: _SubtractGenerator(source.generate(), other))


__all__ = (
    "takewhile",
    "dropwhile",
    "droplast",
    "nthtail",
    "subsequence",
    "delete",
    "subtract",
)
