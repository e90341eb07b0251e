"""
Sequence sources
================

Entry points that turn plain Python data into Seq values.
"""

from __future__ import annotations

from collections.abc import Iterable, Iterator

from kungfu import Nothing, Option, Some

from ..core.generator import EmptyGenerator, Generator, IteratorGenerator
from ..core.sequence import Seq


class _ReplayBuffer[T]:
    """
    Shared cache over a one-shot iterator.

    Items are pulled from the iterator only when some generation asks for
    an index that has not been seen yet, so unbounded iterators stay lazy.
    """

    __slots__ = ("_iterator", "_data", "_done")

    def __init__(self, iterator: Iterator[T]) -> None:
        self._iterator = iterator
        self._data: list[T] = []
        self._done = False

    def get(self, index: int) -> Option[T]:
        while index >= len(self._data):
            if self._done:
                return Nothing()
            try:
                self._data.append(next(self._iterator))
            except StopIteration:
                self._done = True
                return Nothing()
        return Some(self._data[index])


class _ReplayGenerator[T](Generator[T]):
    __slots__ = ("_buffer", "_index")

    def __init__(self, buffer: _ReplayBuffer[T]) -> None:
        super().__init__()
        self._buffer = buffer
        self._index = 0

    def _pull(self) -> Option[T]:
        item = self._buffer.get(self._index)
        self._index += 1
        return item


class _RepeatGenerator[T](Generator[T]):
    __slots__ = ("_element", "_remaining")

    def __init__(self, element: T, times: int) -> None:
        super().__init__()
        self._element = element
        self._remaining = times

    def _pull(self) -> Option[T]:
        if self._remaining <= 0:
            return Nothing()
        self._remaining -= 1
        return Some(self._element)


class _RangeGenerator(Generator[int]):
    __slots__ = ("_current", "_stop", "_step")

    def __init__(self, start: int, stop: int, step: int) -> None:
        super().__init__()
        self._current = start
        self._stop = stop
        self._step = step

    def _pull(self) -> Option[int]:
        current = self._current
        match self._step:
            case 0:
                # a zero step only ever yields start == stop, once
                if current != self._stop:
                    return Nothing()
                self._stop = current - 1
                self._step = 1
            case step if step > 0 and current > self._stop:
                return Nothing()
            case step if step < 0 and current < self._stop:
                return Nothing()
        self._current = current + self._step
        return Some(current)


def as_sequence[T](items: Iterable[T], *, replay: bool = False) -> Seq[T]:
    """
    Lift an iterable into a Seq.

    Re-iterable collections (lists, tuples, ranges, dicts, ...) are
    re-iterated on every generation.

    One-shot iterators stream by default: nothing already pulled is kept,
    so memory stays constant however long the feed is. Every generation
    then shares the one iterator, and a second traversal continues where
    the first stopped. Pass `replay=True` to cache items as they are
    consumed, so each generation replays from the start. The cache holds
    every item pulled so far for as long as the Seq lives.
    """
    iterator = iter(items)
    if iterator is not items:
        return Seq(lambda: IteratorGenerator(iter(items)))
    if replay:
        buffer = _ReplayBuffer(iterator)
        return Seq(lambda: _ReplayGenerator(buffer))
    return Seq(lambda: IteratorGenerator(iterator))


def of[T](*items: T) -> Seq[T]:
    """Seq of the given items."""
    return as_sequence(items)


def empty[T]() -> Seq[T]:
    """Seq with no elements."""
    return Seq(EmptyGenerator)


def duplicate[T](element: T, times: int) -> Seq[T]:
    """`times` copies of element. Non-positive `times` is empty."""
    return Seq(lambda: _RepeatGenerator(element, times))


def seq(start: int, stop: int, step: int = 1) -> Seq[int]:
    """
    Inclusive integer range, Erlang `lists:seq` style.

    seq(1, 5)      -> 1, 2, 3, 4, 5
    seq(5, 1, -2)  -> 5, 3, 1
    seq(3, 3, 0)   -> 3
    """
    return Seq(lambda: _RangeGenerator(start, stop, step))


__all__ = ("as_sequence", "of", "empty", "duplicate", "seq")
