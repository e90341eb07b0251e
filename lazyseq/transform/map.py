"""
Map combinators
===============

Single-source, stateless transformations. Each generator wraps exactly
one upstream generator and applies the user function per pulled element.
"""

from __future__ import annotations

from collections.abc import Iterable

from kungfu import Nothing, Option, Some

from .._types import Expander, Mapper, OptionMapper, Predicate
from ..core.generator import Generator
from ..core.sequence import Seq, ensure_seq


class _MapGenerator[T, U](Generator[U]):
    __slots__ = ("_source", "_fn")

    def __init__(self, source: Generator[T], fn: Mapper[T, U]) -> None:
        super().__init__()
        self._source = source
        self._fn = fn

    def _pull(self) -> Option[U]:
        match self._source.next():
            case Some(value):
                return Some(self._fn(value))
            case _:
                return Nothing()


class _FilterGenerator[T](Generator[T]):
    __slots__ = ("_source", "_predicate")

    def __init__(self, source: Generator[T], predicate: Predicate[T]) -> None:
        super().__init__()
        self._source = source
        self._predicate = predicate

    def _pull(self) -> Option[T]:
        while True:
            item = self._source.next()
            match item:
                case Some(value) if self._predicate(value):
                    return item
                case Some(_):
                    continue
                case _:
                    return Nothing()


class _FilterMapGenerator[T, U](Generator[U]):
    __slots__ = ("_source", "_fn")

    def __init__(self, source: Generator[T], fn: OptionMapper[T, U]) -> None:
        super().__init__()
        self._source = source
        self._fn = fn

    def _pull(self) -> Option[U]:
        while True:
            match self._source.next():
                case Some(value):
                    mapped = self._fn(value)
                    if isinstance(mapped, Some):
                        return mapped
                case _:
                    return Nothing()


class _FlatMapGenerator[T, U](Generator[U]):
    """Outer generator plus the generator of the current inner sequence."""

    __slots__ = ("_source", "_fn", "_inner")

    def __init__(self, source: Generator[T], fn: Expander[T, U]) -> None:
        super().__init__()
        self._source = source
        self._fn = fn
        self._inner: Generator[U] | None = None

    def _pull(self) -> Option[U]:
        while True:
            if self._inner is not None:
                item = self._inner.next()
                if isinstance(item, Some):
                    return item
                self._inner = None
            match self._source.next():
                case Some(value):
                    self._inner = ensure_seq(self._fn(value)).generate()
                case _:
                    return Nothing()


def map_[T, U](source: Seq[T], fn: Mapper[T, U]) -> Seq[U]:
    """Apply fn to every element."""
    return Seq(lambda: _MapGenerator(source.generate(), fn))


def filter_[T](source: Seq[T], predicate: Predicate[T]) -> Seq[T]:
    """Keep elements for which predicate holds, order preserved."""
    return Seq(lambda: _FilterGenerator(source.generate(), predicate))


def filtermap[T, U](source: Seq[T], fn: OptionMapper[T, U]) -> Seq[U]:
    """
    Filter and map in one pass.

    fn returns `Some(mapped)` to keep the element, `Nothing()` to drop it.

    Example:
        as_sequence([1, 2, 3, 4]).filtermap(
            lambda x: Some(str(x)) if x % 2 == 0 else Nothing()
        )  # "2", "4"
    """
    return Seq(lambda: _FilterMapGenerator(source.generate(), fn))


def flatmap[T, U](source: Seq[T], fn: Expander[T, U]) -> Seq[U]:
    """Map every element to a sequence (Seq or iterable) and chain them."""
    return Seq(lambda: _FlatMapGenerator(source.generate(), fn))


def flatten[T](source: Seq[Seq[T]] | Seq[Iterable[T]]) -> Seq[T]:
    """Chain a sequence of sequences."""
    return flatmap(source, lambda inner: inner)


__all__ = ("map_", "filter_", "filtermap", "flatmap", "flatten")
