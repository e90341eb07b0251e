"""
Zip combinators
===============

Lock-step combination of several sequences. Sources are pulled left to
right, one element each per pull; the first exhausted source ends the
whole zip. Elements already pulled from earlier sources in that round,
and everything left in the other sources, are abandoned.
"""

from __future__ import annotations

import typing
from collections.abc import Callable

from kungfu import Nothing, Option, Some

from ..core.generator import Generator
from ..core.sequence import Seq


class _ZipGenerator[R](Generator[R]):
    __slots__ = ("_sources", "_combine")

    def __init__(
        self,
        sources: list[Generator[typing.Any]],
        combine: Callable[..., R],
    ) -> None:
        super().__init__()
        self._sources = sources
        self._combine = combine

    def _pull(self) -> Option[R]:
        values: list[typing.Any] = []
        for source in self._sources:
            match source.next():
                case Some(value):
                    values.append(value)
                case _:
                    return Nothing()
        return Some(self._combine(*values))


class _ProjectGenerator[T](Generator[T]):
    """Component `index` of every tuple pulled from the source."""

    __slots__ = ("_source", "_index")

    def __init__(self, source: Generator[tuple[typing.Any, ...]], index: int) -> None:
        super().__init__()
        self._source = source
        self._index = index

    def _pull(self) -> Option[T]:
        match self._source.next():
            case Some(row):
                return Some(row[self._index])
            case _:
                return Nothing()


def _tuple(*values: typing.Any) -> tuple[typing.Any, ...]:
    return values


def zip_[T, U](first: Seq[T], second: Seq[U]) -> Seq[tuple[T, U]]:
    """Pairs, stopping at the shorter sequence."""
    return Seq(lambda: _ZipGenerator([first.generate(), second.generate()], _tuple))


def zip3[T, U, V](first: Seq[T], second: Seq[U], third: Seq[V]) -> Seq[tuple[T, U, V]]:
    """Triples, stopping at the shortest sequence."""
    return Seq(
        lambda: _ZipGenerator([first.generate(), second.generate(), third.generate()], _tuple)
    )


def zip_with[T, U, R](combine: Callable[[T, U], R], first: Seq[T], second: Seq[U]) -> Seq[R]:
    """Combine elements pairwise with a function."""
    return Seq(lambda: _ZipGenerator([first.generate(), second.generate()], combine))


def zip3_with[T, U, V, R](
    combine: Callable[[T, U, V], R],
    first: Seq[T],
    second: Seq[U],
    third: Seq[V],
) -> Seq[R]:
    """Combine elements of three sequences with a function."""
    return Seq(
        lambda: _ZipGenerator([first.generate(), second.generate(), third.generate()], combine)
    )


def unzip[T, U](pairs: Seq[tuple[T, U]]) -> tuple[Seq[T], Seq[U]]:
    """
    Split a sequence of pairs into two sequences.

    Each result drives its own traversal of `pairs`, so consuming one does
    not steal elements from the other.
    """
    return (
        Seq(lambda: _ProjectGenerator(pairs.generate(), 0)),
        Seq(lambda: _ProjectGenerator(pairs.generate(), 1)),
    )


def unzip3[T, U, V](triples: Seq[tuple[T, U, V]]) -> tuple[Seq[T], Seq[U], Seq[V]]:
    """Split a sequence of triples into three independent sequences."""
    return (
        Seq(lambda: _ProjectGenerator(triples.generate(), 0)),
        Seq(lambda: _ProjectGenerator(triples.generate(), 1)),
        Seq(lambda: _ProjectGenerator(triples.generate(), 2)),
    )


__all__ = ("zip_", "zip3", "zip_with", "zip3_with", "unzip", "unzip3")
