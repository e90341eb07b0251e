"""
Lazy sequences
==============

Seq[T] is a restartable factory of pull generators. It never holds a
generator itself: every `generate()` builds a fresh one, and every
combinator builds its upstream generators inside its own factory. A
generator therefore has exactly one owner, and any number of consumers
can iterate the same Seq independently.

The fluent methods below delegate to the combinator modules
(`lazyseq.transform`, `lazyseq.combine`, `lazyseq.collection`,
`lazyseq.writer`).

Eager boundaries: `reverse`, `foldr`, `mapfoldl`, `mapfoldr`,
`is_suffix` and `subtract` (for its argument) materialize their input.
Do not feed them unbounded sequences.
"""

from __future__ import annotations

import typing
from collections.abc import Callable, Iterable, Iterator

from kungfu import Option, Result

from .._types import (
    Effect,
    Expander,
    Folder,
    MapFolder,
    Mapper,
    OptionMapper,
    Predicate,
    Selector,
    SupportsLessThan,
)
from .generator import Generator

if typing.TYPE_CHECKING:
    from ..combine.merge import MergePolicy
    from ..writer.trace import Trace


class Seq[T]:
    """
    Lazy, restartable sequence.

    Example:
        from lazyseq import as_sequence

        evens = as_sequence(range(10)).filter(lambda x: x % 2 == 0)
        evens.as_list()  # [0, 2, 4, 6, 8]
        evens.as_list()  # same again, fresh traversal
    """

    __slots__ = ("_factory",)

    def __init__(self, factory: Callable[[], Generator[T]], /) -> None:
        self._factory = factory

    def generate(self) -> Generator[T]:
        """Create an independent generator positioned at the start."""
        return self._factory()

    def __iter__(self) -> Iterator[T]:
        return self.generate()

    def __repr__(self) -> str:
        return f"Seq({self._factory!r})"

    def as_list(self) -> list[T]:
        """Drain into a list."""
        return list(self.generate())

    # Transform

    def map[U](self, fn: Mapper[T, U], /) -> Seq[U]:
        from ..transform.map import map_
        return map_(self, fn)

    def filter(self, predicate: Predicate[T], /) -> Seq[T]:
        from ..transform.map import filter_
        return filter_(self, predicate)

    def filtermap[U](self, fn: OptionMapper[T, U], /) -> Seq[U]:
        from ..transform.map import filtermap
        return filtermap(self, fn)

    def flatmap[U](self, fn: Expander[T, U], /) -> Seq[U]:
        from ..transform.map import flatmap
        return flatmap(self, fn)

    def flatten[U](self: Seq[Iterable[U]]) -> Seq[U]:
        from ..transform.map import flatten
        return flatten(self)

    def tap(self, effect: Effect[T], /) -> Seq[T]:
        from ..transform.effects import tap
        return tap(self, effect)

    def traced(self, trace: Trace[T], /, label: str = "seq") -> Seq[T]:
        return trace.wrap(self, label)

    # Slicing

    def takewhile(self, predicate: Predicate[T], /) -> Seq[T]:
        from ..transform.slicing import takewhile
        return takewhile(self, predicate)

    def dropwhile(self, predicate: Predicate[T], /) -> Seq[T]:
        from ..transform.slicing import dropwhile
        return dropwhile(self, predicate)

    def droplast(self) -> Seq[T]:
        from ..transform.slicing import droplast
        return droplast(self)

    def nthtail(self, n: int, /) -> Seq[T]:
        from ..transform.slicing import nthtail
        return nthtail(self, n)

    def subsequence(self, length: int, /, *, start: int | None = None) -> Seq[T]:
        from ..transform.slicing import subsequence
        return subsequence(self, length, start=start)

    def delete(self, element: T, /) -> Seq[T]:
        from ..transform.slicing import delete
        return delete(self, element)

    def subtract(self, other: Seq[T], /) -> Seq[T]:
        from ..transform.slicing import subtract
        return subtract(self, other)

    # Combine

    def append(self, other: Seq[T], /) -> Seq[T]:
        from ..combine.append import append
        return append(self, other)

    def merge[S: SupportsLessThan](
        self: Seq[S],
        other: Seq[S],
        /,
        *,
        policy: MergePolicy[S] | None = None,
    ) -> Seq[S]:
        from ..combine.merge import merge
        return merge(self, other, policy=policy)

    def umerge[S: SupportsLessThan](
        self: Seq[S],
        other: Seq[S],
        /,
        *,
        policy: MergePolicy[S] | None = None,
    ) -> Seq[S]:
        from ..combine.merge import umerge
        return umerge(self, other, policy=policy)

    def merge3[S: SupportsLessThan](
        self: Seq[S],
        second: Seq[S],
        third: Seq[S],
        /,
        *,
        policy: MergePolicy[S] | None = None,
    ) -> Seq[S]:
        from ..combine.merge import merge3
        return merge3(self, second, third, policy=policy)

    def umerge3[S: SupportsLessThan](
        self: Seq[S],
        second: Seq[S],
        third: Seq[S],
        /,
        *,
        policy: MergePolicy[S] | None = None,
    ) -> Seq[S]:
        from ..combine.merge import umerge3
        return umerge3(self, second, third, policy=policy)

    def zip[U](self, other: Seq[U], /) -> Seq[tuple[T, U]]:
        from ..combine.zip import zip_
        return zip_(self, other)

    def zip3[U, V](self, second: Seq[U], third: Seq[V], /) -> Seq[tuple[T, U, V]]:
        from ..combine.zip import zip3
        return zip3(self, second, third)

    def zip_with[U, R](self, combine: Callable[[T, U], R], other: Seq[U], /) -> Seq[R]:
        from ..combine.zip import zip_with
        return zip_with(combine, self, other)

    def zip3_with[U, V, R](
        self,
        combine: Callable[[T, U, V], R],
        second: Seq[U],
        third: Seq[V],
        /,
    ) -> Seq[R]:
        from ..combine.zip import zip3_with
        return zip3_with(combine, self, second, third)

    def unzip[A, B](self: Seq[tuple[A, B]]) -> tuple[Seq[A], Seq[B]]:
        from ..combine.zip import unzip
        return unzip(self)

    def unzip3[A, B, C](self: Seq[tuple[A, B, C]]) -> tuple[Seq[A], Seq[B], Seq[C]]:
        from ..combine.zip import unzip3
        return unzip3(self)

    # Collection: folds and queries

    def foldl[V](self, initial: V, fn: Folder[V, T], /) -> V:
        from ..collection.fold import foldl
        return foldl(self, initial, fn)

    def foldr[V](self, initial: V, fn: Folder[V, T], /) -> V:
        from ..collection.fold import foldr
        return foldr(self, initial, fn)

    def foreach(self, effect: Effect[T], /) -> None:
        from ..collection.fold import foreach
        foreach(self, effect)

    def all(self, predicate: Predicate[T], /) -> bool:
        from ..collection.fold import all_
        return all_(self, predicate)

    def any(self, predicate: Predicate[T], /) -> bool:
        from ..collection.fold import any_
        return any_(self, predicate)

    def member(self, element: T, /) -> bool:
        from ..collection.fold import member
        return member(self, element)

    def min[S: SupportsLessThan](
        self: Seq[S],
        *,
        key: Selector[S, typing.Any] | None = None,
    ) -> Option[S]:
        from ..collection.fold import min_
        return min_(self, key=key)

    def max[S: SupportsLessThan](
        self: Seq[S],
        *,
        key: Selector[S, typing.Any] | None = None,
    ) -> Option[S]:
        from ..collection.fold import max_
        return max_(self, key=key)

    def sum(self, start: typing.Any = 0, /) -> typing.Any:
        from ..collection.fold import sum_
        return sum_(self, start)

    def count(self) -> int:
        from ..collection.fold import count
        return count(self)

    def first(self) -> Option[T]:
        from ..collection.fold import first
        return first(self)

    def last(self) -> Option[T]:
        from ..collection.fold import last
        return last(self)

    def nth(self, n: int, /) -> Option[T]:
        from ..collection.fold import nth
        return nth(self, n)

    def mapfoldl[U, V](self, initial: V, fn: MapFolder[T, U, V], /) -> tuple[Seq[U], V]:
        from ..collection.fold import mapfoldl
        return mapfoldl(self, initial, fn)

    def mapfoldr[U, V](self, initial: V, fn: MapFolder[T, U, V], /) -> tuple[Seq[U], V]:
        from ..collection.fold import mapfoldr
        return mapfoldr(self, initial, fn)

    # Collection: structure

    def reverse(self) -> Seq[T]:
        from ..collection.reverse import reverse
        return reverse(self)

    def partition(self, predicate: Predicate[T], /) -> tuple[Seq[T], Seq[T]]:
        from ..collection.partition import partition
        return partition(self, predicate)

    def split(self, n: int, /) -> tuple[Seq[T], Seq[T]]:
        from ..collection.partition import split
        return split(self, n)

    def splitwith(self, predicate: Predicate[T], /) -> tuple[Seq[T], Seq[T]]:
        from ..collection.partition import splitwith
        return splitwith(self, predicate)

    def is_prefix(self, other: Seq[T], /) -> bool:
        from ..collection.compare import is_prefix
        return is_prefix(self, other)

    def is_suffix(self, other: Seq[T], /) -> bool:
        from ..collection.compare import is_suffix
        return is_suffix(self, other)

    def equals(self, other: Seq[T], /) -> bool:
        from ..collection.compare import equals
        return equals(self, other)

    # Result integration

    def traverse[U, E](self, fn: Callable[[T], Result[U, E]], /) -> Result[list[U], E]:
        from ..collection.traverse import traverse
        return traverse(self, fn)

    def try_foldl[V, E](self, initial: V, fn: Callable[[V, T], Result[V, E]], /) -> Result[V, E]:
        from ..collection.traverse import try_foldl
        return try_foldl(self, initial, fn)

    def sequence_results[U, E](self: Seq[Result[U, E]]) -> Result[list[U], E]:
        from ..collection.traverse import sequence_results
        return sequence_results(self)

    def partition_results[U, E](self: Seq[Result[U, E]]) -> tuple[Seq[U], Seq[E]]:
        from ..collection.traverse import partition_results
        return partition_results(self)


def ensure_seq[T](items: Seq[T] | Iterable[T]) -> Seq[T]:
    """Accept either a Seq or a plain iterable where a Seq is expected."""
    if isinstance(items, Seq):
        return items
    from ..source.construct import as_sequence
    return as_sequence(items)


__all__ = ("Seq", "ensure_seq")
