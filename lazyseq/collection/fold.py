"""
Fold combinators
================

Sequence -> value reductions. These drive a fresh generator to
exhaustion (or until the answer is known) and return a plain value or a
kungfu Option. An empty sequence never raises: queries answer
`Nothing()`, folds return their initial accumulator.
"""

from __future__ import annotations

import typing
from collections.abc import Callable

from kungfu import Nothing, Option, Some

from .._types import Effect, Folder, MapFolder, Predicate, Selector, SupportsLessThan
from ..core.sequence import Seq
from ..source.construct import as_sequence
from .reverse import reverse


# ============================================================================
# Folds
# ============================================================================


def foldl[T, V](source: Seq[T], initial: V, fn: Folder[V, T]) -> V:
    """Left fold: fn(acc, element) from first to last."""
    acc = initial
    for element in source:
        acc = fn(acc, element)
    return acc


def foldr[T, V](source: Seq[T], initial: V, fn: Folder[V, T]) -> V:
    """Right fold: fn(acc, element) from last to first. Materializes the source."""
    return foldl(reverse(source), initial, fn)


def foreach[T](source: Seq[T], effect: Effect[T]) -> None:
    """Call effect for every element."""
    for element in source:
        effect(element)


def mapfoldl[T, U, V](source: Seq[T], initial: V, fn: MapFolder[T, U, V]) -> tuple[Seq[U], V]:
    """
    Map and fold in a single pass.

    fn(element, acc) returns (mapped, new_acc). Eager: the source is
    drained immediately and the mapped values are returned as a Seq over
    a concrete buffer, together with the final accumulator.

    Example:
        doubled, total = seq(1, 9).mapfoldl(0, lambda x, acc: (x * 2, acc + x))
        # doubled: 2, 4, ..., 18   total: 45
    """
    acc = initial
    mapped: list[U] = []
    for element in source:
        value, acc = fn(element, acc)
        mapped.append(value)
    return as_sequence(tuple(mapped)), acc


def mapfoldr[T, U, V](source: Seq[T], initial: V, fn: MapFolder[T, U, V]) -> tuple[Seq[U], V]:
    """mapfoldl over the reversed source: output order and fold direction both reverse."""
    return mapfoldl(reverse(source), initial, fn)


# ============================================================================
# Predicates
# ============================================================================


def all_[T](source: Seq[T], predicate: Predicate[T]) -> bool:
    """True if predicate holds for every element (True when empty)."""
    for element in source:
        if not predicate(element):
            return False
    return True


def any_[T](source: Seq[T], predicate: Predicate[T]) -> bool:
    """True if predicate holds for some element (False when empty)."""
    for element in source:
        if predicate(element):
            return True
    return False


def member[T](source: Seq[T], element: T) -> bool:
    """True if some element equals `element`."""
    return any_(source, lambda candidate: candidate == element)


# ============================================================================
# Queries
# ============================================================================


def _extreme[T](
    source: Seq[T],
    key: Selector[T, typing.Any] | None,
    better: Callable[[typing.Any, typing.Any], bool],
) -> Option[T]:
    generator = source.generate()
    match generator.next():
        case Some(best):
            pass
        case _:
            return Nothing()
    best_key = best if key is None else key(best)
    for element in generator:
        element_key = element if key is None else key(element)
        if better(element_key, best_key):
            best, best_key = element, element_key
    return Some(best)


def min_[T: SupportsLessThan](
    source: Seq[T],
    *,
    key: Selector[T, typing.Any] | None = None,
) -> Option[T]:
    """Smallest element; the first one wins ties. `Nothing()` when empty."""
    return _extreme(source, key, lambda candidate, best: candidate < best)


def max_[T: SupportsLessThan](
    source: Seq[T],
    *,
    key: Selector[T, typing.Any] | None = None,
) -> Option[T]:
    """Largest element; the first one wins ties. `Nothing()` when empty."""
    return _extreme(source, key, lambda candidate, best: best < candidate)


def sum_(source: Seq[typing.Any], start: typing.Any = 0) -> typing.Any:
    """Sum of the elements, added to `start`."""
    return foldl(source, start, lambda acc, element: acc + element)


def count(source: Seq[typing.Any]) -> int:
    """Number of elements."""
    return foldl(source, 0, lambda acc, _: acc + 1)


def first[T](source: Seq[T]) -> Option[T]:
    """First element. Pulls exactly once."""
    return source.generate().next()


def last[T](source: Seq[T]) -> Option[T]:
    """Last element, `Nothing()` when the sequence is empty."""
    result: Option[T] = Nothing()
    generator = source.generate()
    while True:
        item = generator.next()
        if isinstance(item, Nothing):
            return result
        result = item


def nth[T](source: Seq[T], n: int) -> Option[T]:
    """Element at 1-based position n. `Nothing()` if n <= 0 or past the end."""
    if n <= 0:
        return Nothing()
    for position, element in enumerate(source, start=1):
        if position == n:
            return Some(element)
    return Nothing()


__all__ = (
    # Folds
    "foldl",
    "foldr",
    "foreach",
    "mapfoldl",
    "mapfoldr",
    # Predicates
    "all_",
    "any_",
    "member",
    # Queries
    "min_",
    "max_",
    "sum_",
    "count",
    "first",
    "last",
    "nth",
)
