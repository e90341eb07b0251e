"""Partition combinators

Split one sequence into two. The halves never share a generator: each
one re-derives its own traversal of the source, so draining one half
cannot steal elements from the other."""

from __future__ import annotations

from .._types import Predicate
from ..core.sequence import Seq
from ..transform.map import filter_
from ..transform.slicing import dropwhile, nthtail, subsequence, takewhile


def partition[T](source: Seq[T], predicate: Predicate[T]) -> tuple[Seq[T], Seq[T]]:
    """(elements satisfying predicate, elements that don't), order preserved."""
    return (
        filter_(source, predicate),
        filter_(source, lambda element: not predicate(element)),
    )


def split[T](source: Seq[T], n: int) -> tuple[Seq[T], Seq[T]]:
    """(first n elements, the rest). Same count policy as subsequence/nthtail."""
    return subsequence(source, n), nthtail(source, n)


def splitwith[T](source: Seq[T], predicate: Predicate[T]) -> tuple[Seq[T], Seq[T]]:
    """(leading run satisfying predicate, everything from the first failure on)."""
    return takewhile(source, predicate), dropwhile(source, predicate)


__all__ = ("partition", "split", "splitwith")
