"""Traverse combinators

Bridging sequences and kungfu Result: effectful map/fold that stop at the
first Error, and a lazy split of a sequence of Results."""

from __future__ import annotations

import typing
from collections.abc import Callable

from kungfu import Error, Nothing, Ok, Option, Result, Some

from .._helpers import identity
from ..core.generator import Generator
from ..core.sequence import Seq


class _ResultSideGenerator[T](Generator[T]):
    """Values of one side (Ok or Error) of a sequence of Results."""

    __slots__ = ("_source", "_want_ok")

    def __init__(self, source: Generator[Result[typing.Any, typing.Any]], want_ok: bool) -> None:
        super().__init__()
        self._source = source
        self._want_ok = want_ok

    def _pull(self) -> Option[T]:
        while True:
            match self._source.next():
                case Some(Ok(value)) if self._want_ok:
                    return Some(value)
                case Some(Error(err)) if not self._want_ok:
                    return Some(err)
                case Some(_):
                    continue
                case _:
                    return Nothing()


def traverse[T, U, E](source: Seq[T], fn: Callable[[T], Result[U, E]]) -> Result[list[U], E]:
    """
    Monadic map: T -> Result[U, E] over the whole sequence.

    Ok(list) if every call succeeds, otherwise the first Error. Pulling
    stops at that first Error.
    """
    values: list[U] = []
    for element in source:
        match fn(element):
            case Ok(value):
                values.append(value)
            case Error(err):
                return Error(err)
    return Ok(values)


def sequence_results[T, E](source: Seq[Result[T, E]]) -> Result[list[T], E]:
    """Flip structure: Seq[Result[T, E]] -> Result[list[T], E]."""
    return traverse(source, identity)


def try_foldl[T, V, E](
    source: Seq[T],
    initial: V,
    fn: Callable[[V, T], Result[V, E]],
) -> Result[V, E]:
    """Effectful left fold: build up state, short-circuit on the first Error."""
    acc = initial
    for element in source:
        match fn(acc, element):
            case Ok(new_acc):
                acc = new_acc
            case Error(err):
                return Error(err)
    return Ok(acc)


def partition_results[T, E](source: Seq[Result[T, E]]) -> tuple[Seq[T], Seq[E]]:
    """Lazily separate (successes, failures). Each side traverses the source on its own."""
    return (
        Seq(lambda: _ResultSideGenerator(source.generate(), True)),
        Seq(lambda: _ResultSideGenerator(source.generate(), False)),
    )


__all__ = ("traverse", "sequence_results", "try_foldl", "partition_results")
