"""Append combinators

Sequential chaining: drain the first source, then switch permanently to
the next one."""

from __future__ import annotations

from kungfu import Nothing, Option

from ..core.generator import EmptyGenerator, Generator
from ..core.sequence import Seq


class _AppendGenerator[T](Generator[T]):
    """Once a source reports exhaustion it is dropped and never pulled again."""

    __slots__ = ("_sources",)

    def __init__(self, sources: list[Generator[T]]) -> None:
        super().__init__()
        self._sources = sources

    def _pull(self) -> Option[T]:
        while self._sources:
            item = self._sources[0].next()
            if not isinstance(item, Nothing):
                return item
            del self._sources[0]
        return Nothing()


def append[T](first: Seq[T], second: Seq[T]) -> Seq[T]:
    """All of `first`, then all of `second`."""
    return Seq(lambda: _AppendGenerator([first.generate(), second.generate()]))


def concat[T](*seqs: Seq[T]) -> Seq[T]:
    """Append any number of sequences in order."""
    if not seqs:
        return Seq(EmptyGenerator)
    return Seq(lambda: _AppendGenerator([s.generate() for s in seqs]))


__all__ = ("append", "concat")
