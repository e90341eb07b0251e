"""Reverse combinator

Eager boundary: the upstream is fully materialized on the first pull and
replayed backwards from the buffer. An unbounded upstream never returns
from that first pull."""

from __future__ import annotations

from kungfu import Nothing, Option, Some

from ..core.generator import Generator
from ..core.sequence import Seq


class _ReverseGenerator[T](Generator[T]):
    __slots__ = ("_source", "_buffer")

    def __init__(self, source: Generator[T]) -> None:
        super().__init__()
        self._source = source
        self._buffer: list[T] | None = None

    def _pull(self) -> Option[T]:
        if self._buffer is None:
            self._buffer = list(self._source)
        if not self._buffer:
            return Nothing()
        return Some(self._buffer.pop())


def reverse[T](source: Seq[T]) -> Seq[T]:
    """Elements in reverse order (materializes the source on first pull)."""
    return Seq(lambda: _ReverseGenerator(source.generate()))


__all__ = ("reverse",)
