"""Side effects combinators

Effects execute for observation only (logging, metrics, debugging)
and don't change the elements flowing through."""

from __future__ import annotations

from kungfu import Option, Some

from .._types import Effect
from ..core.generator import Generator
from ..core.sequence import Seq


class _TapGenerator[T](Generator[T]):
    __slots__ = ("_source", "_effect")

    def __init__(self, source: Generator[T], effect: Effect[T]) -> None:
        super().__init__()
        self._source = source
        self._effect = effect

    def _pull(self) -> Option[T]:
        item = self._source.next()
        match item:
            case Some(value):
                self._effect(value)
            case _:
                pass
        return item


def tap[T](source: Seq[T], effect: Effect[T]) -> Seq[T]:
    """Execute sync side effect on every pulled element, pass through unchanged."""
    return Seq(lambda: _TapGenerator(source.generate(), effect))


__all__ = ("tap",)
