"""
Pull generators
===============

Generator[T] is the single-consumer half of the protocol: one `next()`
call pulls one element. Every combinator implements its own subclass
holding exactly the state it needs to resume on the following pull.

Exhaustion is a value (`Nothing()`), never an exception. The base class
latches it: after the first `Nothing()` the concrete `_pull` is never
called again.
"""

from __future__ import annotations

from collections.abc import Callable, Iterator

from kungfu import Nothing, Option, Some


class Generator[T]:
    """
    Stateful pull capability.

    Subclasses implement `_pull`. Callers use `next()` (Option protocol)
    or plain Python iteration (`for x in gen`).
    """

    __slots__ = ("_exhausted",)

    def __init__(self) -> None:
        self._exhausted = False

    @property
    def exhausted(self) -> bool:
        """True once `next()` has reported exhaustion."""
        return self._exhausted

    def next(self) -> Option[T]:
        """Pull the next element, `Nothing()` once exhausted (idempotent)."""
        if self._exhausted:
            return Nothing()
        item = self._pull()
        if isinstance(item, Nothing):
            self._exhausted = True
        return item

    def _pull(self) -> Option[T]:
        raise NotImplementedError

    # Iterator protocol

    def __iter__(self) -> Iterator[T]:
        return self

    def __next__(self) -> T:
        match self.next():
            case Some(value):
                return value
            case _:
                raise StopIteration


class EmptyGenerator[T](Generator[T]):
    """Exhausted from the first pull."""

    __slots__ = ()

    def _pull(self) -> Option[T]:
        return Nothing()


class IteratorGenerator[T](Generator[T]):
    """Adapts a Python iterator to the pull protocol."""

    __slots__ = ("_iterator",)

    def __init__(self, iterator: Iterator[T], /) -> None:
        super().__init__()
        self._iterator = iterator

    def _pull(self) -> Option[T]:
        try:
            value = next(self._iterator)
        except StopIteration:
            return Nothing()
        return Some(value)


class FunctionGenerator[T](Generator[T]):
    """
    Generator driven by a step function.

    `step()` returns `Some(value)` or `Nothing()`. Useful for ad-hoc
    sources where a dedicated subclass would be overkill.
    """

    __slots__ = ("_step",)

    def __init__(self, step: Callable[[], Option[T]], /) -> None:
        super().__init__()
        self._step = step

    def _pull(self) -> Option[T]:
        return self._step()


__all__ = (
    "Generator",
    "EmptyGenerator",
    "IteratorGenerator",
    "FunctionGenerator",
)
