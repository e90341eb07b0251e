"""
Log - append-only event record
==============================

Traces keep their pull events in a Log. Logs from separate traces (or
separate runs) combine by concatenation, which makes Log a monoid:

    Log().combine(x) == x
    x.combine(Log()) == x
    x.combine(y).combine(z) == x.combine(y.combine(z))
"""

from __future__ import annotations

from collections.abc import Callable


class Log[A](list[A]):
    """List of recorded entries. combine/tell/where never mutate self."""

    @staticmethod
    def of[T](*items: T) -> Log[T]:
        return Log[T](items)

    def combine(self, other: Log[A], /) -> Log[A]:
        """
        Concatenate two logs into a new one.

        Example:
            Log.of("a", "b").combine(Log.of("c"))  # Log(["a", "b", "c"])
        """
        return Log([*self, *other])

    def tell(self, item: A, /) -> Log[A]:
        """New log with item appended. Same as self.combine(Log.of(item))."""
        return Log([*self, item])

    def where(self, predicate: Callable[[A], bool], /) -> Log[A]:
        """Entries matching predicate, in recording order."""
        return Log(entry for entry in self if predicate(entry))


__all__ = ("Log",)
