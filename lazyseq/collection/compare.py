"""Comparison combinators

Prefix, suffix and equality tests between two sequences."""

from __future__ import annotations

from kungfu import Nothing, Some

from ..core.sequence import Seq
from .reverse import reverse


def is_prefix[T](source: Seq[T], prefix: Seq[T]) -> bool:
    """
    True if `prefix` is a prefix of `source`.

    `prefix` is consumed up to its own exhaustion; running out of `source`
    first means False. The empty sequence is a prefix of everything.
    """
    generator = source.generate()
    for expected in prefix:
        match generator.next():
            case Some(actual) if actual == expected:
                continue
            case _:
                return False
    return True


def is_suffix[T](source: Seq[T], suffix: Seq[T]) -> bool:
    """True if `suffix` is a suffix of `source`. Materializes both sequences."""
    return is_prefix(reverse(source), reverse(suffix))


def equals[T](source: Seq[T], other: Seq[T]) -> bool:
    """Element-wise equality, lengths included."""
    mine = source.generate()
    theirs = other.generate()
    while True:
        left = mine.next()
        right = theirs.next()
        match left, right:
            case Some(a), Some(b) if a == b:
                continue
            case Nothing(), Nothing():
                return True
            case _:
                return False


__all__ = ("is_prefix", "is_suffix", "equals")
