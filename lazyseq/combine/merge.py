"""
Merge combinators
=================

Stateful N-way merge of sorted sequences.

Every source owns one pending slot. On each pull:

1. every live source with an empty slot is pulled once;
2. sources that report exhaustion are retired for good;
3. the smallest pending value wins and its slot is cleared; the other
   slots keep their values for the next round.

Ties go to the earliest source (this sequence, then second, then third).
A stable merge keeps every tied value (the losers stay pending and are
emitted on later pulls, in source order). A unique merge emits one copy
and discards the equal values waiting in later sources.

Inputs must already be sorted ascending (by `key` if the policy sets
one). Unsorted input is not detected; the output is then merely some
interleaving of the inputs.
"""

from __future__ import annotations

import typing
from dataclasses import dataclass

from kungfu import Nothing, Option, Some

from .._types import Selector, SupportsLessThan
from ..core.generator import Generator
from ..core.sequence import Seq


@dataclass(frozen=True, slots=True)
class MergePolicy[T]:
    """
    Merge configuration.

    unique: collapse values that compare equal across sources.
    key: compare by key(value) instead of the value itself.
    """

    unique: bool = False
    key: Selector[T, typing.Any] | None = None

    def __post_init__(self) -> None:
        if self.key is not None and not callable(self.key):
            raise TypeError("MergePolicy.key must be callable")

    @classmethod
    def stable(cls) -> MergePolicy[T]:
        """Keep duplicates, ties in source order."""
        return cls()

    @classmethod
    def distinct(cls) -> MergePolicy[T]:
        """Collapse equal values, first source wins."""
        return cls(unique=True)

    @classmethod
    def by(cls, key: Selector[T, typing.Any], *, unique: bool = False) -> MergePolicy[T]:
        """Order by key(value)."""
        return cls(unique=unique, key=key)

    def as_unique(self) -> MergePolicy[T]:
        """Same ordering, equal values collapsed."""
        if self.unique:
            return self
        return MergePolicy(unique=True, key=self.key)


class _MergeGenerator[T](Generator[T]):
    """
    Pending buffer with one slot per source.

    `_pending[i]` holds a value already pulled from source i but not yet
    emitted. `_live[i]` is False once source i reported exhaustion.
    """

    __slots__ = ("_sources", "_pending", "_live", "_policy")

    def __init__(self, sources: list[Generator[T]], policy: MergePolicy[T]) -> None:
        super().__init__()
        self._sources = sources
        self._pending: list[Option[T]] = [Nothing() for _ in sources]
        self._live = [True for _ in sources]
        self._policy = policy

    def _key(self, value: T) -> typing.Any:
        if self._policy.key is None:
            return value
        return self._policy.key(value)

    def _refill(self) -> None:
        for index, source in enumerate(self._sources):
            if self._live[index] and isinstance(self._pending[index], Nothing):
                item = source.next()
                if isinstance(item, Nothing):
                    self._live[index] = False
                self._pending[index] = item

    def _pull(self) -> Option[T]:
        self._refill()

        winner = -1
        winner_key: typing.Any = None
        for index, slot in enumerate(self._pending):
            match slot:
                # strict `<` keeps the earliest source on ties
                case Some(value) if winner < 0 or self._key(value) < winner_key:
                    winner = index
                    winner_key = self._key(value)
                case _:
                    pass

        if winner < 0:
            return Nothing()

        emitted = self._pending[winner]
        self._pending[winner] = Nothing()

        if self._policy.unique:
            for index in range(winner + 1, len(self._pending)):
                match self._pending[index]:
                    case Some(value) if not (winner_key < self._key(value)):
                        self._pending[index] = Nothing()
                    case _:
                        pass

        return emitted


def _merge_all[T](sources: tuple[Seq[T], ...], policy: MergePolicy[T]) -> Seq[T]:
    return Seq(lambda: _MergeGenerator([s.generate() for s in sources], policy))


def merge[T: SupportsLessThan](
    first: Seq[T],
    second: Seq[T],
    *,
    policy: MergePolicy[T] | None = None,
) -> Seq[T]:
    """
    Merge two sorted sequences, duplicates preserved.

    Example:
        of(2, 4, 6, 8).merge(of(1, 3, 5, 7, 9))  # 1, 2, ..., 9
    """
    return _merge_all((first, second), policy or MergePolicy.stable())


def umerge[T: SupportsLessThan](
    first: Seq[T],
    second: Seq[T],
    *,
    policy: MergePolicy[T] | None = None,
) -> Seq[T]:
    """
    Unique merge of two sorted sequences; on ties the first sequence's value is kept.

    Example:
        of(1, 2, 3, 4).umerge(of(1, 4, 5, 6))  # 1, 2, 3, 4, 5, 6
    """
    return _merge_all((first, second), (policy or MergePolicy.stable()).as_unique())


def merge3[T: SupportsLessThan](
    first: Seq[T],
    second: Seq[T],
    third: Seq[T],
    *,
    policy: MergePolicy[T] | None = None,
) -> Seq[T]:
    """Three-way merge, duplicates preserved, ties in source order."""
    return _merge_all((first, second, third), policy or MergePolicy.stable())


def umerge3[T: SupportsLessThan](
    first: Seq[T],
    second: Seq[T],
    third: Seq[T],
    *,
    policy: MergePolicy[T] | None = None,
) -> Seq[T]:
    """Three-way unique merge, earliest source wins ties."""
    return _merge_all((first, second, third), (policy or MergePolicy.stable()).as_unique())


__all__ = ("MergePolicy", "merge", "umerge", "merge3", "umerge3")
