"""
Core type definitions for lazyseq.

Type aliases and protocols used across the library.
"""

from __future__ import annotations

import typing
from collections.abc import Callable, Iterable

from kungfu import Option

# ============================================================================
# Type aliases
# ============================================================================

# Predicate = function that tests a value
type Predicate[T] = Callable[[T], bool]

# Selector = function that extracts a key for comparison/sorting
type Selector[T, K] = Callable[[T], K]

# Mapper = element transformation
type Mapper[T, U] = Callable[[T], U]

# OptionMapper = transformation that may drop the element (filtermap)
type OptionMapper[T, U] = Callable[[T], Option[U]]

# Expander = one element into many (flatmap)
type Expander[T, U] = Callable[[T], Iterable[U]]

# Folder = (accumulator, element) -> accumulator
type Folder[V, T] = Callable[[V, T], V]

# MapFolder = (element, accumulator) -> (mapped, accumulator), Erlang argument order
type MapFolder[T, U, V] = Callable[[T, V], tuple[U, V]]

# Effect = observation-only callback (tap, foreach)
type Effect[T] = Callable[[T], None]

# ============================================================================
# Capability bounds
# ============================================================================


class SupportsLessThan(typing.Protocol):
    """Anything ordered by `<` (merge, min, max)."""

    def __lt__(self, other: typing.Any, /) -> bool: ...


__all__ = (
    # Type aliases
    "Predicate",
    "Selector",
    "Mapper",
    "OptionMapper",
    "Expander",
    "Folder",
    "MapFolder",
    "Effect",
    # Bounds
    "SupportsLessThan",
)
