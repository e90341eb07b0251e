"""
Lazy sequence combinators modeled after Erlang's `lists` module.

A Seq is a restartable factory of single-consumer pull generators;
combinators turn sequences into new sequences (or values) by composing
generators, pulling one element at a time on demand.

Architecture:
- core: Generator (pull protocol, exhaustion latched) and Seq (factory + fluent API)
- source: entry points (as_sequence, of, empty, duplicate, seq)
- transform: single-source combinators (map, filter, takewhile, ...)
- combine: multi-source combinators (append, merge family, zip family)
- collection: reductions, reverse, partition, comparisons, Result traversal
- writer: Log monoid and pull tracing
"""

# Core types
from ._types import (
    Effect,
    Expander,
    Folder,
    MapFolder,
    Mapper,
    OptionMapper,
    Predicate,
    Selector,
    SupportsLessThan,
)
from .core import EmptyGenerator, FunctionGenerator, Generator, IteratorGenerator, Seq, ensure_seq

# Sources
from .source import as_sequence, duplicate, empty, of, seq

# Transform
from .transform import (
    delete,
    droplast,
    dropwhile,
    filter_,
    filtermap,
    flatmap,
    flatten,
    map_,
    nthtail,
    subsequence,
    subtract,
    takewhile,
    tap,
)

# Combine
from .combine import (
    MergePolicy,
    append,
    concat,
    merge,
    merge3,
    umerge,
    umerge3,
    unzip,
    unzip3,
    zip3,
    zip3_with,
    zip_,
    zip_with,
)

# Collection
from .collection import (
    all_,
    any_,
    count,
    equals,
    first,
    foldl,
    foldr,
    foreach,
    is_prefix,
    is_suffix,
    last,
    mapfoldl,
    mapfoldr,
    max_,
    member,
    min_,
    nth,
    partition,
    partition_results,
    reverse,
    sequence_results,
    split,
    splitwith,
    sum_,
    traverse,
    try_foldl,
)

# Writer
from . import writer
from .writer import Log, PullEvent, Trace

__all__ = (
    # Types
    "Effect",
    "Expander",
    "Folder",
    "MapFolder",
    "Mapper",
    "OptionMapper",
    "Predicate",
    "Selector",
    "SupportsLessThan",
    # Core
    "Generator",
    "EmptyGenerator",
    "FunctionGenerator",
    "IteratorGenerator",
    "Seq",
    "ensure_seq",
    # Sources
    "as_sequence",
    "duplicate",
    "empty",
    "of",
    "seq",
    # Transform
    "map_",
    "filter_",
    "filtermap",
    "flatmap",
    "flatten",
    "tap",
    "takewhile",
    "dropwhile",
    "droplast",
    "nthtail",
    "subsequence",
    "delete",
    "subtract",
    # Combine
    "MergePolicy",
    "append",
    "concat",
    "merge",
    "umerge",
    "merge3",
    "umerge3",
    "zip_",
    "zip3",
    "zip_with",
    "zip3_with",
    "unzip",
    "unzip3",
    # Collection
    "foldl",
    "foldr",
    "foreach",
    "mapfoldl",
    "mapfoldr",
    "all_",
    "any_",
    "member",
    "min_",
    "max_",
    "sum_",
    "count",
    "first",
    "last",
    "nth",
    "reverse",
    "partition",
    "split",
    "splitwith",
    "is_prefix",
    "is_suffix",
    "equals",
    "traverse",
    "sequence_results",
    "try_foldl",
    "partition_results",
    # Writer
    "writer",
    "Log",
    "PullEvent",
    "Trace",
)
