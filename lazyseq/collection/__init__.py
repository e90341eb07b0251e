from .compare import equals, is_prefix, is_suffix
from .fold import (
    all_,
    any_,
    count,
    first,
    foldl,
    foldr,
    foreach,
    last,
    mapfoldl,
    mapfoldr,
    max_,
    member,
    min_,
    nth,
    sum_,
)
from .partition import partition, split, splitwith
from .reverse import reverse
from .traverse import partition_results, sequence_results, traverse, try_foldl

__all__ = (
    # Folds
    "foldl",
    "foldr",
    "foreach",
    "mapfoldl",
    "mapfoldr",
    # Predicates
    "all_",
    "any_",
    "member",
    # Queries
    "min_",
    "max_",
    "sum_",
    "count",
    "first",
    "last",
    "nth",
    # Structure
    "reverse",
    "partition",
    "split",
    "splitwith",
    # Comparison
    "is_prefix",
    "is_suffix",
    "equals",
    # Result integration
    "traverse",
    "sequence_results",
    "try_foldl",
    "partition_results",
)
