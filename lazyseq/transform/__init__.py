from .effects import tap
from .map import filter_, filtermap, flatmap, flatten, map_
from .slicing import delete, droplast, dropwhile, nthtail, subsequence, subtract, takewhile

__all__ = (
    # Map
    "map_",
    "filter_",
    "filtermap",
    "flatmap",
    "flatten",
    # Effects
    "tap",
    # Slicing
    "takewhile",
    "dropwhile",
    "droplast",
    "nthtail",
    "subsequence",
    "delete",
    "subtract",
)
