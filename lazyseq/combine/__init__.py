from .append import append, concat
from .merge import MergePolicy, merge, merge3, umerge, umerge3
from .zip import unzip, unzip3, zip3, zip3_with, zip_, zip_with

__all__ = (
    # Append
    "append",
    "concat",
    # Merge
    "MergePolicy",
    "merge",
    "umerge",
    "merge3",
    "umerge3",
    # Zip
    "zip_",
    "zip3",
    "zip_with",
    "zip3_with",
    "unzip",
    "unzip3",
)
