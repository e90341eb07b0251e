from .construct import as_sequence, duplicate, empty, of, seq

__all__ = ("as_sequence", "duplicate", "empty", "of", "seq")
