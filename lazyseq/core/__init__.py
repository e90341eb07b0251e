from .generator import EmptyGenerator, FunctionGenerator, Generator, IteratorGenerator
from .sequence import Seq, ensure_seq

__all__ = (
    "Generator",
    "EmptyGenerator",
    "FunctionGenerator",
    "IteratorGenerator",
    "Seq",
    "ensure_seq",
)
