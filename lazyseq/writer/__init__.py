"""
Writer
======

Observation side of lazyseq:
- Log: monoidal accumulator (list with combine/tell)
- Trace: records every pull made through wrapped sequences as PullEvent entries
"""

from .log import Log
from .trace import PullEvent, Trace

__all__ = (
    "Log",
    "PullEvent",
    "Trace",
)
