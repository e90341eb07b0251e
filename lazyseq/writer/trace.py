"""
Pull tracing
============

Observation of the pull protocol. A Trace wraps sequences so that every
pull their generators make is recorded as a PullEvent in a Log. Traces
are how pull discipline is checked: how many elements a combinator
actually requested from its upstream, how many times a sequence was
regenerated, whether an exhausted source was pulled again.

Example:
    trace = Trace[int]()
    source = seq(1, 100).traced(trace, "numbers")
    source.takewhile(lambda x: x < 3).as_list()   # [1, 2]
    trace.pulls("numbers")                         # 3
"""

from __future__ import annotations

from dataclasses import dataclass

from kungfu import Nothing, Option

from ..core.generator import Generator
from ..core.sequence import Seq
from .log import Log


@dataclass(frozen=True, slots=True)
class PullEvent[T]:
    """One upstream pull."""

    label: str
    generation: int
    index: int
    value: Option[T]

    @property
    def exhausted(self) -> bool:
        return isinstance(self.value, Nothing)


class _TracedGenerator[T](Generator[T]):
    __slots__ = ("_source", "_trace", "_label", "_generation", "_index")

    def __init__(self, source: Generator[T], trace: Trace[T], label: str, generation: int) -> None:
        super().__init__()
        self._source = source
        self._trace = trace
        self._label = label
        self._generation = generation
        self._index = 0

    def _pull(self) -> Option[T]:
        item = self._source.next()
        self._trace.record(PullEvent(self._label, self._generation, self._index, item))
        self._index += 1
        return item


class Trace[T]:
    """Recorder for pulls made through wrapped sequences."""

    __slots__ = ("_log", "_generations")

    def __init__(self) -> None:
        self._log: Log[PullEvent[T]] = Log()
        self._generations: dict[str, int] = {}

    def wrap(self, source: Seq[T], label: str = "seq") -> Seq[T]:
        """Seq identical to source whose generators report every pull here."""

        def factory() -> Generator[T]:
            generation = self._generations.get(label, 0) + 1
            self._generations[label] = generation
            return _TracedGenerator(source.generate(), self, label, generation)

        return Seq(factory)

    def record(self, event: PullEvent[T]) -> None:
        self._log.append(event)

    @property
    def log(self) -> Log[PullEvent[T]]:
        """Snapshot of all events so far."""
        return Log(self._log)

    def events(self, label: str | None = None) -> Log[PullEvent[T]]:
        if label is None:
            return self.log
        return self._log.where(lambda event: event.label == label)

    def pulls(self, label: str) -> int:
        """Pulls under label that produced a value."""
        return sum(1 for event in self.events(label) if not event.exhausted)

    def exhaustions(self, label: str) -> int:
        """Pulls under label that reported exhaustion."""
        return sum(1 for event in self.events(label) if event.exhausted)

    def generations(self, label: str) -> int:
        """Number of generators created under label."""
        return self._generations.get(label, 0)

    def clear(self) -> None:
        self._log = Log()
        self._generations.clear()


__all__ = ("PullEvent", "Trace")
