from __future__ import annotations

from collections.abc import Iterable, Iterator

import pytest

from lazyseq import Seq, Trace, as_sequence


class RecordingIterable:
    """Re-iterable source that logs every item it hands out."""

    def __init__(self, items: Iterable[int]) -> None:
        self.items = list(items)
        self.log: list[int] = []

    def __iter__(self) -> Iterator[int]:
        for item in self.items:
            self.log.append(item)
            yield item


@pytest.fixture
def numbers() -> Seq[int]:
    return as_sequence(range(1, 10))


@pytest.fixture
def empty_seq() -> Seq[int]:
    return as_sequence([])


@pytest.fixture
def trace() -> Trace[int]:
    return Trace()


@pytest.fixture
def recording() -> RecordingIterable:
    return RecordingIterable(range(1, 10))
