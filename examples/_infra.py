from __future__ import annotations

import sys
from collections.abc import Callable, Iterator
from dataclasses import dataclass
from pathlib import Path

_PROJECT_ROOT = Path(__file__).resolve().parents[1]
if str(_PROJECT_ROOT) not in sys.path:
    sys.path.insert(0, str(_PROJECT_ROOT))


@dataclass(frozen=True, slots=True)
class Reading:
    sensor: str
    at: int
    value: float


def readings(sensor: str, start: int, every: int, values: list[float]) -> Iterator[Reading]:
    """One-shot feed of timestamped readings, as a socket or file would give."""
    for offset, value in enumerate(values):
        yield Reading(sensor, start + offset * every, value)


def banner(title: str) -> None:  # pragma: no cover (examples only)
    print(f"\n== {title} ==")


def run(main: Callable[[], None]) -> None:  # pragma: no cover (examples only)
    main()
