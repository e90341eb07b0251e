from __future__ import annotations

from _infra import Reading, banner, readings, run

from lazyseq import MergePolicy, as_sequence


def main() -> None:
    banner("02_merge_streams: ordered merge of one-shot feeds")

    # Feeds are one-shot iterators. The timeline is walked more than once, so ask
    # as_sequence to keep what it pulls; a single pass would stream instead.
    north = as_sequence(readings("north", start=0, every=10, values=[1.0, 1.5, 2.0, 2.5]), replay=True)
    south = as_sequence(readings("south", start=5, every=10, values=[0.5, 0.7, 0.9]), replay=True)
    west = as_sequence(readings("west", start=10, every=20, values=[3.0, 3.1]), replay=True)

    by_time = MergePolicy.by(lambda r: r.at)
    timeline = north.merge3(south, west, policy=by_time)
    for reading in timeline:
        print(f"t={reading.at:>3} {reading.sensor:<5} {reading.value}")

    # Same timeline, one reading per timestamp; the earliest feed wins.
    per_tick = north.umerge3(south, west, policy=by_time)
    print(f"ticks: {per_tick.map(lambda r: r.at).as_list()}")

    latest: Reading = timeline.last().unwrap()
    print(f"latest: {latest}")

    ids = as_sequence([1, 3, 5, 7]).umerge(as_sequence([3, 4, 5, 6]))
    print(f"distinct ids: {ids.as_list()}")


if __name__ == "__main__":
    run(main)
