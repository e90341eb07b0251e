from __future__ import annotations

from _infra import banner, run

from kungfu import Nothing, Some
from lazyseq import as_sequence, seq


def main() -> None:
    banner("01_quickstart: build, transform, consume")

    numbers = seq(1, 20)

    pipeline = (
        numbers
        .filter(lambda x: x % 3 != 0)
        .map(lambda x: x * x)
        .takewhile(lambda x: x < 200)
    )

    # Nothing above has run yet; consuming does.
    print(f"squares: {pipeline.as_list()}")
    print(f"sum: {pipeline.sum()}  count: {pipeline.count()}")

    match pipeline.nth(3):
        case Some(value):
            print(f"third: {value}")
        case Nothing():
            print("fewer than three")

    words = as_sequence("the quick brown fox".split())
    shout, total = words.mapfoldl(0, lambda word, acc: (word.upper(), acc + len(word)))
    print(f"{shout.as_list()} ({total} letters)")

    head, tail = numbers.split(5)
    print(f"head: {head.as_list()}  tail starts at: {tail.first().unwrap()}")


if __name__ == "__main__":
    run(main)
