from __future__ import annotations

from _infra import banner, run

from lazyseq import Trace, seq


def main() -> None:
    banner("03_trace_pulls: see what a pipeline actually asks for")

    trace = Trace[int]()
    source = seq(1, 1_000_000).traced(trace, "source")

    found = source.map(lambda x: x * 7).filter(lambda x: x % 11 == 0).first()
    print(f"first multiple of 77: {found.unwrap()}")
    print(f"pulled {trace.pulls('source')} of a million")

    trace.clear()
    left, right = source.subsequence(3), source.nthtail(10)
    print(f"zip: {left.zip(right).as_list()}")
    print(f"generators created: {trace.generations('source')}")
    for event in trace.events("source")[-3:]:
        print(f"  gen={event.generation} index={event.index} exhausted={event.exhausted}")


if __name__ == "__main__":
    run(main)
