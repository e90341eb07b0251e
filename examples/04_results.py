from __future__ import annotations

from _infra import banner, run

from kungfu import Error, Ok, Result
from lazyseq import as_sequence, of


def parse_port(text: str) -> Result[int, str]:
    if not text.isdigit():
        return Error(f"{text!r} is not a number")
    port = int(text)
    if not 0 < port < 65536:
        return Error(f"{port} out of range")
    return Ok(port)


def main() -> None:
    banner("04_results: Result-returning steps over sequences")

    good = of("80", "443", "8080")
    bad = of("80", "http", "99999")

    for name, raw in (("good", good), ("bad", bad)):
        match raw.traverse(parse_port):
            case Ok(ports):
                print(f"{name}: ports {ports}")
            case Error(err):
                print(f"{name}: error {err}")

    ports, errors = bad.map(parse_port).partition_results()
    print(f"kept {ports.as_list()}, rejected {errors.as_list()}")

    def reserve(free: int, port: int) -> Result[int, str]:
        return Ok(free - 1) if free > 0 else Error(f"no slot left for {port}")

    match good.traverse(parse_port).map(as_sequence):
        case Ok(parsed):
            print(f"slots left: {parsed.try_foldl(2, reserve)}")
        case Error(err):
            print(f"error {err}")


if __name__ == "__main__":
    run(main)
