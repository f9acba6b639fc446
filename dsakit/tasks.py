"""Run named counting tasks concurrently on threads."""

from __future__ import annotations

import argparse
import sys
import threading
import time
from collections.abc import Iterable, Sequence
from typing import TextIO

_write_lock = threading.Lock()


def run_task(
    name: str, count: int = 10, delay: float = 1.0, output: TextIO | None = None
) -> None:
    """Write ``Task <name><i>`` for each ``i`` below ``count``, pausing ``delay`` seconds before each."""
    if count < 0:
        raise ValueError("count must not be negative")
    if delay < 0:
        raise ValueError("delay must not be negative")
    stream = sys.stdout if output is None else output
    for i in range(count):
        time.sleep(delay)
        with _write_lock:
            stream.write(f"Task {name}{i}\n")
            stream.flush()


def run_tasks(
    names: Iterable[str],
    count: int = 10,
    delay: float = 1.0,
    output: TextIO | None = None,
) -> None:
    """Run one task per name, each on its own thread, and wait for all of them."""
    if count < 0:
        raise ValueError("count must not be negative")
    if delay < 0:
        raise ValueError("delay must not be negative")
    threads = [
        threading.Thread(target=run_task, args=(name, count, delay, output))
        for name in names
    ]
    for thread in threads:
        thread.start()
    for thread in threads:
        thread.join()


def main(argv: Sequence[str] | None = None) -> int:
    """Run the named tasks side by side."""
    parser = argparse.ArgumentParser(description="Run counting tasks on threads.")
    parser.add_argument("names", nargs="*", default=["A", "B"], help="task names")
    parser.add_argument("--count", type=int, default=10, help="lines per task")
    parser.add_argument(
        "--delay", type=float, default=1.0, help="seconds to wait before each line"
    )
    args = parser.parse_args(argv)
    if args.count < 0 or args.delay < 0:
        parser.error("count and delay must not be negative")
    run_tasks(args.names, args.count, args.delay)
    return 0


if __name__ == "__main__":
    sys.exit(main())