"""Spread a queue of work items over a fixed pool of worker threads."""

from __future__ import annotations

import argparse
import queue
import sys
import threading
from typing import Callable, Iterable, Optional, TypeVar

T = TypeVar("T")


def process_queue(
    items: Iterable[T], workers: int, handler: Callable[[int, T], object]
) -> int:
    """Hand every item to handler(worker_index, item) across the workers; return the count."""
    if workers < 1:
        raise ValueError("workers must be at least 1")
    pending: "queue.Queue[T]" = queue.Queue()
    for item in items:
        pending.put(item)

    lock = threading.Lock()
    processed = 0

    def work(index: int) -> None:
        nonlocal processed
        while True:
            try:
                item = pending.get_nowait()
            except queue.Empty:
                return
            handler(index, item)
            with lock:
                processed += 1

    threads = [threading.Thread(target=work, args=(i,)) for i in range(workers)]
    for thread in threads:
        thread.start()
    for thread in threads:
        thread.join()
    return processed


def main(argv: Optional[list] = None) -> int:
    parser = argparse.ArgumentParser(description="Process numbered items with a worker pool.")
    parser.add_argument("--items", type=int, default=10000)
    parser.add_argument("--workers", type=int, default=5)
    args = parser.parse_args(argv)

    def handle(worker: int, item: int) -> None:
        print(f"Worker {worker} processing item {item}")

    total = process_queue(range(args.items), args.workers, handle)
    print(f"Total items processed: {total}")
    return 0


if __name__ == "__main__":
    sys.exit(main())