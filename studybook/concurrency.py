"""Passing messages between threads and sharing a counter."""

from __future__ import annotations

import json
import queue
import threading
import time
from collections.abc import Iterable, Sequence
from concurrent.futures import ThreadPoolExecutor
from typing import Any, TypeVar

T = TypeVar("T")

_DONE = object()


def _produce(values: Iterable[Any], channel: queue.Queue, delay: float) -> None:
    try:
        for value in values:
            channel.put(value)
            if delay > 0:
                time.sleep(delay)
    finally:
        channel.put(_DONE)


def merge_producers(producers: Iterable[Iterable[T]], delay: float = 0.0) -> list[T]:
    """Run one sending thread per producer and collect every message as it arrives.

    Each producer's messages keep their relative order; how the producers
    interleave depends on scheduling.
    """
    channel: queue.Queue = queue.Queue()
    threads = [
        threading.Thread(target=_produce, args=(list(values), channel, delay), daemon=True)
        for values in producers
    ]
    for thread in threads:
        thread.start()
    received: list[T] = []
    remaining = len(threads)
    while remaining:
        item = channel.get()
        if item is _DONE:
            remaining -= 1
        else:
            received.append(item)
    for thread in threads:
        thread.join()
    return received


def send_messages(values: Iterable[T], delay: float = 0.0) -> list[T]:
    """Send the values from a separate thread and return them as received."""
    return merge_producers([values], delay)


def increment_concurrently(threads: int = 10) -> int:
    """Have each of the given number of threads add one to a locked counter."""
    if threads < 0:
        raise ValueError(f"thread count must not be negative: {threads}")
    lock = threading.Lock()
    counter = 0

    def increment() -> None:
        nonlocal counter
        with lock:
            counter += 1

    workers = [threading.Thread(target=increment) for _ in range(threads)]
    for worker in workers:
        worker.start()
    for worker in workers:
        worker.join()
    return counter


def _debug(value: Any) -> str:
    if isinstance(value, str):
        return json.dumps(value, ensure_ascii=False)
    return repr(value)


def run_in_thread(values: Sequence[Any]) -> str:
    """Hand a copy of the values to another thread and return what it reports."""
    owned = list(values)

    def report() -> str:
        return "在线程中访问向量: [" + ", ".join(_debug(v) for v in owned) + "]"

    with ThreadPoolExecutor(max_workers=1) as executor:
        return executor.submit(report).result()