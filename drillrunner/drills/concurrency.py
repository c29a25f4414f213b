"""Drills on sharing data between threads and passing values over channels."""

from __future__ import annotations

import threading
import time
from collections.abc import Callable, Iterable
from concurrent.futures import ThreadPoolExecutor
from dataclasses import dataclass, field
from queue import SimpleQueue


def offset_sums(numbers: Iterable[int], workers: int = 8) -> list[int]:
    """Sum, in one thread per offset, the numbers congruent to that offset."""
    if workers <= 0:
        raise ValueError("workers must be positive")
    shared = tuple(numbers)

    def sum_offset(offset: int) -> int:
        total = sum(n for n in shared if n % workers == offset)
        print(f"Sum of offset {offset} is {total}")
        return total

    with ThreadPoolExecutor(max_workers=workers) as pool:
        return list(pool.map(sum_offset, range(workers)))


@dataclass
class _JobStatus:
    jobs_completed: int = 0


def count_jobs(jobs: int = 10, delay: float = 0.25) -> int:
    """Let each of several threads record one completed job; return the count."""
    status = _JobStatus()
    lock = threading.Lock()

    def work() -> None:
        time.sleep(delay)
        with lock:
            status.jobs_completed += 1

    threads = [threading.Thread(target=work) for _ in range(jobs)]
    for thread in threads:
        thread.start()
    for thread in threads:
        thread.join()
        with lock:
            print(f"jobs completed {status.jobs_completed}")
    return status.jobs_completed


@dataclass
class Queue:
    """Values to send, split into two halves sent from separate threads."""

    length: int = 10
    first_half: list[int] = field(default_factory=lambda: [1, 2, 3, 4, 5])
    second_half: list[int] = field(default_factory=lambda: [6, 7, 8, 9, 10])


def send_tx(
    queue: Queue, sink: Callable[[int], object], delay: float = 1.0
) -> list[threading.Thread]:
    """Start two threads sending each half of the queue to sink; return them."""

    def send(values: list[int]) -> None:
        for value in values:
            print(f"sending {value}")
            sink(value)
            time.sleep(delay)

    threads = [
        threading.Thread(target=send, args=(queue.first_half,)),
        threading.Thread(target=send, args=(queue.second_half,)),
    ]
    for thread in threads:
        thread.start()
    return threads


_CLOSED = object()


def receive_all(queue: Queue, delay: float = 1.0) -> list[int]:
    """Receive every value sent from the queue, in arrival order."""
    channel: SimpleQueue = SimpleQueue()
    senders = send_tx(queue, channel.put, delay)

    def close_when_done() -> None:
        for sender in senders:
            sender.join()
        channel.put(_CLOSED)

    threading.Thread(target=close_when_done, daemon=True).start()

    received = []
    for value in iter(channel.get, _CLOSED):
        print(f"Got: {value}")
        received.append(value)

    print(f"total numbers received: {len(received)}")
    if len(received) != queue.length:
        raise RuntimeError(
            f"received {len(received)} values, expected {queue.length}"
        )
    return received