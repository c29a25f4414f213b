import threading

import pytest

from drillrunner.drills.concurrency import (
    Queue,
    count_jobs,
    offset_sums,
    receive_all,
    send_tx,
)


def test_offset_sums_cover_all_numbers():
    numbers = list(range(100))
    sums = offset_sums(numbers, 8)
    assert len(sums) == 8
    assert sum(sums) == sum(numbers)


def test_offset_sums_single_residue():
    numbers = [8, 16, 24]
    sums = offset_sums(numbers, 8)
    assert sums[0] == sum(numbers)
    assert sums[1:] == [0] * 7


def test_offset_sums_rejects_no_workers():
    with pytest.raises(ValueError):
        offset_sums([1, 2, 3], 0)


def test_count_jobs_counts_every_thread():
    assert count_jobs(10, 0) == 10
    assert count_jobs(3, 0) == 3


def test_send_tx_sends_both_halves():
    queue = Queue()
    collected = []
    lock = threading.Lock()

    def sink(value):
        with lock:
            collected.append(value)

    for thread in send_tx(queue, sink, 0):
        thread.join()
    assert sorted(collected) == sorted(queue.first_half + queue.second_half)


def test_receive_all_gets_every_value_in_half_order():
    queue = Queue()
    received = receive_all(queue, 0)
    assert len(received) == queue.length
    assert sorted(received) == sorted(queue.first_half + queue.second_half)
    assert [v for v in received if v in queue.first_half] == queue.first_half
    assert [v for v in received if v in queue.second_half] == queue.second_half


def test_receive_all_length_mismatch():
    with pytest.raises(RuntimeError):
        receive_all(Queue(length=3), 0)