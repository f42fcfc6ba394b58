import pytest

from process import CpuSchedulerError, EmptyQueueError, ProcessRecord, Queue


def test_record_defaults():
    p = ProcessRecord(1, 2, 5, 3)
    assert p.remaining == 5
    assert p.finish == 0
    assert p.waiting == 0


def test_complete_sets_finish_and_waiting():
    p = ProcessRecord(1, 2, 5, 3)
    p.complete(12)
    assert p.finish == 12
    assert p.waiting == 12 - 2 - 5
    assert p.turnaround == 10


def test_queue_is_fifo():
    q = Queue()
    for pid in (3, 1, 2):
        q.enqueue(ProcessRecord(pid, 0, 1))
    assert q.count == 3
    assert q.head.pid == 3
    assert [q.dequeue().pid for _ in range(3)] == [3, 1, 2]
    assert q.count == 0
    assert q.head is None


def test_dequeue_empty_raises():
    q = Queue()
    with pytest.raises(EmptyQueueError):
        q.dequeue()
    assert issubclass(EmptyQueueError, CpuSchedulerError)
    assert issubclass(EmptyQueueError, IndexError)


def test_reorder_is_stable():
    q = Queue([ProcessRecord(1, 0, 1, 2), ProcessRecord(2, 0, 1, 1), ProcessRecord(3, 0, 1, 2),
               ProcessRecord(4, 0, 1, 1)])
    q.reorder(key=lambda p: p.priority)
    assert q.pids() == [2, 4, 1, 3]


def test_explicit_remaining_is_kept():
    assert ProcessRecord(1, 0, 5, remaining=2).remaining == 2
