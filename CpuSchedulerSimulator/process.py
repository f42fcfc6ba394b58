from collections import deque
from dataclasses import dataclass
from typing import Optional


class CpuSchedulerError(Exception):
    pass


class SchedulingError(CpuSchedulerError):
    pass


class EmptyQueueError(CpuSchedulerError, IndexError):
    pass


@dataclass
class ProcessRecord:
    pid: int
    arrival: int
    burst: int
    priority: int = 0
    remaining: Optional[int] = None
    finish: int = 0
    waiting: int = 0

    def __post_init__(self):
        if self.remaining is None:
            self.remaining = self.burst

    @property
    def turnaround(self):
        return self.finish - self.arrival

    def complete(self, clock):
        self.finish = clock
        self.waiting = clock - self.arrival - self.burst


class Queue:
    """
    FIFO container of ProcessRecord.
    Insertion order is the FCFS order used for tie-breaking, and for the
    completed queue it is the chronological finish order.
    """

    def __init__(self, records=()):
        self._items = deque(records)

    @property
    def count(self):
        return len(self._items)

    @property
    def head(self):
        return self._items[0] if self._items else None

    def enqueue(self, record):
        self._items.append(record)

    def dequeue(self):
        if not self._items:
            raise EmptyQueueError("dequeue from an empty queue")
        return self._items.popleft()

    def reorder(self, key):
        # sorted() is stable, equal keys keep their queue order
        self._items = deque(sorted(self._items, key=key))

    def pids(self):
        return [p.pid for p in self._items]

    def __len__(self):
        return len(self._items)

    def __iter__(self):
        return iter(self._items)

    def __repr__(self):
        return f"Queue({self.pids()})"
