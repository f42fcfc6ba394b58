import logging
from collections import namedtuple

from process import Queue, SchedulingError

logger = logging.getLogger(__name__)

ALGORITHMS = {
    "NPP": "Non-Preemptive Priority",
    "RR": "Round Robin",
}

Schedule = namedtuple("Schedule", ["name", "completed", "timeline"])


def check_arrivals(dispatchable, pending, clock):
    """Move every pending record arriving at `clock` to the dispatchable queue.

    Records left behind keep their relative order in `pending`.
    """
    for _ in range(pending.count):
        record = pending.dequeue()
        if record.arrival == clock:
            dispatchable.enqueue(record)
            logger.debug("t=%d: process %d arrived", clock, record.pid)
        else:
            pending.enqueue(record)


def sort_by_priority(queue):
    # lower value runs first, ties stay in the order they were queued (FCFS)
    if queue.count > 1:
        queue.reorder(key=lambda p: p.priority)


def _wait_for_arrival(dispatchable, pending, clock, reorder=None):
    # CPU idles until something in the job queue arrives
    if dispatchable.count or not pending.count:
        return clock
    stranded = [p.pid for p in pending if p.arrival < clock]
    if stranded:
        raise SchedulingError(f"processes {stranded} arrive before t={clock} and can never be dispatched")
    check_arrivals(dispatchable, pending, clock)
    while not dispatchable.count:
        clock += 1
        check_arrivals(dispatchable, pending, clock)
    if reorder:
        reorder(dispatchable)
    logger.debug("t=%d: CPU idle until now", clock)
    return clock


def _record_slice(timeline, pid, start, end):
    if timeline and timeline[-1][0] == pid and timeline[-1][2] == start:
        timeline[-1] = (pid, timeline[-1][1], end)
    else:
        timeline.append((pid, start, end))


def npp(dispatchable, pending, completed, clock=0):
    timeline = []
    while True:
        clock = _wait_for_arrival(dispatchable, pending, clock, reorder=sort_by_priority)
        if not dispatchable.count:
            break
        current = dispatchable.dequeue()
        start = clock
        logger.debug("t=%d: dispatching process %d (priority %d)", clock, current.pid, current.priority)
        for _ in range(current.burst):
            clock += 1
            check_arrivals(dispatchable, pending, clock)
            if dispatchable.count:
                sort_by_priority(dispatchable)
        current.complete(clock)
        completed.enqueue(current)
        _record_slice(timeline, current.pid, start, clock)
        logger.debug("t=%d: process %d finished, waited %d", clock, current.pid, current.waiting)
        # arrivals at the completion tick compete for the next slot
        check_arrivals(dispatchable, pending, clock)
        if dispatchable.count:
            sort_by_priority(dispatchable)
    return timeline


def round_robin(dispatchable, pending, completed, quantum, clock=0):
    timeline = []
    while True:
        clock = _wait_for_arrival(dispatchable, pending, clock)
        if not dispatchable.count:
            break
        current = dispatchable.dequeue()
        start = clock
        for i in range(quantum):
            clock += 1
            current.remaining -= 1
            # arrivals on the expiry tick are queued behind the expiring process
            if i < quantum - 1:
                check_arrivals(dispatchable, pending, clock)
            if current.remaining == 0:
                break
        _record_slice(timeline, current.pid, start, clock)
        if current.remaining == 0:
            current.complete(clock)
            completed.enqueue(current)
            logger.debug("t=%d: process %d finished, waited %d", clock, current.pid, current.waiting)
        else:
            dispatchable.enqueue(current)
            logger.debug("t=%d: process %d quantum expired, %d ms left", clock, current.pid, current.remaining)
        check_arrivals(dispatchable, pending, clock)
    return timeline


def process_queue(ready_queue, algorithm, quantum=0):
    """
    Run the imported processes through the selected algorithm.

    The imported records are consumed from `ready_queue`. The earliest
    arriving record becomes the first running process and the clock starts
    at its arrival time. Returns a Schedule whose `completed` queue is in
    finish order.
    """
    if algorithm not in ALGORITHMS:
        raise SchedulingError(f"unknown algorithm {algorithm!r}, expected one of {', '.join(ALGORITHMS)}")
    if algorithm == "RR" and (not isinstance(quantum, int) or quantum <= 0):
        raise SchedulingError(f"Round Robin needs a positive integer quantum, got {quantum!r}")

    name = ALGORITHMS[algorithm]
    completed = Queue()
    records = [ready_queue.dequeue() for _ in range(ready_queue.count)]
    if not records:
        logger.warning("no processes to schedule")
        return Schedule(name, completed, [])

    pending = Queue(sorted(records, key=lambda p: p.arrival))
    first = pending.dequeue()
    clock = first.arrival
    dispatchable = Queue([first])
    check_arrivals(dispatchable, pending, clock)

    logger.info("%s: scheduling %d processes from t=%d", name, len(records), clock)
    if algorithm == "NPP":
        timeline = npp(dispatchable, pending, completed, clock)
    else:
        timeline = round_robin(dispatchable, pending, completed, quantum, clock)
    return Schedule(name, completed, timeline)
