def compute_averages(completed):
    """Return (average waiting, average turnaround), truncated to whole ms."""
    n = len(completed)
    if not n:
        return 0, 0
    total_wait = sum(p.waiting for p in completed)
    total_turnaround = sum(p.turnaround for p in completed)
    return total_wait // n, total_turnaround // n


def summary_line(avg_wait, avg_turnaround):
    return f"The average wait time was {avg_wait}, and the average turnaround time {avg_turnaround}."
