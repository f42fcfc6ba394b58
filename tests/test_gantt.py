import matplotlib.pyplot as plt
import pytest

from gantt import plot_gantt
from process import ProcessRecord, Queue
from scheduling import process_queue


def test_plot_gantt_writes_png(tmp_path):
    ready = Queue([ProcessRecord(1, 0, 5), ProcessRecord(2, 1, 3)])
    schedule = process_queue(ready, "RR", 4)
    path = tmp_path / "rr.png"
    assert plot_gantt(schedule.name, schedule.timeline, str(path)) == str(path)
    assert path.read_bytes()[:8] == b"\x89PNG\r\n\x1a\n"


def test_plot_gantt_empty_timeline(tmp_path):
    path = tmp_path / "empty.png"
    plot_gantt("Non-Preemptive Priority", [], str(path))
    assert path.exists()


def test_plot_gantt_unsupported_format(tmp_path):
    with pytest.raises(ValueError):
        plot_gantt("Round Robin", [(1, 0, 2)], str(tmp_path / "chart.xyz"))
    assert not plt.get_fignums()
