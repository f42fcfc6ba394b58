import matplotlib

matplotlib.use("Agg")
import matplotlib.pyplot as plt  # noqa: E402


def plot_gantt(name, timeline, path):
    """Save a Gantt chart of `timeline` ((pid, start, end) slices) to `path`.

    Each process gets its own row, so every slice of a process lines up.
    """
    pids = []
    for pid, _, _ in timeline:
        if pid not in pids:
            pids.append(pid)
    rows = {pid: i for i, pid in enumerate(pids)}

    fig, ax = plt.subplots(figsize=(10, 2 + 0.5 * len(pids)))
    colors = plt.cm.tab20.colors
    for pid, start, end in timeline:
        i = rows[pid]
        ax.broken_barh([(start, end - start)], (i * 10, 9), facecolors=colors[i % len(colors)], edgecolors='black')
        ax.text(start + (end - start) / 2, i * 10 + 4.5, str(pid), ha='center', va='center', color='black', fontsize=9)
    ax.set_ylim(0, max(1, len(pids)) * 10)
    ax.set_xlabel("Time (ms)")
    ax.set_yticks([i * 10 + 4.5 for i in range(len(pids))])
    ax.set_yticklabels([str(pid) for pid in pids])
    ax.set_title(f"Gantt Chart - {name} Scheduling")
    plt.tight_layout()
    try:
        fig.savefig(path)
    finally:
        plt.close(fig)
    return path
