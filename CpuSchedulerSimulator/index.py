import argparse
import logging
import sys
from dataclasses import dataclass
from typing import Optional

from backend import configure_logging, load_processes, log_action, write_results
from gantt import plot_gantt
from process import CpuSchedulerError
from scheduling import ALGORITHMS, process_queue
from utils import compute_averages, summary_line

RR_HINT = "Perhaps try the following invocation: cpu-sched in.txt out.txt RR 4"


@dataclass
class SimulationConfig:
    input_path: str
    output_path: str
    algorithm: str
    quantum: int = 0
    limit: int = 0
    gantt_path: Optional[str] = None
    verbose: bool = False


class UsageParser(argparse.ArgumentParser):
    def error(self, message):
        self.print_usage(sys.stderr)
        self.exit(1, f"{self.prog}: error: {message}\n")


def build_parser():
    parser = UsageParser(
        prog="cpu-sched",
        description="Simulate Non-Preemptive Priority (NPP) or Round Robin (RR) CPU scheduling.",
        epilog="Each input record is 'pid arrival burst priority'. "
               "Each output line is 'pid arrival finish waiting', in completion order.",
    )
    parser.add_argument("input_path", help="file of process records")
    parser.add_argument("output_path", help="file to write the results to")
    parser.add_argument("algorithm", choices=list(ALGORITHMS), help="scheduling algorithm")
    parser.add_argument("extra", nargs="*", metavar="[quantum] [limit]",
                        help="RR: quantum, then optional limit. NPP: optional limit")
    parser.add_argument("--gantt", dest="gantt_path", metavar="PNG", help="also save a Gantt chart of the run")
    parser.add_argument("-v", "--verbose", action="store_true", help="log every scheduling decision")
    return parser


def _int_arg(parser, value, name):
    try:
        return int(value)
    except ValueError:
        parser.error(f"{name} must be an integer, got {value!r}")


def parse_args(argv=None):
    parser = build_parser()
    args = parser.parse_args(argv)
    extra = args.extra
    if len(extra) > 2:
        parser.error(f"expected at most 5 arguments, got {3 + len(extra)}")

    quantum = 0
    limit = 0
    if args.algorithm == "NPP":
        if len(extra) > 1:
            parser.error("NPP takes only one optional argument, [limit]")
        if extra:
            limit = _int_arg(parser, extra[0], "limit")
    else:
        if not extra:
            parser.error("simulating RR requires a positive integer [quantum] value representing "
                         "the length of the time quantum (time slice).\n" + RR_HINT)
        quantum = _int_arg(parser, extra[0], "quantum")
        if quantum <= 0:
            parser.error(f"quantum must be a positive integer, got {quantum}.\n" + RR_HINT)
        if len(extra) == 2:
            limit = _int_arg(parser, extra[1], "limit")

    return SimulationConfig(args.input_path, args.output_path, args.algorithm, quantum, limit,
                            args.gantt_path, args.verbose)


def run(config):
    """Run one simulation described by `config`. Returns the process exit code."""
    log_action(f"Starting {config.algorithm} run on {config.input_path} "
               f"(quantum={config.quantum}, limit={config.limit})")
    try:
        ready_queue = load_processes(config.input_path, config.limit)
    except OSError as e:
        logging.error("Could not read %s: %s", config.input_path, e)
        print(f"Sorry, but there seems to be no such file at {config.input_path}.", file=sys.stderr)
        return 1

    try:
        schedule = process_queue(ready_queue, config.algorithm, config.quantum)
    except CpuSchedulerError as e:
        logging.error("Scheduling failed: %s", e)
        print(f"Sorry, but the simulation could not run: {e}", file=sys.stderr)
        return 1

    try:
        write_results(config.output_path, schedule.completed)
    except OSError as e:
        logging.error("Could not write %s: %s", config.output_path, e)
        print(f"Sorry, but the file {config.output_path} could not be created.", file=sys.stderr)
        return 1

    avg_wait, avg_turnaround = compute_averages(schedule.completed)
    print(summary_line(avg_wait, avg_turnaround))
    log_action(f"{schedule.name}: average wait {avg_wait}, average turnaround {avg_turnaround}")

    if config.gantt_path:
        try:
            plot_gantt(schedule.name, schedule.timeline, config.gantt_path)
        except (OSError, ValueError) as e:
            logging.error("Could not save Gantt chart to %s: %s", config.gantt_path, e)
            print(f"Sorry, but the chart {config.gantt_path} could not be saved.", file=sys.stderr)
            return 1
        log_action(f"Saved Gantt chart to {config.gantt_path}")
    return 0


def main(argv=None):
    config = parse_args(argv)
    configure_logging(config.verbose)
    return run(config)


if __name__ == "__main__":
    sys.exit(main())
