"""Command-line entry point: read a workload file and write output.txt."""

from __future__ import annotations

import re
import sys
from dataclasses import dataclass, field
from pathlib import Path
from typing import Iterable

from .algorithms import (
    Schedule,
    priority_no_preemptive,
    priority_with_preemption,
    round_robin,
    shortest_job_first,
)
from .process import Process

MAX_PROCESSES = 100
OUTPUT_FILE = "output.txt"

_INT = re.compile(r"\s*([+-]?\d+)")
_QUANTUM = re.compile(r"RR\s*([+-]?\d+)")


class InputError(ValueError):
    """The workload description is malformed."""


@dataclass
class Workload:
    """An algorithm line and the processes to schedule with it."""

    algorithm: str
    processes: list[Process] = field(default_factory=list)


def _scan_ints(text: str, count: int) -> list[int] | None:
    values = []
    pos = 0
    for _ in range(count):
        match = _INT.match(text, pos)
        if match is None:
            return None
        values.append(int(match.group(1)))
        pos = match.end()
    return values


def parse_input(lines: Iterable[str]) -> Workload:
    """Parse an algorithm line, a process count and one line per process.

    Process lines that cannot be read are reported on stderr and skipped.
    """
    it = iter(lines)
    algorithm = next(it, None)
    count_line = next(it, None)
    if algorithm is None or count_line is None:
        raise InputError("incomplete input: expected an algorithm line and a process count")
    scanned = _scan_ints(count_line, 1)
    if scanned is None:
        raise InputError("could not read the total number of processes")
    total = scanned[0]
    if total < 0:
        raise InputError(f"process count must not be negative, got {total}")
    if total > MAX_PROCESSES:
        raise InputError(f"too many processes: at most {MAX_PROCESSES} are allowed")

    processes: list[Process] = []
    for line_number, line in enumerate(it, start=2):
        if len(processes) >= total:
            break
        text = line.rstrip("\n")
        values = _scan_ints(text, 4)
        if values is None:
            print(f"could not parse process on line {line_number}: '{text}'", file=sys.stderr)
            continue
        pid, arrival, burst, priority = values
        processes.append(Process(pid, arrival, burst, priority))

    if len(processes) < total:
        raise InputError(f"expected {total} processes, found {len(processes)}")
    return Workload(algorithm.rstrip("\n"), processes)


def run(workload: Workload) -> Schedule | None:
    """Run the algorithm the workload names; None if it names none known."""
    name = workload.algorithm
    procs = workload.processes
    if name.startswith("RR"):
        match = _QUANTUM.match(name)
        if match is None:
            raise InputError("round robin needs a time quantum")
        return round_robin(procs, int(match.group(1)))
    if name.startswith("SJF"):
        return shortest_job_first(procs)
    if name.startswith("PR noPREMP"):
        return priority_no_preemptive(procs)
    if name.startswith("PR withPREMP"):
        return priority_with_preemption(procs)
    return None


def main(argv: list[str] | None = None) -> int:
    """Schedule the workload in the named file and write output.txt."""
    args = sys.argv[1:] if argv is None else argv
    if len(args) != 1:
        print("Usage: cpusched <filename>")
        return 1
    try:
        with open(args[0], encoding="utf-8") as handle:
            workload = parse_input(handle)
    except OSError as exc:
        print(f"Error opening file: {exc}", file=sys.stderr)
        return 1
    except InputError as exc:
        print(exc, file=sys.stderr)
        return 1

    print(f"Total Processes: {len(workload.processes)}")
    try:
        schedule = run(workload)
    except ValueError as exc:
        print(exc, file=sys.stderr)
        return 1
    Path(OUTPUT_FILE).write_text(schedule.render() if schedule else "", encoding="utf-8")
    return 0


if __name__ == "__main__":
    sys.exit(main())