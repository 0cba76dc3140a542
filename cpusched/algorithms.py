"""CPU scheduling algorithms producing a timeline of dispatched processes."""

from __future__ import annotations

from collections import deque
from dataclasses import dataclass, replace
from operator import attrgetter
from typing import Iterable

from .process import Process


@dataclass(frozen=True)
class Schedule:
    """The outcome of running a scheduler over a workload.

    ``slices`` holds one ``(time, pid)`` pair per dispatch, in order.
    """

    header: str
    slices: tuple[tuple[int, int], ...]
    total_waiting_time: int
    process_count: int

    def average_waiting_time(self) -> float:
        """Mean waiting time per process; NaN for an empty workload."""
        if self.process_count == 0:
            return float("nan")
        return self.total_waiting_time / self.process_count

    def render(self) -> str:
        """Render the schedule in the textual output format."""
        lines = [self.header]
        lines.extend(f"{time} {pid}" for time, pid in self.slices)
        lines.append(f"AVG Waiting Time: {self.average_waiting_time():.2f}")
        return "\n".join(lines) + "\n"


def _fresh(processes: Iterable[Process]) -> list[Process]:
    jobs = [replace(proc) for proc in processes]
    for job in jobs:
        job.reset()
    return jobs


def _next_arrival(jobs: list[Process], time: int) -> int:
    """Time at which the next pending process becomes ready."""
    pending = [job.arrival_time for job in jobs if not job.completed]
    return max(time + 1, min(pending))


def round_robin(processes: Iterable[Process], time_quantum: int) -> Schedule:
    """Round-robin scheduling with the given time quantum.

    Only processes arriving at time 0 start in the ready queue; later
    arrivals join it as time passes while a process runs. If the queue
    runs dry before every process has finished, the workload cannot be
    scheduled and ``ValueError`` is raised.
    """
    if time_quantum <= 0:
        raise ValueError(f"time quantum must be positive, got {time_quantum}")
    jobs = _fresh(processes)
    queue = deque(job for job in jobs if job.arrival_time == 0)
    slices: list[tuple[int, int]] = []
    time = done = total_wait = 0

    while done < len(jobs):
        if not queue:
            raise ValueError(f"no process is ready at time {time}; round robin cannot proceed")
        current = queue.popleft()
        slices.append((time, current.pid))
        run = min(current.remaining_time, time_quantum)
        current.remaining_time -= run
        start, time = time, time + run
        queue.extend(job for job in jobs if start < job.arrival_time <= time)
        if current.remaining_time > 0:
            queue.append(current)
        else:
            current.completed = True
            done += 1
            total_wait += time - current.arrival_time - current.burst_time

    return Schedule(f"RR {time_quantum}", tuple(slices), total_wait, len(jobs))


def _non_preemptive(header: str, processes: Iterable[Process], key) -> Schedule:
    jobs = _fresh(processes)
    slices: list[tuple[int, int]] = []
    time = done = total_wait = 0

    while done < len(jobs):
        ready = [job for job in jobs if not job.completed and job.arrival_time <= time]
        if not ready:
            time = _next_arrival(jobs, time)
            continue
        selected = min(ready, key=key)
        slices.append((time, selected.pid))
        total_wait += time - selected.arrival_time
        time += selected.burst_time
        selected.completed = True
        done += 1

    return Schedule(header, tuple(slices), total_wait, len(jobs))


def shortest_job_first(processes: Iterable[Process]) -> Schedule:
    """Non-preemptive shortest-job-first; ties go to the earliest listed."""
    return _non_preemptive("SJF", processes, attrgetter("burst_time"))


def priority_no_preemptive(processes: Iterable[Process]) -> Schedule:
    """Non-preemptive priority scheduling; a lower number runs first."""
    return _non_preemptive("PR noPREMP", processes, attrgetter("priority"))


def priority_with_preemption(processes: Iterable[Process]) -> Schedule:
    """Preemptive priority scheduling, re-deciding every time unit."""
    jobs = _fresh(processes)
    slices: list[tuple[int, int]] = []
    time = done = total_wait = 0

    while done < len(jobs):
        ready = [job for job in jobs if not job.completed and job.arrival_time <= time]
        if not ready:
            time = _next_arrival(jobs, time)
            continue
        selected = min(ready, key=attrgetter("priority"))
        slices.append((time, selected.pid))
        selected.remaining_time -= 1
        time += 1
        if selected.remaining_time <= 0:
            selected.completed = True
            done += 1
            total_wait += time - selected.arrival_time - selected.burst_time

    return Schedule("PR withPREMP", tuple(slices), total_wait, len(jobs))