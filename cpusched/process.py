"""The process record shared by every scheduling algorithm."""

from __future__ import annotations

from dataclasses import dataclass


@dataclass
class Process:
    """A process in a scheduling workload.

    ``remaining_time`` defaults to the burst time. ``completed`` marks a
    process that a scheduler has finished.
    """

    pid: int
    arrival_time: int
    burst_time: int
    priority: int
    remaining_time: int | None = None
    completed: bool = False

    def __post_init__(self) -> None:
        if self.remaining_time is None:
            self.remaining_time = self.burst_time

    def reset(self) -> None:
        """Restore the process to its unscheduled state."""
        self.remaining_time = self.burst_time
        self.completed = False