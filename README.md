# cpusched

A small simulator for textbook CPU scheduling algorithms. It reads a workload
file, runs the requested algorithm and writes the resulting schedule to
`output.txt` in the current directory.

Supported algorithms:

- `RR <quantum>`: round robin with the given time quantum
- `SJF`: shortest job first (non-preemptive)
- `PR noPREMP`: priority scheduling without preemption
- `PR withPREMP`: priority scheduling with preemption, one time unit at a time

Lower priority numbers mean higher priority. When two ready processes tie,
the one listed first in the workload is chosen.

## Installation

```
pip install .
```

## Input format

The first line names the algorithm. The second line gives the number of
processes, from 0 up to 100. Each of the following lines describes one
process as four integers: `pid arrival_time burst_time priority`.

```
RR 2
3
1 0 5 2
2 1 3 1
3 2 1 3
```

Lines that cannot be read as a process are reported on standard error and
skipped. Lines after the stated number of processes are ignored. The input is
rejected if the count line is missing or unreadable, if the count is negative
or above 100, or if fewer processes than stated can be read.

## Usage

```
cpusched workload.txt
```

The command prints the total number of processes and writes `output.txt`.
That file starts with the algorithm header, then one `time pid` line for each
dispatch, then the average waiting time. For the example above:

```
RR 2
0 1
2 2
4 3
5 1
7 2
8 1
AVG Waiting Time: 3.33
```

If the first line names none of the supported algorithms, `output.txt` is
written empty. Errors are reported on standard error and the command exits
with status 1.

Round robin starts with only the processes that arrive at time 0 in its ready
queue; later arrivals join while a process runs. If the queue empties before
every process has finished (for example, when nothing arrives at time 0), the
workload is rejected with an error. The time quantum must be positive. The
other algorithms skip ahead over idle time to the next arrival.

## Using it as a library

```python
from cpusched.process import Process
from cpusched.algorithms import shortest_job_first

processes = [
    Process(pid=1, arrival_time=0, burst_time=6, priority=2),
    Process(pid=2, arrival_time=1, burst_time=2, priority=1),
]
schedule = shortest_job_first(processes)
print(schedule.slices)                   # ((0, 1), (6, 2))
print(schedule.average_waiting_time())   # 2.5
print(schedule.render())
```

The scheduling functions (`round_robin`, `shortest_job_first`,
`priority_no_preemptive`, `priority_with_preemption`) work on copies and
leave the given `Process` objects unchanged. Each returns a `Schedule` with
`header`, `slices`, `total_waiting_time` and `process_count`.

`cpusched.cli.parse_input` turns the lines of a workload file into a
`Workload`, raising `InputError` on malformed input, and `cpusched.cli.run`
runs that workload and returns its `Schedule`, or `None` for an unknown
algorithm.

## Running the tests

```
pip install .[test]
pytest
```