import pytest

from cpusched.cli import InputError, Workload, main, parse_input, run
from cpusched.process import Process


SAMPLE = ["SJF\n", "3\n", "1 0 3 2\n", "2 0 1 3\n", "3 0 2 1\n"]


def test_parse_input_reads_processes():
    workload = parse_input(SAMPLE)
    assert workload.algorithm == "SJF"
    assert [p.pid for p in workload.processes] == [1, 2, 3]
    first = workload.processes[0]
    assert (first.arrival_time, first.burst_time, first.priority) == (0, 3, 2)
    assert first.remaining_time == first.burst_time


def test_parse_input_stops_at_declared_count():
    workload = parse_input(["SJF\n", "1\n", "1 0 3 2\n", "2 0 1 3\n"])
    assert [p.pid for p in workload.processes] == [1]


def test_parse_input_skips_bad_lines(capsys):
    workload = parse_input(["SJF\n", "1\n", "oops\n", "5 0 2 1\n"])
    assert [p.pid for p in workload.processes] == [5]
    assert "oops" in capsys.readouterr().err


def test_parse_input_incomplete():
    with pytest.raises(InputError):
        parse_input(["SJF\n"])


def test_parse_input_bad_count():
    with pytest.raises(InputError):
        parse_input(["SJF\n", "many\n"])


def test_parse_input_too_many():
    with pytest.raises(InputError):
        parse_input(["SJF\n", "101\n"])


def test_parse_input_too_few_processes():
    with pytest.raises(InputError):
        parse_input(["SJF\n", "2\n", "1 0 3 2\n"])


def test_run_dispatches_round_robin():
    workload = parse_input(["RR 2\n"] + SAMPLE[1:])
    schedule = run(workload)
    assert schedule.header == "RR 2"


@pytest.mark.parametrize("name", ["SJF", "PR noPREMP", "PR withPREMP"])
def test_run_dispatches_by_name(name):
    workload = parse_input([name + "\n"] + SAMPLE[1:])
    assert run(workload).header == name


def test_run_unknown_algorithm():
    workload = Workload("FIFO", [Process(1, 0, 1, 1)])
    assert run(workload) is None


def test_run_round_robin_without_quantum():
    with pytest.raises(InputError):
        run(Workload("RR", [Process(1, 0, 1, 1)]))


def test_main_writes_output(tmp_path, monkeypatch, capsys):
    source = tmp_path / "input.txt"
    source.write_text("".join(SAMPLE))
    monkeypatch.chdir(tmp_path)
    assert main([str(source)]) == 0
    lines = (tmp_path / "output.txt").read_text().splitlines()
    assert lines[0] == "SJF"
    assert lines[-1].startswith("AVG Waiting Time: ")
    assert "Total Processes: 3" in capsys.readouterr().out


def test_main_unknown_algorithm_writes_empty_file(tmp_path, monkeypatch):
    source = tmp_path / "input.txt"
    source.write_text("FIFO\n1\n1 0 1 1\n")
    monkeypatch.chdir(tmp_path)
    assert main([str(source)]) == 0
    assert (tmp_path / "output.txt").read_text() == ""


def test_main_usage(capsys):
    assert main([]) == 1
    assert "Usage" in capsys.readouterr().out


def test_main_missing_file(tmp_path, capsys):
    assert main([str(tmp_path / "absent.txt")]) == 1
    assert "Error opening file" in capsys.readouterr().err


def test_main_bad_input(tmp_path, monkeypatch):
    source = tmp_path / "input.txt"
    source.write_text("SJF\n")
    monkeypatch.chdir(tmp_path)
    assert main([str(source)]) == 1
    assert not (tmp_path / "output.txt").exists()