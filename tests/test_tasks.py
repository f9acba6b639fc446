import io

import pytest

from dsakit.tasks import main, run_task, run_tasks


def test_run_task_writes_numbered_lines():
    out = io.StringIO()
    run_task("A", 3, 0, out)
    assert out.getvalue() == "Task A0\nTask A1\nTask A2\n"


def test_run_task_zero_count_writes_nothing():
    out = io.StringIO()
    run_task("A", 0, 0, out)
    assert out.getvalue() == ""


def test_run_task_rejects_negative_delay():
    with pytest.raises(ValueError):
        run_task("A", 1, -1, io.StringIO())


def test_run_tasks_writes_every_line_once():
    out = io.StringIO()
    run_tasks(["A", "B"], 5, 0, out)
    lines = out.getvalue().splitlines()
    expected = {f"Task {name}{i}" for name in "AB" for i in range(5)}
    assert len(lines) == len(expected)
    assert set(lines) == expected


def test_run_tasks_keeps_order_within_a_task():
    out = io.StringIO()
    run_tasks(["A", "B", "C"], 4, 0, out)
    lines = out.getvalue().splitlines()
    for name in "ABC":
        own = [line for line in lines if line.startswith(f"Task {name}")]
        assert own == [f"Task {name}{i}" for i in range(4)]


def test_run_tasks_rejects_negative_count():
    with pytest.raises(ValueError):
        run_tasks(["A"], -1, 0, io.StringIO())


def test_main_prints_default_tasks(capsys):
    assert main(["--count", "2", "--delay", "0"]) == 0
    lines = capsys.readouterr().out.splitlines()
    assert sorted(lines) == ["Task A0", "Task A1", "Task B0", "Task B1"]


def test_main_rejects_negative_count():
    with pytest.raises(SystemExit):
        main(["--count", "-1", "--delay", "0"])