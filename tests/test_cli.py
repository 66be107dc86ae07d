import sys

import pytest

from runlog import cli


def run_cli(monkeypatch, *argv):
    monkeypatch.setattr(sys, "argv", ["runlog", *argv])
    cli.main()


def test_summary(monkeypatch, capsys, csv_table):
    run_cli(monkeypatch, "summary", str(csv_table))
    out = capsys.readouterr().out

    assert "Activities:    4" in out
    assert "Distance:      26.40 mi" in out


def test_monthly(monkeypatch, capsys, csv_table):
    run_cli(monkeypatch, "monthly", str(csv_table))
    out = capsys.readouterr().out
    assert out.index("Nov 2023") < out.index("Jan 2024")


def test_categories(monkeypatch, capsys, csv_table):
    run_cli(monkeypatch, "categories", str(csv_table))
    out = capsys.readouterr().out
    assert "Long Run" in out
    assert "%" in out


def test_recent(monkeypatch, capsys, csv_table):
    run_cli(monkeypatch, "recent", str(csv_table), "-n", "2")
    lines = capsys.readouterr().out.strip().splitlines()

    assert len(lines) == 3
    assert lines[1].startswith("Invalid Date")
    assert "Long Sunday" in lines[2]


def test_load_failure_exits(monkeypatch, capsys, tmp_path):
    with pytest.raises(SystemExit) as exc:
        run_cli(monkeypatch, "summary", str(tmp_path / "missing.csv"))

    assert exc.value.code == 1
    assert "Failed to load the data" in capsys.readouterr().out


def test_no_command_prints_help(monkeypatch):
    with pytest.raises(SystemExit):
        run_cli(monkeypatch)
