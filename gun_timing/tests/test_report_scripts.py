from __future__ import annotations

import logging
from pathlib import Path

import pytest

from gun_timing.report import read_report
from gun_timing.scripts import gun_time_report, plot_report


def _write_lif(directory: Path, name: str, time_of_day: str) -> None:
    line = ",".join([name, "b", "c", "d", "4", "5", "6", "7", "8", "9", time_of_day])
    (directory / name).write_text(line + "\n", encoding="utf-8")


def test_prompt_drives_the_report(tmp_path: Path, monkeypatch, capsys) -> None:
    _write_lif(tmp_path, "one.lif", "10:00:05")
    _write_lif(tmp_path, "two.lif", "09:00:00")
    monkeypatch.setattr("builtins.input", lambda prompt: f"  {tmp_path}  ")

    gun_time_report.main(["--log-level", "WARNING"])

    out = capsys.readouterr().out
    assert f"Sorted output saved to: {tmp_path / 'output.csv'}" in out
    assert (tmp_path / "output.csv").read_text(encoding="utf-8").splitlines()[1].endswith(",01:00:05")


def test_invalid_directory_exits_with_one(tmp_path: Path, capsys) -> None:
    with pytest.raises(SystemExit) as excinfo:
        gun_time_report.main(["--directory", str(tmp_path / "nope"), "--log-level", "WARNING"])

    assert excinfo.value.code == 1
    assert "Invalid directory path!" in capsys.readouterr().err


def test_no_files_exits_with_zero(tmp_path: Path, capsys) -> None:
    (tmp_path / "notes.txt").write_text("irrelevant", encoding="utf-8")

    with pytest.raises(SystemExit) as excinfo:
        gun_time_report.main(["--directory", str(tmp_path), "--log-level", "WARNING"])

    assert excinfo.value.code == 0
    assert "No .lif files found in the directory." in capsys.readouterr().out
    assert not (tmp_path / "output.csv").exists()


def test_plot_report_renders_png(tmp_path: Path) -> None:
    _write_lif(tmp_path, "one.lif", "10:00:05")
    _write_lif(tmp_path, "two.lif", "09:00:00")
    gun_time_report.main(["--directory", str(tmp_path), "--log-level", "WARNING"])

    labels, values = plot_report.elapsed_series(read_report(tmp_path / "output.csv"))
    assert labels == ["two.lif @ 09:00:00", "one.lif @ 10:00:05"]
    assert values == [0, 3605]

    plot_report.main(["--directory", str(tmp_path)])
    assert (tmp_path / "elapsed_output.png").exists()


def test_plot_report_missing_report(tmp_path: Path) -> None:
    with pytest.raises(SystemExit) as excinfo:
        plot_report.main(["--directory", str(tmp_path)])
    assert excinfo.value.code == 1


def test_log_level_comes_from_config(tmp_path: Path) -> None:
    _write_lif(tmp_path, "one.lif", "10:00:05")

    gun_time_report.main(["--directory", str(tmp_path), "--log-level", "ERROR"])

    assert logging.getLogger("gun_time_report").level == logging.ERROR
