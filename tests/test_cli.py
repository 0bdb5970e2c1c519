from __future__ import annotations

import json
from pathlib import Path

from typer.testing import CliRunner

from advent_solvers.cli import app
from advent_solvers.version import __version__

runner = CliRunner()


def test_version():
    result = runner.invoke(app, ["--version"])
    assert result.exit_code == 0
    assert __version__ in result.stdout


def test_list_puzzles():
    result = runner.invoke(app, ["list"])
    assert result.exit_code == 0
    assert "1: Sonar Sweep" in result.stdout
    assert "4: Giant Squid" in result.stdout


def test_run_reads_stdin(sonar_example):
    result = runner.invoke(app, ["run", "--day", "1"], input=sonar_example)
    assert result.exit_code == 0
    assert "Part 1: 7" in result.stdout
    assert "Part 2: 5" in result.stdout


def test_run_reads_input_file(tmp_path: Path, bingo_example):
    path = tmp_path / "day4.txt"
    path.write_text(bingo_example, encoding="utf-8")
    result = runner.invoke(app, ["run", "--day", "4", "--input", str(path)])
    assert result.exit_code == 0
    assert "Part 1: 4512" in result.stdout
    assert "Part 2: 1924" in result.stdout


def test_run_dive_block(dive_example):
    result = runner.invoke(app, ["run", "--day", "2"], input=dive_example)
    assert result.exit_code == 0
    assert "Horizontal: 15, Depth: 60, Answer: 900" in result.stdout


def test_run_json_format(diagnostic_example):
    result = runner.invoke(app, ["run", "--day", "3", "--format", "json"], input=diagnostic_example)
    assert result.exit_code == 0
    data = json.loads(result.stdout)
    assert [p["answer"] for p in data["parts"]] == [198, 230]


def test_run_writes_report(tmp_path: Path, sonar_example):
    report = tmp_path / "out" / "report.json"
    args = ["run", "--day", "1", "--out-report", str(report)]
    result = runner.invoke(app, args, input=sonar_example)
    assert result.exit_code == 0
    data = json.loads(report.read_text(encoding="utf-8"))
    assert data["run_meta"]["app_version"] == __version__

    result = runner.invoke(app, args, input=sonar_example)
    assert result.exit_code == 1

    result = runner.invoke(app, args + ["--force"], input=sonar_example)
    assert result.exit_code == 0


def test_parse_failure_exits_non_zero():
    result = runner.invoke(app, ["run", "--day", "2"], input="forward 1\nsideways 2\n")
    assert result.exit_code == 2


def test_unknown_day_exits_non_zero():
    result = runner.invoke(app, ["run", "--day", "9"], input="")
    assert result.exit_code == 2


def test_input_fault_exits_non_zero():
    result = runner.invoke(app, ["run", "--day", "1"], input="")
    assert result.exit_code == 3


def test_missing_input_file_exits_non_zero(tmp_path: Path):
    result = runner.invoke(app, ["run", "--day", "1", "--input", str(tmp_path / "missing.txt")])
    assert result.exit_code == 1


def test_unsupported_format_exits_non_zero(sonar_example):
    result = runner.invoke(app, ["run", "--day", "1", "--format", "xml"], input=sonar_example)
    assert result.exit_code == 2


def test_no_command_shows_help():
    result = runner.invoke(app, [])
    assert result.exit_code == 0
    assert "run" in result.stdout


def test_config_force_false_string_refuses_overwrite(tmp_path: Path, sonar_example):
    report = tmp_path / "report.json"
    report.write_text("{}", encoding="utf-8")
    cfg = tmp_path / "conf.yaml"
    cfg.write_text("force: 'false'\nout_report: report.json\n", encoding="utf-8")
    result = runner.invoke(app, ["run", "--day", "1", "--config", str(cfg)], input=sonar_example)
    assert result.exit_code == 1
    assert report.read_text(encoding="utf-8") == "{}"


def test_missing_config_exits_non_zero(tmp_path: Path, sonar_example):
    args = ["run", "--day", "1", "--config", str(tmp_path / "missing.yaml")]
    result = runner.invoke(app, args, input=sonar_example)
    assert result.exit_code == 2


def test_malformed_yaml_config_exits_non_zero(tmp_path: Path, sonar_example):
    cfg = tmp_path / "conf.yaml"
    cfg.write_text("log_level: [unclosed\n", encoding="utf-8")
    result = runner.invoke(app, ["run", "--day", "1", "--config", str(cfg)], input=sonar_example)
    assert result.exit_code == 2


def test_report_write_failure_exits_non_zero(tmp_path: Path, sonar_example):
    # a directory at the report path cannot be written even with --force
    target = tmp_path / "report.json"
    target.mkdir()
    args = ["run", "--day", "1", "--out-report", str(target), "--force"]
    result = runner.invoke(app, args, input=sonar_example)
    assert result.exit_code == 1
