from __future__ import annotations

import json
import subprocess
import sys
from pathlib import Path

import pytest

from telescopecalc.cli.main import main
from telescopecalc.messages import MESSAGES


def test_calc_prints_report(capsys) -> None:
    assert main(["calc", "-d", "200", "-f", "1000", "-e", "10"]) == 0
    out = capsys.readouterr().out
    lines = {line.split(":")[0]: line.split(":", 1)[1].strip() for line in out.splitlines()}
    assert lines["Magnification"] == "100.00 x"
    assert lines["Lower magnification limit"] == "33.33 x"
    assert lines["Upper magnification limit"] == "400.00 x"
    assert lines["Focal ratio"] == "5.00"
    assert lines["Exit pupil"] == "2.00 mm"
    assert lines["Dawes limit"] == "0.58 arcsec"


def test_calc_json_with_factors(capsys) -> None:
    argv = ["calc", "-d", "200", "-f", "1000", "-e", "10", "--barlow", "2", "--reducer", "0.5"]
    assert main(argv + ["--json"]) == 0
    data = json.loads(capsys.readouterr().out)
    assert data["inputs"]["barlow_factor"] == 2.0
    assert data["results"]["focal_ratio"] == 5.0
    assert data["results"]["magnification"] == 100.0


def test_calc_config_with_override(setup_yaml: Path, capsys) -> None:
    assert main(["calc", "-c", str(setup_yaml), "-e", "20", "--json"]) == 0
    data = json.loads(capsys.readouterr().out)
    assert data["inputs"]["eyepiece_focal_length"] == 20.0
    assert data["results"]["magnification"] == 100.0


def test_calc_non_numeric_input(capsys) -> None:
    assert main(["calc", "-d", "abc", "-f", "1000", "-e", "10"]) == 1
    captured = capsys.readouterr()
    assert captured.out == ""
    assert MESSAGES["en"]["input_type"] in captured.err


def test_calc_negative_value_spanish(capsys) -> None:
    assert main(["calc", "--diameter=-200", "-f", "1000", "-e", "10", "--lang", "es"]) == 1
    assert MESSAGES["es"]["range"] in capsys.readouterr().err


def test_calc_missing_eyepiece(capsys) -> None:
    assert main(["calc", "-d", "200", "-f", "1000"]) == 1
    assert MESSAGES["en"]["range"] in capsys.readouterr().err


def test_calc_missing_config(tmp_path: Path) -> None:
    assert main(["calc", "-c", str(tmp_path / "nope.yaml")]) == 2


def test_error_logged_as_json(tmp_path: Path) -> None:
    log_path = tmp_path / "logs" / "calc.jsonl"
    argv = ["calc", "-d", "200", "-f", "1000", "-e", "10", "--barlow=0", "--log-file", str(log_path)]
    assert main(argv) == 1
    records = [json.loads(line) for line in log_path.read_text().splitlines()]
    assert records[-1]["level"] == "WARNING"
    assert records[-1]["error"] == "OutOfRangeError"
    assert records[-1]["field"] == "barlow_factor"
    assert records[-1]["value"] == 0.0


def test_validate_ok(setup_yaml: Path, capsys) -> None:
    assert main(["validate", "-c", str(setup_yaml)]) == 0
    out = capsys.readouterr().out
    assert out.startswith("OK:")
    assert "barlow_factor" in out


def test_validate_out_of_range(tmp_path: Path, capsys) -> None:
    path = tmp_path / "bad.yaml"
    path.write_text("aperture_mm: 200\nfocal_length_mm: -5\neyepiece_focal_length_mm: 10\n")
    assert main(["validate", "-c", str(path)]) == 1
    assert MESSAGES["en"]["range"] in capsys.readouterr().err


def test_validate_unparseable_yaml(tmp_path: Path) -> None:
    path = tmp_path / "broken.yaml"
    path.write_text("aperture_mm: [200\n")
    assert main(["validate", "-c", str(path)]) == 2


def test_missing_command() -> None:
    with pytest.raises(SystemExit) as excinfo:
        main([])
    assert excinfo.value.code != 0


@pytest.mark.subprocess
def test_cli_help() -> None:
    out = subprocess.check_output([sys.executable, "-m", "telescopecalc.cli", "--help"]).decode()
    assert "calc" in out and "validate" in out


@pytest.mark.subprocess
def test_cli_calc_help() -> None:
    result = subprocess.run(
        [sys.executable, "-m", "telescopecalc.cli", "calc", "--help"],
        capture_output=True,
        text=True,
        check=False,
    )
    assert result.returncode == 0
    assert "--barlow" in result.stdout
    assert "--reducer" in result.stdout


def test_validate_missing_config(tmp_path: Path, capsys) -> None:
    assert main(["validate", "-c", str(tmp_path / "nope.yaml")]) == 2
    assert "Error loading config" in capsys.readouterr().err


@pytest.mark.parametrize("command", ["calc", "validate"])
def test_config_path_is_directory(tmp_path: Path, command: str) -> None:
    assert main([command, "-c", str(tmp_path)]) == 2


@pytest.mark.parametrize("command", ["calc", "validate"])
def test_config_not_utf8(tmp_path: Path, command: str) -> None:
    path = tmp_path / "binary.json"
    path.write_bytes(b"\xff\xfe\x00\x81binary")
    assert main([command, "-c", str(path)]) == 2


def test_load_failure_logged_at_error(tmp_path: Path) -> None:
    log_path = tmp_path / "calc.jsonl"
    assert main(["validate", "-c", str(tmp_path), "--log-file", str(log_path)]) == 2
    record = json.loads(log_path.read_text().splitlines()[-1])
    assert record["level"] == "ERROR"
    assert record["error"] == "IsADirectoryError"


def test_verbose_logs_parsed_input(tmp_path: Path) -> None:
    log_path = tmp_path / "debug.jsonl"
    argv = ["calc", "-d", "200", "-f", "1000", "-e", "10", "-v", "--log-file", str(log_path)]
    assert main(argv) == 0
    records = [json.loads(line) for line in log_path.read_text().splitlines()]
    parsed = [r for r in records if r["message"] == "Parsed calculator input"]
    assert parsed[0]["level"] == "DEBUG"
    assert parsed[0]["aperture_mm"] == "200"
    assert any(r["message"] == "Computed telescope report" for r in records)


def test_empty_text_is_input_type_error(capsys) -> None:
    assert main(["calc", "-d", "", "-f", "1000", "-e", "10"]) == 1
    assert MESSAGES["en"]["input_type"] in capsys.readouterr().err
