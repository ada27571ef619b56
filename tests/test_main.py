import logging

import pytest

from meterview.main import build_parser, main

from conftest import make_line, meter_values, sampled


@pytest.fixture
def trace_dir(tmp_path):
    root = tmp_path / "traces"
    (root / "cp1").mkdir(parents=True)
    lines = [
        "2024-01-01 12:00:00 header",
        make_line(meter_values(
            sampled("230", "Voltage", "L1"),
            sampled("3680", "Power.Active.Import", "L1"),
        ), time="12:00:00"),
        make_line({"status": "Available"}, time="12:00:30"),
        make_line(meter_values(
            sampled("231", "Voltage", "L1"),
            sampled("3680", "Power.Active.Import", "L1"),
        ), time="13:00:00"),
    ]
    (root / "cp1" / "session.trace").write_text("\n".join(lines) + "\n")
    return root


@pytest.fixture
def settings_file(tmp_path):
    # Keeps runs independent of the user's stored settings
    path = tmp_path / "settings.ini"
    path.write_text("")
    return path


def run_cli(*args):
    return main(list(args))


def test_requires_directory():
    with pytest.raises(SystemExit) as exc:
        build_parser().parse_args([])
    assert exc.value.code == 2


def test_headless_run_with_exports(trace_dir, settings_file, tmp_path, capsys):
    csv_path = tmp_path / "out.csv"
    code = run_cli(
        "-t", str(trace_dir), "--settings", str(settings_file),
        "--no-gui", "--summary", "--csv", str(csv_path),
    )
    assert code == 0
    rows = csv_path.read_text().splitlines()
    assert len(rows) == 3
    out = capsys.readouterr().out
    assert "Records: 2" in out
    assert "Energy: 3680.000 Wh" in out


def test_missing_directory_fails(tmp_path, settings_file):
    code = run_cli("-t", str(tmp_path / "nope"), "--settings", str(settings_file), "--no-gui")
    assert code == 1


def test_strict_flag_aborts_on_bad_timestamp(trace_dir, settings_file):
    bad = make_line(meter_values(sampled("1", "Voltage", "L1")), date="2024-99-99")
    (trace_dir / "bad.trace").write_text(bad + "\n")

    assert run_cli("-t", str(trace_dir), "--settings", str(settings_file), "--no-gui") == 0
    assert run_cli("-t", str(trace_dir), "--settings", str(settings_file),
                   "--no-gui", "--strict") == 1


def test_dry_run_logs_writes(trace_dir, settings_file, caplog):
    caplog.set_level(logging.INFO)
    code = run_cli("-t", str(trace_dir), "--settings", str(settings_file), "--dry-run")
    assert code == 0
    assert "voltage/L1=231.0" in caplog.text
