"""Tests for the trialbench CLI."""

import asyncio
import json

import pytest

from trialbench.cli import EXIT_TIMEOUT, EXIT_USAGE, EXIT_WORKLOAD_FAILURE, main as cli_main
from trialbench.utils.errors import ResourceReleaseError


def test_run_prints_mean_and_min(capsys):
    rc = cli_main(["run", "--size", "4", "--trials", "2", "--reps", "3"])

    assert rc == 0
    output = capsys.readouterr().out
    assert "matmul 4x4" in output
    assert "Mean time:" in output
    assert "Min time:" in output
    assert "ms / rep" in output


def test_run_from_yaml_config_with_trial_table(tmp_path, capsys):
    path = tmp_path / "bench.yaml"
    path.write_text(
        "benchmark:\n  trials: 2\n  reps: 2\n  timeout_seconds: 30\nworkload:\n  size: 3\n",
        encoding="utf-8",
    )

    rc = cli_main(["run", "--config", str(path), "--show-trials"])

    assert rc == 0
    output = capsys.readouterr().out
    assert "2 trials x 2 reps" in output


def test_cli_flags_override_config_file(tmp_path, mocker):
    path = tmp_path / "bench.json"
    path.write_text('{"benchmark": {"trials": 9, "reps": 9}, "workload": {"size": 3}}', encoding="utf-8")
    run = mocker.patch("trialbench.cli.run_trials_sync", side_effect=RuntimeError("stop"))

    rc = cli_main(["run", "--config", str(path), "--trials", "2"])

    assert rc == EXIT_WORKLOAD_FAILURE
    args, kwargs = run.call_args
    assert args[:2] == (2, 9)
    assert kwargs["timeout_seconds"] == 60.0


def test_zero_trials_is_usage_error(capsys):
    rc = cli_main(["run", "--size", "2", "--trials", "0"])

    assert rc == EXIT_USAGE
    assert "trials must be a positive integer" in capsys.readouterr().err


def test_missing_config_is_usage_error(tmp_path, capsys):
    rc = cli_main(["run", "--config", str(tmp_path / "missing.yaml")])

    assert rc == EXIT_USAGE
    assert "not found" in capsys.readouterr().err


@pytest.mark.parametrize(
    "name,text",
    [
        ("broken.yaml", "benchmark: [trials: 2\n"),
        ("list.yaml", "- 1\n- 2\n"),
        ("broken.json", "{\"benchmark\": "),
    ],
)
def test_malformed_config_is_usage_error(tmp_path, capsys, name, text):
    path = tmp_path / name
    path.write_text(text, encoding="utf-8")

    rc = cli_main(["run", "--config", str(path)])

    assert rc == EXIT_USAGE
    assert str(path) in capsys.readouterr().err


@pytest.mark.parametrize("timeout", ["0", "-1.5"])
def test_non_positive_timeout_is_usage_error(mocker, capsys, timeout):
    run = mocker.patch("trialbench.cli.run_trials_sync")

    rc = cli_main(["run", "--size", "2", "--timeout", timeout])

    assert rc == EXIT_USAGE
    assert "timeout_seconds must be positive" in capsys.readouterr().err
    run.assert_not_called()


def test_save_config_writes_resolved_settings(tmp_path):
    path = tmp_path / "out" / "resolved.json"

    rc = cli_main(
        ["run", "--size", "3", "--trials", "1", "--reps", "2", "--save-config", str(path)]
    )

    assert rc == 0
    saved = json.loads(path.read_text(encoding="utf-8"))
    assert saved["benchmark"] == {"trials": 1, "reps": 2, "timeout_seconds": 60.0}
    assert saved["workload"] == {"name": "matmul", "size": 3, "seed": 0}


def test_save_config_bad_suffix_is_usage_error(tmp_path, capsys):
    rc = cli_main(["run", "--size", "2", "--save-config", str(tmp_path / "out.txt")])

    assert rc == EXIT_USAGE
    assert "Unsupported config file type" in capsys.readouterr().err


def test_invalid_size_is_usage_error(capsys):
    assert cli_main(["run", "--size", "0"]) == EXIT_USAGE


def test_timeout_exit_code(mocker, capsys):
    mocker.patch("trialbench.cli.run_trials_sync", side_effect=asyncio.TimeoutError())

    rc = cli_main(["run", "--size", "2", "--timeout", "0.5"])

    assert rc == EXIT_TIMEOUT
    assert "0.5s timeout" in capsys.readouterr().err


def test_workload_failure_exit_code(mocker, capsys):
    mocker.patch("trialbench.cli.run_trials_sync", side_effect=RuntimeError("boom"))

    rc = cli_main(["run", "--size", "2"])

    captured = capsys.readouterr()
    assert rc == EXIT_WORKLOAD_FAILURE
    assert "boom" in captured.err
    assert "Mean time" not in captured.out


def test_release_failure_exit_code(mocker, capsys):
    mocker.patch("trialbench.cli.run_trials_sync", side_effect=ResourceReleaseError("1 of 1"))

    assert cli_main(["run", "--size", "2"]) == EXIT_WORKLOAD_FAILURE
    assert "resource release failed" in capsys.readouterr().err


def test_workloads_subcommand_lists_matmul(capsys):
    assert cli_main(["workloads"]) == 0
    assert "matmul" in capsys.readouterr().out


def test_no_command_prints_help(capsys):
    assert cli_main([]) == 0
    assert "usage" in capsys.readouterr().out.lower()


def test_version_flag(capsys):
    with pytest.raises(SystemExit) as excinfo:
        cli_main(["--version"])
    assert excinfo.value.code == 0
    assert "trialbench" in capsys.readouterr().out
