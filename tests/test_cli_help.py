import subprocess
import sys
from pathlib import Path

import bgrun.cli as cli
from bgrun.errors import DetachError

REPO_ROOT = Path(__file__).resolve().parents[1]


def _run_script(*args):
    return subprocess.run(
        [sys.executable, "scripts/run_bgrun.py", *args],
        cwd=str(REPO_ROOT),
        stdout=subprocess.PIPE,
        stderr=subprocess.PIPE,
        text=True,
    )


def test_cli_help_runs_successfully():
    result = _run_script("--help")
    assert result.returncode == 0, result.stderr
    assert "Execute a command in the background" in result.stdout


def test_cli_without_command_prints_usage_and_fails():
    result = _run_script()
    assert result.returncode == 1
    assert result.stdout == ""
    assert "Usage:" in result.stderr
    assert "<command> [args...]" in result.stderr
    assert "sleep 10" in result.stderr
    assert "wget https://example.com/file.zip" in result.stderr
    assert "make -j4" in result.stderr


def test_cli_version():
    result = _run_script("--version")
    assert result.returncode == 0
    assert "0.1.0" in result.stdout


def test_main_without_command_does_not_launch(monkeypatch, capsys):
    def no_launch(*args, **kwargs):
        raise AssertionError("launched")

    monkeypatch.setattr(cli, "launch", no_launch)
    assert cli.main([]) == 1
    assert "Usage:" in capsys.readouterr().err


def test_main_passes_command_tokens_through(monkeypatch):
    seen = {}

    def fake_launch(args, config, *, detach, verbose):
        seen.update(args=args, use_color=config.use_color, detach=detach, verbose=verbose)
        return 0

    monkeypatch.setattr(cli, "launch", fake_launch)
    assert cli.main(["--no-color", "ls", "-la", "--color=auto"]) == 0
    assert seen == {"args": ["ls", "-la", "--color=auto"], "use_color": False, "detach": True, "verbose": False}


def test_main_reports_detach_failure(monkeypatch, capsys):
    def failing_launch(*args, **kwargs):
        raise DetachError("Resource temporarily unavailable")

    monkeypatch.setattr(cli, "launch", failing_launch)
    assert cli.main(["sleep", "1"]) == 1
    assert "Error: Failed to fork process" in capsys.readouterr().err
