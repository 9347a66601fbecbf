"""Tests for the command-line entry point."""
from __future__ import annotations

import io

import pytest

from fitness_app import main as entry


@pytest.fixture(autouse=True)
def _fresh_settings(monkeypatch: pytest.MonkeyPatch):
    monkeypatch.delenv("FITNESS_APP_NAME", raising=False)
    entry.get_settings.cache_clear()
    yield
    entry.get_settings.cache_clear()


def test_parse_args_identity_flags():
    args = entry.parse_args(["--name", "Alex", "--age", "31", "--weight", "72.5", "--log-level", "info"])

    assert args.name == "Alex"
    assert args.age == 31
    assert args.weight == 72.5
    assert args.log_level == "INFO"
    assert args.verbose is False


def test_parse_args_rejects_bad_age():
    with pytest.raises(SystemExit):
        entry.parse_args(["--age", "old"])


def test_main_runs_full_session():
    stdin = io.StringIO("1\n1\nRun\n30\n300\n140\n3\ncardio\n5\n")
    stdout = io.StringIO()

    code = entry.main(["--name", "Alex", "--age", "31", "--weight", "72.5"], stdin=stdin, stdout=stdout)

    assert code == 0
    output = stdout.getvalue()
    assert "Enter your name: " not in output
    assert "Cardio Routine added successfully." in output
    assert "Filtered Routines:" in output
    assert "Avg Heart Rate: 140 bpm" in output
    assert output.rstrip().endswith("Goodbye!")


def test_main_prompts_when_flags_missing():
    stdin = io.StringIO("Alex\n31\n72.5\n5\n")
    stdout = io.StringIO()

    assert entry.main([], stdin=stdin, stdout=stdout) == 0
    assert "Enter your name: " in stdout.getvalue()


def test_main_uses_configured_app_name(monkeypatch: pytest.MonkeyPatch):
    monkeypatch.setenv("FITNESS_APP_NAME", "GymBook")
    stdout = io.StringIO()

    entry.main(["--name", "A", "--age", "1", "--weight", "1"], stdin=io.StringIO("5\n"), stdout=stdout)

    assert "Welcome to GymBook!" in stdout.getvalue()


def test_main_returns_error_when_input_closes_early():
    stdout = io.StringIO()

    assert entry.main([], stdin=io.StringIO("Alex\n"), stdout=stdout) == 1


def test_keyboard_interrupt_exit_code(monkeypatch: pytest.MonkeyPatch):
    def interrupted(self, session):
        raise KeyboardInterrupt

    monkeypatch.setattr(entry.FitnessShell, "run", interrupted)

    code = entry.main(["--name", "A", "--age", "1", "--weight", "1"], stdin=io.StringIO(""), stdout=io.StringIO())
    assert code == 130


def test_main_reports_invalid_configuration(monkeypatch: pytest.MonkeyPatch):
    monkeypatch.setenv("FITNESS_LOG_LEVEL", "chatty")
    stdout = io.StringIO()

    code = entry.main(["--name", "A", "--age", "1", "--weight", "1"], stdin=io.StringIO("5\n"), stdout=stdout)

    assert code == 2
    assert stdout.getvalue() == ""
