"""Integration tests for CLI functionality."""

import builtins
import json
import subprocess
import sys

import pytest

from scicalc_pkg.cli import main_entry, repl_loop, type_keys
from scicalc_pkg.session import Session


def test_cli_version():
    """Test --version flag."""
    result = subprocess.run(
        [sys.executable, "-m", "scicalc_pkg.cli", "--version"],
        capture_output=True,
        text=True,
        timeout=30,
    )
    assert result.returncode == 0
    assert result.stdout.strip() != ""


def test_cli_health_check():
    """Test --health-check command."""
    result = subprocess.run(
        [sys.executable, "-m", "scicalc_pkg", "--health-check"],
        capture_output=True,
        text=True,
        timeout=60,
    )
    assert result.returncode == 0
    assert "health check" in result.stdout.lower()


def test_cli_eval_human():
    """Test CLI evaluation with human output."""
    result = subprocess.run(
        [sys.executable, "-m", "scicalc_pkg.cli", "--eval", "2(3+1)"],
        capture_output=True,
        text=True,
        timeout=30,
    )
    assert result.returncode == 0
    assert result.stdout.strip() == "8.000000 x 10^0"


def test_cli_eval_json():
    """Test CLI evaluation with JSON output."""
    result = subprocess.run(
        [sys.executable, "-m", "scicalc_pkg.cli", "--eval", "(2+3", "--format", "json"],
        capture_output=True,
        text=True,
        timeout=30,
    )
    assert result.returncode == 1
    data = json.loads(result.stdout)
    assert data["ok"] is False
    assert data["display"] == "Error"
    assert data["error_code"] == "PARSE_ERROR"


@pytest.mark.parametrize("expression", ["9^9^9", "9^9^9^9"])
def test_cli_power_tower_returns_promptly(expression):
    """A tower of powers reports an error instead of computing for ever."""
    result = subprocess.run(
        [sys.executable, "-m", "scicalc_pkg.cli", "--eval", expression, "--format", "json"],
        capture_output=True,
        text=True,
        timeout=60,
    )
    assert result.returncode == 1
    data = json.loads(result.stdout)
    assert data["display"] == "Error"
    assert data["error_code"] == "NON_FINITE"


class TestMainEntry:
    """In-process tests of main_entry()."""

    def test_eval_sqrt_alias(self, capsys):
        assert main_entry(["-e", "sqrt16"]) == 0
        assert capsys.readouterr().out.strip() == "4.000000 x 10^0"

    def test_eval_pi_alias(self, capsys):
        assert main_entry(["-e", "2pi"]) == 0
        assert capsys.readouterr().out.strip() == "6.283185 x 10^0"

    def test_eval_stray_close_paren_is_guarded(self, capsys):
        assert main_entry(["-e", "2+3)", "--format", "json"]) == 0
        data = json.loads(capsys.readouterr().out)
        assert data["input"] == "2+3"
        assert data["value"] == 5.0

    def test_eval_empty(self, capsys):
        assert main_entry(["-e", ""]) == 1
        assert capsys.readouterr().out.strip() == "Error"


class TestTypeKeys:
    """Test keystroke translation."""

    def test_whitespace_skipped(self):
        session = Session()
        type_keys(session, "1 + 2")
        assert session.current_text() == "1+2"

    def test_aliases(self):
        session = Session()
        type_keys(session, "sqrt(pi)")
        assert session.current_text() == "√(π)"


class TestRepl:
    """Drive the REPL with scripted input."""

    def _run(self, monkeypatch, lines):
        feed = iter(lines)
        monkeypatch.setattr(builtins, "input", lambda prompt="": next(feed))
        repl_loop()

    def test_type_then_evaluate(self, monkeypatch, capsys):
        self._run(monkeypatch, ["2(3+1)", "=", "quit"])
        out = capsys.readouterr().out.splitlines()
        assert "2(3+1)" in out
        assert "8.000000 x 10^0" in out

    def test_trailing_equals_evaluates(self, monkeypatch, capsys):
        self._run(monkeypatch, ["√16=", "quit"])
        assert "4.000000 x 10^0" in capsys.readouterr().out

    def test_open_paren_hint(self, monkeypatch, capsys):
        self._run(monkeypatch, ["(2+3", "quit"])
        assert "(2+3    [1 open]" in capsys.readouterr().out

    def test_back_and_clear(self, monkeypatch, capsys):
        self._run(monkeypatch, ["123", "back", "clear", "7", "quit"])
        out = capsys.readouterr().out.splitlines()
        assert "12" in out
        assert "7" in out

    def test_help(self, monkeypatch, capsys):
        self._run(monkeypatch, ["help", "exit"])
        out = capsys.readouterr().out
        assert "Keypad" in out
        assert "K = 9 * 10^9" in out

    @pytest.mark.parametrize("error", [EOFError, KeyboardInterrupt])
    def test_interrupt_exits(self, monkeypatch, capsys, error):
        def raise_error(prompt=""):
            raise error

        monkeypatch.setattr(builtins, "input", raise_error)
        repl_loop()
        assert "Goodbye" in capsys.readouterr().out
