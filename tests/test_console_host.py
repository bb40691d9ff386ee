from __future__ import annotations

import io

from rich.console import Console

from adapters.host_io.console_host import ConsoleHost
from interpreter import InterpreterSession, run_session


def _console_with_input(monkeypatch, lines):
    console = Console(file=io.StringIO(), highlight=False, width=80)
    pending = list(lines)

    def _fake_input(prompt=""):
        if not pending:
            raise EOFError
        return pending.pop(0)

    monkeypatch.setattr(console, "input", _fake_input)
    return console


def test_console_host_runs_until_eof(monkeypatch):
    console = _console_with_input(monkeypatch, ["x = 4;", "x / 0", "x * 2"])
    session = InterpreterSession()
    host = ConsoleHost(console=console, variables=session.variables)

    count = run_session(host, session)

    output = console.file.getvalue()
    assert count == 3
    assert "x = 4" in output
    assert "Błąd: dzielenie przez zero." in output
    assert "8" in output


def test_console_host_builtin_commands(monkeypatch):
    console = _console_with_input(monkeypatch, ["answer = 42;", ":vars", ":quit", "answer"])
    session = InterpreterSession()
    host = ConsoleHost(console=console, variables=session.variables)

    count = run_session(host, session)

    output = console.file.getvalue()
    assert count == 1
    assert "Zmienne [1]" in output
    assert "answer" in output
    assert "42" in output


def test_console_host_shows_steps(monkeypatch):
    console = _console_with_input(monkeypatch, ["2 * 3 + 1"])
    host = ConsoleHost(console=console, show_steps=True)

    run_session(host)

    output = console.file.getvalue()
    assert "2 * 3 = 6" in output
    assert "6 + 1 = 7" in output
