#!/usr/bin/env python3
"""
rachmistrz.py - CLI interpretera wyrażeń Rachmistrz.

Działa całkowicie lokalnie - nie wymaga uruchomionego serwera API.
Zmienne żyją tak długo jak jedno wywołanie (eval) lub jedna pętla (repl).

Konfiguracja: zmienne środowiskowe z prefiksem RACHMISTRZ_
lub plik .env (np. RACHMISTRZ_LOG_LEVEL=DEBUG).

Podkomendy:
    eval    - policz linie z --text, --file lub stdin (jedna sesja)
    repl    - interaktywna pętla (:vars - zmienne, :quit - koniec)
    tokens  - pokaż tokeny linii
    ast     - pokaż AST linii jako JSON

Użycie:
    python rachmistrz.py eval --text "x = 5;"
    python rachmistrz.py eval --file obliczenia.txt --steps
    printf 'x = 2;\\nx * 21\\n' | python rachmistrz.py eval
    python rachmistrz.py repl
    python rachmistrz.py tokens --text "(2 + 3) * 4;"
    python rachmistrz.py ast --text "y = x / 2;"
"""
from __future__ import annotations

import argparse
import logging
import sys
from typing import Any

from rich import box
from rich.console import Console
from rich.table import Table


# -- helpers ---------------------------------------------------------------

_CONSOLE: Console | None = None


def _console() -> Console:
    global _CONSOLE
    if _CONSOLE is None:
        _CONSOLE = Console(highlight=False)
    return _CONSOLE


def _safe_terminal_text(value: Any) -> str:
    s = str(value)
    encoding = sys.stdout.encoding or "utf-8"
    try:
        s.encode(encoding)
        return s
    except UnicodeEncodeError:
        return s.encode(encoding, errors="replace").decode(encoding, errors="replace")


def _print_tokens_table(tokens: list[Any]) -> None:
    table = Table(title=f"Tokens [{len(tokens)}]", box=box.ASCII, show_lines=False)
    table.add_column("#", justify="right", no_wrap=True)
    table.add_column("Kind", no_wrap=True, style="cyan")
    table.add_column("Value")
    table.add_column("Pos", justify="right", no_wrap=True)
    for idx, tok in enumerate(tokens):
        value = "-" if tok.value is None else tok.value
        table.add_row(
            str(idx),
            tok.kind.value,
            _safe_terminal_text(value),
            str(tok.position),
        )
    _console().print(table)


def _read_text(args: argparse.Namespace) -> str:
    if getattr(args, "file", None):
        try:
            with open(args.file, encoding="utf-8") as f:
                return f.read()
        except OSError as e:
            print(f"Błąd odczytu pliku: {e}", file=sys.stderr)
            sys.exit(1)
    text = getattr(args, "text", None) or sys.stdin.read()
    if not text.strip():
        print("Błąd: podaj tekst przez --text, --file lub stdin", file=sys.stderr)
        sys.exit(1)
    return text


def _setup_logging() -> None:
    from config import Settings

    logging.basicConfig(level=Settings().log_level.upper(), stream=sys.stderr)


# -- podkomendy ------------------------------------------------------------

def _eval(args: argparse.Namespace) -> None:
    from adapters.presenter.messages import render_outcome
    from interpreter import InterpreterSession

    text = _read_text(args)
    session = InterpreterSession()
    failed = 0

    for line in text.splitlines():
        if not line.strip():
            continue
        outcome = session.evaluate(line)
        if not outcome.ok:
            failed += 1
        elif args.steps:
            for step in outcome.steps:
                print(f"  {step}")
        # Wyniki i błędy na stdout, w kolejności linii wejścia
        print(render_outcome(outcome))

    if failed:
        sys.exit(1)


def _repl(args: argparse.Namespace) -> None:
    from adapters.host_io.console_host import ConsoleHost
    from interpreter import InterpreterSession, run_session

    session = InterpreterSession()
    host = ConsoleHost(
        console=_console(),
        variables=session.variables,
        show_steps=args.steps,
    )
    _console().print("Rachmistrz - :vars pokazuje zmienne, :quit kończy.")
    count = run_session(host, session)
    _console().print(f"Policzono {count} linii.")


def _tokens(args: argparse.Namespace) -> None:
    from adapters.lexer.scanning_lexer import ScanningLexer
    from adapters.presenter.messages import render_error
    from errors import LexError

    text = _read_text(args).strip("\n")
    try:
        tokens = ScanningLexer().tokenize(text)
    except LexError as e:
        print(render_error(e.to_info()), file=sys.stderr)
        sys.exit(1)
    _print_tokens_table(tokens)


def _ast(args: argparse.Namespace) -> None:
    from adapters.lexer.scanning_lexer import ScanningLexer
    from adapters.parser.recursive_descent_parser import RecursiveDescentParser
    from adapters.presenter.messages import render_error
    from errors import LexError, ParseError

    text = _read_text(args).strip("\n")
    try:
        ast = RecursiveDescentParser().parse(ScanningLexer().tokenize(text))
    except (LexError, ParseError) as e:
        print(render_error(e.to_info()), file=sys.stderr)
        sys.exit(1)
    print(ast.model_dump_json(indent=2))


# -- main ------------------------------------------------------------------

def main() -> None:
    parser = argparse.ArgumentParser(
        prog="rachmistrz",
        description="Rachmistrz - interpreter wyrażeń arytmetycznych ze zmiennymi",
    )
    sub = parser.add_subparsers(dest="command", required=True)

    # eval
    p = sub.add_parser("eval", help="Policz linie (jedna sesja zmiennych)")
    p.add_argument("--text", "-t", help="Linie do policzenia (lub stdin)")
    p.add_argument("--file", "-f", help="Ścieżka do pliku z liniami")
    p.add_argument("--steps", "-s", action="store_true",
                   help="Wyświetl kroki obliczeń")

    # repl
    p = sub.add_parser("repl", help="Interaktywna pętla read-eval-print")
    p.add_argument("--steps", "-s", action="store_true",
                   help="Wyświetl kroki obliczeń")

    # tokens
    p = sub.add_parser("tokens", help="Pokaż tokeny linii")
    p.add_argument("--text", "-t", help="Linia do analizy (lub stdin)")

    # ast
    p = sub.add_parser("ast", help="Pokaż AST linii jako JSON")
    p.add_argument("--text", "-t", help="Linia do analizy (lub stdin)")

    args = parser.parse_args()
    _setup_logging()

    cmds = {
        "eval":   _eval,
        "repl":   _repl,
        "tokens": _tokens,
        "ast":    _ast,
    }
    cmds[args.command](args)


if __name__ == "__main__":
    main()
