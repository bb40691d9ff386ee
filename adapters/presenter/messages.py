"""
messages.py - czyste funkcje: EvalOutcome / InterpreterErrorInfo → tekst dla użytkownika.

Komunikat zależy wyłącznie od rodzaju błędu (ErrorKind) i jego details,
nie od treści wyjątku - rdzeń i prezentacja są rozdzielone.
"""
from __future__ import annotations

import math

from contracts import ErrorKind, EvalOutcome, InterpreterErrorInfo

_TOKEN_NAMES: dict[str, str] = {
    "identifier": "nazwa zmiennej",
    "number": "liczba",
    "plus": "'+'",
    "minus": "'-'",
    "star": "'*'",
    "slash": "'/'",
    "lparen": "'('",
    "rparen": "')'",
    "equals": "'='",
    "semicolon": "';'",
    "end_of_input": "koniec wejścia",
}

_TEMPLATES: dict[ErrorKind, str] = {
    ErrorKind.UNRECOGNIZED_CHARACTER: "Błąd: nierozpoznany znak {char!r}.",
    ErrorKind.MALFORMED_NUMBER: "Błąd: liczba {text!r} ma więcej niż jedną kropkę.",
    ErrorKind.UNEXPECTED_TOKEN: "Błąd składni: oczekiwano {expected}, znaleziono {found}.",
    ErrorKind.EXPECTED_FACTOR: "Błąd składni: brak operandu (znaleziono {found}).",
    ErrorKind.TRAILING_TOKENS: "Błąd składni: nadmiarowe tokeny po instrukcji (od {found}).",
    ErrorKind.NESTING_TOO_DEEP: "Błąd składni: wyrażenie zagnieżdżone głębiej niż {limit} poziomów.",
    ErrorKind.UNDEFINED_VARIABLE: "Błąd: zmienna {name!r} nie jest zdefiniowana.",
    ErrorKind.DIVISION_BY_ZERO: "Błąd: dzielenie przez zero.",
}


def format_number(value: float) -> str:
    """14.0 → "14", 3.14 → "3.14", inf → "inf"."""
    if math.isfinite(value) and value.is_integer():
        return str(int(value))
    return repr(value)


def _token_name(kind: str) -> str:
    return _TOKEN_NAMES.get(kind, kind)


def render_error(info: InterpreterErrorInfo) -> str:
    details = dict(info.details)
    for key in ("expected", "found"):
        if key in details:
            details[key] = _token_name(details[key])
    return _TEMPLATES[info.kind].format(**details)


def render_outcome(outcome: EvalOutcome) -> str:
    if outcome.error is not None:
        return render_error(outcome.error)
    value = format_number(outcome.value)
    if outcome.assigned:
        return f"{outcome.assigned} = {value}"
    return value
