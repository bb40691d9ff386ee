"""
errors.py - Taksonomia błędów interpretera.

Wyjątki rzucane są wewnątrz etapów (lexer, parser, evaluator) i łapane
wyłącznie w interpreter.evaluate_line, który zamienia je na
InterpreterErrorInfo w zwracanym EvalOutcome.
"""
from __future__ import annotations

from typing import Any, Optional

from contracts import ErrorKind, ErrorStage, InterpreterErrorInfo, Token, TokenKind


class InterpreterError(Exception):
    stage: ErrorStage
    kind: ErrorKind

    def __init__(self, message: str, position: Optional[int] = None) -> None:
        super().__init__(message)
        self.position = position

    @property
    def details(self) -> dict[str, Any]:
        return {}

    def to_info(self) -> InterpreterErrorInfo:
        return InterpreterErrorInfo(
            stage=self.stage,
            kind=self.kind,
            message=str(self),
            details=self.details,
            position=self.position,
        )


# ─────────────────────────── Lexer ───────────────────────────────────────

class LexError(InterpreterError):
    stage = ErrorStage.LEX


class UnrecognizedCharacterError(LexError):
    kind = ErrorKind.UNRECOGNIZED_CHARACTER

    def __init__(self, char: str, position: int) -> None:
        super().__init__(f"Unrecognized character {char!r} at {position}", position)
        self.char = char

    @property
    def details(self) -> dict[str, Any]:
        return {"char": self.char}


class MalformedNumberError(LexError):
    kind = ErrorKind.MALFORMED_NUMBER

    def __init__(self, text: str, position: int) -> None:
        super().__init__(f"Malformed number {text!r} at {position}", position)
        self.text = text

    @property
    def details(self) -> dict[str, Any]:
        return {"text": self.text}


# ─────────────────────────── Parser ──────────────────────────────────────

class ParseError(InterpreterError):
    stage = ErrorStage.PARSE

    def __init__(self, message: str, found: Token) -> None:
        super().__init__(message, found.position)
        self.found = found

    @property
    def details(self) -> dict[str, Any]:
        return {"found": self.found.kind.value, "found_value": self.found.value}


class UnexpectedTokenError(ParseError):
    kind = ErrorKind.UNEXPECTED_TOKEN

    def __init__(self, expected: TokenKind, found: Token) -> None:
        super().__init__(
            f"Expected {expected.value}, found {found.kind.value} at {found.position}",
            found,
        )
        self.expected = expected

    @property
    def details(self) -> dict[str, Any]:
        return {"expected": self.expected.value, **super().details}


class ExpectedFactorError(ParseError):
    kind = ErrorKind.EXPECTED_FACTOR

    def __init__(self, found: Token) -> None:
        super().__init__(
            f"Expected a number, variable or '(' but found {found.kind.value} at {found.position}",
            found,
        )


class TrailingTokensError(ParseError):
    kind = ErrorKind.TRAILING_TOKENS

    def __init__(self, found: Token) -> None:
        super().__init__(
            f"Unexpected {found.kind.value} after a complete statement at {found.position}",
            found,
        )


class NestingTooDeepError(ParseError):
    kind = ErrorKind.NESTING_TOO_DEEP

    def __init__(self, limit: int, found: Token) -> None:
        super().__init__(
            f"Expression nested deeper than {limit} levels at {found.position}",
            found,
        )
        self.limit = limit

    @property
    def details(self) -> dict[str, Any]:
        return {"limit": self.limit, **super().details}


# ─────────────────────────── Evaluator ───────────────────────────────────

class EvalError(InterpreterError):
    stage = ErrorStage.EVAL


class UndefinedVariableError(EvalError):
    kind = ErrorKind.UNDEFINED_VARIABLE

    def __init__(self, name: str) -> None:
        super().__init__(f"Undefined variable {name!r}")
        self.name = name

    @property
    def details(self) -> dict[str, Any]:
        return {"name": self.name}


class DivisionByZeroError(EvalError):
    kind = ErrorKind.DIVISION_BY_ZERO

    def __init__(self) -> None:
        super().__init__("Division by zero")
