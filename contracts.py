"""
contracts.py - Jedyne źródło prawdy dla typów danych w Rachmistrzu.
Tokeny, węzły AST i wyniki ewaluacji. Wszystkie moduły importują stąd.
"""
from __future__ import annotations

from enum import Enum
from typing import Any, Literal, Optional, Union

from pydantic import BaseModel, ConfigDict, Field

CONTRACTS_VERSION = "1.0.0"

# Środowisko zmiennych: nazwa → ostatnio przypisana wartość
VariableEnvironment = dict[str, float]


# ─────────────────────────── Lexer ───────────────────────────────────────

class TokenKind(str, Enum):
    IDENTIFIER = "identifier"
    NUMBER = "number"
    PLUS = "plus"
    MINUS = "minus"
    STAR = "star"
    SLASH = "slash"
    LPAREN = "lparen"
    RPAREN = "rparen"
    EQUALS = "equals"
    SEMICOLON = "semicolon"
    END_OF_INPUT = "end_of_input"


class Token(BaseModel):
    model_config = ConfigDict(frozen=True)

    kind: TokenKind
    value: Union[str, float, None] = None  # tekst identyfikatora/operatora, liczba, None dla EOF
    position: int = 0                      # offset pierwszego znaku w linii


# ─────────────────────────── AST ─────────────────────────────────────────

class BinaryOperator(str, Enum):
    ADD = "+"
    SUB = "-"
    MUL = "*"
    DIV = "/"

    @classmethod
    def from_token_kind(cls, kind: TokenKind) -> "BinaryOperator":
        return _OPERATOR_BY_KIND[kind]


_OPERATOR_BY_KIND = {
    TokenKind.PLUS: BinaryOperator.ADD,
    TokenKind.MINUS: BinaryOperator.SUB,
    TokenKind.STAR: BinaryOperator.MUL,
    TokenKind.SLASH: BinaryOperator.DIV,
}


class NumberLiteral(BaseModel):
    node_type: Literal["number"] = "number"
    value: float


class VariableRef(BaseModel):
    node_type: Literal["variable"] = "variable"
    name: str


class BinaryOp(BaseModel):
    node_type: Literal["binop"] = "binop"
    op: BinaryOperator
    left: "ExprNode"
    right: "ExprNode"


class Assignment(BaseModel):
    node_type: Literal["assignment"] = "assignment"
    name: str
    value: "ExprNode"


ExprNode = Union[NumberLiteral, VariableRef, BinaryOp]
ASTNode = Union[NumberLiteral, VariableRef, BinaryOp, Assignment]
BinaryOp.model_rebuild()
Assignment.model_rebuild()


# ─────────────────────────── Błędy ───────────────────────────────────────

class ErrorStage(str, Enum):
    LEX = "lex"
    PARSE = "parse"
    EVAL = "eval"


class ErrorKind(str, Enum):
    UNRECOGNIZED_CHARACTER = "unrecognized_character"
    MALFORMED_NUMBER = "malformed_number"
    UNEXPECTED_TOKEN = "unexpected_token"
    EXPECTED_FACTOR = "expected_factor"
    TRAILING_TOKENS = "trailing_tokens"
    NESTING_TOO_DEEP = "nesting_too_deep"
    UNDEFINED_VARIABLE = "undefined_variable"
    DIVISION_BY_ZERO = "division_by_zero"


class InterpreterErrorInfo(BaseModel):
    """Serializowalna postać błędu interpretera - wystarcza do odtworzenia komunikatu."""
    stage: ErrorStage
    kind: ErrorKind
    message: str
    details: dict[str, Any] = Field(default_factory=dict)
    position: Optional[int] = None


# ─────────────────────────── Evaluator ───────────────────────────────────

class EvalResult(BaseModel):
    value: float
    steps: list[str] = Field(default_factory=list)  # czytelne kroki, np. "2 * 3 = 6"


class EvalOutcome(BaseModel):
    text: str
    value: Optional[float] = None
    error: Optional[InterpreterErrorInfo] = None
    assigned: Optional[str] = None   # nazwa zmiennej, jeśli linia była przypisaniem
    steps: list[str] = Field(default_factory=list)

    @property
    def ok(self) -> bool:
        return self.error is None
