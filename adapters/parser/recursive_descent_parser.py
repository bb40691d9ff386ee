"""
Adapter: RecursiveDescentParser
Implementuje port Parser - zejście rekurencyjne, cztery poziomy priorytetu.

Gramatyka (od najniższego priorytetu):
  statement  = assignment | expr [';']
  assignment = IDENTIFIER '=' expr ';'
  expr       = term (('+'|'-') term)*      lewostronnie łączne
  term       = factor (('*'|'/') factor)*  lewostronnie łączne
  factor     = NUMBER | IDENTIFIER | '(' expr ')'

Przypisanie wybierane jest przez podgląd jednego tokenu: IDENTIFIER, po którym
stoi '='. Każdy inny początek (także samotny identyfikator, np. "x;")
parsowany jest jako wyrażenie.
"""
from __future__ import annotations

from typing import Sequence

from contracts import (
    Assignment,
    ASTNode,
    BinaryOp,
    BinaryOperator,
    ExprNode,
    NumberLiteral,
    Token,
    TokenKind,
    VariableRef,
)
from errors import (
    ExpectedFactorError,
    NestingTooDeepError,
    TrailingTokensError,
    UnexpectedTokenError,
)

_ADDITIVE = (TokenKind.PLUS, TokenKind.MINUS)
_MULTIPLICATIVE = (TokenKind.STAR, TokenKind.SLASH)

# Limit głębokości drzewa i zagnieżdżenia nawiasów; parser i evaluator
# są rekurencyjne, więc głębsze wejście skończyłoby się RecursionError
DEFAULT_MAX_DEPTH = 100


class _Parser:
    def __init__(self, tokens: Sequence[Token], max_depth: int = DEFAULT_MAX_DEPTH) -> None:
        if not tokens or tokens[-1].kind != TokenKind.END_OF_INPUT:
            raise ValueError("Token stream must end with END_OF_INPUT")
        self._tokens = tokens
        self._pos = 0
        self._max_depth = max_depth
        self._paren_depth = 0

    @property
    def _current(self) -> Token:
        return self._tokens[self._pos]

    def _peek(self, offset: int = 1) -> Token:
        # Za końcem strumienia zawsze "widać" END_OF_INPUT
        idx = min(self._pos + offset, len(self._tokens) - 1)
        return self._tokens[idx]

    def _eat(self, kind: TokenKind) -> Token:
        tok = self._current
        if tok.kind != kind:
            raise UnexpectedTokenError(kind, tok)
        self._pos += 1
        return tok

    def _check_depth(self, depth: int, tok: Token) -> None:
        if depth > self._max_depth:
            raise NestingTooDeepError(self._max_depth, tok)

    def parse(self) -> ASTNode:
        node = self._statement()
        if self._current.kind != TokenKind.END_OF_INPUT:
            raise TrailingTokensError(self._current)
        return node

    def _statement(self) -> ASTNode:
        if self._current.kind == TokenKind.IDENTIFIER and self._peek().kind == TokenKind.EQUALS:
            return self._assignment()
        node, _ = self._expr()
        if self._current.kind == TokenKind.SEMICOLON:
            self._eat(TokenKind.SEMICOLON)
        return node

    def _assignment(self) -> Assignment:
        name = self._eat(TokenKind.IDENTIFIER).value
        self._eat(TokenKind.EQUALS)
        value, _ = self._expr()
        self._eat(TokenKind.SEMICOLON)
        return Assignment(name=name, value=value)

    # _expr/_term/_factor zwracają (węzeł, głębokość poddrzewa)

    def _expr(self) -> tuple[ExprNode, int]:
        node, depth = self._term()
        while self._current.kind in _ADDITIVE:
            op = self._eat(self._current.kind)
            right, right_depth = self._term()
            depth = max(depth, right_depth) + 1
            self._check_depth(depth, op)
            node = BinaryOp(op=BinaryOperator.from_token_kind(op.kind), left=node, right=right)
        return node, depth

    def _term(self) -> tuple[ExprNode, int]:
        node, depth = self._factor()
        while self._current.kind in _MULTIPLICATIVE:
            op = self._eat(self._current.kind)
            right, right_depth = self._factor()
            depth = max(depth, right_depth) + 1
            self._check_depth(depth, op)
            node = BinaryOp(op=BinaryOperator.from_token_kind(op.kind), left=node, right=right)
        return node, depth

    def _factor(self) -> tuple[ExprNode, int]:
        tok = self._current
        if tok.kind == TokenKind.NUMBER:
            self._eat(TokenKind.NUMBER)
            return NumberLiteral(value=tok.value), 1
        if tok.kind == TokenKind.IDENTIFIER:
            self._eat(TokenKind.IDENTIFIER)
            return VariableRef(name=tok.value), 1
        if tok.kind == TokenKind.LPAREN:
            self._paren_depth += 1
            self._check_depth(self._paren_depth, tok)
            self._eat(TokenKind.LPAREN)
            result = self._expr()
            self._eat(TokenKind.RPAREN)
            self._paren_depth -= 1
            return result
        raise ExpectedFactorError(tok)


class RecursiveDescentParser:
    """Parser linii: tokeny → pojedyncze AST."""

    def __init__(self, max_depth: int = DEFAULT_MAX_DEPTH) -> None:
        self._max_depth = max_depth

    # -- Parser protocol ---------------------------------------------------

    def parse(self, tokens: Sequence[Token]) -> ASTNode:
        return _Parser(tokens, self._max_depth).parse()
