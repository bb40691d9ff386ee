"""
Adapter: ScanningLexer
Implementuje port Lexer - jeden przebieg od lewej do prawej, jeden kursor,
bez cofania się.

Reguły:
  białe znaki       - pomijane (str.isspace)
  IDENTIFIER        - [A-Za-z_][A-Za-z0-9_]*
  NUMBER            - cyfra, potem [0-9.]*; więcej niż jedna kropka = błąd
  + - * / ( ) = ;   - tokeny jednoznakowe
  cokolwiek innego  - UnrecognizedCharacterError
Na końcu zawsze dokładnie jeden END_OF_INPUT.
"""
from __future__ import annotations

import re
from typing import Iterator

from contracts import Token, TokenKind
from errors import MalformedNumberError, UnrecognizedCharacterError

_IDENT_RE = re.compile(r"[A-Za-z_][A-Za-z0-9_]*")
_NUMBER_RE = re.compile(r"[0-9][0-9.]*")

_SINGLE_CHAR_TOKENS: dict[str, TokenKind] = {
    "+": TokenKind.PLUS,
    "-": TokenKind.MINUS,
    "*": TokenKind.STAR,
    "/": TokenKind.SLASH,
    "(": TokenKind.LPAREN,
    ")": TokenKind.RPAREN,
    "=": TokenKind.EQUALS,
    ";": TokenKind.SEMICOLON,
}


class ScanningLexer:
    """Skaner linii wejściowej do tokenów."""

    # -- Lexer protocol ----------------------------------------------------

    def tokenize(self, text: str) -> list[Token]:
        return list(self.iter_tokens(text))

    def iter_tokens(self, text: str) -> Iterator[Token]:
        pos = 0
        length = len(text)

        while pos < length:
            char = text[pos]

            if char.isspace():
                pos += 1
                continue

            m = _IDENT_RE.match(text, pos)
            if m:
                yield Token(kind=TokenKind.IDENTIFIER, value=m.group(), position=pos)
                pos = m.end()
                continue

            m = _NUMBER_RE.match(text, pos)
            if m:
                yield _number_token(m.group(), pos)
                pos = m.end()
                continue

            kind = _SINGLE_CHAR_TOKENS.get(char)
            if kind is not None:
                yield Token(kind=kind, value=char, position=pos)
                pos += 1
                continue

            raise UnrecognizedCharacterError(char, pos)

        yield Token(kind=TokenKind.END_OF_INPUT, value=None, position=length)


def _number_token(raw: str, pos: int) -> Token:
    if raw.count(".") > 1:
        raise MalformedNumberError(raw, pos)
    return Token(kind=TokenKind.NUMBER, value=float(raw), position=pos)
