"""
Port: Lexer
Odpowiedzialność: zamiana surowej linii tekstu na sekwencję tokenów.
"""
from typing import Iterator, Protocol, runtime_checkable

from contracts import Token


@runtime_checkable
class Lexer(Protocol):
    def tokenize(self, text: str) -> list[Token]:
        """
        Scans text left to right and returns every token, eagerly.
        The last token is always END_OF_INPUT and appears exactly once.
        Raises LexError on an unrecognized character or a number
        with more than one decimal point.
        """
        ...

    def iter_tokens(self, text: str) -> Iterator[Token]:
        """
        Lazy variant of tokenize(): yields tokens as they are scanned.
        A LexError is raised when the offending character is reached,
        after all preceding tokens have been yielded.
        """
        ...
