"""
Port: Parser
Odpowiedzialność: budowa AST z sekwencji tokenów.
"""
from typing import Protocol, Sequence, runtime_checkable

from contracts import ASTNode, Token


@runtime_checkable
class Parser(Protocol):
    def parse(self, tokens: Sequence[Token]) -> ASTNode:
        """
        Builds one AST rooted at an Assignment or an expression node.
        The stream must end with END_OF_INPUT and must be fully consumed.
        Raises ParseError (UnexpectedToken, ExpectedFactor, TrailingTokens)
        on any grammar violation.
        """
        ...
