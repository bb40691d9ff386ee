"""
Port: SessionStore
Odpowiedzialność: przechowywanie sesji interpretera (każda z własnym środowiskiem).
"""
from typing import Protocol, runtime_checkable

from interpreter import InterpreterSession


@runtime_checkable
class SessionStore(Protocol):
    def create(self) -> InterpreterSession:
        """
        Creates a new session with an empty environment and stores it.
        """
        ...

    def get(self, session_id: str) -> InterpreterSession:
        """
        Returns the session. Raises KeyError for an unknown session_id.
        """
        ...

    def delete(self, session_id: str) -> None:
        """
        Drops the session and its environment. Raises KeyError if unknown.
        """
        ...

    def __len__(self) -> int:
        ...
