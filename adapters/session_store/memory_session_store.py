"""
Adapter: InMemorySessionStore
Implementuje port SessionStore - sesje w pamięci procesu, bez persystencji.

Limit max_sessions: po przekroczeniu usuwana jest sesja najdawniej używana.
Dostęp wyłącznie z wątku pętli zdarzeń, więc bez blokad.
"""
from __future__ import annotations

import logging
from collections import OrderedDict

from interpreter import InterpreterSession

logger = logging.getLogger("rachmistrz.sessions")


class InMemorySessionStore:
    def __init__(self, max_sessions: int = 1024) -> None:
        if max_sessions < 1:
            raise ValueError("max_sessions must be >= 1")
        self._max_sessions = max_sessions
        self._sessions: OrderedDict[str, InterpreterSession] = OrderedDict()

    # -- SessionStore protocol ---------------------------------------------

    def create(self) -> InterpreterSession:
        session = InterpreterSession()
        self._sessions[session.session_id] = session
        logger.info("Session created: %s", session.session_id)
        while len(self._sessions) > self._max_sessions:
            evicted_id, _ = self._sessions.popitem(last=False)
            logger.info("Session evicted: %s", evicted_id)
        return session

    def get(self, session_id: str) -> InterpreterSession:
        if session_id not in self._sessions:
            raise KeyError(f"Unknown session: {session_id}")
        self._sessions.move_to_end(session_id)
        return self._sessions[session_id]

    def delete(self, session_id: str) -> None:
        if session_id not in self._sessions:
            raise KeyError(f"Unknown session: {session_id}")
        del self._sessions[session_id]
        logger.info("Session deleted: %s", session_id)

    def __len__(self) -> int:
        return len(self._sessions)
