"""
schemas.py - Request/Response modele FastAPI.
Oddzielone od contracts.py żeby API mogło ewoluować niezależnie.
"""
from __future__ import annotations

from typing import Optional

from pydantic import BaseModel, Field

from contracts import InterpreterErrorInfo


# ─────────────────────────── /evaluate ───────────────────────────

class EvaluateRequest(BaseModel):
    text: str  # limit długości sprawdza router (config.max_input_length → 413)
    session_id: Optional[str] = None  # brak = nowa sesja


class EvaluateResponse(BaseModel):
    session_id: str
    text: str
    ok: bool
    value: Optional[float] = None
    assigned: Optional[str] = None
    display: str                       # gotowy komunikat dla użytkownika
    steps: list[str] = Field(default_factory=list)
    error: Optional[InterpreterErrorInfo] = None


# ─────────────────────────── /sessions ───────────────────────────

class SessionResponse(BaseModel):
    session_id: str


class VariablesResponse(BaseModel):
    session_id: str
    variables: dict[str, float]


# ─────────────────────────── /health ─────────────────────────────

class HealthResponse(BaseModel):
    status: str
    version: str
    sessions: int
