"""
Router: POST /evaluate

Liczy jedną linię w sesji wskazanej przez session_id (albo w nowej sesji).
Błędy interpretera są częścią odpowiedzi 200 (ok=false, error=...);
HTTP-owe kody tylko dla błędów hosta (404 nieznana sesja, 413 za długa linia).
"""
from __future__ import annotations

from fastapi import APIRouter, Depends, HTTPException

from adapters.presenter.messages import render_outcome
from api.dependencies import get_session_store, get_settings
from api.schemas import EvaluateRequest, EvaluateResponse
from config import Settings
from ports.session_store import SessionStore

router = APIRouter(prefix="/evaluate", tags=["evaluate"])


@router.post("", response_model=EvaluateResponse)
async def evaluate(
    body: EvaluateRequest,
    store: SessionStore = Depends(get_session_store),
    settings: Settings = Depends(get_settings),
) -> EvaluateResponse:
    if len(body.text) > settings.max_input_length:
        raise HTTPException(
            status_code=413,
            detail=f"Linia za długa: {len(body.text)} > {settings.max_input_length} znaków",
        )

    # KeyError dla nieznanej sesji → 404 (globalny handler w api.main)
    session = store.get(body.session_id) if body.session_id else store.create()
    outcome = session.evaluate(body.text)

    return EvaluateResponse(
        session_id=session.session_id,
        text=outcome.text,
        ok=outcome.ok,
        value=outcome.value,
        assigned=outcome.assigned,
        display=render_outcome(outcome),
        steps=outcome.steps,
        error=outcome.error,
    )
