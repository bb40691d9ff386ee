"""
Router: POST /sessions, GET /sessions/{id}/variables, DELETE /sessions/{id}
Zarządzanie sesjami interpretera (każda ma własne środowisko zmiennych).
"""
from fastapi import APIRouter, Depends, Response

from api.dependencies import get_session_store
from api.schemas import SessionResponse, VariablesResponse

router = APIRouter(prefix="/sessions", tags=["sessions"])


@router.post("", response_model=SessionResponse, status_code=201)
async def create_session(store=Depends(get_session_store)) -> SessionResponse:
    session = store.create()
    return SessionResponse(session_id=session.session_id)


@router.get("/{session_id}/variables", response_model=VariablesResponse)
async def list_variables(session_id: str, store=Depends(get_session_store)) -> VariablesResponse:
    session = store.get(session_id)
    return VariablesResponse(session_id=session_id, variables=session.variables())


@router.delete("/{session_id}", status_code=204)
async def delete_session(session_id: str, store=Depends(get_session_store)) -> Response:
    store.delete(session_id)
    return Response(status_code=204)
