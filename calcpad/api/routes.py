from __future__ import annotations

from uuid import UUID

from fastapi import APIRouter, Depends, HTTPException, Response, WebSocket, WebSocketDisconnect, status

from calcpad.api.deps import get_session_store
from calcpad.api.models import KeyPressRequest, SessionListResponse, SessionResponse, Token
from calcpad.keymap import token_for_key
from calcpad.session import CalculatorSession
from calcpad.session_store import SessionStore
from calcpad.websocket_hub import hub

router = APIRouter()


def _session_response(session: CalculatorSession) -> SessionResponse:
    return SessionResponse(session_id=session.session_id, state=session.state, display=session.display)


def _require_session(store: SessionStore, session_id: UUID) -> CalculatorSession:
    try:
        return store.require(session_id)
    except ValueError as e:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=str(e)) from e


@router.websocket("/ws/sessions/{session_id}")
async def session_updates_ws(websocket: WebSocket, session_id: UUID) -> None:
    sid = str(session_id)
    await hub.connect(sid, websocket)

    try:
        # Keep the socket open; client can optionally send pings.
        while True:
            await websocket.receive_text()
    except WebSocketDisconnect:
        await hub.disconnect(sid, websocket)
    except Exception:
        await hub.disconnect(sid, websocket)
        raise


@router.get("/healthcheck")
async def healthcheck() -> dict[str, str]:
    return {"status": "ok"}


@router.post("/sessions", response_model=SessionResponse, status_code=status.HTTP_201_CREATED)
async def create_session_route(store: SessionStore = Depends(get_session_store)) -> SessionResponse:
    return _session_response(store.create())


@router.get("/sessions", response_model=SessionListResponse)
async def list_sessions_route(store: SessionStore = Depends(get_session_store)) -> SessionListResponse:
    return SessionListResponse(session_ids=store.list_ids())


@router.get("/sessions/{session_id}", response_model=SessionResponse)
async def get_session_route(session_id: UUID, store: SessionStore = Depends(get_session_store)) -> SessionResponse:
    return _session_response(_require_session(store, session_id))


@router.delete("/sessions/{session_id}", status_code=status.HTTP_204_NO_CONTENT)
async def delete_session_route(session_id: UUID, store: SessionStore = Depends(get_session_store)) -> Response:
    try:
        store.delete(session_id)
    except ValueError as e:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=str(e)) from e
    return Response(status_code=status.HTTP_204_NO_CONTENT)


@router.post("/sessions/{session_id}/tokens", response_model=SessionResponse)
async def send_token_route(
    session_id: UUID,
    token: Token,
    store: SessionStore = Depends(get_session_store),
) -> SessionResponse:
    session = _require_session(store, session_id)
    display = session.send(token)

    await hub.publish_display(str(session_id), display)
    return _session_response(session)


@router.post("/sessions/{session_id}/keys", response_model=SessionResponse)
async def press_key_route(
    session_id: UUID,
    payload: KeyPressRequest,
    store: SessionStore = Depends(get_session_store),
) -> SessionResponse:
    session = _require_session(store, session_id)

    token = token_for_key(payload.key)
    if token is None:
        raise HTTPException(status_code=status.HTTP_422_UNPROCESSABLE_ENTITY, detail=f"Unmapped key: {payload.key}")

    display = session.send(token)

    await hub.publish_display(str(session_id), display)
    return _session_response(session)
