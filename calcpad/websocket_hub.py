from __future__ import annotations

import asyncio
import logging
from collections import defaultdict

from fastapi import WebSocket

from calcpad.models import Display

logger = logging.getLogger(__name__)


class SessionWebSocketHub:
    """In-process WebSocket pub/sub keyed by session_id.

    Contract:
      - assign connection to a session via `connect(session_id, websocket)`.
      - broadcast lightweight events with `broadcast(session_id, payload)`.

    Payloads should be JSON-serializable dicts.
    """

    def __init__(self) -> None:
        self._by_session: dict[str, set[WebSocket]] = defaultdict(set)
        self._lock = asyncio.Lock()
        # Strong refs for fire-and-forget broadcasts scheduled from sync callbacks.
        self._tasks: set[asyncio.Task[None]] = set()

    async def connect(self, session_id: str, websocket: WebSocket) -> None:
        await websocket.accept()
        async with self._lock:
            self._by_session[session_id].add(websocket)

    async def disconnect(self, session_id: str, websocket: WebSocket) -> None:
        async with self._lock:
            conns = self._by_session.get(session_id)
            if not conns:
                return
            conns.discard(websocket)
            if not conns:
                self._by_session.pop(session_id, None)

    async def broadcast(self, session_id: str, payload: dict[str, object]) -> None:
        async with self._lock:
            conns = list(self._by_session.get(session_id, set()))

        if not conns:
            return

        dead: list[WebSocket] = []
        for ws in conns:
            try:
                await ws.send_json(payload)
            except Exception:
                logger.debug("dropping dead websocket for session %s", session_id)
                dead.append(ws)

        if dead:
            async with self._lock:
                for ws in dead:
                    self._by_session.get(session_id, set()).discard(ws)

    async def publish_display(self, session_id: str, display: Display) -> None:
        await self.broadcast(session_id, display_event(session_id=session_id, display=display))

    def publish_display_soon(self, session_id: str, display: Display) -> None:
        """Schedule a display broadcast from synchronous code running on the event loop."""

        task = asyncio.get_running_loop().create_task(self.publish_display(session_id, display))
        self._tasks.add(task)
        task.add_done_callback(self._tasks.discard)


def display_event(*, session_id: str, display: Display) -> dict[str, object]:
    return {"type": "display_updated", "session_id": session_id, "display": display.model_dump(mode="json")}


hub = SessionWebSocketHub()
