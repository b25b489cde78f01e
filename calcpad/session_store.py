from __future__ import annotations

import logging
from collections.abc import Callable
from uuid import UUID

from calcpad.config import Settings
from calcpad.session import CalculatorSession
from calcpad.timer import Scheduler

logger = logging.getLogger(__name__)


class SessionStore:
    """In-process registry of calculator sessions.

    State is ephemeral by design of the calculator: nothing survives a restart.
    """

    def __init__(
        self,
        *,
        settings: Settings,
        scheduler: Scheduler | None = None,
        on_change: Callable[[CalculatorSession], None] | None = None,
    ) -> None:
        self.settings = settings
        self._scheduler = scheduler
        self._on_change = on_change
        self._sessions: dict[UUID, CalculatorSession] = {}

    def __len__(self) -> int:
        return len(self._sessions)

    def create(self) -> CalculatorSession:
        session = CalculatorSession(
            error_reset_s=self.settings.error_reset_s,
            scheduler=self._scheduler,
            on_change=self._on_change,
        )
        self._sessions[session.session_id] = session
        logger.info("created session %s", session.session_id)
        return session

    def get(self, session_id: UUID) -> CalculatorSession | None:
        return self._sessions.get(session_id)

    def require(self, session_id: UUID) -> CalculatorSession:
        session = self.get(session_id)
        if session is None:
            raise ValueError("Session not found")
        return session

    def list_ids(self) -> list[UUID]:
        return list(self._sessions)

    def delete(self, session_id: UUID) -> None:
        session = self._sessions.pop(session_id, None)
        if session is None:
            raise ValueError("Session not found")
        session.close()
        logger.info("deleted session %s", session_id)

    def close_all(self) -> None:
        for session in self._sessions.values():
            session.close()
        self._sessions.clear()


_STORE: SessionStore | None = None


def init_store(*, settings: Settings, on_change: Callable[[CalculatorSession], None] | None = None) -> SessionStore:
    """Create the process-wide store once.

    Safe to call multiple times; subsequent calls return the already created instance.
    """

    global _STORE
    if _STORE is None:
        _STORE = SessionStore(settings=settings, on_change=on_change)
    return _STORE


def reset_store_for_tests() -> None:
    global _STORE
    if _STORE is not None:
        _STORE.close_all()
    _STORE = None


def get_store() -> SessionStore:
    if _STORE is None:
        raise RuntimeError("Session store not initialized. Call init_store() at startup.")
    return _STORE
