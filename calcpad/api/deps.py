from __future__ import annotations

from calcpad.session_store import SessionStore, get_store


def get_session_store() -> SessionStore:
    return get_store()
