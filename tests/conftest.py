from __future__ import annotations

from collections.abc import Generator

import pytest
from fastapi.testclient import TestClient

from helpers import FakeScheduler


@pytest.fixture(autouse=True)
def _reset_session_store() -> Generator[None, None, None]:
    """Keep the process-wide session store from leaking between tests."""

    from calcpad.session_store import reset_store_for_tests

    reset_store_for_tests()
    yield
    reset_store_for_tests()


@pytest.fixture()
def scheduler() -> FakeScheduler:
    return FakeScheduler()


@pytest.fixture()
def store(scheduler: FakeScheduler):
    from calcpad.config import Settings
    from calcpad.session_store import SessionStore

    return SessionStore(settings=Settings(), scheduler=scheduler)


@pytest.fixture()
def client(store) -> Generator[TestClient, None, None]:
    """TestClient wired to a store whose timers never fire on their own."""

    from calcpad.api.deps import get_session_store
    from calcpad.main import app

    app.dependency_overrides[get_session_store] = lambda: store
    with TestClient(app) as c:
        yield c
    app.dependency_overrides.clear()
