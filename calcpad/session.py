from __future__ import annotations

import logging
from collections.abc import Callable
from uuid import UUID, uuid4

from calcpad.accumulator import apply_token, clear, initial_state, project
from calcpad.models import AccumulatorState, Display, Token
from calcpad.config import DEFAULT_ERROR_RESET_MS
from calcpad.timer import ErrorResetTimer, Scheduler

logger = logging.getLogger(__name__)


class CalculatorSession:
    """A single owned accumulator plus its error auto-clear timer.

    Callers must serialize `send`; within the API every call runs on the one event loop.
    `on_change` is invoked when the state changes without a token (the auto-clear).
    """

    def __init__(
        self,
        *,
        session_id: UUID | None = None,
        error_reset_s: float = DEFAULT_ERROR_RESET_MS / 1000,
        scheduler: Scheduler | None = None,
        on_change: Callable[[CalculatorSession], None] | None = None,
    ) -> None:
        self.session_id = session_id or uuid4()
        self.state: AccumulatorState = initial_state()
        self._on_change = on_change
        self._timer = ErrorResetTimer(delay_s=error_reset_s, callback=self._auto_clear, scheduler=scheduler)

    @property
    def display(self) -> Display:
        return project(self.state)

    @property
    def reset_pending(self) -> bool:
        return self._timer.pending

    def send(self, token: Token) -> Display:
        # A stale auto-clear must never fire after unrelated input.
        self._timer.cancel()
        self.state = apply_token(self.state, token)

        if self.state.error is not None:
            logger.info("session %s entered error: %s", self.session_id, self.state.error.message)
            self._timer.schedule()

        return self.display

    def close(self) -> None:
        self._timer.cancel()

    def _auto_clear(self) -> None:
        logger.debug("session %s auto-clearing after error", self.session_id)
        self.state = clear(self.state)
        if self._on_change is not None:
            self._on_change(self)
