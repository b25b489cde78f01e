"""Shared test doubles and input helpers."""
from __future__ import annotations

from collections.abc import Callable

from calcpad.accumulator import apply_token, initial_state
from calcpad.keymap import token_for_key
from calcpad.models import AccumulatorState


class FakeHandle:
    def __init__(self, delay_s: float, callback: Callable[[], None]) -> None:
        self.delay_s = delay_s
        self.callback = callback
        self.cancelled = False

    def cancel(self) -> None:
        self.cancelled = True


class FakeScheduler:
    """Records scheduled callbacks instead of running them; tests fire them by hand."""

    def __init__(self) -> None:
        self.handles: list[FakeHandle] = []

    def __call__(self, delay_s: float, callback: Callable[[], None]) -> FakeHandle:
        handle = FakeHandle(delay_s, callback)
        self.handles.append(handle)
        return handle

    @property
    def live(self) -> list[FakeHandle]:
        return [h for h in self.handles if not h.cancelled]

    def fire_live(self) -> None:
        for handle in self.live:
            handle.callback()


def press(*keys: str, state: AccumulatorState | None = None) -> AccumulatorState:
    """Feed key names through the keymap into the accumulator."""

    if state is None:
        state = initial_state()
    for key in keys:
        token = token_for_key(key)
        assert token is not None, f"unmapped key in test: {key}"
        state = apply_token(state, token)
    return state
