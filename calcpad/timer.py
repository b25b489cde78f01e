from __future__ import annotations

import asyncio
from collections.abc import Callable
from typing import Protocol


class Cancellable(Protocol):
    def cancel(self) -> None: ...


Scheduler = Callable[[float, Callable[[], None]], Cancellable]


def loop_scheduler(delay_s: float, callback: Callable[[], None]) -> asyncio.TimerHandle:
    """Schedule on the running event loop; must be called from inside it."""

    return asyncio.get_running_loop().call_later(delay_s, callback)


class ErrorResetTimer:
    """One-shot, cancellable timer; at most one firing is outstanding.

    Contract:
      - `schedule()` supersedes any pending firing.
      - `cancel()` guarantees the callback does not run for anything scheduled before it,
        even if the underlying handle already fired into the loop's ready queue.
    """

    def __init__(
        self,
        *,
        delay_s: float,
        callback: Callable[[], None],
        scheduler: Scheduler | None = None,
    ) -> None:
        self.delay_s = delay_s
        self._callback = callback
        self._scheduler: Scheduler = scheduler or loop_scheduler
        self._handle: Cancellable | None = None
        self._generation = 0

    @property
    def pending(self) -> bool:
        return self._handle is not None

    def schedule(self) -> None:
        self.cancel()
        generation = self._generation
        self._handle = self._scheduler(self.delay_s, lambda: self._fire(generation))

    def cancel(self) -> None:
        self._generation += 1
        if self._handle is not None:
            self._handle.cancel()
            self._handle = None

    def _fire(self, generation: int) -> None:
        if generation != self._generation:
            return
        self._handle = None
        self._callback()
