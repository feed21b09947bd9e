"""Latest-value-wins debounce for the search query.

The sidebar runtime is single-threaded and polls, so the debouncer takes the
current monotonic time on every call instead of owning a timer thread.
"""

from __future__ import annotations

import time
from collections.abc import Callable
from dataclasses import dataclass

DEFAULT_DEBOUNCE_SECONDS = 0.2


@dataclass(frozen=True)
class PendingCommit:
    """One scheduled query commit."""

    request_id: int
    value: str
    due: float


class QueryDebouncer:
    """Coalesce raw query edits into committed values after a quiet window."""

    def __init__(
        self,
        delay: float = DEFAULT_DEBOUNCE_SECONDS,
        monotonic: Callable[[], float] = time.monotonic,
    ) -> None:
        self.delay = max(0.0, float(delay))
        self._monotonic = monotonic
        self._pending: PendingCommit | None = None
        self._next_request_id = 1
        self.committed = ""

    @property
    def pending(self) -> PendingCommit | None:
        return self._pending

    def push(self, raw: str, now: float | None = None) -> int:
        """Schedule ``raw`` for commit, cancelling any earlier pending value."""
        current = self._monotonic() if now is None else now
        request_id = self._next_request_id
        self._next_request_id += 1
        self._pending = PendingCommit(request_id=request_id, value=raw, due=current + self.delay)
        return request_id

    def poll(self, now: float | None = None) -> str | None:
        """Commit and return the pending value once its quiet window elapsed."""
        pending = self._pending
        if pending is None:
            return None
        current = self._monotonic() if now is None else now
        if current < pending.due:
            return None
        self._pending = None
        self.committed = pending.value
        return pending.value

    def flush(self) -> str | None:
        """Commit the pending value immediately, if any."""
        pending = self._pending
        if pending is None:
            return None
        self._pending = None
        self.committed = pending.value
        return pending.value

    def cancel(self) -> None:
        self._pending = None

    def seconds_until_due(self, now: float | None = None) -> float | None:
        """Return the wait before the pending commit fires, for loop timeouts."""
        if self._pending is None:
            return None
        current = self._monotonic() if now is None else now
        return max(0.0, self._pending.due - current)
