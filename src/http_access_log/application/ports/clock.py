from __future__ import annotations

import time
from datetime import datetime, timedelta, timezone
from typing import Callable, Protocol


class Clock(Protocol):
    def now(self) -> datetime: ...


class SystemClock:
    """Default wall-clock implementation."""

    def now(self) -> datetime:
        return datetime.now(timezone.utc)


class AnchoredClock:
    """Synthetic clock pinned to ``base`` that advances with real elapsed time.

    The first call returns ``base`` exactly. Every later call returns ``base``
    plus the monotonic time elapsed since that first call, so timestamps are
    reproducible while durations still reflect how long the work really took.
    """

    def __init__(
        self,
        base: datetime,
        monotonic: Callable[[], float] = time.monotonic,
    ) -> None:
        self._base = base
        self._monotonic = monotonic
        self._anchor: float | None = None

    def now(self) -> datetime:
        reading = self._monotonic()
        if self._anchor is None:
            self._anchor = reading
            return self._base
        return self._base + timedelta(seconds=reading - self._anchor)
