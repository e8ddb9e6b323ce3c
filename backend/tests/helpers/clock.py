"""Deterministic time source for gateway and store tests."""

from __future__ import annotations

from datetime import datetime, timedelta


class FrozenClock:
    """Callable returning a fixed instant until advanced explicitly."""

    def __init__(self, start: datetime) -> None:
        self.now = start

    def __call__(self) -> datetime:
        return self.now

    def advance(self, **delta: float) -> datetime:
        """Move the clock forward by ``timedelta(**delta)`` and return it."""
        self.now += timedelta(**delta)
        return self.now
