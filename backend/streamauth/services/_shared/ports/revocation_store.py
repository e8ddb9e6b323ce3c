from __future__ import annotations

import threading
from collections.abc import Callable
from datetime import UTC, datetime
from typing import Protocol


class RevocationStore(Protocol):
    """
    Denylist of revoked token identifiers (JTIs), each kept only until the
    token's own expiry.

    ``revoke`` is idempotent; its return value tells the caller whether the
    entry was created by this call (``True``) or already existed (``False``).
    Entries whose expiry has passed read as absent whether or not a sweep has
    removed them yet.
    """

    def revoke(self, jti: str, expires_at: datetime) -> bool: ...
    def is_revoked(self, jti: str, now: datetime | None = None) -> bool: ...
    def sweep(self, now: datetime | None = None) -> int: ...
    def __len__(self) -> int: ...


class InMemoryRevocationStore(RevocationStore):
    """Process-local denylist guarded by a single mutex.

    State does not survive a restart: revocations still within their TTL are
    forgiven when the process comes back. Configure ``REDIS_URL`` to keep
    them.
    """

    def __init__(self, clock: Callable[[], datetime] | None = None) -> None:
        self._entries: dict[str, datetime] = {}
        self._lock = threading.Lock()
        self._clock = clock or (lambda: datetime.now(UTC))

    def revoke(self, jti: str, expires_at: datetime) -> bool:
        now = self._clock()
        with self._lock:
            self._evict(now)
            if jti in self._entries:
                return False
            self._entries[jti] = expires_at
            return True

    def is_revoked(self, jti: str, now: datetime | None = None) -> bool:
        at = now or self._clock()
        with self._lock:
            expires_at = self._entries.get(jti)
        return expires_at is not None and at < expires_at

    def sweep(self, now: datetime | None = None) -> int:
        with self._lock:
            return self._evict(now or self._clock())

    def _evict(self, now: datetime) -> int:
        # caller holds the lock
        expired = [jti for jti, exp in self._entries.items() if exp <= now]
        for jti in expired:
            del self._entries[jti]
        return len(expired)

    def __len__(self) -> int:
        with self._lock:
            return len(self._entries)
