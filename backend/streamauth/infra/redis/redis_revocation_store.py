from datetime import UTC, datetime
from typing import cast

import redis  # type: ignore[import-untyped]


class RedisRevocationStore:
    """
    Denylist for **access tokens** by jti, shared by every worker that points
    at the same Redis.

    Each entry stores the token's expiry as a UNIX timestamp and carries a
    matching key TTL, so Redis drops it exactly when the token would be
    rejected as expired anyway.
    """

    def __init__(self, r: redis.Redis, *, prefix: str = "deny:at:"):
        self.r = r
        self.prefix = prefix

    def _k(self, jti: str) -> str:
        return f"{self.prefix}{jti}"

    def revoke(self, jti: str, expires_at: datetime) -> bool:
        now = datetime.now(UTC).timestamp()
        ttl = max(1, int(expires_at.timestamp() - now))
        # SET NX keeps the first revocation and reports duplicates atomically
        created = self.r.set(self._k(jti), str(int(expires_at.timestamp())), ex=ttl, nx=True)
        return bool(created)

    def is_revoked(self, jti: str, now: datetime | None = None) -> bool:
        raw = cast(bytes | str | None, self.r.get(self._k(jti)))
        if raw is None:
            return False
        at = (now or datetime.now(UTC)).timestamp()
        return at < float(raw)

    def sweep(self, now: datetime | None = None) -> int:
        # Redis key expiry already evicts entries.
        return 0

    def __len__(self) -> int:
        return sum(1 for _ in self.r.scan_iter(match=f"{self.prefix}*"))
