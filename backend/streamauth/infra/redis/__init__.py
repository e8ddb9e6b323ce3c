from .redis_revocation_store import RedisRevocationStore

__all__ = ["RedisRevocationStore"]
