"""
streamauth.services._shared.ports
=================================

Collection of *ports* (hexagonal interfaces) that define the contracts
between the authentication gateway and its infrastructure.

Modules
-------
- :mod:`token_codec`:
    :class:`~.TokenCodec`, abstraction for signing and parsing bearer tokens,
    plus :class:`~.StubTokenCodec` for unit tests.

- :mod:`revocation_store`:
    :class:`~.RevocationStore`, TTL-bounded denylist keyed by token JTI, and
    the mutex-guarded :class:`~.InMemoryRevocationStore`.

- :mod:`credential_store`:
    :class:`~.CredentialRepository`, read-only lookup of local credentials.

- :mod:`identity_provider`:
    :class:`~.IdentityProvider`, outcome of an external OAuth2 handshake.

Concrete adapters backed by flask-jwt-extended, Redis or SQLAlchemy live
under ``streamauth.infra`` and ``streamauth.repositories``.
"""

from __future__ import annotations

from .credential_store import (
    CredentialRecord,
    CredentialRepository,
    InMemoryCredentialRepository,
    StaticCredential,
)
from .identity_provider import IdentityProvider
from .revocation_store import InMemoryRevocationStore, RevocationStore
from .token_codec import StubTokenCodec, TokenCodec, utcnow

__all__ = [
    "CredentialRecord",
    "CredentialRepository",
    "IdentityProvider",
    "InMemoryCredentialRepository",
    "InMemoryRevocationStore",
    "RevocationStore",
    "StaticCredential",
    "StubTokenCodec",
    "TokenCodec",
    "utcnow",
]
