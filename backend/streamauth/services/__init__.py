"""Service layer public API.

This package exposes the essential building blocks for the service layer so
that callers can import from :mod:`streamauth.services` without knowing the
internal structure.

Re-exports
----------
- Base primitives (from ``streamauth.services._shared.base``)
    * :class:`BaseService`
    * :class:`ServiceContext`

- Token DTOs (from ``streamauth.services._shared.dto``)
    * :class:`AuthOrigin`, :class:`IssuedToken`, :class:`DecodedToken`

- Authentication gateway (from ``streamauth.services.auth``)
    * :class:`AuthenticationGateway`, :class:`RevocationSweeper`
    * Principals: :class:`Principal`, :class:`LocalPrincipal`,
      :class:`DelegatedPrincipal`

- Credentials (from ``streamauth.services.credentials``)
    * :class:`CredentialVerifier`
"""

from __future__ import annotations

from ._shared.base import BaseService, ServiceContext
from ._shared.dto import AuthOrigin, DecodedToken, IssuedToken
from .auth import (
    AuthenticationGateway,
    DelegatedPrincipal,
    LocalPrincipal,
    Principal,
    RevocationSweeper,
)
from .credentials import CredentialVerifier

__all__ = [
    # Base
    "BaseService",
    "ServiceContext",
    # Token DTOs
    "AuthOrigin",
    "DecodedToken",
    "IssuedToken",
    # Auth
    "AuthenticationGateway",
    "RevocationSweeper",
    "Principal",
    "LocalPrincipal",
    "DelegatedPrincipal",
    # Credentials
    "CredentialVerifier",
]
