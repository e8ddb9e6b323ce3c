"""Authenticated principals produced by the two login paths.

Callers depend on the :class:`Principal` capability only; the concrete
variant tells where the identity was established, never how to reach a user
row.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Protocol, runtime_checkable

from streamauth.services._shared.dto import AuthOrigin, DecodedToken


@runtime_checkable
class Principal(Protocol):
    """Capability interface: a stable subject and the origin that vouched for it."""

    def subject(self) -> str: ...

    def origin(self) -> AuthOrigin: ...


@dataclass(frozen=True, slots=True)
class LocalPrincipal:
    """Identity proven by email/password against the local credential store."""

    subject_id: str

    def subject(self) -> str:
        return self.subject_id

    def origin(self) -> AuthOrigin:
        return AuthOrigin.LOCAL


@dataclass(frozen=True, slots=True)
class DelegatedPrincipal:
    """
    Identity established by an external OAuth2 identity provider.

    :param subject_id: Identifier the provider (or the user-provisioning
        collaborator) assigned to the user.
    :param provider: Registration name of the provider, e.g. ``"google"``.
    """

    subject_id: str
    provider: str | None = None

    def subject(self) -> str:
        return self.subject_id

    def origin(self) -> AuthOrigin:
        return AuthOrigin.DELEGATED


def principal_from_token(decoded: DecodedToken) -> Principal:
    """Rebuild the principal variant recorded in a verified token."""
    if decoded.origin is AuthOrigin.DELEGATED:
        return DelegatedPrincipal(subject_id=decoded.subject)
    return LocalPrincipal(subject_id=decoded.subject)
