"""
Domain-level exceptions used within the service layer.

These exceptions are **framework-agnostic** and never import Flask, HTTP, or
SQLAlchemy. They are stable contracts between the token codec, the
revocation store, the credential verifier and the authentication gateway.

Translation to HTTP responses (RFC 7807) happens in
``streamauth/core/errors.py``.
"""

from __future__ import annotations

from dataclasses import dataclass

# --------------------------------------------------------------------------- #
# Base types
# --------------------------------------------------------------------------- #


class ServiceError(Exception):
    """
    Base class for all service-level errors.

    Notes
    -----
    - These are *not* HTTP errors.
    - The API layer translates them to ``APIError`` at the request boundary.
    """

    pass


class AuthError(ServiceError):
    """Base class for token and credential outcomes that reject a request."""

    default_message = "Authentication failed"

    def __init__(self, message: str | None = None) -> None:
        super().__init__(message or self.default_message)


# --------------------------------------------------------------------------- #
# Token outcomes
# --------------------------------------------------------------------------- #


class MalformedToken(AuthError):
    """The token is structurally invalid or lacks required claims."""

    default_message = "Invalid token"


class InvalidSignature(MalformedToken):
    """The token was not signed with the current signing key."""

    default_message = "Invalid token signature"


class TokenExpired(AuthError):
    """The token is authentic but its expiry has passed."""

    default_message = "Token expired"


class TokenRevoked(AuthError):
    """The token is authentic and unexpired but was explicitly logged out."""

    default_message = "Token has been revoked"


class MissingOrMalformedHeader(AuthError):
    """The request carrier (header or cookie) is absent or not ``Bearer <token>``."""

    default_message = "Invalid token"


class AlreadyRevoked(AuthError):
    """Logout was requested for a token that is already revoked."""

    default_message = "Token already logged out"


class InvalidCredentials(AuthError):
    """Local login failed: unknown email or wrong password."""

    default_message = "Invalid credentials"


# --------------------------------------------------------------------------- #
# Other domain errors
# --------------------------------------------------------------------------- #


class PasswordPolicyViolation(ServiceError):
    """
    Raised at signup when a password does not satisfy the composition rule.
    """

    def __init__(
        self,
        message: str = (
            "Password must be 8-16 characters and contain a letter, "
            "a digit and one of @$!%*#?&"
        ),
    ) -> None:
        super().__init__(message)


class IdentityProviderError(ServiceError):
    """The external identity provider did not yield an authenticated principal."""


@dataclass(slots=True)
class NotFoundError(ServiceError):
    """
    Raised when an entity is not found in the repository.

    :param entity: Entity name (e.g., "User").
    :type entity: str
    :param key: Identifier or search key.
    :type key: str | int
    """

    entity: str
    key: str | int

    def __str__(self) -> str:  # pragma: no cover
        return f"{self.entity} not found: {self.key}"


@dataclass(slots=True)
class ConflictError(ServiceError):
    """
    Raised when a unique constraint or business rule conflict occurs.

    :param entity: Entity name (e.g., "User").
    :type entity: str
    :param detail: Short human-readable explanation.
    :type detail: str
    """

    entity: str
    detail: str

    def __str__(self) -> str:  # pragma: no cover
        return f"Conflict on {self.entity}: {self.detail}"
