"""Password policy and hashing."""

from .verifier import ALLOWED_SYMBOLS, CredentialVerifier

__all__ = ["ALLOWED_SYMBOLS", "CredentialVerifier"]
