"""Convenience exports for application schemas."""

from __future__ import annotations

from .auth import LoginSchema, PrincipalSchema, SignupSchema, TokenResponseSchema
from .user import UserSchema

__all__ = [
    "LoginSchema",
    "PrincipalSchema",
    "SignupSchema",
    "TokenResponseSchema",
    "UserSchema",
]
