"""User model backing local (email/password) accounts."""

from __future__ import annotations

from datetime import datetime

from sqlalchemy import DateTime, Integer, String, UniqueConstraint, func
from sqlalchemy.orm import Mapped, mapped_column, validates

from streamauth.core.extensions import db


def normalize_email(email: str) -> str:
    return email.strip().lower()


def email_is_plausible(email: str) -> bool:
    """Require ``local@domain.tld``; stricter than RFC 5322 on purpose."""
    if not email or not isinstance(email, str):
        return False
    local, sep, domain = normalize_email(email).rpartition("@")
    return bool(sep and local and "." in domain.strip("."))


class User(db.Model):
    """
    Local account as far as authentication needs it.

    Satisfies the ``CredentialRecord`` port: ``subject`` is the stringified
    primary key that ends up in the token ``sub`` claim. Hashing is owned by
    ``CredentialVerifier``; the model only stores the result.

    Fields
    ------
    email : str
        Login email. Stored normalized (lowercase, trimmed).
    password_hash : str
        Salted hash embedding its method and salt.
    nickname : str | None
        Optional display name.
    created_at : datetime
        Filled by the database on insert.
    """

    __tablename__ = "users"

    id: Mapped[int] = mapped_column(Integer, primary_key=True)
    email: Mapped[str] = mapped_column(String(254), nullable=False, index=True)
    password_hash: Mapped[str] = mapped_column(String(255), nullable=False)
    nickname: Mapped[str | None] = mapped_column(String(50), nullable=True)
    created_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True), nullable=False, server_default=func.now()
    )

    __table_args__ = (UniqueConstraint("email", name="uq_users_email"),)

    @property
    def subject(self) -> str:
        """Token subject for this account."""
        return str(self.id)

    def __repr__(self) -> str:
        return f"<User id={self.id}>"

    @validates("email")
    def _normalize_email(self, key: str, value: str) -> str:
        """
        Normalize and validate email.

        :raises ValueError: If email is missing or malformed. The signup
            schema applies the same rule, so API input never reaches this.
        """
        if not email_is_plausible(value):
            raise ValueError("Email format looks invalid.")
        return normalize_email(value)
