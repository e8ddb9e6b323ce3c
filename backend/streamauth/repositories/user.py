"""User repository: persistence and credential lookup."""

from __future__ import annotations

from typing import cast

from sqlalchemy import select

from streamauth.models.user import User, normalize_email
from streamauth.repositories.base import BaseRepository


class UserRepository(BaseRepository[User]):
    """Persistence-only repository for :class:`User`.

    Also implements the ``CredentialRepository`` port consumed by the
    authentication gateway. It never issues or inspects tokens.
    """

    model = User

    def get_by_email(self, email: str) -> User | None:
        """Fetch a user by email (case-insensitive).

        :param email: Email address to normalise and search.
        :type email: str
        :returns: User instance or ``None`` when not found.
        :rtype: User | None
        """
        stmt = select(User).where(User.email == normalize_email(email))
        return cast(User | None, self.session.execute(stmt).scalars().first())

    def exists_by_email(self, email: str) -> bool:
        """Return ``True`` when a user with the provided email exists."""
        stmt = select(User.id).where(User.email == normalize_email(email))
        return bool(self.session.execute(stmt).first())

    def find_credentials(self, email: str) -> User | None:
        return self.get_by_email(email)
