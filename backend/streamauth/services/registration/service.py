"""
SignupService
=============

Create local accounts whose credentials the authentication gateway later
checks. Password composition is enforced here, before anything is hashed or
persisted.
"""

from __future__ import annotations

from sqlalchemy.exc import IntegrityError
from sqlalchemy.orm import Session

from streamauth.models.user import User
from streamauth.repositories.user import UserRepository
from streamauth.services._shared.base import BaseService
from streamauth.services._shared.errors import ConflictError
from streamauth.services.credentials import CredentialVerifier
from streamauth.services.registration.dto import SignupIn


class SignupService(BaseService):
    """Application service for creating local ``User`` accounts."""

    def __init__(
        self,
        *,
        session: Session | None = None,
        verifier: CredentialVerifier | None = None,
    ) -> None:
        super().__init__()
        self.users = UserRepository(session=session)
        self.verifier = verifier or CredentialVerifier()

    def signup(self, dto: SignupIn) -> User:
        """
        Register a new local user.

        :param dto: Signup input.
        :returns: The persisted user.
        :raises PasswordPolicyViolation: Password fails the composition rule.
        :raises ConflictError: Email already registered.
        """
        self.verifier.ensure_policy(dto.password)

        if self.users.exists_by_email(dto.email):
            raise ConflictError("User", "email already in use")

        session = self.users.session
        try:
            user = User(email=dto.email, nickname=dto.nickname)
            user.password_hash = self.verifier.hash(dto.password)
            self.users.add(user)
            session.commit()
        except IntegrityError as exc:
            # lost a race with a concurrent signup for the same email
            session.rollback()
            raise ConflictError("User", "email already in use") from exc
        self.log.info("auth.signup", extra={"subject": user.subject})
        return user
