from __future__ import annotations

from dataclasses import dataclass
from typing import Protocol


class CredentialRecord(Protocol):
    """Read-only view of a local account as the login path needs it."""

    @property
    def subject(self) -> str: ...

    @property
    def password_hash(self) -> str: ...


class CredentialRepository(Protocol):
    """Port to the user store: look up credential records by email."""

    def find_credentials(self, email: str) -> CredentialRecord | None: ...


@dataclass(frozen=True, slots=True)
class StaticCredential:
    """Plain credential record, used by :class:`InMemoryCredentialRepository`."""

    subject: str
    password_hash: str


class InMemoryCredentialRepository(CredentialRepository):
    """Dictionary-backed credential lookup for unit tests."""

    def __init__(self) -> None:
        self._by_email: dict[str, StaticCredential] = {}

    def add(self, email: str, *, subject: str, password_hash: str) -> StaticCredential:
        record = StaticCredential(subject=subject, password_hash=password_hash)
        self._by_email[email.strip().lower()] = record
        return record

    def find_credentials(self, email: str) -> CredentialRecord | None:
        return self._by_email.get(email.strip().lower())
