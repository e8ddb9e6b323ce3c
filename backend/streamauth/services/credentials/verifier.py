"""Password strength policy and salted hash comparison."""

from __future__ import annotations

import re
from dataclasses import dataclass
from typing import Final

from werkzeug.security import check_password_hash, generate_password_hash

from streamauth.services._shared.errors import PasswordPolicyViolation

ALLOWED_SYMBOLS: Final[str] = "@$!%*#?&"

# 8-16 chars drawn only from letters, digits and ALLOWED_SYMBOLS, with at
# least one of each class.
_POLICY_RE: Final[re.Pattern[str]] = re.compile(
    r"^(?=.*[A-Za-z])(?=.*\d)(?=.*[@$!%*#?&])[A-Za-z\d@$!%*#?&]{8,16}$"
)


@dataclass(frozen=True, slots=True)
class CredentialVerifier:
    """
    Validate password composition at signup and compare passwords to hashes.

    :param method: werkzeug hashing method (``"scrypt"`` by default; any
        salted, deliberately slow KDF werkzeug supports is acceptable).
    :param salt_length: Salt length passed to werkzeug.
    """

    method: str = "scrypt"
    salt_length: int = 16

    def check_policy(self, password: str) -> bool:
        """Return ``True`` iff ``password`` satisfies the composition rule."""
        if not isinstance(password, str):
            return False
        return _POLICY_RE.fullmatch(password) is not None

    def ensure_policy(self, password: str) -> None:
        """
        Raise when ``password`` fails :meth:`check_policy`.

        :raises PasswordPolicyViolation: On any composition failure.
        """
        if not self.check_policy(password):
            raise PasswordPolicyViolation()

    def hash(self, password: str) -> str:
        """Return a salted one-way hash that embeds method and salt."""
        if not isinstance(password, str) or not password:
            raise ValueError("Password must be a non-empty string.")
        return generate_password_hash(password, method=self.method, salt_length=self.salt_length)

    def matches(self, password: str, password_hash: str) -> bool:
        """Return ``True`` iff ``password`` hashes to ``password_hash`` under its own salt."""
        if not password_hash or not isinstance(password, str):
            return False
        return bool(check_password_hash(password_hash, password))
