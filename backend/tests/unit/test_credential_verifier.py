"""Unit tests for password policy and hash comparison."""

from __future__ import annotations

import pytest

from streamauth.services._shared.errors import PasswordPolicyViolation
from streamauth.services.credentials import CredentialVerifier


@pytest.mark.parametrize(
    ("password", "expected"),
    [
        ("abc123!@", True),
        ("Passw0rd#", True),
        ("a1$aaaaaaaaaaaaa", True),  # 16 chars, upper bound
        ("abc12345", False),  # no symbol
        ("abcdefg!", False),  # no digit
        ("1234567!", False),  # no letter
        ("short1!", False),  # 7 chars
        ("a1$aaaaaaaaaaaaaa", False),  # 17 chars
        ("abc123!^", False),  # symbol outside the allowed set
        ("abc 123!", False),  # whitespace
        ("", False),
    ],
)
def test_check_policy(verifier, password, expected):
    assert verifier.check_policy(password) is expected


def test_check_policy_rejects_non_strings(verifier):
    assert verifier.check_policy(None) is False  # type: ignore[arg-type]


def test_ensure_policy_raises_on_violation(verifier):
    with pytest.raises(PasswordPolicyViolation):
        verifier.ensure_policy("abc12345")
    verifier.ensure_policy("abc123!@")


def test_hash_is_salted_and_verifiable(verifier):
    first = verifier.hash("abc123!@")
    second = verifier.hash("abc123!@")

    assert first != second
    assert "abc123!@" not in first
    assert verifier.matches("abc123!@", first)
    assert verifier.matches("abc123!@", second)
    assert not verifier.matches("abc123!#", first)


def test_matches_is_false_without_a_hash(verifier):
    assert verifier.matches("abc123!@", "") is False


def test_hash_rejects_empty_password(verifier):
    with pytest.raises(ValueError):
        verifier.hash("")


def test_default_method_is_scrypt():
    hashed = CredentialVerifier().hash("abc123!@")
    assert hashed.startswith("scrypt:")
