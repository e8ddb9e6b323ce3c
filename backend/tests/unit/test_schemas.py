"""Unit tests for request schemas and the shared email rule."""

from __future__ import annotations

import pytest
from marshmallow import ValidationError

from streamauth.models.user import User, email_is_plausible
from streamauth.schemas import SignupSchema


@pytest.mark.parametrize(
    ("email", "expected"),
    [
        ("ana@example.com", True),
        ("  Ana@Sub.Example.org ", True),
        ("user@localhost", False),
        ("user@.com", False),
        ("@example.com", False),
        ("example.com", False),
        ("", False),
    ],
)
def test_email_is_plausible(email, expected):
    assert email_is_plausible(email) is expected


def test_signup_schema_rejects_dotless_domain():
    with pytest.raises(ValidationError) as excinfo:
        SignupSchema().load({"email": "user@localhost", "password": "abc123!@"})
    assert "email" in excinfo.value.messages


def test_signup_schema_accepts_regular_address():
    data = SignupSchema().load({"email": "ana@example.com", "password": "abc123!@"})
    assert data == {"email": "ana@example.com", "password": "abc123!@", "nickname": None}


def test_schema_and_model_agree_on_rejected_addresses(app):
    with pytest.raises(ValueError):
        User(email="user@localhost", password_hash="x")
    assert User(email=" Ana@Example.com", password_hash="x").email == "ana@example.com"
