"""Authentication-related Marshmallow schemas."""

from __future__ import annotations

from marshmallow import Schema, ValidationError, fields, validate, validates

from streamauth.models.user import email_is_plausible


class SignupSchema(Schema):
    """Input payload for local account signup.

    Password composition is checked by the signup service so that policy
    failures surface as ``400 password_policy`` rather than ``422``.
    """

    email = fields.Email(required=True, validate=validate.Length(max=254))
    password = fields.String(required=True)
    nickname = fields.String(load_default=None, validate=validate.Length(min=1, max=50))

    @validates("email")
    def _email_has_domain(self, value: str, **kwargs) -> None:
        # fields.Email accepts dotless hosts such as "user@localhost"
        if not email_is_plausible(value):
            raise ValidationError("Email must include a domain such as example.com.")


class LoginSchema(Schema):
    """Input payload for authenticating a user."""

    email = fields.Email(required=True, validate=validate.Length(max=254))
    password = fields.String(required=True, validate=validate.Length(min=1, max=128))


class TokenResponseSchema(Schema):
    """Response payload containing an access token."""

    access_token = fields.String(required=True, attribute="token")
    token_type = fields.Constant("Bearer")
    expires_in = fields.Integer(required=True)


class PrincipalSchema(Schema):
    """Identity resolved from a verified token."""

    subject = fields.String(required=True)
    origin = fields.String(required=True)
    email = fields.Email(allow_none=True)
