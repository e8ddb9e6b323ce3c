"""User resource schemas."""

from __future__ import annotations

from marshmallow import Schema, fields


class UserSchema(Schema):
    """Public representation of a user entity."""

    id = fields.Integer(required=True)
    email = fields.Email(required=True)
    nickname = fields.String(allow_none=True)
    created_at = fields.DateTime(required=True)
